"""
URL configuration for the storefront backend.

The API routes are mounted at the site root; the Django admin lives under /admin/.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("storefront.urls")),
]
