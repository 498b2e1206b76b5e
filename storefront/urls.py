"""
Storefront URL Configuration

URL Structure:
- /signup, /login: account creation and token issuance
- /wishlist, /wishlist/<courseId>: the authenticated user's wishlist
- /createOrder, /payment-webhook, /payments/config: course purchases

Author: Storefront Development Team
Version: 1.0.0
"""

from typing import List

from django.urls import URLPattern, path

from .payments import views as payment_views
from .users import views as user_views
from .wishlist import views as wishlist_views

app_name = "storefront"

# --- Authentication ---

users_urlpatterns: List[URLPattern] = [
    path("signup", user_views.SignupView.as_view(), name="signup"),
    path("login", user_views.LoginView.as_view(), name="login"),
]

# --- Wishlist ---

wishlist_urlpatterns: List[URLPattern] = [
    path("wishlist", wishlist_views.WishlistView.as_view(), name="wishlist"),
    path("wishlist/<str:course_id>", wishlist_views.WishlistItemView.as_view(), name="wishlist-item"),
]

# --- Payments ---

payments_urlpatterns: List[URLPattern] = [
    path("createOrder", payment_views.CreateOrderView.as_view(), name="create-order"),
    path("payment-webhook", payment_views.PaymentWebhookView.as_view(), name="payment-webhook"),
    path("payments/config", payment_views.PaymentConfigView.as_view(), name="payment-config"),
]

urlpatterns: List[URLPattern] = users_urlpatterns + wishlist_urlpatterns + payments_urlpatterns
