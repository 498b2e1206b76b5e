"""
Storefront Django Admin Configuration

- User Management: Django's user admin with the user's wishlist inline
- Wishlist: searchable list of all saved courses

Author: Storefront Development Team
Version: 1.0.0
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User
from django.db.models import Count, QuerySet
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _

from .models import WishlistItem

# --- User Management Administration ---


class WishlistItemInline(admin.TabularInline):
    """Inline admin showing the saved courses of a user."""

    model = WishlistItem
    extra = 0
    fields = ("course_id", "title", "created_at")
    readonly_fields = ("created_at",)
    ordering = ("created_at",)


class UserAdmin(BaseUserAdmin):
    """
    Django's user admin extended with wishlist information.
    """

    inlines = (WishlistItemInline,)
    list_display = (
        "username",
        "email",
        "is_staff",
        "is_active",
        "date_joined",
        "get_wishlist_size",
    )
    list_filter = ("is_staff", "is_superuser", "is_active", "date_joined")
    search_fields = ("username", "email")
    ordering = ("username",)

    @admin.display(description=_("Wishlist"), ordering="wishlist_size")
    def get_wishlist_size(self, instance: User) -> int:
        return instance.wishlist_size

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).annotate(wishlist_size=Count("wishlist_items"))


admin.site.unregister(User)
admin.site.register(User, UserAdmin)

# --- Wishlist Administration ---


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ("course_id", "title", "user", "created_at")
    list_select_related = ("user",)
    list_filter = ("created_at",)
    search_fields = ("course_id", "title", "user__username", "user__email")
    readonly_fields = ("created_at",)
    ordering = ("-created_at",)
