"""
Storefront Wishlist Serializers

Wire format of wishlist items: ``{"courseId": ..., "title": ...}``.

Author: Storefront Development Team
Version: 1.0.0
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .models import WishlistItem

REQUIRED_MESSAGES = {
    "required": _("courseId and title are required"),
    "blank": _("courseId and title are required"),
    "null": _("courseId and title are required"),
}


class WishlistItemSerializer(serializers.ModelSerializer):
    """Read and write representation of a single wishlist entry."""

    courseId = serializers.CharField(source="course_id", max_length=255, error_messages=REQUIRED_MESSAGES)
    title = serializers.CharField(max_length=255, error_messages=REQUIRED_MESSAGES)

    class Meta:
        model = WishlistItem
        fields = ("courseId", "title")
