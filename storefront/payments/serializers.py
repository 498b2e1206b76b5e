"""
Storefront Payment Serializers

Input validation for order creation.

Author: Storefront Development Team
Version: 1.0.0
"""

from decimal import Decimal

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

REQUIRED_MESSAGES = {
    "required": _("courseId, amount, email, coupon and title are required"),
    "blank": _("courseId, amount, email, coupon and title are required"),
    "null": _("courseId, amount, email, coupon and title are required"),
}


class CreateOrderSerializer(serializers.Serializer):
    courseId = serializers.CharField(max_length=255, error_messages=REQUIRED_MESSAGES)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.01"),
        error_messages=REQUIRED_MESSAGES,
    )
    email = serializers.EmailField(error_messages={**REQUIRED_MESSAGES, "invalid": _("Enter a valid email address")})
    coupon = serializers.CharField(max_length=64, error_messages=REQUIRED_MESSAGES)
    title = serializers.CharField(max_length=255, error_messages=REQUIRED_MESSAGES)
