"""
Storefront User Serializers

Input validation for the signup and login endpoints.

Serializers:
- SignupSerializer: username, email and password for a new account
- LoginSerializer: username and password for token issuance

Missing or blank fields fail with "All fields are required", matching the
message the frontend already displays.

Author: Storefront Development Team
Version: 1.0.0
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

REQUIRED_MESSAGES = {
    "required": _("All fields are required"),
    "blank": _("All fields are required"),
    "null": _("All fields are required"),
}


class SignupSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150, error_messages=REQUIRED_MESSAGES)
    email = serializers.EmailField(error_messages={**REQUIRED_MESSAGES, "invalid": _("Enter a valid email address")})
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
        trim_whitespace=False,
        error_messages=REQUIRED_MESSAGES,
    )


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150, error_messages=REQUIRED_MESSAGES)
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
        trim_whitespace=False,
        error_messages=REQUIRED_MESSAGES,
    )
