"""
Storefront Domain Exceptions

Hierarchy of errors raised by the storefront services. Each exception knows
the HTTP status it maps to, so views can let them propagate and the API
error handler (``backend.exceptions``) renders them as ``{"message": ...}``.

Author: Storefront Development Team
Version: 1.0.0
"""

from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    Attributes:
        message (str): Human-readable error message returned to the client
        status_code (int): HTTP status code the error maps to
        details (Dict[str, Any]): Additional context for logging
    """

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateUserError(StorefrontError):
    """Signup with an email or username that is already registered."""

    status_code = 400
    default_message = "User already exists"


class CourseAlreadyInWishlist(StorefrontError):
    """The course is already part of the user's wishlist."""

    status_code = 400
    default_message = "Course already in wishlist"


class GatewayError(StorefrontError):
    """The payment gateway rejected or failed a request."""

    default_message = "Payment gateway error"


class OrderInitiationError(StorefrontError):
    """An order could not be opened with the payment gateway."""

    status_code = 500
    default_message = "Payment initiation failed"


class WebhookVerificationError(StorefrontError):
    """A webhook call whose signature or payload could not be verified."""

    status_code = 400
    default_message = "Webhook signature verification failed"
