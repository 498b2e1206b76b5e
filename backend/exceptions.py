"""
API Error Envelope

Every error leaving the API is rendered as ``{"message": ...}``:

- DRF validation errors keep the field map under ``errors``; ``message`` is
  the first human readable entry.
- Authentication and permission failures are answered with a uniform
  401 ``Not authorized``.
- Domain errors (``storefront.exceptions.StorefrontError``) carry their own
  status code and message.
- Anything else is logged with its stack trace and answered with a generic
  500 ``Server error``; internal error text never reaches the client.
"""

import logging
from typing import Any, Dict, Optional

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from storefront.exceptions import StorefrontError

logger = logging.getLogger(__name__)


def _first_message(detail: Any) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    if isinstance(exc, StorefrontError):
        return Response({"message": exc.message}, status=exc.status_code)

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response = exception_handler(exc, context)
        response.data = {"message": "Not authorized"}
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return response

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else "unknown view"
        )
        return Response(
            {"message": "Server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"message": _first_message(exc.detail), "errors": exc.detail}
    else:
        response.data = {"message": _first_message(getattr(exc, "detail", response.data))}
    return response
