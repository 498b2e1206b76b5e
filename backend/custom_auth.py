import logging
from typing import Optional

from django.contrib.auth.models import AbstractBaseUser
from django.utils.translation import gettext_lazy as _
from rest_framework.request import Request

from rest_framework_simplejwt.authentication import JWTAuthentication as original_auth
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken, TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import Token

from storefront.users import user_store

logger = logging.getLogger(__name__)

NOT_AUTHORIZED = _("Not authorized")


class JWTAuthentication(original_auth):
    """
    Bearer token authentication that collapses every failure into one answer.

    Reads ``Authorization: Bearer <token>``, verifies signature and expiry and
    resolves the ``user_id`` claim through the credential store. A missing
    token, a bad signature, an expired token and a user that no longer exists
    all end in the same 401 ``Not authorized``.
    """

    www_authenticate_realm = "api"
    media_type = "application/json"

    def authenticate(self, request: Request) -> Optional[tuple[AbstractBaseUser, Token]]:
        header = self.get_header(request)
        if header is None:
            return None

        try:
            raw_token = self.get_raw_token(header)
        except AuthenticationFailed:
            # malformed header, e.g. "Bearer" with no token or extra parts
            raise AuthenticationFailed(NOT_AUTHORIZED, code="not_authorized")
        if raw_token is None:
            return None

        try:
            validated_token = self.get_validated_token(raw_token)
        except (InvalidToken, TokenError) as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise AuthenticationFailed(NOT_AUTHORIZED, code="not_authorized")

        return self.get_user(validated_token), validated_token

    def get_user(self, validated_token: Token) -> AbstractBaseUser:
        try:
            user_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            raise AuthenticationFailed(NOT_AUTHORIZED, code="not_authorized")

        user = user_store.find_by_id(user_id)
        if user is None:
            logger.info("Bearer token refers to missing user %s", user_id)
            raise AuthenticationFailed(NOT_AUTHORIZED, code="not_authorized")
        return user
