"""
Storefront User Authentication Views

Public endpoints for creating an account and obtaining a bearer token.

Views:
- SignupView: Register a new user (username, email, password)
- LoginView: Exchange username and password for a short-lived access token

Features:
- Password hashing through Django's auth framework
- Access tokens signed with the configured JWT signing key
- Uniform "Invalid credentials" answer for unknown users and wrong passwords

Author: Storefront Development Team
Version: 1.0.0
"""

import logging

from django.contrib.auth.models import update_last_login
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import AccessToken

from .. import user_store
from ..serializers import LoginSerializer, SignupSerializer

logger = logging.getLogger(__name__)


class SignupView(APIView):
    """
    API endpoint for self-service registration.

    Request Body Example (JSON):
        {"username": "alice", "email": "a@x.com", "password": "secret"}

    Responses:
        201 {"message": "User created successfully"}
        400 {"message": "All fields are required"} or {"message": "User already exists"}
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user_store.create_user(**serializer.validated_data)

        return Response(
            {"message": _("User created successfully")},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """
    API endpoint issuing a bearer access token.

    Request Body Example (JSON):
        {"username": "alice", "password": "secret"}

    Responses:
        200 {"message": "Login successful", "token": "<jwt>"}
        400 {"message": "All fields are required"} or {"message": "Invalid credentials"}

    The token expires after SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"].
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_store.check_credentials(
            serializer.validated_data["username"],
            serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Failed login for %s", serializer.validated_data["username"])
            return Response(
                {"message": _("Invalid credentials")},
                status=status.HTTP_400_BAD_REQUEST,
            )

        token = AccessToken.for_user(user)
        update_last_login(None, user)

        return Response(
            {"message": _("Login successful"), "token": str(token)},
            status=status.HTTP_200_OK,
        )
