"""
Credential Store

Persistence of user accounts on top of Django's ``auth.User`` model.
Usernames are unique at the database level, and so are emails (compared
case-insensitively, through the index added in migration 0002). The
explicit checks below give the common case a clean answer; the indexes
catch concurrent signups that slip past them.

Author: Storefront Development Team
Version: 1.0.0
"""

import logging
from typing import Optional

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction

from ..exceptions import DuplicateUserError

logger = logging.getLogger(__name__)


def create_user(username: str, email: str, password: str) -> User:
    """
    Create a new account unless the email or username is taken.

    Args:
        username: Login name, unique
        email: Contact address, unique (compared case-insensitively)
        password: Raw password, stored as a Django password hash

    Returns:
        The created user

    Raises:
        DuplicateUserError: If the email or username is already registered
    """
    try:
        with transaction.atomic():
            if User.objects.filter(email__iexact=email).exists():
                raise DuplicateUserError()
            if User.objects.filter(username=username).exists():
                raise DuplicateUserError()
            user = User.objects.create_user(username=username, email=email, password=password)
    except IntegrityError:
        # lost a race against a concurrent signup with the same email or username
        raise DuplicateUserError()

    logger.info("Created user %s (id=%s)", username, user.id)
    return user


def find_by_username(username: str) -> Optional[User]:
    return User.objects.filter(username=username).first()


def find_by_email(email: str) -> Optional[User]:
    return User.objects.filter(email__iexact=email).first()


def find_by_id(user_id) -> Optional[User]:
    """Active user with this primary key, or None."""
    return User.objects.filter(pk=user_id, is_active=True).first()


def check_credentials(username: str, password: str) -> Optional[User]:
    """
    Return the user if ``password`` matches the stored hash, otherwise None.
    Unknown usernames and wrong passwords are indistinguishable to the caller.
    """
    user = find_by_username(username)
    if user is None or not user.is_active:
        return None
    if not user.check_password(password):
        return None
    return user
