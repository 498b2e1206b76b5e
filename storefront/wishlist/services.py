"""
Wishlist Manager

Add, remove and list operations on the authenticated user's wishlist.
The user is always passed in explicitly by the calling view.

Author: Storefront Development Team
Version: 1.0.0
"""

import logging
from typing import List

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction

from ..exceptions import CourseAlreadyInWishlist
from .models import WishlistItem

logger = logging.getLogger(__name__)


def list_items(user: User) -> List[WishlistItem]:
    """Current wishlist of ``user``, freshly read from the database."""
    return list(WishlistItem.objects.filter(user=user).order_by("created_at", "id"))


def add_item(user: User, course_id: str, title: str) -> List[WishlistItem]:
    """
    Append a course to the wishlist.

    Returns:
        The full updated wishlist

    Raises:
        CourseAlreadyInWishlist: If ``course_id`` is already saved
    """
    if WishlistItem.objects.filter(user=user, course_id=course_id).exists():
        raise CourseAlreadyInWishlist()

    try:
        with transaction.atomic():
            WishlistItem.objects.create(user=user, course_id=course_id, title=title)
    except IntegrityError:
        # concurrent add of the same course
        raise CourseAlreadyInWishlist()

    logger.debug("User %s added course %s to wishlist", user.id, course_id)
    return list_items(user)


def remove_item(user: User, course_id: str) -> List[WishlistItem]:
    """
    Remove every entry for ``course_id``. Removing an absent course is a no-op.

    Returns:
        The full updated wishlist
    """
    deleted, _ = WishlistItem.objects.filter(user=user, course_id=course_id).delete()
    if deleted:
        logger.debug("User %s removed course %s from wishlist", user.id, course_id)
    return list_items(user)
