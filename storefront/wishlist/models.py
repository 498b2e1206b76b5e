"""
Storefront Wishlist Models

Models:
- WishlistItem: one saved course reference of one user

A user's wishlist is the ordered set of their WishlistItem rows
(insertion order). Each course id appears at most once per user.

Author: Storefront Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class WishlistItem(models.Model):
    """
    A course saved to a user's wishlist.

    Attributes:
        user: Owner of the wishlist
        course_id: Opaque identifier of the course in the external catalogue
        title: Course title as shown when the item was saved
        created_at: Insertion time, defines wishlist order
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="wishlist_items",
        verbose_name=_("User"),
    )
    course_id = models.CharField(max_length=255, verbose_name=_("Course ID"))
    title = models.CharField(max_length=255, verbose_name=_("Title"))
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("Added at"))

    class Meta:
        verbose_name = _("Wishlist Item")
        verbose_name_plural = _("Wishlist Items")
        ordering = ("created_at", "id")
        constraints = [
            models.UniqueConstraint(
                fields=["user", "course_id"], name="unique_wishlist_course_per_user"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} → {self.course_id}"

    def __repr__(self) -> str:
        return f"<WishlistItem(user_id={self.user_id}, course_id={self.course_id!r})>"
