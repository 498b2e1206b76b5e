"""
Storefront Models Registry

Central import point so Django discovers the models that live in the
feature subpackages under the ``storefront`` app label.

Users are Django's built-in ``auth.User``; pending payments live in the
cache (see ``payments.pending_store``) and have no table.
"""

from .wishlist.models import WishlistItem

__all__ = ["WishlistItem"]
