"""
Storefront Wishlist Package

Per-user ordered list of saved course references.
"""
