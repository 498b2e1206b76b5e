"""
Storefront Package - Course Storefront Backend

This package contains every module of the course storefront.
It provides signup and login, a per-user course wishlist and the
payment flow that emails a coupon code once a purchase is confirmed.

Features:
- Username/password accounts with bearer token authentication
- Per-user wishlist of course references
- Stripe Checkout orders correlated with a pending-payment store
- Coupon fulfillment by email after a verified payment webhook

Structure:
- users/: credential store, signup and login
- wishlist/: wishlist model, service and views
- payments/: gateway client, pending payments, correlator, notifier

Author: Storefront Development Team
Version: 1.0.0
"""
