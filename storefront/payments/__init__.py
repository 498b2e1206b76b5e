"""
Storefront Payments Package

Course purchases through Stripe Checkout with coupon fulfillment by email.

Data Flow (Happy Path)
----------------------
client → POST /createOrder → PaymentCorrelator.create_order
  1. generates an order id and stores a PendingPayment (cache, with TTL)
  2. opens a Checkout Session for that order id with the gateway
  3. returns the session handle and order id to the client
Stripe → POST /payment-webhook → signature verified → PaymentCorrelator.handle_webhook
  4. on a PAID status the pending entry is claimed (atomic check-and-delete)
  5. the coupon email is sent to the buyer

Structure
---------
- pending_store.py  → PendingPayment record and cache-backed store
- gateway.py        → Stripe Checkout client and webhook verification
- correlator.py     → order creation and webhook-driven fulfillment
- notifications.py  → coupon email
- views.py / serializers.py → HTTP endpoints

Author: Storefront Development Team
Version: 1.0.0
"""
