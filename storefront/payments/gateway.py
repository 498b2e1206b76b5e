"""
Stripe Gateway Client
=====================

Thin wrapper around the official ``stripe`` library for the two calls the
payment flow needs:

1. ``open_order``   → creates a Checkout Session for one course purchase.
   Our order id travels as ``client_reference_id`` (and in metadata), so the
   webhook can be correlated with the pending payment.
2. ``parse_webhook`` → verifies the ``Stripe-Signature`` header against the
   endpoint's signing secret and normalizes the event into
   ``(order_id, order_status)``.

Status mapping
--------------
- ``checkout.session.completed`` with ``payment_status == "paid"`` → PAID
- ``checkout.session.completed`` otherwise (delayed methods)    → ACTIVE
- ``checkout.session.async_payment_succeeded``                  → PAID
- ``checkout.session.async_payment_failed``                     → FAILED
- ``checkout.session.expired``                                  → EXPIRED
- anything else                                                 → ignored

Mode
----
``STRIPE_LIVE_MODE`` selects the live or test secret key (see settings);
test mode is the sandbox environment.

Author: Storefront Development Team
Version: 1.0.0
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

import stripe
from django.conf import settings

from ..exceptions import GatewayError, WebhookVerificationError

logger = logging.getLogger(__name__)

ORDER_STATUS_PAID = "PAID"
ORDER_STATUS_ACTIVE = "ACTIVE"
ORDER_STATUS_FAILED = "FAILED"
ORDER_STATUS_EXPIRED = "EXPIRED"


@dataclass(frozen=True)
class GatewayOrder:
    session_id: str
    checkout_url: Optional[str]


@dataclass(frozen=True)
class WebhookNotification:
    event_type: str
    order_id: Optional[str]
    order_status: Optional[str]


# Stripe charges these in whole units; see stripe.com/docs/currencies
ZERO_DECIMAL_CURRENCIES = frozenset(
    {"bif", "clp", "djf", "gnf", "jpy", "kmf", "krw", "mga", "pyg", "rwf", "ugx", "vnd", "vuv", "xaf", "xof", "xpf"}
)
# three decimal places, the last digit must be 0
THREE_DECIMAL_CURRENCIES = frozenset({"bhd", "jod", "kwd", "omr", "tnd"})


def to_minor_units(amount: Decimal | str | float, currency: str = "inr") -> int:
    """
    Convert an amount in major currency units to the integer Stripe expects.

    499.00 INR → 49900, 1500 JPY → 1500, 1.234 KWD → 1230.
    """
    currency = currency.lower()
    value = Decimal(str(amount))
    if currency in ZERO_DECIMAL_CURRENCIES:
        return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if currency in THREE_DECIMAL_CURRENCIES:
        return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)) * 10
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class StripeGateway:
    """
    Checkout Session client bound to the configured Stripe account.
    """

    def __init__(self, api_key: Optional[str] = None, webhook_secret: Optional[str] = None) -> None:
        self.api_key = api_key if api_key is not None else settings.STRIPE_SECRET_KEY
        self.webhook_secret = (
            webhook_secret if webhook_secret is not None else settings.STRIPE_WEBHOOK_SECRET
        )

    def open_order(
        self,
        *,
        order_id: str,
        amount: Decimal,
        email: str,
        title: str,
        course_id: str,
        currency: Optional[str] = None,
    ) -> GatewayOrder:
        """
        Open a Checkout Session for one course.

        Raises:
            GatewayError: If Stripe rejects the request or is unreachable
        """
        base_url = settings.PAYMENT_CALLBACK_BASE_URL.rstrip("/")
        currency = (currency or settings.DEFAULT_CURRENCY).lower()
        try:
            session = stripe.checkout.Session.create(
                api_key=self.api_key,
                mode="payment",
                client_reference_id=order_id,
                customer_email=email,
                line_items=[
                    {
                        "price_data": {
                            "currency": currency,
                            "unit_amount": to_minor_units(amount, currency),
                            "product_data": {"name": title},
                        },
                        "quantity": 1,
                    }
                ],
                success_url=f"{base_url}/payments/success?order_id={order_id}",
                cancel_url=f"{base_url}/payments/cancel?order_id={order_id}",
                metadata={"order_id": order_id, "course_id": str(course_id)},
            )
        except stripe.StripeError as exc:
            logger.error("Stripe rejected order %s: %s", order_id, exc)
            raise GatewayError(details={"order_id": order_id, "stripe_error": str(exc)}) from exc

        return GatewayOrder(session_id=session.id, checkout_url=getattr(session, "url", None))

    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookNotification:
        """
        Verify and decode a webhook delivery.

        Raises:
            WebhookVerificationError: Missing/invalid signature or malformed payload
        """
        if not signature or not self.webhook_secret:
            raise WebhookVerificationError()

        try:
            stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except stripe.SignatureVerificationError as exc:
            logger.warning("Webhook signature verification failed: %s", exc)
            raise WebhookVerificationError() from exc
        except ValueError as exc:
            logger.warning("Webhook payload is not valid JSON: %s", exc)
            raise WebhookVerificationError("Invalid webhook payload") from exc

        # signature verified, read the raw event as a plain dict
        event = json.loads(payload)
        return self._to_notification(event)

    @staticmethod
    def _to_notification(event: Dict[str, Any]) -> WebhookNotification:
        event_type = event.get("type", "")
        obj = (event.get("data") or {}).get("object") or {}
        order_id = obj.get("client_reference_id") or (obj.get("metadata") or {}).get("order_id")

        if event_type == "checkout.session.completed":
            status = ORDER_STATUS_PAID if obj.get("payment_status") == "paid" else ORDER_STATUS_ACTIVE
        elif event_type == "checkout.session.async_payment_succeeded":
            status = ORDER_STATUS_PAID
        elif event_type == "checkout.session.async_payment_failed":
            status = ORDER_STATUS_FAILED
        elif event_type == "checkout.session.expired":
            status = ORDER_STATUS_EXPIRED
        else:
            status = None

        return WebhookNotification(event_type=event_type, order_id=order_id, order_status=status)
