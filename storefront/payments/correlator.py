"""
Payment Correlator

Links gateway orders to their fulfillment details and performs the
fulfillment once the gateway reports the order as paid.

Order lifecycle
---------------
CREATED → PAID_NOTIFIED   PAID webhook claimed the entry and the email went out
CREATED → abandoned       no PAID webhook; the entry expires (TTL) or is
                          discarded on an EXPIRED / FAILED webhook

Fulfillment happens at most once per order id: the entry is claimed with an
atomic check-and-delete before the email is sent. If sending fails the
entry is restored so a redelivered webhook can try again.

Author: Storefront Development Team
Version: 1.0.0
"""

import logging
import secrets
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..exceptions import GatewayError, OrderInitiationError
from .gateway import (
    ORDER_STATUS_EXPIRED,
    ORDER_STATUS_FAILED,
    ORDER_STATUS_PAID,
    StripeGateway,
)
from .notifications import send_coupon_email
from .pending_store import PendingPayment, PendingPaymentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderHandle:
    order_id: str
    payment_session_id: str
    checkout_url: Optional[str] = None


def generate_order_id() -> str:
    """``order_<epoch millis>_<8 hex chars>``; collisions are caught by the store."""
    return f"order_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


class PaymentCorrelator:
    """
    Order creation and webhook-driven coupon fulfillment.

    Args:
        gateway: Payment gateway client, defaults to StripeGateway()
        store: Pending payment store, defaults to PendingPaymentStore
    """

    MAX_ORDER_ID_ATTEMPTS = 5

    def __init__(self, gateway: Optional[StripeGateway] = None, store=PendingPaymentStore) -> None:
        self.gateway = gateway or StripeGateway()
        self.store = store

    def create_order(
        self, *, course_id: str, amount: Decimal, email: str, coupon: str, title: str
    ) -> OrderHandle:
        """
        Remember the fulfillment details and open a gateway order.

        Raises:
            OrderInitiationError: If no order id could be reserved or the gateway call failed
        """
        pending = self._reserve(course_id=course_id, amount=amount, email=email, coupon=coupon, title=title)

        try:
            order = self.gateway.open_order(
                order_id=pending.order_id,
                amount=amount,
                email=email,
                title=title,
                course_id=course_id,
            )
        except GatewayError as exc:
            self.store.discard(pending.order_id)
            logger.error("Order %s could not be opened: %s", pending.order_id, exc.details)
            raise OrderInitiationError() from exc

        logger.info("Order %s created for course %s (session %s)", pending.order_id, course_id, order.session_id)
        return OrderHandle(
            order_id=pending.order_id,
            payment_session_id=order.session_id,
            checkout_url=order.checkout_url,
        )

    def _reserve(self, **details) -> PendingPayment:
        for _ in range(self.MAX_ORDER_ID_ATTEMPTS):
            pending = PendingPayment(
                order_id=generate_order_id(),
                email=details["email"],
                coupon=details["coupon"],
                course_id=str(details["course_id"]),
                title=details["title"],
                amount=str(details["amount"]),
            )
            if self.store.create(pending):
                return pending
            logger.warning("Order id collision on %s, generating a new one", pending.order_id)
        raise OrderInitiationError()

    def handle_webhook(self, order_id: Optional[str], order_status: Optional[str]) -> bool:
        """
        React to a verified gateway notification.

        Returns:
            True if a coupon email was sent by this call, False otherwise
        """
        if not order_id:
            return False

        if order_status in (ORDER_STATUS_EXPIRED, ORDER_STATUS_FAILED):
            self.store.discard(order_id)
            logger.info("Order %s ended with status %s", order_id, order_status)
            return False

        if order_status != ORDER_STATUS_PAID:
            logger.debug("Ignoring status %s for order %s", order_status, order_id)
            return False

        pending = self.store.claim(order_id)
        if pending is None:
            logger.info("No pending payment for order %s, nothing to fulfil", order_id)
            return False

        try:
            send_coupon_email(pending)
        except Exception:
            logger.exception("Coupon email for order %s failed", order_id)
            self.store.restore(pending)
            return False

        logger.info("Order %s paid and fulfilled", order_id)
        return True
