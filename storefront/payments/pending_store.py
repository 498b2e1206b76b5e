"""
Pending Payment Store

Correlation records between a generated order id and the buyer's
fulfillment details, kept in Django's cache (LocMem in development,
Redis in production) until the gateway confirms the payment.

Entries expire after ``PENDING_PAYMENT_TTL_SECONDS`` so abandoned orders do
not accumulate. ``claim`` is the only way to consume an entry for
fulfillment: whoever actually deletes the key gets the record, every
concurrent caller gets None.

Author: Storefront Development Team
Version: 1.0.0
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


@dataclass
class PendingPayment:
    order_id: str
    email: str
    coupon: str
    course_id: str
    title: str
    amount: str = ""
    created_at: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PendingPayment":
        return cls(**data)


class PendingPaymentStore:
    """
    Cache-backed store of PendingPayment records keyed by order id.
    """

    CACHE_PREFIX = "pending_payment"
    MIN_RESTORE_TIMEOUT = 60

    @classmethod
    def _key(cls, order_id: str) -> str:
        return f"{cls.CACHE_PREFIX}:{order_id}"

    @classmethod
    def timeout(cls) -> int:
        return int(getattr(settings, "PENDING_PAYMENT_TTL_SECONDS", 86400))

    @classmethod
    def create(cls, pending: PendingPayment) -> bool:
        """
        Store a new record unless the order id is already taken.

        Returns:
            True if stored, False if an entry with this order id exists
        """
        added = cache.add(cls._key(pending.order_id), pending.to_dict(), timeout=cls.timeout())
        if added:
            logger.debug("Pending payment stored: %s (expires in %ss)", pending.order_id, cls.timeout())
        return added

    @classmethod
    def get(cls, order_id: str) -> Optional[PendingPayment]:
        data = cache.get(cls._key(order_id))
        return PendingPayment.from_dict(data) if data else None

    @classmethod
    def claim(cls, order_id: str) -> Optional[PendingPayment]:
        """
        Atomically consume the record for ``order_id``.

        Returns:
            The record if this call removed it, otherwise None
        """
        key = cls._key(order_id)
        data = cache.get(key)
        if data is None:
            return None
        if not cache.delete(key):
            logger.info("Pending payment %s already claimed by another worker", order_id)
            return None
        return PendingPayment.from_dict(data)

    @classmethod
    def restore(cls, pending: PendingPayment) -> None:
        """Put a claimed record back for its remaining lifetime."""
        remaining = cls.timeout() - int(time.time() - pending.created_at)
        cache.set(
            cls._key(pending.order_id),
            pending.to_dict(),
            timeout=max(remaining, cls.MIN_RESTORE_TIMEOUT),
        )
        logger.info("Pending payment %s restored for retry", pending.order_id)

    @classmethod
    def discard(cls, order_id: str) -> bool:
        removed = cache.delete(cls._key(order_id))
        if removed:
            logger.info("Pending payment %s discarded", order_id)
        return bool(removed)
