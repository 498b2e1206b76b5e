import time
from unittest import mock

from django.core.cache import cache
from django.test import TestCase, override_settings

from storefront.payments.pending_store import PendingPayment, PendingPaymentStore


def make_pending(order_id="order_1_abc"):
    return PendingPayment(
        order_id=order_id,
        email="a@x.com",
        coupon="WELCOME10",
        course_id="C1",
        title="Intro",
        amount="499.00",
    )


class PendingPaymentStoreTests(TestCase):
    def setUp(self):
        cache.clear()

    def test_create_and_get(self):
        self.assertTrue(PendingPaymentStore.create(make_pending()))
        stored = PendingPaymentStore.get("order_1_abc")
        expected = make_pending().to_dict()
        expected["created_at"] = stored.created_at
        self.assertEqual(stored.to_dict(), expected)

    def test_create_rejects_taken_order_id(self):
        PendingPaymentStore.create(make_pending())
        other = make_pending()
        other.email = "someone@else.com"

        self.assertFalse(PendingPaymentStore.create(other))
        self.assertEqual(PendingPaymentStore.get("order_1_abc").email, "a@x.com")

    def test_claim_is_single_use(self):
        PendingPaymentStore.create(make_pending())

        first = PendingPaymentStore.claim("order_1_abc")
        second = PendingPaymentStore.claim("order_1_abc")
        self.assertIsNotNone(first)
        self.assertEqual(first.email, "a@x.com")
        self.assertIsNone(second)
        self.assertIsNone(PendingPaymentStore.get("order_1_abc"))

    def test_claim_loses_race_when_key_already_deleted(self):
        # another worker deletes the key between our read and our delete
        racing_cache = mock.Mock()
        racing_cache.get.return_value = make_pending().to_dict()
        racing_cache.delete.return_value = False
        with mock.patch("storefront.payments.pending_store.cache", racing_cache):
            self.assertIsNone(PendingPaymentStore.claim("order_1_abc"))
        racing_cache.delete.assert_called_once_with("pending_payment:order_1_abc")

    def test_claim_unknown_order(self):
        self.assertIsNone(PendingPaymentStore.claim("order_unknown"))

    def test_restore_after_claim(self):
        PendingPaymentStore.create(make_pending())
        pending = PendingPaymentStore.claim("order_1_abc")

        PendingPaymentStore.restore(pending)
        self.assertEqual(PendingPaymentStore.get("order_1_abc").coupon, "WELCOME10")

    def test_discard(self):
        PendingPaymentStore.create(make_pending())
        self.assertTrue(PendingPaymentStore.discard("order_1_abc"))
        self.assertFalse(PendingPaymentStore.discard("order_1_abc"))
        self.assertIsNone(PendingPaymentStore.get("order_1_abc"))

    @override_settings(PENDING_PAYMENT_TTL_SECONDS=60)
    def test_entries_expire(self):
        PendingPaymentStore.create(make_pending())
        later = time.time() + 120
        with mock.patch("django.core.cache.backends.locmem.time.time", return_value=later):
            self.assertIsNone(PendingPaymentStore.get("order_1_abc"))
            self.assertIsNone(PendingPaymentStore.claim("order_1_abc"))
