from decimal import Decimal
from smtplib import SMTPException
from unittest import mock

from django.core import mail
from django.core.cache import cache
from django.test import TestCase

from storefront.exceptions import GatewayError, OrderInitiationError
from storefront.payments.correlator import PaymentCorrelator, generate_order_id
from storefront.payments.gateway import GatewayOrder
from storefront.payments.pending_store import PendingPaymentStore


class FakeGateway:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def open_order(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail:
            raise GatewayError(details={"order_id": kwargs["order_id"]})
        return GatewayOrder(session_id=f"cs_test_{len(self.calls)}", checkout_url="https://checkout.test/pay")


ORDER = {
    "course_id": "C1",
    "amount": Decimal("499.00"),
    "email": "buyer@x.com",
    "coupon": "WELCOME10",
    "title": "Intro",
}


class PaymentCorrelatorTests(TestCase):
    def setUp(self):
        cache.clear()
        self.gateway = FakeGateway()
        self.correlator = PaymentCorrelator(gateway=self.gateway)

    def test_generate_order_id_format(self):
        order_id = generate_order_id()
        prefix, millis, suffix = order_id.split("_")
        self.assertEqual(prefix, "order")
        self.assertTrue(millis.isdigit())
        self.assertEqual(len(suffix), 8)
        self.assertNotEqual(order_id, generate_order_id())

    def test_create_order_stores_pending_and_calls_gateway(self):
        handle = self.correlator.create_order(**ORDER)

        self.assertEqual(handle.payment_session_id, "cs_test_1")
        self.assertEqual(handle.checkout_url, "https://checkout.test/pay")
        self.assertEqual(self.gateway.calls[0]["order_id"], handle.order_id)
        self.assertEqual(self.gateway.calls[0]["amount"], Decimal("499.00"))

        pending = PendingPaymentStore.get(handle.order_id)
        self.assertEqual(pending.email, "buyer@x.com")
        self.assertEqual(pending.coupon, "WELCOME10")
        self.assertEqual(pending.course_id, "C1")
        self.assertEqual(pending.title, "Intro")

    def test_create_order_gateway_failure_discards_pending(self):
        correlator = PaymentCorrelator(gateway=FakeGateway(fail=True))
        with mock.patch("storefront.payments.correlator.generate_order_id", return_value="order_1_fail"):
            with self.assertRaises(OrderInitiationError):
                correlator.create_order(**ORDER)
        self.assertIsNone(PendingPaymentStore.get("order_1_fail"))

    def test_create_order_retries_taken_order_id(self):
        with mock.patch("storefront.payments.correlator.generate_order_id", return_value="order_1_dup"):
            self.correlator.create_order(**ORDER)
        with mock.patch(
            "storefront.payments.correlator.generate_order_id",
            side_effect=["order_1_dup", "order_2_new"],
        ):
            handle = self.correlator.create_order(**{**ORDER, "email": "second@x.com"})

        self.assertEqual(handle.order_id, "order_2_new")
        self.assertEqual(PendingPaymentStore.get("order_1_dup").email, "buyer@x.com")
        self.assertEqual(PendingPaymentStore.get("order_2_new").email, "second@x.com")

    def test_create_order_gives_up_after_repeated_collisions(self):
        with mock.patch("storefront.payments.correlator.generate_order_id", return_value="order_1_dup"):
            self.correlator.create_order(**ORDER)
            with self.assertRaises(OrderInitiationError):
                self.correlator.create_order(**ORDER)
        self.assertEqual(len(self.gateway.calls), 1)

    def test_paid_webhook_sends_one_email(self):
        handle = self.correlator.create_order(**ORDER)

        self.assertTrue(self.correlator.handle_webhook(handle.order_id, "PAID"))
        self.assertFalse(self.correlator.handle_webhook(handle.order_id, "PAID"))

        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ["buyer@x.com"])
        self.assertIn("WELCOME10", message.body)
        self.assertIn("Intro", message.subject)
        self.assertIsNone(PendingPaymentStore.get(handle.order_id))

    def test_unknown_order_sends_nothing(self):
        self.assertFalse(self.correlator.handle_webhook("order_0_unknown", "PAID"))
        self.assertEqual(len(mail.outbox), 0)

    def test_missing_order_id_is_ignored(self):
        self.assertFalse(self.correlator.handle_webhook(None, "PAID"))
        self.assertEqual(len(mail.outbox), 0)

    def test_non_paid_status_keeps_pending(self):
        handle = self.correlator.create_order(**ORDER)

        self.assertFalse(self.correlator.handle_webhook(handle.order_id, "ACTIVE"))
        self.assertEqual(len(mail.outbox), 0)
        self.assertIsNotNone(PendingPaymentStore.get(handle.order_id))

    def test_expired_and_failed_discard_pending(self):
        expired = self.correlator.create_order(**ORDER)
        failed = self.correlator.create_order(**ORDER)

        self.assertFalse(self.correlator.handle_webhook(expired.order_id, "EXPIRED"))
        self.assertFalse(self.correlator.handle_webhook(failed.order_id, "FAILED"))
        self.assertIsNone(PendingPaymentStore.get(expired.order_id))
        self.assertIsNone(PendingPaymentStore.get(failed.order_id))

        self.assertFalse(self.correlator.handle_webhook(expired.order_id, "PAID"))
        self.assertEqual(len(mail.outbox), 0)

    def test_mail_failure_restores_pending_for_retry(self):
        handle = self.correlator.create_order(**ORDER)

        with mock.patch(
            "storefront.payments.correlator.send_coupon_email",
            side_effect=SMTPException("connection refused"),
        ):
            self.assertFalse(self.correlator.handle_webhook(handle.order_id, "PAID"))
        self.assertIsNotNone(PendingPaymentStore.get(handle.order_id))

        self.assertTrue(self.correlator.handle_webhook(handle.order_id, "PAID"))
        self.assertEqual(len(mail.outbox), 1)
