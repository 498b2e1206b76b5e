"""
Storefront Payment Views
========================

Endpoints
---------

1. CreateOrderView
   - URL: /createOrder
   - Method: POST
   - Auth: None
   - Body: {"courseId": "C1", "amount": "499.00", "email": "a@x.com",
            "coupon": "WELCOME10", "title": "Intro"}
   - Returns: {"paymentSessionId": "cs_...", "orderId": "order_...", "checkoutUrl": "https://..."}
   - 500 {"message": "Payment initiation failed"} when the gateway call fails.

2. PaymentWebhookView
   - URL: /payment-webhook
   - Method: POST
   - Auth: Stripe-Signature header, verified against STRIPE_WEBHOOK_SECRET
   - Returns: 200 with an empty body once the signature is valid, whatever
     the fulfillment outcome; 400 when verification fails.

3. PaymentConfigView
   - URL: /payments/config
   - Method: GET
   - Auth: None
   - Returns the publishable key of the active Stripe mode so the frontend
     can initialize Stripe.js.

Author: Storefront Development Team
Version: 1.0.0
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .correlator import PaymentCorrelator
from .gateway import StripeGateway
from .serializers import CreateOrderSerializer

logger = logging.getLogger(__name__)


class CreateOrderView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        handle = PaymentCorrelator().create_order(
            course_id=data["courseId"],
            amount=data["amount"],
            email=data["email"],
            coupon=data["coupon"],
            title=data["title"],
        )
        return Response(
            {
                "paymentSessionId": handle.payment_session_id,
                "orderId": handle.order_id,
                "checkoutUrl": handle.checkout_url,
            },
            status=status.HTTP_200_OK,
        )


class PaymentWebhookView(APIView):
    """
    Receives Stripe webhook deliveries.

    Verification failures are answered with 400 so they show up in the
    Stripe dashboard. After verification the delivery is always acknowledged
    with 200; fulfillment errors are logged, never re-raised.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        payload = request.body
        signature = request.META.get("HTTP_STRIPE_SIGNATURE")

        notification = StripeGateway().parse_webhook(payload, signature)
        logger.info(
            "[webhook] %s order=%s status=%s",
            notification.event_type,
            notification.order_id,
            notification.order_status,
        )

        try:
            PaymentCorrelator().handle_webhook(notification.order_id, notification.order_status)
        except Exception:
            # Never fail the delivery once it is verified; Stripe would only retry.
            logger.exception("Error handling webhook for order %s", notification.order_id)

        return Response(status=status.HTTP_200_OK)


class PaymentConfigView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        publishable_key = (
            settings.STRIPE_LIVE_PUBLISHABLE_KEY
            if settings.STRIPE_LIVE_MODE
            else settings.STRIPE_TEST_PUBLISHABLE_KEY
        )
        return Response({"publishableKey": publishable_key}, status=status.HTTP_200_OK)
