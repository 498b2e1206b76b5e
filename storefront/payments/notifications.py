"""
Fulfillment Notifier

Sends the coupon code for a confirmed purchase to the buyer through
Django's mail framework (SMTP transport configured by the EMAIL_* settings).
"""

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

from .pending_store import PendingPayment

logger = logging.getLogger(__name__)


def send_coupon_email(pending: PendingPayment) -> None:
    """
    Email the coupon code of ``pending`` to its buyer.

    Raises:
        Any transport error from the mail backend (SMTPException, OSError, ...)
    """
    context = {
        "title": pending.title,
        "coupon": pending.coupon,
        "order_id": pending.order_id,
        "course_id": pending.course_id,
    }
    send_mail(
        subject=f"Your coupon code for {pending.title}",
        message=render_to_string("storefront/email/coupon.txt", context),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[pending.email],
        html_message=render_to_string("storefront/email/coupon.html", context),
        fail_silently=False,
    )
    logger.info("Coupon email sent for order %s", pending.order_id)
