import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class PayPalProError(Exception):
    pass


def get_backend():
    path = getattr(settings, "PAYPAL_PRO_GATEWAY_BACKEND", "")
    if not path:
        logger.error("PAYPAL_PRO_GATEWAY_BACKEND is not configured")
        raise ImproperlyConfigured("PayPal Pro is not configured to take payments.")
    return import_string(path)


def do_payment(customer, transaction_object, args, request=None):
    """Charge the customer through the configured PayPal Pro backend.

    The backend is called as ``backend(customer, transaction_object, args, request=request)``
    and must return a mapping with at least the gateway payment ``id``, or
    raise on failure. The request is passed so the backend can read the card
    fields posted by the purchase dialog.
    """
    backend = get_backend()
    payment = backend(customer, transaction_object, args, request=request)
    if not payment or not payment.get("id"):
        raise PayPalProError("PayPal Pro did not return a payment id.")
    return payment
