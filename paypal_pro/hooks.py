"""Transaction hooks Exchange needs from a payment method.

Exchange asks each transaction method for its refund URL, to process a
purchase, for the checkout button, for a readable status label and whether a
status lets products be delivered. The filters are named after the method
slug, e.g. ``do_transaction_paypal_pro``; they are registered in
:class:`paypal_pro.apps.PayPalProConfig`.
"""

import logging

from django.contrib import messages
from django.db import IntegrityError, transaction as db_transaction
from django.utils.translation import gettext as _

from exchange.cart import generate_purchase_dialog, get_cart_total, nonce_action, nonce_field_name
from exchange.customers import get_current_customer
from exchange.nonces import verify_nonce
from exchange.options import get_option
from exchange.transactions import add_transaction, get_transaction_status

from .constants import CLEARED_FOR_DELIVERY, METHOD, OPTION_KEY, REFUND_URL, UNKNOWN_STATUS_LABEL, TransactionStatus
from .gateway import do_payment

logger = logging.getLogger(__name__)


def refund_url_for_paypal_pro(url, *args):
    """Link for the admin 'Refund Transaction' button.

    PayPal Pro refunds are issued from the PayPal site, so every transaction
    gets the same URL.
    """
    return REFUND_URL


def process_transaction(status, transaction_object, request):
    """Charge the cart through PayPal Pro.

    ``status`` is the value earlier filters returned; anything truthy means
    another method has already handled this checkout. Returns the new
    transaction id, or False when the purchase failed. Failures are reported
    to the shopper through ``django.contrib.messages``.
    """
    field = nonce_field_name(METHOD)
    if status or field not in request.POST:
        return status

    if not verify_nonce(request, request.POST.get(field), nonce_action(METHOD)):
        logger.warning("PayPal Pro checkout rejected: invalid security token")
        messages.error(request, _("Transaction Failed, unable to verify security token."))
        return False

    customer = get_current_customer(request)

    try:
        args = {}
        payment = do_payment(customer, transaction_object, args, request=request)
    except Exception as e:
        logger.exception("PayPal Pro payment failed for customer %s", getattr(customer, "customer_id", None))
        messages.error(request, str(e))
        return False

    try:
        with db_transaction.atomic():
            return add_transaction(METHOD, payment["id"], TransactionStatus.SUCCEEDED.value, customer, transaction_object)
    except IntegrityError:
        logger.exception("PayPal Pro payment %s is already recorded", payment["id"])
        messages.error(request, _("Your payment was taken but could not be recorded. Please contact the store."))
        return False


def make_payment_button(options, cart, request):
    if get_cart_total(cart) <= 0:
        return ""

    settings = get_option(OPTION_KEY)
    return generate_purchase_dialog(METHOD, request, settings["paypal_pro_purchase_button_label"])


def transaction_status_label(status):
    try:
        return str(TransactionStatus(status).label)
    except ValueError:
        return str(UNKNOWN_STATUS_LABEL)


def transaction_is_cleared_for_delivery(cleared, transaction):
    """True if the status means the goods can be handed over. ``cleared`` is ignored."""
    return get_transaction_status(transaction) in CLEARED_FOR_DELIVERY
