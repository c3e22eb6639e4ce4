"""Transaction ledger API.

Most of these helpers dispatch to filters named after the transaction's
method so each payment add-on can answer for its own transactions, e.g.
``transaction_status_label_paypal_pro``.
"""

import logging

from .hooks import apply_filters
from .models import Transaction

logger = logging.getLogger(__name__)


def add_transaction(method: str, method_id, status: str, customer, cart_object) -> int:
    txn = Transaction.objects.create(
        method=method,
        method_id=str(method_id),
        status=status,
        customer=customer,
        cart_object=cart_object or {},
    )
    logger.info("Recorded %s transaction %s (%s) as #%s", method, txn.method_id, status, txn.pk)
    return txn.pk


def get_transaction(transaction):
    if isinstance(transaction, Transaction):
        return transaction
    return Transaction.objects.get(pk=transaction)


def get_transaction_status(transaction) -> str:
    return get_transaction(transaction).status


def do_transaction(method: str, transaction_object, request):
    """Ask the ``method`` add-on to charge for ``transaction_object``.

    Returns the new transaction id, or False if nothing was recorded.
    """
    return apply_filters(f"do_transaction_{method}", False, transaction_object, request)


def get_transaction_status_label(transaction) -> str:
    txn = get_transaction(transaction)
    return apply_filters(f"transaction_status_label_{txn.method}", txn.status)


def transaction_is_cleared_for_delivery(transaction) -> bool:
    txn = get_transaction(transaction)
    return bool(apply_filters(f"{txn.method}_transaction_is_cleared_for_delivery", False, txn))


def get_refund_url(transaction) -> str:
    txn = get_transaction(transaction)
    return apply_filters(f"refund_url_for_{txn.method}", "", txn)
