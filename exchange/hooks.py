"""Filter registry used by Exchange to ask add-ons questions.

Add-ons register callbacks against named tags, e.g.
``refund_url_for_paypal_pro`` or ``do_transaction_paypal_pro``. When Exchange
needs an answer it calls :func:`apply_filters` with a starting value; each
callback receives the previous callback's return value plus any extra
arguments, and the last return value wins.
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

# tag -> priority -> [callbacks]
_filters = defaultdict(lambda: defaultdict(list))


def add_filter(tag: str, callback, priority: int = DEFAULT_PRIORITY) -> None:
    callbacks = _filters[tag][priority]
    if callback in callbacks:
        return
    callbacks.append(callback)
    logger.debug("Registered %s for %s (priority %s)", getattr(callback, "__name__", callback), tag, priority)


def apply_filters(tag: str, value, *args):
    for priority in sorted(_filters.get(tag, {})):
        for callback in list(_filters[tag][priority]):
            value = callback(value, *args)
    return value
