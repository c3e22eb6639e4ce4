import logging

from django.db import DatabaseError

from .hooks import apply_filters
from .models import Option

logger = logging.getLogger(__name__)


def get_option(key: str) -> dict:
    """Return the record stored under ``key`` with registered defaults filled in.

    Add-ons supply defaults through the ``storage_get_defaults_<key>`` filter.
    """
    option = Option.objects.filter(key=key).first()
    value = dict(option.value) if option and option.value else {}
    return apply_filters(f"storage_get_defaults_{key}", value)


def save_option(key: str, value: dict) -> bool:
    """Replace the whole record stored under ``key``. Returns False if the write failed."""
    try:
        Option.objects.update_or_create(key=key, defaults={"value": dict(value)})
    except DatabaseError:
        logger.exception("Could not save option %s", key)
        return False
    return True
