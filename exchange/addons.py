"""Registry of the add-ons Exchange knows about."""

from dataclasses import dataclass
from typing import Callable, Optional

from django.conf import settings

TRANSACTION_METHODS = "transaction-methods"


@dataclass(frozen=True)
class AddOn:
    slug: str
    name: str
    category: str
    settings_callback: Optional[Callable] = None


_registry: dict[str, AddOn] = {}


def register_addon(slug: str, name: str, settings_callback=None, category: str = TRANSACTION_METHODS) -> AddOn:
    addon = AddOn(slug=slug, name=name, category=category, settings_callback=settings_callback)
    _registry[slug] = addon
    return addon


def get_addon(slug: str) -> Optional[AddOn]:
    return _registry.get(slug)


def get_addons(category: Optional[str] = None) -> list[AddOn]:
    return [a for a in _registry.values() if category is None or a.category == category]


def is_addon_enabled(slug: str) -> bool:
    return slug in getattr(settings, "EXCHANGE_ENABLED_ADDONS", [])


def get_enabled_addons(category: Optional[str] = None) -> list[AddOn]:
    return [a for a in get_addons(category) if is_addon_enabled(a.slug)]
