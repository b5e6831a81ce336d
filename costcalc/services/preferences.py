"""Used ("active") currency preferences.

The ordered list of currencies a user keeps visible in the comparison table.
Persisted as a JSON list under ``used_currencies`` in any store honouring the
``get(key, default)`` / ``set(key, value)`` / ``delete(key)`` contract (the
sqlite `Database` in production).

Reads are resilient: a missing value yields the default subset, unknown codes
and duplicates in a stored list are dropped. The list may legitimately become
empty.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, List, Protocol

from costcalc.models.constants import (
    Currency,
    DEFAULT_USED_CURRENCIES,
    USED_CURRENCIES_KEY,
)
from .currency import as_currency

logger = logging.getLogger("costcalc.preferences")


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> bool: ...


def _dedupe(currencies: Iterable[Currency]) -> List[Currency]:
    seen: List[Currency] = []
    for c in currencies:
        if c not in seen:
            seen.append(c)
    return seen


def _serialize(currencies: Iterable[Currency]) -> List[str]:
    return [c.value for c in currencies]


def load_used_currencies(store: KeyValueStore) -> List[Currency]:
    stored = store.get(USED_CURRENCIES_KEY, None)
    if stored is None:
        return list(DEFAULT_USED_CURRENCIES)
    if not isinstance(stored, list):
        logger.warning("stored used currencies not a list; using defaults")
        return list(DEFAULT_USED_CURRENCIES)
    valid = []
    for code in stored:
        try:
            valid.append(Currency(code))
        except ValueError:
            logger.warning("dropping unknown stored currency", extra={"currency": code})
    return _dedupe(valid)


def save_used_currencies(store: KeyValueStore, currencies: Iterable[Currency]) -> None:
    store.set(USED_CURRENCIES_KEY, _serialize(currencies))


def toggle_used_currency(store: KeyValueStore, currency: Currency | str) -> List[Currency]:
    """Remove `currency` when used, append it otherwise; persist and return the list."""
    currency = as_currency(currency)
    used = load_used_currencies(store)
    if currency in used:
        used = [c for c in used if c is not currency]
    else:
        used.append(currency)
    save_used_currencies(store, used)
    logger.info(
        "used currency toggled",
        extra={"currency": currency.value, "used": _serialize(used)},
    )
    return used


def set_used_currencies(
    store: KeyValueStore, currencies: Iterable[Currency | str]
) -> List[Currency]:
    used = _dedupe(as_currency(c) for c in currencies)
    save_used_currencies(store, used)
    return used


def reset_used_currencies(store: KeyValueStore) -> List[Currency]:
    """Forget the stored list so the default subset applies again."""
    store.delete(USED_CURRENCIES_KEY)
    return load_used_currencies(store)


__all__ = [
    "KeyValueStore",
    "load_used_currencies",
    "save_used_currencies",
    "toggle_used_currency",
    "set_used_currencies",
    "reset_used_currencies",
]
