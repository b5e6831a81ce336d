from __future__ import annotations

from dataclasses import dataclass
import logging

from costcalc.core.errors import UnknownCurrencyError
from costcalc.models.amounts import AmountWithCurrency, ByCurrency, _normalize_currency
from costcalc.models.constants import BASE_CURRENCY, CURRENCIES, CURRENCY_RATES, Currency
from .money import ensure_finite, round2

"""Static-rate currency converter.

All rates are units per 1 EUR. Conversions between two non-base currencies go
through the base currency (two hops); no cross-rate table exists.
"""

logger = logging.getLogger("costcalc.currency")


@dataclass(frozen=True)
class ConversionResult:
    original_amount: float
    currency: Currency
    target_currency: Currency
    amount: float


def as_currency(value: Currency | str) -> Currency:
    try:
        return Currency(_normalize_currency(value))
    except ValueError:
        raise UnknownCurrencyError(value) from None


def get_rate(currency: Currency | str) -> float:
    return CURRENCY_RATES[as_currency(currency)]


def convert_to_currency(
    amount: float,
    currency: Currency | str,
    target_currency: Currency | str = BASE_CURRENCY,
) -> float:
    source = as_currency(currency)
    target = as_currency(target_currency)
    if target is BASE_CURRENCY:
        return amount / CURRENCY_RATES[source]
    return amount / CURRENCY_RATES[source] * CURRENCY_RATES[target]


def convert(entry: AmountWithCurrency) -> ConversionResult:
    return ConversionResult(
        original_amount=entry.amount,
        currency=entry.currency,
        target_currency=entry.target_currency,
        amount=convert_to_currency(entry.amount, entry.currency, entry.target_currency),
    )


def calculate_by_currency(entry: AmountWithCurrency) -> ByCurrency:
    currency = as_currency(entry.currency)
    amount = ensure_finite(entry.amount)
    base_amount = convert_to_currency(amount, currency)
    results: ByCurrency = {}
    for c in CURRENCIES:
        results[c] = round2(ensure_finite(base_amount * CURRENCY_RATES[c], f"{c.value} amount"))
    results[currency] = amount
    logger.debug(
        "currency table computed",
        extra={"currency": currency.value, "amount": amount, "base_amount": base_amount},
    )
    return results
