"""Domain constants and enumerations.

Periods and currencies are closed enums; every lookup table below is total
over its enum (checked at import time) so a missing entry fails on startup
rather than producing NaN in a calculation.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Mapping, Tuple


class Period(str, Enum):
    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"
    QUARTERLY = "quarterly"
    BIYEARLY = "biyearly"
    YEARLY = "yearly"


class Currency(str, Enum):
    EUR = "EUR"
    USD = "USD"
    RUB = "RUB"
    GBP = "GBP"
    RSD = "RSD"
    AMD = "AMD"
    GEL = "GEL"
    TYR = "TYR"
    KZT = "KZT"
    THB = "THB"
    AED = "AED"
    SAR = "SAR"


# Occurrences per year. A leap year is assumed for daily/weekly figures.
PERIOD_MULTIPLIERS: Dict[Period, float] = {
    Period.ONCE: 1,
    Period.DAILY: 366,
    Period.WEEKLY: 366 / 7,
    Period.BIWEEKLY: 366 / 14,
    Period.MONTHLY: 12,
    Period.BIMONTHLY: 6,
    Period.QUARTERLY: 4,
    Period.BIYEARLY: 2,
    Period.YEARLY: 1,
}

BASIC_PERIODS: Tuple[Period, ...] = (
    Period.ONCE,
    Period.DAILY,
    Period.WEEKLY,
    Period.MONTHLY,
    Period.YEARLY,
)

EXTENDED_PERIODS: Tuple[Period, ...] = (
    Period.DAILY,
    Period.BIWEEKLY,
    Period.WEEKLY,
    Period.BIMONTHLY,
    Period.MONTHLY,
    Period.QUARTERLY,
    Period.BIYEARLY,
    Period.YEARLY,
)

PERIOD_EDITIONS: Mapping[str, Tuple[Period, ...]] = {
    "basic": BASIC_PERIODS,
    "extended": EXTENDED_PERIODS,
}

DEFAULT_PERIOD = Period.DAILY

BASE_CURRENCY = Currency.EUR

# Units of currency per 1 unit of BASE_CURRENCY (static, never refreshed)
CURRENCY_RATES: Dict[Currency, float] = {
    Currency.EUR: 1,
    Currency.USD: 1.086,
    Currency.RSD: 117.2,
    Currency.RUB: 100.24,
    Currency.AMD: 430.92,
    Currency.GEL: 2.94,
    Currency.TYR: 34.77,
    Currency.KZT: 487.24,
    Currency.AED: 3.99,
    Currency.SAR: 4.07,
    Currency.THB: 39.40,
    Currency.GBP: 0.86,
}

CURRENCIES: Tuple[Currency, ...] = tuple(Currency)

DEFAULT_USED_CURRENCIES: List[Currency] = [Currency.EUR, Currency.USD, Currency.RUB]

USED_CURRENCIES_KEY = "used_currencies"


def _check_total(table: Mapping, enum_cls: type) -> None:
    missing = [m.value for m in enum_cls if m not in table]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} table missing entries: {missing}")
    if any(v <= 0 for v in table.values()):
        raise RuntimeError(f"{enum_cls.__name__} table must hold positive values")


_check_total(PERIOD_MULTIPLIERS, Period)
_check_total(CURRENCY_RATES, Currency)
if PERIOD_MULTIPLIERS[Period.ONCE] != 1 or CURRENCY_RATES[BASE_CURRENCY] != 1:
    raise RuntimeError("once multiplier and base currency rate must both be 1")
