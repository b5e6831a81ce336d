"""Pydantic domain models for the cost period calculator."""

from .constants import (
    BASE_CURRENCY,
    BASIC_PERIODS,
    CURRENCIES,
    CURRENCY_RATES,
    Currency,
    DEFAULT_PERIOD,
    DEFAULT_USED_CURRENCIES,
    EXTENDED_PERIODS,
    PERIOD_EDITIONS,
    PERIOD_MULTIPLIERS,
    Period,
)  # re-export
from .amounts import AmountWithCurrency, AmountWithPeriod, ByCurrency, ByPeriod
from .recalc import RecalcInput, RecalcResult, SessionState

__all__ = [
    "BASE_CURRENCY",
    "BASIC_PERIODS",
    "CURRENCIES",
    "CURRENCY_RATES",
    "Currency",
    "DEFAULT_PERIOD",
    "DEFAULT_USED_CURRENCIES",
    "EXTENDED_PERIODS",
    "PERIOD_EDITIONS",
    "PERIOD_MULTIPLIERS",
    "Period",
    "AmountWithCurrency",
    "AmountWithPeriod",
    "ByCurrency",
    "ByPeriod",
    "RecalcInput",
    "RecalcResult",
    "SessionState",
]
