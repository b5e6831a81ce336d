from __future__ import annotations
from typing import Dict
from pydantic import BaseModel, field_validator
from .constants import BASE_CURRENCY, Currency, Period

ByPeriod = Dict[Period, float]
ByCurrency = Dict[Currency, float]


def _normalize_currency(v):
    return v.strip().upper() if isinstance(v, str) else v


def _normalize_optional_currency(v):
    """Like _normalize_currency, but blank input means no currency."""
    return _normalize_currency(v) or None


def _normalize_period(v):
    return v.strip().lower() if isinstance(v, str) else v


class AmountWithPeriod(BaseModel):
    amount: float
    period: Period

    @field_validator("period", mode="before")
    @classmethod
    def normalize_period(cls, v):
        return _normalize_period(v)


class AmountWithCurrency(BaseModel):
    """An amount in `currency`; `target_currency` is only used by single conversions."""

    amount: float
    currency: Currency
    target_currency: Currency = BASE_CURRENCY

    @field_validator("currency", "target_currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        return _normalize_currency(v)
