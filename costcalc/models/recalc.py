from __future__ import annotations
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .amounts import (
    ByCurrency,
    ByPeriod,
    _normalize_currency,
    _normalize_optional_currency,
    _normalize_period,
)
from .constants import BASE_CURRENCY, Currency, DEFAULT_PERIOD, Period


class SessionState(BaseModel):
    """Per-client calculator state carried between recalculations.

    `switch_from` is set when the user asked to convert the typed price from
    the previously selected currency into the newly selected one. It is
    consumed (reset to None) by the next recalculation.
    """

    model_config = ConfigDict(frozen=True)

    selected_currency: Currency = BASE_CURRENCY
    switch_from: Optional[Currency] = None

    @field_validator("selected_currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        return _normalize_currency(v)

    @field_validator("switch_from", mode="before")
    @classmethod
    def normalize_switch_from(cls, v):
        return _normalize_optional_currency(v)


class RecalcInput(BaseModel):
    """Raw form input; price and count stay strings until parsed."""

    price: str = ""
    count: str = ""
    period: Period = DEFAULT_PERIOD
    currency: Currency = BASE_CURRENCY

    @field_validator("price", "count", mode="before")
    @classmethod
    def coerce_text(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("period", mode="before")
    @classmethod
    def normalize_period(cls, v):
        return _normalize_period(v)

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        return _normalize_currency(v)


class RecalcResult(BaseModel):
    price: str = Field(..., description="Price as it should be displayed (rewritten after a currency switch)")
    amount: float
    period: Period
    currency: Currency
    by_period: ByPeriod
    by_currency: ByCurrency
    formatted_by_period: Dict[Period, str]
    formatted_by_currency: Dict[Currency, str]
