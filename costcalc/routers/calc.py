from __future__ import annotations

from typing import Dict, Optional, Sequence

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from costcalc.models import (
    AmountWithCurrency,
    AmountWithPeriod,
    Currency,
    Period,
    RecalcInput,
    RecalcResult,
    SessionState,
)
from costcalc.models.amounts import _normalize_optional_currency
from costcalc.services.currency import calculate_by_currency, convert
from costcalc.services.money import AmountFormatter
from costcalc.services.periods import calculate_by_period
from costcalc.services.recalc import recalculate
from .deps import get_currency_formatter, get_period_formatter, get_periods

"""Calculator endpoints.

    - POST /calc/period    -> amount under every period of the configured edition
    - POST /calc/currency  -> amount under every currency
    - POST /calc/convert   -> single conversion
    - POST /calc/recalc    -> full form recalculation with explicit session state

Enum members outside the model (e.g. period 'hourly') are rejected with 422 by
request validation; periods outside the configured edition with 400.
"""

router = APIRouter(prefix="/calc", tags=["calc"])


class ConvertOut(BaseModel):
    amount: float
    currency: Currency
    target_currency: Currency
    converted: float


class RecalcIn(RecalcInput):
    switch_from: Optional[Currency] = Field(
        None, description="Previously selected currency when the price should be converted"
    )

    @field_validator("switch_from", mode="before")
    @classmethod
    def blank_switch_from(cls, v):
        return _normalize_optional_currency(v)


class RecalcOut(RecalcResult):
    state: SessionState


@router.post("/period", summary="Spread an amount across all periods")
async def by_period(
    payload: AmountWithPeriod,
    periods: Sequence[Period] = Depends(get_periods),
) -> Dict[Period, float]:
    return calculate_by_period(payload, periods)


@router.post("/currency", summary="Convert an amount into every currency")
async def by_currency(payload: AmountWithCurrency) -> Dict[Currency, float]:
    return calculate_by_currency(payload)


@router.post("/convert", response_model=ConvertOut, summary="Convert an amount into one currency")
async def convert_amount(payload: AmountWithCurrency):
    result = convert(payload)
    return ConvertOut(
        amount=result.original_amount,
        currency=result.currency,
        target_currency=result.target_currency,
        converted=result.amount,
    )


@router.post("/recalc", response_model=RecalcOut, summary="Recalculate the calculator form")
async def recalc(
    payload: RecalcIn,
    periods: Sequence[Period] = Depends(get_periods),
    period_formatter: AmountFormatter = Depends(get_period_formatter),
    currency_formatter: AmountFormatter = Depends(get_currency_formatter),
):
    state = SessionState(selected_currency=payload.currency, switch_from=payload.switch_from)
    result, next_state = recalculate(
        RecalcInput(**payload.model_dump(exclude={"switch_from"})),
        state,
        periods,
        period_formatter,
        currency_formatter,
    )
    return RecalcOut(**result.model_dump(), state=next_state)
