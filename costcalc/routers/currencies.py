from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from costcalc.db.dal import Database
from costcalc.models import BASE_CURRENCY, CURRENCIES, CURRENCY_RATES, Currency
from costcalc.services.preferences import (
    load_used_currencies,
    reset_used_currencies,
    set_used_currencies,
    toggle_used_currency,
)
from .deps import get_db

"""Currency table and used currency preferences.

    - GET    /currencies                          -> base, rates, used list
    - POST   /currencies/used/{currency}/toggle   -> flip one currency
    - PUT    /currencies/used                     -> replace the list
    - DELETE /currencies/used                     -> restore defaults
"""

router = APIRouter(prefix="/currencies", tags=["currencies"])


class CurrencyOut(BaseModel):
    code: Currency
    rate: float
    used: bool


class CurrenciesOut(BaseModel):
    base: Currency
    currencies: List[CurrencyOut]
    used: List[Currency]


class UsedCurrenciesIn(BaseModel):
    currencies: List[Currency] = Field(..., description="Ordered currency codes to keep visible")


class UsedCurrenciesOut(BaseModel):
    used: List[Currency]


@router.get("", response_model=CurrenciesOut, summary="List currencies with static rates")
async def list_currencies(db: Database = Depends(get_db)):
    used = load_used_currencies(db)
    return CurrenciesOut(
        base=BASE_CURRENCY,
        currencies=[
            CurrencyOut(code=c, rate=CURRENCY_RATES[c], used=c in used) for c in CURRENCIES
        ],
        used=used,
    )


@router.post(
    "/used/{currency}/toggle",
    response_model=UsedCurrenciesOut,
    summary="Mark a currency used / unused",
)
async def toggle_currency(currency: str, db: Database = Depends(get_db)):
    return UsedCurrenciesOut(used=toggle_used_currency(db, currency))


@router.put("/used", response_model=UsedCurrenciesOut, summary="Replace used currencies")
async def replace_used(payload: UsedCurrenciesIn, db: Database = Depends(get_db)):
    return UsedCurrenciesOut(used=set_used_currencies(db, payload.currencies))


@router.delete("/used", response_model=UsedCurrenciesOut, summary="Restore default used currencies")
async def reset_used(db: Database = Depends(get_db)):
    return UsedCurrenciesOut(used=reset_used_currencies(db))
