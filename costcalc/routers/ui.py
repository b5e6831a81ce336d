from pathlib import Path
from typing import Optional, Sequence

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from costcalc.core.config import Settings
from costcalc.db.dal import Database
from costcalc.models import CURRENCIES, Currency, Period, RecalcInput, SessionState
from costcalc.services.money import AmountFormatter
from costcalc.services.preferences import load_used_currencies
from costcalc.services.recalc import recalculate
from .deps import (
    get_app_settings,
    get_currency_formatter,
    get_db,
    get_period_formatter,
    get_periods,
)

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@router.get("/ui", response_class=HTMLResponse)
async def ui_home(
    request: Request,
    price: str = Query("", description="Typed price, ',' or '.' decimals"),
    count: str = Query("", description="Optional multiplier"),
    period: Optional[Period] = Query(None),
    currency: Currency = Query(Currency.EUR),
    switch_from: Optional[Currency] = Query(
        None, description="Previous currency; converts the price into `currency`"
    ),
    settings: Settings = Depends(get_app_settings),
    periods: Sequence[Period] = Depends(get_periods),
    period_formatter: AmountFormatter = Depends(get_period_formatter),
    currency_formatter: AmountFormatter = Depends(get_currency_formatter),
    db: Database = Depends(get_db),
):
    selected_period = period or Period(settings.default_period)
    result, state = recalculate(
        RecalcInput(price=price, count=count, period=selected_period, currency=currency),
        SessionState(selected_currency=currency, switch_from=switch_from),
        periods,
        period_formatter,
        currency_formatter,
    )
    context = {
        "app_name": settings.app_name,
        "result": result,
        "count": count,
        "periods": periods,
        "currencies": CURRENCIES,
        "used_currencies": load_used_currencies(db),
        "state": state,
    }
    return templates.TemplateResponse(request, "calculator.html", context)
