from typing import Dict, List, Sequence

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from costcalc.core.config import Settings
from costcalc.models import PERIOD_MULTIPLIERS, Period
from .deps import get_app_settings, get_periods

router = APIRouter(prefix="/periods", tags=["periods"])


class PeriodsOut(BaseModel):
    edition: str
    default: Period
    periods: List[Period]
    multipliers: Dict[Period, float]


@router.get("", response_model=PeriodsOut, summary="Periods of the configured edition")
async def list_periods(
    settings: Settings = Depends(get_app_settings),
    periods: Sequence[Period] = Depends(get_periods),
):
    return PeriodsOut(
        edition=settings.period_edition,
        default=Period(settings.default_period),
        periods=list(periods),
        multipliers={p: PERIOD_MULTIPLIERS[p] for p in periods},
    )
