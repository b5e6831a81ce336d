"""Period normalizer.

Turns an amount paid (or earned) every `period` into the equivalent amount for
every period of an edition, by annualizing it and dividing the yearly total by
each period's occurrences per year.

Anchor entries are never rounded:
    - the source period echoes the input amount;
    - `once` (when part of the edition) echoes the input amount;
    - `yearly` holds the annualized figure itself.
All other entries are rounded to whole numbers.
"""

from __future__ import annotations
import logging
from typing import Sequence

from costcalc.core.errors import UnknownPeriodError
from costcalc.models.amounts import AmountWithPeriod, ByPeriod, _normalize_period
from costcalc.models.constants import BASIC_PERIODS, PERIOD_MULTIPLIERS, Period
from .money import ensure_finite, round_to

logger = logging.getLogger("costcalc.periods")


def as_period(value: Period | str, periods: Sequence[Period] | None = None) -> Period:
    """Coerce to a Period, optionally requiring membership in `periods`."""
    try:
        period = Period(_normalize_period(value))
    except ValueError:
        raise UnknownPeriodError(value, periods) from None
    if periods is not None and period not in periods:
        raise UnknownPeriodError(value, periods)
    return period


def annualize(amount: float, period: Period | str) -> float:
    return amount * PERIOD_MULTIPLIERS[as_period(period)]


def amount_once(amount: float, periods: Sequence[Period] = BASIC_PERIODS) -> ByPeriod:
    return {p: amount for p in periods}


def calculate_by_period(
    entry: AmountWithPeriod, periods: Sequence[Period] = BASIC_PERIODS
) -> ByPeriod:
    period = as_period(entry.period, periods)
    amount = ensure_finite(entry.amount)
    if period is Period.ONCE:
        return amount_once(amount, periods)

    annualized = ensure_finite(annualize(amount, period), "annualized amount")
    results: ByPeriod = {
        p: round_to(annualized / PERIOD_MULTIPLIERS[p], 0) for p in periods
    }
    results[period] = amount
    if Period.ONCE in results:
        results[Period.ONCE] = amount
    if Period.YEARLY in results:
        results[Period.YEARLY] = annualized
    logger.debug(
        "period table computed",
        extra={"period": period.value, "amount": amount, "annualized": annualized},
    )
    return results
