"""Recalculation flow behind the calculator form.

Takes the raw form input plus the caller's `SessionState`, and returns both
tables together with the next state. No module level state is kept: the
pending currency switch lives in the state object and is consumed here.

Steps:
    1. If a currency switch is pending and a price was typed, convert the price
       from the previous currency into the selected one (rounded to cents) and
       report it back as the new display price.
    2. amount = price * (count or 1); unparseable price gives 0. A price too large
       for a float (e.g. "1e400") is rejected with AmountOutOfRangeError.
    3. Run the period and currency calculators, then format both tables.
"""

from __future__ import annotations
import logging
import math
from typing import Sequence, Tuple

from costcalc.models.amounts import AmountWithCurrency, AmountWithPeriod
from costcalc.models.constants import BASIC_PERIODS, Currency, Period
from costcalc.models.recalc import RecalcInput, RecalcResult, SessionState
from .currency import calculate_by_currency, convert_to_currency
from .money import (
    AmountFormatter,
    ensure_finite,
    make_formatter,
    nan_to_zero,
    or_default,
    parse_decimal,
    round2,
)
from .periods import calculate_by_period

logger = logging.getLogger("costcalc.recalc")


def _price_text(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def switch_price(price: str, state: SessionState, target: Currency) -> str:
    if state.switch_from is None or not price:
        return price
    parsed = parse_decimal(price)
    if not math.isfinite(parsed):
        return price
    converted = round2(convert_to_currency(parsed, state.switch_from, target))
    logger.debug(
        "price switched",
        extra={"from": state.switch_from.value, "to": target.value, "price": converted},
    )
    return _price_text(converted)


def compute_amount(price: str, count: str) -> float:
    return nan_to_zero(parse_decimal(price) * or_default(parse_decimal(count), 1))


def recalculate(
    form: RecalcInput,
    state: SessionState,
    periods: Sequence[Period] = BASIC_PERIODS,
    period_formatter: AmountFormatter | None = None,
    currency_formatter: AmountFormatter | None = None,
) -> Tuple[RecalcResult, SessionState]:
    period_formatter = period_formatter or make_formatter(0)
    currency_formatter = currency_formatter or make_formatter(2)

    selected = form.currency
    price = switch_price(form.price, state, selected)
    amount = ensure_finite(compute_amount(price, form.count))

    by_period = calculate_by_period(AmountWithPeriod(amount=amount, period=form.period), periods)
    by_currency = calculate_by_currency(AmountWithCurrency(amount=amount, currency=selected))

    result = RecalcResult(
        price=price,
        amount=amount,
        period=form.period,
        currency=selected,
        by_period=by_period,
        by_currency=by_currency,
        formatted_by_period={p: period_formatter(v) for p, v in by_period.items()},
        formatted_by_currency={c: currency_formatter(v) for c, v in by_currency.items()},
    )
    next_state = SessionState(selected_currency=selected, switch_from=None)
    return result, next_state
