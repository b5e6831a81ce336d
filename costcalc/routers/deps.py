from typing import Sequence

from fastapi import Request

from costcalc.core.config import Settings
from costcalc.db.dal import Database
from costcalc.models.constants import PERIOD_EDITIONS, Period
from costcalc.services.money import AmountFormatter, make_formatter


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    settings = get_app_settings(request)
    return Database(settings.db_path)


def get_periods(request: Request) -> Sequence[Period]:
    return PERIOD_EDITIONS[get_app_settings(request).period_edition]


def get_period_formatter(request: Request) -> AmountFormatter:
    return make_formatter(get_app_settings(request).period_decimals)


def get_currency_formatter(request: Request) -> AmountFormatter:
    return make_formatter(get_app_settings(request).currency_decimals)
