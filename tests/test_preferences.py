import pytest

from costcalc.core.errors import UnknownCurrencyError
from costcalc.models import Currency, DEFAULT_USED_CURRENCIES
from costcalc.models.constants import USED_CURRENCIES_KEY
from costcalc.services.preferences import (
    load_used_currencies,
    reset_used_currencies,
    set_used_currencies,
    toggle_used_currency,
)


def test_defaults_when_nothing_stored(db):
    assert load_used_currencies(db) == DEFAULT_USED_CURRENCIES
    assert db.get(USED_CURRENCIES_KEY) is None


def test_toggle_appends_and_persists(db):
    used = toggle_used_currency(db, "GBP")
    assert used == [Currency.EUR, Currency.USD, Currency.RUB, Currency.GBP]
    assert db.get(USED_CURRENCIES_KEY) == ["EUR", "USD", "RUB", "GBP"]
    assert load_used_currencies(db) == used


def test_toggle_removes_present_currency(db):
    assert toggle_used_currency(db, Currency.USD) == [Currency.EUR, Currency.RUB]


@pytest.mark.parametrize("currency", ["THB", "RUB"])
def test_double_toggle_restores_list(db, currency):
    before = load_used_currencies(db)
    toggle_used_currency(db, currency)
    assert toggle_used_currency(db, currency) == before


def test_double_toggle_moves_middle_entry_to_end(db):
    toggle_used_currency(db, "USD")
    assert toggle_used_currency(db, "USD") == [Currency.EUR, Currency.RUB, Currency.USD]
    assert load_used_currencies(db) == [Currency.EUR, Currency.RUB, Currency.USD]


def test_toggle_accepts_padded_codes(db):
    assert toggle_used_currency(db, " gel ") == [
        Currency.EUR,
        Currency.USD,
        Currency.RUB,
        Currency.GEL,
    ]


def test_toggle_never_duplicates(db):
    set_used_currencies(db, ["AMD"])
    toggle_used_currency(db, "AMD")
    toggle_used_currency(db, "AMD")
    assert load_used_currencies(db) == [Currency.AMD]


def test_list_may_become_empty(db):
    set_used_currencies(db, ["EUR"])
    assert toggle_used_currency(db, "EUR") == []
    assert load_used_currencies(db) == []


def test_stored_garbage_is_filtered(db):
    db.set(USED_CURRENCIES_KEY, ["USD", "XYZ", "USD", "KZT"])
    assert load_used_currencies(db) == [Currency.USD, Currency.KZT]
    db.set(USED_CURRENCIES_KEY, {"USD": True})
    assert load_used_currencies(db) == DEFAULT_USED_CURRENCIES
    db.set_raw(USED_CURRENCIES_KEY, "not json")
    assert load_used_currencies(db) == DEFAULT_USED_CURRENCIES


def test_set_and_reset(db):
    assert set_used_currencies(db, ["sar", "AED", "SAR"]) == [Currency.SAR, Currency.AED]
    assert reset_used_currencies(db) == DEFAULT_USED_CURRENCIES
    assert db.get(USED_CURRENCIES_KEY) is None
    assert db.get_raw(USED_CURRENCIES_KEY) is None


def test_unknown_currency_toggle_rejected(db):
    with pytest.raises(UnknownCurrencyError):
        toggle_used_currency(db, "XYZ")
    assert db.get(USED_CURRENCIES_KEY) is None
