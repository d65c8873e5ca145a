"""
Tests for currency conversion.
"""
import logging
import pytest
from decimal import Decimal
from tripsplit.services.fx_service import convert, convert_to_base, get_custom_rate, get_fallback_rate


@pytest.mark.parametrize("currency", ["USD", "HKD", "XYZ"])
def test_same_currency_is_identity(currency):
    """Converting to the same currency returns the amount unchanged."""
    amount = Decimal("123.45")
    assert convert(amount, currency, currency) == amount
    assert convert(amount, currency, currency, {currency: Decimal("9")}) == amount


def test_fallback_rates_go_through_usd():
    """Fallback conversion divides by the source rate and multiplies by the target rate."""
    assert convert(Decimal("92"), "EUR", "USD") == Decimal("100")
    assert convert(Decimal("78"), "HKD", "JPY") == Decimal("1500")


def test_custom_rate_takes_precedence():
    """A custom rate is used as a direct multiplier into the base currency."""
    rates = {"JPY": Decimal("0.052")}
    assert convert(Decimal("1000"), "JPY", "HKD", rates) == Decimal("52")


def test_custom_rate_codes_are_case_insensitive():
    """Lower-case codes match upper-case rate tables."""
    rates = {"EUR": Decimal("8.5")}
    assert convert(Decimal("2"), "eur", "hkd", rates) == Decimal("17")
    assert convert(Decimal("5"), "usd", "USD") == Decimal("5")


def test_non_positive_custom_rate_is_ignored():
    """A zero custom rate falls back to the static table."""
    rates = {"EUR": Decimal("0")}
    assert get_custom_rate("EUR", rates) is None
    assert convert(Decimal("92"), "EUR", "USD", rates) == Decimal("100")


def test_unknown_currency_converts_one_to_one(caplog):
    """Unknown currencies degrade to identity conversion and log a warning."""
    with caplog.at_level(logging.WARNING, logger="tripsplit.services.fx_service"):
        result = convert(Decimal("10"), "XYZ", "USD")

    assert result == Decimal("10")
    assert "XYZ" in caplog.text


def test_unknown_target_currency_converts_one_to_one(caplog):
    """A target currency missing from the fallback table also degrades to 1:1."""
    with caplog.at_level(logging.WARNING, logger="tripsplit.services.fx_service"):
        result = convert(Decimal("10"), "USD", "ABC")

    assert result == Decimal("10")
    assert "ABC" in caplog.text


def test_float_amounts_are_accepted():
    """Plain numbers are converted through their string form."""
    assert convert(9.2, "EUR", "USD") == Decimal("10")


def test_convert_to_base_and_lookups():
    """Helpers expose the same rate sources used by convert."""
    assert convert_to_base(Decimal("7.8"), "HKD", "USD") == Decimal("1")
    assert get_fallback_rate("krw") == Decimal("1350")
    assert get_fallback_rate("XYZ") is None
    assert get_custom_rate("JPY", None) is None
