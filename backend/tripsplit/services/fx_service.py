"""
Foreign exchange service for currency conversion.

Two rate sources are consulted, in order:

1. A trip's custom rates, where ``custom_rates[X]`` is how many units of the
   trip's base currency equal 1 unit of X.
2. The static fallback table ``DEFAULT_RATES`` (1 USD = rate units of X).

Conversion never raises. A currency found in neither source is treated as
already being in the target currency, and a warning is logged.
"""
from decimal import Decimal
from typing import Mapping, Optional
import logging
from tripsplit.core.currencies import DEFAULT_RATES
from tripsplit.core.utils import normalize_currency

logger = logging.getLogger(__name__)


def get_fallback_rate(currency: str) -> Optional[Decimal]:
    """Get the static rate for a currency (1 USD = rate currency), or None."""
    return DEFAULT_RATES.get(normalize_currency(currency))


def get_custom_rate(currency: str, custom_rates: Optional[Mapping[str, Decimal]]) -> Optional[Decimal]:
    """
    Get a trip's custom rate for a currency.

    Non-positive rates are ignored, the same as a missing entry.
    """
    if not custom_rates:
        return None
    rate = custom_rates.get(normalize_currency(currency))
    if rate is None:
        # Tolerate tables built with lower-case codes
        rate = custom_rates.get(currency)
    if rate is None:
        return None
    rate = Decimal(str(rate))
    if rate <= 0:
        return None
    return rate


def convert(
    amount: Decimal,
    from_currency: str,
    to_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None
) -> Decimal:
    """
    Convert amount from one currency to another.

    Args:
        amount: Amount in the source currency
        from_currency: Source currency code
        to_currency: Target currency code (the base currency custom_rates was built for)
        custom_rates: Optional trip rates (1 from_currency = rate to_currency)

    Returns:
        Amount in the target currency
    """
    from_upper = normalize_currency(from_currency)
    to_upper = normalize_currency(to_currency)

    if from_upper == to_upper:
        return amount

    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))

    custom_rate = get_custom_rate(from_upper, custom_rates)
    if custom_rate is not None:
        return amount * custom_rate

    from_rate = get_fallback_rate(from_upper)
    to_rate = get_fallback_rate(to_upper)
    if from_rate is None or to_rate is None:
        missing = from_upper if from_rate is None else to_upper
        logger.warning(
            f"No exchange rate for {missing}; treating {from_upper} -> {to_upper} as 1:1"
        )
        return amount

    # Go through the USD reference unit
    return amount / from_rate * to_rate


def convert_to_base(
    amount: Decimal,
    currency: str,
    base_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None
) -> Decimal:
    """Convert amount from currency to a trip's base currency."""
    return convert(amount, currency, base_currency, custom_rates)
