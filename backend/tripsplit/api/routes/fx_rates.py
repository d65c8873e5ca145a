"""
Foreign exchange rates routes.
"""
from fastapi import APIRouter, HTTPException, status
from decimal import Decimal
from tripsplit.core.currencies import COMMON_CURRENCIES, DEFAULT_RATES
from tripsplit.core.utils import normalize_currency
from tripsplit.schemas.exchange_rate import ConversionResponse, DefaultRatesResponse
from tripsplit.services.fx_service import convert

router = APIRouter(prefix="/fx-rates", tags=["fx-rates"])


@router.get("/defaults", response_model=DefaultRatesResponse)
async def get_default_rates():
    """Get the static fallback rates and the list of supported currencies."""
    return DefaultRatesResponse(rates=DEFAULT_RATES, currencies=COMMON_CURRENCIES)


@router.get("/convert", response_model=ConversionResponse)
async def convert_amount(
    amount: Decimal,
    from_currency: str,
    to_currency: str
):
    """Convert an amount using the static fallback rates.

    Unknown currencies are converted 1:1 rather than rejected.
    """
    if amount < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="amount must not be negative"
        )

    return ConversionResponse(
        amount=amount,
        from_currency=normalize_currency(from_currency),
        to_currency=normalize_currency(to_currency),
        converted_amount=convert(amount, from_currency, to_currency)
    )
