"""
Pydantic schemas for currency conversion.
"""
from pydantic import BaseModel
from typing import Dict, List
from decimal import Decimal


class CurrencyInfo(BaseModel):
    """Schema for a supported currency."""
    code: str
    name: str
    symbol: str


class DefaultRatesResponse(BaseModel):
    """Schema for the static fallback rate table."""
    reference_currency: str = "USD"
    rates: Dict[str, Decimal]  # 1 reference_currency = rate units of currency
    currencies: List[CurrencyInfo]


class ConversionResponse(BaseModel):
    """Schema for a single conversion result."""
    amount: Decimal
    from_currency: str
    to_currency: str
    converted_amount: Decimal
