"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from datetime import date as dt_date, datetime
from decimal import Decimal
from tripsplit.core.config import settings
from tripsplit.core.utils import normalize_currency
from tripsplit.schemas.member import Member
from tripsplit.schemas.expense import Expense


class TripBase(BaseModel):
    """Base trip schema."""
    name: str
    start_date: Optional[dt_date] = None
    end_date: Optional[dt_date] = None
    base_currency: str = Field(default_factory=lambda: settings.DEFAULT_BASE_CURRENCY)
    enabled_currencies: List[str] = []
    # customRates[X] = units of base currency per 1 unit of X
    custom_rates: Dict[str, Decimal] = {}

    @field_validator("base_currency")
    @classmethod
    def upper_base_currency(cls, v: str) -> str:
        return normalize_currency(v)

    @field_validator("enabled_currencies")
    @classmethod
    def upper_enabled_currencies(cls, v: List[str]) -> List[str]:
        return [normalize_currency(code) for code in v]

    @field_validator("custom_rates")
    @classmethod
    def upper_rate_codes(cls, v: Dict[str, Decimal]) -> Dict[str, Decimal]:
        return {normalize_currency(code): rate for code, rate in v.items()}


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class Trip(TripBase):
    """Snapshot of a trip's members, expenses and rates."""
    id: str
    members: List[Member] = []
    expenses: List[Expense] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
