"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, field_validator, model_validator
from typing import Dict, List, Optional
from datetime import date as dt_date, datetime
from decimal import Decimal
import enum
from tripsplit.core.utils import SETTLEMENT_TOLERANCE, normalize_currency


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    FOOD = "food"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    OTHER = "other"


class SplitType(str, enum.Enum):
    """How an expense's cost is divided among its participants."""
    EQUAL = "equal"
    CUSTOM = "custom"


class ExpenseBase(BaseModel):
    """Base expense schema."""
    description: str = ""
    amount: Decimal  # Amount in the expense's own currency
    currency: str
    payer_id: str
    date: dt_date
    category: ExpenseCategory = ExpenseCategory.OTHER
    participants: List[str] = []  # Member IDs who share this expense
    split_type: SplitType = SplitType.EQUAL
    custom_splits: Optional[Dict[str, Decimal]] = None  # member_id -> amount in the expense's currency

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return normalize_currency(v)


class ExpenseCreate(ExpenseBase):
    """
    Schema for expense creation.

    This is the data-entry boundary: the settlement engine trusts stored
    expenses, so split invariants are enforced here and nowhere else.
    """

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Amount must be positive")
        return v

    @field_validator("participants")
    @classmethod
    def participants_not_empty(cls, v: List[str]) -> List[str]:
        # Drop duplicates, keep first-seen order
        unique = list(dict.fromkeys(v))
        if not unique:
            raise ValueError("At least one participant is required")
        return unique

    @model_validator(mode="after")
    def check_custom_splits(self):
        if self.split_type == SplitType.EQUAL:
            self.custom_splits = None
            return self

        if not self.custom_splits:
            raise ValueError("custom_splits is required when split_type is 'custom'")

        unknown = [member_id for member_id in self.custom_splits if member_id not in self.participants]
        if unknown:
            raise ValueError(f"custom_splits references non-participants: {', '.join(unknown)}")

        if any(value < 0 for value in self.custom_splits.values()):
            raise ValueError("custom_splits amounts must not be negative")

        split_total = sum(self.custom_splits.values(), Decimal(0))
        if abs(split_total - self.amount) > SETTLEMENT_TOLERANCE:
            raise ValueError(
                f"custom_splits total {split_total} does not match amount {self.amount}"
            )
        return self


class ExpenseUpdate(BaseModel):
    """Schema for expense update."""
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    payer_id: Optional[str] = None
    date: Optional[dt_date] = None
    category: Optional[ExpenseCategory] = None
    participants: Optional[List[str]] = None
    split_type: Optional[SplitType] = None
    custom_splits: Optional[Dict[str, Decimal]] = None


class Expense(ExpenseBase):
    """Stored expense as handed to the settlement engine."""
    id: str
    trip_id: str
    amount_in_base_currency: Decimal  # Precomputed at write time
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ExpensePreviewRequest(BaseModel):
    """Schema for validating an expense against a trip's currency settings."""
    trip_id: str
    base_currency: str
    custom_rates: Dict[str, Decimal] = {}
    expense: ExpenseCreate

    @field_validator("base_currency")
    @classmethod
    def upper_base_currency(cls, v: str) -> str:
        return normalize_currency(v)
