"""
Pydantic schemas for Settlement results.
"""
from pydantic import BaseModel
from typing import List, Dict
from decimal import Decimal


class Balance(BaseModel):
    """Net position of one member, in the trip's base currency."""
    member_id: str
    member_name: str
    total_paid: Decimal
    total_owed: Decimal
    balance: Decimal  # positive = should receive, negative = owes


class SettlementTransaction(BaseModel):
    """Schema for a single suggested transfer between members."""
    from_id: str
    from_name: str
    to_id: str
    to_name: str
    amount: Decimal  # Transfer amount in trip's base currency


class SettlementResponse(BaseModel):
    """Schema for settlement calculation response."""
    trip_id: str
    base_currency: str
    balances: List[Balance]
    transactions: List[SettlementTransaction]
    total_expenses_base: Decimal
    expenses_by_category: Dict[str, Decimal]
    expenses_by_date: Dict[str, Decimal]
    summary: str
