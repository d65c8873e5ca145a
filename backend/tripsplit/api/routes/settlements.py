"""
Settlement calculation routes.

Each request carries a complete trip snapshot; results are computed fresh
and nothing is stored.
"""
from fastapi import APIRouter
from typing import List
from tripsplit.schemas.trip import Trip
from tripsplit.schemas.settlement import Balance, SettlementResponse, SettlementTransaction
from tripsplit.services.settlement_service import (
    calculate_all_balances, calculate_settlement, minimize_transactions
)

router = APIRouter(prefix="/settlement", tags=["settlement"])


@router.post("/calculate", response_model=SettlementResponse)
async def calculate_trip_settlement(trip: Trip):
    """Calculate balances, suggested transfers and a summary for a trip."""
    return calculate_settlement(trip)


@router.post("/balances", response_model=List[Balance])
async def get_trip_balances(trip: Trip):
    """Calculate each member's net balance in the trip's base currency."""
    return calculate_all_balances(trip)


@router.post("/transactions", response_model=List[SettlementTransaction])
async def get_settlement_transactions(balances: List[Balance]):
    """Suggest transfers that settle the given balances."""
    return minimize_transactions(balances)
