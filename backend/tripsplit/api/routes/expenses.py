"""
Expense entry routes.
"""
import logging
from fastapi import APIRouter, status
from tripsplit.schemas.expense import Expense, ExpensePreviewRequest
from tripsplit.services.expense_service import build_expense

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("/preview", response_model=Expense, status_code=status.HTTP_200_OK)
async def preview_expense(request: ExpensePreviewRequest):
    """
    Validate a new expense and return it as it would be stored,
    with its amount converted to the trip's base currency.
    """
    expense = build_expense(
        request.trip_id,
        request.expense,
        request.base_currency,
        request.custom_rates
    )
    logger.info(
        f"Previewed expense for trip {request.trip_id}: "
        f"{expense.amount} {expense.currency} = {expense.amount_in_base_currency} {request.base_currency}"
    )
    return expense
