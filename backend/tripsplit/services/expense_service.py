"""
Expense service for expense-related business logic.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Mapping, Optional
from uuid import uuid4
from tripsplit.schemas.expense import Expense, ExpenseCreate, ExpenseUpdate
from tripsplit.services.fx_service import convert_to_base


def _now() -> datetime:
    return datetime.now(timezone.utc)


def build_expense(
    trip_id: str,
    data: ExpenseCreate,
    base_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None
) -> Expense:
    """Create an expense from validated input and precompute its base-currency amount."""
    now = _now()
    amount_base = convert_to_base(data.amount, data.currency, base_currency, custom_rates)
    return Expense(
        **data.model_dump(),
        id=uuid4().hex,
        trip_id=trip_id,
        amount_in_base_currency=amount_base,
        created_at=now,
        updated_at=now
    )


def update_expense(
    expense: Expense,
    data: ExpenseUpdate,
    base_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None
) -> Expense:
    """
    Apply a partial update to an expense.

    The merged result goes through ExpenseCreate again, so an update can't
    break the split invariants. Raises pydantic.ValidationError if it would.
    """
    merged = expense.model_dump(include=set(ExpenseCreate.model_fields))
    merged.update(data.model_dump(exclude_unset=True))
    validated = ExpenseCreate(**merged)

    return Expense(
        **validated.model_dump(),
        id=expense.id,
        trip_id=expense.trip_id,
        amount_in_base_currency=convert_to_base(validated.amount, validated.currency, base_currency, custom_rates),
        created_at=expense.created_at,
        updated_at=_now()
    )


def rebase_expense(
    expense: Expense,
    base_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None
) -> Expense:
    """Recompute the stored base-currency amount after a base currency or rate change."""
    amount_base = convert_to_base(expense.amount, expense.currency, base_currency, custom_rates)
    return expense.model_copy(update={"amount_in_base_currency": amount_base})
