"""
Shared fixtures for settlement tests.
"""
import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4
from tripsplit.schemas.expense import Expense
from tripsplit.schemas.member import Member

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def members():
    """Three members: Alice (a), Bob (b) and Carol (c)."""
    return [
        Member(id="a", name="Alice"),
        Member(id="b", name="Bob"),
        Member(id="c", name="Carol"),
    ]


@pytest.fixture
def make_expense():
    """Factory for stored expenses; amount_in_base_currency defaults to amount."""
    def _make_expense(
        amount,
        payer_id,
        participants,
        currency="USD",
        split_type="equal",
        custom_splits=None,
        category="other",
        expense_date=date(2024, 5, 1),
        amount_in_base=None
    ):
        return Expense(
            id=uuid4().hex,
            trip_id="trip-1",
            description="test expense",
            amount=Decimal(str(amount)),
            currency=currency,
            amount_in_base_currency=Decimal(str(amount_in_base if amount_in_base is not None else amount)),
            payer_id=payer_id,
            date=expense_date,
            category=category,
            participants=participants,
            split_type=split_type,
            custom_splits=custom_splits,
            created_at=NOW,
            updated_at=NOW
        )
    return _make_expense
