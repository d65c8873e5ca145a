"""
Caller-owned trip state.

A TripState holds one trip's members, expenses and rates and applies
mutations to it. The settlement engine only ever sees immutable snapshots
produced by snapshot(); nothing here is global.

This is a library entry point for callers that keep trip state in process.
The HTTP routes are stateless and take whole snapshots instead, so they do
not go through TripState.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Mapping
from uuid import uuid4
from tripsplit.core.currencies import MEMBER_COLORS
from tripsplit.core.utils import normalize_currency
from tripsplit.schemas.expense import Expense, ExpenseCreate, ExpenseUpdate
from tripsplit.schemas.member import Member, MemberCreate
from tripsplit.schemas.settlement import SettlementResponse
from tripsplit.schemas.trip import Trip, TripCreate
from tripsplit.services import expense_service
from tripsplit.services.settlement_service import calculate_settlement

logger = logging.getLogger(__name__)


class TripStateError(Exception):
    """Base error for invalid trip mutations."""


class MemberNotFoundError(TripStateError):
    """Raised when a member id is not part of the trip."""

    def __init__(self, member_id: str):
        super().__init__(f"Member not found: {member_id}")
        self.member_id = member_id


class ExpenseNotFoundError(TripStateError):
    """Raised when an expense id is not part of the trip."""

    def __init__(self, expense_id: str):
        super().__init__(f"Expense not found: {expense_id}")
        self.expense_id = expense_id


class DuplicateMemberError(TripStateError):
    """Raised when a member name is already taken within the trip."""

    def __init__(self, name: str):
        super().__init__(f"Member already exists: {name}")
        self.name = name


class TripState:
    """Mutable state of a single trip."""

    def __init__(self, trip: Trip):
        self._trip = trip.model_copy(deep=True)

    @classmethod
    def create(cls, data: TripCreate) -> "TripState":
        """Start a new, empty trip."""
        now = datetime.now(timezone.utc)
        trip = Trip(**data.model_dump(), id=uuid4().hex, created_at=now, updated_at=now)
        logger.info(f"Created trip {trip.id} ({trip.name}) in {trip.base_currency}")
        return cls(trip)

    @property
    def trip_id(self) -> str:
        return self._trip.id

    @property
    def members(self) -> List[Member]:
        return list(self._trip.members)

    @property
    def expenses(self) -> List[Expense]:
        return list(self._trip.expenses)

    def snapshot(self) -> Trip:
        """Return an independent copy of the current trip."""
        return self._trip.model_copy(deep=True)

    def settle(self) -> SettlementResponse:
        """Compute balances and transfers from the current state."""
        return calculate_settlement(self.snapshot())

    def get_member(self, member_id: str) -> Member:
        for member in self._trip.members:
            if member.id == member_id:
                return member
        raise MemberNotFoundError(member_id)

    def get_expense(self, expense_id: str) -> Expense:
        for expense in self._trip.expenses:
            if expense.id == expense_id:
                return expense
        raise ExpenseNotFoundError(expense_id)

    def add_member(self, data: MemberCreate) -> Member:
        """Add a member; a display color is assigned when none is given."""
        if any(m.name.lower() == data.name.lower() for m in self._trip.members):
            raise DuplicateMemberError(data.name)

        color = data.color or MEMBER_COLORS[len(self._trip.members) % len(MEMBER_COLORS)]
        member = Member(id=uuid4().hex, name=data.name, avatar=data.avatar, color=color)
        self._trip.members.append(member)
        self._touch()
        logger.info(f"Added member {member.id} ({member.name}) to trip {self._trip.id}")
        return member

    def remove_member(self, member_id: str) -> None:
        """
        Remove a member together with the expenses they paid for, and drop
        them from every other expense's participants and custom splits.
        """
        member = self.get_member(member_id)
        self._trip.members = [m for m in self._trip.members if m.id != member_id]

        updated = []
        for expense in self._trip.expenses:
            if expense.payer_id == member_id:
                continue
            if member_id in expense.participants or member_id in (expense.custom_splits or {}):
                custom_splits = None
                if expense.custom_splits is not None:
                    custom_splits = {mid: v for mid, v in expense.custom_splits.items() if mid != member_id}
                expense = expense.model_copy(update={
                    "participants": [pid for pid in expense.participants if pid != member_id],
                    "custom_splits": custom_splits,
                })
            updated.append(expense)
        self._trip.expenses = updated
        self._touch()
        logger.info(f"Removed member {member_id} ({member.name}) from trip {self._trip.id}")

    def add_expense(self, data: ExpenseCreate) -> Expense:
        """Record an expense; payer and participants must be current members."""
        self._check_members([data.payer_id, *data.participants])
        expense = expense_service.build_expense(
            self._trip.id, data, self._trip.base_currency, self._trip.custom_rates
        )
        self._trip.expenses.append(expense)
        self._touch()
        logger.info(
            f"Added expense {expense.id} to trip {self._trip.id}: "
            f"{expense.amount} {expense.currency} = {expense.amount_in_base_currency} {self._trip.base_currency}"
        )
        return expense

    def update_expense(self, expense_id: str, data: ExpenseUpdate) -> Expense:
        """Apply a partial update to an expense."""
        current = self.get_expense(expense_id)
        updated = expense_service.update_expense(
            current, data, self._trip.base_currency, self._trip.custom_rates
        )
        self._check_members([updated.payer_id, *updated.participants])
        self._trip.expenses = [updated if e.id == expense_id else e for e in self._trip.expenses]
        self._touch()
        logger.info(f"Updated expense {expense_id} in trip {self._trip.id}")
        return updated

    def delete_expense(self, expense_id: str) -> None:
        self.get_expense(expense_id)
        self._trip.expenses = [e for e in self._trip.expenses if e.id != expense_id]
        self._touch()
        logger.info(f"Deleted expense {expense_id} from trip {self._trip.id}")

    def set_custom_rates(self, rates: Mapping[str, Decimal]) -> None:
        """
        Replace the trip's custom rates (units of base currency per 1 unit
        of each currency) and recompute stored base amounts.
        """
        self._trip.custom_rates = {
            normalize_currency(code): Decimal(str(rate)) for code, rate in rates.items()
        }
        self._rebase_expenses()
        logger.info(f"Updated custom rates for trip {self._trip.id}: {sorted(self._trip.custom_rates)}")

    def set_base_currency(self, base_currency: str) -> None:
        """
        Change the base currency. Custom rates were expressed against the old
        base currency, so they are cleared.
        """
        base_currency = normalize_currency(base_currency)
        if base_currency == self._trip.base_currency:
            return
        old_currency = self._trip.base_currency
        self._trip.base_currency = base_currency
        self._trip.custom_rates = {}
        self._rebase_expenses()
        logger.info(f"Changed base currency of trip {self._trip.id}: {old_currency} -> {base_currency}")

    def _check_members(self, member_ids: List[str]) -> None:
        known = {m.id for m in self._trip.members}
        for member_id in member_ids:
            if member_id not in known:
                raise MemberNotFoundError(member_id)

    def _rebase_expenses(self) -> None:
        self._trip.expenses = [
            expense_service.rebase_expense(e, self._trip.base_currency, self._trip.custom_rates)
            for e in self._trip.expenses
        ]
        self._touch()

    def _touch(self) -> None:
        self._trip.updated_at = datetime.now(timezone.utc)
