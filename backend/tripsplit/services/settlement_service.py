"""
Settlement service: member balances and debt minimization.

Everything here is a pure function of the snapshot passed in. Results are
recomputed on every call and never stored.
"""
from typing import Dict, List, Mapping, Optional, Set
from decimal import Decimal
from tripsplit.core.utils import SETTLEMENT_TOLERANCE
from tripsplit.schemas.expense import Expense, SplitType
from tripsplit.schemas.member import Member
from tripsplit.schemas.settlement import Balance, SettlementResponse, SettlementTransaction
from tripsplit.schemas.trip import Trip
from tripsplit.services.fx_service import convert_to_base
from tripsplit.services import report_service


def calculate_member_balance(
    member: Member,
    expenses: List[Expense],
    base_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None,
    member_ids: Optional[Set[str]] = None
) -> Balance:
    """
    Calculate what a member paid and owes across all expenses.

    Participants missing from member_ids (members deleted after the expense
    was recorded) are left out of the split. An equal split is spread over
    the remaining participants; the payer gets no extra credit for the
    removed share.
    """
    total_paid = Decimal(0)
    total_owed = Decimal(0)

    for expense in expenses:
        amount_base = convert_to_base(expense.amount, expense.currency, base_currency, custom_rates)

        if expense.payer_id == member.id:
            total_paid += amount_base

        if member_ids is not None:
            valid_participants = [pid for pid in expense.participants if pid in member_ids]
        else:
            valid_participants = list(expense.participants)

        if member.id not in valid_participants:
            continue

        if expense.split_type == SplitType.EQUAL:
            total_owed += amount_base / len(valid_participants)
        else:
            # A participant without a custom amount owes nothing for this expense
            custom_amount = (expense.custom_splits or {}).get(member.id)
            if custom_amount is not None:
                total_owed += convert_to_base(custom_amount, expense.currency, base_currency, custom_rates)

    return Balance(
        member_id=member.id,
        member_name=member.name,
        total_paid=total_paid,
        total_owed=total_owed,
        balance=total_paid - total_owed
    )


def calculate_balances(
    members: List[Member],
    expenses: List[Expense],
    base_currency: str,
    custom_rates: Optional[Mapping[str, Decimal]] = None
) -> List[Balance]:
    """Calculate one Balance per member, in the order of members."""
    member_ids = {member.id for member in members}
    return [
        calculate_member_balance(member, expenses, base_currency, custom_rates, member_ids)
        for member in members
    ]


def calculate_all_balances(trip: Trip) -> List[Balance]:
    """Calculate balances for every member of a trip snapshot."""
    return calculate_balances(trip.members, trip.expenses, trip.base_currency, trip.custom_rates)


def minimize_transactions(balances: List[Balance]) -> List[SettlementTransaction]:
    """
    Suggest transfers that settle all balances.

    Greedy matching of the largest remaining debtor with the largest
    remaining creditor. Usually yields the fewest transfers but is not
    guaranteed to be optimal.
    """
    # Separate debtors (negative balance) and creditors (positive balance)
    debtors = [
        {"id": b.member_id, "name": b.member_name, "amount": -b.balance}
        for b in balances if b.balance < -SETTLEMENT_TOLERANCE
    ]
    creditors = [
        {"id": b.member_id, "name": b.member_name, "amount": b.balance}
        for b in balances if b.balance > SETTLEMENT_TOLERANCE
    ]

    # Sort in descending order
    debtors.sort(key=lambda x: x["amount"], reverse=True)
    creditors.sort(key=lambda x: x["amount"], reverse=True)

    transactions = []
    debt_idx = 0
    cred_idx = 0

    while debt_idx < len(debtors) and cred_idx < len(creditors):
        debtor = debtors[debt_idx]
        creditor = creditors[cred_idx]

        # Transfer the minimum of what's owed and what's needed
        settle_amount = min(debtor["amount"], creditor["amount"])
        if settle_amount > SETTLEMENT_TOLERANCE:
            transactions.append(SettlementTransaction(
                from_id=debtor["id"],
                from_name=debtor["name"],
                to_id=creditor["id"],
                to_name=creditor["name"],
                amount=settle_amount
            ))

        debtor["amount"] -= settle_amount
        creditor["amount"] -= settle_amount

        if debtor["amount"] < SETTLEMENT_TOLERANCE:
            debt_idx += 1
        if creditor["amount"] < SETTLEMENT_TOLERANCE:
            cred_idx += 1

    return transactions


def generate_settlement_summary(
    trip_name: str,
    base_currency: str,
    balances: List[Balance],
    transactions: List[SettlementTransaction]
) -> str:
    """Render balances and suggested transfers as plain text."""
    summary_lines = [f"[{trip_name} settlement]", "", "Balances:"]
    for balance in balances:
        if abs(balance.balance) <= SETTLEMENT_TOLERANCE:
            summary_lines.append(f"  {balance.member_name}: settled")
            continue
        direction = "receives" if balance.balance > 0 else "pays"
        summary_lines.append(
            f"  {balance.member_name}: {direction} {base_currency} {abs(balance.balance):.2f}"
        )

    summary_lines.append("")
    summary_lines.append("Transfers:")
    if not transactions:
        summary_lines.append("  All settled, no transfers needed.")
    for transaction in transactions:
        summary_lines.append(
            f"  {transaction.from_name} -> {transaction.to_name}: "
            f"{base_currency} {transaction.amount:.2f}"
        )
    return "\n".join(summary_lines)


def calculate_settlement(trip: Trip) -> SettlementResponse:
    """
    Calculate the full settlement view for a trip snapshot:
    balances, transfers, expense totals and a text summary.
    """
    balances = calculate_all_balances(trip)
    transactions = minimize_transactions(balances)

    by_category: Dict[str, Decimal] = {
        category.value: total
        for category, total in report_service.calculate_expenses_by_category(trip.expenses).items()
    }
    by_date: Dict[str, Decimal] = {
        day.isoformat(): total
        for day, total in report_service.calculate_expenses_by_date(trip.expenses).items()
    }

    return SettlementResponse(
        trip_id=trip.id,
        base_currency=trip.base_currency,
        balances=balances,
        transactions=transactions,
        total_expenses_base=report_service.calculate_total_expenses(trip.expenses),
        expenses_by_category=by_category,
        expenses_by_date=by_date,
        summary=generate_settlement_summary(trip.name, trip.base_currency, balances, transactions)
    )
