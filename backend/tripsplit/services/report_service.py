"""
Expense totals and breakdowns in a trip's base currency.
"""
from typing import Dict, List
from datetime import date
from decimal import Decimal
from tripsplit.schemas.expense import Expense, ExpenseCategory


def calculate_total_expenses(expenses: List[Expense]) -> Decimal:
    """Sum of all expenses in base currency."""
    return sum((expense.amount_in_base_currency for expense in expenses), Decimal(0))


def calculate_expenses_by_category(expenses: List[Expense]) -> Dict[ExpenseCategory, Decimal]:
    """Totals per category, in order of first appearance."""
    result: Dict[ExpenseCategory, Decimal] = {}
    for expense in expenses:
        result[expense.category] = result.get(expense.category, Decimal(0)) + expense.amount_in_base_currency
    return result


def calculate_expenses_by_date(expenses: List[Expense]) -> Dict[date, Decimal]:
    """Totals per calendar day, oldest first."""
    result: Dict[date, Decimal] = {}
    for expense in sorted(expenses, key=lambda e: e.date):
        result[expense.date] = result.get(expense.date, Decimal(0)) + expense.amount_in_base_currency
    return result
