"""
Utility functions for the application.
"""
from typing import Any, Dict
from decimal import Decimal

# Balances and amounts within this distance of each other are treated as equal
SETTLEMENT_TOLERANCE = Decimal("0.01")


def normalize_currency(code: str) -> str:
    """Normalize a currency code to its upper-cased, stripped form."""
    return code.strip().upper()


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
