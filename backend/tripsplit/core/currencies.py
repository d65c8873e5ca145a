"""
Static currency reference data.
"""
from decimal import Decimal
from typing import Dict, List

# Fallback rates with USD as the reference unit (1 USD = rate units of currency)
DEFAULT_RATES: Dict[str, Decimal] = {
    "USD": Decimal("1"),
    "HKD": Decimal("7.8"),
    "TWD": Decimal("32"),
    "JPY": Decimal("150"),
    "KRW": Decimal("1350"),
    "CNY": Decimal("7.2"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "THB": Decimal("35"),
    "SGD": Decimal("1.35"),
    "MYR": Decimal("4.7"),
    "VND": Decimal("24500"),
}

COMMON_CURRENCIES: List[Dict[str, str]] = [
    {"code": "HKD", "name": "Hong Kong Dollar", "symbol": "$"},
    {"code": "USD", "name": "US Dollar", "symbol": "$"},
    {"code": "TWD", "name": "New Taiwan Dollar", "symbol": "NT$"},
    {"code": "JPY", "name": "Japanese Yen", "symbol": "¥"},
    {"code": "KRW", "name": "South Korean Won", "symbol": "₩"},
    {"code": "CNY", "name": "Chinese Yuan", "symbol": "¥"},
    {"code": "EUR", "name": "Euro", "symbol": "€"},
    {"code": "GBP", "name": "British Pound", "symbol": "£"},
    {"code": "THB", "name": "Thai Baht", "symbol": "฿"},
    {"code": "SGD", "name": "Singapore Dollar", "symbol": "$"},
    {"code": "MYR", "name": "Malaysian Ringgit", "symbol": "RM"},
    {"code": "VND", "name": "Vietnamese Dong", "symbol": "₫"},
]

MEMBER_COLORS: List[str] = [
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEAA7",
    "#DDA0DD",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
    "#85C1E9",
]
