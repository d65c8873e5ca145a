"""
Tests for API endpoints.
"""
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from tripsplit.main import app

client = TestClient(app)

NOW = "2024-05-01T12:00:00Z"


def trip_payload():
    return {
        "id": "trip-1",
        "name": "Lisbon",
        "base_currency": "USD",
        "members": [
            {"id": "a", "name": "Alice"},
            {"id": "b", "name": "Bob"},
            {"id": "c", "name": "Carol"},
        ],
        "expenses": [
            {
                "id": "e1",
                "trip_id": "trip-1",
                "description": "Apartment",
                "amount": "300",
                "currency": "USD",
                "amount_in_base_currency": "300",
                "payer_id": "a",
                "date": "2024-05-01",
                "category": "accommodation",
                "participants": ["a", "b", "c"],
                "split_type": "equal",
                "created_at": NOW,
                "updated_at": NOW,
            }
        ],
    }


def test_health():
    """Test health check endpoints."""
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


def test_calculate_settlement():
    """Test full settlement calculation for a trip snapshot."""
    response = client.post("/api/settlement/calculate", json=trip_payload())
    assert response.status_code == 200

    data = response.json()
    assert data["base_currency"] == "USD"
    assert Decimal(data["total_expenses_base"]) == Decimal("300")
    assert [Decimal(b["balance"]) for b in data["balances"]] == [
        Decimal("200"), Decimal("-100"), Decimal("-100")
    ]
    transfers = {(t["from_id"], t["to_id"], Decimal(t["amount"])) for t in data["transactions"]}
    assert transfers == {("b", "a", Decimal("100")), ("c", "a", Decimal("100"))}
    assert "Bob -> Alice: USD 100.00" in data["summary"]


def test_balances_then_transactions():
    """Test that balances can be fed back into the transaction endpoint."""
    balances = client.post("/api/settlement/balances", json=trip_payload())
    assert balances.status_code == 200

    response = client.post("/api/settlement/transactions", json=balances.json())
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_calculate_settlement_invalid_snapshot():
    """Test that malformed snapshots are rejected with the error format."""
    payload = trip_payload()
    del payload["members"][0]["name"]

    response = client.post("/api/settlement/calculate", json=payload)

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request"


def test_convert_amount():
    """Test conversion with fallback rates."""
    response = client.get(
        "/api/fx-rates/convert",
        params={"amount": "92", "from_currency": "eur", "to_currency": "usd"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["from_currency"] == "EUR"
    assert Decimal(data["converted_amount"]) == Decimal("100")


def test_convert_negative_amount():
    """Test that negative amounts are rejected."""
    response = client.get(
        "/api/fx-rates/convert",
        params={"amount": "-1", "from_currency": "EUR", "to_currency": "USD"}
    )
    assert response.status_code == 400


def test_default_rates():
    """Test listing of fallback rates."""
    data = client.get("/api/fx-rates/defaults").json()
    assert data["reference_currency"] == "USD"
    assert Decimal(data["rates"]["EUR"]) == Decimal("0.92")
    assert any(c["code"] == "HKD" for c in data["currencies"])


def test_preview_expense():
    """Test expense preview computes the base amount."""
    response = client.post(
        "/api/expenses/preview",
        json={
            "trip_id": "trip-1",
            "base_currency": "HKD",
            "custom_rates": {"JPY": "0.05"},
            "expense": {
                "description": "Ramen",
                "amount": "2000",
                "currency": "JPY",
                "payer_id": "a",
                "date": "2024-05-01",
                "category": "food",
                "participants": ["a", "b"],
            },
        }
    )
    assert response.status_code == 200
    data = response.json()
    assert data["trip_id"] == "trip-1"
    assert Decimal(data["amount_in_base_currency"]) == Decimal("100")


def test_preview_expense_bad_custom_split():
    """Test that custom splits must add up to the amount."""
    response = client.post(
        "/api/expenses/preview",
        json={
            "trip_id": "trip-1",
            "base_currency": "USD",
            "expense": {
                "amount": "100",
                "currency": "USD",
                "payer_id": "a",
                "date": "2024-05-01",
                "participants": ["a", "b"],
                "split_type": "custom",
                "custom_splits": {"a": "10", "b": "10"},
            },
        }
    )
    assert response.status_code == 422
    assert "details" in response.json()
