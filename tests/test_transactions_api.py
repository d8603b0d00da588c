"""HTTP tests for /api/transactions endpoints."""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

import backend.api as transactions_api
from backend.factory import build_transaction_service


TODAY = date(2025, 1, 10)


@pytest.fixture
def client(monkeypatch) -> TestClient:
    service = build_transaction_service(today=TODAY)
    monkeypatch.setattr(transactions_api, "get_transaction_service", lambda: service)
    return TestClient(transactions_api.app)


def _lunch(amount: float = 20.0) -> dict[str, object]:
    return {"type": "EXPENSE", "amount": amount, "description": "Lunch", "date": TODAY.isoformat()}


def test_health_returns_ok(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "transactions": 3}


def test_list_returns_seed_records(client: TestClient) -> None:
    response = client.get("/api/transactions")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "type": "INCOME", "amount": 1500.0, "description": "Salary", "date": "2025-01-09"},
        {"id": 2, "type": "EXPENSE", "amount": 75.5, "description": "Groceries", "date": "2025-01-09"},
        {"id": 3, "type": "EXPENSE", "amount": 12.0, "description": "Coffee", "date": "2025-01-10"},
    ]


def test_list_with_empty_type_returns_everything(client: TestClient) -> None:
    response = client.get("/api/transactions", params={"type": ""})

    assert response.status_code == 200
    assert [row["id"] for row in response.json()] == [1, 2, 3]


def test_list_with_unknown_type_returns_empty_array(client: TestClient) -> None:
    response = client.get("/api/transactions", params={"type": "transfer"})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("type_filter", ["  ", " income ", "expense "])
def test_list_with_padded_type_returns_empty_array(client: TestClient, type_filter: str) -> None:
    response = client.get("/api/transactions", params={"type": type_filter})

    assert response.status_code == 200
    assert response.json() == []


def test_create_accepts_null_and_missing_fields(client: TestClient) -> None:
    with_nulls = client.post(
        "/api/transactions",
        json={"type": "INCOME", "amount": 5.0, "description": None, "date": None},
    )
    empty = client.post("/api/transactions", json={})

    assert with_nulls.status_code == 201
    assert with_nulls.json() == {"id": 4, "type": "INCOME", "amount": 5.0, "description": None, "date": None}
    assert empty.status_code == 201
    assert empty.json() == {"id": 5, "type": None, "amount": 0.0, "description": None, "date": None}
    assert [row["id"] for row in client.get("/api/transactions", params={"type": "income"}).json()] == [1, 4]


def test_update_with_missing_fields_clears_them(client: TestClient) -> None:
    response = client.put("/api/transactions/1", json={"amount": 10.0})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "type": None, "amount": 10.0, "description": None, "date": None}


def test_update_replaces_type_description_and_date_together(client: TestClient) -> None:
    response = client.put(
        "/api/transactions/2",
        json={"type": "INCOME", "amount": 80.0, "description": "Refund", "date": "2024-12-31"},
    )

    expected = {"id": 2, "type": "INCOME", "amount": 80.0, "description": "Refund", "date": "2024-12-31"}
    assert response.status_code == 200
    assert response.json() == expected
    assert client.get("/api/transactions/2").json() == expected
    assert [row["id"] for row in client.get("/api/transactions").json()] == [1, 2, 3]


def test_create_ignores_client_supplied_id(client: TestClient) -> None:
    response = client.post("/api/transactions", json={**_lunch(), "id": 1})

    assert response.status_code == 201
    assert response.json()["id"] == 4
    assert client.get("/api/transactions/1").json()["description"] == "Salary"


def test_update_ignores_body_id(client: TestClient) -> None:
    response = client.put("/api/transactions/3", json={**_lunch(), "id": 77})

    assert response.status_code == 200
    assert response.json()["id"] == 3
    assert client.get("/api/transactions/77").status_code == 404


@pytest.mark.parametrize(
    ("method", "path", "body"),
    [
        ("GET", "/api/transactions/99", None),
        ("PUT", "/api/transactions/99", _lunch()),
        ("DELETE", "/api/transactions/99", None),
    ],
)
def test_missing_transaction_returns_empty_404(client: TestClient, method: str, path: str, body) -> None:
    response = client.request(method, path, json=body)

    assert response.status_code == 404
    assert response.content == b""


def test_failed_update_leaves_store_unchanged(client: TestClient) -> None:
    before = client.get("/api/transactions").json()

    client.put("/api/transactions/99", json=_lunch())

    assert client.get("/api/transactions").json() == before


def test_non_integer_id_is_rejected_by_request_validation(client: TestClient) -> None:
    response = client.get("/api/transactions/abc")

    assert response.status_code == 422


def test_end_to_end_crud_scenario(client: TestClient) -> None:
    created = client.post("/api/transactions", json=_lunch())
    assert created.status_code == 201
    assert created.json() == {**_lunch(), "id": 4}

    fetched = client.get("/api/transactions/4")
    assert fetched.status_code == 200
    assert fetched.json() == created.json()

    updated = client.put("/api/transactions/4", json=_lunch(amount=25.0))
    assert updated.status_code == 200
    assert updated.json()["amount"] == 25.0
    assert updated.json()["id"] == 4

    deleted = client.delete("/api/transactions/2")
    assert deleted.status_code == 204
    assert deleted.content == b""

    assert client.get("/api/transactions/2").status_code == 404
    assert client.delete("/api/transactions/2").status_code == 404

    expenses = client.get("/api/transactions", params={"type": "expense"})
    assert expenses.status_code == 200
    assert [(row["id"], row["description"]) for row in expenses.json()] == [(3, "Coffee"), (4, "Lunch")]

    recreated = client.post("/api/transactions", json=_lunch())
    assert recreated.json()["id"] == 5
