from datetime import date
from decimal import Decimal

import pytest

from expense_api import __version__
from expense_api.api.v1.deps import get_today
from expense_api.main import app


def _category(client, headers, name="Food") -> int:
    r = client.post("/api/categories", json={"name": name}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _txn_json(category_id, amount="10.00", day="2026-01-15", type_="EXPENSE", description=None):
    body = {"amount": amount, "date": day, "type": type_, "categoryId": category_id}
    if description is not None:
        body["description"] = description
    return body


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["version"] == __version__
    assert "X-Request-ID" in r.headers


def test_register_conflict_and_login(client):
    body = {"name": "Alice", "email": "alice@mail.com", "password": "secret123"}
    r = client.post("/api/auth/register", json=body)
    assert r.status_code == 201
    assert r.json()["message"]
    user_id = r.json()["id"]

    assert client.post("/api/auth/register", json=body).status_code == 409

    r = client.post("/api/auth/login", json={"email": "alice@mail.com", "password": "secret123"})
    assert r.status_code == 200
    data = r.json()
    assert data["type"] == "Bearer"
    assert (data["id"], data["name"], data["email"]) == (user_id, "Alice", "alice@mail.com")
    assert "hashedPassword" not in data and "hashed_password" not in data

    r = client.post("/api/auth/login", json={"email": "alice@mail.com", "password": "wrong-pass"})
    assert r.status_code == 401


def test_register_validation_is_400(client):
    r = client.post("/api/auth/register", json={"name": "A", "email": "not-an-email", "password": "secret123"})
    assert r.status_code == 400
    r = client.post("/api/auth/register", json={"name": "A", "email": "a@mail.com", "password": "123"})
    assert r.status_code == 400


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer garbage"}, {"Authorization": "Basic abc"}])
def test_protected_routes_need_a_valid_token(client, headers):
    for path in ("/api/categories", "/api/transactions", "/api/dashboard/balance"):
        assert client.get(path, headers=headers).status_code == 401


def test_categories_scoped_per_user(client, auth_headers):
    alice = auth_headers("alice@mail.com")
    bob = auth_headers("bob@mail.com", name="Bob")

    food_id = _category(client, alice, "Food")
    r = client.post("/api/categories", json={"name": "Food"}, headers=alice)
    assert r.status_code == 409
    _category(client, bob, "Food")

    r = client.get("/api/categories", headers=alice)
    assert r.status_code == 200
    assert r.json() == [{"id": food_id, "name": "Food"}]

    assert client.get(f"/api/categories/{food_id}", headers=bob).status_code == 404


def test_delete_category_policy(client, auth_headers):
    alice = auth_headers()
    used = _category(client, alice, "Food")
    unused = _category(client, alice, "Misc")
    assert client.post("/api/transactions", json=_txn_json(used), headers=alice).status_code == 201

    assert client.delete(f"/api/categories/{used}", headers=alice).status_code == 409
    assert client.delete(f"/api/categories/{unused}", headers=alice).status_code == 204
    assert client.delete(f"/api/categories/{unused}", headers=alice).status_code == 404


def test_transaction_crud(client, auth_headers):
    alice = auth_headers()
    food = _category(client, alice, "Food")

    r = client.post("/api/transactions", json=_txn_json(food, amount="12.50", description="lunch"), headers=alice)
    assert r.status_code == 201
    created = r.json()
    assert Decimal(str(created["amount"])) == Decimal("12.50")
    assert created["categoryName"] == "Food"
    assert created["categoryId"] == food
    assert created["date"] == "2026-01-15"

    r = client.put(f"/api/transactions/{created['id']}", json=_txn_json(food, amount="15", type_="INCOME"), headers=alice)
    assert r.status_code == 200
    assert r.json()["type"] == "INCOME"
    assert r.json()["description"] is None

    assert client.get(f"/api/transactions/{created['id']}", headers=alice).status_code == 200
    assert client.delete(f"/api/transactions/{created['id']}", headers=alice).status_code == 204
    assert client.delete(f"/api/transactions/{created['id']}", headers=alice).status_code == 404


def test_transaction_body_validation(client, auth_headers):
    alice = auth_headers()
    food = _category(client, alice)
    assert client.post("/api/transactions", json=_txn_json(food, amount="-5"), headers=alice).status_code == 400
    assert client.post("/api/transactions", json=_txn_json(food, type_="GIFT"), headers=alice).status_code == 400
    body = _txn_json(food)
    del body["date"]
    assert client.post("/api/transactions", json=body, headers=alice).status_code == 400


def test_foreign_category_is_rejected(client, auth_headers):
    alice = auth_headers("alice@mail.com")
    bob = auth_headers("bob@mail.com", name="Bob")
    alice_food = _category(client, alice)
    bob_food = _category(client, bob)

    r = client.post("/api/transactions", json=_txn_json(bob_food), headers=alice)
    assert r.status_code == 400
    assert client.post("/api/transactions", json=_txn_json(99999), headers=alice).status_code == 400
    assert client.get("/api/transactions", headers=alice).json()["total"] == 0

    txn = client.post("/api/transactions", json=_txn_json(alice_food, amount="10"), headers=alice).json()
    r = client.put(f"/api/transactions/{txn['id']}", json=_txn_json(bob_food, amount="99"), headers=alice)
    assert r.status_code == 400
    unchanged = client.get(f"/api/transactions/{txn['id']}", headers=alice).json()
    assert Decimal(str(unchanged["amount"])) == Decimal("10")
    assert unchanged["categoryId"] == alice_food

    # bob cannot see, edit or remove alice's row
    assert client.get(f"/api/transactions/{txn['id']}", headers=bob).status_code == 404
    assert client.put(f"/api/transactions/{txn['id']}", json=_txn_json(bob_food), headers=bob).status_code == 404
    assert client.delete(f"/api/transactions/{txn['id']}", headers=bob).status_code == 404


def test_list_pagination_and_range(client, auth_headers):
    alice = auth_headers()
    food = _category(client, alice)
    for day in range(1, 16):
        r = client.post("/api/transactions", json=_txn_json(food, day=f"2026-01-{day:02d}"), headers=alice)
        assert r.status_code == 201

    r = client.get("/api/transactions", params={"page": 1, "size": 10}, headers=alice)
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 15
    assert data["totalPages"] == 2
    assert [t["date"] for t in data["items"]] == [f"2026-01-{d:02d}" for d in range(5, 0, -1)]

    r = client.get("/api/transactions", params={"startDate": "2026-01-10", "endDate": "2026-01-12"}, headers=alice)
    assert [t["date"] for t in r.json()["items"]] == ["2026-01-12", "2026-01-11", "2026-01-10"]

    assert client.get("/api/transactions", params={"startDate": "2026-01-10"}, headers=alice).status_code == 400
    r = client.get("/api/transactions", params={"startDate": "2026-01-12", "endDate": "2026-01-10"}, headers=alice)
    assert r.status_code == 400


def test_dashboard(client, auth_headers):
    alice = auth_headers()
    food = _category(client, alice, "Food")
    rent = _category(client, alice, "Rent")
    for body in (
        _txn_json(food, amount="100", day="2026-02-03", type_="INCOME"),
        _txn_json(food, amount="15", day="2026-02-01"),
        _txn_json(food, amount="25", day="2026-02-28"),
        _txn_json(rent, amount="30", day="2026-02-14"),
        _txn_json(rent, amount="70", day="2026-01-31"),
    ):
        assert client.post("/api/transactions", json=body, headers=alice).status_code == 201

    r = client.get("/api/dashboard/balance", headers=alice)
    assert r.status_code == 200
    balance = {k: Decimal(str(v)) for k, v in r.json().items()}
    assert balance == {
        "totalIncome": Decimal("100"),
        "totalExpense": Decimal("140"),
        "currentBalance": Decimal("-40"),
    }

    app.dependency_overrides[get_today] = lambda: date(2026, 2, 20)
    r = client.get("/api/dashboard/expenses-by-category", headers=alice)
    assert r.status_code == 200
    assert [(e["categoryName"], Decimal(str(e["totalAmount"]))) for e in r.json()] == [
        ("Food", Decimal("40")),
        ("Rent", Decimal("30")),
    ]


def test_register_email_differing_only_in_case_conflicts(client):
    body = {"name": "Alice", "email": "Alice@mail.com", "password": "secret123"}
    assert client.post("/api/auth/register", json=body).status_code == 201
    body["email"] = "alice@mail.com"
    assert client.post("/api/auth/register", json=body).status_code == 409

    r = client.post("/api/auth/login", json={"email": "ALICE@MAIL.COM", "password": "secret123"})
    assert r.status_code == 200
    assert r.json()["email"] == "alice@mail.com"
