import os
from datetime import date
from decimal import Decimal

import pytest

# must be set before expense_api.db.session builds its engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("TZ", "UTC")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from expense_api.db.base import Base  # noqa: E402
from expense_api.db import models  # noqa: E402
from expense_api.db.session import get_db  # noqa: E402
from expense_api.main import app  # noqa: E402
from expense_api.schemas.transaction import TransactionIn  # noqa: E402
from expense_api.services import auth as auth_service  # noqa: E402
from expense_api.services import categories as category_service  # noqa: E402
from expense_api.services import transactions as txn_service  # noqa: E402


@pytest.fixture
def engine():
    # one shared in-memory connection, visible from TestClient's worker threads
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)

    # SQLite leaves FK checks off unless asked, MySQL always enforces them
    @event.listens_for(eng, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# service-level builders
# ---------------------------------------------------------------------------

@pytest.fixture
def make_user(db):
    def _make(email="alice@mail.com", name="Alice", password="secret123") -> int:
        return auth_service.register(db, name=name, email=email, password=password)
    return _make


@pytest.fixture
def make_category(db):
    def _make(user_id: int, name="Food") -> int:
        return category_service.create(db, name, user_id).id
    return _make


def txn_payload(category_id: int, amount="10.00", day=date(2026, 1, 15), txn_type=models.TransactionType.EXPENSE, description=None):
    return TransactionIn(
        amount=Decimal(str(amount)),
        description=description,
        date=day,
        type=txn_type,
        category_id=category_id,
    )


@pytest.fixture
def make_txn(db):
    def _make(user_id: int, category_id: int, **kw):
        return txn_service.create(db, txn_payload(category_id, **kw), user_id)
    return _make


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def auth_headers(client):
    """Register + login through the API and return the bearer header."""
    def _login(email="alice@mail.com", name="Alice", password="secret123") -> dict:
        r = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert r.status_code == 201, r.text
        r = client.post("/api/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}
    return _login


@pytest.fixture
def txn_body():
    """Factory for TransactionIn payloads (service tests)."""
    return txn_payload
