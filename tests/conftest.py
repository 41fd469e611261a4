"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from naai.database import Base, Database, get_db
from naai.main import app


class AuthHeaders(dict):
    """Dict subclass that also stores the account behind the token."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/naai_db", "/naai_db_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

test_database = Database(SQLALCHEMY_DATABASE_URL)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    test_database.create_all()
    app.state.database = test_database
    yield
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = test_database.session_factory()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, email: str, password: str = "secret123", **extra) -> AuthHeaders:
    """Sign up an account and return its auth headers."""
    response = client.post(
        "/api/auth/signup", json={"email": email, "password": password, **extra}
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a customer and return auth headers with user info."""
    return signup(client, "customer@example.com", name="Test Customer")


@pytest.fixture
def barber_headers(client):
    """Create a barber and return auth headers with user info."""
    return signup(client, "barber@example.com", name="Test Barber", role="barber")


@pytest.fixture
def other_barber_headers(client):
    """A second barber, for ownership checks."""
    return signup(client, "other.barber@example.com", name="Other Barber", role="barber")


@pytest.fixture
def shop_payload():
    return {
        "name": "Fade Factory",
        "description": "Classic cuts and hot towel shaves",
        "address": "12 Main Street",
        "city": "Springfield",
        "state": "IL",
        "zipCode": "62701",
        "phone": "555-0100",
        "services": [
            {"name": "Haircut", "price": 25.0, "duration": 30},
            {"name": "Beard trim", "description": "Shape and line-up", "price": 15, "duration": 15},
        ],
    }


@pytest.fixture
def shop(client, barber_headers, shop_payload):
    """A shop owned by ``barber_headers``."""
    response = client.post("/api/shops", headers=barber_headers, json=shop_payload)
    assert response.status_code == 201, response.text
    return response.json()["shop"]


@pytest.fixture
def make_account(client):
    """Factory fixture: sign up an account and get its auth headers."""

    def _make_account(email: str, password: str = "secret123", **extra) -> AuthHeaders:
        return signup(client, email, password, **extra)

    return _make_account
