"""
Test configuration and fixtures.

Provides:
- Environment for an in-memory SQLite database and a fixed signing secret
- A TestClient whose lifespan creates the schema (fresh per test)
- Helpers to register users and mint bearer headers
"""
import os

# Settings are read at import time, so the environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from dataclasses import dataclass
from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient

from tagblaze.main import app
from tagblaze.infrastructure.database import Base, engine

PASSWORD = "pw123"


@dataclass
class Account:
    """A registered user and the bearer header to act as them."""
    id: int
    email: str
    role: str
    headers: Dict[str, str]


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_account(client: TestClient):
    """Register a user through the API and log them in."""
    def _make(email: str, role: str = "agent", password: str = PASSWORD) -> Account:
        response = client.post(
            "/auth/register",
            json={"name": email.split("@")[0], "email": email, "password": password, "role": role},
        )
        assert response.status_code == 201, response.text
        user = response.json()

        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        token = response.json()["token"]
        return Account(
            id=user["id"],
            email=email,
            role=role,
            headers={"Authorization": f"Bearer {token}"},
        )
    return _make


@pytest.fixture
def agent(make_account) -> Account:
    return make_account("agent@x.com")


@pytest.fixture
def other_agent(make_account) -> Account:
    return make_account("other@x.com")


@pytest.fixture
def admin(make_account) -> Account:
    return make_account("admin@x.com", role="admin")
