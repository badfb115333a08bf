import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from components.core.database import DatabaseManager
from restapi.router import create_app

API = "/api/v1"


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'fintrack.db'}"


@pytest.fixture
def client(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)
    app = create_app(db_manager=DatabaseManager(engine=engine), create_tables=True)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register a user and return bearer headers for it."""

    def register(email="owner@example.com", password="correct-horse"):
        response = client.post(f"{API}/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return register


@pytest.fixture
def auth_headers(register_user):
    return register_user()


@pytest.fixture
def other_headers(register_user):
    return register_user(email="intruder@example.com")
