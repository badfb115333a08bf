import fastapi
from fastapi.testclient import TestClient

from components.core.exceptions import ConflictError, RateLimitError
from restapi.errors import register_exception_handlers


def make_client():
    app = fastapi.FastAPI()
    register_exception_handlers(app)

    @app.get("/limited")
    async def limited():
        raise RateLimitError("Too many requests, slow down")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Account name already exists")

    @app.get("/broken")
    async def broken():
        raise RuntimeError("boom")

    return TestClient(app, raise_server_exceptions=False)


def test_rate_limit_error_renders_429():
    response = make_client().get("/limited")

    assert response.status_code == 429
    assert response.json() == {"error": "Too many requests, slow down", "code": "RATE_LIMITED"}


def test_conflict_error_renders_409():
    response = make_client().get("/conflict")

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_unexpected_error_hides_details():
    response = make_client().get("/broken")

    assert response.status_code == 500
    assert response.json() == {"error": "An unexpected error occurred", "code": "INTERNAL_ERROR"}
