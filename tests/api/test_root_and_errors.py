"""Root, Health, and Error Envelopes.

Invariants:
    - GET / answers the welcome message
    - Unknown routes and wrong methods use the {"success": false} envelope
    - Unhandled exceptions become 500 with a generic message
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from matchfeed.api.error_handlers import (
    format_validation_errors, register_error_handlers,
)


async def test_root_returns_welcome_message(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": "Welcome to the server!"}


async def test_health_liveness(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    import matchfeed.infrastructure.database as db_module
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Not Found"}


async def test_wrong_method_uses_envelope(client):
    res = await client.patch("/matches/1", json={})
    assert res.status_code == 405
    assert res.json()["success"] is False
    assert "allow" in res.headers


async def test_unhandled_exception_returns_500():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internal detail")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/boom")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error"}


def test_format_validation_errors_strips_location_prefix():
    errors = [
        {"loc": ("body", "startTime"), "msg": "Input should be a valid datetime"},
        {"loc": ("body",), "msg": "Missing required fields: sport"},
        {"loc": ("path", "match_id"), "msg": "Input should be a valid integer"},
    ]
    assert format_validation_errors(errors) == (
        "startTime: Input should be a valid datetime; "
        "Missing required fields: sport; "
        "match_id: Input should be a valid integer"
    )


async def test_malformed_json_body_returns_400_without_offset(client):
    res = await client.post(
        "/matches", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "JSON decode error"}


def test_format_validation_errors_drops_json_offset():
    errors = [{"loc": ("body", 1), "msg": "JSON decode error", "type": "json_invalid"}]
    assert format_validation_errors(errors) == "JSON decode error"


def test_format_validation_errors_empty():
    assert format_validation_errors([]) == "Invalid request data"
