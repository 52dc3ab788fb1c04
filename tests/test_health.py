"""Smoke tests for health and app wiring."""

from httpx import AsyncClient

from app.infrastructure.firebase import set_firestore_client


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_ready_reports_configured_backends(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "firestore": True, "sheets": True}


async def test_ready_returns_503_without_firestore(client: AsyncClient) -> None:
    set_firestore_client(None)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


async def test_request_id_is_generated_and_echoed(client: AsyncClient) -> None:
    generated = await client.get("/api/v1/health")
    assert generated.headers.get("X-Request-ID")

    forwarded = await client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})
    assert forwarded.headers["X-Request-ID"] == "req-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id with spaces"}
    )
    assert response.headers["X-Request-ID"] != "bad id with spaces"
