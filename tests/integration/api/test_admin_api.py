import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from tests.fixtures.console import ADMIN_HEADERS


@pytest.mark.asyncio
async def test_admin_key_required(client: AsyncClient):
    missing = await client.post("/api/admin/accounts/sign-in", json={"email": "a@example.com"})
    wrong = await client.post(
        "/api/admin/accounts/sign-in",
        json={"email": "a@example.com"},
        headers={"X-Admin-API-Key": "wrong"},
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_sign_in_provisions_once_and_sets_cookie(client: AsyncClient):
    first = await client.post(
        "/api/admin/accounts/sign-in", json={"email": "Owner@Example.com"}, headers=ADMIN_HEADERS
    )
    second = await client.post(
        "/api/admin/accounts/sign-in", json={"email": "owner@example.com"}, headers=ADMIN_HEADERS
    )

    assert first.status_code == 200
    assert first.json()["created"] is True
    assert first.json()["account"]["email"] == "owner@example.com"
    assert first.json()["account"]["role"] == "user"
    assert ApplicationConfig.CONSOLE_COOKIE_NAME in first.headers["set-cookie"]
    assert second.json()["created"] is False
    assert second.json()["account"]["id"] == first.json()["account"]["id"]


@pytest.mark.asyncio
async def test_sign_in_rejects_invalid_email(client: AsyncClient):
    response = await client.post(
        "/api/admin/accounts/sign-in", json={"email": "not-an-email"}, headers=ADMIN_HEADERS
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_deactivated_account_is_locked_out(client: AsyncClient, owner_headers):
    apps = await client.post("/api/applications", json={"name": "Tool"}, headers=owner_headers)
    account_id = apps.json()["account_id"]

    updated = await client.patch(
        f"/api/admin/accounts/{account_id}", json={"is_active": False}, headers=ADMIN_HEADERS
    )
    assert updated.status_code == 200
    assert updated.json()["is_active"] is False

    console = await client.get("/api/applications", headers=owner_headers)
    assert console.status_code == 403
    assert console.json()["error"]["code"] == "ACCOUNT_DISABLED"

    again = await client.post(
        "/api/admin/accounts/sign-in", json={"email": "owner@example.com"}, headers=ADMIN_HEADERS
    )
    assert again.status_code == 403


@pytest.mark.asyncio
async def test_update_account_rejects_unknown_permission(client: AsyncClient, owner_headers):
    apps = await client.post("/api/applications", json={"name": "Tool"}, headers=owner_headers)
    account_id = apps.json()["account_id"]

    response = await client.patch(
        f"/api/admin/accounts/{account_id}", json={"permissions": ["launch_rockets"]}, headers=ADMIN_HEADERS
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PERMISSION"


@pytest.mark.asyncio
async def test_update_unknown_account(client: AsyncClient):
    response = await client.patch(
        "/api/admin/accounts/00000000-0000-0000-0000-000000000000",
        json={"role": "admin"},
        headers=ADMIN_HEADERS,
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_sweep_sessions(client: AsyncClient):
    response = await client.post("/api/admin/sessions/sweep", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"deactivated": 0}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
