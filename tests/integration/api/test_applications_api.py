import pytest
from httpx import AsyncClient

from tests.fixtures.console import login, register_user, sign_in


@pytest.mark.asyncio
async def test_create_and_list_applications(client: AsyncClient, owner_headers):
    created = await client.post(
        "/api/applications",
        json={"name": "Prime Tool", "description": "Desktop app", "hwid_lock_enabled": True},
        headers=owner_headers,
    )

    assert created.status_code == 201
    data = created.json()
    assert data["api_key"].startswith("pa_")
    assert data["version"] == "1.0.0"
    assert data["hwid_lock_enabled"] is True
    assert data["login_failed_message"] == "Invalid credentials!"

    listed = await client.get("/api/applications", headers=owner_headers)
    assert listed.status_code == 200
    assert [app["id"] for app in listed.json()] == [data["id"]]


@pytest.mark.asyncio
async def test_console_requires_token(client: AsyncClient):
    response = await client.get("/api/applications")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_console_rejects_garbage_token(client: AsyncClient):
    response = await client.get("/api/applications", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_foreign_application_is_not_found(client: AsyncClient, application):
    stranger = await sign_in(client, "stranger@example.com")

    response = await client.get(f"/api/applications/{application['id']}", headers=stranger)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "APPLICATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_application_messages(client: AsyncClient, owner_headers, application):
    response = await client.patch(
        f"/api/applications/{application['id']}",
        json={"login_success_message": "Welcome back!", "version": "1.1.0"},
        headers=owner_headers,
    )

    assert response.status_code == 200
    assert response.json()["login_success_message"] == "Welcome back!"
    assert response.json()["version"] == "1.1.0"
    assert response.json()["login_failed_message"] == application["login_failed_message"]


@pytest.mark.asyncio
async def test_update_application_rejects_blank_message(client: AsyncClient, owner_headers, application):
    response = await client.patch(
        f"/api/applications/{application['id']}",
        json={"login_failed_message": "   "},
        headers=owner_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_MESSAGE"


@pytest.mark.asyncio
async def test_deactivated_application_rejects_its_key(
    client: AsyncClient, owner_headers, application, api_headers, license_key
):
    await register_user(client, api_headers, license_key)
    await client.patch(
        f"/api/applications/{application['id']}", json={"is_active": False}, headers=owner_headers
    )

    response = await login(client, api_headers)

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or inactive API key"


@pytest.mark.asyncio
async def test_rotate_api_key(client: AsyncClient, owner_headers, application, api_headers, license_key):
    await register_user(client, api_headers, license_key)

    rotated = await client.post(
        f"/api/applications/{application['id']}/rotate-key", headers=owner_headers
    )
    assert rotated.status_code == 200
    new_key = rotated.json()["api_key"]
    assert new_key != application["api_key"]

    old = await login(client, api_headers)
    new = await login(client, {"X-API-Key": new_key})

    assert old.status_code == 401
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_application_stats(client: AsyncClient, owner_headers, application, api_headers, license_key):
    await register_user(client, api_headers, license_key)
    await login(client, api_headers)
    await login(client, api_headers, password="wrong")

    response = await client.get(f"/api/applications/{application['id']}/stats", headers=owner_headers)

    assert response.status_code == 200
    stats = response.json()
    assert stats["total_users"] == 1
    assert stats["active_users"] == 1
    assert stats["active_sessions"] == 1
    assert stats["total_licenses"] == 1
    assert stats["license_capacity"] == 5
    assert stats["license_usage"] == 1
    assert stats["login_successes"] == 1
    assert stats["login_failures"] == 1
    assert stats["events"]["user_register"] == 1
