import pytest
from httpx import AsyncClient
from sqlmodel import select

from primeauth.domain.entities import ActivityLog, AppUser
from tests.fixtures.console import TEST_PASSWORD, login, register_user


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, application, api_headers, license_key):
    """
    Given a registered user
    When they log in with the right password
    Then they receive a session token and the tenant's success message
    """
    registered = await register_user(client, api_headers, license_key)

    response = await login(client, api_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == application["login_success_message"]
    assert data["user_id"] == registered["user_id"]
    assert data["hwid_locked"] is False
    assert len(data["session_token"]) >= 64


@pytest.mark.asyncio
async def test_login_wrong_password_and_unknown_user_are_indistinguishable(
    client: AsyncClient, api_headers, license_key
):
    await register_user(client, api_headers, license_key)

    wrong = await login(client, api_headers, password="not-it")
    unknown = await login(client, api_headers, username="ghost")

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"success": False, "message": "Invalid credentials!"}


@pytest.mark.asyncio
async def test_login_wrong_password_counts_attempts(
    client: AsyncClient, api_headers, license_key, db_session
):
    await register_user(client, api_headers, license_key)

    await login(client, api_headers, password="not-it")
    await login(client, api_headers, password="still-not-it")

    user = (await db_session.execute(select(AppUser).where(AppUser.username == "alice"))).scalar_one()
    assert user.login_attempts == 2
    assert user.last_login_attempt_at is not None


@pytest.mark.asyncio
async def test_login_from_blacklisted_ip(
    client: AsyncClient, owner_headers, application, api_headers, license_key, db_session
):
    """
    Given the caller's IP is blacklisted for the application
    When a login is attempted
    Then it is rejected with 403 before credentials are looked at
    And a login_blocked_ip activity is recorded
    """
    await register_user(client, api_headers, license_key)
    added = await client.post(
        "/api/blacklist",
        json={"type": "ip", "value": "127.0.0.1", "application_id": application["id"]},
        headers=owner_headers,
    )
    assert added.status_code == 201

    response = await login(client, api_headers)

    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Access denied: IP address is blacklisted"}
    events = (await db_session.execute(select(ActivityLog.event))).scalars().all()
    assert "login_blocked_ip" in events


@pytest.mark.asyncio
async def test_login_hwid_bind_then_enforce(
    client: AsyncClient, owner_headers, application, api_headers, license_key
):
    await client.patch(
        f"/api/applications/{application['id']}",
        json={"hwid_lock_enabled": True},
        headers=owner_headers,
    )
    await register_user(client, api_headers, license_key)

    missing = await login(client, api_headers)
    assert missing.status_code == 400
    assert missing.json()["message"] == "Hardware ID is required for this application"

    first = await login(client, api_headers, hwid="HWID-A")
    assert first.status_code == 200
    assert first.json()["hwid_locked"] is True

    same = await login(client, api_headers, hwid="HWID-A")
    assert same.status_code == 200

    other = await login(client, api_headers, hwid="HWID-B")
    assert other.status_code == 401
    assert other.json()["message"] == application["hwid_mismatch_message"]


@pytest.mark.asyncio
async def test_login_enforces_hwid_given_at_registration(
    client: AsyncClient, owner_headers, application, api_headers, license_key
):
    await client.patch(
        f"/api/applications/{application['id']}",
        json={"hwid_lock_enabled": True},
        headers=owner_headers,
    )
    await register_user(client, api_headers, license_key, hwid="HWID-REG")

    other = await login(client, api_headers, hwid="HWID-OTHER")
    assert other.status_code == 401
    assert other.json()["message"] == application["hwid_mismatch_message"]

    same = await login(client, api_headers, hwid="HWID-REG")
    assert same.status_code == 200
    assert same.json()["hwid_locked"] is True


@pytest.mark.asyncio
async def test_login_wrong_password_never_binds_hwid(
    client: AsyncClient, owner_headers, application, api_headers, license_key
):
    await client.patch(
        f"/api/applications/{application['id']}",
        json={"hwid_lock_enabled": True},
        headers=owner_headers,
    )
    await register_user(client, api_headers, license_key)

    attacker = await login(client, api_headers, password="guess", hwid="HWID-EVIL")
    assert attacker.status_code == 401

    owner = await login(client, api_headers, hwid="HWID-REAL")
    assert owner.status_code == 200


@pytest.mark.asyncio
async def test_login_version_mismatch(
    client: AsyncClient, owner_headers, application, api_headers, license_key
):
    await client.patch(
        f"/api/applications/{application['id']}",
        json={"version": "2.0.0", "version_mismatch_message": "Update to 2.0.0"},
        headers=owner_headers,
    )
    await register_user(client, api_headers, license_key)

    old = await login(client, api_headers, version="1.0.0")
    current = await login(client, api_headers, version="2.0.0")

    assert old.status_code == 400
    assert old.json() == {"success": False, "message": "Update to 2.0.0"}
    assert current.status_code == 200


@pytest.mark.asyncio
async def test_login_paused_user(
    client: AsyncClient, owner_headers, application, api_headers, license_key
):
    registered = await register_user(client, api_headers, license_key)
    paused = await client.post(
        f"/api/applications/{application['id']}/users/{registered['user_id']}/pause",
        headers=owner_headers,
    )
    assert paused.status_code == 200

    response = await login(client, api_headers, password=TEST_PASSWORD)

    assert response.status_code == 401
    assert response.json()["message"] == application["account_paused_message"]
