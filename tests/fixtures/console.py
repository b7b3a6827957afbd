"""
Request helpers shared by the integration tests.

Console setup goes through the public API so every test exercises the
same path an owner would.
"""

from httpx import AsyncClient

from config import ApplicationConfig

ADMIN_HEADERS = {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}
TEST_PASSWORD = "CorrectHorse1!"


async def sign_in(client: AsyncClient, email: str = "owner@example.com") -> dict:
    """Console bearer headers for the account (created on first sign-in)"""
    response = await client.post(
        "/api/admin/accounts/sign-in", json={"email": email}, headers=ADMIN_HEADERS
    )
    assert response.status_code == 200, response.text
    # Tests pick the identity per request through headers
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def create_application(client: AsyncClient, headers: dict, **fields) -> dict:
    body = {"name": "Prime Tool", "version": "1.0.0", **fields}
    response = await client.post("/api/applications", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def create_license(client: AsyncClient, headers: dict, application_id: str, **fields) -> dict:
    body = {"validity_days": 30, "max_users": 5, **fields}
    response = await client.post(
        f"/api/applications/{application_id}/licenses", json=body, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()[0]


async def register_user(
    client: AsyncClient, api_headers: dict, license_key: dict, username: str = "alice", **fields
) -> dict:
    body = {
        "username": username,
        "password": TEST_PASSWORD,
        "license_key": license_key["license_key"],
        **fields,
    }
    response = await client.post("/api/v1/register", json=body, headers=api_headers)
    assert response.status_code == 201, response.text
    return response.json()


async def login(
    client: AsyncClient, api_headers: dict, username: str = "alice", password: str = TEST_PASSWORD, **fields
):
    body = {"username": username, "password": password, **fields}
    return await client.post("/api/v1/login", json=body, headers=api_headers)
