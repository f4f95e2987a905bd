# ==============================================================================
# AUTH ENDPOINT TESTS
# ==============================================================================
# Tests for admin authentication: register, login, current admin
# ==============================================================================

import pytest
from httpx import AsyncClient

from realty_admin.core.security import create_access_token, create_refresh_token

AUTH = "/api/v1/auth"


class TestAuthRegister:
    """Tests for admin registration endpoint."""

    @pytest.mark.asyncio
    async def test_register_success(self, client: AsyncClient, sample_user_data: dict):
        response = await client.post(f"{AUTH}/register", json=sample_user_data)

        assert response.status_code == 201
        data = response.json()

        assert data["success"] is True
        assert data["data"]["email"] == sample_user_data["email"]
        assert data["data"]["full_name"] == sample_user_data["full_name"]
        assert data["data"]["is_active"] is True
        assert "id" in data["data"]
        assert "hashed_password" not in data["data"]

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, client: AsyncClient, sample_user_data: dict):
        """Emails are compared case-insensitively."""
        response1 = await client.post(f"{AUTH}/register", json=sample_user_data)
        assert response1.status_code == 201

        duplicate = {**sample_user_data, "email": sample_user_data["email"].upper()}
        response2 = await client.post(f"{AUTH}/register", json=duplicate)
        assert response2.status_code == 409
        assert response2.json()["error"]["code"] == "ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, client: AsyncClient):
        data = {
            "email": "invalid-email",
            "password": "SecurePass123!",
            "full_name": "Test Admin",
        }
        response = await client.post(f"{AUTH}/register", json=data)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_register_weak_password(self, client: AsyncClient):
        data = {
            "email": "admin@example.com",
            "password": "weakpassword",
            "full_name": "Test Admin",
        }
        response = await client.post(f"{AUTH}/register", json=data)
        assert response.status_code == 422


class TestAuthLogin:
    """Tests for login endpoints."""

    @pytest.mark.asyncio
    async def test_login_json_success(self, client: AsyncClient, sample_user_data: dict):
        await client.post(f"{AUTH}/register", json=sample_user_data)

        response = await client.post(f"{AUTH}/login/json", json={
            "email": sample_user_data["email"],
            "password": sample_user_data["password"],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["user"]["email"] == sample_user_data["email"]
        tokens = data["data"]["tokens"]
        assert tokens["token_type"] == "bearer"
        assert tokens["expires_in"] > 0
        assert tokens["access_token"] and tokens["refresh_token"]

    @pytest.mark.asyncio
    async def test_login_form_token_opens_master_routes(
        self, client: AsyncClient, sample_user_data: dict
    ):
        """The OAuth2 form login returns a token accepted by /masters."""
        await client.post(f"{AUTH}/register", json=sample_user_data)

        response = await client.post(f"{AUTH}/login", data={
            "username": sample_user_data["email"],
            "password": sample_user_data["password"],
        })
        assert response.status_code == 200
        token = response.json()["access_token"]

        response = await client.get(
            "/api/v1/masters/cities",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client: AsyncClient, sample_user_data: dict):
        await client.post(f"{AUTH}/register", json=sample_user_data)

        response = await client.post(f"{AUTH}/login/json", json={
            "email": sample_user_data["email"],
            "password": "WrongPassword123!",
        })

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    @pytest.mark.asyncio
    async def test_login_nonexistent_user(self, client: AsyncClient):
        response = await client.post(f"{AUTH}/login/json", json={
            "email": "nonexistent@example.com",
            "password": "SomePassword123!",
        })

        assert response.status_code == 401


class TestCurrentAdmin:
    """Tests for the /me endpoint."""

    @pytest.mark.asyncio
    async def test_me(self, auth_client):
        client, user_id = auth_client

        response = await client.get(f"{AUTH}/me")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == user_id

    @pytest.mark.asyncio
    async def test_me_unknown_subject(self, client: AsyncClient):
        token = create_access_token(subject="64b7f0c2a1b2c3d4e5f60718")

        response = await client.get(
            f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_refresh_token_rejected_as_access(self, client: AsyncClient):
        token = create_refresh_token(subject="admin")

        response = await client.get(
            f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
