"""
Integration tests for user registration
"""
import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import User
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_successful_registration(client: AsyncClient, db_session: AsyncSession, email_sender, hasher, fixture_data):
    payload = fixture_data.payload("register_request")

    response = await client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User successfully registered"
    assert sorted(data["user"].keys()) == sorted(fixture_data.get("expected_user_info_keys"))
    assert exclude_keys(data["user"]) == {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "email": "ada@example.com",
        "email_verified_at": None,
    }

    # Password stored as bcrypt hash
    result = await db_session.exec(select(User).where(User.email == payload["email"]))
    user = result.one()
    assert user.password_hash != payload["password"]
    assert hasher.verify(payload["password"], user.password_hash)

    # Verification link sent
    assert len(email_sender.verification_links) == 1
    assert email_sender.verification_links[0][0] == payload["email"]


@pytest.mark.asyncio
async def test_duplicate_email(client: AsyncClient, registered_user):
    response = await client.post("/api/v1/auth/register", json=registered_user)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override",
    [
        {"email": "not-an-email"},
        {"password": "12345"},
        {"firstname": "A"},
        {"lastname": ""},
    ],
)
async def test_invalid_input(client: AsyncClient, fixture_data, override):
    payload = fixture_data.payload("register_request", **override)

    response = await client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == 422
