"""
Unit tests for RegisterUseCase
"""
from uuid import uuid4

import pytest

from src.api.utils.jwt import verify_email_verification_token
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.domain.entities import User
from tests.fixtures.email_sender import RecordingEmailSender


def make_command(**overrides):
    data = dict(
        firstname="Ada",
        lastname="Lovelace",
        email="ada@example.com",
        password="secret123",
    )
    data.update(overrides)
    return RegisterCommand(**data)


@pytest.mark.asyncio
async def test_successful_registration(mock_uow, hasher, email_sender):
    # Arrange
    use_case = RegisterUseCase(mock_uow, hasher, email_sender)

    # Act
    result = await use_case.execute(make_command())

    # Assert
    assert result.is_ok()
    assert result.value.message == "User successfully registered"
    assert result.value.user.email == "ada@example.com"
    assert result.value.user.email_verified_at is None

    created = mock_uow.users.create.call_args.args[0]
    assert created.password_hash != "secret123"
    assert hasher.verify("secret123", created.password_hash)
    mock_uow.commit.assert_called_once()

    # Verification link carries a token signed for the new user
    assert len(email_sender.verification_links) == 1
    to, user_id, token = email_sender.verification_links[0]
    assert to == "ada@example.com"
    assert user_id == created.id
    assert verify_email_verification_token(token, created.id)


@pytest.mark.asyncio
async def test_duplicate_email(mock_uow, hasher, email_sender):
    mock_uow.users.get_by_email.return_value = User(
        id=uuid4(),
        firstname="Ada",
        lastname="Lovelace",
        email="ada@example.com",
        password_hash="x",
    )
    use_case = RegisterUseCase(mock_uow, hasher, email_sender)

    result = await use_case.execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    assert email_sender.verification_links == []


@pytest.mark.asyncio
async def test_registration_survives_mail_failure(mock_uow, hasher):
    use_case = RegisterUseCase(mock_uow, hasher, RecordingEmailSender(fail=True))

    result = await use_case.execute(make_command())

    assert result.is_ok()
    mock_uow.commit.assert_called_once()
