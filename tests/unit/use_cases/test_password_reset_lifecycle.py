"""
Reset token lifecycle against a shared in-memory store.

Each call gets its own unit of work over the same store, the way separate
HTTP requests would.
"""
import asyncio
from uuid import uuid4

import pytest

from src.app.use_cases.password_reset import (
    RequestPasswordResetUseCase,
    ResetPasswordCommand,
    ResetPasswordUseCase,
)
from src.app.use_cases.password_reset import request_password_reset_use_case
from src.domain.entities import User


@pytest.fixture
def user(store, hasher):
    user = User(
        id=uuid4(),
        firstname="Ada",
        lastname="Lovelace",
        email="a@x.com",
        password_hash=hasher.hash("oldpass"),
    )
    store.users[user.id] = user
    return user


@pytest.fixture
def request_reset(uow_factory, email_sender):
    async def _request(email):
        use_case = RequestPasswordResetUseCase(
            uow_factory(), email_sender, token_ttl_minutes=60, hide_unknown_email=False
        )
        return await use_case.execute(email)

    return _request


@pytest.fixture
def consume_reset(uow_factory, hasher):
    async def _consume(email, token, password):
        use_case = ResetPasswordUseCase(uow_factory(), hasher, token_ttl_minutes=60)
        return await use_case.execute(
            ResetPasswordCommand(email=email, token=token, password=password)
        )

    return _consume


@pytest.mark.asyncio
async def test_repeated_requests_send_same_token(user, store, email_sender, request_reset):
    first = await request_reset(user.email)
    second = await request_reset(user.email)

    assert first.is_ok() and second.is_ok()
    tokens = email_sender.reset_tokens_for(user.email)
    assert len(tokens) == 2
    assert tokens[0] == tokens[1]


@pytest.mark.asyncio
async def test_single_record_per_email(user, store, request_reset):
    for _ in range(5):
        await request_reset(user.email)

    assert list(store.password_resets) == [user.email]


@pytest.mark.asyncio
async def test_concurrent_requests_converge(user, store, email_sender, request_reset):
    results = await asyncio.gather(*[request_reset(user.email) for _ in range(5)])

    assert all(r.is_ok() for r in results)
    assert len(set(email_sender.reset_tokens_for(user.email))) == 1
    assert len(store.password_resets) == 1


@pytest.mark.asyncio
async def test_token_is_consumed_once(user, store, hasher, email_sender, request_reset, consume_reset):
    await request_reset(user.email)
    token = email_sender.reset_tokens_for(user.email)[0]

    first = await consume_reset(user.email, token, "newpass")
    second = await consume_reset(user.email, token, "newpass2")

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "TOKEN_MISMATCH"
    assert store.password_resets == {}
    assert hasher.verify("newpass", user.password_hash)


@pytest.mark.asyncio
async def test_wrong_token_changes_nothing(user, store, email_sender, request_reset, consume_reset):
    await request_reset(user.email)
    token = email_sender.reset_tokens_for(user.email)[0]
    original_hash = user.password_hash

    result = await consume_reset(user.email, token[::-1] + "x", "newpass")

    assert result.is_err()
    assert result.error.code == "TOKEN_MISMATCH"
    assert user.password_hash == original_hash
    assert store.password_resets[user.email].token == token


@pytest.mark.asyncio
async def test_token_of_other_email_rejected(user, store, hasher, email_sender, request_reset, consume_reset):
    other = User(
        id=uuid4(),
        firstname="Bob",
        lastname="Other",
        email="b@x.com",
        password_hash=hasher.hash("otherpass"),
    )
    store.users[other.id] = other
    await request_reset(user.email)
    token = email_sender.reset_tokens_for(user.email)[0]

    result = await consume_reset(other.email, token, "newpass")

    assert result.is_err()
    assert result.error.code == "TOKEN_MISMATCH"
    assert user.email in store.password_resets


@pytest.mark.asyncio
async def test_unknown_email_creates_nothing(store, email_sender, request_reset):
    result = await request_reset("ghost@x.com")

    assert result.is_err()
    assert result.error.code == "EMAIL_NOT_FOUND"
    assert store.password_resets == {}
    assert email_sender.reset_links == []


@pytest.mark.asyncio
async def test_concurrent_consumers_single_winner(user, email_sender, hasher, request_reset, consume_reset):
    await request_reset(user.email)
    token = email_sender.reset_tokens_for(user.email)[0]

    results = await asyncio.gather(
        *[consume_reset(user.email, token, f"password{i}") for i in range(10)]
    )

    winners = [i for i, r in enumerate(results) if r.is_ok()]
    losers = [r for r in results if r.is_err()]
    assert len(winners) == 1
    assert all(r.error.code == "TOKEN_MISMATCH" for r in losers)
    assert hasher.verify(f"password{winners[0]}", user.password_hash)


@pytest.mark.asyncio
async def test_reset_walkthrough(monkeypatch, user, store, hasher, email_sender, request_reset, consume_reset):
    """a@x.com requests twice, gets TOK1 both times, uses it once"""
    monkeypatch.setattr(request_password_reset_use_case, "generate_reset_token", lambda: "TOK1")

    assert (await request_reset("a@x.com")).is_ok()
    assert email_sender.reset_links == [("a@x.com", "TOK1")]

    assert (await request_reset("a@x.com")).is_ok()
    assert email_sender.reset_links == [("a@x.com", "TOK1"), ("a@x.com", "TOK1")]

    updated = await consume_reset("a@x.com", "TOK1", "newpass")
    assert updated.is_ok()
    assert hasher.verify("newpass", user.password_hash)
    assert "a@x.com" not in store.password_resets

    again = await consume_reset("a@x.com", "TOK1", "again")
    assert again.is_err()
    assert again.error.code == "TOKEN_MISMATCH"
    assert hasher.verify("newpass", user.password_hash)
