import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.password_hasher import BcryptPasswordHasher
from tests.fixtures.email_sender import RecordingEmailSender
from tests.fixtures.in_memory_uow import InMemoryStore, InMemoryUnitOfWork


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.lock_by_id = AsyncMock(return_value=None)

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.revoke_by_id = AsyncMock(return_value=True)
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)

    uow.password_resets = MagicMock()
    uow.password_resets.get_by_email = AsyncMock(return_value=None)
    uow.password_resets.find_by_email_and_token = AsyncMock(return_value=[])
    uow.password_resets.create_if_absent = AsyncMock(side_effect=lambda record: record)
    uow.password_resets.delete_by_email = AsyncMock(return_value=0)
    uow.password_resets.delete_by_email_and_token = AsyncMock(return_value=0)

    uow.locations = MagicMock()
    uow.locations.get_by_id = AsyncMock(return_value=None)
    uow.locations.get_by_user_id = AsyncMock(return_value=[])
    uow.locations.count_by_user_id = AsyncMock(return_value=0)
    uow.locations.create = AsyncMock(side_effect=lambda location: location)
    uow.locations.update = AsyncMock(side_effect=lambda location: location)
    uow.locations.delete = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def uow_factory(store):
    """New unit of work over the shared store, one per simulated request"""
    return lambda: InMemoryUnitOfWork(store)
