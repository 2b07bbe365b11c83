"""
In-memory unit of work

Repositories share one InMemoryStore so several use cases can run against
the same data concurrently. Every repository call yields to the event loop
first, which lets asyncio.gather interleave callers between statements.
Single statements (conditional delete, insert-if-absent) are atomic, like
their SQL counterparts. Row locks are per-user asyncio.Lock objects held
until the unit of work commits or exits.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID

from src.app.repositories.location_repository import ILocationRepository
from src.app.repositories.password_reset_repository import IPasswordResetRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.user_repository import IUserRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Location, PasswordReset, Session, User


@dataclass
class InMemoryStore:
    users: Dict[UUID, User] = field(default_factory=dict)
    sessions: Dict[UUID, Session] = field(default_factory=dict)
    password_resets: Dict[str, PasswordReset] = field(default_factory=dict)
    locations: Dict[UUID, Location] = field(default_factory=dict)
    locks: Dict[UUID, asyncio.Lock] = field(default_factory=dict)


class InMemoryUserRepository(IUserRepository):
    def __init__(self, store: InMemoryStore, held: List[asyncio.Lock]):
        self.store = store
        self.held = held

    async def get_by_email(self, email: str) -> Optional[User]:
        await asyncio.sleep(0)
        return next((u for u in self.store.users.values() if u.email == email), None)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        await asyncio.sleep(0)
        return self.store.users.get(user_id)

    async def create(self, user: User) -> User:
        await asyncio.sleep(0)
        self.store.users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        await asyncio.sleep(0)
        self.store.users[user.id] = user
        return user

    async def lock_by_id(self, user_id: UUID) -> Optional[User]:
        lock = self.store.locks.setdefault(user_id, asyncio.Lock())
        await lock.acquire()
        self.held.append(lock)
        return self.store.users.get(user_id)


class InMemorySessionRepository(ISessionRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        await asyncio.sleep(0)
        return self.store.sessions.get(session_id)

    async def create(self, session_obj: Session) -> Session:
        await asyncio.sleep(0)
        self.store.sessions[session_obj.id] = session_obj
        return session_obj

    async def revoke_by_id(self, session_id: UUID) -> bool:
        await asyncio.sleep(0)
        session_obj = self.store.sessions.get(session_id)
        if session_obj is None or session_obj.revoked:
            return False
        session_obj.revoked = True
        return True

    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        await asyncio.sleep(0)
        count = 0
        for session_obj in self.store.sessions.values():
            if session_obj.user_id == user_id and not session_obj.revoked:
                session_obj.revoked = True
                count += 1
        return count


class InMemoryPasswordResetRepository(IPasswordResetRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_email(self, email: str) -> Optional[PasswordReset]:
        await asyncio.sleep(0)
        return self.store.password_resets.get(email)

    async def find_by_email_and_token(self, email: str, token: str) -> List[PasswordReset]:
        await asyncio.sleep(0)
        record = self.store.password_resets.get(email)
        return [record] if record is not None and record.token == token else []

    async def create_if_absent(self, password_reset: PasswordReset) -> PasswordReset:
        await asyncio.sleep(0)
        return self.store.password_resets.setdefault(password_reset.email, password_reset)

    async def delete_by_email(self, email: str) -> int:
        await asyncio.sleep(0)
        return 1 if self.store.password_resets.pop(email, None) is not None else 0

    async def delete_by_email_and_token(self, email: str, token: str) -> int:
        await asyncio.sleep(0)
        record = self.store.password_resets.get(email)
        if record is None or record.token != token:
            return 0
        del self.store.password_resets[email]
        return 1


class InMemoryLocationRepository(ILocationRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, location_id: UUID) -> Optional[Location]:
        await asyncio.sleep(0)
        return self.store.locations.get(location_id)

    async def get_by_user_id(self, user_id: UUID) -> List[Location]:
        await asyncio.sleep(0)
        return [loc for loc in self.store.locations.values() if loc.user_id == user_id]

    async def count_by_user_id(self, user_id: UUID) -> int:
        return len(await self.get_by_user_id(user_id))

    async def create(self, location: Location) -> Location:
        await asyncio.sleep(0)
        self.store.locations[location.id] = location
        return location

    async def update(self, location: Location) -> Location:
        await asyncio.sleep(0)
        self.store.locations[location.id] = location
        return location

    async def delete(self, location: Location) -> None:
        await asyncio.sleep(0)
        self.store.locations.pop(location.id, None)


class InMemoryUnitOfWork(UnitOfWork):
    """Writes go straight to the store; commit only counts calls"""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.commits = 0
        self.held: List[asyncio.Lock] = []

    async def __aenter__(self):
        self.users = InMemoryUserRepository(self.store, self.held)
        self.sessions = InMemorySessionRepository(self.store)
        self.password_resets = InMemoryPasswordResetRepository(self.store)
        self.locations = InMemoryLocationRepository(self.store)
        return self

    async def __aexit__(self, *args):
        self._release()
        return False

    async def commit(self):
        self.commits += 1
        self._release()

    def _release(self):
        while self.held:
            self.held.pop().release()

    async def rollback(self):
        pass
