from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_reset_repository import IPasswordResetRepository
from src.domain.entities import PasswordReset


class PasswordResetRepository(IPasswordResetRepository):
    """PasswordReset repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[PasswordReset]:
        """Get the reset record of an email"""
        stmt = select(PasswordReset).where(PasswordReset.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_email_and_token(self, email: str, token: str) -> List[PasswordReset]:
        """Get reset records matching both email and token"""
        stmt = select(PasswordReset).where(
            PasswordReset.email == email, PasswordReset.token == token
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create_if_absent(self, password_reset: PasswordReset) -> PasswordReset:
        """
        Insert a reset record unless the email already has one.

        The insert runs in a SAVEPOINT so a unique-key violation caused by a
        concurrent request only rolls back the savepoint; the record that won
        the race is returned instead.
        """
        try:
            async with self.session.begin_nested():
                self.session.add(password_reset)
                await self.session.flush()
        except IntegrityError:
            existing = await self.get_by_email(password_reset.email)
            if existing is None:
                raise
            return existing

        await self.session.refresh(password_reset)
        return password_reset

    async def delete_by_email(self, email: str) -> int:
        """Delete every reset record of an email"""
        stmt = delete(PasswordReset).where(PasswordReset.email == email)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_email_and_token(self, email: str, token: str) -> int:
        """
        Conditional delete used as the single source of truth when a token is
        consumed: of several concurrent callers only one sees a row count of 1.
        """
        stmt = delete(PasswordReset).where(
            PasswordReset.email == email, PasswordReset.token == token
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
