from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import PasswordReset


class IPasswordResetRepository(ABC):
    """
    PasswordReset repository interface - application layer

    Records are immutable: there is no update operation.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[PasswordReset]:
        """Get the reset record of an email"""
        pass

    @abstractmethod
    async def find_by_email_and_token(self, email: str, token: str) -> List[PasswordReset]:
        """Get reset records matching both email and token"""
        pass

    @abstractmethod
    async def create_if_absent(self, password_reset: PasswordReset) -> PasswordReset:
        """
        Insert a reset record unless the email already has one.

        Returns the inserted record, or the existing record when a concurrent
        request inserted first.
        """
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> int:
        """Delete every reset record of an email. Returns count deleted."""
        pass

    @abstractmethod
    async def delete_by_email_and_token(self, email: str, token: str) -> int:
        """Delete reset records matching both email and token. Returns count deleted."""
        pass
