from abc import ABC, abstractmethod
from uuid import UUID


class EmailDeliveryError(Exception):
    """Raised when an email could not be handed to the mail transport"""


class IEmailSender(ABC):
    """Outgoing email interface - application layer"""

    @abstractmethod
    async def send_password_reset_link(self, email: str, token: str) -> None:
        """Send the password reset token to the owner of email"""
        pass

    @abstractmethod
    async def send_verification_link(self, email: str, user_id: UUID, token: str) -> None:
        """Send a signed email verification link"""
        pass
