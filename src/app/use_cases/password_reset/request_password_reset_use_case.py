"""
Request Password Reset Use Case

Issues (or re-issues) the reset token of an email and sends it to the owner.
"""

import logging
import secrets
import string
from datetime import datetime, timedelta
from typing import Optional

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PasswordReset
from .dtos import PasswordResetLinkResponse

logger = logging.getLogger(__name__)

TOKEN_LENGTH = 40
TOKEN_ALPHABET = string.ascii_letters + string.digits

RESET_LINK_SENT_MESSAGE = "Password reset link has been sent to your email"


def generate_reset_token() -> str:
    """40 random alphanumeric characters from the OS CSPRNG"""
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH))


def is_reset_expired(password_reset: PasswordReset, ttl_minutes: int) -> bool:
    """A ttl of 0 disables expiry"""
    if ttl_minutes <= 0:
        return False
    return password_reset.created_at + timedelta(minutes=ttl_minutes) <= datetime.utcnow()


class RequestPasswordResetUseCase:
    """
    Request Password Reset Use Case

    Business Logic:
    1. Look up the user by email (unknown email -> EMAIL_NOT_FOUND)
    2. Reuse the live token of the email, or create one
    3. Commit
    4. Send the token to the email address

    Repeated requests before the token is consumed send the same token,
    and an email never has more than one reset record.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        token_ttl_minutes: Optional[int] = None,
        hide_unknown_email: Optional[bool] = None,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.token_ttl_minutes = (
            ApplicationConfig.PASSWORD_RESET_TTL_MINUTES
            if token_ttl_minutes is None
            else token_ttl_minutes
        )
        self.hide_unknown_email = (
            ApplicationConfig.PASSWORD_RESET_HIDE_UNKNOWN_EMAIL
            if hide_unknown_email is None
            else hide_unknown_email
        )

    async def execute(self, email: str) -> Result[PasswordResetLinkResponse]:
        """
        Execute request password reset use case

        Args:
            email: Email address the reset is requested for

        Returns:
            Result[PasswordResetLinkResponse], Error(EMAIL_NOT_FOUND) for an
            unknown email, or Error(EMAIL_DELIVERY_FAILED) if the token could
            not be sent
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                if self.hide_unknown_email:
                    return Return.ok(
                        PasswordResetLinkResponse(message=RESET_LINK_SENT_MESSAGE)
                    )
                return Return.err(
                    Error("EMAIL_NOT_FOUND", "We can't find a user with that email address")
                )

            token = await self.ensure_token(email)

            await self.uow.commit()

        # The record is committed before sending, so a retry re-sends this token
        try:
            await self.email_sender.send_password_reset_link(email, token)
        except EmailDeliveryError:
            logger.error("Password reset email for user %s was not delivered", user.id)
            return Return.err(
                Error("EMAIL_DELIVERY_FAILED", "Password reset email could not be sent")
            )

        logger.info("Password reset link sent to user %s", user.id)

        return Return.ok(PasswordResetLinkResponse(message=RESET_LINK_SENT_MESSAGE))

    async def ensure_token(self, email: str) -> str:
        """
        Return the live token of email, creating a record if there is none.

        Must be called inside an open unit of work; the caller commits.
        """
        existing = await self.uow.password_resets.get_by_email(email)

        if existing is not None:
            if not is_reset_expired(existing, self.token_ttl_minutes):
                return existing.token
            await self.uow.password_resets.delete_by_email(email)

        password_reset = await self.uow.password_resets.create_if_absent(
            PasswordReset(email=email, token=generate_reset_token())
        )
        return password_reset.token
