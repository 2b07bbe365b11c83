"""
Reset Password Use Case

Consumes a reset token and overwrites the user's password.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ResetPasswordCommand, ResetPasswordResponse
from .request_password_reset_use_case import is_reset_expired

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

TOKEN_MISMATCH_ERROR = Error("TOKEN_MISMATCH", "Either your email or token is wrong")


class ResetPasswordUseCase:
    """
    Reset Password Use Case

    Business Rules:
    - email and token must both match the live reset record
    - Wrong email, wrong token, expired and never-requested all give TOKEN_MISMATCH
    - A token is consumed once: the conditional delete decides the winner
      when several requests present the same token
    - The new hash and the record deletion commit together
    - All sessions of the user are revoked
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        token_ttl_minutes: Optional[int] = None,
    ):
        self.uow = uow
        self.hasher = hasher
        self.token_ttl_minutes = (
            ApplicationConfig.PASSWORD_RESET_TTL_MINUTES
            if token_ttl_minutes is None
            else token_ttl_minutes
        )

    async def execute(self, command: ResetPasswordCommand) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case

        Args:
            command: ResetPasswordCommand with email, token and new password

        Returns:
            Result[ResetPasswordResponse] or Error

        Errors:
            - TOKEN_MISMATCH: No live record for this email and token
            - INVALID_PASSWORD: New password shorter than 6 characters (record kept)
            - INTERNAL_CONSISTENCY_ERROR: Token matched but the user is gone
        """
        async with self.uow:
            matches = await self.uow.password_resets.find_by_email_and_token(
                command.email, command.token
            )
            live = [m for m in matches if not is_reset_expired(m, self.token_ttl_minutes)]
            if not live:
                return Return.err(TOKEN_MISMATCH_ERROR)

            if len(command.password) < MIN_PASSWORD_LENGTH:
                return Return.err(
                    Error(
                        "INVALID_PASSWORD",
                        f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                    )
                )

            deleted = await self.uow.password_resets.delete_by_email_and_token(
                command.email, command.token
            )
            if deleted != 1:
                # Consumed by a concurrent request
                return Return.err(TOKEN_MISMATCH_ERROR)

            user = await self.uow.users.get_by_email(command.email)
            if user is None:
                logger.error("Reset record consumed for an email with no user")
                return Return.err(
                    Error(
                        "INTERNAL_CONSISTENCY_ERROR",
                        "Reset record exists for an unknown user",
                    )
                )

            user.password_hash = self.hasher.hash(command.password)
            await self.uow.users.update(user)
            await self.uow.sessions.revoke_all_by_user_id(user.id)

            await self.uow.commit()

        logger.info("User %s reset password", user.id)

        return Return.ok(
            ResetPasswordResponse(message="Password has been updated successfully")
        )
