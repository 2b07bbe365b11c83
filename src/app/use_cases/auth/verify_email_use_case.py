"""
Verify Email Use Case

Handles email verification via a signed link.
"""

import logging
from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.api.utils.jwt import verify_email_verification_token
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserInfo, VerifyEmailResponse

logger = logging.getLogger(__name__)


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Link token must be an unexpired signature for the user id in the link
    - Sets email_verified_at on first use
    - Already verified users return success (idempotent)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, token: str) -> Result[VerifyEmailResponse]:
        """
        Execute email verification use case.

        Args:
            user_id: User id from the verification link
            token: Signed token from the verification link

        Returns:
            Result with verification status, or Error

        Errors:
            - INVALID_VERIFICATION_URL: Signature invalid, expired or for another user
            - USER_NOT_FOUND: User no longer exists
        """
        if not verify_email_verification_token(token, user_id):
            return Return.err(
                Error("INVALID_VERIFICATION_URL", "Invalid Email Verification Url")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not user.has_verified_email:
                user.email_verified_at = datetime.utcnow()
                user = await self.uow.users.update(user)
                await self.uow.commit()
                logger.info("User %s verified email", user.id)

            return Return.ok(
                VerifyEmailResponse(
                    message="Email successfully verified",
                    user=UserInfo.from_user(user),
                )
            )
