"""
Refresh Token Use Case

Exchanges an access token (possibly expired, within the refresh window)
for a new one.
"""

import logging
from datetime import datetime, timedelta
from uuid import UUID

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Session
from .dtos import TokenResponse, UserInfo

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Token rotation: the old session is revoked, a new session is issued
    - A revoked session cannot be refreshed
    - The refresh window is checked by the caller from the token's iat claim
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[TokenResponse]:
        """
        Execute refresh token use case.

        Args:
            user_id: sub claim of the presented token
            session_id: jti claim of the presented token

        Returns:
            Result with TokenResponse containing the new token, or Error
        """
        async with self.uow:
            old_session = await self.uow.sessions.get_by_id(session_id)

            if old_session is None or old_session.user_id != user_id:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            if old_session.revoked:
                return Return.err(Error("TOKEN_REVOKED", "Token has been revoked"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            # Rotation: only one caller can revoke the old session
            revoked = await self.uow.sessions.revoke_by_id(session_id)
            if not revoked:
                return Return.err(Error("TOKEN_REVOKED", "Token has been revoked"))

            ttl = timedelta(minutes=ApplicationConfig.JWT_TTL_MINUTES)
            new_session = Session(
                user_id=user.id,
                expires_at=datetime.utcnow() + ttl,
            )
            new_session = await self.uow.sessions.create(new_session)

            await self.uow.commit()

            logger.info(
                "User %s refreshed session %s -> %s", user.id, session_id, new_session.id
            )

            return Return.ok(
                TokenResponse(
                    access_token=generate_jwt(user.id, new_session.id),
                    expires_in=int(ttl.total_seconds()),
                    user=UserInfo.from_user(user),
                )
            )
