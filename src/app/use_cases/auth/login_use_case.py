"""
Login Use Case

Handles user authentication and returns a JWT access token.
"""

import logging
from datetime import datetime, timedelta

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Session
from .dtos import TokenResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password give the same error
    - A hash is computed for unknown emails too, so both paths take similar time
    - Creates a session whose id becomes the token's jti
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, email: str, password: str) -> Result[TokenResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with TokenResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.hasher.hash(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            ttl = timedelta(minutes=ApplicationConfig.JWT_TTL_MINUTES)
            session = Session(
                user_id=user.id,
                expires_at=datetime.utcnow() + ttl,
            )
            session = await self.uow.sessions.create(session)

            await self.uow.commit()

            logger.info("User %s logged in (session %s)", user.id, session.id)

            return Return.ok(
                TokenResponse(
                    access_token=generate_jwt(user.id, session.id),
                    expires_in=int(ttl.total_seconds()),
                    user=UserInfo.from_user(user),
                )
            )
