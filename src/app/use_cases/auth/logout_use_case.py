import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthContext, MessageResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """Revokes the session behind the caller's access token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth: AuthContext) -> Result[MessageResponse]:
        async with self.uow:
            await self.uow.sessions.revoke_by_id(auth.session_id)
            await self.uow.commit()

        logger.info("User %s logged out (session %s)", auth.user_id, auth.session_id)
        return Return.ok(MessageResponse(message="User successfully signed out!"))
