from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthContext


class AuthenticateUseCase:
    """
    Resolves the claims of a verified access token to an AuthContext.

    The token signature and expiry are checked by the caller; this use case
    checks the server-side state: the session must exist and be unrevoked
    and the user must still exist.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[AuthContext]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or session.user_id != user_id:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            if session.revoked:
                return Return.err(Error("TOKEN_REVOKED", "Token has been revoked"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            return Return.ok(AuthContext(user_id=user_id, session_id=session_id))
