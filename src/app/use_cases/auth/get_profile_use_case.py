from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthContext, UserInfo


class GetProfileUseCase:
    """Returns the public fields of the authenticated user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth: AuthContext) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(auth.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(UserInfo.from_user(user))
