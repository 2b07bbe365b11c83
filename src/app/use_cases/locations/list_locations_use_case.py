from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthContext
from .dtos import LocationInfo, LocationListResponse


class ListLocationsUseCase:
    """Lists the caller's favourite locations"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth: AuthContext) -> Result[LocationListResponse]:
        async with self.uow:
            locations = await self.uow.locations.get_by_user_id(auth.user_id)

            return Return.ok(
                LocationListResponse(
                    location=[LocationInfo.from_location(loc) for loc in locations]
                )
            )
