from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthContext
from .dtos import LocationDetailResponse, LocationInfo


class GetLocationUseCase:
    """
    Returns one of the caller's locations.

    Another user's location is reported as not found.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth: AuthContext, location_id: UUID) -> Result[LocationDetailResponse]:
        async with self.uow:
            location = await self.uow.locations.get_by_id(location_id)
            if location is None or location.user_id != auth.user_id:
                return Return.err(Error("LOCATION_NOT_FOUND", "Location not found"))

            return Return.ok(
                LocationDetailResponse(location=LocationInfo.from_location(location))
            )
