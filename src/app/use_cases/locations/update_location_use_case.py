import logging
from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthContext
from .dtos import LocationCommand, LocationInfo, LocationMessageResponse

logger = logging.getLogger(__name__)


class UpdateLocationUseCase:
    """
    Update Location Use Case

    Errors:
        - LOCATION_NOT_FOUND: No location with this id
        - ACTION_FORBIDDEN: Location belongs to another user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth: AuthContext, location_id: UUID, command: LocationCommand
    ) -> Result[LocationMessageResponse]:
        async with self.uow:
            location = await self.uow.locations.get_by_id(location_id)
            if location is None:
                return Return.err(Error("LOCATION_NOT_FOUND", "Location not found"))

            if location.user_id != auth.user_id:
                return Return.err(Error("ACTION_FORBIDDEN", "Action Forbidden"))

            location.city_name = command.city_name
            location.city_key = command.city_key
            location.updated_at = datetime.utcnow()
            location = await self.uow.locations.update(location)

            await self.uow.commit()

            logger.info("User %s updated location %s", auth.user_id, location.id)

            return Return.ok(
                LocationMessageResponse(
                    message="Location updated successfully",
                    location=LocationInfo.from_location(location),
                )
            )
