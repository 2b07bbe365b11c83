import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthContext
from .dtos import LocationMessageResponse

logger = logging.getLogger(__name__)


class DeleteLocationUseCase:
    """
    Delete Location Use Case

    Errors:
        - LOCATION_NOT_FOUND: No location with this id
        - ACTION_FORBIDDEN: Location belongs to another user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth: AuthContext, location_id: UUID) -> Result[LocationMessageResponse]:
        async with self.uow:
            location = await self.uow.locations.get_by_id(location_id)
            if location is None:
                return Return.err(Error("LOCATION_NOT_FOUND", "Location not found"))

            if location.user_id != auth.user_id:
                return Return.err(Error("ACTION_FORBIDDEN", "Action Forbidden"))

            await self.uow.locations.delete(location)
            await self.uow.commit()

        logger.info("User %s deleted location %s", auth.user_id, location_id)

        return Return.ok(
            LocationMessageResponse(message="Location deleted successfully", location=None)
        )
