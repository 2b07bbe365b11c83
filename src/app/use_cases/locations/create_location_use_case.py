"""
Create Location Use Case

Adds a favourite city for the caller, up to a fixed number per user.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthContext
from src.domain.entities import Location
from .dtos import LocationCommand, LocationInfo, LocationMessageResponse

logger = logging.getLogger(__name__)


class CreateLocationUseCase:
    """
    Create Location Use Case

    Business Rules:
    - A user keeps at most max_locations locations (LOCATION_LIMIT_REACHED)
    - The new location is owned by the caller
    - The user row is locked before counting, so concurrent creates for one
      user are serialized and cannot overshoot the limit
    """

    def __init__(self, uow: UnitOfWork, max_locations: Optional[int] = None):
        self.uow = uow
        self.max_locations = (
            ApplicationConfig.MAX_FAVOURITE_LOCATIONS
            if max_locations is None
            else max_locations
        )

    async def execute(
        self, auth: AuthContext, command: LocationCommand
    ) -> Result[LocationMessageResponse]:
        async with self.uow:
            user = await self.uow.users.lock_by_id(auth.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            count = await self.uow.locations.count_by_user_id(auth.user_id)
            if count >= self.max_locations:
                return Return.err(
                    Error("LOCATION_LIMIT_REACHED", "You have reached your maximum limit")
                )

            location = Location(
                user_id=auth.user_id,
                city_name=command.city_name,
                city_key=command.city_key,
            )
            location = await self.uow.locations.create(location)

            await self.uow.commit()

            logger.info("User %s added location %s", auth.user_id, location.id)

            return Return.ok(
                LocationMessageResponse(
                    message="New City Added Successfully",
                    location=LocationInfo.from_location(location),
                )
            )
