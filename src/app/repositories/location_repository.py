from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Location


class ILocationRepository(ABC):
    """Location repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, location_id: UUID) -> Optional[Location]:
        """Get location by ID"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Location]:
        """Get all locations of a user, oldest first"""
        pass

    @abstractmethod
    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count locations of a user"""
        pass

    @abstractmethod
    async def create(self, location: Location) -> Location:
        """Create a new location"""
        pass

    @abstractmethod
    async def update(self, location: Location) -> Location:
        """Update existing location"""
        pass

    @abstractmethod
    async def delete(self, location: Location) -> None:
        """Delete a location"""
        pass
