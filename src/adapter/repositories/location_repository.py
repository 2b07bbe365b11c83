from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.location_repository import ILocationRepository
from src.domain.entities import Location


class LocationRepository(ILocationRepository):
    """Location repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, location_id: UUID) -> Optional[Location]:
        """Get location by ID"""
        stmt = select(Location).where(Location.id == location_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[Location]:
        """Get all locations of a user, oldest first"""
        stmt = (
            select(Location)
            .where(Location.user_id == user_id)
            .order_by(Location.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count locations of a user"""
        stmt = select(func.count()).select_from(Location).where(Location.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, location: Location) -> Location:
        """Create a new location"""
        self.session.add(location)
        await self.session.flush()
        await self.session.refresh(location)
        return location

    async def update(self, location: Location) -> Location:
        """Update existing location"""
        self.session.add(location)
        await self.session.flush()
        await self.session.refresh(location)
        return location

    async def delete(self, location: Location) -> None:
        """Delete a location"""
        await self.session.delete(location)
        await self.session.flush()
