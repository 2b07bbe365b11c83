"""
Location Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Location


class LocationCommand(BaseModel):
    """Create/update command for a favourite location"""

    city_name: str
    city_key: str


class LocationInfo(BaseModel):
    id: str
    user_id: str
    city_name: str
    city_key: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_location(cls, location: Location) -> "LocationInfo":
        return cls(
            id=str(location.id),
            user_id=str(location.user_id),
            city_name=location.city_name,
            city_key=location.city_key,
            created_at=location.created_at,
            updated_at=location.updated_at,
        )


class LocationListResponse(BaseModel):
    location: List[LocationInfo]


class LocationDetailResponse(BaseModel):
    location: LocationInfo


class LocationMessageResponse(BaseModel):
    message: str
    location: Optional[LocationInfo] = None
