"""
Location Use Cases

Favourite-location CRUD, scoped to the authenticated user.
"""

from .list_locations_use_case import ListLocationsUseCase
from .create_location_use_case import CreateLocationUseCase
from .get_location_use_case import GetLocationUseCase
from .update_location_use_case import UpdateLocationUseCase
from .delete_location_use_case import DeleteLocationUseCase
from .dtos import (
    LocationCommand,
    LocationDetailResponse,
    LocationInfo,
    LocationListResponse,
    LocationMessageResponse,
)

__all__ = [
    "ListLocationsUseCase",
    "CreateLocationUseCase",
    "GetLocationUseCase",
    "UpdateLocationUseCase",
    "DeleteLocationUseCase",
    "LocationCommand",
    "LocationInfo",
    "LocationListResponse",
    "LocationDetailResponse",
    "LocationMessageResponse",
]
