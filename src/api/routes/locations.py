from typing import Union
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthContext
from src.app.use_cases.locations import (
    CreateLocationUseCase,
    DeleteLocationUseCase,
    GetLocationUseCase,
    ListLocationsUseCase,
    LocationCommand,
    LocationDetailResponse,
    LocationListResponse,
    LocationMessageResponse,
    UpdateLocationUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/location", tags=["Locations"])


class LocationRequest(BaseModel):
    """
    Location HTTP request payload

    city_key is numeric; a JSON number or a numeric string is accepted.
    """

    city_name: str = Field(..., min_length=1, max_length=255)
    city_key: Union[int, str] = Field(..., description="Numeric city key")

    @field_validator("city_key")
    @classmethod
    def check_numeric(cls, value):
        if isinstance(value, bool):
            raise ValueError("city_key must be numeric")
        value = str(value).strip()
        if not value.isdigit():
            raise ValueError("city_key must be numeric")
        return value

    def to_command(self) -> LocationCommand:
        return LocationCommand(city_name=self.city_name, city_key=self.city_key)


def _raise_for(error):
    if error.code in ("LOCATION_NOT_FOUND", "USER_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("LOCATION_LIMIT_REACHED", "ACTION_FORBIDDEN"):
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=LocationListResponse)
async def list_locations(
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Caller's favourite locations"""
    result = await ListLocationsUseCase(uow).execute(auth)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LocationMessageResponse)
async def create_location(
    request: LocationRequest,
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a favourite location

    Raises:
        - 403 Forbidden: Caller already has the maximum number of locations
    """
    result = await CreateLocationUseCase(uow).execute(auth, request.to_command())

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/{location_id}", status_code=status.HTTP_200_OK, response_model=LocationDetailResponse
)
async def get_location(
    location_id: UUID,
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    One of the caller's locations

    Raises:
        - 404 Not Found: No such location for the caller
    """
    result = await GetLocationUseCase(uow).execute(auth, location_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.put(
    "/{location_id}", status_code=status.HTTP_200_OK, response_model=LocationMessageResponse
)
async def update_location(
    location_id: UUID,
    request: LocationRequest,
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update a location

    Raises:
        - 403 Forbidden: Location belongs to another user
        - 404 Not Found: No such location
    """
    result = await UpdateLocationUseCase(uow).execute(
        auth, location_id, request.to_command()
    )

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.delete(
    "/{location_id}", status_code=status.HTTP_200_OK, response_model=LocationMessageResponse
)
async def delete_location(
    location_id: UUID,
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a location

    Raises:
        - 403 Forbidden: Location belongs to another user
        - 404 Not Found: No such location
    """
    result = await DeleteLocationUseCase(uow).execute(auth, location_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value
