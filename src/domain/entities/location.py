"""
Location Entity

A user's favourite city.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Location(SQLModel, table=True):
    """
    Location entity - a user's favourite city.

    Business Rules:
    - Owned by exactly one user
    - A user keeps at most MAX_FAVOURITE_LOCATIONS locations
    - city_key is the numeric key of the city in the weather provider
    """

    __tablename__ = "locations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    city_name: str = Field(max_length=255)
    city_key: str = Field(max_length=50)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
