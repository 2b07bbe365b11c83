"""
User Entity

Represents a registered account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - represents a registered account.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - email_verified_at is set once, when the verification link is followed
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    firstname: str = Field(max_length=100)
    lastname: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    email_verified_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    @property
    def has_verified_email(self) -> bool:
        return self.email_verified_at is not None
