"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import User


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    firstname: str
    lastname: str
    email: str
    password: str


class AuthContext(BaseModel):
    """Identity of the caller, resolved from a verified access token"""

    user_id: UUID
    session_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user fields (never includes the password hash)"""

    id: str
    firstname: str
    lastname: str
    email: str
    email_verified_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
        )


class RegisterResponse(BaseModel):
    """Response for registration use case"""

    message: str
    user: UserInfo


class TokenResponse(BaseModel):
    """Response for login and refresh use cases"""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserInfo


class MessageResponse(BaseModel):
    """Plain message response"""

    message: str


class VerifyEmailResponse(BaseModel):
    """Response for email verification use case"""

    message: str
    user: UserInfo
