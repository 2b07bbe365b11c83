"""
Password Reset Use Case DTOs
"""

from pydantic import BaseModel


class ResetPasswordCommand(BaseModel):
    """Reset password command - email, token and the new password"""

    email: str
    token: str
    password: str


class PasswordResetLinkResponse(BaseModel):
    """Response for a reset link request. Never carries the token."""

    status: str = "sent"
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for a successful password reset"""

    status: str = "updated"
    message: str
