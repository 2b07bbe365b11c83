"""
PasswordReset Entity

Active password reset token of an email address.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel


class PasswordReset(SQLModel, table=True):
    """
    PasswordReset entity - the active reset token of an email address.

    Business Rules:
    - At most one record per email (unique constraint)
    - Token is a 40-character random alphanumeric string, stored as issued
      so a repeated request can re-send the same token
    - Never updated in place: reused while live, deleted when consumed
    - Expiry is derived from created_at and PASSWORD_RESET_TTL_MINUTES
    """

    __tablename__ = "password_resets"

    email: str = Field(primary_key=True, max_length=100)
    token: str = Field(max_length=64)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
