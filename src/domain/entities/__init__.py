"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .user import User
from .session import Session
from .password_reset import PasswordReset
from .location import Location

__all__ = [
    "User",
    "Session",
    "PasswordReset",
    "Location",
]
