"""
Password Reset Use Cases

Reset token lifecycle: request (issue or reuse) and consume.
"""

from .request_password_reset_use_case import (
    RequestPasswordResetUseCase,
    generate_reset_token,
)
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    PasswordResetLinkResponse,
    ResetPasswordCommand,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    "generate_reset_token",
    # DTOs
    "ResetPasswordCommand",
    "PasswordResetLinkResponse",
    "ResetPasswordResponse",
]
