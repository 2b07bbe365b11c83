"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .authenticate_use_case import AuthenticateUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .get_profile_use_case import GetProfileUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .dtos import (
    AuthContext,
    MessageResponse,
    RegisterCommand,
    RegisterResponse,
    TokenResponse,
    UserInfo,
    VerifyEmailResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "AuthenticateUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "GetProfileUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "AuthContext",
    # DTOs - Responses
    "RegisterResponse",
    "TokenResponse",
    "MessageResponse",
    "VerifyEmailResponse",
    "UserInfo",
]
