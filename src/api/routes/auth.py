from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import ClientError, ServerError
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthContext,
    GetProfileUseCase,
    LoginUseCase,
    LogoutUseCase,
    MessageResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    TokenResponse,
    UserInfo,
)
from src.depends import (
    get_current_user,
    get_email_sender,
    get_password_hasher,
    get_refresh_claims,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    firstname: str = Field(..., min_length=2, max_length=100)
    lastname: str = Field(..., min_length=2, max_length=100)
    email: EmailStr = Field(..., description="User email address (max 100 chars)")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")

    @field_validator("email")
    @classmethod
    def check_email_length(cls, value: str) -> str:
        if len(value) > 100:
            raise ValueError("email must be at most 100 characters")
        return value


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    User Registration

    Creates an unverified account and emails a verification link.

    Raises:
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = RegisterCommand(
        firstname=request.firstname,
        lastname=request.lastname,
        email=request.email,
        password=request.password,
    )

    use_case = RegisterUseCase(uow, hasher, email_sender)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    use_case = LoginUseCase(uow, hasher)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Revokes the session of the presented token"""
    result = await LogoutUseCase(uow).execute(auth)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def refresh(
    claims: AuthContext = Depends(get_refresh_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Refresh JWT Token

    Accepts the current (possibly expired) access token while it is inside
    the refresh window. Implements token rotation.

    Raises:
        - 401 Unauthorized: Invalid token, outside refresh window or revoked session
    """
    use_case = RefreshTokenUseCase(uow)
    result = await use_case.execute(claims.user_id, claims.session_id)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "TOKEN_REVOKED"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def profile(
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Authenticated user's public fields"""
    result = await GetProfileUseCase(uow).execute(auth)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
