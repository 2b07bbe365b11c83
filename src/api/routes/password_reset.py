from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, model_validator

from src.api.error import ClientError, ServerError
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.password_reset import (
    PasswordResetLinkResponse,
    RequestPasswordResetUseCase,
    ResetPasswordCommand,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)
from src.depends import get_email_sender, get_password_hasher, get_unit_of_work

router = APIRouter(prefix="/password", tags=["Password Reset"])


class ResetLinkRequest(BaseModel):
    """Reset link HTTP request payload"""

    email: EmailStr = Field(..., description="Email of the account to reset")


@router.post(
    "/reset-link",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetLinkResponse,
)
async def request_reset_link(
    request: ResetLinkRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Request Password Reset

    Emails the reset token of the account. Repeated requests send the same
    token until it is used.

    Raises:
        - 404 Not Found: No user with this email
        - 500 Internal Server Error: Email could not be sent
    """
    use_case = RequestPasswordResetUseCase(uow, email_sender)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload

    password_confirmation must repeat password.
    """

    email: EmailStr
    token: str = Field(..., min_length=1)
    password: str
    password_confirmation: str

    @model_validator(mode="after")
    def check_passwords_match(self):
        if self.password != self.password_confirmation:
            raise ValueError("The password confirmation does not match")
        return self


@router.post(
    "/reset", status_code=status.HTTP_201_CREATED, response_model=ResetPasswordResponse
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Reset Password

    Consumes the reset token and sets the new password. All sessions of the
    user are revoked.

    Raises:
        - 400 Bad Request: Password too short
        - 403 Forbidden: Email and token do not match a live reset
        - 422 Unprocessable Entity: Confirmation mismatch (handled by FastAPI)
    """
    command = ResetPasswordCommand(
        email=request.email, token=request.token, password=request.password
    )

    use_case = ResetPasswordUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TOKEN_MISMATCH":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
