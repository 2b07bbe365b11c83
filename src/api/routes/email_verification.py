from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthContext,
    MessageResponse,
    ResendVerificationUseCase,
    VerifyEmailResponse,
    VerifyEmailUseCase,
)
from src.depends import get_current_user, get_email_sender, get_unit_of_work

router = APIRouter(prefix="/email", tags=["Email Verification"])


@router.get(
    "/verify/{user_id}", status_code=status.HTTP_200_OK, response_model=VerifyEmailResponse
)
async def verify_email(
    user_id: UUID,
    token: str = Query(..., description="Signed verification token"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Email Verification

    Target of the link sent on registration.

    Raises:
        - 401 Unauthorized: Invalid or expired link
        - 404 Not Found: User no longer exists
    """
    use_case = VerifyEmailUseCase(uow)
    result = await use_case.execute(user_id, token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_VERIFICATION_URL":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post("/resend", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def resend_verification(
    auth: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Resend Verification Email

    Raises:
        - 409 Conflict: Email already verified
        - 500 Internal Server Error: Email could not be sent
    """
    use_case = ResendVerificationUseCase(uow, email_sender)
    result = await use_case.execute(auth)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_VERIFIED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
