"""
Resend Verification Email Use Case

Sends a fresh verification link to the authenticated user.
"""

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_email_verification_token
from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthContext, MessageResponse


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - Already verified users get EMAIL_ALREADY_VERIFIED and no email
    - Links are stateless signatures, so older links stay valid until expiry
    """

    def __init__(self, uow: UnitOfWork, email_sender: IEmailSender):
        self.uow = uow
        self.email_sender = email_sender

    async def execute(self, auth: AuthContext) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(auth.user_id)

            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.has_verified_email:
                return Return.err(Error("EMAIL_ALREADY_VERIFIED", "Email Already Verified"))

            email = user.email

        token = generate_email_verification_token(auth.user_id)
        try:
            await self.email_sender.send_verification_link(email, auth.user_id, token)
        except EmailDeliveryError:
            return Return.err(
                Error("EMAIL_DELIVERY_FAILED", "Verification email could not be sent")
            )

        return Return.ok(
            MessageResponse(message="Email verification link sent to your email")
        )
