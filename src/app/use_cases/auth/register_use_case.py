import logging

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_email_verification_token
from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import RegisterCommand, RegisterResponse, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Check if email already exists
    2. Hash password
    3. Create User with email_verified_at unset
    4. Commit
    5. Email a signed verification link (failure is logged, not returned)
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher, email_sender: IEmailSender):
        self.uow = uow
        self.hasher = hasher
        self.email_sender = email_sender

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated names, email and password

        Returns:
            Result[RegisterResponse] with the created user
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            user = User(
                firstname=command.firstname,
                lastname=command.lastname,
                email=command.email,
                password_hash=self.hasher.hash(command.password),
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

        logger.info("User %s registered", user.id)

        # The account exists either way; a lost email can be re-sent later
        try:
            token = generate_email_verification_token(user.id)
            await self.email_sender.send_verification_link(user.email, user.id, token)
        except EmailDeliveryError:
            logger.warning("Verification email for user %s was not delivered", user.id)

        return Return.ok(
            RegisterResponse(
                message="User successfully registered",
                user=UserInfo.from_user(user),
            )
        )
