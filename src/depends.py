from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.email_sender import LogEmailSender, SmtpEmailSender
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import AuthenticationError
from src.api.utils.jwt import is_within_refresh_window, verify_jwt
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthContext, AuthenticateUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

UNAUTHENTICATED_ERROR = Error("UNAUTHENTICATED", "Unauthenticated")
INVALID_TOKEN_ERROR = Error("INVALID_TOKEN", "Invalid or expired token")


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


def get_email_sender() -> IEmailSender:
    """Mail transport selected by MAIL_BACKEND ("log" or "smtp")"""
    options = dict(
        from_address=ApplicationConfig.MAIL_FROM_ADDRESS,
        from_name=ApplicationConfig.MAIL_FROM_NAME,
        app_url=ApplicationConfig.APP_URL,
        frontend_url=ApplicationConfig.FRONTEND_URL,
        api_prefix=ApplicationConfig.API_PREFIX,
    )
    if ApplicationConfig.MAIL_BACKEND == "smtp":
        return SmtpEmailSender(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            username=ApplicationConfig.SMTP_USERNAME,
            password=ApplicationConfig.SMTP_PASSWORD,
            use_tls=ApplicationConfig.SMTP_USE_TLS,
            **options,
        )
    return LogEmailSender(**options)


def _claims_ids(payload: dict) -> tuple:
    try:
        return UUID(payload["sub"]), UUID(payload["jti"])
    except (KeyError, ValueError):
        raise AuthenticationError(INVALID_TOKEN_ERROR)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthContext:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        AuthContext of the caller (user id and session id)

    Raises:
        AuthenticationError: if token is missing, invalid, expired or revoked
    """
    if credentials is None:
        raise AuthenticationError(UNAUTHENTICATED_ERROR)

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise AuthenticationError(INVALID_TOKEN_ERROR)

    user_id, session_id = _claims_ids(payload)

    result = await AuthenticateUseCase(uow).execute(user_id, session_id)
    if result.is_err():
        raise AuthenticationError(result.error)

    return result.value


async def get_refresh_claims(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthContext:
    """
    Claims of a token presented for refresh.

    The token may be expired but must have been issued within
    JWT_REFRESH_TTL_MINUTES. Session state is checked by the refresh use case.
    """
    if credentials is None:
        raise AuthenticationError(UNAUTHENTICATED_ERROR)

    payload = verify_jwt(credentials.credentials, allow_expired=True)
    if payload is None or not is_within_refresh_window(payload):
        raise AuthenticationError(INVALID_TOKEN_ERROR)

    user_id, session_id = _claims_ids(payload)
    return AuthContext(user_id=user_id, session_id=session_id)
