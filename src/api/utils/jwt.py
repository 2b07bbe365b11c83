from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ALGORITHM = "HS256"
ACCESS_TOKEN_TYPE = "access"
EMAIL_VERIFICATION_PURPOSE = "email_verification"


def generate_jwt(user_id: UUID, session_id: UUID) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID (sub claim)
        session_id: Session UUID (jti claim), checked against the sessions table

    Returns:
        JWT token string (HS256, JWT_TTL_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "jti": str(session_id),
        "type": ACCESS_TOKEN_TYPE,
        "exp": now + timedelta(minutes=ApplicationConfig.JWT_TTL_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_jwt(token: str, allow_expired: bool = False) -> Optional[dict]:
    """
    Verify and decode JWT access token

    Args:
        token: JWT token string
        allow_expired: Skip the exp check (used by token refresh)

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ALGORITHM],
            options={"verify_exp": not allow_expired},
        )
    except JWTError:
        return None

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        return None
    if not payload.get("sub") or not payload.get("jti"):
        return None
    return payload


def is_within_refresh_window(payload: dict) -> bool:
    """True if the token was issued less than JWT_REFRESH_TTL_MINUTES ago"""
    issued_at = payload.get("iat")
    if issued_at is None:
        return False
    issued = datetime.fromtimestamp(issued_at, UTC)
    window = timedelta(minutes=ApplicationConfig.JWT_REFRESH_TTL_MINUTES)
    return datetime.now(UTC) - issued < window


def generate_email_verification_token(user_id: UUID) -> str:
    """
    Generate the signed token carried by an email verification link

    Returns:
        JWT token string (HS256, EMAIL_VERIFICATION_TTL_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "purpose": EMAIL_VERIFICATION_PURPOSE,
        "exp": now + timedelta(minutes=ApplicationConfig.EMAIL_VERIFICATION_TTL_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_email_verification_token(token: str, user_id: UUID) -> bool:
    """True if token is an unexpired verification token signed for user_id"""
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return False
    return (
        payload.get("purpose") == EMAIL_VERIFICATION_PURPOSE
        and payload.get("sub") == str(user_id)
    )
