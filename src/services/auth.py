"""Authentication primitives: password hashing, session JWTs and user lookups."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache

from fastapi import Response
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.models.user import User

MIN_PASSWORD_LENGTH = 6


@lru_cache
def get_pwd_context(rounds: int) -> CryptContext:
    """Password hashing context with a fixed bcrypt work factor."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def verify_password(
    plain_password: str, hashed_password: str, settings: Settings | None = None
) -> bool:
    """Verify a password against its hash."""
    settings = settings or get_settings()
    return get_pwd_context(settings.bcrypt_rounds).verify(plain_password, hashed_password)


def get_password_hash(password: str, settings: Settings | None = None) -> str:
    """Hash a password with a fresh salt."""
    settings = settings or get_settings()
    return get_pwd_context(settings.bcrypt_rounds).hash(password)


def is_strong_password(password: str) -> bool:
    """Minimal password policy: at least six characters."""
    return len(password) >= MIN_PASSWORD_LENGTH


def create_access_token(user_id: int, settings: Settings | None = None) -> str:
    """Create a signed session JWT for a user."""
    settings = settings or get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings | None = None) -> dict | None:
    """Decode and validate a session JWT, returning None when invalid or expired."""
    settings = settings or get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def set_session_cookie(response: Response, token: str, settings: Settings | None = None) -> None:
    """Attach the session token to the response as an HTTP-only cookie."""
    settings = settings or get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.jwt_expiration_minutes * 60,
        path=settings.session_cookie_path,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


def clear_session_cookie(response: Response, settings: Settings | None = None) -> None:
    """Tell the client to drop the session cookie immediately."""
    settings = settings or get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        path=settings.session_cookie_path,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively."""
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_verification_code(db: Session, code: str, now: datetime) -> User | None:
    """Get the user holding this verification code, if the code is still live."""
    return (
        db.query(User)
        .filter(
            User.verification_token == code,
            User.verification_token_expires_at > now,
        )
        .first()
    )


def get_user_by_reset_token(db: Session, token: str, now: datetime) -> User | None:
    """Get the user holding this reset token, if the token is still live."""
    return (
        db.query(User)
        .filter(
            User.reset_password_token == token,
            User.reset_password_expires_at > now,
        )
        .first()
    )


def authenticate_user(
    db: Session, email: str, password: str, settings: Settings | None = None
) -> User | None:
    """Authenticate a user by email and password."""
    settings = settings or get_settings()
    user = get_user_by_email(db, email)
    if not user:
        # Keep response time similar whether or not the account exists
        get_pwd_context(settings.bcrypt_rounds).dummy_verify()
        return None
    if not verify_password(password, user.password_hash, settings):
        return None
    return user
