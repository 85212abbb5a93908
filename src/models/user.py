"""User model."""

from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, func

from src.database import Base


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass(frozen=True)
class IssuedToken:
    """A one-time token together with the moment it stops being accepted."""

    value: str
    expires_at: datetime


class User(Base):
    """User account with its pending verification and reset tokens."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "(verification_token IS NULL) = (verification_token_expires_at IS NULL)",
            name="ck_users_verification_token_pair",
        ),
        CheckConstraint(
            "(reset_password_token IS NULL) = (reset_password_expires_at IS NULL)",
            name="ck_users_reset_password_token_pair",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    is_verified = Column(Boolean, nullable=False, default=False)
    last_login = Column(DateTime(timezone=True), nullable=True)

    # Only written through the `verification` / `password_reset` properties
    verification_token = Column(String(6), nullable=True, index=True)
    verification_token_expires_at = Column(DateTime(timezone=True), nullable=True)
    reset_password_token = Column(String(64), nullable=True, index=True)
    reset_password_expires_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    @property
    def verification(self) -> IssuedToken | None:
        """Pending email verification code, if any."""
        if self.verification_token is None:
            return None
        return IssuedToken(self.verification_token, as_utc(self.verification_token_expires_at))

    @verification.setter
    def verification(self, token: IssuedToken | None) -> None:
        self.verification_token = token.value if token else None
        self.verification_token_expires_at = token.expires_at if token else None

    @property
    def password_reset(self) -> IssuedToken | None:
        """Pending password reset token, if any."""
        if self.reset_password_token is None:
            return None
        return IssuedToken(self.reset_password_token, as_utc(self.reset_password_expires_at))

    @password_reset.setter
    def password_reset(self, token: IssuedToken | None) -> None:
        self.reset_password_token = token.value if token else None
        self.reset_password_expires_at = token.expires_at if token else None

    def __repr__(self) -> str:
        return f"<User {self.email}>"
