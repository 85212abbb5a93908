"""One-time token issuance for email verification and password reset."""

import secrets
from datetime import UTC, datetime, timedelta

from src.models.user import IssuedToken

VERIFICATION_CODE_TTL = timedelta(hours=24)
RESET_TOKEN_TTL = timedelta(hours=1)
RESET_TOKEN_BYTES = 20


def issue_verification_code(now: datetime | None = None) -> IssuedToken:
    """Issue a 6-digit numeric code, uniform over 100000-999999, valid for 24 hours."""
    now = now or datetime.now(UTC)
    code = str(100000 + secrets.randbelow(900000))
    return IssuedToken(value=code, expires_at=now + VERIFICATION_CODE_TTL)


def issue_reset_token(now: datetime | None = None) -> IssuedToken:
    """Issue a random 40-character hex token, valid for 1 hour."""
    now = now or datetime.now(UTC)
    token = secrets.token_hex(RESET_TOKEN_BYTES)
    return IssuedToken(value=token, expires_at=now + RESET_TOKEN_TTL)
