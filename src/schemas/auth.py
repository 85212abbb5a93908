"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserSignup(BaseModel):
    """User signup request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)
    name: str = Field(..., max_length=255)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class VerifyEmailRequest(BaseModel):
    """Email verification code submission."""

    # Clients may send the 6-digit code as a JSON number
    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: str


class EmailRequest(BaseModel):
    """Request that only identifies an account (forgot password, resend verification)."""

    email: EmailStr = Field(..., max_length=255)


class ResetPasswordRequest(BaseModel):
    """New password for a reset token carried in the URL."""

    password: str = Field(..., max_length=128)


class UserResponse(BaseModel):
    """Sanitized user, without password hash or pending tokens."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    name: str
    is_verified: bool
    last_login: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageResponse(BaseModel):
    """Uniform response envelope."""

    success: bool = True
    message: str


class AuthResponse(MessageResponse):
    """Response envelope carrying the affected user."""

    user: UserResponse
