"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthResponse,
    EmailRequest,
    MessageResponse,
    ResetPasswordRequest,
    UserLogin,
    UserResponse,
    UserSignup,
    VerifyEmailRequest,
)

__all__ = [
    "UserSignup",
    "UserLogin",
    "VerifyEmailRequest",
    "EmailRequest",
    "ResetPasswordRequest",
    "UserResponse",
    "MessageResponse",
    "AuthResponse",
]
