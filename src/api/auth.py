"""Authentication API endpoints.

Handlers that touch the database or bcrypt are plain functions so FastAPI
runs them in its threadpool instead of on the event loop.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_auth_service, get_current_user
from src.models.user import User
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
from src.services.auth import clear_session_cookie, create_access_token, set_session_cookie
from src.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _start_session(response: Response, auth_service: AuthService, user: User) -> None:
    token = create_access_token(user.id, auth_service.settings)
    set_session_cookie(response, token, auth_service.settings)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserSignup,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user and start a session."""
    user = auth_service.signup(user_data.email, user_data.password, user_data.name)
    _start_session(response, auth_service, user)

    return AuthResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/verify-email", response_model=AuthResponse)
def verify_email(
    body: VerifyEmailRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Verify an email address with the code that was mailed to it."""
    user = auth_service.verify_email(body.code)

    return AuthResponse(
        message="Email verified successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    user = auth_service.login(credentials.email, credentials.password)
    _start_session(response, auth_service, user)

    return AuthResponse(
        message="Logged in successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Logout by dropping the session cookie."""
    clear_session_cookie(response, auth_service.settings)
    return MessageResponse(message="Logged out successfully")


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    body: EmailRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Email a password reset link."""
    auth_service.forgot_password(body.email)
    return MessageResponse(message="Password reset link sent to your email!")


@router.post("/reset-password/{token}", response_model=MessageResponse)
def reset_password(
    token: str,
    body: ResetPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Set a new password using a reset token."""
    auth_service.reset_password(token, body.password)
    return MessageResponse(message="Password reset successfully!")


@router.post("/check-verify", response_model=MessageResponse)
def check_verify(
    body: EmailRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Resend the verification code unless the account is already verified."""
    if not auth_service.resend_verification(body.email):
        return MessageResponse(message="You are already verified!")
    return MessageResponse(message="Verification code sent to your email")


@router.get("/me", response_model=AuthResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the user the session cookie belongs to."""
    return AuthResponse(
        message="Authenticated",
        user=UserResponse.model_validate(current_user),
    )
