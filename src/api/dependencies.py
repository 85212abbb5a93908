"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.exceptions import UnauthorizedError
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.auth_service import AuthService
from src.services.notification_service import NotificationService, get_notification_service


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    notifications: Annotated[NotificationService, Depends(get_notification_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, settings=get_settings(), notifications=notifications)


def get_current_user(
    request: Request,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current authenticated user from the session cookie."""
    settings = auth_service.settings
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise UnauthorizedError("Unauthorized - invalid or missing session")

    payload = decode_access_token(token, settings)
    if payload is None or payload.get("sub") is None:
        raise UnauthorizedError("Unauthorized - invalid or missing session")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise UnauthorizedError("Unauthorized - invalid or missing session") from None

    user = auth_service.get_user(user_id)
    if user is None:
        raise UnauthorizedError("Unauthorized - invalid or missing session")

    return user
