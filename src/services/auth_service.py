"""Account lifecycle: signup, verification, login and password reset."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.exceptions import ConflictError, InternalError, NotFoundOrExpiredError, ValidationError
from src.models.user import User
from src.services.auth import (
    authenticate_user,
    get_password_hash,
    get_user_by_email,
    get_user_by_reset_token,
    get_user_by_verification_code,
    is_strong_password,
    normalize_email,
)
from src.services.notification_service import NotificationService
from src.services.tokens import issue_reset_token, issue_verification_code

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class AuthService:
    """Service for the authentication state transitions on a user record.

    Each public method performs one transition: it validates input, looks the
    user up, mutates and commits the record, then queues any notification.
    The commit always happens before the notification is queued.
    """

    def __init__(
        self,
        db: Session,
        settings: Settings | None = None,
        notifications: NotificationService | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.db = db
        self.settings = settings or get_settings()
        self.notifications = notifications or NotificationService(self.settings)
        self.clock = clock

    def _commit(self, operation: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error in {operation}: {e}", exc_info=True)
            raise InternalError(str(e)) from e

    def _hash_password(self, password: str, operation: str) -> str:
        try:
            return get_password_hash(password, self.settings)
        except ValueError as e:
            logger.error(f"Error hashing password in {operation}: {e}", exc_info=True)
            raise InternalError(str(e)) from e

    def signup(self, email: str, password: str, name: str) -> User:
        """Create an unverified user and send them a verification code."""
        email = normalize_email(email or "")
        name = (name or "").strip()
        if not email or not password or not name:
            raise ValidationError("All fields are required")

        if get_user_by_email(self.db, email):
            raise ConflictError("User already exists!")

        if not is_strong_password(password):
            raise ValidationError("Password is too short!")

        user = User(
            email=email,
            name=name,
            password_hash=self._hash_password(password, "signup"),
            is_verified=False,
        )
        user.verification = issue_verification_code(self.clock())
        self.db.add(user)

        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            logger.info(f"Duplicate signup for {email}: {e}")
            raise ConflictError("User already exists!") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error in signup: {e}", exc_info=True)
            raise InternalError(str(e)) from e

        self.db.refresh(user)
        logger.info(f"User {user.id} signed up")

        self.notifications.send_verification_email(user.email, user.verification_token)
        return user

    def verify_email(self, code: str) -> User:
        """Mark the holder of a live verification code as verified."""
        user = get_user_by_verification_code(self.db, code, self.clock())
        if not user:
            raise NotFoundOrExpiredError("Invalid or expired verification code")

        user.is_verified = True
        user.verification = None
        self._commit("verify_email")
        self.db.refresh(user)
        logger.info(f"User {user.id} verified their email")

        self.notifications.send_welcome_email(user.email, user.name)
        return user

    def login(self, email: str, password: str) -> User:
        """Check credentials and record the login time."""
        user = authenticate_user(self.db, email or "", password or "", self.settings)
        if not user:
            raise NotFoundOrExpiredError("Invalid credentials")

        user.last_login = self.clock()
        self._commit("login")
        self.db.refresh(user)
        return user

    def forgot_password(self, email: str) -> None:
        """Issue a reset token and email the reset link."""
        user = get_user_by_email(self.db, email or "")
        if not user:
            raise NotFoundOrExpiredError("User not found")

        reset = issue_reset_token(self.clock())
        user.password_reset = reset
        self._commit("forgot_password")
        logger.info(f"Password reset requested for user {user.id}")

        self.notifications.send_password_reset_email(user.email, reset.value)

    def reset_password(self, token: str, password: str) -> None:
        """Replace the password of the holder of a live reset token."""
        if not password or not is_strong_password(password):
            raise ValidationError("Password is too short!")

        user = get_user_by_reset_token(self.db, token, self.clock())
        if not user:
            raise NotFoundOrExpiredError("Invalid or expired reset token")

        user.password_hash = self._hash_password(password, "reset_password")
        user.password_reset = None
        self._commit("reset_password")
        logger.info(f"Password reset for user {user.id}")

        self.notifications.send_reset_success_email(user.email)

    def resend_verification(self, email: str) -> bool:
        """
        Replace the pending verification code with a fresh one and send it.

        Returns False without changes if the user is already verified.
        """
        user = get_user_by_email(self.db, email or "")
        if not user:
            raise NotFoundOrExpiredError("User not found")

        if user.is_verified:
            return False

        verification = issue_verification_code(self.clock())
        user.verification = verification
        self._commit("resend_verification")

        self.notifications.send_verification_email(user.email, verification.value)
        return True

    def get_user(self, user_id: int) -> User | None:
        """Load the user a session belongs to."""
        return self.db.query(User).filter(User.id == user_id).first()
