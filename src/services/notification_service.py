"""Notification dispatcher for account lifecycle emails."""

import logging

from src.config import Settings, get_settings
from src.models.enums import EmailKind
from src.tasks.emails import send_email

logger = logging.getLogger(__name__)


class NotificationService:
    """Hands account emails to the background queue.

    Request handlers never wait on the email provider; a message that cannot
    be queued is logged and dropped, the state change it reports stands.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def _enqueue(self, kind: EmailKind, to: str, context: dict) -> bool:
        try:
            send_email.delay(kind.value, to, context)
        except Exception as e:
            logger.error(f"Failed to queue {kind} email for {to}: {e}", exc_info=True)
            return False
        logger.info(f"Queued {kind} email for {to}")
        return True

    def build_reset_url(self, token: str) -> str:
        """Client-facing link that carries a password reset token."""
        return f"{self.settings.client_url.rstrip('/')}/reset-password/{token}"

    def send_verification_email(self, email: str, code: str) -> bool:
        return self._enqueue(EmailKind.VERIFICATION, email, {"code": code})

    def send_welcome_email(self, email: str, name: str) -> bool:
        return self._enqueue(EmailKind.WELCOME, email, {"name": name})

    def send_password_reset_email(self, email: str, token: str) -> bool:
        return self._enqueue(
            EmailKind.PASSWORD_RESET, email, {"reset_url": self.build_reset_url(token)}
        )

    def send_reset_success_email(self, email: str) -> bool:
        return self._enqueue(EmailKind.RESET_SUCCESS, email, {})


def get_notification_service() -> NotificationService:
    """Get a notification service instance."""
    return NotificationService()
