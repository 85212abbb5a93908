"""Celery tasks for transactional email delivery."""

import logging

import httpx

from src.celery_app import app as celery_app
from src.models.enums import EmailKind
from src.services.email_service import EmailService
from src.services.email_templates import (
    render_password_reset_email,
    render_reset_success_email,
    render_verification_email,
    render_welcome_email,
)

logger = logging.getLogger(__name__)


def deliver_email(email_service: EmailService, kind: EmailKind, to: str, context: dict) -> bool:
    """Render and send one email of the given kind."""
    if kind == EmailKind.VERIFICATION:
        return email_service.send(
            to,
            subject="Verify your email",
            html=render_verification_email(context["code"]),
            category="Email Verification",
        )

    if kind == EmailKind.WELCOME:
        template_uuid = email_service.settings.welcome_template_uuid
        if template_uuid:
            return email_service.send_template(
                to,
                template_uuid,
                {
                    "company_info_name": email_service.settings.mail_sender_name,
                    "name": context["name"],
                },
            )
        return email_service.send(
            to,
            subject="Welcome",
            html=render_welcome_email(context["name"]),
            category="Welcome",
        )

    if kind == EmailKind.PASSWORD_RESET:
        return email_service.send(
            to,
            subject="Reset your password",
            html=render_password_reset_email(context["reset_url"]),
            category="Password Reset",
        )

    if kind == EmailKind.RESET_SUCCESS:
        return email_service.send(
            to,
            subject="Password Reset Successful",
            html=render_reset_success_email(),
            category="Password Reset",
        )

    raise ValueError(f"Unknown email kind: {kind}")


@celery_app.task(bind=True, max_retries=3)
def send_email(self, kind: str, to: str, context: dict) -> dict:
    """Send a transactional email in the background.

    Args:
        kind: One of the EmailKind values
        to: Recipient address
        context: Template values for this kind (code, name or reset_url)

    Returns:
        dict with the delivery outcome
    """
    email_service = EmailService()
    try:
        sent = deliver_email(email_service, EmailKind(kind), to, context)
        return {"success": True, "kind": kind, "sent": sent}

    except httpx.HTTPError as e:
        logger.error(f"Error sending {kind} email to {to}: {e}")

        if self.request.retries < self.max_retries:
            raise self.retry(exc=e, countdown=30)

        return {"error": str(e)}
