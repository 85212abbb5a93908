"""Email delivery through the Mailtrap sending API."""

import logging
from typing import Any

import httpx

from src.config import Settings, get_settings

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending transactional email over HTTP."""

    def __init__(self, settings: Settings | None = None, client: httpx.Client | None = None) -> None:
        self.settings = settings or get_settings()
        self.timeout = 30.0
        self._client = client

    @property
    def is_configured(self) -> bool:
        """Check if an API token is available."""
        return bool(self.settings.mailtrap_api_token)

    def _sender(self) -> dict[str, str]:
        return {"email": self.settings.mail_sender_email, "name": self.settings.mail_sender_name}

    def _post(self, payload: dict[str, Any]) -> bool:
        if not self.is_configured:
            logger.warning("Mailtrap API token not configured, email not sent")
            return False

        headers = {"Authorization": f"Bearer {self.settings.mailtrap_api_token}"}
        if self._client is not None:
            response = self._client.post(self.settings.mailtrap_api_url, json=payload, headers=headers)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.settings.mailtrap_api_url, json=payload, headers=headers)
        response.raise_for_status()
        return True

    def send(self, to: str, subject: str, html: str, category: str) -> bool:
        """
        Send an HTML email to a single recipient.

        Returns True if the provider accepted the message, False if sending is
        disabled. Raises httpx.HTTPError on transport or provider failure.
        """
        sent = self._post(
            {
                "from": self._sender(),
                "to": [{"email": to}],
                "subject": subject,
                "html": html,
                "category": category,
            }
        )
        if sent:
            logger.info(f"Email '{category}' sent to {to}")
        return sent

    def send_template(self, to: str, template_uuid: str, variables: dict[str, Any]) -> bool:
        """Send an email rendered by a provider-side template."""
        sent = self._post(
            {
                "from": self._sender(),
                "to": [{"email": to}],
                "template_uuid": template_uuid,
                "template_variables": variables,
            }
        )
        if sent:
            logger.info(f"Template email {template_uuid} sent to {to}")
        return sent
