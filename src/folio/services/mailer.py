"""Transactional email through the Resend HTTP API."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from folio.core.errors import UpstreamError
from folio.core.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailMessage:
    to: list[str]
    subject: str
    html: str


class Mailer:
    """Send email via Resend, or log it when no API key is configured."""

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or default_settings
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.config.resend_api_key)

    def send(self, message: EmailMessage) -> None:
        """Deliver ``message``.

        Raises:
            UpstreamError: If the provider rejects the request.
        """
        if not self.enabled:
            logger.info("email delivery disabled; would send %r to %s", message.subject, message.to)
            return

        payload = {
            "from": self.config.from_email,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
        }
        try:
            with httpx.Client(
                base_url=self.config.resend_base_url,
                timeout=10.0,
                transport=self._transport,
            ) as client:
                response = client.post(
                    "/emails",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.config.resend_api_key}"},
                )
                response.raise_for_status()
        except httpx.HTTPError as err:
            logger.error("email delivery to %s failed: %s", message.to, err)
            raise UpstreamError("Failed to send email") from err

        logger.info("sent %r to %s", message.subject, message.to)


def password_reset_message(
    email: str, name: str | None, token: str, config: Settings | None = None
) -> EmailMessage:
    """Build the password reset email with a link back to the web client."""
    cfg = config or default_settings
    link = f"{cfg.client_url}/reset-password?token={token}"
    greeting = name or "there"
    html = (
        f"<p>Hi {greeting},</p>"
        "<p>We received a request to reset your password. "
        f'Follow <a href="{link}">this link</a> to choose a new one. '
        "The link expires in 24 hours.</p>"
        "<p>If you did not ask for this, you can ignore this email.</p>"
    )
    return EmailMessage(to=[email], subject="Reset your password", html=html)
