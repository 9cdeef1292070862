"""
Reminder Mailers

Delivery backends for bill reminder e-mails.
- ResendProvider: Resend HTTP API, used whenever RESEND_API_KEY is set
- ConsoleProvider: writes the reminder to the log (local development)

Providers report failures through DeliveryResult and never raise, so one bad
address cannot stop a reminder run.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

RESEND_BASE_URL = "https://api.resend.com"
DEFAULT_SENDER = "Ledgerly <onboarding@resend.dev>"


@dataclass
class ReminderEmail:
    """A rendered reminder for one recipient."""
    to: str
    subject: str
    html: str
    text: str
    sender: Optional[str] = None  # provider default when unset


@dataclass
class DeliveryResult:
    delivered: bool
    provider_id: Optional[str] = None
    error: Optional[str] = None


class EmailProvider(ABC):
    """Something that can deliver a ReminderEmail."""

    name: str = "abstract"

    @abstractmethod
    async def deliver(self, email: ReminderEmail) -> DeliveryResult:
        ...


class ResendProvider(EmailProvider):
    """
    Sends through the Resend API.

    https://resend.com/docs/api-reference/emails/send-email

    ``transport`` replaces the network layer of the underlying httpx client;
    tests pass an ``httpx.MockTransport``.
    """

    name = "resend"

    def __init__(
        self,
        api_key: str,
        sender: str = DEFAULT_SENDER,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.sender = sender
        self._transport = transport
        self._timeout = timeout

    def _payload(self, email: ReminderEmail) -> Dict[str, Any]:
        return {
            "from": email.sender or self.sender,
            "to": [email.to],
            "subject": email.subject,
            "html": email.html,
            "text": email.text,
        }

    async def deliver(self, email: ReminderEmail) -> DeliveryResult:
        if not self.api_key:
            return DeliveryResult(delivered=False, error="Resend API key not configured")

        try:
            async with httpx.AsyncClient(
                base_url=RESEND_BASE_URL,
                headers={"Authorization": f"Bearer {self.api_key}"},
                transport=self._transport,
                timeout=self._timeout,
            ) as client:
                response = await client.post("/emails", json=self._payload(email))
        except httpx.HTTPError as e:
            logger.exception(f"Resend request for {email.to} failed")
            return DeliveryResult(delivered=False, error=str(e))

        if response.is_success:
            return DeliveryResult(delivered=True, provider_id=response.json().get("id"))

        logger.error(f"Resend rejected reminder for {email.to}: {response.status_code} {response.text}")
        return DeliveryResult(delivered=False, error=response.text)


class ConsoleProvider(EmailProvider):
    """Logs reminders instead of sending them."""

    name = "console"

    async def deliver(self, email: ReminderEmail) -> DeliveryResult:
        logger.info(f"[console mail] to={email.to} subject={email.subject!r}\n{email.text}")
        return DeliveryResult(delivered=True, provider_id="console-dev")


def get_email_provider() -> EmailProvider:
    """Resend when RESEND_API_KEY is configured, console otherwise."""
    from app.config import settings

    if not settings.RESEND_API_KEY:
        logger.warning("RESEND_API_KEY not configured, reminders will be logged only")
        return ConsoleProvider()

    return ResendProvider(api_key=settings.RESEND_API_KEY, sender=settings.REMINDER_FROM_EMAIL)
