"""Contact form delivery to the chat webhook."""

import httpx
import structlog

from nuggets.config import Config
from nuggets.core.core import Service
from nuggets.core.modules.contact.models import ContactSubmission
from nuggets.errors import UpstreamError, ValidationError

logger = structlog.get_logger(__name__)

DETAILS_LIMIT = 300
WEBHOOK_TIMEOUT = 10.0


class ContactService(Service):
    """Forwards contact submissions. One delivery attempt, no retries."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        # Replaced in tests with httpx.MockTransport
        self.transport: httpx.AsyncBaseTransport | None = None

    async def submit(self, submission: ContactSubmission) -> None:
        """Send the submission to the webhook.

        Raises:
            ValidationError: If a required field is empty
            UpstreamError: If the webhook is not configured, unreachable or rejects the payload
        """
        missing = submission.missing_required()
        if missing:
            raise ValidationError("Discord Username, Discord ID, and message are required")

        webhook_url = self.config.discord_webhook_url
        if not webhook_url:
            logger.error("contact_webhook_not_configured")
            raise UpstreamError("Contact webhook is not configured", status_code=500)

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=WEBHOOK_TIMEOUT) as client:
                response = await client.post(webhook_url, json=submission.to_webhook_payload())
        except httpx.HTTPError as e:
            logger.warning("contact_webhook_failed", error=str(e))
            raise UpstreamError("Discord webhook failed", details=str(e)[:DETAILS_LIMIT]) from e

        if not response.is_success:
            logger.warning("contact_webhook_rejected", status_code=response.status_code)
            raise UpstreamError("Discord webhook failed", details=response.text[:DETAILS_LIMIT])

        logger.info("contact_webhook_sent")
