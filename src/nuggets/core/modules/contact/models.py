from pydantic import BaseModel, ConfigDict, Field

from nuggets.utils import now, truncate

SHORT_FIELD_LIMIT = 256
MESSAGE_LIMIT = 1500
PLACEHOLDER = "—"
EMBED_COLOR = 0x111111


class ContactSubmission(BaseModel):
    """Contact form fields as posted by the site script."""

    discord_username: str = Field("", alias="discordUsername")
    discord_id: str = Field("", alias="discordId")
    message: str = ""
    service: str | None = None
    budget: str | None = None

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    def missing_required(self) -> list[str]:
        required = {"discordUsername": self.discord_username, "discordId": self.discord_id, "message": self.message}
        return [name for name, value in required.items() if not value.strip()]

    def to_webhook_payload(self) -> dict[str, object]:
        """Discord embed with every field truncated to what the webhook accepts."""
        return {
            "username": "Nuggets Customs • Contact",
            "embeds": [
                {
                    "title": "New Contact Form Submission",
                    "color": EMBED_COLOR,
                    "fields": [
                        {"name": "Discord Username", "value": truncate(self.discord_username, SHORT_FIELD_LIMIT), "inline": True},
                        {"name": "Discord ID", "value": truncate(self.discord_id, SHORT_FIELD_LIMIT), "inline": True},
                        {"name": "Service", "value": truncate(self.service, SHORT_FIELD_LIMIT) or PLACEHOLDER, "inline": True},
                        {"name": "Budget", "value": truncate(self.budget, SHORT_FIELD_LIMIT) or PLACEHOLDER, "inline": True},
                        {"name": "Message", "value": truncate(self.message, MESSAGE_LIMIT), "inline": False},
                    ],
                    "footer": {"text": "Nuggets Customs Website"},
                    "timestamp": now().isoformat(),
                }
            ],
        }
