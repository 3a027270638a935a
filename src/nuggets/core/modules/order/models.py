import secrets
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from nuggets.utils import now

DEFAULT_STATUS = "Queued"


def generate_order_id(at: datetime | None = None) -> str:
    """Creation time in epoch milliseconds plus a random suffix."""
    timestamp = at or now()
    return f"order-{int(timestamp.timestamp() * 1000)}-{secrets.token_hex(3)}"


class Order(BaseModel):
    """One tracked commission, persisted and served with camelCase keys."""

    id: str = Field(default_factory=generate_order_id)
    client: str
    title: str
    status: str = DEFAULT_STATUS
    updated_at: datetime = Field(default_factory=now, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    def to_file(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True)


class OrderCollection(BaseModel):
    """Persisted layout of the order file."""

    orders: list[Order] = []


class OrderPatch(BaseModel):
    """Partial update. Only fields explicitly set are applied."""

    client: str | None = None
    title: str | None = None
    status: str | None = None
    # Accepted for compatibility with the board script; the server always stamps its own time
    updated_at: datetime | None = Field(None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    def changes(self) -> dict[str, str]:
        """Fields explicitly provided, excluding the timestamp."""
        data = self.model_dump(exclude_unset=True, exclude={"updated_at"})
        return {key: value for key, value in data.items() if value is not None}
