"""Session management models."""

from datetime import datetime, timedelta
from enum import StrEnum
from typing import NewType

from pydantic import BaseModel, Field

from nuggets.utils import now

AuthToken = NewType("AuthToken", str)


class Role(StrEnum):
    """Trust tier of a caller."""

    NONE = "none"
    CLIENT = "client"
    ADMIN = "admin"


class Session(BaseModel):
    """Server-held proof of authentication, keyed by an opaque token."""

    auth_token: str
    role: Role
    created_at: datetime = Field(default_factory=now)

    def is_expired(self, max_age: timedelta, at: datetime | None = None) -> bool:
        return (at or now()) - self.created_at > max_age
