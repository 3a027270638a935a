import secrets

import structlog

from nuggets.config import Config
from nuggets.core.core import Service
from nuggets.core.modules.session.models import AuthToken, Role, Session

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """In-memory session store. Sessions are lost on restart, forcing re-authentication."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._sessions: dict[AuthToken, Session] = {}

    def create_session(self, role: Role) -> AuthToken:
        if role == Role.NONE:
            raise ValueError("Cannot create a session without a role")
        auth_token = AuthToken(secrets.token_urlsafe(32))
        self._sessions[auth_token] = Session(auth_token=auth_token, role=role)
        logger.info("session_created", role=role.value)
        return auth_token

    def get_session(self, auth_token: AuthToken) -> Session | None:
        """Return the stored session, expired or not."""
        return self._sessions.get(auth_token)

    def invalidate_session(self, auth_token: AuthToken) -> None:
        """Remove a session. Unknown tokens are ignored."""
        session = self._sessions.pop(auth_token, None)
        if session is not None:
            logger.info("session_revoked", role=session.role.value)

    def session_count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()

    async def on_stop(self) -> None:
        self.clear()
