from datetime import timedelta

from nuggets.core.core import Service
from nuggets.core.modules.access.credentials import check_secret
from nuggets.core.modules.session.models import AuthToken, Role
from nuggets.errors import AuthenticationError


class AccessService(Service):
    """Resolves session tokens to roles and enforces role requirements."""

    def check_credentials(self, secret: str) -> Role:
        return check_secret(secret, self.config.client_secret, self.config.admin_secret)

    def resolve_role(self, auth_token: AuthToken | None) -> Role:
        """Role of the session behind the token, NONE for missing, unknown or expired tokens.

        Expired sessions are evicted on lookup.
        """
        if not auth_token:
            return Role.NONE
        session = self.core.services.session.get_session(auth_token)
        if session is None:
            return Role.NONE
        if session.is_expired(timedelta(seconds=self.config.session_max_age)):
            self.core.services.session.invalidate_session(auth_token)
            return Role.NONE
        return session.role

    def has_client_access(self, auth_token: AuthToken | None) -> bool:
        return self.resolve_role(auth_token) in (Role.CLIENT, Role.ADMIN)

    def is_admin(self, auth_token: AuthToken | None) -> bool:
        return self.resolve_role(auth_token) == Role.ADMIN

    def ensure_client_access(self, auth_token: AuthToken | None) -> Role:
        """Ensure the token belongs to a client or admin session."""
        role = self.resolve_role(auth_token)
        if role == Role.NONE:
            raise AuthenticationError
        return role

    def ensure_admin(self, auth_token: AuthToken | None) -> None:
        """Ensure the token belongs to an admin session, raise AuthenticationError if not."""
        if not self.is_admin(auth_token):
            raise AuthenticationError("Admin session required")
