from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from nuggets.config import Config
from nuggets.core.core import Core
from nuggets.core.modules.contact.models import ContactSubmission
from nuggets.core.modules.gallery.models import GalleryItem
from nuggets.core.modules.order.models import Order, OrderPatch
from nuggets.core.modules.session.models import AuthToken, Role
from nuggets.errors import AuthenticationError

logger = structlog.get_logger(__name__)

ROLE_HOME_PAGES = {
    Role.CLIENT: "/client-board",
    Role.ADMIN: "/admin-board",
}


class App:
    """Facade for all application operations, validates access before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @property
    def config(self) -> Config:
        return self._core.config

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    # === Authentication ===
    def resolve_role(self, auth_token: AuthToken | None) -> Role:
        """Role of the caller, derived from the server-held session only."""
        return self._core.services.access.resolve_role(auth_token)

    async def login(self, secret: str) -> tuple[AuthToken, Role]:
        """Check a shared secret and open a session for the matching role."""
        role = self._core.services.access.check_credentials(secret)
        if role == Role.NONE:
            logger.info("login_rejected")
            raise AuthenticationError("Invalid password")
        return self._core.services.session.create_session(role), role

    async def logout(self, auth_token: AuthToken | None) -> None:
        """Invalidate the session if there is one."""
        if auth_token:
            self._core.services.session.invalidate_session(auth_token)

    # === Orders ===
    async def get_orders(self, auth_token: AuthToken | None) -> list[Order]:
        """List all orders (client or admin)."""
        self._core.services.access.ensure_client_access(auth_token)
        return await self._core.services.order.list_orders()

    async def create_order(self, auth_token: AuthToken | None, client: str, title: str, status: str | None = None) -> Order:
        """Create an order (admin only)."""
        self._core.services.access.ensure_admin(auth_token)
        return await self._core.services.order.create_order(client, title, status)

    async def update_order(self, auth_token: AuthToken | None, order_id: str, patch: OrderPatch) -> Order:
        """Update order fields (partial update, admin only)."""
        self._core.services.access.ensure_admin(auth_token)
        return await self._core.services.order.update_order(order_id, patch)

    async def delete_order(self, auth_token: AuthToken | None, order_id: str) -> None:
        """Permanently delete an order (admin only)."""
        self._core.services.access.ensure_admin(auth_token)
        await self._core.services.order.delete_order(order_id)

    # === Public site ===
    async def submit_contact(self, submission: ContactSubmission) -> None:
        await self._core.services.contact.submit(submission)

    async def get_gallery(self) -> list[GalleryItem]:
        return await self._core.services.gallery.list_items()

    def home_page(self, role: Role) -> str:
        return ROLE_HOME_PAGES.get(role, "/portal")
