from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, cast

from nuggets.config import Config


class Service:
    """Base class for services sharing the application config."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    if TYPE_CHECKING:
        from nuggets.core.modules.access.service import AccessService
        from nuggets.core.modules.contact.service import ContactService
        from nuggets.core.modules.gallery.service import GalleryService
        from nuggets.core.modules.order.service import OrderService
        from nuggets.core.modules.session.service import SessionService

    session: SessionService
    access: AccessService
    order: OrderService
    contact: ContactService
    gallery: GalleryService

    def __init__(self, config: Config) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        # Order matters for initialization - session must come before access
        service_configs = [
            ("session", "nuggets.core.modules.session.service", "SessionService"),
            ("access", "nuggets.core.modules.access.service", "AccessService"),
            ("order", "nuggets.core.modules.order.service", "OrderService"),
            ("contact", "nuggets.core.modules.contact.service", "ContactService"),
            ("gallery", "nuggets.core.modules.gallery.service", "GalleryService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(config)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config and all service instances."""

    config: Config
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.services = Services(config)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        await self.services.stop_all()
