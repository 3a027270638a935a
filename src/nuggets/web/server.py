from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from nuggets.app import App
from nuggets.config import Config
from nuggets.errors import StorageError, UserError
from nuggets.web.error_handlers import (
    general_exception_handler,
    request_validation_error_handler,
    storage_error_handler,
    user_error_handler,
)
from nuggets.web.guard import protect_pages
from nuggets.web.openapi import set_custom_openapi
from nuggets.web.routers import auth_router, contact_router, gallery_router, orders_router, pages_router

logger = structlog.get_logger(__name__)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Nuggets Customs API",
        lifespan=lifespan,
    )
    app.state.app = app_instance
    app.state.config = config

    # Must wrap the static mount below, otherwise board pages are reachable as plain files
    app.middleware("http")(protect_pages)

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health", include_in_schema=False)
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(orders_router)
    app.include_router(contact_router)
    app.include_router(gallery_router)
    app.include_router(pages_router)

    images_path = Path(config.images_path)
    if images_path.is_dir():
        app.mount("/images", StaticFiles(directory=images_path), name="images")
    site_path = Path(config.site_path)
    if site_path.is_dir():
        # Registered last so the routes above take precedence
        app.mount("/", StaticFiles(directory=site_path, html=True), name="site")
    else:
        logger.warning("site_directory_missing", path=str(site_path))

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
