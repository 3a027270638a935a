"""Shared pytest fixtures."""

import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from nuggets.app import App
from nuggets.config import Config
from nuggets.core.core import Core
from nuggets.web.server import create_fastapi_app

CLIENT_SECRET = "client-pass"
ADMIN_SECRET = "admin-pass"
WEBHOOK_URL = "https://discord.test/api/webhooks/1/abc"

PAGES = ["index", "about", "clients", "past-work", "contact", "portal", "client-board", "admin-board"]


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site directory with one HTML file per page."""
    site = tmp_path / "site"
    (site / "images").mkdir(parents=True)
    for name in PAGES:
        (site / f"{name}.html").write_text(f"<html><body>{name}</body></html>", encoding="utf-8")
    return site


@pytest.fixture
def config(tmp_path: Path, site_dir: Path) -> Config:
    """Create an isolated configuration for one test."""
    return Config(
        _env_file=None,
        client_secret=CLIENT_SECRET,
        admin_secret=ADMIN_SECRET,
        orders_path=str(tmp_path / "data" / "orders.json"),
        site_path=str(site_dir),
        images_path=str(site_dir / "images"),
        discord_webhook_url=WEBHOOK_URL,
    )


@pytest.fixture
def core(config: Config) -> Core:
    """Started core with fresh services."""
    core = Core(config)
    asyncio.run(core.on_start())
    return core


@pytest.fixture
def app(config: Config) -> App:
    return App(config)


@pytest.fixture
def client(app: App, config: Config):
    with TestClient(create_fastapi_app(app, config)) as test_client:
        yield test_client


def login(client: TestClient, secret: str) -> str:
    """Log in and return the session token."""
    response = client.post("/api/login", json={"secret": secret})
    assert response.status_code == 200
    return response.cookies["session"]
