from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    debug: bool = False
    client_secret: str  # Shared secret for the client board
    admin_secret: str  # Shared secret for the admin board, must differ from client_secret
    orders_path: str = "data/orders.json"  # JSON file holding the order collection
    site_path: str = "site"  # Directory with the HTML pages and static assets
    images_path: str = "site/images"  # Directory scanned for past-work images
    session_max_age: int = 6 * 60 * 60  # Seconds before a session is treated as expired
    secure_cookies: bool = False  # Set to True in production with HTTPS
    discord_webhook_url: str | None = None  # Contact form webhook (optional)
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "NUGGETS_",
        "extra": "ignore",
    }
