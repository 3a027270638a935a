"""Application entry point for the Nuggets Customs site server."""

from nuggets.app import App
from nuggets.config import Config
from nuggets.logging import setup_logging
from nuggets.web.runner import run_server


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
