"""CLI entry point for launching the Beverage API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import BeverageSettings


def main() -> None:
    """Start the Beverage API HTTP server."""
    settings = BeverageSettings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
