"""CLI entry point for launching the Management API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import ManagementSettings


def main() -> None:
    """Start the Management API HTTP server."""
    settings = ManagementSettings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
