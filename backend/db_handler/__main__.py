"""CLI entry point for launching the DB-Handler with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import DBHandlerSettings


def main() -> None:
    """Start the DB-Handler HTTP server."""
    settings = DBHandlerSettings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
