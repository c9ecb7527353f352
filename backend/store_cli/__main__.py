"""Console entry point for the store CLI."""
from __future__ import annotations

from .app import app


def main() -> None:
    app(prog_name="store-cli")


if __name__ == "__main__":
    main()
