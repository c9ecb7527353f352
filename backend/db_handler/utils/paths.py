"""Filesystem helpers for DB-Handler storage paths."""
from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir


APP_NAME = "StoreCatalog"
APP_AUTHOR = "OnlineStore"


def default_data_file() -> str:
    """Return the platform-appropriate location for the beverages file."""

    base_dir = Path(user_data_dir(APP_NAME, APP_AUTHOR))
    return str(base_dir / "beverages.json")


def ensure_parent_directory(path: str | Path) -> Path:
    """Expand ``path`` and create its parent directories if missing."""

    resolved = Path(path).expanduser()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return resolved
