"""Opaque payload writer backing the /save endpoint."""
from __future__ import annotations

import logging
import threading
from pathlib import Path

from ..stores.base import PersistenceError
from ..utils.paths import ensure_parent_directory

logger = logging.getLogger(__name__)


class PersistentFileWriter:
    """Overwrite a single file with arbitrary bytes, creating directories first."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def write(self, payload: bytes) -> Path:
        """Persist ``payload`` and return the resolved destination path."""

        with self._lock:
            try:
                target = ensure_parent_directory(self._path)
                target.write_bytes(payload)
            except OSError as exc:
                raise PersistenceError(f"Failed to write {self._path}: {exc}") from exc
        logger.info("Wrote %d bytes to %s", len(payload), target)
        return target.resolve()
