"""Shared fixtures wiring the front services to an in-process DB-Handler."""
from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.db_handler import create_app as create_db_handler_app  # noqa: E402
from backend.db_handler.settings import DBHandlerSettings  # noqa: E402


DB_HANDLER_URL = "http://db:9999/v1/beverages"


def forwarding_transport(target: TestClient) -> httpx.MockTransport:
    """Route outgoing HTTPX requests into an ASGI app through its TestClient."""

    def _handler(request: httpx.Request) -> httpx.Response:
        forwarded = target.request(
            request.method,
            request.url.raw_path.decode("ascii"),
            content=request.content,
            headers={"content-type": request.headers.get("content-type", "application/json")},
        )
        return httpx.Response(
            forwarded.status_code,
            content=forwarded.content,
            headers={"content-type": forwarded.headers.get("content-type", "application/json")},
        )

    return httpx.MockTransport(_handler)


@pytest.fixture()
def db_handler(tmp_path: Path) -> TestClient:
    """DB-Handler backed by an empty file store."""

    settings = DBHandlerSettings(
        data_file=str(tmp_path / "beverages.json"),
        persistent_file=str(tmp_path / "payload.bin"),
        seed_defaults=False,
    )
    return TestClient(create_db_handler_app(settings=settings))


@pytest.fixture()
def db_handler_transport(db_handler: TestClient) -> httpx.MockTransport:
    return forwarding_transport(db_handler)
