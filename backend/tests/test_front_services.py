"""Tests for the Beverage API and Management API in front of the DB-Handler."""
from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.beverage_api import create_app as create_beverage_app  # noqa: E402
from backend.beverage_api.settings import BeverageSettings  # noqa: E402
from backend.db_client import DBHandlerClient, DBHandlerError  # noqa: E402
from backend.management_api import create_app as create_management_app  # noqa: E402
from backend.management_api.settings import ManagementSettings  # noqa: E402


DB_HANDLER_URL = "http://db:9999/v1/beverages"


COLA = {
    "name": "Cola Bottle",
    "volume": 0.5,
    "isAlcoholic": False,
    "volumePercent": 0,
    "price": 1.5,
    "supplier": "CocaCola",
    "inStock": 100,
}


def _unreachable_transport() -> httpx.MockTransport:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(_handler)


@pytest.fixture()
def management(db_handler_transport: httpx.MockTransport) -> TestClient:
    settings = ManagementSettings(db_handler_url=DB_HANDLER_URL)
    return TestClient(create_management_app(settings, transport=db_handler_transport))


@pytest.fixture()
def beverages(db_handler_transport: httpx.MockTransport) -> TestClient:
    settings = BeverageSettings(db_handler_url=DB_HANDLER_URL)
    return TestClient(create_beverage_app(settings, transport=db_handler_transport))


def test_ping_endpoints(management: TestClient, beverages: TestClient) -> None:
    assert management.get("/ping").json() == {"message": "pong"}
    assert beverages.get("/ping").json() == {"message": "pong"}


def test_management_create_forwards_valid_bottle(
    management: TestClient, db_handler: TestClient
) -> None:
    response = management.post("/management/beverages", json=COLA)

    assert response.status_code == 201
    assert response.json()["id"] == 1
    stored = db_handler.get("/v1/beverages").json()
    assert [item["name"] for item in stored] == ["Cola Bottle"]


def test_management_rejects_crate_without_bottle_count(
    management: TestClient, db_handler: TestClient
) -> None:
    response = management.post(
        "/management/beverages",
        json={"bottle": COLA, "price": 10.0, "inStock": 1},
    )

    assert response.status_code == 400
    assert db_handler.get("/v1/beverages").json() == []


@pytest.mark.parametrize("field", ["name", "volume", "isAlcoholic", "supplier", "inStock"])
def test_management_rejects_bottle_missing_field(
    management: TestClient, db_handler: TestClient, field: str
) -> None:
    payload = {key: value for key, value in COLA.items() if key != field}

    response = management.post("/management/beverages", json=payload)

    assert response.status_code == 400
    assert db_handler.get("/v1/beverages").json() == []


def test_management_update_and_delete_pass_statuses_through(management: TestClient) -> None:
    management.post("/management/beverages", json=COLA)

    updated = management.put("/management/beverages/1", json={**COLA, "price": 1.75})
    assert updated.status_code == 200
    assert updated.json()["price"] == 1.75

    missing = management.put("/management/beverages/9", json=COLA)
    assert missing.status_code == 404

    deleted = management.delete("/management/beverages/1")
    assert deleted.status_code == 204

    again = management.delete("/management/beverages/1")
    assert again.status_code == 404


def test_management_replace_all(management: TestClient) -> None:
    management.post("/management/beverages", json=COLA)
    collection = [
        {**COLA, "id": 5, "name": "Tonic"},
        {"id": 6, "bottle": {**COLA, "name": "Tonic"}, "noOfBottles": 6, "price": 8.0, "inStock": 2},
    ]

    response = management.put("/management/beverages/update", json=collection)

    assert response.status_code == 200
    listing = management.get("/management/beverages").json()
    assert [item["id"] for item in listing] == [5, 6]
    assert [item["type"] for item in listing] == ["bottle", "crate"]


def test_management_reports_unreachable_db_handler() -> None:
    settings = ManagementSettings(db_handler_url=DB_HANDLER_URL)
    client = TestClient(create_management_app(settings, transport=_unreachable_transport()))

    assert client.get("/management/beverages").status_code == 502
    assert client.post("/management/beverages", json=COLA).status_code == 502


def test_beverage_api_lists_and_filters(beverages: TestClient, management: TestClient) -> None:
    bottle = management.post("/management/beverages", json=COLA).json()
    management.post(
        "/management/beverages",
        json={"bottle": bottle, "noOfBottles": 20, "price": 35.0, "inStock": 10},
    )

    everything = beverages.get("/beverages")
    assert everything.status_code == 200
    assert [item["type"] for item in everything.json()] == ["bottle", "crate"]

    crates = beverages.get("/beverages", params={"type": "crate"}).json()
    assert [item["id"] for item in crates] == [2]

    bottles = beverages.get("/beverages", params={"type": "bottle"}).json()
    assert [item["id"] for item in bottles] == [1]

    assert beverages.get("/beverages", params={"type": "keg"}).status_code == 422


def test_beverage_api_relays_upstream_errors() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "Error fetching beverages"})

    settings = BeverageSettings(db_handler_url=DB_HANDLER_URL)
    client = TestClient(create_beverage_app(settings, transport=httpx.MockTransport(_handler)))

    response = client.get("/beverages")

    assert response.status_code == 500
    assert response.json() == {"detail": "Error fetching beverages"}


def test_beverage_api_reports_unreachable_db_handler() -> None:
    settings = BeverageSettings(db_handler_url=DB_HANDLER_URL)
    client = TestClient(create_beverage_app(settings, transport=_unreachable_transport()))

    response = client.get("/beverages")

    assert response.status_code == 502


def test_db_client_wraps_transport_errors() -> None:
    client = DBHandlerClient(DB_HANDLER_URL, transport=_unreachable_transport())

    with pytest.raises(DBHandlerError):
        client.list_beverages()


def test_db_client_builds_item_urls() -> None:
    seen: list[tuple[str, str]] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url)))
        return httpx.Response(204)

    client = DBHandlerClient(DB_HANDLER_URL + "/", transport=httpx.MockTransport(_handler))
    result = client.delete_beverage("3")

    assert result.status_code == 204
    assert result.body is None
    assert seen == [("DELETE", "http://db:9999/v1/beverages/3")]
