"""HTTP client for the DB-Handler beverage endpoints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class DBHandlerError(RuntimeError):
    """Raised when the DB-Handler cannot be reached."""


@dataclass(slots=True)
class UpstreamResponse:
    """Status code and decoded body relayed from the DB-Handler."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class DBHandlerClient:
    """Thin wrapper that forwards catalog calls to the DB-Handler."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(self, method: str, path: str = "", *, json: Any = None) -> UpstreamResponse:
        url = f"{self._base_url}{path}"
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            raise DBHandlerError(f"Failed to contact DB-Handler: {exc}") from exc
        return UpstreamResponse(status_code=response.status_code, body=_decode(response))

    def list_beverages(self) -> UpstreamResponse:
        return self._request("GET")

    def create_beverage(self, beverage: dict[str, Any]) -> UpstreamResponse:
        return self._request("POST", json=beverage)

    def replace_beverage(self, beverage_id: str, beverage: dict[str, Any]) -> UpstreamResponse:
        return self._request("PUT", f"/{beverage_id}", json=beverage)

    def replace_all(self, beverages: list[dict[str, Any]]) -> UpstreamResponse:
        return self._request("PUT", "/update", json=beverages)

    def delete_beverage(self, beverage_id: str) -> UpstreamResponse:
        return self._request("DELETE", f"/{beverage_id}")


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
