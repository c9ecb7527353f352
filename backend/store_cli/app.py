"""Command line interface for the store Management API."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import httpx
import typer

from .client import CLISettings, create_client


DEFAULT_API_BASE = CLISettings().api_base
BEVERAGES_PATH = "/management/beverages"

app = typer.Typer(help="Manage the beverage catalog through the Management API.")


BEVERAGE_TYPE_CHOICES = {"bottle", "crate"}


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the Management API service.",
        show_default=True,
        envvar="STORE_MANAGEMENT_API_BASE",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail_on_error(response: httpx.Response) -> None:
    if response.status_code == 404:
        typer.echo("Beverage not found", err=True)
        raise typer.Exit(code=1)
    if response.status_code in (400, 409):
        typer.echo(f"Request rejected: {response.text}", err=True)
        raise typer.Exit(code=1)
    response.raise_for_status()


def _load_json_option(value: str, label: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        typer.echo(f"Invalid JSON {label}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def ping(api_base: str = _api_base_option()) -> None:
    """Call the /ping endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        response = client.get("/ping")
        response.raise_for_status()
        _echo_json(response.json())


@app.command("list")
def list_beverages(
    beverage_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Only show bottles or crates.",
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Display every beverage in the catalog."""

    if beverage_type is not None and beverage_type.lower() not in BEVERAGE_TYPE_CHOICES:
        typer.echo(
            "Invalid type value. Allowed values: " + ", ".join(sorted(BEVERAGE_TYPE_CHOICES)),
            err=True,
        )
        raise typer.Exit(code=1)

    with create_client(api_base) as client:
        response = client.get(BEVERAGES_PATH)
        response.raise_for_status()
        beverages = response.json()

    if beverage_type is not None:
        wanted = beverage_type.lower()
        beverages = [item for item in beverages if item.get("type") == wanted]
    _echo_json(beverages)


@app.command()
def show(
    beverage_id: str = typer.Argument(..., help="Identifier of the beverage to display."),
    api_base: str = _api_base_option(),
) -> None:
    """Display a single beverage."""

    with create_client(api_base) as client:
        response = client.get(BEVERAGES_PATH)
        response.raise_for_status()
        beverages = response.json()

    for beverage in beverages:
        if str(beverage.get("id")) == beverage_id:
            _echo_json(beverage)
            return
    typer.echo("Beverage not found", err=True)
    raise typer.Exit(code=1)


@app.command("add-bottle")
def add_bottle(
    name: str = typer.Option(..., help="Display name of the bottle."),
    volume: float = typer.Option(..., help="Volume in litres."),
    price: float = typer.Option(..., help="Unit price."),
    supplier: str = typer.Option(..., help="Supplier name."),
    in_stock: int = typer.Option(0, "--in-stock", help="Units currently in stock.", show_default=True),
    volume_percent: float = typer.Option(
        0.0, "--volume-percent", help="Alcohol by volume in percent.", show_default=True
    ),
    alcoholic: bool = typer.Option(
        False,
        "--alcoholic/--non-alcoholic",
        help="Whether the bottle contains alcohol.",
        show_default=True,
    ),
    beverage_id: Optional[int] = typer.Option(None, "--id", help="Explicit identifier to use."),
    api_base: str = _api_base_option(),
) -> None:
    """Create a bottle entry."""

    payload: dict[str, object] = {
        "type": "bottle",
        "name": name,
        "volume": volume,
        "isAlcoholic": alcoholic,
        "volumePercent": volume_percent,
        "price": price,
        "supplier": supplier,
        "inStock": in_stock,
    }
    if beverage_id is not None:
        payload["id"] = beverage_id

    with create_client(api_base) as client:
        response = client.post(BEVERAGES_PATH, json=payload)
        _fail_on_error(response)
        _echo_json(response.json())


@app.command("add-crate")
def add_crate(
    bottle_id: str = typer.Option(..., "--bottle-id", help="Catalog id of the bottle to pack."),
    no_of_bottles: int = typer.Option(..., "--bottles", help="Number of bottles per crate."),
    price: float = typer.Option(..., help="Crate price."),
    in_stock: int = typer.Option(0, "--in-stock", help="Crates currently in stock.", show_default=True),
    beverage_id: Optional[int] = typer.Option(None, "--id", help="Explicit identifier to use."),
    api_base: str = _api_base_option(),
) -> None:
    """Create a crate holding a copy of an existing bottle."""

    with create_client(api_base) as client:
        listing = client.get(BEVERAGES_PATH)
        listing.raise_for_status()
        bottle = next(
            (
                item
                for item in listing.json()
                if item.get("type") == "bottle" and str(item.get("id")) == bottle_id
            ),
            None,
        )
        if bottle is None:
            typer.echo(f"Bottle {bottle_id} not found", err=True)
            raise typer.Exit(code=1)

        payload: dict[str, object] = {
            "type": "crate",
            "bottle": bottle,
            "noOfBottles": no_of_bottles,
            "price": price,
            "inStock": in_stock,
        }
        if beverage_id is not None:
            payload["id"] = beverage_id

        response = client.post(BEVERAGES_PATH, json=payload)
        _fail_on_error(response)
        _echo_json(response.json())


@app.command()
def update(
    beverage_id: str = typer.Argument(..., help="Identifier of the beverage to replace."),
    data: str = typer.Option(..., "--data", help="JSON document describing the replacement."),
    api_base: str = _api_base_option(),
) -> None:
    """Replace a beverage; its identifier is always kept."""

    payload = _load_json_option(data, "beverage")
    with create_client(api_base) as client:
        response = client.put(f"{BEVERAGES_PATH}/{beverage_id}", json=payload)
        _fail_on_error(response)
        _echo_json(response.json())


@app.command()
def delete(
    beverage_id: str = typer.Argument(..., help="Identifier of the beverage to delete."),
    api_base: str = _api_base_option(),
) -> None:
    """Delete a beverage."""

    with create_client(api_base) as client:
        response = client.delete(f"{BEVERAGES_PATH}/{beverage_id}")
        _fail_on_error(response)
    typer.echo(f"Deleted beverage {beverage_id}")


@app.command("replace-all")
def replace_all(
    source: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON file holding the complete replacement collection.",
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Overwrite the whole catalog with the collection stored in a file."""

    payload = _load_json_option(source.read_text(encoding="utf-8"), "collection")
    if not isinstance(payload, list):
        typer.echo("The collection file must contain a JSON array.", err=True)
        raise typer.Exit(code=1)

    with create_client(api_base) as client:
        response = client.put(f"{BEVERAGES_PATH}/update", json=payload)
        _fail_on_error(response)
        _echo_json(response.json())
