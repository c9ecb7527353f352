"""Pydantic models exposed by the DB-Handler service."""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, RootModel, Tag, TypeAdapter

# Non-integer ids are kept verbatim; id assignment skips them.
BeverageId = Union[int, float, str]


class _CatalogModel(BaseModel):
    """Base model accepting both camelCase aliases and attribute names."""

    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Bottle(_CatalogModel):
    """Single beverage unit sold on its own or embedded in a crate."""

    type: Literal["bottle"] = Field(default="bottle")
    id: BeverageId | None = Field(default=None, description="Catalog identifier assigned on create.")
    name: str
    volume: float = Field(gt=0, description="Volume in litres.")
    is_alcoholic: bool = Field(alias="isAlcoholic")
    volume_percent: float = Field(ge=0, alias="volumePercent")
    price: float = Field(ge=0)
    supplier: str
    in_stock: int = Field(ge=0, alias="inStock")


class Crate(_CatalogModel):
    """Bundle of identical bottles; the bottle is stored by value."""

    type: Literal["crate"] = Field(default="crate")
    id: BeverageId | None = Field(default=None, description="Catalog identifier assigned on create.")
    bottle: Bottle
    no_of_bottles: int = Field(gt=0, alias="noOfBottles")
    price: float = Field(ge=0)
    in_stock: int = Field(ge=0, alias="inStock")


def _beverage_kind(value: Any) -> str:
    """Resolve the variant tag, classifying untagged payloads by shape."""

    if isinstance(value, dict):
        kind = value.get("type")
        if kind is None:
            return "crate" if "bottle" in value else "bottle"
        return kind
    return getattr(value, "type", "bottle")


Beverage = Annotated[
    Union[Annotated[Bottle, Tag("bottle")], Annotated[Crate, Tag("crate")]],
    Discriminator(_beverage_kind),
]

BeverageAdapter: TypeAdapter[Bottle | Crate] = TypeAdapter(Beverage)
BeverageListAdapter: TypeAdapter[list[Bottle | Crate]] = TypeAdapter(list[Beverage])


class PingResponse(BaseModel):
    """Liveness payload shared by every service."""

    message: Literal["pong"] = Field(default="pong")


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the service.")
    storage_backend: Literal["file", "configmap"] = Field(
        description="Persistence strategy selected at startup."
    )


class SaveResponse(BaseModel):
    """Result of writing an opaque payload to the persistent file."""

    path: str = Field(description="Filesystem path the payload was written to.")
    size: int = Field(ge=0, description="Number of bytes written.")


class BeveragePayload(RootModel[Beverage]):
    """Request or response body holding a single beverage."""


class BeverageCollection(RootModel[list[Beverage]]):
    """Request or response body holding an ordered beverage collection."""
