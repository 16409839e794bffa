"""Pydantic request schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ConfigRequest(BaseModel):
    """Request carrying a full wardrobe configuration."""

    config: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")


class CutListRequest(BaseModel):
    """Request for generating a cut list.

    A ``catalog`` given here replaces the catalog embedded in ``config``.
    """

    config: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
    catalog: dict[str, Any] | None = Field(
        default=None, description="Material and handle catalog JSON"
    )


EditOperationName = Literal[
    "set_width",
    "set_height",
    "set_column_height",
    "set_vertical_boundaries",
    "set_module_boundary",
    "add_shelf",
    "remove_shelf",
    "move_shelf",
    "set_shelf_count",
    "set_base",
]


class EditOperationSchema(BaseModel):
    """One structural edit.

    Which fields are read depends on ``op``; the rest are ignored.
    """

    op: EditOperationName
    width: float | None = Field(default=None, description="New width in cm")
    height: float | None = Field(default=None, description="New height in cm")
    column: int | None = Field(default=None, ge=0, description="Column index")
    index: int | None = Field(default=None, ge=0, description="Shelf index")
    count: int | None = Field(default=None, ge=0, description="Shelf count")
    y: float | None = Field(default=None, description="Shelf or boundary position in m")
    top_module: bool = Field(default=False, description="Edit top-module shelves")
    boundaries: list[float] | None = Field(
        default=None, description="Seam positions in m, centered"
    )
    has_base: bool | None = None
    base_height: float | None = Field(default=None, description="Base height in cm")


class EditRequest(BaseModel):
    """Request for applying structural edits in order."""

    config: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
    operations: list[EditOperationSchema] = Field(..., min_length=1)
