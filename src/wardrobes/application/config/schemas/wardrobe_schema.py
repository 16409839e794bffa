"""Wardrobe structure and per-compartment configuration schemas.

Lengths of the outer dimensions are in centimeters. Seam positions, shelf
positions and module boundaries are in meters: seams from the wardrobe
centre, shelves and boundaries from the floor.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wardrobes.application.config.schemas.base import (
    CamelModel,
    check_compartment_key,
    check_compartment_ref,
    check_door_option,
)


class ElementConfigSchema(CamelModel):
    """Inner subdivision of a compartment.

    Attributes:
        columns: Number of inner sections (1 to 8).
        row_counts: Inner shelf count per section.
        drawer_counts: Optional drawer count per section.
        drawers_external: Optional per-section external flag.
    """

    columns: int = Field(default=1, ge=1, le=8)
    row_counts: list[int] | None = None
    drawer_counts: list[int] | None = None
    drawers_external: list[bool] | None = None

    @field_validator("row_counts", "drawer_counts")
    @classmethod
    def validate_non_negative(cls, v: list[int] | None) -> list[int] | None:
        if v is not None and any(count < 0 for count in v):
            raise ValueError("Counts must be non-negative")
        return v

    @model_validator(mode="after")
    def validate_lengths(self) -> "ElementConfigSchema":
        """Per-section lists must have one entry per section."""
        for name in ("row_counts", "drawer_counts"):
            values = getattr(self, name)
            if values is not None and len(values) != self.columns:
                raise ValueError(
                    f"{name} has {len(values)} entries but columns is {self.columns}"
                )
        return self


class CompartmentExtrasSchema(CamelModel):
    """Independent per-compartment accessories."""

    vertical_divider: bool = False
    drawers: bool = False
    drawers_count: int | None = Field(default=None, ge=0)
    rod: bool = False
    led: bool = False


class DoorGroupSchema(CamelModel):
    """A door assembly over one or more (sub-)compartments.

    Attributes:
        id: Unique group id.
        type: Door option string (none, left, right, double, leftMirror,
            rightMirror, doubleMirror, drawerStyle).
        compartments: Referenced compartment keys. Omitting the list marks the
            group as malformed; reconciliation drops it.
        column: Optional column letter the group belongs to.
        material_id: Per-door front material (honored in per-door mode).
        handle_id: Per-door handle (honored in per-door mode).
        handle_finish: Per-door handle finish (honored in per-door mode).
    """

    id: str = Field(..., min_length=1)
    type: str = "none"
    compartments: list[str] | None = None
    column: str | None = None
    material_id: str | None = None
    handle_id: str | None = None
    handle_finish: str | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        return check_door_option(v)

    @field_validator("compartments")
    @classmethod
    def validate_compartments(cls, v: list[str] | None) -> list[str] | None:
        if v is not None:
            for key in v:
                check_compartment_ref(key)
        return v

    @field_validator("material_id", "handle_id", "handle_finish", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        """Catalog ids may be given as numbers."""
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class WardrobeConfig(BaseModel):
    """Wardrobe dimensions, structure and per-compartment configuration.

    Attributes:
        width: Outer width in cm (10 to 1000).
        height: Outer height in cm (10 to 400).
        depth: Outer depth in cm (10 to 200).
        has_base: Whether the carcass stands on a base.
        base_height: Base height in cm.
        vertical_boundaries: Seam positions in meters from the centre; empty
            for the automatic layout.
        column_heights: Per-column height overrides in cm, keyed by column index.
        column_shelves: Per-column bottom-module shelf heights in meters.
        column_module_boundaries: Per-column module boundary in meters, or null.
        column_top_shelves: Per-column top-module shelf heights in meters.
        element_configs: Inner subdivisions keyed by compartment key.
        compartment_extras: Extras keyed by compartment key.
        door_groups: Door assemblies.
        door_selections: Legacy single-compartment door options.
        material_id: Carcass material id.
        front_material_id: Front material id.
        back_material_id: Back material id.
        door_settings_mode: "global" or "per-door".
        handle_id: Global handle id.
        handle_finish: Global handle finish id.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=10.0, le=1000.0)
    height: float = Field(..., ge=10.0, le=400.0)
    depth: float = Field(..., ge=10.0, le=200.0)
    has_base: bool = False
    base_height: float = Field(default=3.0, ge=0.0, le=50.0)

    vertical_boundaries: list[float] = Field(
        default_factory=list, description="Seam X positions in meters from the centre"
    )
    column_heights: dict[int, float] = Field(default_factory=dict)
    column_shelves: dict[int, list[float]] = Field(default_factory=dict)
    column_module_boundaries: dict[int, float | None] = Field(default_factory=dict)
    column_top_shelves: dict[int, list[float]] = Field(default_factory=dict)

    element_configs: dict[str, ElementConfigSchema] = Field(default_factory=dict)
    compartment_extras: dict[str, CompartmentExtrasSchema] = Field(
        default_factory=dict
    )
    door_groups: list[DoorGroupSchema] = Field(default_factory=list)
    door_selections: dict[str, str] = Field(default_factory=dict)

    material_id: str | None = None
    front_material_id: str | None = None
    back_material_id: str | None = None
    door_settings_mode: Literal["global", "per-door"] = "global"
    handle_id: str | None = None
    handle_finish: str | None = None

    @field_validator(
        "material_id",
        "front_material_id",
        "back_material_id",
        "handle_id",
        "handle_finish",
        mode="before",
    )
    @classmethod
    def coerce_id(cls, v: object) -> object:
        """Catalog ids may be given as numbers."""
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator(
        "column_heights",
        "column_shelves",
        "column_module_boundaries",
        "column_top_shelves",
    )
    @classmethod
    def validate_column_keys(cls, v: dict) -> dict:
        if any(column < 0 for column in v):
            raise ValueError("Column indices must be non-negative")
        return v

    @field_validator("column_heights")
    @classmethod
    def validate_column_heights(cls, v: dict[int, float]) -> dict[int, float]:
        for column, height in v.items():
            if not 10.0 <= height <= 400.0:
                raise ValueError(
                    f"Column {column} height {height} is outside 10-400 cm"
                )
        return v

    @field_validator("element_configs", "compartment_extras")
    @classmethod
    def validate_compartment_keys(cls, v: dict) -> dict:
        for key in v:
            check_compartment_key(key)
        return v

    @field_validator("door_selections")
    @classmethod
    def validate_door_selections(cls, v: dict[str, str]) -> dict[str, str]:
        for key, option in v.items():
            check_compartment_ref(key)
            check_door_option(option)
        return v

    @model_validator(mode="after")
    def validate_unique_door_groups(self) -> "WardrobeConfig":
        """Door group ids must be unique."""
        ids = [group.id for group in self.door_groups]
        duplicates = sorted({group_id for group_id in ids if ids.count(group_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate door group ids: {', '.join(duplicates)}")
        return self
