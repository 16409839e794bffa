"""Domain entities for wardrobe configuration and catalogs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import EPSILON
from .value_objects import (
    CompartmentId,
    DoorStyle,
    FloorY,
    NoDoor,
    SubCompartmentId,
)

CompartmentRef = CompartmentId | SubCompartmentId

BACK_CATEGORY_MARKERS: tuple[str, ...] = ("leđa", "ledja", "leda", "back")


@dataclass(frozen=True)
class ElementConfig:
    """Inner subdivision of one compartment.

    Attributes:
        columns: Number of inner vertical sections (inner dividers + 1).
        row_counts: Inner shelf count per section.
        drawer_counts: Optional drawer count per section.
        drawers_external: Optional per-section flag; external drawers get front material.
    """

    columns: int = 1
    row_counts: tuple[int, ...] = (0,)
    drawer_counts: tuple[int, ...] | None = None
    drawers_external: tuple[bool, ...] | None = None

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError("Element config must have at least 1 column")
        if len(self.row_counts) != self.columns:
            raise ValueError(
                f"row_counts has {len(self.row_counts)} entries, expected {self.columns}"
            )
        if any(count < 0 for count in self.row_counts):
            raise ValueError("Row counts must be non-negative")
        if self.drawer_counts is not None and len(self.drawer_counts) != self.columns:
            raise ValueError(
                f"drawer_counts has {len(self.drawer_counts)} entries, expected {self.columns}"
            )

    def drawers_are_external(self, section: int) -> bool:
        """External unless explicitly marked internal."""
        if self.drawers_external is None or section >= len(self.drawers_external):
            return True
        return self.drawers_external[section]


@dataclass(frozen=True)
class CompartmentExtras:
    """Independent per-compartment accessories.

    Attributes:
        vertical_divider: Free-standing divider down the middle.
        drawers: Legacy drawer stack across the full compartment width.
        drawers_count: Legacy drawer count; None or 0 fills the compartment.
        rod: Hanging rod.
        led: LED strip.
    """

    vertical_divider: bool = False
    drawers: bool = False
    drawers_count: int | None = None
    rod: bool = False
    led: bool = False


@dataclass(frozen=True)
class DoorGroup:
    """One door assembly spanning one or more (sub-)compartments.

    ``compartments`` is None when the stored group carried no compartment
    list at all. Reconciliation drops such groups, while an empty tuple
    survives.
    """

    id: str
    style: DoorStyle = field(default_factory=NoDoor)
    compartments: tuple[CompartmentRef, ...] | None = ()
    column: str | None = None
    material_id: str | None = None
    handle_id: str | None = None
    handle_finish: str | None = None

    def base_compartments(self) -> list[CompartmentId]:
        """Unique base compartments, in reference order."""
        seen: list[CompartmentId] = []
        for ref in self.compartments or ():
            base = ref.base if isinstance(ref, SubCompartmentId) else ref
            if base not in seen:
                seen.append(base)
        return seen

    def references(self, compartment: CompartmentId) -> bool:
        return compartment in self.base_compartments()


@dataclass(frozen=True)
class WardrobeGeometry:
    """Structural geometry of a wardrobe.

    Attributes:
        width_cm: Outer width.
        height_cm: Global outer height.
        has_base: Whether the carcass stands on a base.
        base_height_cm: Base height, used only when has_base is True.
        vertical_boundaries: Seam X positions in meters, centre-origin, ascending.
        column_heights: Per-column height override in cm.
        column_shelves: Per-column bottom-module shelf positions.
        column_module_boundaries: Per-column module boundary, or None.
        column_top_shelves: Per-column top-module shelf positions.
    """

    width_cm: float
    height_cm: float
    has_base: bool = False
    base_height_cm: float = 0.0
    vertical_boundaries: tuple[float, ...] = ()
    column_heights: dict[int, float] = field(default_factory=dict)
    column_shelves: dict[int, tuple[FloorY, ...]] = field(default_factory=dict)
    column_module_boundaries: dict[int, FloorY | None] = field(default_factory=dict)
    column_top_shelves: dict[int, tuple[FloorY, ...]] = field(default_factory=dict)

    @property
    def width_m(self) -> float:
        return self.width_cm / 100

    @property
    def height_m(self) -> float:
        return self.height_cm / 100

    @property
    def base_height_m(self) -> float:
        return self.base_height_cm / 100 if self.has_base else 0.0

    def column_height_m(self, column: int) -> float:
        """Effective height of a column: its override, else the global height."""
        return self.column_heights.get(column, self.height_cm) / 100

    def shelves(self, column: int) -> list[FloorY]:
        return sorted(self.column_shelves.get(column, ()))

    def top_shelves(self, column: int) -> list[FloorY]:
        return sorted(self.column_top_shelves.get(column, ()))

    def module_boundary(self, column: int) -> FloorY | None:
        return self.column_module_boundaries.get(column)

    @property
    def has_valid_dimensions(self) -> bool:
        return (
            math.isfinite(self.width_cm)
            and math.isfinite(self.height_cm)
            and self.width_cm > EPSILON
            and self.height_cm > EPSILON
        )


@dataclass(frozen=True)
class CompartmentConfiguration:
    """The four per-compartment maps persisted by the caller."""

    element_configs: dict[CompartmentId, ElementConfig] = field(default_factory=dict)
    extras: dict[CompartmentId, CompartmentExtras] = field(default_factory=dict)
    door_groups: tuple[DoorGroup, ...] = ()
    door_selections: dict[CompartmentRef, DoorStyle] = field(default_factory=dict)


@dataclass(frozen=True)
class Wardrobe:
    """A complete wardrobe description: geometry, configuration and selections.

    Attributes:
        geometry: Structural geometry.
        depth_cm: Outer depth.
        configuration: Per-compartment configuration maps.
        material_id: Selected carcass material.
        front_material_id: Selected front material; falls back to the carcass material.
        back_material_id: Selected back material; falls back to a back-category material.
        door_settings_mode: "global" or "per-door".
        handle_id: Global handle selection.
        handle_finish: Global handle finish selection.
    """

    geometry: WardrobeGeometry
    depth_cm: float
    configuration: CompartmentConfiguration = field(
        default_factory=CompartmentConfiguration
    )
    material_id: str | None = None
    front_material_id: str | None = None
    back_material_id: str | None = None
    door_settings_mode: str = "global"
    handle_id: str | None = None
    handle_finish: str | None = None

    def __post_init__(self) -> None:
        if self.door_settings_mode not in ("global", "per-door"):
            raise ValueError(
                "door_settings_mode must be 'global' or 'per-door', "
                f"got {self.door_settings_mode!r}"
            )

    @property
    def depth_m(self) -> float:
        return self.depth_cm / 100

    @property
    def per_door(self) -> bool:
        return self.door_settings_mode == "per-door"


@dataclass(frozen=True)
class Material:
    """A priced board material.

    Attributes:
        id: Catalog id (compared as a string).
        price: Price per square meter.
        thickness_mm: Board thickness in millimeters.
        categories: Free-form catalog categories.
        name: Display name.
    """

    id: str
    price: float
    thickness_mm: float = 18.0
    categories: tuple[str, ...] = ()
    name: str = ""

    def is_back_material(self) -> bool:
        return any(
            marker in category.lower()
            for category in self.categories
            for marker in BACK_CATEGORY_MARKERS
        )


@dataclass(frozen=True)
class MaterialCatalog:
    """Keyed lookup over the available materials."""

    materials: tuple[Material, ...] = ()

    def __len__(self) -> int:
        return len(self.materials)

    def get(self, material_id: str | int | None) -> Material | None:
        if material_id is None:
            return None
        key = str(material_id)
        for material in self.materials:
            if material.id == key:
                return material
        return None

    def find_back(self, back_material_id: str | int | None) -> Material | None:
        """Back material by id when selected, else the first back-category material."""
        if back_material_id is not None:
            return self.get(back_material_id)
        for material in self.materials:
            if material.is_back_material():
                return material
        return None


@dataclass(frozen=True)
class HandleFinish:
    """A priced finish of a handle model."""

    id: str
    price: float
    name: str = ""
    legacy_id: str | None = None

    def matches(self, key: str) -> bool:
        return key == self.legacy_id or key == self.id


@dataclass(frozen=True)
class Handle:
    """A handle model with its finishes."""

    id: str
    name: str = ""
    legacy_id: str | None = None
    finishes: tuple[HandleFinish, ...] = ()

    def matches(self, key: str) -> bool:
        return key == self.legacy_id or key == self.id

    def finish(self, finish_id: str) -> HandleFinish | None:
        for finish in self.finishes:
            if finish.matches(finish_id):
                return finish
        return None


@dataclass(frozen=True)
class HandleCatalog:
    """Keyed lookup over the available handles."""

    handles: tuple[Handle, ...] = ()

    def get(self, handle_id: str | None) -> Handle | None:
        if handle_id is None:
            return None
        key = str(handle_id)
        for handle in self.handles:
            if handle.matches(key):
                return handle
        return None

    def unit_price(self, handle_id: str | None, finish_id: str | None) -> float:
        """Price of one handle in the given finish; 0 when either lookup fails."""
        handle = self.get(handle_id)
        if handle is None or finish_id is None:
            return 0.0
        finish = handle.finish(str(finish_id))
        return finish.price if finish is not None else 0.0
