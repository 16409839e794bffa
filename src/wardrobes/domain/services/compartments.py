"""Compartment enumeration.

The enumerator is the single authority on which compartments exist. Every
other component (cut list, reconciliation, validation) asks it rather than
deciding existence on its own.

Per column, the bottom module spans from the bottom board surface (raised by
the base) to either the top board or the lower module-boundary board. A
module split is active only when a boundary is stored AND the column's own
height exceeds the split threshold, so shrinking a column silently disables
its split. Compartments are numbered bottom to top, continuing into the top
module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..constants import PANEL_THICKNESS_M, SPLIT_THRESHOLD_M
from ..entities import WardrobeGeometry
from ..partition import build_blocks_x
from ..value_objects import CompartmentId, FloorY, LinearBlock, ModuleLabel, to_letters

logger = logging.getLogger(__name__)

__all__ = [
    "Bound",
    "BoundKind",
    "ColumnLayout",
    "CompartmentEnumerator",
    "CompartmentSlot",
    "valid_compartments",
]


class BoundKind(str, Enum):
    """What physically sits at a compartment's lower or upper edge."""

    PANEL_SURFACE = "panel_surface"
    SHELF_CENTER = "shelf_center"


@dataclass(frozen=True)
class Bound:
    """One vertical edge of a compartment."""

    y: FloorY
    kind: BoundKind


@dataclass(frozen=True)
class CompartmentSlot:
    """A compartment with its bounding edges.

    Attributes:
        id: Compartment identifier.
        lower: Lower edge.
        upper: Upper edge.
        module: Module the compartment belongs to.
        thickness: Panel thickness used for clear-height deductions.
    """

    id: CompartmentId
    lower: Bound
    upper: Bound
    module: ModuleLabel
    thickness: float = PANEL_THICKNESS_M

    @property
    def key(self) -> str:
        return str(self.id)

    @property
    def height_m(self) -> float:
        return self.upper.y.value - self.lower.y.value

    @property
    def height_cm(self) -> float:
        """Span between the two bounds, in cm."""
        return self.height_m * 100

    @property
    def clear_height_m(self) -> float:
        """Usable height: half a shelf is deducted at every shelf-centreline edge."""
        height = self.height_m
        for bound in (self.lower, self.upper):
            if bound.kind is BoundKind.SHELF_CENTER:
                height -= self.thickness / 2
        return height

    @property
    def clear_height_cm(self) -> float:
        return self.clear_height_m * 100


@dataclass(frozen=True)
class ColumnLayout:
    """Resolved vertical layout of one column.

    Attributes:
        index: 0-based column index.
        block: Horizontal extent of the column.
        height_m: Effective column height.
        module_boundary: Active split position, None for single-module columns.
        shelves: Sorted bottom-module shelf positions.
        top_shelves: Sorted top-module shelf positions (empty without a split).
        compartments: Compartments bottom to top.
    """

    index: int
    block: LinearBlock
    height_m: float
    module_boundary: FloorY | None
    shelves: tuple[FloorY, ...]
    top_shelves: tuple[FloorY, ...]
    compartments: tuple[CompartmentSlot, ...]

    @property
    def letter(self) -> str:
        return to_letters(self.index)

    @property
    def has_module_split(self) -> bool:
        return self.module_boundary is not None

    def module_compartments(self, module: ModuleLabel) -> list[CompartmentSlot]:
        return [slot for slot in self.compartments if slot.module is module]


class CompartmentEnumerator:
    """Derives columns and compartments from wardrobe geometry.

    Example:
        >>> geometry = WardrobeGeometry(width_cm=210, height_cm=180,
        ...                             vertical_boundaries=(0.0,))
        >>> sorted(str(k) for k in CompartmentEnumerator().compartments(geometry))
        ['A1', 'B1']
    """

    def __init__(
        self,
        thickness: float = PANEL_THICKNESS_M,
        split_threshold: float = SPLIT_THRESHOLD_M,
    ) -> None:
        self.thickness = thickness
        self.split_threshold = split_threshold

    def columns(self, geometry: WardrobeGeometry) -> list[ColumnLayout]:
        """Resolve every column's modules, shelves and compartments."""
        blocks = build_blocks_x(geometry.width_m, geometry.vertical_boundaries or None)
        layouts = [
            self._column(geometry, index, block) for index, block in enumerate(blocks)
        ]
        logger.debug(
            f"Enumerated {sum(len(c.compartments) for c in layouts)} compartment(s) "
            f"across {len(layouts)} column(s)"
        )
        return layouts

    def compartments(
        self, geometry: WardrobeGeometry
    ) -> dict[CompartmentId, CompartmentSlot]:
        """All compartments keyed by id, in enumeration order."""
        return {
            slot.id: slot
            for column in self.columns(geometry)
            for slot in column.compartments
        }

    def _column(
        self, geometry: WardrobeGeometry, index: int, block: LinearBlock
    ) -> ColumnLayout:
        t = self.thickness
        height = geometry.column_height_m(index)
        stored_boundary = geometry.module_boundary(index)
        boundary = stored_boundary if height > self.split_threshold else None

        bottom_end = boundary.value - t if boundary is not None else height - t
        shelves = tuple(geometry.shelves(index))
        label = ModuleLabel.BOTTOM if boundary is not None else ModuleLabel.SINGLE
        slots = self._module_slots(
            index,
            first_index=1,
            start=geometry.base_height_m + t,
            end=bottom_end,
            shelves=shelves,
            module=label,
        )

        top_shelves: tuple[FloorY, ...] = ()
        if boundary is not None:
            top_shelves = tuple(geometry.top_shelves(index))
            slots += self._module_slots(
                index,
                first_index=len(slots) + 1,
                start=boundary.value + t,
                end=height - t,
                shelves=top_shelves,
                module=ModuleLabel.TOP,
            )

        return ColumnLayout(
            index=index,
            block=block,
            height_m=height,
            module_boundary=boundary,
            shelves=shelves,
            top_shelves=top_shelves,
            compartments=tuple(slots),
        )

    def _module_slots(
        self,
        column: int,
        first_index: int,
        start: float,
        end: float,
        shelves: tuple[FloorY, ...],
        module: ModuleLabel,
    ) -> list[CompartmentSlot]:
        bounds = [Bound(FloorY(start), BoundKind.PANEL_SURFACE)]
        bounds += [Bound(y, BoundKind.SHELF_CENTER) for y in shelves]
        bounds.append(Bound(FloorY(end), BoundKind.PANEL_SURFACE))
        return [
            CompartmentSlot(
                id=CompartmentId(column=column, index=first_index + i),
                lower=lower,
                upper=upper,
                module=module,
                thickness=self.thickness,
            )
            for i, (lower, upper) in enumerate(zip(bounds, bounds[1:]))
        ]


def valid_compartments(geometry: WardrobeGeometry) -> dict[CompartmentId, float]:
    """Existence map for callers that only need keys and heights (in cm)."""
    return {
        compartment_id: slot.height_cm
        for compartment_id, slot in CompartmentEnumerator()
        .compartments(geometry)
        .items()
    }
