"""Structural edit pipeline.

Every edit takes a wardrobe and returns a new one. Geometry changes first,
then the configuration is reconciled against the new compartments, so a
returned wardrobe never carries stale per-compartment data.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import replace

from ..constants import (
    EPSILON,
    MAX_SHELVES_PER_COLUMN,
    MIN_BASE_HEIGHT_CM,
    MIN_BOUNDARY_ABOVE_SHELF_M,
    MIN_SHELF_GAP_M,
    MIN_TOP_MODULE_M,
    PANEL_THICKNESS_M,
    SPLIT_THRESHOLD_M,
)
from ..entities import CompartmentConfiguration, Wardrobe, WardrobeGeometry
from ..partition import build_blocks_x, default_boundaries_x, default_module_boundary
from ..value_objects import FloorY
from .reconciler import StateReconciler

logger = logging.getLogger(__name__)

__all__ = [
    "StructuralEditError",
    "WardrobeEditor",
    "distribute_shelves",
    "filter_shelves",
    "max_shelves_for_height",
]


class StructuralEditError(Exception):
    """Raised when an edit is called with arguments that cannot apply.

    Attributes:
        message: Human-readable description.
        operation: Name of the edit that failed.
    """

    def __init__(self, message: str, operation: str = "") -> None:
        self.message = message
        self.operation = operation
        super().__init__(message)


def filter_shelves(
    shelves: Iterable[FloorY],
    ceiling: float,
    thickness: float = PANEL_THICKNESS_M,
    min_gap: float = MIN_SHELF_GAP_M,
    floor: float = 0.0,
) -> tuple[FloorY, ...]:
    """Drop shelves outside the module or closer than ``min_gap`` to a neighbour.

    The bottom board sits on ``floor`` (the base height, if any) and the
    ceiling board hangs from ``ceiling``. Shelves are walked bottom to top;
    a shelf is kept only when the clear space below it (to the last kept
    shelf or the bottom board) and above it (to the ceiling board) are both
    at least ``min_gap``.
    """
    lowest = floor + thickness + min_gap + thickness / 2
    highest = ceiling - thickness - min_gap - thickness / 2
    candidates = sorted(
        y
        for y in shelves
        if math.isfinite(y.value) and lowest - EPSILON <= y.value <= highest + EPSILON
    )

    kept: list[FloorY] = []
    last = floor + thickness
    for y in candidates:
        below = y.value - last - (thickness if kept else thickness / 2)
        above = ceiling - thickness - y.value - thickness / 2
        if below >= min_gap - EPSILON and above >= min_gap - EPSILON:
            kept.append(y)
            last = y.value
    return tuple(kept)


def max_shelves_for_height(
    module_height: float,
    thickness: float = PANEL_THICKNESS_M,
    min_gap: float = MIN_SHELF_GAP_M,
) -> int:
    """How many evenly spread shelves fit a module ``module_height`` meters tall.

    Every clear gap, board to shelf and shelf to shelf, must be at least
    ``min_gap``. The result is capped at ``MAX_SHELVES_PER_COLUMN``.
    """
    if not math.isfinite(module_height):
        return 0
    usable = module_height - 2 * thickness
    fit = math.floor(usable / (min_gap + thickness) + EPSILON) - 1
    return max(0, min(MAX_SHELVES_PER_COLUMN, fit))


def distribute_shelves(
    lower: float, upper: float, count: int, thickness: float = PANEL_THICKNESS_M
) -> tuple[FloorY, ...]:
    """Spread ``count`` shelf centres evenly between a module's boards.

    ``lower`` is where the bottom board sits and ``upper`` where the top
    board ends, both as floor heights in meters.
    """
    if count <= 0:
        return ()
    gap = (upper - lower - 2 * thickness) / (count + 1)
    return tuple(FloorY(lower + thickness + i * gap) for i in range(1, count + 1))


def _boundary_range(column_height: float) -> tuple[float, float]:
    """Valid module-boundary range for a column of the given height.

    Both modules keep at least the minimum height and neither exceeds the
    split threshold.
    """
    low = max(MIN_TOP_MODULE_M, column_height - SPLIT_THRESHOLD_M)
    high = min(column_height - MIN_TOP_MODULE_M, SPLIT_THRESHOLD_M)
    return low, high


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class WardrobeEditor:
    """Applies structural edits and reconciles the result.

    Example:
        >>> editor = WardrobeEditor()
        >>> wider = editor.set_width(wardrobe, 300)
        >>> len(wider.geometry.vertical_boundaries)
        2
    """

    def __init__(
        self,
        reconciler: StateReconciler | None = None,
        thickness: float = PANEL_THICKNESS_M,
    ) -> None:
        self.reconciler = reconciler or StateReconciler()
        self.thickness = thickness

    # Width axis

    def set_width(self, wardrobe: Wardrobe, width_cm: float) -> Wardrobe:
        """Resize the width and re-seam it with the default column layout.

        Per-column data of removed columns is dropped. When the wardrobe is
        taller than the split threshold, added columns get the default module
        boundary.
        """
        if not math.isfinite(width_cm) or width_cm <= 0:
            raise StructuralEditError(f"Invalid width: {width_cm}", "set_width")
        geometry = wardrobe.geometry
        old_count = self._column_count(geometry)
        boundaries = tuple(default_boundaries_x(width_cm / 100))
        new_count = len(boundaries) + 1

        module_boundaries = dict(geometry.column_module_boundaries)
        top_shelves = dict(geometry.column_top_shelves)
        if new_count > old_count and geometry.height_m > SPLIT_THRESHOLD_M:
            initial = default_module_boundary(geometry.height_m)
            for column in range(old_count, new_count):
                module_boundaries[column] = initial
                top_shelves[column] = ()

        updated = replace(
            geometry,
            width_cm=width_cm,
            vertical_boundaries=boundaries,
            column_module_boundaries=module_boundaries,
            column_top_shelves=top_shelves,
        )
        return self._commit(wardrobe, self._prune_columns(updated, new_count), "set_width")

    def set_vertical_boundaries(
        self, wardrobe: Wardrobe, boundaries: Sequence[float]
    ) -> Wardrobe:
        """Replace the seams. Positions are centre-origin meters."""
        geometry = wardrobe.geometry
        half = geometry.width_m / 2
        xs = sorted(boundaries)
        for x in xs:
            if not math.isfinite(x) or abs(x) >= half - EPSILON:
                raise StructuralEditError(
                    f"Seam {x} is outside the width (±{half:.3f}m)",
                    "set_vertical_boundaries",
                )
        if any(b - a <= EPSILON for a, b in zip(xs, xs[1:])):
            raise StructuralEditError(
                "Seam positions must be distinct", "set_vertical_boundaries"
            )
        updated = replace(geometry, vertical_boundaries=tuple(xs))
        count = self._column_count(updated)
        return self._commit(
            wardrobe, self._prune_columns(updated, count), "set_vertical_boundaries"
        )

    # Height axis

    def set_height(self, wardrobe: Wardrobe, height_cm: float) -> Wardrobe:
        """Resize the global height.

        Bottom-module shelves scale with the height and column height
        overrides are cleared. Above the split threshold, stored boundaries
        are clamped into range and columns without one get the default;
        top-module shelves survive only where the boundary did not move.
        At or below the threshold boundaries are kept exactly as stored so
        they come back when the height rises again.
        """
        if not math.isfinite(height_cm) or height_cm <= 0:
            raise StructuralEditError(f"Invalid height: {height_cm}", "set_height")
        geometry = wardrobe.geometry
        old_height = geometry.height_m
        new_height = height_cm / 100

        shelves = {
            column: tuple(y.scaled(new_height / old_height) for y in values)
            if old_height > 0
            else values
            for column, values in geometry.column_shelves.items()
        }

        module_boundaries: dict[int, FloorY | None] = {}
        top_shelves: dict[int, tuple[FloorY, ...]] = {}
        if new_height > SPLIT_THRESHOLD_M:
            low, high = _boundary_range(new_height)
            for column, boundary in geometry.column_module_boundaries.items():
                if boundary is None:
                    continue
                clamped = FloorY(_clamp(boundary.value, low, high))
                module_boundaries[column] = clamped
                top_shelves[column] = (
                    self._top_shelves_within(
                        geometry.top_shelves(column), clamped.value, new_height
                    )
                    if clamped == boundary
                    else ()
                )
            for column in range(self._column_count(geometry)):
                if module_boundaries.get(column) is None:
                    module_boundaries[column] = default_module_boundary(new_height)
                    top_shelves[column] = ()
        else:
            for column, boundary in geometry.column_module_boundaries.items():
                if boundary is None:
                    continue
                module_boundaries[column] = boundary
                top_shelves[column] = ()

        for column, values in shelves.items():
            boundary = module_boundaries.get(column)
            ceiling = (
                boundary.value
                if boundary is not None and new_height > SPLIT_THRESHOLD_M
                else new_height
            )
            shelves[column] = filter_shelves(
                values, ceiling, self.thickness, floor=geometry.base_height_m
            )

        updated = replace(
            geometry,
            height_cm=height_cm,
            column_heights={},
            column_shelves=shelves,
            column_module_boundaries=module_boundaries,
            column_top_shelves=top_shelves,
        )
        return self._commit(wardrobe, updated, "set_height")

    def set_column_height(
        self, wardrobe: Wardrobe, column: int, height_cm: float
    ) -> Wardrobe:
        """Override one column's height."""
        geometry = wardrobe.geometry
        self._check_column(geometry, column, "set_column_height")
        if not math.isfinite(height_cm) or height_cm <= 0:
            raise StructuralEditError(
                f"Invalid column height: {height_cm}", "set_column_height"
            )
        old_height = geometry.column_height_m(column)
        new_height = height_cm / 100

        module_boundaries = dict(geometry.column_module_boundaries)
        top_shelves = dict(geometry.column_top_shelves)
        boundary = module_boundaries.get(column)
        if new_height > SPLIT_THRESHOLD_M:
            if boundary is None:
                boundary = default_module_boundary(new_height)
                top_shelves[column] = ()
            else:
                low, high = _boundary_range(new_height)
                clamped = FloorY(_clamp(boundary.value, low, high))
                top_shelves[column] = (
                    self._top_shelves_within(
                        geometry.top_shelves(column), clamped.value, new_height
                    )
                    if clamped == boundary
                    else ()
                )
                boundary = clamped
            module_boundaries[column] = boundary
        ceiling = (
            boundary.value
            if boundary is not None and new_height > SPLIT_THRESHOLD_M
            else new_height
        )

        shelves = dict(geometry.column_shelves)
        values = geometry.shelves(column)
        if old_height > 0:
            values = [y.scaled(new_height / old_height) for y in values]
        shelves[column] = filter_shelves(
            values, ceiling, self.thickness, floor=geometry.base_height_m
        )

        heights = dict(geometry.column_heights)
        heights[column] = height_cm
        updated = replace(
            geometry,
            column_heights=heights,
            column_shelves=shelves,
            column_module_boundaries=module_boundaries,
            column_top_shelves=top_shelves,
        )
        return self._commit(wardrobe, updated, "set_column_height")

    def set_module_boundary(
        self, wardrobe: Wardrobe, column: int, y: float | None
    ) -> Wardrobe:
        """Move or remove a column's module boundary.

        A position is clamped so both modules keep the minimum height, neither
        exceeds the split threshold, and the boundary stays above the highest
        bottom-module shelf. Top-module shelves that no longer fit are dropped.
        """
        geometry = wardrobe.geometry
        self._check_column(geometry, column, "set_module_boundary")
        module_boundaries = dict(geometry.column_module_boundaries)
        top_shelves = dict(geometry.column_top_shelves)
        if y is None:
            module_boundaries[column] = None
            top_shelves[column] = ()
        else:
            if not math.isfinite(y):
                raise StructuralEditError(
                    f"Invalid module boundary: {y}", "set_module_boundary"
                )
            height = geometry.column_height_m(column)
            low, high = _boundary_range(height)
            shelves = geometry.shelves(column)
            if shelves:
                low = max(
                    low, shelves[-1].value + self.thickness + MIN_BOUNDARY_ABOVE_SHELF_M
                )
            boundary = FloorY(_clamp(y, low, high))
            module_boundaries[column] = boundary
            top_shelves[column] = self._top_shelves_within(
                geometry.top_shelves(column), boundary.value, height
            )
        updated = replace(
            geometry,
            column_module_boundaries=module_boundaries,
            column_top_shelves=top_shelves,
        )
        return self._commit(wardrobe, updated, "set_module_boundary")

    # Shelves

    def add_shelf(
        self, wardrobe: Wardrobe, column: int, y: float, top_module: bool = False
    ) -> Wardrobe:
        """Add a shelf at floor height ``y`` (meters).

        The shelf must lie between the module's bottom and top boards, and a
        module holds at most ``MAX_SHELVES_PER_COLUMN`` shelves.
        """
        geometry = wardrobe.geometry
        self._check_column(geometry, column, "add_shelf")
        if not math.isfinite(y):
            raise StructuralEditError(f"Invalid shelf position: {y}", "add_shelf")
        lower, upper = self._module_bounds(geometry, column, top_module, "add_shelf")
        shelves = self._shelves(geometry, column, top_module)
        if len(shelves) >= MAX_SHELVES_PER_COLUMN:
            raise StructuralEditError(
                f"Column {column} already has {MAX_SHELVES_PER_COLUMN} shelves",
                "add_shelf",
            )
        t = self.thickness
        if not lower + t < y < upper - t:
            raise StructuralEditError(
                f"Shelf position {y} is outside the module "
                f"({lower + t:.3f}-{upper - t:.3f}m)",
                "add_shelf",
            )
        shelves.append(FloorY(y))
        return self._commit(
            wardrobe, self._with_shelves(geometry, column, shelves, top_module), "add_shelf"
        )

    def set_shelf_count(
        self, wardrobe: Wardrobe, column: int, count: int, top_module: bool = False
    ) -> Wardrobe:
        """Replace a module's shelves with ``count`` evenly spread ones.

        The count is clamped to what fits the module height. When the number
        of shelves changes, every compartment in the column changes size, so
        the column's element configs and extras are cleared.
        """
        geometry = wardrobe.geometry
        self._check_column(geometry, column, "set_shelf_count")
        if count < 0:
            raise StructuralEditError(
                f"Invalid shelf count: {count}", "set_shelf_count"
            )
        lower, upper = self._module_bounds(
            geometry, column, top_module, "set_shelf_count"
        )
        clamped = min(count, max_shelves_for_height(upper - lower, self.thickness))
        shelves = distribute_shelves(lower, upper, clamped, self.thickness)
        if len(self._shelves(geometry, column, top_module)) != clamped:
            wardrobe = replace(
                wardrobe,
                configuration=self._clear_column(wardrobe.configuration, column),
            )
        return self._commit(
            wardrobe,
            self._with_shelves(geometry, column, list(shelves), top_module),
            "set_shelf_count",
        )

    def remove_shelf(
        self, wardrobe: Wardrobe, column: int, index: int, top_module: bool = False
    ) -> Wardrobe:
        """Remove the ``index``-th shelf, counted bottom to top."""
        geometry = wardrobe.geometry
        self._check_column(geometry, column, "remove_shelf")
        shelves = self._shelves(geometry, column, top_module)
        self._check_shelf(shelves, index, "remove_shelf")
        del shelves[index]
        return self._commit(
            wardrobe,
            self._with_shelves(geometry, column, shelves, top_module),
            "remove_shelf",
        )

    def move_shelf(
        self,
        wardrobe: Wardrobe,
        column: int,
        index: int,
        y: float,
        top_module: bool = False,
    ) -> Wardrobe:
        """Move the ``index``-th shelf to floor height ``y``.

        Top-module shelves are kept at least the minimum module height away
        from the boundary and the column top.
        """
        geometry = wardrobe.geometry
        self._check_column(geometry, column, "move_shelf")
        if not math.isfinite(y):
            raise StructuralEditError(f"Invalid shelf position: {y}", "move_shelf")
        shelves = self._shelves(geometry, column, top_module)
        self._check_shelf(shelves, index, "move_shelf")
        if top_module:
            boundary = self._check_top_module(geometry, column, "move_shelf")
            y = _clamp(
                y,
                boundary.value + MIN_TOP_MODULE_M,
                geometry.column_height_m(column) - MIN_TOP_MODULE_M,
            )
        shelves[index] = FloorY(y)
        return self._commit(
            wardrobe,
            self._with_shelves(geometry, column, shelves, top_module),
            "move_shelf",
        )

    # Base

    def set_base(
        self, wardrobe: Wardrobe, has_base: bool, base_height_cm: float | None = None
    ) -> Wardrobe:
        """Toggle the base and optionally set its height (minimum 3 cm)."""
        geometry = wardrobe.geometry
        height = geometry.base_height_cm if base_height_cm is None else base_height_cm
        if not math.isfinite(height):
            height = MIN_BASE_HEIGHT_CM
        updated = replace(
            geometry,
            has_base=has_base,
            base_height_cm=max(MIN_BASE_HEIGHT_CM, height),
        )
        return self._commit(wardrobe, updated, "set_base")

    # Helpers

    def _commit(
        self, wardrobe: Wardrobe, geometry: WardrobeGeometry, operation: str
    ) -> Wardrobe:
        configuration, report = self.reconciler.reconcile(
            geometry, wardrobe.configuration
        )
        logger.debug(
            f"Applied {operation}; reconciliation "
            f"{'changed' if report.has_changes else 'kept'} the configuration"
        )
        return replace(wardrobe, geometry=geometry, configuration=configuration)

    @staticmethod
    def _column_count(geometry: WardrobeGeometry) -> int:
        return len(build_blocks_x(geometry.width_m, geometry.vertical_boundaries or None))

    def _check_column(
        self, geometry: WardrobeGeometry, column: int, operation: str
    ) -> None:
        count = self._column_count(geometry)
        if not 0 <= column < count:
            raise StructuralEditError(
                f"Column index {column} out of range (0-{count - 1})", operation
            )

    @staticmethod
    def _check_top_module(
        geometry: WardrobeGeometry, column: int, operation: str
    ) -> FloorY:
        boundary = geometry.module_boundary(column)
        if boundary is None or geometry.column_height_m(column) <= SPLIT_THRESHOLD_M:
            raise StructuralEditError(
                f"Column {column} has no top module", operation
            )
        return boundary

    def _module_bounds(
        self,
        geometry: WardrobeGeometry,
        column: int,
        top_module: bool,
        operation: str,
    ) -> tuple[float, float]:
        """Floor heights where a module's bottom board starts and top board ends."""
        height = geometry.column_height_m(column)
        if top_module:
            return self._check_top_module(geometry, column, operation).value, height
        boundary = geometry.module_boundary(column)
        if boundary is not None and height > SPLIT_THRESHOLD_M:
            return geometry.base_height_m, boundary.value
        return geometry.base_height_m, height

    @staticmethod
    def _clear_column(
        configuration: CompartmentConfiguration, column: int
    ) -> CompartmentConfiguration:
        return replace(
            configuration,
            element_configs={
                key: value
                for key, value in configuration.element_configs.items()
                if key.column != column
            },
            extras={
                key: value
                for key, value in configuration.extras.items()
                if key.column != column
            },
        )

    @staticmethod
    def _check_shelf(shelves: list[FloorY], index: int, operation: str) -> None:
        if not 0 <= index < len(shelves):
            raise StructuralEditError(
                f"Shelf index {index} out of range ({len(shelves)} shelf/shelves)",
                operation,
            )

    @staticmethod
    def _shelves(
        geometry: WardrobeGeometry, column: int, top_module: bool
    ) -> list[FloorY]:
        if top_module:
            return geometry.top_shelves(column)
        return geometry.shelves(column)

    @staticmethod
    def _with_shelves(
        geometry: WardrobeGeometry,
        column: int,
        shelves: list[FloorY],
        top_module: bool,
    ) -> WardrobeGeometry:
        if top_module:
            top = dict(geometry.column_top_shelves)
            top[column] = tuple(sorted(shelves))
            return replace(geometry, column_top_shelves=top)
        bottom = dict(geometry.column_shelves)
        bottom[column] = tuple(sorted(shelves))
        return replace(geometry, column_shelves=bottom)

    def _top_shelves_within(
        self, shelves: Iterable[FloorY], boundary: float, column_height: float
    ) -> tuple[FloorY, ...]:
        t = self.thickness
        return tuple(
            y for y in shelves if boundary + t < y.value < column_height - t
        )

    @staticmethod
    def _prune_columns(geometry: WardrobeGeometry, count: int) -> WardrobeGeometry:
        """Drop per-column data for columns at or beyond ``count``."""

        def keep(mapping: dict) -> dict:
            return {column: value for column, value in mapping.items() if column < count}

        return replace(
            geometry,
            column_heights=keep(geometry.column_heights),
            column_shelves=keep(geometry.column_shelves),
            column_module_boundaries=keep(geometry.column_module_boundaries),
            column_top_shelves=keep(geometry.column_top_shelves),
        )
