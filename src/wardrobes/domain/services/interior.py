"""Inner layout of a single compartment.

A compartment may be split into equal-width inner sections by inner
dividers, each with its own inner shelves and drawer stack. A legacy drawer
stack from the compartment extras spans the whole inner width instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import DRAWER_GAP_M, DRAWER_HEIGHT_M, PANEL_THICKNESS_M
from ..entities import CompartmentExtras, ElementConfig

__all__ = [
    "CompartmentInterior",
    "DrawerStack",
    "InnerSection",
    "drawer_capacity",
    "plan_drawers",
    "plan_interior",
    "section_width",
    "space_height",
]


def section_width(
    inner_width: float, columns: int, thickness: float = PANEL_THICKNESS_M
) -> float:
    """Width of one inner section after subtracting the inner dividers."""
    return max((inner_width - (columns - 1) * thickness) / columns, 0.0)


def space_height(
    clear_height: float, shelf_count: int, thickness: float = PANEL_THICKNESS_M
) -> float:
    """Height of one inner space when ``shelf_count`` equal shelves split a section."""
    return max((clear_height - shelf_count * thickness) / (shelf_count + 1), 0.0)


def drawer_capacity(clear_height: float) -> int:
    """How many fixed-height drawers fit in the given clear height."""
    if not math.isfinite(clear_height) or clear_height <= 0:
        return 0
    return max(
        0, math.floor((clear_height + DRAWER_GAP_M) / (DRAWER_HEIGHT_M + DRAWER_GAP_M))
    )


@dataclass(frozen=True)
class DrawerStack:
    """A drawer stack resolved against the available height.

    Attributes:
        requested: Configured drawer count.
        capacity: Maximum drawers that physically fit.
        used: Drawers actually cut, min(requested, capacity).
        room_above: Clear height left above the stack and its gap.
        auto_shelf: Whether a shelf is inserted above the stack.
    """

    requested: int
    capacity: int
    used: int
    room_above: float
    auto_shelf: bool

    @property
    def stack_height(self) -> float:
        if self.used == 0:
            return 0.0
        return self.used * DRAWER_HEIGHT_M + (self.used - 1) * DRAWER_GAP_M


def plan_drawers(
    clear_height: float, requested: int, thickness: float = PANEL_THICKNESS_M
) -> DrawerStack:
    """Cap a requested drawer count to what fits and decide on the auto-shelf.

    Configured counts above capacity are capped silently, never rejected.
    A full stack gets no shelf above it.
    """
    capacity = drawer_capacity(clear_height)
    used = min(max(0, requested), capacity)
    if used == 0:
        return DrawerStack(requested, capacity, 0, clear_height, False)
    stack = used * DRAWER_HEIGHT_M + (used - 1) * DRAWER_GAP_M
    room_above = clear_height - stack - DRAWER_GAP_M
    auto_shelf = used < capacity and room_above >= thickness
    return DrawerStack(requested, capacity, used, room_above, auto_shelf)


@dataclass(frozen=True)
class InnerSection:
    """One inner vertical section of a compartment.

    Attributes:
        index: 0-based section index, left to right.
        width: Section width in meters.
        shelf_count: Inner shelves in this section.
        space_height: Height of each inner space in meters.
        drawers: Drawer stack for this section, if any.
        drawers_external: External drawers are faced with front material.
    """

    index: int
    width: float
    shelf_count: int
    space_height: float
    drawers: DrawerStack | None
    drawers_external: bool = True


@dataclass(frozen=True)
class CompartmentInterior:
    """Resolved inner layout of a compartment.

    Attributes:
        inner_width: Width between the column's faces, in meters.
        clear_height: Usable height in meters.
        sections: Inner sections, left to right.
        legacy_drawers: Full-width drawer stack from the compartment extras.
        center_divider: Free-standing divider from the compartment extras.
    """

    inner_width: float
    clear_height: float
    sections: tuple[InnerSection, ...]
    legacy_drawers: DrawerStack | None = None
    center_divider: bool = False

    @property
    def columns(self) -> int:
        return len(self.sections)

    def section(self, index: int) -> InnerSection | None:
        if 0 <= index < len(self.sections):
            return self.sections[index]
        return None


def plan_interior(
    inner_width: float,
    clear_height: float,
    config: ElementConfig | None,
    extras: CompartmentExtras | None,
    thickness: float = PANEL_THICKNESS_M,
) -> CompartmentInterior:
    """Resolve a compartment's sections, drawer stacks and extras.

    Per-section drawer counts take precedence. Without them, the legacy
    ``drawers`` extra fills the full inner width; a missing or zero
    ``drawers_count`` there means as many as fit.
    """
    config = config or ElementConfig()
    width = section_width(inner_width, config.columns, thickness)

    sections = []
    for index in range(config.columns):
        shelf_count = config.row_counts[index]
        drawers = None
        if config.drawer_counts is not None and config.drawer_counts[index] > 0:
            drawers = plan_drawers(clear_height, config.drawer_counts[index], thickness)
        sections.append(
            InnerSection(
                index=index,
                width=width,
                shelf_count=shelf_count,
                space_height=space_height(clear_height, shelf_count, thickness),
                drawers=drawers,
                drawers_external=config.drawers_are_external(index),
            )
        )

    legacy_drawers = None
    has_section_drawers = config.drawer_counts is not None and any(
        count > 0 for count in config.drawer_counts
    )
    if extras is not None and extras.drawers and not has_section_drawers:
        requested = extras.drawers_count or drawer_capacity(clear_height)
        legacy_drawers = plan_drawers(clear_height, requested, thickness)

    return CompartmentInterior(
        inner_width=inner_width,
        clear_height=clear_height,
        sections=tuple(sections),
        legacy_drawers=legacy_drawers,
        center_divider=bool(extras and extras.vertical_divider and config.columns == 1),
    )
