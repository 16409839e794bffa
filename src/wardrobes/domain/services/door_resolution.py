"""Door resolution.

Doors come from door groups first. A group renders exactly once, at the
first compartment (in enumeration order) it references, so multi-compartment
spans never produce duplicate leaves. Compartments that no group references
fall back to the legacy one-compartment door selections.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..constants import DOOR_CLEARANCE_M, PANEL_THICKNESS_M
from ..entities import DoorGroup, HandleCatalog, Wardrobe
from ..value_objects import (
    CompartmentId,
    DoorStyle,
    DoubleDoor,
    DrawerStyleDoor,
    NoDoor,
    SingleDoor,
    SubCompartmentId,
    handle_count,
    leaf_count,
)
from .compartments import ColumnLayout, CompartmentEnumerator, CompartmentSlot
from .interior import CompartmentInterior, plan_interior

logger = logging.getLogger(__name__)

__all__ = ["DoorMetrics", "DoorResolver", "ResolvedDoor", "compute_door_metrics"]


@dataclass(frozen=True)
class ResolvedDoor:
    """A door assembly with its opening resolved to physical dimensions.

    Attributes:
        anchor: Compartment the door is rendered at (owner of its panels).
        style: Door style.
        width_m: Opening width available to the leaves, clearance already applied.
        height_m: Leaf height, clearance already applied.
        group_id: Source door group, None for legacy selections.
        material_id: Per-door front material override.
        handle_id: Per-door handle override.
        handle_finish: Per-door handle finish override.
    """

    anchor: CompartmentId
    style: DoorStyle
    width_m: float
    height_m: float
    group_id: str | None = None
    material_id: str | None = None
    handle_id: str | None = None
    handle_finish: str | None = None

    @property
    def leaf_count(self) -> int:
        return leaf_count(self.style)

    @property
    def handle_count(self) -> int:
        return handle_count(self.style)


class DoorResolver:
    """Turns door groups and legacy selections into resolved doors."""

    def __init__(
        self,
        enumerator: CompartmentEnumerator | None = None,
        thickness: float = PANEL_THICKNESS_M,
    ) -> None:
        self.enumerator = enumerator or CompartmentEnumerator(thickness=thickness)
        self.thickness = thickness

    def resolve(
        self, wardrobe: Wardrobe, columns: list[ColumnLayout] | None = None
    ) -> list[ResolvedDoor]:
        """Resolve every door of the wardrobe in compartment order.

        Args:
            wardrobe: The wardrobe to resolve doors for.
            columns: Pre-computed column layouts, enumerated if omitted.

        Returns:
            Resolved doors, anchored at their first referenced compartment.
        """
        if columns is None:
            columns = self.enumerator.columns(wardrobe.geometry)
        doors: list[ResolvedDoor] = []
        rendered: set[str] = set()
        for column in columns:
            for slot in column.compartments:
                doors.extend(self.resolve_at(wardrobe, columns, column, slot, rendered))
        return doors

    def resolve_at(
        self,
        wardrobe: Wardrobe,
        columns: list[ColumnLayout],
        column: ColumnLayout,
        slot: CompartmentSlot,
        rendered: set[str],
    ) -> list[ResolvedDoor]:
        """Doors to render while processing one compartment.

        ``rendered`` carries the ids of groups already rendered at earlier
        compartments and is updated in place.
        """
        configuration = wardrobe.configuration
        referencing = [
            group for group in configuration.door_groups if group.references(slot.id)
        ]
        if referencing:
            doors = []
            for group in referencing:
                if group.id in rendered:
                    continue
                rendered.add(group.id)
                door = self._resolve_group(wardrobe, columns, column, slot, group)
                if door is not None:
                    doors.append(door)
            return doors

        style = configuration.door_selections.get(slot.id)
        if style is None or isinstance(style, NoDoor):
            return []
        return [
            ResolvedDoor(
                anchor=slot.id,
                style=style,
                width_m=max(column.block.width - DOOR_CLEARANCE_M, 0.0),
                height_m=max(slot.clear_height_m - DOOR_CLEARANCE_M, 0.0),
            )
        ]

    def _resolve_group(
        self,
        wardrobe: Wardrobe,
        columns: list[ColumnLayout],
        column: ColumnLayout,
        anchor: CompartmentSlot,
        group: DoorGroup,
    ) -> ResolvedDoor | None:
        if isinstance(group.style, NoDoor):
            return None
        refs = group.compartments or ()
        slots = {slot.id: slot for c in columns for slot in c.compartments}

        width = column.block.width
        sub_refs = [ref for ref in refs if isinstance(ref, SubCompartmentId)]
        if len(refs) == 1 and sub_refs:
            height, section_width = self._space(wardrobe, column, slots, sub_refs[0])
            if section_width is not None:
                width = section_width
        else:
            if sub_refs and len(sub_refs) == len(refs):
                same_section = {(ref.base, ref.section) for ref in sub_refs}
                if len(same_section) == 1:
                    _, section_width = self._space(wardrobe, column, slots, sub_refs[0])
                    if section_width is not None:
                        width = section_width
            height = sum(
                slots[base].clear_height_m
                for base in group.base_compartments()
                if base in slots
            )

        if not math.isfinite(height):
            height = 0.0
        logger.debug(
            f"Door group '{group.id}' resolved at {anchor.key}: "
            f"{width:.3f}m x {height:.3f}m"
        )
        return ResolvedDoor(
            anchor=anchor.id,
            style=group.style,
            width_m=max(width - DOOR_CLEARANCE_M, 0.0),
            height_m=max(height - DOOR_CLEARANCE_M, 0.0),
            group_id=group.id,
            material_id=group.material_id,
            handle_id=group.handle_id,
            handle_finish=group.handle_finish,
        )

    def _space(
        self,
        wardrobe: Wardrobe,
        column: ColumnLayout,
        slots: dict[CompartmentId, CompartmentSlot],
        ref: SubCompartmentId,
    ) -> tuple[float, float | None]:
        """Height and section width of a sub-compartment space."""
        slot = slots.get(ref.base)
        if slot is None:
            return 0.0, None
        interior = self.interior(wardrobe, column, slot)
        section = interior.section(ref.section)
        if section is None or ref.space > section.shelf_count:
            return slot.clear_height_m, None
        return section.space_height, section.width

    def interior(
        self, wardrobe: Wardrobe, column: ColumnLayout, slot: CompartmentSlot
    ) -> CompartmentInterior:
        configuration = wardrobe.configuration
        return plan_interior(
            inner_width=max(column.block.width - 2 * self.thickness, 0.0),
            clear_height=slot.clear_height_m,
            config=configuration.element_configs.get(slot.id),
            extras=configuration.extras.get(slot.id),
            thickness=self.thickness,
        )


@dataclass(frozen=True)
class DoorMetrics:
    """Door summary used by pricing rules and order review.

    Heights are in cm, rounded to one decimal, and 0 when there are no doors.
    """

    double_door_count: int = 0
    single_door_count: int = 0
    mirror_door_count: int = 0
    drawer_style_door_count: int = 0
    max_door_height_cm: float = 0.0
    min_door_height_cm: float = 0.0
    handle_count: int = 0
    handle_name: str = ""
    handle_finish_name: str = ""


def compute_door_metrics(
    wardrobe: Wardrobe, handles: HandleCatalog | None = None
) -> DoorMetrics:
    """Count door-group doors by type and report their height range.

    Only door groups are counted; legacy selections are ignored. Handle names
    come from the global handle selection.
    """
    handle_name = ""
    finish_name = ""
    handle = handles.get(wardrobe.handle_id) if handles is not None else None
    if handle is not None:
        handle_name = handle.name
        finish = (
            handle.finish(str(wardrobe.handle_finish))
            if wardrobe.handle_finish is not None
            else None
        )
        finish_name = finish.name if finish is not None else ""

    doors = [
        door
        for door in DoorResolver().resolve(wardrobe)
        if door.group_id is not None
    ]
    counts = {"double": 0, "single": 0, "mirror": 0, "drawer": 0}
    for door in doors:
        match door.style:
            case DoubleDoor(mirror=mirror):
                counts["double"] += 1
                counts["mirror"] += int(mirror)
            case SingleDoor(mirror=mirror):
                counts["single"] += 1
                counts["mirror"] += int(mirror)
            case DrawerStyleDoor():
                counts["drawer"] += 1

    heights = [door.height_m * 100 for door in doors if door.height_m > 0]
    return DoorMetrics(
        double_door_count=counts["double"],
        single_door_count=counts["single"],
        mirror_door_count=counts["mirror"],
        drawer_style_door_count=counts["drawer"],
        max_door_height_cm=round(max(heights), 1) if heights else 0.0,
        min_door_height_cm=round(min(heights), 1) if heights else 0.0,
        handle_count=sum(door.handle_count for door in doors),
        handle_name=handle_name,
        handle_finish_name=finish_name,
    )
