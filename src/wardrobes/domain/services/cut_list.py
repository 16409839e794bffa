"""Cut-list generation.

Walks the wardrobe geometry and per-compartment configuration and emits a
flat, ordered list of priced panels. The emission order is part of the
contract because consumers group panels by owner element for display:

1. outer sides
2. seam faces
3. bottom/top/base/module-boundary boards per column
4. main shelves per column (bottom module, then top module)
5. per compartment: inner dividers, inner shelves, centre divider, drawer
   fronts, auto-shelves above drawers, door leaves
6. back panels per column, then handle lines
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from ..constants import (
    BACK_CLEARANCE_M,
    DOOR_THICKNESS_MM,
    DOUBLE_DOOR_GAP_M,
    DRAWER_HEIGHT_M,
    PANEL_THICKNESS_M,
    SPLIT_THRESHOLD_M,
)
from ..entities import HandleCatalog, Material, MaterialCatalog, Wardrobe
from ..value_objects import (
    CutList,
    CutListItem,
    DoubleDoor,
    DrawerStyleDoor,
    MaterialCategory,
    ModuleLabel,
    SingleDoor,
    door_option,
)
from .compartments import ColumnLayout, CompartmentEnumerator, CompartmentSlot
from .door_resolution import DoorResolver, ResolvedDoor
from .interior import CompartmentInterior
from .pricing import MaterialSelection, select_materials, summarize

logger = logging.getLogger(__name__)

__all__ = ["CutListGenerator", "KORPUS_ELEMENT"]

# Owner label of panels shared by the whole carcass
KORPUS_ELEMENT = "KORPUS"


def _length(value: float) -> float:
    """Clamp a computed length to a finite, non-negative value."""
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass
class _Emission:
    """Mutable state for a single generation pass."""

    wardrobe: Wardrobe
    materials: MaterialSelection
    handles: HandleCatalog
    carcass_depth: float
    items: list[CutListItem] = field(default_factory=list)
    handle_items: list[CutListItem] = field(default_factory=list)
    rendered_groups: set[str] = field(default_factory=set)

    def panel(
        self,
        code: str,
        description: str,
        width: float,
        height: float,
        element: str,
        material: Material | None,
        category: MaterialCategory,
        thickness_mm: float | None = None,
    ) -> None:
        """Append a panel; zero-sized panels are skipped."""
        width = _length(width)
        height = _length(height)
        if width <= 0 or height <= 0:
            return
        area = width * height
        price = material.price if material is not None else 0.0
        if thickness_mm is None:
            thickness_mm = PANEL_THICKNESS_M * 1000
        self.items.append(
            CutListItem(
                code=code,
                description=description,
                width_cm=width * 100,
                height_cm=height * 100,
                thickness_mm=thickness_mm,
                area_m2=area,
                cost=area * price,
                element=element,
                material_type=category,
            )
        )

    def korpus(
        self, code: str, description: str, width: float, height: float, element: str
    ) -> None:
        self.panel(
            code,
            description,
            width,
            height,
            element,
            self.materials.carcass,
            MaterialCategory.KORPUS,
        )


class CutListGenerator:
    """Generates priced cut lists from wardrobes.

    Example:
        >>> generator = CutListGenerator()
        >>> cut_list = generator.generate(wardrobe, catalog)
        >>> [item.code for item in cut_list.items]
        ['SL', 'SD', 'A-DON', 'A-GOR', 'A1-Z']
    """

    def __init__(
        self,
        enumerator: CompartmentEnumerator | None = None,
        door_resolver: DoorResolver | None = None,
        thickness: float = PANEL_THICKNESS_M,
    ) -> None:
        self.thickness = thickness
        self.enumerator = enumerator or CompartmentEnumerator(thickness=thickness)
        self.door_resolver = door_resolver or DoorResolver(
            self.enumerator, thickness=thickness
        )

    def generate(
        self,
        wardrobe: Wardrobe,
        materials: MaterialCatalog,
        handles: HandleCatalog | None = None,
    ) -> CutList:
        """Generate the cut list for a wardrobe.

        An empty cut list is returned, without raising, when the catalog is
        empty, the carcass material is unknown, or a dimension is not a
        positive finite number.

        Args:
            wardrobe: The wardrobe to decompose. Its configuration is assumed
                to be reconciled against its geometry.
            materials: Material catalog.
            handles: Optional handle catalog; missing handles price at 0.

        Returns:
            The priced cut list.
        """
        if len(materials) == 0:
            logger.info("Empty material catalog, returning empty cut list")
            return CutList.empty()
        selection = select_materials(wardrobe, materials)
        if selection is None:
            logger.info(
                f"Carcass material {wardrobe.material_id!r} not in catalog, "
                f"returning empty cut list"
            )
            return CutList.empty()
        geometry = wardrobe.geometry
        dimensions = (geometry.width_cm, geometry.height_cm, wardrobe.depth_cm)
        if not all(math.isfinite(d) and d > 0 for d in dimensions):
            logger.info(f"Invalid dimensions {dimensions}, returning empty cut list")
            return CutList.empty()

        emission = _Emission(
            wardrobe=wardrobe,
            materials=selection,
            handles=handles or HandleCatalog(),
            carcass_depth=wardrobe.depth_m - selection.back_thickness_mm / 1000,
        )
        columns = self.enumerator.columns(geometry)

        self._outer_sides(emission, columns)
        self._seams(emission, columns)
        for column in columns:
            self._boards(emission, column)
        for column in columns:
            self._main_shelves(emission, column)
        for column in columns:
            for slot in column.compartments:
                self._compartment(emission, columns, column, slot)
        for column in columns:
            self._back_panels(emission, column)
        emission.items.extend(emission.handle_items)

        logger.debug(f"Generated {len(emission.items)} cut-list item(s)")
        return summarize(emission.items, selection.carcass.price)

    def _outer_sides(self, emission: _Emission, columns: list[ColumnLayout]) -> None:
        depth = emission.carcass_depth
        emission.korpus("SL", "Left side", depth, columns[0].height_m, KORPUS_ELEMENT)
        emission.korpus("SD", "Right side", depth, columns[-1].height_m, KORPUS_ELEMENT)

    def _seams(self, emission: _Emission, columns: list[ColumnLayout]) -> None:
        depth = emission.carcass_depth
        for n, (left, right) in enumerate(zip(columns, columns[1:]), start=1):
            emission.korpus(
                f"VS{n}L",
                f"Seam {n}, face of column {left.letter}",
                depth,
                left.height_m,
                KORPUS_ELEMENT,
            )
            emission.korpus(
                f"VS{n}D",
                f"Seam {n}, face of column {right.letter}",
                depth,
                right.height_m,
                KORPUS_ELEMENT,
            )

    def _inner_width(self, column: ColumnLayout) -> float:
        return column.block.width - 2 * self.thickness

    def _boards(self, emission: _Emission, column: ColumnLayout) -> None:
        letter = column.letter
        inner_width = self._inner_width(column)
        depth = emission.carcass_depth
        emission.korpus(f"{letter}-DON", f"Bottom board {letter}", inner_width, depth, letter)
        emission.korpus(f"{letter}-GOR", f"Top board {letter}", inner_width, depth, letter)

        geometry = emission.wardrobe.geometry
        if geometry.has_base and geometry.base_height_m > 0:
            emission.korpus(
                f"{letter}-BAZA",
                f"Base front {letter}",
                inner_width,
                geometry.base_height_m,
                letter,
            )
        if column.height_m > SPLIT_THRESHOLD_M:
            emission.korpus(
                f"{letter}-MB1", f"Module board {letter} (lower)", inner_width, depth, letter
            )
            emission.korpus(
                f"{letter}-MB2", f"Module board {letter} (upper)", inner_width, depth, letter
            )

    def _main_shelves(self, emission: _Emission, column: ColumnLayout) -> None:
        letter = column.letter
        inner_width = self._inner_width(column)
        for n, _ in enumerate((*column.shelves, *column.top_shelves), start=1):
            emission.korpus(
                f"{letter}-P{n}",
                f"Shelf {n}, column {letter}",
                inner_width,
                emission.carcass_depth,
                letter,
            )

    def _compartment(
        self,
        emission: _Emission,
        columns: list[ColumnLayout],
        column: ColumnLayout,
        slot: CompartmentSlot,
    ) -> None:
        key = slot.key
        depth = emission.carcass_depth
        interior = self.door_resolver.interior(emission.wardrobe, column, slot)

        for n in range(1, interior.columns):
            emission.korpus(
                f"{key}-PR{n}", f"Inner divider {n}, {key}", depth, interior.clear_height, key
            )

        for section in interior.sections:
            for n in range(1, section.shelf_count + 1):
                emission.korpus(
                    f"{key}-IP{section.index + 1}.{n}",
                    f"Inner shelf {n}, section {section.index + 1}, {key}",
                    section.width,
                    depth,
                    key,
                )

        if interior.center_divider:
            emission.korpus(
                f"{key}-PRC", f"Centre divider, {key}", depth, interior.clear_height, key
            )

        self._drawer_fronts(emission, key, interior)
        self._drawer_shelves(emission, key, interior)

        for door in self.door_resolver.resolve_at(
            emission.wardrobe, columns, column, slot, emission.rendered_groups
        ):
            self._door(emission, door)

    def _drawer_stacks(self, interior: CompartmentInterior):
        """(section number, width, stack, external) for every drawer stack."""
        if interior.legacy_drawers is not None:
            return [(1, interior.inner_width, interior.legacy_drawers, True)]
        return [
            (section.index + 1, section.width, section.drawers, section.drawers_external)
            for section in interior.sections
            if section.drawers is not None
        ]

    def _drawer_fronts(
        self, emission: _Emission, key: str, interior: CompartmentInterior
    ) -> None:
        serial = 0
        for _, width, stack, external in self._drawer_stacks(interior):
            if external:
                material = emission.materials.front
                category = MaterialCategory.FRONT
            else:
                material = emission.materials.carcass
                category = MaterialCategory.KORPUS
            for _ in range(stack.used):
                serial += 1
                emission.panel(
                    f"{key}-F{serial}",
                    f"Drawer front {serial}, {key}",
                    width,
                    DRAWER_HEIGHT_M,
                    key,
                    material,
                    category,
                    thickness_mm=DOOR_THICKNESS_MM,
                )

    def _drawer_shelves(
        self, emission: _Emission, key: str, interior: CompartmentInterior
    ) -> None:
        for section_number, width, stack, _ in self._drawer_stacks(interior):
            if stack.auto_shelf:
                emission.korpus(
                    f"{key}-PF{section_number}",
                    f"Shelf above drawers, section {section_number}, {key}",
                    width,
                    emission.carcass_depth,
                    key,
                )

    def _door(self, emission: _Emission, door: ResolvedDoor) -> None:
        key = str(door.anchor)
        wardrobe = emission.wardrobe
        material = emission.materials.door_front(door.material_id, wardrobe.per_door)
        option = door_option(door.style)

        def leaf(code: str, description: str, width: float) -> None:
            emission.panel(
                code,
                description,
                width,
                door.height_m,
                key,
                material,
                MaterialCategory.FRONT,
                thickness_mm=DOOR_THICKNESS_MM,
            )

        leaves = door.leaf_count
        if leaves == 0:
            return
        # Adjacent leaves of one opening are separated by the double-door gap
        leaf_width = (door.width_m - (leaves - 1) * DOUBLE_DOOR_GAP_M) / leaves
        match door.style:
            case DoubleDoor():
                leaf(f"{key}-VL", f"Door {key}, left leaf ({option})", leaf_width)
                leaf(f"{key}-VD", f"Door {key}, right leaf ({option})", leaf_width)
            case SingleDoor():
                leaf(f"{key}-V", f"Door {key} ({option})", leaf_width)
            case DrawerStyleDoor():
                leaf(f"{key}-VF", f"Drawer-style door {key}", leaf_width)

        if door.handle_count == 0:
            return
        if wardrobe.per_door and door.handle_id is not None:
            handle_id, finish_id = door.handle_id, door.handle_finish
        else:
            handle_id, finish_id = wardrobe.handle_id, wardrobe.handle_finish
        unit_price = emission.handles.unit_price(handle_id, finish_id)
        emission.handle_items.append(
            CutListItem(
                code=f"{key}-H",
                description=f"Handles, door {key}",
                width_cm=0.0,
                height_cm=0.0,
                thickness_mm=0.0,
                area_m2=0.0,
                cost=unit_price * door.handle_count,
                element=key,
                material_type=MaterialCategory.HANDLES,
                quantity=door.handle_count,
            )
        )

    def _back_panels(self, emission: _Emission, column: ColumnLayout) -> None:
        width = column.block.width - BACK_CLEARANCE_M
        if column.module_boundary is None:
            spans = [(ModuleLabel.SINGLE, column.height_m)]
        else:
            boundary = column.module_boundary.value
            spans = [
                (ModuleLabel.BOTTOM, boundary),
                (ModuleLabel.TOP, column.height_m - boundary),
            ]
        for module, span in spans:
            first = column.module_compartments(module)
            key = first[0].key if first else f"{column.letter}1"
            emission.panel(
                f"{key}-Z",
                f"Back panel {key}",
                width,
                span - BACK_CLEARANCE_M,
                key,
                emission.materials.back,
                MaterialCategory.BACK,
                thickness_mm=emission.materials.back_thickness_mm,
            )
