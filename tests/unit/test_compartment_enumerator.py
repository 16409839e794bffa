"""Unit tests for compartment enumeration.

These tests verify:
- Compartment keys and heights for reference layouts
- Coverage of the usable column height
- Independence from stored shelf order
- Module splits following each column's effective height
"""

import pytest

from wardrobes.domain import WardrobeGeometry, valid_compartments
from wardrobes.domain.services import BoundKind, CompartmentEnumerator
from wardrobes.domain.value_objects import CompartmentId, FloorY, ModuleLabel


def keys(geometry: WardrobeGeometry) -> list[str]:
    return [str(k) for k in CompartmentEnumerator().compartments(geometry)]


class TestReferenceLayouts:
    """Tests for the documented reference layouts."""

    def test_two_columns_without_shelves(self) -> None:
        """210 x 180 with a centre seam gives A1 and B1 of 176.4 cm."""
        geometry = WardrobeGeometry(width_cm=210, height_cm=180, vertical_boundaries=(0.0,))
        slots = CompartmentEnumerator().compartments(geometry)

        assert [str(k) for k in slots] == ["A1", "B1"]
        for slot in slots.values():
            assert slot.height_cm == pytest.approx(176.4)
            assert slot.clear_height_cm == pytest.approx(176.4)
            assert slot.module is ModuleLabel.SINGLE

    def test_tall_columns_with_module_boundaries(self) -> None:
        """240 cm tall with boundaries at 2.0 m gives two compartments per column."""
        geometry = WardrobeGeometry(
            width_cm=210,
            height_cm=240,
            vertical_boundaries=(0.0,),
            column_module_boundaries={0: FloorY(2.0), 1: FloorY(2.0)},
        )
        slots = CompartmentEnumerator().compartments(geometry)

        assert [str(k) for k in slots] == ["A1", "A2", "B1", "B2"]
        a1 = slots[CompartmentId(0, 1)]
        a2 = slots[CompartmentId(0, 2)]
        assert a1.module is ModuleLabel.BOTTOM
        assert a2.module is ModuleLabel.TOP
        assert a1.height_cm == pytest.approx(196.4)
        assert a2.height_cm == pytest.approx(36.4)

    def test_auto_columns_for_300cm(self) -> None:
        """300 cm without seams gives columns A, B and C."""
        assert keys(WardrobeGeometry(width_cm=300, height_cm=200)) == ["A1", "B1", "C1"]

    def test_shelves_number_bottom_to_top(self) -> None:
        """Two shelves make three compartments, numbered upwards."""
        geometry = WardrobeGeometry(
            width_cm=100,
            height_cm=200,
            column_shelves={0: (FloorY(0.6), FloorY(1.2))},
        )
        slots = list(CompartmentEnumerator().compartments(geometry).values())

        assert [s.key for s in slots] == ["A1", "A2", "A3"]
        assert slots[0].lower.kind is BoundKind.PANEL_SURFACE
        assert slots[0].upper.kind is BoundKind.SHELF_CENTER
        assert slots[0].upper.y == FloorY(0.6)
        assert slots[2].upper.kind is BoundKind.PANEL_SURFACE

    def test_top_module_numbering_continues(self) -> None:
        """Top-module compartments continue the bottom module's numbering."""
        geometry = WardrobeGeometry(
            width_cm=100,
            height_cm=260,
            column_shelves={0: (FloorY(1.0),)},
            column_module_boundaries={0: FloorY(2.0)},
            column_top_shelves={0: (FloorY(2.3),)},
        )
        column = CompartmentEnumerator().columns(geometry)[0]

        assert [s.key for s in column.compartments] == ["A1", "A2", "A3", "A4"]
        assert [s.key for s in column.module_compartments(ModuleLabel.TOP)] == ["A3", "A4"]
        assert column.has_module_split


class TestCoverage:
    """Compartment heights add up to the usable column height."""

    def test_raw_heights_cover_the_column(self) -> None:
        """Sum of spans equals column height minus boards and base."""
        geometry = WardrobeGeometry(
            width_cm=100,
            height_cm=200,
            has_base=True,
            base_height_cm=10,
            column_shelves={0: (FloorY(0.6), FloorY(1.2))},
        )
        slots = CompartmentEnumerator().compartments(geometry).values()
        usable = (2.0 - 2 * 0.018 - 0.10) * 100

        assert sum(s.height_cm for s in slots) == pytest.approx(usable)

    def test_clear_heights_deduct_one_thickness_per_shelf(self) -> None:
        """Each shelf loses half its thickness to either neighbour."""
        geometry = WardrobeGeometry(
            width_cm=100,
            height_cm=200,
            column_shelves={0: (FloorY(0.6), FloorY(1.2))},
        )
        slots = list(CompartmentEnumerator().compartments(geometry).values())
        usable = (2.0 - 2 * 0.018) * 100

        assert sum(s.clear_height_cm for s in slots) == pytest.approx(usable - 2 * 1.8)
        assert slots[0].clear_height_cm == pytest.approx(slots[0].height_cm - 0.9)
        assert slots[1].clear_height_cm == pytest.approx(slots[1].height_cm - 1.8)

    def test_split_column_covers_both_modules(self) -> None:
        """With a split, the boundary boards are excluded from both modules."""
        geometry = WardrobeGeometry(
            width_cm=100, height_cm=240, column_module_boundaries={0: FloorY(2.0)}
        )
        slots = CompartmentEnumerator().compartments(geometry).values()

        assert sum(s.height_cm for s in slots) == pytest.approx((2.4 - 4 * 0.018) * 100)


class TestShelfOrder:
    """Stored shelf order does not matter."""

    def test_unsorted_shelves_match_sorted(self) -> None:
        """Feeding shelves in any order yields the same compartments."""
        unsorted = WardrobeGeometry(
            width_cm=100,
            height_cm=200,
            column_shelves={0: (FloorY(1.4), FloorY(0.5), FloorY(0.9))},
        )
        ordered = WardrobeGeometry(
            width_cm=100,
            height_cm=200,
            column_shelves={0: (FloorY(0.5), FloorY(0.9), FloorY(1.4))},
        )
        assert valid_compartments(unsorted) == valid_compartments(ordered)


class TestModuleThreshold:
    """A stored boundary is active only in columns taller than 2.0 m."""

    def test_column_override_activates_split(self) -> None:
        """A tall column splits even when the global height is low."""
        geometry = WardrobeGeometry(
            width_cm=210,
            height_cm=180,
            vertical_boundaries=(0.0,),
            column_heights={1: 240},
            column_module_boundaries={0: FloorY(1.5), 1: FloorY(2.0)},
        )
        assert keys(geometry) == ["A1", "B1", "B2"]

    def test_column_override_disables_split(self) -> None:
        """A short column ignores its stored boundary under a tall global height."""
        geometry = WardrobeGeometry(
            width_cm=210,
            height_cm=240,
            vertical_boundaries=(0.0,),
            column_heights={0: 190},
            column_module_boundaries={0: FloorY(1.5), 1: FloorY(2.0)},
        )
        layout = CompartmentEnumerator().columns(geometry)

        assert keys(geometry) == ["A1", "B1", "B2"]
        assert layout[0].module_boundary is None
        assert layout[0].height_m == pytest.approx(1.9)

    def test_tall_column_without_boundary_is_single(self) -> None:
        """No stored boundary, no split."""
        geometry = WardrobeGeometry(width_cm=100, height_cm=240)
        assert keys(geometry) == ["A1"]

    def test_top_shelves_ignored_without_split(self) -> None:
        """Top-module shelves of an inactive split create nothing."""
        geometry = WardrobeGeometry(
            width_cm=100,
            height_cm=180,
            column_module_boundaries={0: FloorY(1.5)},
            column_top_shelves={0: (FloorY(1.7),)},
        )
        assert keys(geometry) == ["A1"]
