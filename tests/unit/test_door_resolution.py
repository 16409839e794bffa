"""Unit tests for door resolution and door metrics."""

import pytest

from wardrobes.domain import (
    CompartmentConfiguration,
    CompartmentId,
    DoorGroup,
    DoorResolver,
    ElementConfig,
    FloorY,
    HandleCatalog,
    SubCompartmentId,
    compute_door_metrics,
)
from wardrobes.domain.services import ResolvedDoor
from wardrobes.domain.value_objects import (
    DoubleDoor,
    DrawerStyleDoor,
    NoDoor,
    SingleDoor,
)

A1 = CompartmentId(0, 1)
A2 = CompartmentId(0, 2)
B1 = CompartmentId(1, 1)
B2 = CompartmentId(1, 2)

SPLIT_A1 = ElementConfig(columns=2, row_counts=(1, 0))


class TestDoorResolver:
    """Tests for DoorResolver."""

    def test_group_resolves_once_at_first_compartment(self, make_wardrobe) -> None:
        """A group over two compartments yields one door anchored at the first."""
        configuration = CompartmentConfiguration(
            door_groups=(
                DoorGroup(id="g", style=DoubleDoor(), compartments=(A2, A1)),
            )
        )
        wardrobe = make_wardrobe(
            configuration=configuration, column_shelves={0: (FloorY(0.9),)}
        )

        doors = DoorResolver().resolve(wardrobe)

        assert len(doors) == 1
        assert doors[0].anchor == A1
        assert doors[0].group_id == "g"
        assert doors[0].height_m == pytest.approx(1.745)
        assert doors[0].width_m == pytest.approx(0.999)

    def test_single_sub_compartment_uses_space_dimensions(
        self, make_wardrobe
    ) -> None:
        """A door over one inner space is as wide as its section."""
        configuration = CompartmentConfiguration(
            element_configs={A1: SPLIT_A1},
            door_groups=(
                DoorGroup(
                    id="g",
                    style=SingleDoor("left"),
                    compartments=(SubCompartmentId(A1, 0, 1),),
                ),
            ),
        )
        doors = DoorResolver().resolve(make_wardrobe(configuration=configuration))

        assert doors[0].width_m == pytest.approx(0.472)
        assert doors[0].height_m == pytest.approx(0.872)

    def test_sub_compartments_in_one_section_span_full_height(
        self, make_wardrobe
    ) -> None:
        """Several spaces of one section use the section width and compartment height."""
        configuration = CompartmentConfiguration(
            element_configs={A1: SPLIT_A1},
            door_groups=(
                DoorGroup(
                    id="g",
                    style=SingleDoor("right"),
                    compartments=(
                        SubCompartmentId(A1, 0, 0),
                        SubCompartmentId(A1, 0, 1),
                    ),
                ),
            ),
        )
        doors = DoorResolver().resolve(make_wardrobe(configuration=configuration))

        assert doors[0].width_m == pytest.approx(0.472)
        assert doors[0].height_m == pytest.approx(1.763)

    def test_sub_compartment_beyond_section_falls_back(self, make_wardrobe) -> None:
        """A space index past the section's shelves uses the whole compartment."""
        configuration = CompartmentConfiguration(
            element_configs={A1: SPLIT_A1},
            door_groups=(
                DoorGroup(
                    id="g",
                    style=SingleDoor("left"),
                    compartments=(SubCompartmentId(A1, 1, 3),),
                ),
            ),
        )
        doors = DoorResolver().resolve(make_wardrobe(configuration=configuration))

        assert doors[0].width_m == pytest.approx(0.999)
        assert doors[0].height_m == pytest.approx(1.763)

    def test_no_door_group_renders_nothing(self, make_wardrobe) -> None:
        """An open group claims its compartments but produces no door."""
        configuration = CompartmentConfiguration(
            door_groups=(DoorGroup(id="g", style=NoDoor(), compartments=(A1,)),),
            door_selections={A1: SingleDoor("left")},
        )
        assert DoorResolver().resolve(make_wardrobe(configuration=configuration)) == []

    def test_legacy_selection_per_compartment(self, make_wardrobe) -> None:
        """Unclaimed compartments fall back to their legacy selection."""
        configuration = CompartmentConfiguration(
            door_groups=(DoorGroup(id="g", style=DoubleDoor(), compartments=(A1,)),),
            door_selections={A2: DrawerStyleDoor()},
        )
        wardrobe = make_wardrobe(
            configuration=configuration, column_shelves={0: (FloorY(0.9),)}
        )

        doors = DoorResolver().resolve(wardrobe)

        assert [(door.anchor, door.group_id) for door in doors] == [
            (A1, "g"),
            (A2, None),
        ]
        assert doors[1].height_m == pytest.approx(0.872)


class TestDoorMetrics:
    """Tests for compute_door_metrics."""

    @pytest.fixture
    def wardrobe(self, make_wardrobe):
        configuration = CompartmentConfiguration(
            door_groups=(
                DoorGroup(id="g1", style=DoubleDoor(), compartments=(A1,)),
                DoorGroup(
                    id="g2", style=SingleDoor("left", mirror=True), compartments=(B1,)
                ),
            ),
            door_selections={B2: DrawerStyleDoor()},
        )
        return make_wardrobe(
            width_cm=210,
            vertical_boundaries=(0.0,),
            column_shelves={1: (FloorY(0.9),)},
            configuration=configuration,
            handle_id="h1",
            handle_finish="f1",
        )

    def test_counts_group_doors_only(self, wardrobe) -> None:
        """Legacy selections are not counted."""
        metrics = compute_door_metrics(wardrobe)

        assert metrics.double_door_count == 1
        assert metrics.single_door_count == 1
        assert metrics.mirror_door_count == 1
        assert metrics.drawer_style_door_count == 0
        assert metrics.handle_count == 3

    def test_height_range(self, wardrobe) -> None:
        """Heights are reported in cm with one decimal."""
        metrics = compute_door_metrics(wardrobe)

        assert metrics.max_door_height_cm == pytest.approx(176.3)
        assert metrics.min_door_height_cm == pytest.approx(87.2)

    def test_handle_names(self, wardrobe, handles: HandleCatalog) -> None:
        """Names come from the global handle selection."""
        metrics = compute_door_metrics(wardrobe, handles)

        assert metrics.handle_name == "Bar handle"
        assert metrics.handle_finish_name == "Chrome"

    def test_no_doors(self, make_wardrobe) -> None:
        """A wardrobe without doors reports zeros."""
        metrics = compute_door_metrics(make_wardrobe())

        assert metrics.max_door_height_cm == 0.0
        assert metrics.handle_count == 0
        assert metrics.handle_name == ""


class TestResolvedDoor:
    """Tests for ResolvedDoor."""

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (DoubleDoor(), 2),
            (SingleDoor("left"), 1),
            (DrawerStyleDoor(), 1),
            (NoDoor(), 0),
        ],
    )
    def test_leaf_count(self, style, expected: int) -> None:
        """Each style contributes its own number of leaves."""
        door = ResolvedDoor(anchor=A1, style=style, width_m=0.8, height_m=1.7)
        assert door.leaf_count == expected
