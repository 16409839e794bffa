"""Unit tests for the configuration to domain adapter."""

from pathlib import Path

import pytest

from wardrobes.application import ReconcileCommand
from wardrobes.application.config import (
    CatalogConfig,
    config_to_catalogs,
    config_to_wardrobe,
    load_config,
    load_config_from_dict,
    wardrobe_to_dict,
    wardrobe_to_document,
)
from wardrobes.domain import CompartmentId, FloorY, SubCompartmentId
from wardrobes.domain.value_objects import DoubleDoor, DrawerStyleDoor, SingleDoor

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

A1 = CompartmentId(0, 1)
A2 = CompartmentId(0, 2)
B1 = CompartmentId(1, 1)
B2 = CompartmentId(1, 2)


@pytest.fixture
def full_config():
    return load_config(FIXTURES_PATH / "valid_full.json")


class TestConfigToWardrobe:
    """Tests for config_to_wardrobe."""

    def test_geometry(self, full_config) -> None:
        """Dimensions, seams and per-column positions are carried over."""
        geometry = config_to_wardrobe(full_config).geometry

        assert geometry.width_cm == 210
        assert geometry.has_base is True
        assert geometry.base_height_cm == 8
        assert geometry.vertical_boundaries == (0.0,)
        assert geometry.column_shelves[0] == (FloorY(1.0),)
        assert geometry.column_module_boundaries == {0: FloorY(2.0), 1: FloorY(2.0)}

    def test_configuration_keys_are_parsed(self, full_config) -> None:
        """String keys become typed compartment ids."""
        configuration = config_to_wardrobe(full_config).configuration

        assert list(configuration.element_configs) == [A1]
        element = configuration.element_configs[A1]
        assert element.row_counts == (1, 0)
        assert element.drawer_counts == (0, 3)
        assert list(configuration.extras) == [B1]
        assert configuration.door_selections == {B2: DrawerStyleDoor()}

    def test_door_groups(self, full_config) -> None:
        """Door options become door styles."""
        groups = config_to_wardrobe(full_config).configuration.door_groups

        assert groups[0].style == DoubleDoor()
        assert groups[0].compartments == (A1, A2)
        assert groups[1].style == SingleDoor("left")

    def test_selections(self, full_config) -> None:
        """Material and handle selections are carried over."""
        wardrobe = config_to_wardrobe(full_config)

        assert wardrobe.depth_cm == 60
        assert wardrobe.material_id == "1"
        assert wardrobe.front_material_id == "2"
        assert wardrobe.handle_id == "h1"

    def test_missing_row_counts_default_to_zero(self) -> None:
        """An element config without row counts has no inner shelves."""
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "wardrobe": {
                    "width": 100,
                    "height": 180,
                    "depth": 60,
                    "element_configs": {"A1": {"columns": 3}},
                },
            }
        )
        element = config_to_wardrobe(config).configuration.element_configs[A1]
        assert element.row_counts == (0, 0, 0)

    def test_group_without_compartment_list(self) -> None:
        """An omitted compartment list stays None."""
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "wardrobe": {
                    "width": 100,
                    "height": 180,
                    "depth": 60,
                    "door_groups": [
                        {"id": "broken", "type": "left"},
                        {"id": "sub", "type": "left", "compartments": ["A1.0.1"]},
                    ],
                },
            }
        )
        groups = config_to_wardrobe(config).configuration.door_groups
        assert groups[0].compartments is None
        assert groups[1].compartments == (SubCompartmentId(A1, 0, 1),)


class TestConfigToCatalogs:
    """Tests for config_to_catalogs."""

    def test_absent_catalog_is_empty(self) -> None:
        """No catalog gives empty domain catalogs."""
        materials, handles = config_to_catalogs(None)
        assert len(materials) == 0
        assert handles.get("h1") is None

    def test_materials_and_handles(self, full_config) -> None:
        """Thickness, categories and finishes are carried over."""
        materials, handles = config_to_catalogs(full_config.catalog)

        back = materials.find_back(None)
        assert back is not None
        assert back.id == "3"
        assert back.thickness_mm == 3
        assert handles.unit_price("h1", "f1") == 4.0

    def test_numeric_ids(self) -> None:
        """Numeric ids are looked up as strings."""
        materials, _ = config_to_catalogs(
            CatalogConfig(materials=[{"id": 7, "price": 12}])
        )
        assert materials.get(7) is not None


class TestWardrobeToDict:
    """Tests for serializing wardrobes back to configuration documents."""

    def test_round_trip(self, full_config) -> None:
        """A serialized wardrobe loads back into the same wardrobe."""
        wardrobe = config_to_wardrobe(full_config)
        document = wardrobe_to_document(full_config, wardrobe)

        reloaded = load_config_from_dict(document)

        assert config_to_wardrobe(reloaded) == wardrobe
        assert reloaded.catalog == full_config.catalog

    def test_reconciled_degenerate_compartment_reloads(self) -> None:
        """Clamped drawer counts of a collapsed compartment still validate."""
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "wardrobe": {
                    "width": 100,
                    "height": 180,
                    "depth": 60,
                    "has_base": True,
                    "base_height": 20,
                    "column_shelves": {"0": [0.1]},
                    "element_configs": {
                        "A1": {"columns": 1, "rowCounts": [0], "drawerCounts": [2]}
                    },
                },
            }
        )
        wardrobe = ReconcileCommand().execute(config_to_wardrobe(config)).wardrobe
        document = wardrobe_to_document(config, wardrobe)

        reloaded = load_config_from_dict(document)

        assert reloaded.wardrobe.element_configs["A1"].drawer_counts == [0]

    def test_keys_are_strings(self, full_config) -> None:
        """Compartment keys and column indices are written as strings."""
        data = wardrobe_to_dict(config_to_wardrobe(full_config))

        assert list(data["element_configs"]) == ["A1"]
        assert data["door_groups"][0] == {
            "id": "g1",
            "type": "double",
            "compartments": ["A1", "A2"],
        }
        assert data["door_selections"] == {"B2": "drawerStyle"}
        assert data["column_shelves"] == {"0": [1.0], "1": []}
