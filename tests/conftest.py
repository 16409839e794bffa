"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

import pytest

from wardrobes.domain import (
    CompartmentConfiguration,
    Handle,
    HandleCatalog,
    HandleFinish,
    Material,
    MaterialCatalog,
    Wardrobe,
    WardrobeGeometry,
)


# =============================================================================
# Shared catalogs
# =============================================================================


@pytest.fixture
def materials() -> MaterialCatalog:
    """Carcass, front and back materials with round prices."""
    return MaterialCatalog(
        (
            Material(id="1", name="White board", price=10.0, categories=("Korpus",)),
            Material(id="2", name="Oak front", price=20.0, categories=("Front",)),
            Material(
                id="3", name="HDF back", price=5.0, thickness_mm=3.0, categories=("Leđa",)
            ),
        )
    )


@pytest.fixture
def handles() -> HandleCatalog:
    """One handle model with two finishes."""
    return HandleCatalog(
        (
            Handle(
                id="h1",
                name="Bar handle",
                legacy_id="101",
                finishes=(
                    HandleFinish(id="f1", price=4.0, name="Chrome", legacy_id="201"),
                    HandleFinish(id="f2", price=6.0, name="Black"),
                ),
            ),
        )
    )


# =============================================================================
# Shared wardrobes
# =============================================================================


def build_wardrobe(
    width_cm: float = 100.0,
    height_cm: float = 180.0,
    depth_cm: float = 60.0,
    configuration: CompartmentConfiguration | None = None,
    **kwargs,
) -> Wardrobe:
    """Build a wardrobe; geometry keyword arguments go to WardrobeGeometry."""
    wardrobe_fields = {
        name: kwargs.pop(name)
        for name in (
            "material_id",
            "front_material_id",
            "back_material_id",
            "door_settings_mode",
            "handle_id",
            "handle_finish",
        )
        if name in kwargs
    }
    wardrobe_fields.setdefault("material_id", "1")
    return Wardrobe(
        geometry=WardrobeGeometry(width_cm=width_cm, height_cm=height_cm, **kwargs),
        depth_cm=depth_cm,
        configuration=configuration or CompartmentConfiguration(),
        **wardrobe_fields,
    )


@pytest.fixture
def single_column_wardrobe() -> Wardrobe:
    """100 x 180 x 60 cm, one column, no shelves."""
    return build_wardrobe()


@pytest.fixture
def make_wardrobe():
    """Factory fixture for wardrobes with overridden geometry or selections."""
    return build_wardrobe
