"""Value objects for the wardrobe domain.

This module provides immutable data types used throughout the wardrobe
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._coordinates import CenteredY, FloorY
from ._doors import (
    DOOR_OPTIONS,
    DoorStyle,
    DoubleDoor,
    DrawerStyleDoor,
    NoDoor,
    SingleDoor,
    door_option,
    handle_count,
    leaf_count,
    parse_door_style,
)
from ._geometry import LinearBlock, Module, ModuleLabel
from ._identifiers import (
    CompartmentId,
    SubCompartmentId,
    base_key,
    from_letters,
    parse_compartment_ref,
    to_letters,
)
from ._panels import (
    CategoryTotal,
    CutList,
    CutListItem,
    HandleTotal,
    MaterialCategory,
    PriceBreakdown,
)

__all__ = [
    "CategoryTotal",
    "CenteredY",
    "CompartmentId",
    "CutList",
    "CutListItem",
    "DOOR_OPTIONS",
    "DoorStyle",
    "DoubleDoor",
    "DrawerStyleDoor",
    "FloorY",
    "HandleTotal",
    "LinearBlock",
    "MaterialCategory",
    "Module",
    "ModuleLabel",
    "NoDoor",
    "PriceBreakdown",
    "SingleDoor",
    "SubCompartmentId",
    "base_key",
    "door_option",
    "from_letters",
    "handle_count",
    "leaf_count",
    "parse_compartment_ref",
    "parse_door_style",
    "to_letters",
]
