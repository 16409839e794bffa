"""Domain layer - core wardrobe decomposition logic."""

from .entities import (
    CompartmentConfiguration,
    CompartmentExtras,
    CompartmentRef,
    DoorGroup,
    ElementConfig,
    Handle,
    HandleCatalog,
    HandleFinish,
    Material,
    MaterialCatalog,
    Wardrobe,
    WardrobeGeometry,
)
from .partition import (
    build_blocks_x,
    build_modules_y,
    default_boundaries_x,
    default_module_boundary,
)
from .services import (
    CompartmentEnumerator,
    CutListGenerator,
    DoorResolver,
    StateReconciler,
    StructuralEditError,
    WardrobeEditor,
    compute_door_metrics,
    reconcile_wardrobe_state,
    valid_compartments,
)
from .value_objects import (
    CompartmentId,
    CutList,
    CutListItem,
    DoorStyle,
    FloorY,
    MaterialCategory,
    SubCompartmentId,
)

__all__ = [
    "CompartmentConfiguration",
    "CompartmentEnumerator",
    "CompartmentExtras",
    "CompartmentId",
    "CompartmentRef",
    "CutList",
    "CutListGenerator",
    "CutListItem",
    "DoorGroup",
    "DoorResolver",
    "DoorStyle",
    "ElementConfig",
    "FloorY",
    "Handle",
    "HandleCatalog",
    "HandleFinish",
    "Material",
    "MaterialCatalog",
    "MaterialCategory",
    "StateReconciler",
    "StructuralEditError",
    "SubCompartmentId",
    "Wardrobe",
    "WardrobeEditor",
    "WardrobeGeometry",
    "build_blocks_x",
    "build_modules_y",
    "compute_door_metrics",
    "default_boundaries_x",
    "default_module_boundary",
    "reconcile_wardrobe_state",
    "valid_compartments",
]
