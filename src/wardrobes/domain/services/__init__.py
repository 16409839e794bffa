"""Domain services for wardrobe decomposition.

This package provides the core computations:
- Compartment enumeration from the structural geometry
- Inner layout, drawer capping and door resolution per compartment
- Cut-list generation and pricing
- State reconciliation and the structural edit pipeline
"""

from .compartments import (
    Bound,
    BoundKind,
    ColumnLayout,
    CompartmentEnumerator,
    CompartmentSlot,
    valid_compartments,
)
from .cut_list import KORPUS_ELEMENT, CutListGenerator
from .door_resolution import (
    DoorMetrics,
    DoorResolver,
    ResolvedDoor,
    compute_door_metrics,
)
from .interior import (
    CompartmentInterior,
    DrawerStack,
    InnerSection,
    drawer_capacity,
    plan_drawers,
    plan_interior,
    section_width,
    space_height,
)
from .pricing import MaterialSelection, round_price, select_materials, summarize
from .reconciler import (
    ReconcileReport,
    StateReconciler,
    clamp_drawer_counts,
    reconcile_wardrobe_state,
)
from .structural_edits import (
    StructuralEditError,
    WardrobeEditor,
    distribute_shelves,
    filter_shelves,
    max_shelves_for_height,
)

__all__ = [
    "Bound",
    "BoundKind",
    "ColumnLayout",
    "CompartmentEnumerator",
    "CompartmentInterior",
    "CompartmentSlot",
    "CutListGenerator",
    "DoorMetrics",
    "DoorResolver",
    "DrawerStack",
    "InnerSection",
    "KORPUS_ELEMENT",
    "MaterialSelection",
    "ReconcileReport",
    "ResolvedDoor",
    "StateReconciler",
    "StructuralEditError",
    "WardrobeEditor",
    "clamp_drawer_counts",
    "compute_door_metrics",
    "distribute_shelves",
    "drawer_capacity",
    "filter_shelves",
    "max_shelves_for_height",
    "plan_drawers",
    "plan_interior",
    "reconcile_wardrobe_state",
    "round_price",
    "section_width",
    "select_materials",
    "space_height",
    "summarize",
    "valid_compartments",
]
