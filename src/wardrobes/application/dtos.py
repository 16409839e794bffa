"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from wardrobes.domain import CutList, MaterialCatalog, Wardrobe
from wardrobes.domain.services import CompartmentSlot, DoorMetrics, ReconcileReport


def validate_dimensions(wardrobe: Wardrobe) -> list[str]:
    """Return error messages for non-finite or non-positive outer dimensions."""
    errors: list[str] = []
    geometry = wardrobe.geometry
    for name, value in (
        ("Width", geometry.width_cm),
        ("Height", geometry.height_cm),
        ("Depth", wardrobe.depth_cm),
    ):
        if not math.isfinite(value) or value <= 0:
            errors.append(f"{name} must be a positive number")
    return errors


def validate_materials(wardrobe: Wardrobe, materials: MaterialCatalog) -> list[str]:
    """Return error messages explaining why the wardrobe cannot be priced."""
    if len(materials) == 0:
        return ["Material catalog is empty"]
    if materials.get(wardrobe.material_id) is None:
        return [f"Carcass material '{wardrobe.material_id}' is not in the catalog"]
    return []


@dataclass(frozen=True)
class CompartmentInfo:
    """Summary of one compartment for display and API responses.

    Attributes:
        key: Compartment key, e.g. "A1".
        height_cm: Span between the compartment's bounds.
        clear_height_cm: Usable height after shelf deductions.
        module: Module label ("SingleModule", "BottomModule", "TopModule").
    """

    key: str
    height_cm: float
    clear_height_cm: float
    module: str

    @classmethod
    def from_slot(cls, slot: CompartmentSlot) -> CompartmentInfo:
        return cls(
            key=slot.key,
            height_cm=slot.height_cm,
            clear_height_cm=slot.clear_height_cm,
            module=slot.module.value,
        )


@dataclass
class CutListOutput:
    """Output DTO containing the generated cut list.

    Attributes:
        cut_list: Priced cut list; empty when generation was not possible.
        compartments: Compartments of the reconciled wardrobe.
        door_metrics: Door counts and height range.
        reconcile_report: What reconciliation pruned or clamped before pricing.
        errors: Why the cut list is empty, if it is.
    """

    cut_list: CutList
    compartments: list[CompartmentInfo] = field(default_factory=list)
    door_metrics: DoorMetrics | None = None
    reconcile_report: ReconcileReport | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the output is valid (no errors)."""
        return len(self.errors) == 0


@dataclass
class ReconcileOutput:
    """Output DTO for a reconciliation pass.

    Attributes:
        wardrobe: The wardrobe carrying the reconciled configuration.
        report: What was dropped or clamped.
    """

    wardrobe: Wardrobe
    report: ReconcileReport

    @property
    def changed(self) -> bool:
        return self.report.has_changes
