"""Validation structures and wardrobe advisory checks.

Schema-level problems are caught by Pydantic when a configuration is loaded.
This module adds the cross-field checks: blocking errors for geometry that
cannot be built, and non-blocking warnings describing what reconciliation
will silently prune or clamp.
"""

from dataclasses import dataclass, field
from typing import Any

from wardrobes.application.config.adapter import config_to_catalogs, config_to_wardrobe
from wardrobes.application.config.schemas import WardrobeConfiguration
from wardrobes.domain.constants import EPSILON, MAX_SEGMENT_X
from wardrobes.domain.partition import build_blocks_x
from wardrobes.domain.services import StateReconciler
from wardrobes.domain.value_objects import to_letters


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "wardrobe.vertical_boundaries[0]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_seams(config: WardrobeConfiguration) -> ValidationResult:
    """Seams must lie strictly inside the width and be distinct."""
    result = ValidationResult()
    half = config.wardrobe.width / 200
    seams = config.wardrobe.vertical_boundaries
    for i, x in enumerate(seams):
        if abs(x) >= half - EPSILON:
            result.add_error(
                path=f"wardrobe.vertical_boundaries[{i}]",
                message=f"Seam at {x}m lies outside the wardrobe width (±{half:.3f}m)",
                value=x,
            )
    ordered = sorted(seams)
    for a, b in zip(ordered, ordered[1:]):
        if b - a <= EPSILON:
            result.add_error(
                path="wardrobe.vertical_boundaries",
                message=f"Duplicate seam position {a}m",
                value=a,
            )
    return result


def check_materials(config: WardrobeConfiguration) -> ValidationResult:
    """The selected materials must exist in the catalog, when one is given."""
    result = ValidationResult()
    if config.catalog is None:
        return result
    materials, handles = config_to_catalogs(config.catalog)
    wardrobe = config.wardrobe
    if wardrobe.material_id is None:
        result.add_warning(
            path="wardrobe.material_id",
            message="No carcass material selected; the cut list will be empty",
            suggestion="Select one of the catalog materials",
        )
    elif materials.get(wardrobe.material_id) is None:
        result.add_error(
            path="wardrobe.material_id",
            message=f"Carcass material '{wardrobe.material_id}' is not in the catalog",
            value=wardrobe.material_id,
        )
    if (
        wardrobe.front_material_id is not None
        and materials.get(wardrobe.front_material_id) is None
    ):
        result.add_warning(
            path="wardrobe.front_material_id",
            message=(
                f"Front material '{wardrobe.front_material_id}' is not in the "
                f"catalog; fronts will use the carcass material"
            ),
        )
    if wardrobe.handle_id is not None and handles.get(wardrobe.handle_id) is None:
        result.add_warning(
            path="wardrobe.handle_id",
            message=(
                f"Handle '{wardrobe.handle_id}' is not in the catalog; "
                f"handles will be priced at 0"
            ),
        )
    return result


def check_reconciliation_advisories(config: WardrobeConfiguration) -> ValidationResult:
    """Warn about everything reconciliation would prune or clamp.

    Args:
        config: A configuration whose seams already passed ``check_seams``

    Returns:
        ValidationResult containing warnings only
    """
    result = ValidationResult()
    wardrobe = config_to_wardrobe(config)

    for column, block in enumerate(
        build_blocks_x(
            wardrobe.geometry.width_m, wardrobe.geometry.vertical_boundaries or None
        )
    ):
        if block.width > MAX_SEGMENT_X + EPSILON:
            result.add_warning(
                path="wardrobe.vertical_boundaries",
                message=(
                    f"Column {to_letters(column)} is {block.width * 100:.1f} cm wide, "
                    f"above the {MAX_SEGMENT_X * 100:.0f} cm maximum"
                ),
                suggestion="Add a seam to split the column",
            )

    for i, group in enumerate(config.wardrobe.door_groups):
        if group.compartments is not None and not group.compartments:
            result.add_warning(
                path=f"wardrobe.door_groups[{i}].compartments",
                message=f"Door group '{group.id}' references no compartments and renders nothing",
            )

    _, report = StateReconciler().reconcile(wardrobe.geometry, wardrobe.configuration)
    for key in report.dropped_element_configs:
        result.add_warning(
            path=f"wardrobe.element_configs.{key}",
            message=f"Compartment {key} does not exist; its configuration will be dropped",
        )
    for key in report.dropped_extras:
        result.add_warning(
            path=f"wardrobe.compartment_extras.{key}",
            message=f"Compartment {key} does not exist; its extras will be dropped",
        )
    for group_id in report.dropped_door_groups:
        result.add_warning(
            path="wardrobe.door_groups",
            message=(
                f"Door group '{group_id}' references a missing compartment or "
                f"has no compartment list; it will be dropped"
            ),
        )
    for key in report.dropped_door_selections:
        result.add_warning(
            path=f"wardrobe.door_selections.{key}",
            message=f"Compartment {key} does not exist; its door selection will be dropped",
        )
    for key in report.clamped_drawers:
        result.add_warning(
            path=f"wardrobe.element_configs.{key}.drawer_counts",
            message=f"Drawer counts in {key} exceed what fits and will be clamped",
            suggestion="Reduce the drawer count or enlarge the compartment",
        )
    return result


def validate_config(config: WardrobeConfiguration) -> ValidationResult:
    """Perform full validation of a wardrobe configuration.

    Args:
        config: A WardrobeConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_seams(config))
    result.merge(check_materials(config))

    # Geometry with invalid seams cannot be enumerated
    if result.is_valid:
        result.merge(check_reconciliation_advisories(config))

    return result
