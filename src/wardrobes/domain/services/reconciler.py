"""State reconciliation.

After any structural change, per-compartment data may point at compartments
that no longer exist or request more drawers than now fit. The reconciler
prunes and clamps the four configuration maps against the compartments the
enumerator reports, producing new maps and leaving its input untouched.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace

from ..constants import MIN_DRAWER_SLOT_CM
from ..entities import (
    CompartmentConfiguration,
    CompartmentRef,
    DoorGroup,
    ElementConfig,
    WardrobeGeometry,
)
from ..value_objects import CompartmentId, SubCompartmentId
from .compartments import CompartmentEnumerator

logger = logging.getLogger(__name__)

__all__ = [
    "ReconcileReport",
    "StateReconciler",
    "clamp_drawer_counts",
    "reconcile_wardrobe_state",
]


def _base(ref: CompartmentRef) -> CompartmentId:
    return ref.base if isinstance(ref, SubCompartmentId) else ref


@dataclass(frozen=True)
class ReconcileReport:
    """What a reconciliation pass changed.

    Attributes:
        dropped_element_configs: Element-config keys removed as orphans.
        dropped_extras: Extras keys removed as orphans.
        dropped_door_groups: Ids of door groups removed.
        dropped_door_selections: Legacy door selection keys removed.
        clamped_drawers: Compartments whose drawer counts were reduced.
    """

    dropped_element_configs: tuple[CompartmentId, ...] = ()
    dropped_extras: tuple[CompartmentId, ...] = ()
    dropped_door_groups: tuple[str, ...] = ()
    dropped_door_selections: tuple[CompartmentRef, ...] = ()
    clamped_drawers: tuple[CompartmentId, ...] = ()

    @property
    def has_changes(self) -> bool:
        return any(
            (
                self.dropped_element_configs,
                self.dropped_extras,
                self.dropped_door_groups,
                self.dropped_door_selections,
                self.clamped_drawers,
            )
        )


@dataclass
class _Changes:
    element_configs: list[CompartmentId] = field(default_factory=list)
    extras: list[CompartmentId] = field(default_factory=list)
    door_groups: list[str] = field(default_factory=list)
    door_selections: list[CompartmentRef] = field(default_factory=list)
    clamped: list[CompartmentId] = field(default_factory=list)

    def report(self) -> ReconcileReport:
        return ReconcileReport(
            dropped_element_configs=tuple(self.element_configs),
            dropped_extras=tuple(self.extras),
            dropped_door_groups=tuple(self.door_groups),
            dropped_door_selections=tuple(self.door_selections),
            clamped_drawers=tuple(self.clamped),
        )


def clamp_drawer_counts(config: ElementConfig, height_cm: float) -> ElementConfig:
    """Cap drawer counts to what fits in ``height_cm``.

    The same object is returned when nothing changes or the height is not
    finite. When every clamped count is 0, ``drawers_external`` is cleared.
    """
    if config.drawer_counts is None or not math.isfinite(height_cm):
        return config
    limit = max(0, math.floor(height_cm / MIN_DRAWER_SLOT_CM))
    clamped = tuple(min(max(0, count), limit) for count in config.drawer_counts)
    if clamped == config.drawer_counts:
        return config
    if all(count == 0 for count in clamped):
        return replace(config, drawer_counts=clamped, drawers_external=None)
    return replace(config, drawer_counts=clamped)


class StateReconciler:
    """Prunes and clamps compartment configuration against geometry."""

    def __init__(self, enumerator: CompartmentEnumerator | None = None) -> None:
        self.enumerator = enumerator or CompartmentEnumerator()

    def reconcile(
        self, geometry: WardrobeGeometry, configuration: CompartmentConfiguration
    ) -> tuple[CompartmentConfiguration, ReconcileReport]:
        """Reconcile configuration maps against the current compartments.

        Args:
            geometry: Current structural geometry.
            configuration: Persisted per-compartment configuration.

        Returns:
            The reconciled configuration and a report of what changed.
        """
        heights = {
            compartment_id: slot.height_cm
            for compartment_id, slot in self.enumerator.compartments(geometry).items()
        }
        changes = _Changes()

        element_configs: dict[CompartmentId, ElementConfig] = {}
        for key, config in configuration.element_configs.items():
            if key not in heights:
                changes.element_configs.append(key)
                continue
            clamped = clamp_drawer_counts(config, heights[key])
            if clamped is not config:
                changes.clamped.append(key)
            element_configs[key] = clamped

        extras = {}
        for key, value in configuration.extras.items():
            if key in heights:
                extras[key] = value
            else:
                changes.extras.append(key)

        door_groups: list[DoorGroup] = []
        for group in configuration.door_groups:
            # An empty compartment list survives; a missing one does not.
            if group.compartments is not None and all(
                _base(ref) in heights for ref in group.compartments
            ):
                door_groups.append(group)
            else:
                changes.door_groups.append(group.id)

        door_selections = {}
        for ref, style in configuration.door_selections.items():
            if _base(ref) in heights:
                door_selections[ref] = style
            else:
                changes.door_selections.append(ref)

        report = changes.report()
        if report.has_changes:
            logger.debug(
                f"Reconciled configuration: dropped "
                f"{len(report.dropped_element_configs)} element config(s), "
                f"{len(report.dropped_extras)} extra(s), "
                f"{len(report.dropped_door_groups)} door group(s), "
                f"{len(report.dropped_door_selections)} door selection(s); "
                f"clamped {len(report.clamped_drawers)} drawer config(s)"
            )
        reconciled = CompartmentConfiguration(
            element_configs=element_configs,
            extras=extras,
            door_groups=tuple(door_groups),
            door_selections=door_selections,
        )
        return reconciled, report


def reconcile_wardrobe_state(
    geometry: WardrobeGeometry, configuration: CompartmentConfiguration
) -> CompartmentConfiguration:
    """Reconcile and return only the new configuration."""
    reconciled, _ = StateReconciler().reconcile(geometry, configuration)
    return reconciled
