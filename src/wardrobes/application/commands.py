"""Application commands (use cases) for wardrobe cut lists."""

from __future__ import annotations

import logging
from dataclasses import replace

from wardrobes.domain import (
    CompartmentEnumerator,
    CutList,
    CutListGenerator,
    HandleCatalog,
    MaterialCatalog,
    StateReconciler,
    Wardrobe,
    compute_door_metrics,
)

from .dtos import (
    CompartmentInfo,
    CutListOutput,
    ReconcileOutput,
    validate_dimensions,
    validate_materials,
)

logger = logging.getLogger(__name__)


class ReconcileCommand:
    """Command to reconcile a wardrobe's configuration against its geometry."""

    def __init__(self, reconciler: StateReconciler | None = None) -> None:
        self.reconciler = reconciler or StateReconciler()

    def execute(self, wardrobe: Wardrobe) -> ReconcileOutput:
        """Reconcile the wardrobe's per-compartment configuration.

        Returns:
            ReconcileOutput with the new wardrobe and a change report.
        """
        configuration, report = self.reconciler.reconcile(
            wardrobe.geometry, wardrobe.configuration
        )
        return ReconcileOutput(
            wardrobe=replace(wardrobe, configuration=configuration),
            report=report,
        )


class ListCompartmentsCommand:
    """Command to list the compartments a wardrobe's geometry defines."""

    def __init__(self, enumerator: CompartmentEnumerator | None = None) -> None:
        self.enumerator = enumerator or CompartmentEnumerator()

    def execute(self, wardrobe: Wardrobe) -> list[CompartmentInfo]:
        return [
            CompartmentInfo.from_slot(slot)
            for column in self.enumerator.columns(wardrobe.geometry)
            for slot in column.compartments
        ]


class GenerateCutListCommand:
    """Command to generate a priced cut list for a wardrobe.

    The configuration is reconciled first, so stale per-compartment data
    from an edited configuration file is never priced.
    """

    def __init__(
        self,
        cut_list_generator: CutListGenerator | None = None,
        enumerator: CompartmentEnumerator | None = None,
        reconcile_command: ReconcileCommand | None = None,
    ) -> None:
        self.enumerator = enumerator or CompartmentEnumerator()
        self.cut_list_generator = cut_list_generator or CutListGenerator(
            enumerator=self.enumerator
        )
        self.reconcile_command = reconcile_command or ReconcileCommand(
            StateReconciler(self.enumerator)
        )

    def execute(
        self,
        wardrobe: Wardrobe,
        materials: MaterialCatalog,
        handles: HandleCatalog | None = None,
    ) -> CutListOutput:
        """Execute the cut-list generation command.

        Args:
            wardrobe: Wardrobe to price.
            materials: Material catalog.
            handles: Optional handle catalog.

        Returns:
            CutListOutput with the cut list, compartments and door metrics.
            When the wardrobe cannot be priced the cut list is empty and
            ``errors`` explains why.
        """
        errors = validate_dimensions(wardrobe)
        if errors:
            return CutListOutput(cut_list=CutList.empty(), errors=errors)

        reconciled = self.reconcile_command.execute(wardrobe)
        wardrobe = reconciled.wardrobe
        compartments = ListCompartmentsCommand(self.enumerator).execute(wardrobe)

        errors = validate_materials(wardrobe, materials)
        if errors:
            return CutListOutput(
                cut_list=CutList.empty(),
                compartments=compartments,
                reconcile_report=reconciled.report,
                errors=errors,
            )

        cut_list = self.cut_list_generator.generate(wardrobe, materials, handles)
        logger.debug(
            f"Cut list for {len(compartments)} compartment(s): "
            f"{len(cut_list.items)} item(s), total {cut_list.total_cost:.2f}"
        )
        return CutListOutput(
            cut_list=cut_list,
            compartments=compartments,
            door_metrics=compute_door_metrics(wardrobe, handles),
            reconcile_report=reconciled.report,
        )
