"""Reconciliation endpoints."""

from fastapi import APIRouter

from wardrobes.application.config import (
    config_to_wardrobe,
    load_config_from_dict,
    wardrobe_to_document,
)
from wardrobes.web.dependencies import ReconcileCommandDep
from wardrobes.web.schemas.requests import ConfigRequest
from wardrobes.web.schemas.responses import ReconcileReportSchema, ReconcileSchema

router = APIRouter(prefix="/reconcile", tags=["reconcile"])


@router.post("", response_model=ReconcileSchema)
async def reconcile_configuration(
    request: ConfigRequest,
    command: ReconcileCommandDep,
) -> ReconcileSchema:
    """Drop orphaned per-compartment data and clamp drawer counts."""
    config = load_config_from_dict(request.config)
    result = command.execute(config_to_wardrobe(config))
    report = result.report
    return ReconcileSchema(
        config=wardrobe_to_document(config, result.wardrobe),
        changed=result.changed,
        report=ReconcileReportSchema(
            dropped_element_configs=[str(k) for k in report.dropped_element_configs],
            dropped_extras=[str(k) for k in report.dropped_extras],
            dropped_door_groups=list(report.dropped_door_groups),
            dropped_door_selections=[str(k) for k in report.dropped_door_selections],
            clamped_drawers=[str(k) for k in report.clamped_drawers],
        ),
    )
