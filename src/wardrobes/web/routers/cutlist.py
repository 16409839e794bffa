"""Cut-list generation endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from wardrobes.application.config import (
    config_to_catalogs,
    config_to_wardrobe,
    load_catalog_from_dict,
    load_config_from_dict,
)
from wardrobes.infrastructure.exporters import cut_list_to_dict
from wardrobes.web.dependencies import GenerateCommandDep
from wardrobes.web.exceptions import CutListGenerationError
from wardrobes.web.schemas.requests import CutListRequest
from wardrobes.web.schemas.responses import CutListSchema

router = APIRouter(prefix="/cutlist", tags=["cutlist"])


@router.post("", response_model=CutListSchema)
async def generate_cut_list(
    request: CutListRequest,
    command: GenerateCommandDep,
) -> CutListSchema:
    """Generate the priced cut list for a wardrobe configuration.

    Raises:
        ConfigError: If the configuration or catalog fails validation.
        CutListGenerationError: If the wardrobe cannot be priced.
    """
    config = load_config_from_dict(request.config)
    catalog = (
        load_catalog_from_dict(request.catalog)
        if request.catalog is not None
        else config.catalog
    )
    materials, handles = config_to_catalogs(catalog)

    result = command.execute(config_to_wardrobe(config), materials, handles)
    if not result.is_valid:
        raise CutListGenerationError(result.errors)

    payload = cut_list_to_dict(result.cut_list)
    if result.door_metrics is not None:
        payload["doorMetrics"] = asdict(result.door_metrics)
    return CutListSchema.model_validate(payload)
