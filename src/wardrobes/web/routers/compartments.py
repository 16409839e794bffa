"""Compartment listing endpoints."""

from fastapi import APIRouter

from wardrobes.application import CompartmentInfo
from wardrobes.application.config import config_to_wardrobe, load_config_from_dict
from wardrobes.web.dependencies import ListCompartmentsCommandDep
from wardrobes.web.schemas.requests import ConfigRequest
from wardrobes.web.schemas.responses import CompartmentSchema, CompartmentsSchema

router = APIRouter(prefix="/compartments", tags=["compartments"])


def compartments_to_schema(
    infos: list[CompartmentInfo],
) -> dict[str, CompartmentSchema]:
    """Key compartment summaries by compartment key, in enumeration order."""
    return {
        info.key: CompartmentSchema(
            height_cm=info.height_cm,
            clear_height_cm=info.clear_height_cm,
            module=info.module,
        )
        for info in infos
    }


@router.post("", response_model=CompartmentsSchema)
async def list_compartments(
    request: ConfigRequest,
    command: ListCompartmentsCommandDep,
) -> CompartmentsSchema:
    """List the compartments of a wardrobe configuration."""
    config = load_config_from_dict(request.config)
    infos = command.execute(config_to_wardrobe(config))
    return CompartmentsSchema(compartments=compartments_to_schema(infos))
