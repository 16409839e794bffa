"""Structural edit endpoints."""

from typing import Any

from fastapi import APIRouter

from wardrobes.application.config import (
    config_to_wardrobe,
    load_config_from_dict,
    wardrobe_to_document,
)
from wardrobes.domain import StructuralEditError, Wardrobe, WardrobeEditor
from wardrobes.web.dependencies import EditorDep, ListCompartmentsCommandDep
from wardrobes.web.routers.compartments import compartments_to_schema
from wardrobes.web.schemas.requests import EditOperationSchema, EditRequest
from wardrobes.web.schemas.responses import EditSchema

router = APIRouter(prefix="/edit", tags=["edit"])


def _require(operation: EditOperationSchema, name: str) -> Any:
    value = getattr(operation, name)
    if value is None:
        raise StructuralEditError(
            f"'{name}' is required for {operation.op}", operation.op
        )
    return value


def apply_operation(
    editor: WardrobeEditor, wardrobe: Wardrobe, operation: EditOperationSchema
) -> Wardrobe:
    """Apply one edit operation to a wardrobe.

    Raises:
        StructuralEditError: If a required field is missing or the edit
            cannot apply.
    """
    op = operation.op
    if op == "set_width":
        return editor.set_width(wardrobe, _require(operation, "width"))
    if op == "set_height":
        return editor.set_height(wardrobe, _require(operation, "height"))
    if op == "set_column_height":
        return editor.set_column_height(
            wardrobe, _require(operation, "column"), _require(operation, "height")
        )
    if op == "set_vertical_boundaries":
        return editor.set_vertical_boundaries(
            wardrobe, _require(operation, "boundaries")
        )
    if op == "set_module_boundary":
        return editor.set_module_boundary(
            wardrobe, _require(operation, "column"), operation.y
        )
    if op == "add_shelf":
        return editor.add_shelf(
            wardrobe,
            _require(operation, "column"),
            _require(operation, "y"),
            top_module=operation.top_module,
        )
    if op == "remove_shelf":
        return editor.remove_shelf(
            wardrobe,
            _require(operation, "column"),
            _require(operation, "index"),
            top_module=operation.top_module,
        )
    if op == "move_shelf":
        return editor.move_shelf(
            wardrobe,
            _require(operation, "column"),
            _require(operation, "index"),
            _require(operation, "y"),
            top_module=operation.top_module,
        )
    if op == "set_shelf_count":
        return editor.set_shelf_count(
            wardrobe,
            _require(operation, "column"),
            _require(operation, "count"),
            top_module=operation.top_module,
        )
    # set_base
    return editor.set_base(
        wardrobe, _require(operation, "has_base"), operation.base_height
    )


@router.post("", response_model=EditSchema)
async def edit_wardrobe(
    request: EditRequest,
    editor: EditorDep,
    list_command: ListCompartmentsCommandDep,
) -> EditSchema:
    """Apply structural edits in order and return the edited configuration.

    Every edit reconciles the per-compartment data, so the returned document
    never references compartments that no longer exist.
    """
    config = load_config_from_dict(request.config)
    wardrobe = config_to_wardrobe(config)
    for operation in request.operations:
        wardrobe = apply_operation(editor, wardrobe, operation)

    return EditSchema(
        config=wardrobe_to_document(config, wardrobe),
        compartments=compartments_to_schema(list_command.execute(wardrobe)),
    )
