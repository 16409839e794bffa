"""Pydantic response schemas for the REST API.

Cut-list and compartment payloads use camelCase keys to match the JSON
export; validation results keep snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    """Base for responses serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CutListItemSchema(CamelSchema):
    """One item of the cut list."""

    code: str
    description: str
    width_cm: float
    height_cm: float
    thickness_mm: float
    area_m2: float
    cost: float
    element: str
    material_type: str
    quantity: int = 1


class CategoryTotalSchema(CamelSchema):
    area_m2: float
    price: float


class HandleTotalSchema(CamelSchema):
    count: int
    price: float


class PriceBreakdownSchema(CamelSchema):
    korpus: CategoryTotalSchema
    front: CategoryTotalSchema
    back: CategoryTotalSchema
    handles: HandleTotalSchema


class DoorMetricsSchema(CamelSchema):
    """Door counts and height range."""

    double_door_count: int
    single_door_count: int
    mirror_door_count: int
    drawer_style_door_count: int
    max_door_height_cm: float
    min_door_height_cm: float
    handle_count: int
    handle_name: str
    handle_finish_name: str


class CutListSchema(CamelSchema):
    """Response for cut-list generation."""

    items: list[CutListItemSchema] = Field(default_factory=list)
    grouped_by_element: dict[str, list[CutListItemSchema]] = Field(
        default_factory=dict
    )
    total_area: float = 0.0
    total_cost: float = 0.0
    price_per_m2: float = 0.0
    price_breakdown: PriceBreakdownSchema
    door_metrics: DoorMetricsSchema | None = None


class CompartmentSchema(CamelSchema):
    height_cm: float
    clear_height_cm: float
    module: str


class CompartmentsSchema(CamelSchema):
    """Response listing compartments keyed by compartment key."""

    compartments: dict[str, CompartmentSchema]


class ReconcileReportSchema(CamelSchema):
    """What reconciliation dropped or clamped."""

    dropped_element_configs: list[str] = Field(default_factory=list)
    dropped_extras: list[str] = Field(default_factory=list)
    dropped_door_groups: list[str] = Field(default_factory=list)
    dropped_door_selections: list[str] = Field(default_factory=list)
    clamped_drawers: list[str] = Field(default_factory=list)


class ReconcileSchema(CamelSchema):
    """Response carrying a reconciled configuration document."""

    config: dict[str, Any] = Field(..., description="Reconciled configuration JSON")
    changed: bool
    report: ReconcileReportSchema


class EditSchema(CamelSchema):
    """Response carrying an edited configuration document."""

    config: dict[str, Any] = Field(..., description="Edited configuration JSON")
    compartments: dict[str, CompartmentSchema]


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
