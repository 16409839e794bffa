"""Pydantic schemas for the REST API."""

from wardrobes.web.schemas.requests import (
    ConfigRequest,
    CutListRequest,
    EditOperationSchema,
    EditRequest,
)
from wardrobes.web.schemas.responses import (
    CompartmentSchema,
    CompartmentsSchema,
    CutListItemSchema,
    CutListSchema,
    DoorMetricsSchema,
    EditSchema,
    ErrorResponseSchema,
    PriceBreakdownSchema,
    ReconcileReportSchema,
    ReconcileSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigRequest",
    "CutListRequest",
    "EditOperationSchema",
    "EditRequest",
    # Responses
    "CompartmentSchema",
    "CompartmentsSchema",
    "CutListItemSchema",
    "CutListSchema",
    "DoorMetricsSchema",
    "EditSchema",
    "ErrorResponseSchema",
    "PriceBreakdownSchema",
    "ReconcileReportSchema",
    "ReconcileSchema",
    "ValidationResultSchema",
]
