"""Application layer - use cases and orchestration."""

from .commands import (
    GenerateCutListCommand,
    ListCompartmentsCommand,
    ReconcileCommand,
)
from .dtos import CompartmentInfo, CutListOutput, ReconcileOutput

__all__ = [
    "CompartmentInfo",
    "CutListOutput",
    "GenerateCutListCommand",
    "ListCompartmentsCommand",
    "ReconcileCommand",
    "ReconcileOutput",
]
