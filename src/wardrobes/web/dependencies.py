"""FastAPI dependency injection for wardrobe services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from wardrobes.application import (
    GenerateCutListCommand,
    ListCompartmentsCommand,
    ReconcileCommand,
)
from wardrobes.domain import WardrobeEditor


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateCutListCommand:
    """Get cached GenerateCutListCommand instance."""
    return GenerateCutListCommand()


@lru_cache(maxsize=1)
def get_list_compartments_command() -> ListCompartmentsCommand:
    """Get cached ListCompartmentsCommand instance."""
    return ListCompartmentsCommand()


@lru_cache(maxsize=1)
def get_reconcile_command() -> ReconcileCommand:
    """Get cached ReconcileCommand instance."""
    return ReconcileCommand()


@lru_cache(maxsize=1)
def get_editor() -> WardrobeEditor:
    """Get cached WardrobeEditor instance."""
    return WardrobeEditor()


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateCutListCommand, Depends(get_generate_command)]
ListCompartmentsCommandDep = Annotated[
    ListCompartmentsCommand, Depends(get_list_compartments_command)
]
ReconcileCommandDep = Annotated[ReconcileCommand, Depends(get_reconcile_command)]
EditorDep = Annotated[WardrobeEditor, Depends(get_editor)]
