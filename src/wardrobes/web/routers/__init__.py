"""API routers for the REST API."""

from wardrobes.web.routers.compartments import router as compartments_router
from wardrobes.web.routers.cutlist import router as cutlist_router
from wardrobes.web.routers.edit import router as edit_router
from wardrobes.web.routers.reconcile import router as reconcile_router
from wardrobes.web.routers.validate import router as validate_router

__all__ = [
    "compartments_router",
    "cutlist_router",
    "edit_router",
    "reconcile_router",
    "validate_router",
]
