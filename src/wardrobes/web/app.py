"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wardrobes.web.exceptions import register_exception_handlers
from wardrobes.web.routers import (
    compartments_router,
    cutlist_router,
    edit_router,
    reconcile_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Wardrobe Cut List API",
        description="REST API for wardrobe compartments, reconciliation and priced cut lists",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware for browser access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure as needed for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(cutlist_router, prefix="/api/v1")
    app.include_router(compartments_router, prefix="/api/v1")
    app.include_router(reconcile_router, prefix="/api/v1")
    app.include_router(edit_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
