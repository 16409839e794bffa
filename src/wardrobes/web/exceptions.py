"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wardrobes.application.config import ConfigError
from wardrobes.domain import StructuralEditError


class CutListGenerationError(Exception):
    """Raised when a cut list cannot be generated for a request."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Cut list generation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(StructuralEditError)
    async def structural_edit_error_handler(
        request: Request, exc: StructuralEditError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "structural_edit",
                "details": [{"operation": exc.operation}],
            },
        )

    @app.exception_handler(CutListGenerationError)
    async def generation_error_handler(
        request: Request, exc: CutListGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cut list generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
