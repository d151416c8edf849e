"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitness_planner.api.diet import router as diet_router
from fitness_planner.api.profile import router as profile_router
from fitness_planner.api.training import router as training_router
from fitness_planner.app_logging import configure_logging
from fitness_planner.containers import AppContainer
from fitness_planner.domain.errors import (
    InvalidDurationError,
    InvalidIndexError,
    MissingPrerequisiteError,
    NoCandidatesError,
    PlanError,
    PlanNotFoundError,
)

_ERROR_STATUS: dict[type[PlanError], int] = {
    MissingPrerequisiteError: status.HTTP_400_BAD_REQUEST,
    NoCandidatesError: status.HTTP_400_BAD_REQUEST,
    InvalidDurationError: status.HTTP_400_BAD_REQUEST,
    InvalidIndexError: status.HTTP_400_BAD_REQUEST,
    PlanNotFoundError: status.HTTP_404_NOT_FOUND,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(profile_router)
    app.include_router(diet_router)
    app.include_router(training_router)

    @app.exception_handler(PlanError)
    async def plan_error_handler(request: Request, exc: PlanError) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.warning(
            "Plan request failed: path=%s error=%s message=%s",
            request.url.path,
            type(exc).__name__,
            exc,
        )
        return JSONResponse(
            status_code=status_code,
            content={"ok": False, "error": type(exc).__name__, "message": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
