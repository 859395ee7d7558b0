"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from smoke_tracker.api.schemas import ReferenceOut
from smoke_tracker.api.tracker import router as tracker_router
from smoke_tracker.app_logging import configure_logging
from smoke_tracker.containers import AppContainer
from smoke_tracker.domain.errors import (
    CooldownActiveError,
    InvalidInputError,
    StorageError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Smoke Tracker")
    app.state.container = container

    app.include_router(tracker_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(CooldownActiveError)
    async def cooldown_active(
        request: Request, exc: CooldownActiveError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={
                "detail": str(exc),
                "retry_after_seconds": exc.retry_after_seconds,
            },
            headers={"Retry-After": str(exc.retry_after_seconds)},
        )

    @app.exception_handler(StorageError)
    async def storage_failed(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage request failed: path=%s", request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": _format_storage_error(container, exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/reference")
    async def reference() -> ReferenceOut:
        """Return the fixed vocabularies used by the entry form."""
        return ReferenceOut()

    return app


def _format_storage_error(container: AppContainer, exc: StorageError) -> str:
    """Return a user-facing storage error with local debug info."""
    fallback = "Couldn't reach storage. Please try again."
    if container.settings.environment == "local":
        cause = exc.__cause__ or exc
        return f"{fallback} (debug: {type(cause).__name__}: {cause})"
    return fallback
