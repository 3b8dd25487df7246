"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chicken_tracker.api.admin import router as admin_router
from chicken_tracker.api.chickens import router as chickens_router
from chicken_tracker.api.egg_production import router as egg_production_router
from chicken_tracker.app_logging import configure_logging
from chicken_tracker.containers import AppContainer
from chicken_tracker.domain.errors import (
    DuplicateDateEntryError,
    ForbiddenError,
    RecordNotFoundError,
    ValidationFailedError,
)
from chicken_tracker.services.messages import issue_details

SERVICE_NAME = "chicken-tracker"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Chicken Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(egg_production_router)
    app.include_router(chickens_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check used by container and uptime probes."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "service": SERVICE_NAME,
        }

    @app.exception_handler(ValidationFailedError)
    async def validation_failed(
        request: Request, exc: ValidationFailedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message, "details": issue_details(exc.issues)},
        )

    @app.exception_handler(DuplicateDateEntryError)
    async def duplicate_date(
        request: Request, exc: DuplicateDateEntryError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "An entry already exists for this date",
                "details": [{"field": exc.field, "message": exc.message}],
            },
        )

    @app.exception_handler(ForbiddenError)
    async def forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"error": exc.message}
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def malformed_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {
                "field": ".".join(str(part) for part in error["loc"][1:]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": details},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Something went wrong. Please try again."},
        )

    return app
