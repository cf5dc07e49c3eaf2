"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from pipeforge import __version__
from pipeforge.api.dependencies import cleanup, get_workspace_store
from pipeforge.config import Settings, get_settings
from pipeforge.workspace import (
    DuplicateNodeError,
    EdgeNotFoundError,
    NodeNotFoundError,
    WorkspaceError,
)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure logging based on environment variables.

    Environment variables:
        LOG_LEVEL: Set the logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO
        LOG_FORMAT: Set the log format (simple, detailed). Default: detailed
    """
    settings = settings or get_settings()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(settings.log_level.upper(), logging.INFO)

    if settings.log_format == "simple":
        format_str = "%(levelname)s: %(message)s"
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stdout,
    )

    logging.getLogger("pipeforge").setLevel(level)

    # Reduce noise from third-party libraries unless DEBUG
    if level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


configure_logging()

logger = logging.getLogger(__name__)

from pipeforge.api.routes import (  # noqa: E402
    pipelines_router,
    stages_router,
    workspaces_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    logger.info("Starting Pipeforge API application...")
    get_workspace_store()
    yield
    logger.info("Shutting down Pipeforge API application...")
    cleanup()
    logger.info("Cleanup complete")


def _error(status_code: int, detail: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "error_code": error_code},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    application = FastAPI(
        title="Pipeforge API",
        description="Stage-ordered delivery pipeline builder",
        version=__version__,
        lifespan=lifespan,
    )

    logger.debug(f"Configuring CORS with allowed origins: {settings.allowed_origins}")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    application.include_router(stages_router, prefix="/stages", tags=["Stages"])
    application.include_router(
        pipelines_router, prefix="/pipelines", tags=["Pipelines"]
    )
    application.include_router(
        workspaces_router, prefix="/workspaces", tags=["Workspaces"]
    )

    # Exception handlers
    @application.exception_handler(WorkspaceError)
    async def workspace_error_handler(
        request: Request, exc: WorkspaceError
    ) -> JSONResponse:
        if isinstance(exc, (NodeNotFoundError, EdgeNotFoundError)):
            logger.debug(f"Not found on {request.method} {request.url.path}: {exc}")
            return _error(404, str(exc), "NOT_FOUND")
        if isinstance(exc, DuplicateNodeError):
            logger.warning(f"Conflict on {request.method} {request.url.path}: {exc}")
            return _error(409, str(exc), "CONFLICT")
        logger.warning(f"Workspace error on {request.method} {request.url.path}: {exc}")
        return _error(400, str(exc), "WORKSPACE_ERROR")

    @application.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.warning(f"Validation error on {request.method} {request.url.path}: {exc}")
        return _error(422, str(exc), "VALIDATION_ERROR")

    @application.get("/health")
    async def health_check():
        return {"status": "healthy", "version": __version__}

    return application


# Create app instance
app = create_app()
