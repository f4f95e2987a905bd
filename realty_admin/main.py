# ==============================================================================
# MAIN APPLICATION - FastAPI Entry Point
# ==============================================================================
# Builds the ASGI app: storage lifecycle, middleware, error envelopes,
# the /api/v1 routers and the health checks.
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from realty_admin.api.router import api_router
from realty_admin.core.exceptions import AppException, ValidationError
from realty_admin.core.logging import setup_logging
from realty_admin.core.settings import settings
from realty_admin.database.factory import DatabaseFactory
from realty_admin.middleware import RequestLoggerMiddleware
from realty_admin.schemas.base import HealthResponse
from realty_admin.services.master_engine import ensure_master_indexes
from realty_admin.services.user_service import UserService

logger = logging.getLogger(__name__)


async def prepare_storage() -> None:
    """Open the adapter (unless tests injected one) and create the indexes."""
    if not DatabaseFactory.is_initialized():
        await DatabaseFactory.initialize()
    adapter = DatabaseFactory.get_adapter()
    await ensure_master_indexes(adapter)
    await UserService(adapter).ensure_indexes()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    logger.info(
        f"Starting {settings.APP_NAME} v{settings.APP_VERSION} "
        f"[{settings.ENVIRONMENT.value}, db={settings.MONGODB_DB}]"
    )

    try:
        await prepare_storage()
        logger.info("Storage ready")
    except AppException as e:
        logger.error(f"Storage unavailable at startup: {e.message}")
        # Outside production the app still starts; /health reports "degraded"
        if settings.is_production:
            raise

    yield

    await DatabaseFactory.shutdown()
    logger.info(f"{settings.APP_NAME} stopped")


# ==============================================================================
# ERROR ENVELOPES
# ==============================================================================

def _envelope(exc: AppException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    return _envelope(exc)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.debug(f"{request.method} {request.url.path} rejected: {len(errors)} invalid field(s)")
    return _envelope(ValidationError(message="Request validation failed", errors=errors))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = str(exc) if settings.DEBUG else "An unexpected error occurred"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": {"code": "INTERNAL_ERROR", "message": message}},
    )


# ==============================================================================
# APPLICATION FACTORY
# ==============================================================================

def create_app() -> FastAPI:
    """
    Assemble the FastAPI application.

    Interactive docs are only published when DEBUG is on.

    Returns:
        Application ready to be served by uvicorn
    """
    docs_enabled = settings.DEBUG
    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    app.add_middleware(RequestLoggerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppException, handle_app_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)

    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"], summary="Liveness and storage check")
    async def health() -> HealthResponse:
        reachable = await DatabaseFactory.health_check()
        return HealthResponse(
            status="healthy" if reachable else "degraded",
            version=settings.APP_VERSION,
            database="connected" if reachable else "disconnected",
        )

    @app.get("/", tags=["Health"], summary="Service information")
    async def root() -> Dict[str, Any]:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs" if docs_enabled else "Disabled in production",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "realty_admin.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
