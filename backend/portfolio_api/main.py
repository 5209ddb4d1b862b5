from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from portfolio_api.api.api_v1 import api_router
from portfolio_api.core.config import settings
from portfolio_api.core.logging_config import setup_logging
from portfolio_api.db.base import Base
from portfolio_api.db.session import engine
from portfolio_api.schemas.health import HealthOut

import portfolio_api.models  # noqa: F401

logger = logging.getLogger(__name__)


def _allowed_origin(origin: str | None) -> str | None:
    if "*" in settings.CORS_ORIGINS:
        return origin or "*"
    if origin and origin in settings.CORS_ORIGINS:
        return origin
    return None


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

    app = FastAPI(title=settings.PROJECT_NAME)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        allow_origin = _allowed_origin(request.headers.get("origin"))
        if allow_origin is None:
            return response

        response.headers["Access-Control-Allow-Origin"] = allow_origin
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        request_headers = request.headers.get("Access-Control-Request-Headers")
        if request_headers:
            response.headers["Access-Control-Allow-Headers"] = request_headers
        else:
            response.headers["Access-Control-Allow-Headers"] = "*"

        response.headers["Access-Control-Allow-Credentials"] = "false"
        return response

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "Conflict with existing data"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Database operation failed"},
        )

    @app.get("/health", response_model=HealthOut)
    def health() -> HealthOut:
        return HealthOut(status="ok", timestamp=datetime.now(timezone.utc))

    @app.on_event("startup")
    def on_startup() -> None:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")

    app.include_router(api_router, prefix=settings.API_V1_STR)

    return app


app = create_app()
