"""FastAPI application factory.

Usage:
    uvicorn foodlane.infrastructure.api.app:create_app --factory --port 5000
    foodlane serve
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from foodlane.domain.exceptions import (
    AuthenticationError,
    DuplicateOrderError,
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)
from foodlane.infrastructure.api.routes import auth, foods, orders, users
from foodlane.infrastructure.bootstrap import Container, build_container
from foodlane.infrastructure.config import Settings
from foodlane.infrastructure.logging import configure_logging

logger = structlog.get_logger(__name__)

INTERNAL_ERROR = "Internal error"


def create_app(container: Container | None = None) -> FastAPI:
    """Build the app around an explicit container.

    Without one, settings come from the environment and the storage
    engine is created here, once per process.
    """
    if container is None:
        settings = Settings.from_env()
        settings.require_secret()
        configure_logging(settings.environment, settings.log_level)
        container = build_container(settings)

    app = FastAPI(title="FoodLane API")
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(foods.router)
    app.include_router(orders.router)

    @app.get("/", response_class=PlainTextResponse)
    def index() -> str:
        return "Hello from API"

    return app


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AuthenticationError)
    async def unauthenticated(request: Request, exc: AuthenticationError):
        return JSONResponse(status_code=401, content={"message": "unauthorized access"})

    @app.exception_handler(ForbiddenError)
    async def forbidden(request: Request, exc: ForbiddenError):
        return JSONResponse(status_code=403, content={"message": "forbidden access"})

    @app.exception_handler(EntityNotFoundError)
    async def not_found(request: Request, exc: EntityNotFoundError):
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.exception_handler(DuplicateOrderError)
    async def duplicate(request: Request, exc: DuplicateOrderError):
        return JSONResponse(status_code=409, content={"message": str(exc)})

    @app.exception_handler(ValidationError)
    async def rule_violation(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def storage_fault(request: Request, exc: SQLAlchemyError):
        logger.error(
            "storage_error",
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR})

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception):
        logger.error(
            "unhandled_error",
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR})
