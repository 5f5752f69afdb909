"""
Pinboard Backend — FastAPI Application Factory
================================================

What:  Builds the ASGI app: middleware, exception handlers and routers.
Who:   uvicorn serves `app.main:app`; tests call create_app() for a fresh
       instance per test.

Request path:
    RateLimit → RequestID → RequestLogging → GZip → CORS → router
        /api/pins     pins.py
        /api/boards   boards.py
        /health       health.py

Error responses:
    NotFoundError               404 {"message": "<Resource> not found"}
    DatabaseError               500 {"message": "Server error"}
    any other PinboardError     500 {"message": "Server error"}
    anything else               500 {"message": "Server error"}
    request body validation     422 {"message": "Invalid request: <field>: <reason>"}
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    SERVER_ERROR_MESSAGE,
    DatabaseError,
    NotFoundError,
    PinboardError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import boards, health, pins

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def setup_logging() -> None:
    """
    Route every logger to stdout at settings.log_level.

    uvicorn's own access log is silenced in favour of pinboard.access,
    which carries the request id.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Pinboard API %s starting (%s)", __version__, settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving so /health stays reachable while the config is fixed
        logger.error("Configuration error: %s", e)

    logger.info("Listening on http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    await dispose_engine()
    logger.info("Pinboard API stopped")


def describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into "Invalid request: body.title: Field required; ..."."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        problems.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "Invalid request: " + "; ".join(problems)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Translate service exceptions into {"message": ...} bodies.

    Services log their own operation tag with the original error before
    raising, so the handlers only note the request id.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"message": describe_validation_error(exc)})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.warning(
            "[%s] %s %s failed | Context: %s",
            request_id_var.get(""), request.method, request.url.path, exc.context,
        )
        return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})

    @app.exception_handler(PinboardError)
    async def handle_app_error(request: Request, exc: PinboardError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Traceback goes to the log only
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), exc, exc_info=True)
        return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})


def create_app() -> FastAPI:
    """Assemble a new Pinboard app. Each call gets its own rate-limit state."""
    app = FastAPI(
        title="Pinboard API",
        description="Boards and pins for users: CRUD plus board pin membership.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Added innermost first; Starlette runs them in reverse order
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-Total-Count", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware)

    register_exception_handlers(app)

    for router in (pins.router, boards.router, health.router):
        app.include_router(router)

    return app


app = create_app()
