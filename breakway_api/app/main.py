"""
Main entrypoint for the Breakway Gas API.

This module assembles the FastAPI application: logging, CORS, the
request size limit, error rendering and the versioned routers.  The
``create_app`` function builds a fully configured app, which is then
instantiated at module import time as ``app`` so that it can be served
with uvicorn::

    uvicorn breakway_api.app.main:app --reload

Every call to ``create_app`` also builds a fresh in-memory database
(see ``core.db.init_db``); state does not survive a restart.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import ServiceError
from .core.logging_config import setup_logging


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as a JSON object with a ``message`` field."""
    logger = logging.getLogger(__name__)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body.", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application backed by a freshly initialised
        in-memory database.
    """
    # Initialise logging before anything else so that the database
    # seeding below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > settings.max_body_bytes:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"message": "Request body too large."},
            )
        return await call_next(request)

    # Added last so that CORS headers are also set on the 413 response above.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # The storefront frontend calls the v1 routes under plain ``/api``.
    app.include_router(v1_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {"service": settings.project_name, "status": "ok"}

    init_db()
    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
