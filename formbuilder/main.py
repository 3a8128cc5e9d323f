import logging
import time
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from formbuilder import models  # noqa: F401  registers every table on Base.metadata
from formbuilder.db.base import Base
from formbuilder.db.session import Database
from formbuilder.db.init_db import init_db
from formbuilder.routers import all_routers
from formbuilder.core.config.settings import Settings, get_settings
from formbuilder.core.config.logging_config import setup_logging
from formbuilder.utils.helpers import new_error, new_success

logger = logging.getLogger(__name__)
error_logger = logging.getLogger("formbuilder.errors")


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: Configuration; defaults to the cached environment settings
        database: Pre-built database handle; one is created from settings when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title=settings.PROJECT_NAME, debug=settings.DEBUG)
    app.state.settings = settings
    app.state.database = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    @app.on_event("startup")
    def startup_event():
        database = app.state.database
        Base.metadata.create_all(bind=database.engine)
        db = database.session()
        try:
            init_db(db, settings)
            logger.info("Database initialized successfully")
        finally:
            db.close()

    @app.on_event("shutdown")
    def shutdown_event():
        app.state.database.dispose()

    # Middleware for request logging
    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable):
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        logger.info(
            f"Method: {request.method} Path: {request.url.path} "
            f"Status: {response.status_code} Duration: {duration:.2f}s"
        )
        return response

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Accept", "Authorization", "Content-Type"],
    )

    for router in all_routers:
        app.include_router(router)

    # Exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            error_logger.error(f"HTTP Exception: {exc.detail}")
        else:
            logger.info(f"HTTP Exception: {exc.status_code} {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=new_error(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=new_error(_validation_message(exc), status.HTTP_400_BAD_REQUEST),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        error_logger.error(f"Unhandled Exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=new_error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR),
        )

    @app.get("/")
    def root():
        return new_success(message="Welcome to the Form Builder API")

    # Health check endpoint with connection pool statistics
    @app.get("/health")
    def health_check():
        stats = app.state.database.health()
        stats["timestamp"] = time.time()
        code = status.HTTP_200_OK if stats["status"] == "up" else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(status_code=code, content=stats)

    return app


app = create_app()
