"""
FastAPI Application Setup

Main entry point for the job application submission proxy.

Responsibility:
    - FastAPI app initialization
    - Router registration (applications)
    - CORS middleware configuration
    - Global exception handlers ({"error": ...} envelope)
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint: GET /health
"""

import logging
import os
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from src.api.routers import applications

# Import shared schemas
from src.api.schemas.common import ErrorResponse

# Import domain exceptions for global handling
from src.domain.shared.exceptions import (
    DomainException,
    DownstreamServiceError,
    MissingApplicationFieldsError,
)

load_dotenv()

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: API version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = API_VERSION
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: POST /api/submitApplication"
        INFO: "Request completed: POST /api/submitApplication - 200 - 0.812s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Mapping:
        - MissingApplicationFieldsError -> 400 Bad Request
        - DownstreamServiceError -> 500 Internal Server Error
        - Other DomainException -> 400 Bad Request

    The body is always {"error": exc.message}.
    """
    if isinstance(exc, DownstreamServiceError):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        # MissingApplicationFieldsError and any other domain rule violation
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Global exception handler for request validation errors.

    A part of the wrong kind (e.g. `cv` sent as plain text instead of a file)
    is treated like a missing part: 400 with the fixed message, never 422.
    """
    logger.warning(
        f"Request validation failed: {exc.errors()} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error=MissingApplicationFieldsError.DEFAULT_MESSAGE
        ).model_dump(),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Global exception handler for HTTPException.

    Keeps the {"error": ...} envelope for framework errors (404, 405) and for
    HTTPExceptions raised by routers.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace; the client only sees the generic message.
    """
    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error=DownstreamServiceError.TRANSPORT_FAILURE_MESSAGE
        ).model_dump(),
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def _allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    Configuration:
        - Title: Job Application Intake API
        - CORS: CORS_ALLOWED_ORIGINS (default: all origins)
        - Logging: INFO level with structured format
        - Routers: /api/submitApplication
        - Health: GET /health

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # uvicorn src.api.main:app --reload
    """
    app = FastAPI(
        title="Job Application Intake API",
        version=API_VERSION,
        description=(
            "Submission proxy for the job application form. "
            "Forwards candidate details and CV to the application worker."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(applications.router, prefix="/api")

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        description="Simple health check for monitoring and load balancers",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        """Return a simple status indicator for monitoring systems."""
        return HealthCheckResponse(
            status="ok",
            version=API_VERSION,
            timestamp=time.time(),
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routes: POST /api/submitApplication, GET /health")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn src.api.main:app --reload
app = create_app()
