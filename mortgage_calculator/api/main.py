"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from mortgage_calculator.api.dependencies import get_request_id
from mortgage_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from mortgage_calculator.api.v1 import calculation
from mortgage_calculator.api.v1.schemas import FieldError, ProblemDetail
from mortgage_calculator.infrastructure.observability.logging import log_rejection, setup_logging
from mortgage_calculator.infrastructure.observability.metrics import rejected_requests_counter
from mortgage_calculator.config import settings

# Setup structured logging
setup_logging(settings.log_level)

_HTTP_STATUS_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


def _problem(status_code: int, detail: str, request_id: str, errors: list[FieldError] | None = None) -> JSONResponse:
    body = ProblemDetail(
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
        errors=errors or [],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _field_errors(exc: RequestValidationError) -> list[FieldError]:
    """Flatten pydantic error locations, e.g. ("body", "principal") -> "principal" """
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(FieldError(field=".".join(location) or "body", message=error.get("msg", "invalid value")))
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Convert HTTPException to RFC 7807 Problem Details"""
    return _problem(exc.status_code, str(exc.detail), get_request_id(request))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed or constraint-violating payloads with 400"""
    request_id = get_request_id(request)
    errors = _field_errors(exc)
    rejected_requests_counter.labels(reason="validation").inc()
    log_rejection(request_id, "validation", "; ".join(f"{e.field}: {e.message}" for e in errors))
    return _problem(400, "Invalid input parameters", request_id, errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions - log and return 500"""
    request_id = get_request_id(request)
    logging.exception("Unhandled exception", extra={"request_id": request_id})
    return _problem(500, "Internal server error", request_id)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Mortgage Calculator",
        description="Fixed-rate mortgage payment, borrowing capacity and advice service",
        version="0.1.0",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculation.router, prefix=settings.api_prefix, tags=["Mortgage Calculator"])

    return app


app = create_app()
