"""FastAPI application entry point."""
import os
import time
import traceback
from datetime import datetime, timezone

from dotenv import load_dotenv

_backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(_backend_dir, ".env"))

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings
from app.logging_config import SERVICE_NAME, setup_logging, log_service_event, log_api_request, get_logger
from app.transport.routers import health, homepage

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    setup_logging(
        level=settings.LOG_LEVEL,
        structured=settings.ENV == "production",
        log_file=settings.LOG_FILE,
    )

    log_service_event(
        event_type="startup",
        service=SERVICE_NAME,
        message="STOPS homepage service starting up",
        port=settings.PORT,
        version=VERSION,
    )
    if settings.FRAGMENT_TIMEOUT_SEC is None:
        get_logger("config").info("FRAGMENT_TIMEOUT_SEC not set; fragment fetches block until upstream answers")

    yield

    log_service_event(
        event_type="shutdown",
        service=SERVICE_NAME,
        message="STOPS homepage service shutting down",
    )


app = FastAPI(
    title="STOPS Project Homepage",
    version=VERSION,
    description="Homepage of the STOPS/COPS R package project on R-Forge",
    lifespan=lifespan,
)

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        log_api_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=(time.perf_counter() - started) * 1000,
            host=request.headers.get("host", ""),
        )
        return response


app.add_middleware(RequestLoggingMiddleware)


def _build_error_body(
    status_code: int,
    detail: str,
    path: str | None = None,
    error: str | None = None,
) -> dict:
    """Unified error response body used by ALL exception handlers."""
    return {
        "error": error or _status_to_error(status_code),
        "detail": detail,
        "status": status_code,
        "path": path or "",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def _status_to_error(code: int) -> str:
    _MAP = {
        400: "bad_request",
        404: "not_found",
        405: "method_not_allowed",
        422: "validation_error",
        500: "internal_server_error",
        502: "bad_gateway",
        504: "gateway_timeout",
    }
    return _MAP.get(code, "error")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 Validation Error: unified format."""
    body = _build_error_body(
        status_code=422,
        detail=str(exc.errors()),
        path=str(request.url.path),
        error="validation_error",
    )
    return JSONResponse(status_code=422, content=body)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP exception handler: unified format."""
    body = _build_error_body(
        status_code=exc.status_code,
        detail=str(exc.detail) if exc.detail else "",
        path=str(request.url.path),
    )
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler: unified format."""
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}", exc_info=exc)

    error_detail = f"{type(exc).__name__}: {str(exc)}"
    if settings.ENV == "development":
        error_detail += "\n" + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    body = _build_error_body(
        status_code=500,
        detail=error_detail,
        path=str(request.url.path),
    )
    return JSONResponse(status_code=500, content=body)


# Include routers
logger.info("Registering health router")
app.include_router(health.router, tags=["Health"])

logger.info("Registering homepage router")
app.include_router(homepage.router, tags=["Homepage"])


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
