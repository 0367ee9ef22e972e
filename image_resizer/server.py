"""
FastAPI server entry point.
"""

import logging
import logging.config
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .api import transform_router
from .config import settings
from .containers import Container
from .exceptions import ImageResizerError
from .libs.log_context import RequestIdFilter, new_request_id, set_request_id
from .schemas.response import HealthResponse

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        },
    },
    "filters": {
        "request_id_filter": {
            "()": RequestIdFilter,
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "filters": ["request_id_filter"],
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": settings.log_level.upper(),
        "handlers": ["console"],
    },
}

logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that tags each request with an id and logs it."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        method = request.method
        path = request.url.path

        request_id = new_request_id()
        set_request_id(request_id)

        # Image bodies are never logged, only their size
        if method in ("POST", "PUT", "PATCH"):
            size = request.headers.get("content-length", "0")
            target = f"{path}?{request.url.query}" if request.url.query else path
            logger.info(f">>> {method} {target} | Body: {size} bytes")
        else:
            logger.info(f">>> {method} {path}")

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        duration = time.time() - start_time
        logger.info(f"<<< {method} {path} | {response.status_code} | {duration:.3f}s")

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan."""
    logger.info("Image resizer started")

    yield

    # uvicorn has stopped accepting connections and drained in-flight requests
    logger.info("Image resizer shut down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Image Resizer API",
        description="Resize, convert and thumbnail uploaded images",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Initialize container and wire it into the route module
    container = Container()
    container.wire(modules=["image_resizer.api.transform"])
    app.state.container = container

    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(ImageResizerError)
    async def image_resizer_error_handler(request: Request, exc: ImageResizerError):
        logger.error(f"Error: {exc.message}")
        logger.debug(f"{exc.code} details: {exc.details}")
        return PlainTextResponse(
            f"{exc.message}\n",
            status_code=exc.status_code,
            headers={"X-Content-Type-Options": "nosniff"},
        )

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse()

    app.include_router(transform_router)

    return app


# Create app instance
app = create_app()
