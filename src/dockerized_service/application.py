import logging
import socket
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth_middleware import require_basic_auth
from .core import Settings

logger = logging.getLogger(__name__)

HELLO_MESSAGE = "Hello, world!"
NO_SECRET_MESSAGE = "No secret message configured"
ROUTE_NOT_FOUND = "Route not found"
SERVER_ERROR = "Something went wrong!"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application"""
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Server is running on port {settings.port}")
    logger.info(f"Access the service at http://localhost:{settings.port}")
    logger.info(f"Secret endpoint at http://localhost:{settings.port}/secret (requires Basic Auth)")
    if not settings.credentials_configured:
        logger.warning("⚠ USERNAME/PASSWORD not configured - /secret will reject every request")

    yield

    # Shutdown
    logger.info("Shutting down service")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Request pipeline, outermost first:
      1. handle_errors middleware (request logging, 500 safety net)
      2. route matching, with unmatched paths/methods answered as 404
      3. require_basic_auth on protected routes, short-circuiting with 401
      4. the route handler, whose dict is serialized as JSON
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Dockerized Service",
        description="Greeting, health and Basic-auth protected secret endpoints",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    @app.middleware("http")
    async def handle_errors(request: Request, call_next):
        logger.debug(f"Incoming request: {request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error for {request.method} {request.url.path}")
            return JSONResponse(status_code=500, content={"error": SERVER_ERROR})
        logger.debug(f"Response status: {response.status_code}")
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as {"error": ...}; unknown routes and methods become 404."""
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": ROUTE_NOT_FOUND})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.get("/")
    async def root():
        """Public greeting"""
        return {"message": HELLO_MESSAGE}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "timestamp": utc_timestamp()}

    @app.get("/hostname")
    async def hostname():
        """Hostname of the machine (or container) serving the request"""
        return {"hostname": socket.gethostname()}

    @app.get("/secret", dependencies=[Depends(require_basic_auth)])
    async def secret(request: Request):
        """Protected route - returns the configured secret message"""
        secret_message = request.app.state.settings.secret_message
        return {
            "message": secret_message or NO_SECRET_MESSAGE,
            "authenticated": True
        }

    return app

