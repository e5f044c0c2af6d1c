"""
Sidecar Encoder - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from sidecar_encoder.settings import get_settings
from sidecar_encoder import logging_setup
from api.dependencies import lifespan_handler
from api.routers import encode, health

# Get settings
cfg = get_settings()

# Configure logging
logging_setup.setup_logging()
logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request"


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Malformed JSON and wrong body shapes are all a plain 400."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return PlainTextResponse(INVALID_REQUEST_MESSAGE, status_code=400)


def create_app() -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Configuration is loaded from settings (reads from .env file).

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Sidecar Encoder API",
        description="Base64-encodes strings by delegating to a sidecar executable",
        version="0.1.0",
        lifespan=lifespan_handler  # Handles startup/shutdown
    )

    app.add_exception_handler(RequestValidationError, invalid_request_handler)

    # Mount routers
    app.include_router(encode.router, tags=["encode"])
    app.include_router(health.router, prefix="/health", tags=["health"])

    @app.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "name": "Sidecar Encoder API",
            "version": "0.1.0",
            "environment": cfg.env,
            "status": "running",
            "docs": "/docs",
            "encode": "/encode",
            "health": "/health/ready"
        }

    logger.info(f"FastAPI application created (env={cfg.env})")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    from sidecar_encoder.cli import serve

    exit(serve.main())
