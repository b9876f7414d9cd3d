"""FastAPI application factory for clashyaml."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from clashyaml import __version__
from clashyaml.api.deps import init_dependencies
from clashyaml.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from clashyaml.api.routers import highlight, reference, validate
from clashyaml.api.schemas import HealthResponse
from clashyaml.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="clashyaml",
        description="Syntax highlighting and validation for Clash configuration YAML.",
        version=__version__,
    )
    app.state.settings = settings
    init_dependencies(settings)

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.include_router(highlight.router, prefix="/highlight", tags=["highlight"])
    app.include_router(validate.router, prefix="/validate", tags=["validate"])
    app.include_router(reference.router, prefix="/reference", tags=["reference"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("clashyaml.api")
    logger.info(
        "clashyaml API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "clashyaml.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
