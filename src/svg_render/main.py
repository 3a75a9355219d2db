"""Main FastAPI application for the SVG render service."""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import Response
import httpx
import uvicorn

from . import __version__
from .exceptions import RenderServiceError
from .models.config import APIConfig
from .routes import health, render
from .routes.render import RESPONSE_CONTENT_TYPE
from .utils.logging import get_logger, setup_logging


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    config: APIConfig = app.state.config
    
    # Startup
    logger.info("Starting SVG render service", version=app.version, host=config.host, port=config.port)
    logger.debug("Configuration", **config.model_dump())
    
    async with httpx.AsyncClient(follow_redirects=True) as http_client:
        app.state.http_client = http_client
        yield
    
    # Shutdown
    logger.info("Server exiting")


async def render_error_handler(request: Request, exc: RenderServiceError):
    """Answer render failures with their fixed message and a 404."""
    logger.warning(
        "Render request failed",
        error=type(exc).__name__,
        detail=exc.detail,
        path=request.url.path,
    )
    return Response(
        content=exc.client_message,
        status_code=404,
        media_type=RESPONSE_CONTENT_TYPE,
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions without leaking their details."""
    logger.error("Unexpected error", path=request.url.path, exc_info=exc)
    return Response(
        content=RenderServiceError.client_message,
        status_code=500,
        media_type=RESPONSE_CONTENT_TYPE,
    )


def create_app(config: Optional[APIConfig] = None) -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title="SVG Render Service",
        description="Fetches SVG templates and fills in their placeholders",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config or APIConfig.from_env()
    
    app.add_exception_handler(RenderServiceError, render_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    
    app.include_router(health.router)
    app.include_router(render.router)
    
    return app


def run(config: APIConfig) -> None:
    """Serve the application until SIGINT or SIGTERM."""
    setup_logging(config)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        timeout_keep_alive=config.keep_alive_timeout_seconds,
        timeout_graceful_shutdown=config.shutdown_grace_seconds,
        log_config=None,
    )
