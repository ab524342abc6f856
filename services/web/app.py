"""
Resume Tailoring Console - FastAPI Application

Serves the tailoring form and renders backend results on the server.
The backend base URL is resolved once here and injected into every
TailorClient; the HTTP connection pool is shared for the app's lifetime.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env file at startup
from dotenv import load_dotenv
load_dotenv()

from .config import WebConfig, get_config, log_backend_status
from .routes import console_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config: WebConfig = app.state.config
    logger.info("=" * 60)
    logger.info("TAILOR CONSOLE STARTING")
    logger.info(f"Host: {config.host}")
    logger.info(f"Port: {config.port}")
    logger.info(f"PORT env var: {os.environ.get('PORT', 'not set')}")
    logger.info(f"Tailor endpoint: {config.tailor_endpoint}")
    logger.info("=" * 60)
    log_backend_status(config)

    app.state.http_client = httpx.AsyncClient(
        timeout=config.http_timeout,
        follow_redirects=True,
        transport=app.state.transport,
    )

    yield

    logger.info("Shutting down tailor console...")
    await app.state.http_client.aclose()
    app.state.http_client = None
    logger.info("Cleanup complete")


def create_app(
    config: Optional[WebConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Console configuration; read from the environment when omitted
        transport: HTTP transport for the shared client (tests pass a MockTransport)
    """
    config = config or get_config()

    app = FastAPI(
        title="Resume Tailoring Console",
        description="Form front end for an external resume tailoring backend",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.transport = transport
    app.state.http_client = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(console_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "services.web.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )
