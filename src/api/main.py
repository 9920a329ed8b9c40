"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Signup API v1 - Password checklist and account registration",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared HTTP client for the remote API on startup
    - Closes the HTTP client on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Remote API: %s", settings.api_base_url)

    client = httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.http_timeout_seconds,
    )

    # Store client in app state for dependency injection
    app.state.http_client = client

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await client.aclose()
    logger.info("HTTP client closed")


app = FastAPI(
    title="signupflow",
    description="Signup API - Validates the signup form, uploads the profile image "
    "and registers the account against the remote API",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
