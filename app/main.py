"""
FastAPI application for completing GitHub OAuth logins.

This module wires dependencies and configures the application.
Business logic is in app/core, infrastructure in app/infrastructure.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import UTC, datetime

# Configure logging FIRST, before other local imports
from app.logging_config import SERVICE_NAME, setup_global_logging

setup_global_logging()

# Now import other modules (they will use the configured logging)
from fastapi import FastAPI, Request  # noqa: E402
from fastapi.responses import PlainTextResponse  # noqa: E402

from app.core.exceptions import OAuthCallbackError  # noqa: E402
from app.oauth import router as oauth_router  # noqa: E402
from app.oauth.config import get_oauth_config  # noqa: E402

logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Loads configuration at startup so missing credentials show up in the
    logs before the first callback arrives.
    """
    config = get_oauth_config()
    logger.info(
        "Application starting up...",
        extra={
            "extra_fields": {
                "credentials_configured": config.is_configured(),
                "site_origin": config.site_origin or None,
            }
        },
    )
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="GitHub OAuth Callback",
    description="Exchanges GitHub authorization codes and hands the profile to the web client",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================================
# Centralized Exception Handlers
# ============================================================================


@app.exception_handler(OAuthCallbackError)
async def oauth_callback_error_handler(request: Request, exc: OAuthCallbackError):
    """
    Handle errors raised by the callback flow.

    Returns the exception's fixed public message as plain text. The
    internal detail stays in the server logs.
    """
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(oauth_router.router)


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
