"""metagate — FastAPI Application Entry Point.

A validated REST façade over the Meta Graph API: pages, Instagram media,
ad accounts and insights.
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from metagate import __version__
from metagate.api.ads_routes import router as ads_router
from metagate.api.facebook_routes import router as facebook_router
from metagate.api.instagram_routes import router as instagram_router
from metagate.api.meta_routes import router as meta_router
from metagate.config import Settings
from metagate.core.error_handler import register_exception_handlers
from metagate.core.logging import configure_logging, get_logger
from metagate.core.middleware import (
    rate_limit_middleware,
    request_logging_middleware,
    security_headers_middleware,
)
from metagate.core.rate_limit import ClientRateLimiter
from metagate.dependencies import build_forwarders
from metagate.models.responses import HealthResponse

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    settings: Settings = app.state.settings
    logger.info("metagate starting up...")
    logger.info(f"Environment: {settings.environment}")
    missing = settings.missing_credentials()
    if missing:
        # Requests will fail at forwarder time; startup continues.
        logger.warning(f"Missing required environment variables: {', '.join(missing)}")
    yield
    await app.state.forwarders.close()
    logger.info("metagate shut down")


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the application around one settings object.

    ``transport`` replaces the outbound HTTP transport, e.g. with an
    ``httpx.MockTransport`` in tests.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="metagate",
        description="Validated REST façade over the Meta Graph API: pages, Instagram and ads.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()
    app.state.forwarders = build_forwarders(settings, transport)
    app.state.rate_limiter = ClientRateLimiter(
        window_seconds=settings.rate_limit_window_ms // 1000,
        max_requests=settings.rate_limit_max_requests,
    )

    register_exception_handlers(app)

    # Last added runs first: CORS, security headers, logging, then rate limiting.
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(request_logging_middleware)
    app.middleware("http")(security_headers_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(facebook_router)
    app.include_router(instagram_router)
    app.include_router(ads_router)
    app.include_router(meta_router)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check(request: Request):
        """Process status and which credentials are configured."""
        state = request.app.state
        return HealthResponse(
            status="OK",
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime=round(time.monotonic() - state.started_at, 3),
            environment=state.settings.environment,
            version=__version__,
            credentials=state.settings.credential_presence(),
        )

    return app


app = create_app()
