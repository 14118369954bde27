"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import get_calendar_config, get_text_generator
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate configuration at startup so bad settings fail fast."""
    calendar_config = get_calendar_config()
    logger.info(
        "application_started",
        environment=settings.app_env,
        version=settings.app_version,
        initial_days=calendar_config.initial_days,
        extension_days=calendar_config.extension_days,
    )
    if not getattr(get_text_generator(), "configured", True):
        logger.warning("ai_relay_not_configured")
    yield
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Reflect: a journal of moments\n\n"
            "Write short entries, file them under categories, mark themes with "
            "`#tags`, and browse them on an infinitely scrolling calendar.\n\n"
            "### Features\n"
            "- **Entries**: text with extracted `#tags`, filed on any day\n"
            "- **Categories**: icon and color from a fixed palette\n"
            "- **Calendar**: day cells grouped into weeks, extended in 28-day steps\n"
            "- **Reports**: daily, weekly and monthly AI summaries\n\n"
            "### Authentication\n"
            "All endpoints (except `/health`) require a valid JWT token "
            "in the Authorization header:\n"
            "```\nAuthorization: Bearer <your_token>\n```\n\n"
            "### Timezone\n"
            "Send the client's IANA timezone as `X-Timezone` so dates "
            "land on the right calendar day.\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- POST/PUT/PATCH/DELETE: 10 requests/minute\n"
            "- AI generation: 5 requests/minute"
        ),
        version=settings.app_version,
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "entries",
                "description": "Journal entry operations",
            },
            {
                "name": "categories",
                "description": "Category management operations",
            },
            {
                "name": "calendar",
                "description": "Infinite calendar windows",
            },
            {
                "name": "reports",
                "description": "AI-generated journal reports",
            },
            {
                "name": "ai",
                "description": "Server-side relay to the generative model",
            },
        ],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
