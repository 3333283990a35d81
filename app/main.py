"""ZYCLE API entry point.

Only wiring lives here: logging, lifespan, limiter, exception handlers,
middleware and the /api/v1 router. Settings are read inside create_app() so
tests can set the environment before the app is built.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.v1 import api_router
from app.core.config import Settings, get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.core.limiter import limiter
from app.middleware import RequestIDMiddleware
from app.shared.telemetry import setup_logging

API_PREFIX = "/api/v1"


def _cors_origins(settings: Settings) -> list[str]:
    return [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]


def create_app() -> FastAPI:
    """Build the ZYCLE FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Recycling management: materials, purchase and sale invoices, "
            "cash box, HR, reports and the ZIA assistant."
        ),
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)

    # Added last = outermost: the request ID is set before CORS runs.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix=API_PREFIX)

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    return app


app = create_app()
