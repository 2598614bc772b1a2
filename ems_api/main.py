"""FastAPI application factory. No business logic; only wiring and middleware."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ems_api.api.routes import router
from ems_api.core.config import Settings, get_settings
from ems_api.core.errors import ApiError, api_error_handler

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the app around one Settings instance, exposed to handlers via app.state.

    The database engine is created from get_settings() when ems_api.core.database is
    imported, so settings.DATABASE_URL here does not rebind it; override get_db instead.
    """
    settings = settings or get_settings()
    if settings.is_production and settings.uses_default_secret:
        logger.warning("JWT_SECRET is the built-in default; set a strong secret in production")

    app = FastAPI(
        title="EMS API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ApiError, api_error_handler)
    app.include_router(router)
    return app


app = create_app()
