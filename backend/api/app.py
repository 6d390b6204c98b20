"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.database import create_mongo_client, ensure_indexes, get_database
from modules.auth.exceptions import TokenSecretNotConfiguredError
from modules.auth.routes import router as auth_router
from modules.claims.routes import router as claims_router
from modules.posts.routes import router as posts_router

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def check_auth_settings(settings: Settings) -> None:
    """
    Refuse to start with an unusable auth configuration.

    Token mode needs a signing secret; there is no built-in default.
    A missing API key in api_key mode is reported per request instead.
    """
    if settings.auth_strategy == "token" and not settings.jwt_secret:
        raise TokenSecretNotConfiguredError()
    if settings.auth_strategy == "api_key" and not settings.api_key:
        logger.warning("AUTH_STRATEGY=api_key but API_KEY is not set; writes will fail")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the single MongoDB client for the process, makes sure the
    indexes exist and builds the service container. Any failure here
    aborts startup.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings)
    check_auth_settings(settings)

    client = create_mongo_client(settings)
    db = get_database(client, settings)
    ensure_indexes(db)
    app.state.container = ServiceContainer(db, settings)
    logger.info(
        "Starting %s on %s:%s (auth: %s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.auth_strategy,
    )
    try:
        yield
    finally:
        # Shutdown
        app.state.container = None
        client.close()
        logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Community food-sharing board: post surplus food, find it nearby, claim it",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = None

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.root_router, tags=["health"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(posts_router, prefix="/posts", tags=["posts"])
    app.include_router(posts_router, prefix="/api/food", tags=["food"], deprecated=True)
    app.include_router(claims_router, prefix="/claims", tags=["claims"])

    return app


# Application instance for uvicorn
app = create_app()
