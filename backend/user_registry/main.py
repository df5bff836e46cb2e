"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_registry.config import Settings, get_settings
from user_registry.domain.exceptions import StoreError
from user_registry.infrastructure.database import Database
from user_registry.infrastructure.logging.log_config import setup_logging
from user_registry.presentation.api.errors import register_exception_handlers
from user_registry.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — check the store and bootstrap the schema before serving."""
    setup_logging(app.state.settings)
    database: Database = app.state.database

    try:
        await database.connect()
        await database.ensure_schema()
    except StoreError:
        logger.critical("Database bootstrap failed — refusing to start", exc_info=True)
        await database.dispose()
        raise

    yield

    # Shutdown
    await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(
        settings.database_url,
        echo=(settings.app_env == "development"),
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "user_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )
