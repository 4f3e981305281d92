"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import settings
from infrastructure.logging import setup_logging
from interfaces.api.routes.compound_routes import router as compound_router
from interfaces.api.routes.search_routes import router as search_router

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Handle application startup and shutdown."""
    logger.info("app_starting", env=settings.app_env)

    # Load the local catalog eagerly so a broken file shows up at startup
    try:
        from domain.services.local_index import LocalIndex  # noqa: PLC0415
        from interfaces.dependencies import get_container  # noqa: PLC0415

        local_index = get_container()[LocalIndex]
        logger.info("local_catalog_loaded", entries=len(local_index))
    except Exception as e:  # noqa: BLE001
        logger.warning("local_catalog_load_failed", error=str(e))
        # Don't fail startup - the health endpoint stays available

    logger.info("app_ready")

    yield

    logger.info("app_shutting_down")
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Hybrid local and PubChem compound search",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(search_router)
    app.include_router(compound_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()
