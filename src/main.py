"""Main application entry point for the menu designer service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os
import random

from fastapi import FastAPI

from menu_designer.catalog.curated_dishes import build_default_catalog
from menu_designer.handlers.api_handler import create_app
from menu_designer.observability import configure_logging, setup_observability
from menu_designer.repositories.session_repository import SessionRepository
from menu_designer.services.menu_generator import MenuGenerator
from menu_designer.services.session_service import SessionService
from menu_designer.settings import AppSettings, load_settings

logger = logging.getLogger(__name__)


def create_menu_generator(settings: AppSettings) -> MenuGenerator:
    """Create the menu generator from settings.

    Args:
        settings: Loaded application settings

    Returns:
        MenuGenerator bound to the built-in catalog
    """
    rng = random.Random(settings.random_seed)
    if settings.random_seed is not None:
        logger.info(f"Menu generator seeded with {settings.random_seed}")

    return MenuGenerator(catalog=build_default_catalog(), limits=settings.limits, rng=rng)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Loads settings and configures logging
    2. Builds the catalog and menu generator
    3. Creates the session repository and service
    4. Creates the FastAPI app
    5. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    settings = load_settings()
    configure_logging(settings.log_level)

    logger.info("Initializing menu designer service...")

    generator = create_menu_generator(settings)
    logger.info(
        f"Generator limits - categories: {settings.limits.max_categories}, "
        f"dishes per category: {settings.limits.max_dishes_per_category}"
    )

    repository = SessionRepository(
        ttl_seconds=settings.session_ttl_seconds, max_sessions=settings.max_sessions
    )
    session_service = SessionService(repository=repository, generator=generator)

    app = create_app(session_service=session_service, generator=generator)
    setup_observability(app, enable_exporters=settings.exporters_enabled)

    logger.info("Menu designer service initialized successfully")
    return app


# Skip app creation during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "8001"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
