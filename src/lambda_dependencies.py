"""Shared dependency factory for the Lambda handler.

Dependencies are created once and reused across invocations within the same
Lambda container, so sessions survive for as long as the container is warm.
"""

import logging
import random

from fastapi import FastAPI

from menu_designer.catalog.curated_dishes import build_default_catalog
from menu_designer.handlers.api_handler import create_app
from menu_designer.observability import configure_logging
from menu_designer.repositories.session_repository import SessionRepository
from menu_designer.services.menu_generator import MenuGenerator
from menu_designer.services.session_service import SessionService
from menu_designer.settings import load_settings

logger = logging.getLogger(__name__)

# Module-level caches for Lambda container reuse
_menu_generator: MenuGenerator | None = None
_session_service: SessionService | None = None
_fastapi_app: FastAPI | None = None


def get_menu_generator() -> MenuGenerator:
    """Create or retrieve the cached menu generator.

    Returns:
        MenuGenerator bound to the built-in catalog
    """
    global _menu_generator

    if _menu_generator is not None:
        return _menu_generator

    settings = load_settings()
    _menu_generator = MenuGenerator(
        catalog=build_default_catalog(),
        limits=settings.limits,
        rng=random.Random(settings.random_seed),
    )

    logger.info("Menu generator initialized")
    return _menu_generator


def get_session_service() -> SessionService:
    """Create or retrieve the cached session service.

    Returns:
        SessionService backed by an in-memory repository
    """
    global _session_service

    if _session_service is not None:
        return _session_service

    settings = load_settings()
    _session_service = SessionService(
        repository=SessionRepository(
            ttl_seconds=settings.session_ttl_seconds,
            max_sessions=settings.max_sessions,
        ),
        generator=get_menu_generator(),
    )

    logger.info("Session service initialized")
    return _session_service


def get_fastapi_app() -> FastAPI:
    """Create or retrieve the cached FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    global _fastapi_app

    if _fastapi_app is not None:
        return _fastapi_app

    _fastapi_app = create_app(
        session_service=get_session_service(),
        generator=get_menu_generator(),
    )

    logger.info("FastAPI application initialized")
    return _fastapi_app


def initialize_lambda_environment() -> None:
    """Initialize logging; call once during Lambda cold start."""
    configure_logging(load_settings().log_level)

    logger.info("Lambda environment initialized")
