"""FastAPI application for the menu designer endpoints."""

import logging
import random

from fastapi import Body, FastAPI, HTTPException, Response
from pydantic import BaseModel

from menu_designer.models.menu_models import GeneratedMenu, MenuConfiguration
from menu_designer.models.session_models import MenuSession
from menu_designer.services.menu_generator import CATEGORY_LABELS, MenuGenerator
from menu_designer.services.session_service import SessionService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class CatalogResponse(BaseModel):
    """Available cuisines and the active generation bounds."""

    cuisines: list[str]
    category_labels: list[str]
    max_categories: int
    max_dishes_per_category: int


def create_app(session_service: SessionService, generator: MenuGenerator) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        session_service: Service managing interactive sessions
        generator: Generator used for stateless menu generation

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Menu Designer API",
        description="Configure a restaurant menu and preview a generated version of it",
        version="1.0.0",
    )

    app.state.session_service = session_service
    app.state.generator = generator

    def require_session(session: MenuSession | None, session_id: str) -> MenuSession:
        if session is None:
            raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
        return session

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/catalog", response_model=CatalogResponse, tags=["Catalog"])
    async def get_catalog() -> CatalogResponse:
        """Describe the cuisines with curated dishes and the count limits."""
        gen: MenuGenerator = app.state.generator
        return CatalogResponse(
            cuisines=list(gen.catalog.cuisine_names),
            category_labels=list(CATEGORY_LABELS),
            max_categories=gen.limits.max_categories,
            max_dishes_per_category=gen.limits.max_dishes_per_category,
        )

    @app.post("/menus/generate", response_model=GeneratedMenu, tags=["Menus"])
    async def generate_menu(
        configuration: MenuConfiguration,
        seed: int | None = None,
    ) -> GeneratedMenu:
        """Generate a menu without creating a session.

        Args:
            configuration: Menu configuration
            seed: Optional seed for a reproducible selection

        Returns:
            The generated menu
        """
        rng = random.Random(seed) if seed is not None else None
        menu: GeneratedMenu = app.state.generator.generate(configuration, rng=rng)
        return menu

    @app.post("/sessions", response_model=MenuSession, status_code=201, tags=["Sessions"])
    async def create_session(
        configuration: MenuConfiguration | None = Body(None),
    ) -> MenuSession:
        """Start a new menu design session."""
        session: MenuSession = app.state.session_service.create_session(configuration)
        return session

    @app.get("/sessions/{session_id}", response_model=MenuSession, tags=["Sessions"])
    async def get_session(session_id: str) -> MenuSession:
        """Get the current configuration and menu of a session.

        Raises:
            HTTPException: If the session does not exist
        """
        return require_session(app.state.session_service.get_session(session_id), session_id)

    @app.put(
        "/sessions/{session_id}/configuration",
        response_model=MenuSession,
        tags=["Sessions"],
    )
    async def update_configuration(
        session_id: str,
        configuration: MenuConfiguration,
    ) -> MenuSession:
        """Replace the session configuration; counts are clamped."""
        session = app.state.session_service.update_configuration(session_id, configuration)
        return require_session(session, session_id)

    @app.post("/sessions/{session_id}/generate", response_model=MenuSession, tags=["Sessions"])
    async def generate_session_menu(
        session_id: str,
        configuration: MenuConfiguration | None = Body(None),
        seed: int | None = None,
    ) -> MenuSession:
        """Generate a new menu for the session, replacing any previous one.

        Args:
            session_id: Session to generate for
            configuration: Submitted configuration, the stored one is used if omitted
            seed: Optional seed for a reproducible selection
        """
        logger.info(f"Menu generation requested for session {session_id}")

        rng = random.Random(seed) if seed is not None else None
        session = app.state.session_service.generate(session_id, configuration, rng=rng)
        return require_session(session, session_id)

    @app.post("/sessions/{session_id}/clear", response_model=MenuSession, tags=["Sessions"])
    async def clear_session_menu(session_id: str) -> MenuSession:
        """Clear the generated menu, keeping the configuration."""
        return require_session(app.state.session_service.clear(session_id), session_id)

    @app.delete("/sessions/{session_id}", status_code=204, tags=["Sessions"])
    async def delete_session(session_id: str) -> Response:
        """Delete a session.

        Raises:
            HTTPException: If the session does not exist
        """
        if not app.state.session_service.delete_session(session_id):
            raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
        return Response(status_code=204)

    return app
