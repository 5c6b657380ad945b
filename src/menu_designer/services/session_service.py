"""Session service for the interactive menu design flow."""

import logging
import random
import uuid
from datetime import UTC, datetime

from menu_designer.models.menu_models import MenuConfiguration
from menu_designer.models.session_models import (
    ClearMenuEvent,
    GenerateMenuEvent,
    MenuSession,
    SessionEvent,
    UpdateConfigurationEvent,
)
from menu_designer.observability.decorators import traced
from menu_designer.observability.metrics import record_session_change
from menu_designer.repositories.session_repository import SessionRepository
from menu_designer.services.menu_generator import MenuGenerator

logger = logging.getLogger(__name__)


def apply_event(
    session: MenuSession,
    event: SessionEvent,
    generator: MenuGenerator,
    rng: random.Random | None = None,
) -> MenuSession:
    """Compute the session that results from applying an event.

    The input session is left untouched.

    Args:
        session: Current session state
        event: Event to apply
        generator: Generator used for GenerateMenuEvent
        rng: Optional one-off random source for generation

    Returns:
        MenuSession: The new session state
    """
    now = datetime.now(UTC)

    if isinstance(event, UpdateConfigurationEvent):
        return session.model_copy(
            update={"configuration": generator.clamp(event.configuration), "updated_at": now}
        )

    if isinstance(event, GenerateMenuEvent):
        configuration = generator.clamp(event.configuration or session.configuration)
        menu = generator.generate(configuration, rng=rng)
        return session.model_copy(
            update={"configuration": configuration, "menu": menu, "updated_at": now}
        )

    if isinstance(event, ClearMenuEvent):
        return session.model_copy(update={"menu": None, "updated_at": now})

    raise TypeError(f"Unsupported session event: {type(event).__name__}")


class SessionService:
    """Service for creating sessions and applying form actions to them.

    Every action loads the session, applies one event and stores the result,
    so a stored session is always replaced wholesale.
    """

    def __init__(self, repository: SessionRepository, generator: MenuGenerator) -> None:
        """Initialize the SessionService.

        Args:
            repository: Session storage
            generator: Menu generator shared by all sessions
        """
        self.repository = repository
        self.generator = generator

    def create_session(self, configuration: MenuConfiguration | None = None) -> MenuSession:
        """Start a new session with no generated menu.

        Args:
            configuration: Initial configuration, defaults to MenuConfiguration()

        Returns:
            MenuSession: The stored session
        """
        now = datetime.now(UTC)
        session = MenuSession(
            session_id=f"sess_{uuid.uuid4().hex[:12]}",
            configuration=self.generator.clamp(configuration or MenuConfiguration()),
            created_at=now,
            updated_at=now,
        )
        self.repository.save_session(session)
        record_session_change(1)

        logger.info(f"Created menu session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> MenuSession | None:
        """Get a session by ID, None if unknown."""
        return self.repository.get_session(session_id)

    def update_configuration(
        self, session_id: str, configuration: MenuConfiguration
    ) -> MenuSession | None:
        """Replace a session's configuration.

        Returns:
            The updated session, or None if the session does not exist
        """
        return self._dispatch(session_id, UpdateConfigurationEvent(configuration=configuration))

    @traced("generate_session_menu")
    def generate(
        self,
        session_id: str,
        configuration: MenuConfiguration | None = None,
        rng: random.Random | None = None,
    ) -> MenuSession | None:
        """Generate a fresh menu for a session.

        Args:
            session_id: Session to generate for
            configuration: Submitted configuration; the stored one is used if omitted
            rng: Optional one-off random source

        Returns:
            The updated session, or None if the session does not exist
        """
        return self._dispatch(session_id, GenerateMenuEvent(configuration=configuration), rng=rng)

    def clear(self, session_id: str) -> MenuSession | None:
        """Clear a session's generated menu, keeping its configuration.

        Returns:
            The updated session, or None if the session does not exist
        """
        return self._dispatch(session_id, ClearMenuEvent())

    def delete_session(self, session_id: str) -> bool:
        """Delete a session.

        Returns:
            bool: True if deleted, False if it did not exist
        """
        deleted = self.repository.delete_session(session_id)
        if deleted:
            record_session_change(-1)
            logger.info(f"Deleted menu session {session_id}")
        return deleted

    def _dispatch(
        self,
        session_id: str,
        event: SessionEvent,
        rng: random.Random | None = None,
    ) -> MenuSession | None:
        session = self.repository.get_session(session_id)
        if session is None:
            logger.warning(f"Session {session_id} not found for {event.kind}")
            return None

        updated = apply_event(session, event, self.generator, rng=rng)
        self.repository.save_session(updated)

        logger.debug(f"Applied {event.kind} to session {session_id}")
        return updated
