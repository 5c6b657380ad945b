"""Menu session state and the events that drive it.

A session pairs the configuration being edited with the last generated menu
(or None). Sessions are replaced, never mutated, by applying events.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from menu_designer.models.menu_models import GeneratedMenu, MenuConfiguration


class MenuSession(BaseModel):
    """State of one interactive menu design session."""

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(..., description="Unique session identifier")
    configuration: MenuConfiguration = Field(
        default_factory=MenuConfiguration, description="Current form configuration"
    )
    menu: GeneratedMenu | None = Field(None, description="Last generated menu, None if cleared")
    created_at: datetime = Field(..., description="Session creation timestamp")
    updated_at: datetime = Field(..., description="Timestamp of the last applied event")

    @property
    def has_menu(self) -> bool:
        """Whether a menu has been generated and not cleared."""
        return self.menu is not None


class UpdateConfigurationEvent(BaseModel):
    """Replace the session configuration without touching the menu."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["update_configuration"] = "update_configuration"
    configuration: MenuConfiguration


class GenerateMenuEvent(BaseModel):
    """Generate a new menu, optionally adopting a submitted configuration first."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["generate"] = "generate"
    configuration: MenuConfiguration | None = None


class ClearMenuEvent(BaseModel):
    """Drop the generated menu; the configuration persists."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["clear"] = "clear"


SessionEvent = UpdateConfigurationEvent | GenerateMenuEvent | ClearMenuEvent
