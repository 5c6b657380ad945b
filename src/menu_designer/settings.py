"""Environment driven settings for the menu designer."""

import os
from dataclasses import dataclass

DEFAULT_MAX_CATEGORIES = 12
COMPACT_MAX_CATEGORIES = 8
DEFAULT_MAX_DISHES_PER_CATEGORY = 10
DEFAULT_SESSION_TTL_SECONDS = 3600
DEFAULT_MAX_SESSIONS = 1000


@dataclass(frozen=True)
class GeneratorLimits:
    """Upper bounds applied when clamping menu configuration counts.

    Attributes:
        max_categories: Largest allowed number of categories
        max_dishes_per_category: Largest allowed number of dishes per category
    """

    max_categories: int = DEFAULT_MAX_CATEGORIES
    max_dishes_per_category: int = DEFAULT_MAX_DISHES_PER_CATEGORY

    def __post_init__(self) -> None:
        if self.max_categories < 1:
            raise ValueError("max_categories must be at least 1")
        if self.max_dishes_per_category < 1:
            raise ValueError("max_dishes_per_category must be at least 1")


@dataclass(frozen=True)
class AppSettings:
    """Process-wide settings loaded at startup."""

    log_level: str
    environment: str
    limits: GeneratorLimits
    random_seed: int | None
    exporters_enabled: bool
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    max_sessions: int = DEFAULT_MAX_SESSIONS


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from e


def load_settings() -> AppSettings:
    """Read settings from environment variables.

    Returns:
        AppSettings: Parsed settings

    Raises:
        ValueError: If a numeric variable is malformed or a bound is below 1
    """
    seed_raw = os.getenv("MENU_RANDOM_SEED", "").strip()

    return AppSettings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        environment=os.getenv("ENVIRONMENT", "development"),
        limits=GeneratorLimits(
            max_categories=_get_int("MENU_MAX_CATEGORIES", DEFAULT_MAX_CATEGORIES),
            max_dishes_per_category=_get_int(
                "MENU_MAX_DISHES_PER_CATEGORY", DEFAULT_MAX_DISHES_PER_CATEGORY
            ),
        ),
        random_seed=_get_int("MENU_RANDOM_SEED", 0) if seed_raw else None,
        exporters_enabled=os.getenv("OTEL_EXPORTERS_ENABLED", "false").lower() == "true",
        session_ttl_seconds=_get_int("MENU_SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS),
        max_sessions=_get_int("MENU_MAX_SESSIONS", DEFAULT_MAX_SESSIONS),
    )
