"""Shared pytest fixtures and configuration for all tests."""

import os
import random

import pytest

# Entry-point modules skip app creation when imported under test
os.environ.setdefault("ENVIRONMENT", "test")

from menu_designer.catalog.curated_dishes import DishCatalog, build_default_catalog  # noqa: E402
from menu_designer.models.menu_models import MenuConfiguration  # noqa: E402
from menu_designer.repositories.session_repository import SessionRepository  # noqa: E402
from menu_designer.services.menu_generator import MenuGenerator  # noqa: E402
from menu_designer.services.session_service import SessionService  # noqa: E402
from menu_designer.settings import GeneratorLimits  # noqa: E402


@pytest.fixture
def catalog() -> DishCatalog:
    """Fixture providing the built-in dish catalog."""
    return build_default_catalog()


@pytest.fixture
def rng() -> random.Random:
    """Fixture providing a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def limits() -> GeneratorLimits:
    """Fixture providing the default generation bounds."""
    return GeneratorLimits()


@pytest.fixture
def italian_config() -> MenuConfiguration:
    """Fixture providing a three-by-three Italian configuration with no name."""
    return MenuConfiguration(
        restaurant_name="",
        cuisine_type="Italian",
        category_count=3,
        dishes_per_category=3,
    )


@pytest.fixture
def generator(catalog: DishCatalog, limits: GeneratorLimits, rng: random.Random) -> MenuGenerator:
    """Fixture providing a seeded menu generator."""
    return MenuGenerator(catalog=catalog, limits=limits, rng=rng)


@pytest.fixture
def session_service(generator: MenuGenerator) -> SessionService:
    """Fixture providing a session service over an empty repository."""
    return SessionService(repository=SessionRepository(), generator=generator)
