"""Menu generation engine.

Category names are fixed by position. Dishes are drawn uniformly at random
from the catalog entry for the requested cuisine and category, falling back
to generic dishes when the catalog has nothing for that pair.
"""

import logging
import random
import time
from collections.abc import Sequence

from menu_designer.catalog.curated_dishes import (
    FALLBACK_CATEGORY,
    Catalog,
    DishCatalog,
    FallbackCatalog,
)
from menu_designer.models.menu_models import (
    DEFAULT_CUISINE_TYPE,
    DEFAULT_RESTAURANT_NAME,
    Dish,
    GeneratedMenu,
    MenuCategory,
    MenuConfiguration,
)
from menu_designer.observability.decorators import traced
from menu_designer.observability.metrics import record_fallback_selection, record_menu_generated
from menu_designer.settings import GeneratorLimits

logger = logging.getLogger(__name__)

CATEGORY_LABELS: tuple[str, ...] = (
    "Starters",
    "Main Course",
    "Desserts",
    "Beverages",
    "Appetizers",
    "Soups",
    "Salads",
    "Specialties",
    "Signature Dishes",
    "Seasonal Menu",
    "Chef's Selection",
    "Premium Selection",
)


def clamp(value: int, lower: int, upper: int) -> int:
    """Restrict value to the closed range [lower, upper]."""
    return max(lower, min(value, upper))


def clamp_configuration(config: MenuConfiguration, limits: GeneratorLimits) -> MenuConfiguration:
    """Return a copy of config with both counts clamped to limits."""
    category_count = clamp(config.category_count, 1, limits.max_categories)
    dishes_per_category = clamp(config.dishes_per_category, 1, limits.max_dishes_per_category)

    if (
        category_count == config.category_count
        and dishes_per_category == config.dishes_per_category
    ):
        return config

    return config.model_copy(
        update={"category_count": category_count, "dishes_per_category": dishes_per_category}
    )


def category_label(index: int) -> str:
    """Label for the category at a zero-based position.

    Args:
        index: Zero-based category index

    Returns:
        str: The fixed label at that position, or "Category {index + 1}"
    """
    if 0 <= index < len(CATEGORY_LABELS):
        return CATEGORY_LABELS[index]
    return f"Category {index + 1}"


def _candidates(
    cuisine: str, category: str, catalog: Catalog, fallback: FallbackCatalog
) -> tuple[Sequence[Dish], bool]:
    curated = catalog.get(cuisine, {}).get(category)
    if curated:
        return curated, False
    return fallback.get(category) or fallback[FALLBACK_CATEGORY], True


def select_dish(
    cuisine: str,
    category: str,
    catalog: Catalog,
    fallback: FallbackCatalog,
    rng: random.Random,
) -> Dish:
    """Pick one dish for a cuisine and category.

    Args:
        cuisine: Cuisine name, matched exactly against the catalog
        category: Category label
        catalog: cuisine -> category -> candidate dishes
        fallback: category -> candidate dishes
        rng: Random source used for the uniform choice

    Returns:
        Dish: A dish from the catalog entry, or from the fallback when the
        catalog has no candidates for this cuisine and category
    """
    candidates, from_fallback = _candidates(cuisine, category, catalog, fallback)
    if from_fallback:
        record_fallback_selection(category)
    return rng.choice(candidates)


@traced("generate_menu")
def generate_menu(
    config: MenuConfiguration,
    catalog: Catalog,
    fallback: FallbackCatalog,
    rng: random.Random,
    limits: GeneratorLimits | None = None,
) -> GeneratedMenu:
    """Build a complete menu from a configuration.

    Counts are clamped again here so callers that skipped clamping still get
    a well-formed menu.

    Args:
        config: Menu configuration
        catalog: cuisine -> category -> candidate dishes
        fallback: category -> candidate dishes
        rng: Random source for dish selection
        limits: Count bounds, defaults to GeneratorLimits()

    Returns:
        GeneratedMenu: New menu with placeholder names applied
    """
    started = time.perf_counter()
    config = clamp_configuration(config, limits or GeneratorLimits())

    categories: list[MenuCategory] = []
    for i in range(config.category_count):
        label = category_label(i)
        dishes = tuple(
            select_dish(config.cuisine_type, label, catalog, fallback, rng)
            for _ in range(config.dishes_per_category)
        )
        categories.append(MenuCategory(name=label, dishes=dishes))

    menu = GeneratedMenu(
        restaurant_name=config.restaurant_name or DEFAULT_RESTAURANT_NAME,
        cuisine_type=config.cuisine_type or DEFAULT_CUISINE_TYPE,
        categories=tuple(categories),
    )

    record_menu_generated(menu.cuisine_type, menu.dish_count, time.perf_counter() - started)
    logger.info(
        f"Generated menu for '{menu.restaurant_name}' ({menu.cuisine_type}): "
        f"{len(menu.categories)} categories, {menu.dish_count} dishes"
    )
    return menu


class MenuGenerator:
    """Binds a catalog, limits and random source for repeated generation."""

    def __init__(
        self,
        catalog: DishCatalog,
        limits: GeneratorLimits | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            catalog: Validated dish catalog
            limits: Count bounds, defaults to GeneratorLimits()
            rng: Random source; an unseeded random.Random() when omitted
        """
        self.catalog = catalog
        self.limits = limits or GeneratorLimits()
        self.rng = rng or random.Random()

    def clamp(self, config: MenuConfiguration) -> MenuConfiguration:
        """Clamp config counts to this generator's limits."""
        return clamp_configuration(config, self.limits)

    def generate(
        self, config: MenuConfiguration, rng: random.Random | None = None
    ) -> GeneratedMenu:
        """Generate a menu, optionally with a one-off random source.

        Args:
            config: Menu configuration
            rng: Overrides the generator's own random source for this call

        Returns:
            GeneratedMenu: The new menu
        """
        return generate_menu(
            config,
            self.catalog.curated,
            self.catalog.fallback,
            rng or self.rng,
            self.limits,
        )
