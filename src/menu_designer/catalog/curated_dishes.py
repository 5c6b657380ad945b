"""Static dish catalog.

Curated dishes exist for three cuisines. Anything else falls back to a small
set of generic dishes keyed by category, with "Main Course" as the last resort.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from menu_designer.models.menu_models import Dish

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "Main Course"

Catalog = Mapping[str, Mapping[str, Sequence[Dish]]]
FallbackCatalog = Mapping[str, Sequence[Dish]]


class CatalogError(ValueError):
    """Raised when a catalog cannot guarantee a dish for every lookup."""


def format_inr(amount: int | Decimal) -> str:
    """Format an amount as Indian rupees using en-IN digit grouping.

    Args:
        amount: Price in rupees

    Returns:
        str: Formatted price, e.g. 125000 -> '₹1,25,000.00'
    """
    value = Decimal(amount).quantize(Decimal("0.01"))
    sign = "-" if value < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join([*groups, tail])

    return f"{sign}₹{whole}.{fraction}"


def _dish(name: str, description: str, amount: int) -> Dish:
    return Dish(name=name, description=description, price=format_inr(amount))


@dataclass(frozen=True)
class DishCatalog:
    """Curated dishes plus the fallback mapping, validated on construction.

    Attributes:
        curated: cuisine -> category -> candidate dishes
        fallback: category -> candidate dishes
    """

    curated: Catalog
    fallback: FallbackCatalog
    cuisine_names: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not self.fallback.get(FALLBACK_CATEGORY):
            raise CatalogError(
                f"Fallback catalog must provide at least one '{FALLBACK_CATEGORY}' dish"
            )
        object.__setattr__(self, "cuisine_names", tuple(self.curated.keys()))

    def categories_for(self, cuisine: str) -> tuple[str, ...]:
        """List the curated categories for a cuisine (empty if unknown)."""
        return tuple(self.curated.get(cuisine, {}).keys())


CURATED_DISHES: dict[str, dict[str, tuple[Dish, ...]]] = {
    "Italian": {
        "Starters": (
            _dish(
                "Burrata Caprese",
                "Creamy burrata, heirloom tomatoes, basil oil, aged balsamic",
                850,
            ),
            _dish("Antipasto Royale", "Cured meats, cheeses, marinated vegetables", 1200),
            _dish("Arancini Trio", "Crispy risotto balls: truffle, mushroom, spinach", 750),
        ),
        "Main Course": (
            _dish("Osso Buco Milanese", "Braised veal shank, saffron risotto, gremolata", 2400),
            _dish("Lobster Ravioli", "Handmade pasta, champagne cream sauce", 2200),
            _dish("Bistecca Fiorentina", "Grilled T-bone, rosemary, Tuscan herbs", 2800),
        ),
        "Desserts": (
            _dish("Tiramisu Perfetto", "Espresso-soaked ladyfingers, mascarpone", 650),
            _dish("Gelato Affogato", "Vanilla gelato with hot espresso", 550),
        ),
    },
    "Japanese": {
        "Starters": (
            _dish("Tuna Tataki", "Seared tuna, ponzu, daikon, microgreens", 1400),
            _dish("Gyoza Selection", "Pork, shrimp and vegetable dumplings", 850),
            _dish("Miso Soup Premium", "Wakame, tofu, seasonal mushrooms", 450),
        ),
        "Main Course": (
            _dish("Omakase Sushi", "Chef's 12-piece premium nigiri & rolls", 3200),
            _dish("Wagyu Teppanyaki", "A5 Wagyu, grilled with seasonal vegetables", 4500),
            _dish("Black Cod Miso", "Miso-marinated cod, shiitake, bok choy", 2600),
        ),
        "Desserts": (
            _dish("Matcha Mille-feuille", "Delicate pastry, matcha cream, red bean", 750),
            _dish("Mochi Ice Cream", "Trio of seasonal flavors", 550),
        ),
    },
    "French": {
        "Starters": (
            _dish("Foie Gras Terrine", "Fig compote, toasted brioche", 1800),
            _dish("Escargots de Bourgogne", "Burgundy snails, garlic–parsley butter", 1200),
            _dish("Soupe à l'Oignon", "French onion soup, Gruyère crouton", 650),
        ),
        "Main Course": (
            _dish("Coq au Vin", "Chicken braised in red wine, mushrooms", 2200),
            _dish("Bouillabaisse Marseillaise", "Saffron fish stew, rouille, bread", 2800),
            _dish("Duck Confit", "Slow-cooked leg, garlic potatoes, cherry gastrique", 2400),
        ),
        "Desserts": (
            _dish("Crème Brûlée", "Vanilla custard, caramelized sugar", 750),
            _dish("Tarte Tatin", "Upside-down apple tart, cinnamon ice cream", 650),
        ),
    },
}

FALLBACK_DISHES: dict[str, tuple[Dish, ...]] = {
    "Starters": (
        _dish("Chef's Special Appetizer", "Seasonal ingredients with artistic flair", 750),
        _dish("Artisan Soup", "House-made soup with local produce", 550),
    ),
    "Main Course": (
        _dish("Signature Entrée", "Classic technique, modern flavors", 1800),
        _dish("Premium Selection", "Curated seasonal specialty", 2200),
    ),
    "Desserts": (_dish("Decadent Finale", "Exquisite dessert to end your meal", 650),),
    "Beverages": (
        _dish("Craft Cocktail", "Artisanal blend with premium spirits", 750),
        _dish("Premium Wine", "Sommelier-selected pairing", 1200),
    ),
}


def build_default_catalog() -> DishCatalog:
    """Create the built-in catalog.

    Returns:
        DishCatalog: Validated catalog of curated and fallback dishes
    """
    catalog = DishCatalog(curated=CURATED_DISHES, fallback=FALLBACK_DISHES)
    logger.info(f"Dish catalog loaded with cuisines: {', '.join(catalog.cuisine_names)}")
    return catalog
