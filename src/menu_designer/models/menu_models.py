"""Menu data models.

These models describe the configuration a user submits and the menu document
generated from it. All of them are frozen: a new submission always produces a
new GeneratedMenu rather than mutating an existing one.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RESTAURANT_NAME = "Fine Dining Restaurant"
DEFAULT_CUISINE_TYPE = "International"


class Dish(BaseModel):
    """A single catalog dish."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Dish name")
    description: str = Field(..., description="Short dish description")
    price: str = Field(..., description="Formatted price, e.g. '₹1,200.00'")


class MenuCategory(BaseModel):
    """A named section of a generated menu."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Category label")
    dishes: tuple[Dish, ...] = Field(default=(), description="Dishes in selection order")


class MenuConfiguration(BaseModel):
    """User supplied settings for generating a menu.

    Counts are accepted as-is and clamped later; empty names are allowed and
    replaced by placeholders in the generated menu.
    """

    model_config = ConfigDict(frozen=True)

    restaurant_name: str = Field(default="", description="Restaurant name, may be empty")
    cuisine_type: str = Field(default="Italian", description="Cuisine to draw dishes from")
    category_count: int = Field(default=3, description="Requested number of categories")
    dishes_per_category: int = Field(default=3, description="Requested dishes per category")


class GeneratedMenu(BaseModel):
    """A fully assembled menu document."""

    model_config = ConfigDict(frozen=True)

    restaurant_name: str = Field(..., description="Restaurant name with placeholder applied")
    cuisine_type: str = Field(..., description="Cuisine type with placeholder applied")
    categories: tuple[MenuCategory, ...] = Field(default=(), description="Categories in order")

    @property
    def dish_count(self) -> int:
        """Total number of dishes across all categories."""
        return sum(len(category.dishes) for category in self.categories)
