"""Custom metrics for the menu designer."""

from opentelemetry import metrics

meter = metrics.get_meter("menu-designer")

menus_generated_counter = meter.create_counter(
    name="menus_generated_total",
    description="Total number of generated menus by cuisine",
    unit="1",
)

fallback_selection_counter = meter.create_counter(
    name="fallback_dish_selections_total",
    description="Dish selections served from the fallback catalog, by category",
    unit="1",
)

generation_duration_histogram = meter.create_histogram(
    name="menu_generation_duration_seconds",
    description="Duration of menu generation",
    unit="s",
)

menu_size_histogram = meter.create_histogram(
    name="menu_dish_count",
    description="Number of dishes per generated menu",
    unit="1",
)

active_sessions = meter.create_up_down_counter(
    name="menu_sessions_active",
    description="Current number of in-memory menu sessions",
    unit="1",
)


def record_menu_generated(cuisine: str, dish_count: int, duration_seconds: float) -> None:
    """Record a completed menu generation.

    Args:
        cuisine: Cuisine the menu was generated for
        dish_count: Total dishes in the menu
        duration_seconds: Time taken to build the menu
    """
    menus_generated_counter.add(1, {"cuisine": cuisine})
    generation_duration_histogram.record(duration_seconds, {"cuisine": cuisine})
    menu_size_histogram.record(dish_count, {"cuisine": cuisine})


def record_fallback_selection(category: str) -> None:
    """Record a dish drawn from the fallback catalog.

    Args:
        category: Category label the dish was selected for
    """
    fallback_selection_counter.add(1, {"category": category})


def record_session_change(change: int) -> None:
    """Record sessions being created (+1) or deleted (-1)."""
    active_sessions.add(change)
