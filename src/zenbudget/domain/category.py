"""Category display metadata."""

from zenbudget.domain.entities import CategoryStyle

# Labels offered by default, in display order
DEFAULT_CATEGORIES: tuple[str, ...] = ("Food", "Rent", "Fun", "Income", "Other")

CATEGORY_STYLES: dict[str, CategoryStyle] = {
    "Food": CategoryStyle(color="#10b981", icon="utensils"),
    "Rent": CategoryStyle(color="#6366f1", icon="home"),
    "Fun": CategoryStyle(color="#8b5cf6", icon="gamepad"),
    "Income": CategoryStyle(color="#06b6d4", icon="money-bill-wave"),
    "Other": CategoryStyle(color="#f59e0b", icon="shopping-bag"),
}

DEFAULT_CATEGORY_STYLE = CategoryStyle(color="#94a3b8", icon="tag")


def get_category_style(category: str) -> CategoryStyle:
    """Get display metadata for a category label.

    Lookup is exact; any label outside the fixed table gets the default style.

    Args:
        category: Category label

    Returns:
        CategoryStyle for the label
    """
    return CATEGORY_STYLES.get(category, DEFAULT_CATEGORY_STYLE)


def is_known_category(category: str) -> bool:
    """Return True if the label has its own entry in the style table."""
    return category in CATEGORY_STYLES
