"""Tests for category display metadata."""

import pytest

from zenbudget.domain.category import (
    CATEGORY_STYLES,
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_STYLE,
    get_category_style,
    is_known_category,
)
from zenbudget.domain.entities import CategoryStyle


@pytest.mark.parametrize(
    "category, color, icon",
    [
        ("Food", "#10b981", "utensils"),
        ("Rent", "#6366f1", "home"),
        ("Fun", "#8b5cf6", "gamepad"),
        ("Income", "#06b6d4", "money-bill-wave"),
        ("Other", "#f59e0b", "shopping-bag"),
    ],
)
def test_known_category_styles(category, color, icon):
    assert get_category_style(category) == CategoryStyle(color=color, icon=icon)
    assert is_known_category(category)


@pytest.mark.parametrize("category", ["Transport", "food", "", "Food & Dining"])
def test_unknown_category_falls_back_to_default(category):
    style = get_category_style(category)
    assert style == DEFAULT_CATEGORY_STYLE
    assert style.color == "#94a3b8"
    assert style.icon == "tag"
    assert not is_known_category(category)


def test_default_categories_match_style_table():
    assert DEFAULT_CATEGORIES == ("Food", "Rent", "Fun", "Income", "Other")
    assert set(DEFAULT_CATEGORIES) == set(CATEGORY_STYLES)
