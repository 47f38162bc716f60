import pytest

from categorizer import CATEGORIES
from dashboard import (
    CATEGORY_COLORS,
    cat_spend,
    category_color,
    display_progress,
    format_currency,
    savings_progress,
    savings_remaining,
    total_spent,
)


def test_every_category_has_a_color():
    assert set(CATEGORY_COLORS) == set(CATEGORIES)


def test_unknown_category_falls_back_to_other():
    assert category_color("Pets") == CATEGORY_COLORS["Other"]
    assert category_color(None) == CATEGORY_COLORS["Other"]
    assert category_color("Shopping") == CATEGORY_COLORS["Shopping"]


def test_format_currency():
    assert format_currency(4.5) == "$4.50"
    assert format_currency(1234.567) == "$1234.57"


def test_savings_progress():
    assert savings_progress(0, 50) == 0
    assert savings_progress(200, 50) == pytest.approx(25.0)
    assert savings_progress(100, 150) == pytest.approx(150.0)


def test_display_progress_is_clamped():
    assert display_progress(100, 150) == 100.0
    assert display_progress(100, 40) == pytest.approx(40.0)
    assert display_progress(0, 40) == 0.0


def test_savings_remaining():
    assert savings_remaining(100, 40) == 60
    assert savings_remaining(100, 140) == -40


def test_total_spent(make_expenses):
    assert total_spent([]) == 0
    assert total_spent(make_expenses([(10, "Other"), (2.5, "Education")])) == pytest.approx(12.5)


def test_cat_spend_chart(make_expenses):
    fig = cat_spend(make_expenses([(10, "Other"), (5, "Education"), (5, "Other")]))
    assert fig.layout.title.text == "Spending by Category"
    assert sorted(fig.data[0].labels) == ["Education", "Other"]
