import pytest

from categorizer import CATEGORIES, CATEGORY_RULES, categorize


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Lunch with team", "Food & Dining"),
        ("Starbucks coffee", "Food & Dining"),
        ("Uber to airport", "Transportation"),
        ("Gas station", "Transportation"),
        ("Textbook", "Education"),
        ("Online course", "Education"),
        ("Movie tickets", "Entertainment"),
        ("Concert", "Entertainment"),
        ("Monthly rent", "Bills & Utilities"),
        ("Internet bill", "Bills & Utilities"),
        ("xyz", "Other"),
        ("", "Other"),
    ],
)
def test_categorize_keywords(description, expected):
    assert categorize(description) == expected


def test_first_matching_rule_wins():
    assert categorize("coffee and bus") == "Food & Dining"
    assert categorize("bus to school") == "Transportation"


def test_case_and_whitespace_are_ignored():
    assert categorize("COFFEE") == "Food & Dining"
    assert categorize("   Phone   ") == "Bills & Utilities"


def test_keywords_match_as_substrings():
    # "business" contains "bus", "parent" contains "rent"
    assert categorize("business dinner") == "Transportation"
    assert categorize("gift for parent") == "Bills & Utilities"


def test_result_is_always_a_known_category():
    for text in ["", "???", "food", "GAME night", "random words here", "ümlaut"]:
        assert categorize(text) in CATEGORIES


def test_is_deterministic():
    assert categorize("coffee") == categorize("coffee")


def test_category_set_has_eight_labels():
    assert len(CATEGORIES) == 8
    assert len(set(CATEGORIES)) == 8


def test_shopping_and_health_have_no_rules():
    # Known gap: these labels are only ever assigned by hand.
    ruled = {category for _, category in CATEGORY_RULES}
    assert "Shopping" not in ruled
    assert "Health & Fitness" not in ruled
    assert categorize("shopping mall") == "Other"
    assert categorize("gym membership") == "Other"
