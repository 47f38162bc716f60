"""
categorizer.py
--------------

Keyword based categorization of expense descriptions.

Rules are checked top to bottom and the first group with a keyword present
anywhere in the lower-cased description wins, so "coffee and bus" lands in
Food & Dining rather than Transportation.  Anything that matches nothing is
filed under ``Other``.
"""

from typing import List, Tuple

FOOD_AND_DINING = "Food & Dining"
TRANSPORTATION = "Transportation"
SHOPPING = "Shopping"
ENTERTAINMENT = "Entertainment"
BILLS_AND_UTILITIES = "Bills & Utilities"
EDUCATION = "Education"
HEALTH_AND_FITNESS = "Health & Fitness"
OTHER = "Other"

CATEGORIES = (
    FOOD_AND_DINING,
    TRANSPORTATION,
    SHOPPING,
    ENTERTAINMENT,
    BILLS_AND_UTILITIES,
    EDUCATION,
    HEALTH_AND_FITNESS,
    OTHER,
)

# Order matters: first match wins.
# Shopping and Health & Fitness have no keywords and are only ever assigned by hand.
CATEGORY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("food", "restaurant", "coffee", "lunch"), FOOD_AND_DINING),
    (("bus", "uber", "gas", "transport"), TRANSPORTATION),
    (("book", "tuition", "course", "school"), EDUCATION),
    (("movie", "game", "concert"), ENTERTAINMENT),
    (("rent", "electric", "internet", "phone"), BILLS_AND_UTILITIES),
]


def categorize(description: str) -> str:
    """Return the category label for a free-text expense description."""
    lowered = (description or "").lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return OTHER
