from typing import Iterable, List, Optional, Tuple

import pandas as pd

from categorizer import FOOD_AND_DINING
from models import Expense

# Alert thresholds
HIGH_AVERAGE_SPEND = 50
FOOD_SHARE_LIMIT = 0.4
RECENT_WINDOW = 5
HIGH_VALUE_PURCHASE = 100

PREDICTION_WINDOW = 3
MIN_EXPENSES_FOR_PREDICTION = 2
TOP_CATEGORY_COUNT = 5

HIGH_SPENDING_ALERT = "⚠️ High daily spending detected - consider budgeting"
FOOD_SPENDING_ALERT = "🍔 High food spending - try meal planning to save money"
HIGH_VALUE_ALERT = "💳 Recent high-value purchase detected - monitor spending"
HEALTHY_ALERT = "✅ Your spending looks healthy - keep it up!"


def expenses_to_df(expenses: Iterable[Expense]) -> pd.DataFrame:
    """Flatten expenses into a DataFrame, keeping the caller's (newest-first) order."""
    rows = [
        {
            "Date": e.date,
            "Description": e.description,
            "Amount": float(e.amount),
            "Category": e.category,
        }
        for e in expenses
    ]
    if not rows:
        return pd.DataFrame(columns=["Date", "Description", "Amount", "Category"])
    return pd.DataFrame(rows)


def predict_next_expense(df: pd.DataFrame) -> Optional[float]:
    """Average of the three most recent amounts; None until there are two expenses."""

    if len(df) < MIN_EXPENSES_FOR_PREDICTION:
        return None

    recent = df["Amount"].head(PREDICTION_WINDOW)
    return float(recent.mean())


def generate_alerts(df: pd.DataFrame) -> List[str]:
    """
    Rule-based advisories about spending behaviour.

    Checks run in a fixed order and can all fire together.  The healthy
    message is only added when none of the others did.

    Note that the "daily" figure is really total / number of expenses; no
    bucketing by calendar day happens here.
    """
    alerts: List[str] = []

    if df.empty:
        return alerts

    count = len(df)
    avg_daily = df["Amount"].sum() / count
    if avg_daily > HIGH_AVERAGE_SPEND:
        alerts.append(HIGH_SPENDING_ALERT)

    food_count = int((df["Category"] == FOOD_AND_DINING).sum())
    if food_count > count * FOOD_SHARE_LIMIT:
        alerts.append(FOOD_SPENDING_ALERT)

    recent_expensive = (df["Amount"].head(RECENT_WINDOW) > HIGH_VALUE_PURCHASE).any()
    if recent_expensive:
        alerts.append(HIGH_VALUE_ALERT)

    if not alerts:
        alerts.append(HEALTHY_ALERT)

    return alerts


def top_categories(df: pd.DataFrame, limit: int = TOP_CATEGORY_COUNT) -> List[Tuple[str, float]]:
    """Categories ranked by total spend, highest first. Equal totals sort alphabetically."""

    if df.empty:
        return []

    # groupby sorts the index by label; a stable sort keeps that order for ties
    by_cat = (
        df.groupby("Category")["Amount"]
        .sum()
        .sort_values(ascending=False, kind="mergesort")
        .head(limit)
    )
    return [(str(category), float(total)) for category, total in by_cat.items()]


def compute_insights(expenses: Iterable[Expense]) -> dict:
    """Prediction, alerts and top categories for a newest-first expense list."""

    df = expenses_to_df(expenses)
    return {
        "prediction": predict_next_expense(df),
        "alerts": generate_alerts(df),
        "top_categories": top_categories(df),
    }
