"""
Key/value persistence that mirrors browser local storage.

Values are always stored as text: the expense list as a JSON array (dates as
ISO strings) and the savings figures as decimal text.
"""

import json
import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import StorageItem
from models import Expense, parse_amount

logger = logging.getLogger(__name__)

EXPENSES_KEY = "expenses"
SAVINGS_GOAL_KEY = "savingsGoal"
CURRENT_SAVINGS_KEY = "currentSavings"


def get_item(db: Session, key: str) -> Optional[str]:
    item = db.get(StorageItem, key)
    return item.value if item else None


def set_item(db: Session, key: str, value: str) -> None:
    item = db.get(StorageItem, key)
    if item is None:
        db.add(StorageItem(key=key, value=value))
    else:
        item.value = value
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def save_expenses(db: Session, expenses: List[Expense]) -> None:
    payload = [e.model_dump(mode="json") for e in expenses]
    set_item(db, EXPENSES_KEY, json.dumps(payload))


def load_expenses(db: Session) -> List[Expense]:
    """
    Restore the saved expense list in its stored (newest-first) order.

    A corrupt payload is logged and treated as "nothing saved" so the app can
    still start.
    """
    raw = get_item(db, EXPENSES_KEY)
    if not raw:
        return []

    try:
        return [Expense.model_validate(entry) for entry in json.loads(raw)]
    except (json.JSONDecodeError, TypeError, ValidationError) as exc:
        logger.warning(f"Discarding unreadable saved expenses: {exc}")
        return []


def save_number(db: Session, key: str, value: float) -> None:
    set_item(db, key, str(value))


def load_number(db: Session, key: str, default: float = 0.0) -> float:
    """Savings figures are finite and never negative; anything else falls back to ``default``."""
    raw = get_item(db, key)
    if raw is None:
        return default
    try:
        value = parse_amount(raw)
    except ValueError:
        value = -1.0
    if value < 0:
        logger.warning(f"Discarding unreadable value for {key!r}: {raw!r}")
        return default
    return value
