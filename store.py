"""
store.py
--------

The authoritative in-memory state of the tracker: the expense list (newest
first), the savings goal and the running savings total.  Every change is
written straight through to storage so a restart picks up where the user
left off.

Input validation lives here; nothing invalid is handed to the categorizer
or the insights engine.
"""

import logging
import uuid
from datetime import datetime
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import storage
from categorizer import categorize
from insights import compute_insights
from models import Expense, Number, parse_amount

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base for errors shown to the user. ``title`` and ``message`` are meant for display."""

    def __init__(self, title: str, message: str):
        super().__init__(f"{title}: {message}")
        self.title = title
        self.message = message


class InvalidInputError(StoreError, ValueError):
    """Rejected user input."""


class SaveFailedError(StoreError):
    """Storage refused a write; in-memory state was left as it was."""


class FinanceStore:
    def __init__(self, db: Session):
        self.db = db
        self.expenses: List[Expense] = []
        self.savings_goal: float = 0.0
        self.current_savings: float = 0.0

    def load(self) -> "FinanceStore":
        self.expenses = storage.load_expenses(self.db)
        self.savings_goal = storage.load_number(self.db, storage.SAVINGS_GOAL_KEY)
        self.current_savings = storage.load_number(self.db, storage.CURRENT_SAVINGS_KEY)
        logger.info(f"Loaded {len(self.expenses)} expenses")
        return self

    def _save(self, write, *args):
        try:
            write(self.db, *args)
        except SQLAlchemyError as exc:
            logger.error(f"Could not save changes: {exc}")
            raise SaveFailedError("Save Failed", "Your change could not be saved, please try again") from exc

    def add_expense(self, description: str, amount: Number) -> Expense:
        """Validate, categorize and record a new expense at the top of the list."""
        text = (description or "").strip()
        try:
            value = parse_amount(amount)
        except (TypeError, ValueError):
            value = 0.0

        if not text or value <= 0:
            raise InvalidInputError("Invalid Input", "Please enter a valid description and amount")

        expense = Expense(
            id=uuid.uuid4().hex,
            description=text,
            amount=value,
            category=categorize(description),
            date=datetime.now(),
        )
        updated = [expense] + self.expenses
        self._save(storage.save_expenses, updated)
        self.expenses = updated
        logger.info(f"Added expense {expense.id} ({expense.category}, {expense.amount:.2f})")
        return expense

    def set_goal(self, goal: Number) -> float:
        try:
            value = parse_amount(goal)
        except (TypeError, ValueError):
            value = 0.0

        if value <= 0:
            raise InvalidInputError("Invalid Goal", "Please enter a valid savings goal amount")

        self._save(storage.save_number, storage.SAVINGS_GOAL_KEY, value)
        self.savings_goal = value
        logger.info(f"Savings goal set to {value:.2f}")
        return value

    def add_savings(self, amount: Number) -> float:
        """Add to the running savings total and return the new total."""
        try:
            value = parse_amount(amount)
        except (TypeError, ValueError):
            value = -1.0

        if value < 0:
            raise InvalidInputError("Invalid Amount", "Please enter a valid savings amount")

        total = self.current_savings + value
        self._save(storage.save_number, storage.CURRENT_SAVINGS_KEY, total)
        self.current_savings = total
        logger.info(f"Savings increased by {value:.2f} to {total:.2f}")
        return total

    def insights(self) -> dict:
        return compute_insights(self.expenses)
