from datetime import datetime, timedelta
from itertools import count

import pytest
from sqlalchemy.orm import sessionmaker

from database import init_db, make_engine
from models import Expense


@pytest.fixture
def db(tmp_path):
    """Session bound to a throwaway SQLite file."""
    engine = make_engine(f"sqlite:///{tmp_path / 'finance_test.db'}")
    init_db(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def make_expense():
    ids = count(1)
    base = datetime(2024, 3, 1, 12, 0)

    def _make(amount, category="Other", description="something"):
        n = next(ids)
        return Expense(
            id=f"exp-{n}",
            description=description,
            amount=amount,
            category=category,
            date=base + timedelta(minutes=n),
        )

    return _make


@pytest.fixture
def make_expenses(make_expense):
    """Build a newest-first list from (amount, category) pairs."""

    def _make(pairs):
        return [make_expense(amount, category) for amount, category in pairs]

    return _make
