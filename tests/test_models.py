from datetime import datetime

import pytest
from pydantic import ValidationError

from models import Expense, parse_amount


def _expense(**overrides):
    data = dict(
        id="e1",
        description="Bus pass",
        amount=20.0,
        category="Transportation",
        date=datetime(2024, 6, 1, 8, 0),
    )
    data.update(overrides)
    return Expense(**data)


def test_expense_fields_cannot_be_reassigned():
    expense = _expense()
    with pytest.raises(ValidationError):
        expense.amount = 99.0
    with pytest.raises(ValidationError):
        expense.category = "Other"
    assert expense.amount == 20.0


@pytest.mark.parametrize("amount", [0, -0.01, -50])
def test_expense_amount_must_be_positive(amount):
    with pytest.raises(ValidationError):
        _expense(amount=amount)


def test_expense_description_must_not_be_empty():
    with pytest.raises(ValidationError):
        _expense(description="")


def test_parse_amount_rejects_non_finite():
    for raw in ["nan", "inf", float("-inf")]:
        with pytest.raises(ValueError):
            parse_amount(raw)
    with pytest.raises(ValueError):
        parse_amount(True)
    assert parse_amount(" 4.25 ") == 4.25
    assert parse_amount(3) == 3.0
