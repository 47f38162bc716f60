import math
from datetime import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float, str]


class Expense(BaseModel):
    """A single recorded spending event. Never edited once created."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str = Field(min_length=1)
    amount: float = Field(gt=0)
    category: str
    date: datetime


def parse_amount(value: Number) -> float:
    """Parse numeric input the way a form field would; raises ValueError on junk."""
    if isinstance(value, bool):
        raise ValueError("booleans are not amounts")
    if isinstance(value, str):
        value = value.strip()
    amount = float(value)
    if not math.isfinite(amount):
        raise ValueError(f"non-finite amount: {value!r}")
    return amount
