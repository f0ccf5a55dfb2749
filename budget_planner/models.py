"""Record types held by the budget planner.

Each record is a plain dataclass.  ``to_dict`` produces the persisted
shape (camelCase keys, ISO dates) and ``from_dict`` parses it back,
raising ``KeyError``/``TypeError``/``ValueError`` on malformed input so
the storage layer can decide what to skip.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Union

from .config import TRANSACTION_TYPES

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Parse a calendar date from a ``date``, ``datetime`` or ISO string.

    Only the ``YYYY-MM-DD`` prefix of a string is used, so full ISO
    timestamps are accepted too.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported date value: {value!r}")


def _finite_number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise TypeError(f"{field} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{field} must be a finite number")
    return number


def _positive_number(value: Any, field: str) -> float:
    number = _finite_number(value, field)
    if number <= 0:
        raise ValueError(f"{field} must be a positive number")
    return number


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string")
    return value


@dataclass
class Transaction:
    description: str
    amount: float
    category: str
    type: str
    date: date

    @property
    def is_income(self) -> bool:
        return self.type == "income"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'description': self.description,
            'amount': float(self.amount),
            'category': self.category,
            'type': self.type,
            'date': self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        kind = data['type']
        if kind not in TRANSACTION_TYPES:
            raise ValueError(f"Unknown transaction type: {kind!r}")
        return cls(
            description=_text(data['description'], 'description'),
            amount=_positive_number(data['amount'], 'amount'),
            category=_text(data['category'], 'category'),
            type=kind,
            date=parse_date(data['date']),
        )


@dataclass
class Budget:
    category: str
    limit: float

    def to_dict(self) -> Dict[str, Any]:
        return {'category': self.category, 'limit': float(self.limit)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Budget":
        return cls(
            category=_text(data['category'], 'category'),
            limit=_positive_number(data['limit'], 'limit'),
        )


@dataclass
class SavingsGoal:
    name: str
    target_amount: float
    current_amount: float
    target_date: date

    @property
    def amount_remaining(self) -> float:
        return self.target_amount - self.current_amount

    @property
    def percentage(self) -> float:
        if self.target_amount <= 0:
            return 0.0
        return self.current_amount / self.target_amount * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'targetAmount': float(self.target_amount),
            'currentAmount': float(self.current_amount),
            'targetDate': self.target_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavingsGoal":
        target = _positive_number(data['targetAmount'], 'targetAmount')
        current = _finite_number(data['currentAmount'], 'currentAmount')
        if not 0 <= current <= target:
            raise ValueError("currentAmount must be between 0 and targetAmount")
        return cls(
            name=_text(data['name'], 'name'),
            target_amount=target,
            current_amount=current,
            target_date=parse_date(data['targetDate']),
        )
