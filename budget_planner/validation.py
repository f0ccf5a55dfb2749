"""Form validation for transactions, budgets and savings goals.

Each ``validate_*`` function takes the raw form values (strings or
numbers straight from the widgets) and either returns a ready record or
raises :class:`ValidationError` carrying one human-readable message.
Checks run in a fixed order and the first failure wins.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Iterable, Optional

from .config import TRANSACTION_TYPES
from .models import Budget, SavingsGoal, Transaction, parse_date


class ValidationError(ValueError):
    """A user input error to show next to the form."""


def parse_amount(value: Any) -> Optional[float]:
    """Parse a form amount, returning ``None`` for blank, unparsable or non-finite input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _clean(text: Any) -> str:
    return text.strip() if isinstance(text, str) else ""


def _optional_date(value: Any) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return parse_date(value)
    except (TypeError, ValueError):
        return None


def resolve_category(selected: Any, custom: Any = None, use_custom: bool = False) -> str:
    """Pick the custom category when the custom field is active."""
    return _clean(custom) if use_custom else _clean(selected)


def validate_transaction(
    description: Any,
    amount: Any,
    category: Any,
    kind: Any,
    when: Any,
) -> Transaction:
    """Validate transaction form input (used for both create and edit)."""
    description = _clean(description)
    if not description:
        raise ValidationError("Please enter a description")

    parsed_amount = parse_amount(amount)
    if parsed_amount is None or parsed_amount <= 0:
        raise ValidationError("Please enter a valid amount")

    category = _clean(category)
    if not category:
        raise ValidationError("Please select or enter a category")

    if kind not in TRANSACTION_TYPES:
        raise ValidationError("Please choose income or expense")

    parsed_date = _optional_date(when)
    if parsed_date is None:
        raise ValidationError("Please enter a date")

    return Transaction(
        description=description,
        amount=parsed_amount,
        category=category,
        type=kind,
        date=parsed_date,
    )


def validate_budget(
    category: Any,
    limit: Any,
    existing_categories: Iterable[str] = (),
    *,
    editing: bool = False,
) -> Budget:
    """Validate budget form input.

    The duplicate-category check only applies when creating; an edit
    keeps its own category.
    """
    category = _clean(category)
    if not category:
        raise ValidationError("Please select or enter a category")

    parsed_limit = parse_amount(limit)
    if parsed_limit is None or parsed_limit <= 0:
        raise ValidationError("Please enter a valid limit amount")

    if not editing and category in set(existing_categories):
        raise ValidationError(f"A budget for {category} already exists")

    return Budget(category=category, limit=parsed_limit)


def validate_savings_goal(
    name: Any,
    target_amount: Any,
    current_amount: Any,
    target_date: Any,
    today: Optional[date] = None,
) -> SavingsGoal:
    """Validate savings goal form input (used for both create and edit)."""
    today = today or date.today()

    name = _clean(name)
    if not name:
        raise ValidationError("Please enter a name for this goal")

    target = parse_amount(target_amount)
    if target is None or target <= 0:
        raise ValidationError("Please enter a valid target amount")

    current = parse_amount(current_amount)
    if current is None or current < 0:
        raise ValidationError("Please enter a valid current amount")

    if current > target:
        raise ValidationError("Current amount cannot be greater than target amount")

    parsed_date = _optional_date(target_date)
    if parsed_date is None:
        raise ValidationError("Please set a target date")

    if parsed_date < today:
        raise ValidationError("Target date cannot be in the past")

    return SavingsGoal(
        name=name,
        target_amount=target,
        current_amount=current,
        target_date=parsed_date,
    )
