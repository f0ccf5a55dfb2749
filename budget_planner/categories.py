"""Category option lists for the transaction and budget forms."""

from __future__ import annotations

from typing import Iterable, List

from .config import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from .models import Budget, Transaction


def _merge(base: Iterable[str], extra: Iterable[str]) -> List[str]:
    combined = list(base)
    for category in extra:
        if category not in combined:
            combined.append(category)
    return combined


def transaction_category_options(kind: str, transactions: Iterable[Transaction]) -> List[str]:
    """Predefined categories for ``kind`` followed by any already in use."""
    base = EXPENSE_CATEGORIES if kind == 'expense' else INCOME_CATEGORIES
    return _merge(base, (t.category for t in transactions))


def budget_category_options(budgets: Iterable[Budget], transactions: Iterable[Transaction]) -> List[str]:
    """Expense categories that do not have a budget yet."""
    budgeted = {b.category for b in budgets}
    combined = _merge(EXPENSE_CATEGORIES, (t.category for t in transactions if t.type == 'expense'))
    return [category for category in combined if category not in budgeted]
