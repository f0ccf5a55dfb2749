"""Search, filter, sort and paginate the transaction list."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import List, Sequence, Tuple

from .analytics import transactions_frame
from .config import ITEMS_PER_PAGE
from .models import Transaction

TYPE_FILTERS = ('all', 'income', 'expense')
SORT_FIELDS = ('date', 'amount')
SORT_ORDERS = ('asc', 'desc')

_SORT_COLUMNS = {'date': 'Date', 'amount': 'Amount'}


@dataclass(frozen=True)
class TransactionQuery:
    search: str = ''
    type_filter: str = 'all'
    sort_by: str = 'date'
    sort_order: str = 'desc'
    page: int = 1
    page_size: int = ITEMS_PER_PAGE

    def toggle_sort(self, field_name: str) -> "TransactionQuery":
        """Flip the order on the active field, or switch field (descending)."""
        if field_name not in SORT_FIELDS:
            raise ValueError(f"Unknown sort field: {field_name!r}")
        if self.sort_by == field_name:
            return replace(self, sort_order='asc' if self.sort_order == 'desc' else 'desc')
        return replace(self, sort_by=field_name, sort_order='desc')

    def sort_indicator(self, field_name: str) -> str:
        if self.sort_by != field_name:
            return ''
        return '↑' if self.sort_order == 'asc' else '↓'

    def with_filters(self, search: str, type_filter: str) -> "TransactionQuery":
        """Apply new search/type values; any change goes back to page 1."""
        if search == self.search and type_filter == self.type_filter:
            return self
        return replace(self, search=search, type_filter=type_filter, page=1)


@dataclass
class QueryResult:
    rows: List[Tuple[int, Transaction]] = field(default_factory=list)
    total_matches: int = 0
    total_pages: int = 0
    page: int = 1
    first_shown: int = 0
    last_shown: int = 0
    total_income: float = 0.0
    total_expenses: float = 0.0

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenses


def run_query(transactions: Sequence[Transaction], query: TransactionQuery) -> QueryResult:
    """Apply ``query`` and return one page of ``(index, transaction)`` pairs.

    Totals cover every match, not only the visible page.  The requested
    page is clamped into range.
    """
    df = transactions_frame(transactions)

    needle = query.search.lower()
    if needle and not df.empty:
        mask = (
            df['Description'].str.lower().str.contains(needle, regex=False)
            | df['Category'].str.lower().str.contains(needle, regex=False)
        )
        df = df[mask]

    if query.type_filter != 'all':
        df = df[df['Type'] == query.type_filter]

    df = df.sort_values(
        _SORT_COLUMNS.get(query.sort_by, 'Date'),
        ascending=query.sort_order == 'asc',
        kind='stable',
    )

    total = len(df)
    total_pages = math.ceil(total / query.page_size) if total else 0
    page = min(max(1, query.page), max(1, total_pages))
    start = (page - 1) * query.page_size
    page_index = df.index[start:start + query.page_size]

    income = float(df.loc[df['Type'] == 'income', 'Amount'].sum()) if total else 0.0
    expenses = float(df.loc[df['Type'] == 'expense', 'Amount'].sum()) if total else 0.0

    return QueryResult(
        rows=[(int(i), transactions[i]) for i in page_index],
        total_matches=total,
        total_pages=total_pages,
        page=page,
        first_shown=min(total, start + 1),
        last_shown=min(page * query.page_size, total),
        total_income=income,
        total_expenses=expenses,
    )
