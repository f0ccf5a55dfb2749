"""Budget analytics and aggregation.

This module turns the in-memory record collections into the numbers the
views display: income/expense totals, per-budget spending status,
savings goal projections and the monthly report.  Transactions are
loaded into a pandas DataFrame once per :class:`BudgetAnalytics`
instance and every aggregation is a short pandas expression over it.
"""

from __future__ import annotations

import calendar
import math
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .config import (
    BUDGET_DANGER_PCT,
    BUDGET_EXCEEDED_PCT,
    BUDGET_WARNING_PCT,
    DAYS_PER_MONTH,
    MIN_MONTHS_REMAINING,
    RECENT_TRANSACTION_COUNT,
    TOP_EXPENSE_COUNT,
)
from .models import Budget, SavingsGoal, Transaction

FRAME_COLUMNS = ['Description', 'Amount', 'Category', 'Type', 'Date']


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build a DataFrame of transactions, indexed by collection position."""
    rows = [
        {
            'Description': t.description,
            'Amount': t.amount,
            'Category': t.category,
            'Type': t.type,
            'Date': t.date,
        }
        for t in transactions
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df['Amount'] = pd.to_numeric(df['Amount'], errors='coerce').fillna(0.0).astype(float)
    df['Date'] = pd.to_datetime(df['Date'])
    df['Year'] = df['Date'].dt.year
    df['Month'] = df['Date'].dt.month
    return df


def percentage_of(spent: float, limit: float) -> float:
    """Spent as a percentage of limit, unclamped; 0 for a non-positive limit."""
    if limit <= 0:
        return 0.0
    return spent / limit * 100


def budget_status_label(percentage: float) -> str:
    if percentage >= BUDGET_DANGER_PCT:
        return 'danger'
    if percentage >= BUDGET_WARNING_PCT:
        return 'warning'
    return 'safe'


def compliance_status(percentage: float) -> str:
    return 'exceeded' if percentage >= BUDGET_EXCEEDED_PCT else 'within'


def compliance_color(percentage: float) -> str:
    if percentage >= BUDGET_EXCEEDED_PCT:
        return 'red'
    if percentage >= BUDGET_WARNING_PCT:
        return 'amber'
    return 'green'


def savings_insight(balance: float, savings_rate: float) -> str:
    """One-line advice for the monthly report."""
    if balance < 0:
        return ("You spent more than you earned this month. "
                "Consider reviewing your budget categories.")
    if savings_rate < 10:
        return ("Your savings rate is quite low. "
                "Aim for at least 20% of your income in savings.")
    if savings_rate >= 30:
        return "Great job! Your savings rate is excellent. Keep up the good work."
    return ("Your finances are balanced. "
            "Look for opportunities to increase your savings rate.")


def month_name(month: int) -> str:
    return calendar.month_name[month]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class BudgetAnalytics:
    """Aggregations over transactions, budgets and savings goals."""

    def __init__(
        self,
        transactions: Iterable[Transaction],
        budgets: Iterable[Budget] = (),
        savings_goals: Iterable[SavingsGoal] = (),
        today: Optional[date] = None,
    ):
        self.transactions = list(transactions)
        self.budgets = list(budgets)
        self.savings_goals = list(savings_goals)
        self.today = today or date.today()
        self.data = transactions_frame(self.transactions)

    def _rows(self, kind: str, df: Optional[pd.DataFrame] = None) -> pd.DataFrame:
        source = self.data if df is None else df
        return source[source['Type'] == kind]

    @staticmethod
    def _total(df: pd.DataFrame) -> float:
        return float(df['Amount'].sum()) if not df.empty else 0.0

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------
    def total_income(self) -> float:
        return self._total(self._rows('income'))

    def total_expenses(self) -> float:
        return self._total(self._rows('expense'))

    def balance(self) -> float:
        return self.total_income() - self.total_expenses()

    def income_count(self) -> int:
        return len(self._rows('income'))

    def expense_count(self) -> int:
        return len(self._rows('expense'))

    def summary(self) -> Dict[str, float]:
        income = self.total_income()
        expenses = self.total_expenses()
        return {
            'income': income,
            'expenses': expenses,
            'balance': income - expenses,
            'income_count': self.income_count(),
            'expense_count': self.expense_count(),
        }

    def category_totals(self, kind: str = 'expense', df: Optional[pd.DataFrame] = None) -> pd.Series:
        """Sum of amounts by category for one transaction type, largest first.

        Ties keep the order in which categories first appear.
        """
        rows = self._rows(kind, df)
        if rows.empty:
            return pd.Series(dtype=float)
        totals = rows.groupby('Category', sort=False)['Amount'].sum()
        return totals.sort_values(ascending=False, kind='stable')

    def recent_transactions(self, limit: int = RECENT_TRANSACTION_COUNT) -> List[Tuple[int, Transaction]]:
        """Newest transactions first, as ``(index, transaction)`` pairs."""
        if self.data.empty:
            return []
        ordered = self.data.sort_values('Date', ascending=False, kind='stable')
        return [(int(i), self.transactions[i]) for i in ordered.index[:limit]]

    def top_expense_categories(self, limit: int = TOP_EXPENSE_COUNT) -> List[Tuple[str, float]]:
        totals = self.category_totals('expense').head(limit)
        return [(str(category), float(amount)) for category, amount in totals.items()]

    # ------------------------------------------------------------------
    # Budgets
    # ------------------------------------------------------------------
    def budget_status(self) -> List[Dict[str, Any]]:
        """Spending against each budget, highest percentage first."""
        spent_by_category = self.category_totals('expense')
        rows = []
        for index, budget in enumerate(self.budgets):
            spent = float(spent_by_category.get(budget.category, 0.0))
            percentage = percentage_of(spent, budget.limit)
            rows.append({
                'index': index,
                'category': budget.category,
                'limit': budget.limit,
                'spent': spent,
                'percentage': percentage,
                'bar_width': min(percentage, 100.0),
                'status': budget_status_label(percentage),
            })
        return sorted(rows, key=lambda row: row['percentage'], reverse=True)

    def budget_overview(self) -> Dict[str, Any]:
        rows = self.budget_status()
        statuses = {row['status'] for row in rows}
        if 'danger' in statuses:
            overall = 'Over Budget'
        elif 'warning' in statuses:
            overall = 'Caution'
        else:
            overall = 'On Track'
        return {
            'total_limit': sum(row['limit'] for row in rows),
            'total_spent': sum(row['spent'] for row in rows),
            'status': overall,
        }

    # ------------------------------------------------------------------
    # Savings goals
    # ------------------------------------------------------------------
    def days_until(self, target: date) -> int:
        return max(0, (target - self.today).days)

    def savings_goals_detail(self) -> List[Dict[str, Any]]:
        """Projection for each goal, closest target date first."""
        rows = []
        for index, goal in enumerate(self.savings_goals):
            days_remaining = self.days_until(goal.target_date)
            months_remaining = max(MIN_MONTHS_REMAINING, days_remaining / DAYS_PER_MONTH)
            amount_remaining = goal.amount_remaining
            rows.append({
                'index': index,
                'goal': goal,
                'days_remaining': days_remaining,
                'months_remaining': months_remaining,
                'amount_remaining': amount_remaining,
                'monthly_saving_needed': amount_remaining / months_remaining,
                'percentage': goal.percentage,
            })
        return sorted(rows, key=lambda row: row['days_remaining'])

    def total_saved(self) -> float:
        return float(sum(goal.current_amount for goal in self.savings_goals))

    def savings_potential(self) -> float:
        return max(0.0, self.balance())

    # ------------------------------------------------------------------
    # Monthly report
    # ------------------------------------------------------------------
    def available_periods(self) -> Tuple[List[int], List[int]]:
        """Months (ascending) and years (descending) with data, plus the current ones."""
        months = set(int(m) for m in self.data['Month'].dropna().unique())
        years = set(int(y) for y in self.data['Year'].dropna().unique())
        months.add(self.today.month)
        years.add(self.today.year)
        return sorted(months), sorted(years, reverse=True)

    def month_frame(self, month: int, year: int) -> pd.DataFrame:
        return self.data[(self.data['Month'] == month) & (self.data['Year'] == year)]

    def budget_compliance(self, df: pd.DataFrame) -> List[Dict[str, Any]]:
        spent_by_category = self.category_totals('expense', df)
        rows = []
        for budget in self.budgets:
            spent = float(spent_by_category.get(budget.category, 0.0))
            percentage = percentage_of(spent, budget.limit)
            rows.append({
                'category': budget.category,
                'limit': budget.limit,
                'spent': spent,
                'percentage': percentage,
                'bar_width': min(percentage, 100.0),
                'status': compliance_status(percentage),
                'color': compliance_color(percentage),
            })
        return rows

    def monthly_summary(self, month: int, year: int) -> Dict[str, Any]:
        """Everything the monthly overview shows for one calendar month."""
        df = self.month_frame(month, year)
        income_rows = self._rows('income', df)
        expense_rows = self._rows('expense', df)

        income = self._total(income_rows)
        expenses = self._total(expense_rows)
        balance = income - expenses
        savings_rate = (balance / income * 100) if income > 0 else 0.0

        compliance = self.budget_compliance(df)
        within = sum(1 for row in compliance if row['status'] == 'within')
        compliance_rate = _round_half_up(within / len(compliance) * 100) if compliance else None

        expense_count = len(expense_rows)
        return {
            'month': month,
            'year': year,
            'total_income': income,
            'total_expenses': expenses,
            'balance': balance,
            'savings_rate': savings_rate,
            'expenses_by_category': self.category_totals('expense', df),
            'income_by_category': self.category_totals('income', df),
            'budget_compliance': compliance,
            'budgets_within': within,
            'budgets_exceeded': len(compliance) - within,
            'compliance_rate': compliance_rate,
            'transaction_count': len(df),
            'average_expense': expenses / max(1, expense_count),
            'highest_expense': float(expense_rows['Amount'].max()) if expense_count else None,
            'average_daily_spending': expenses / DAYS_PER_MONTH,
            'insight': savings_insight(balance, savings_rate),
        }
