"""Streamlit view components.

Each module exposes one ``render_*`` function that draws a view from the
current :class:`~budget_planner.state.BudgetState`.
"""

from .budget_setup import render_budget_setup
from .dashboard import render_dashboard
from .monthly_overview import render_monthly_overview
from .savings_goals import render_savings_goals
from .transaction_form import render_transaction_form
from .transaction_list import render_transaction_list

__all__ = [
    'render_budget_setup',
    'render_dashboard',
    'render_monthly_overview',
    'render_savings_goals',
    'render_transaction_form',
    'render_transaction_list',
]
