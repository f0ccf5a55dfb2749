"""Dashboard view - financial summary, recent activity, budgets and goals."""

from __future__ import annotations

import streamlit as st

from ..analytics import BudgetAnalytics
from ..formatting import (
    escape_dollar_for_markdown,
    format_balance,
    format_currency,
    format_date,
    format_signed_amount,
)
from ..state import BudgetState, set_active_tab

_STATUS_ICONS = {'danger': '🔴', 'warning': '🟠', 'safe': '🟢'}


def _go_to(tab: str) -> None:
    set_active_tab(tab)
    st.rerun()


def render_summary_cards(analytics: BudgetAnalytics) -> None:
    summary = analytics.summary()
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("💰 Total Income", format_currency(summary['income']))
        st.caption(f"From {summary['income_count']} source(s)")
    with col2:
        st.metric("💸 Total Expenses", format_currency(summary['expenses']))
        st.caption(f"From {summary['expense_count']} transaction(s)")
    with col3:
        balance = summary['balance']
        st.metric(
            "📈 Current Balance",
            format_balance(balance),
            delta="surplus" if balance >= 0 else "-deficit",
        )
        st.caption("Updated just now")


def render_recent_transactions(analytics: BudgetAnalytics) -> None:
    st.subheader("Recent Transactions")
    recent = analytics.recent_transactions()
    if not recent:
        st.info("No transactions yet. Add some to get started!")
        return
    for _, transaction in recent:
        icon = '🟢' if transaction.is_income else '🔴'
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"{icon} **{transaction.description}**")
            st.caption(f"{transaction.category} • {format_date(transaction.date)}")
        with col2:
            st.markdown(escape_dollar_for_markdown(format_signed_amount(transaction.amount, transaction.type)))
    if st.button("View all transactions →", key="dashboard_view_transactions"):
        _go_to('transactions')


def render_budget_overview(analytics: BudgetAnalytics) -> None:
    st.subheader("Budget Overview")
    rows = sorted(analytics.budget_status(), key=lambda row: row['index'])
    if not rows:
        st.info("No budgets set. Create some budget limits to track your spending!")
        return
    for row in rows:
        st.markdown(
            f"{_STATUS_ICONS[row['status']]} **{row['category']}** "
            + escape_dollar_for_markdown(
                f"{format_currency(row['spent'])} / {format_currency(row['limit'])}"
            )
        )
        st.progress(row['bar_width'] / 100)
    if st.button("Manage budgets →", key="dashboard_manage_budgets"):
        _go_to('budgets')


def render_goal_overview(analytics: BudgetAnalytics) -> None:
    st.subheader("Savings Goals")
    goals = analytics.savings_goals
    if not goals:
        st.info("No savings goals yet. Set some goals to track your progress!")
        return
    for goal in goals:
        st.markdown(
            f"**{goal.name}** "
            + escape_dollar_for_markdown(
                f"{format_currency(goal.current_amount)} / {format_currency(goal.target_amount)}"
            )
        )
        st.progress(min(goal.percentage, 100.0) / 100)
        st.caption(f"{goal.percentage:.0f}% complete • Target date: {format_date(goal.target_date)}")
    if st.button("Manage savings goals →", key="dashboard_manage_goals"):
        _go_to('savings')


def render_top_expenses(analytics: BudgetAnalytics) -> None:
    st.subheader("Top Expenses")
    top = analytics.top_expense_categories()
    if not top:
        st.info("No expense data yet. Add some transactions to see your top spending categories.")
        return
    for category, amount in top:
        col1, col2 = st.columns([3, 1])
        col1.markdown(f"**{category}**")
        col2.markdown(escape_dollar_for_markdown(format_currency(amount)))
    st.caption("These are your top spending categories. Consider setting budget limits for these areas.")


def render_dashboard(state: BudgetState) -> None:
    """Render the dashboard tab."""
    analytics = BudgetAnalytics(state.transactions, state.budgets, state.savings_goals)

    render_summary_cards(analytics)
    st.divider()

    left, right = st.columns(2)
    with left:
        render_recent_transactions(analytics)
    with right:
        render_budget_overview(analytics)

    st.divider()
    left, right = st.columns(2)
    with left:
        render_goal_overview(analytics)
    with right:
        render_top_expenses(analytics)
