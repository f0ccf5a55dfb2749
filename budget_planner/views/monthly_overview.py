"""Monthly overview - per-month income/expense report and budget compliance."""

from __future__ import annotations

from datetime import date

import streamlit as st

from ..analytics import BudgetAnalytics, month_name
from ..charts import create_expense_pie_chart, create_income_bar_chart, pie_sectors
from ..formatting import escape_dollar_for_markdown, format_currency
from ..state import BudgetState

_COLOR_ICONS = {'red': '🔴', 'amber': '🟠', 'green': '🟢'}


def _select_period(analytics: BudgetAnalytics) -> tuple:
    months, years = analytics.available_periods()
    today = date.today()
    col1, col2 = st.columns(2)
    month = col1.selectbox(
        "Month",
        options=months,
        index=months.index(today.month),
        format_func=month_name,
        key='report_month',
    )
    year = col2.selectbox("Year", options=years, index=years.index(today.year), key='report_year')
    return month, year


def _render_summary(summary: dict) -> None:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Income", format_currency(summary['total_income']))
    col2.metric("Expenses", format_currency(summary['total_expenses']))
    balance = summary['balance']
    col3.metric("Balance", format_currency(abs(balance)),
                delta="surplus" if balance >= 0 else "-deficit")
    col4.metric("Savings Rate", f"{summary['savings_rate']:.1f}%")


def _render_expense_breakdown(summary: dict) -> None:
    st.subheader("Expense Breakdown")
    totals = summary['expenses_by_category']
    if totals.empty:
        st.info("No expense data available for this period.")
        return
    st.plotly_chart(create_expense_pie_chart(totals), use_container_width=True)
    for sector in pie_sectors(totals):
        st.markdown(
            f"<span style='color:{sector.color}'>■</span> {sector.category}: "
            + escape_dollar_for_markdown(f"{format_currency(sector.value)} ({sector.percentage:.1f}%)"),
            unsafe_allow_html=True,
        )


def _render_budget_compliance(summary: dict) -> None:
    st.subheader("Budget Compliance")
    rows = summary['budget_compliance']
    if not rows:
        st.info("No budget data available for this period.")
        return
    for row in rows:
        amounts = f"{format_currency(row['spent'])} / {format_currency(row['limit'])}"
        st.markdown(
            f"{_COLOR_ICONS[row['color']]} **{row['category']}** "
            f"{escape_dollar_for_markdown(amounts)} · {row['percentage']:.1f}%"
        )
        st.progress(row['bar_width'] / 100)
    col1, col2, col3 = st.columns(3)
    col1.metric("Within Budget", summary['budgets_within'])
    col2.metric("Exceeded", summary['budgets_exceeded'])
    col3.metric("Compliance Rate", f"{summary['compliance_rate']}%")


def _render_income_sources(summary: dict) -> None:
    st.subheader("Income Sources")
    totals = summary['income_by_category']
    if totals.empty:
        st.info("No income data available for this period.")
        return
    st.plotly_chart(create_income_bar_chart(totals), use_container_width=True)


def _render_spending_insights(summary: dict) -> None:
    st.subheader("Spending Insights")
    col1, col2, col3 = st.columns(3)
    col1.metric("Average expense amount", format_currency(summary['average_expense']))
    highest = summary['highest_expense']
    col2.metric("Highest single expense", format_currency(highest) if highest is not None else "—")
    col3.metric("Avg. daily spending", format_currency(summary['average_daily_spending']))
    st.info(summary['insight'])


def render_monthly_overview(state: BudgetState) -> None:
    """Render the reports tab."""
    analytics = BudgetAnalytics(state.transactions, state.budgets)
    st.subheader("📈 Monthly Overview")
    month, year = _select_period(analytics)
    summary = analytics.monthly_summary(month, year)

    if summary['transaction_count'] == 0:
        st.info(
            f"No transactions for {month_name(month)} {year}. "
            "Add some transactions for this period to see your monthly overview."
        )
        return

    _render_summary(summary)
    st.divider()
    left, right = st.columns(2)
    with left:
        _render_expense_breakdown(summary)
    with right:
        _render_budget_compliance(summary)
    st.divider()
    left, right = st.columns(2)
    with left:
        _render_income_sources(summary)
    with right:
        _render_spending_insights(summary)
