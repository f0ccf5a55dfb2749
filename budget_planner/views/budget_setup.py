"""Budget setup - create, edit and track per-category spending limits."""

from __future__ import annotations

import streamlit as st

from ..analytics import BudgetAnalytics
from ..categories import budget_category_options
from ..formatting import escape_dollar_for_markdown, format_currency
from ..state import BudgetState
from ..validation import ValidationError, resolve_category, validate_budget

EDITING_KEY = 'editing_budget'
CONFIRM_DELETE_KEY = 'confirm_delete_budget'

_STATUS_MESSAGES = {
    'danger': ('error', "Over budget! Consider reducing spending in this category."),
    'warning': ('warning', "Approaching limit. Monitor your spending closely."),
    'safe': ('success', "Within budget. You're doing well!"),
}


def _render_create_form(state: BudgetState) -> None:
    st.subheader("Create Budget")
    use_custom = st.checkbox("Use a custom category", key='budget_use_custom')
    options = budget_category_options(state.budgets, state.transactions)

    with st.form("create_budget_form", clear_on_submit=True):
        if use_custom:
            custom_category = st.text_input("Custom Category", placeholder="Enter custom category")
            selected_category = None
        else:
            custom_category = None
            selected_category = st.selectbox("Category", options=options, index=None,
                                             placeholder="Select a category")
        limit = st.number_input("Monthly Limit ($)", min_value=0.0, step=0.01, value=None, placeholder="0.00")
        submitted = st.form_submit_button("Add Budget")

    if not submitted:
        return
    category = resolve_category(selected_category, custom_category, use_custom)
    try:
        budget = validate_budget(category, limit, (b.category for b in state.budgets))
        state.add_budget(budget)
    except ValidationError as exc:
        st.error(str(exc))
        return
    st.toast(f"Budget for {budget.category} added")
    st.rerun()


def _render_edit_form(state: BudgetState, index: int) -> None:
    budget = state.budgets[index]
    st.subheader("Edit Budget")
    with st.form("edit_budget_form"):
        st.text_input("Category", value=budget.category, disabled=True)
        limit = st.number_input("Monthly Limit ($)", min_value=0.0, step=0.01, value=float(budget.limit))
        save_col, cancel_col = st.columns(2)
        saved = save_col.form_submit_button("Save Changes")
        cancelled = cancel_col.form_submit_button("Cancel")

    if cancelled:
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()
    if not saved:
        return
    try:
        edited = validate_budget(budget.category, limit, editing=True)
    except ValidationError as exc:
        st.error(str(exc))
        return
    state.update_budget_limit(index, edited.limit)
    st.session_state.pop(EDITING_KEY, None)
    st.rerun()


def _render_budget_row(state: BudgetState, row: dict) -> None:
    index = row['index']
    with st.container(border=True):
        col1, col2, col3 = st.columns([4, 1, 1])
        col1.markdown(f"**{row['category']}**")
        if col2.button("✎", key=f"edit_budget_{index}", help="Edit"):
            st.session_state[EDITING_KEY] = index
            st.rerun()
        if col3.button("×", key=f"delete_budget_{index}", help="Delete"):
            st.session_state[CONFIRM_DELETE_KEY] = index
            st.rerun()

        amounts = f"{format_currency(row['spent'])} / {format_currency(row['limit'])}"
        st.markdown(f"{escape_dollar_for_markdown(amounts)} · **{row['percentage']:.0f}%**")
        st.progress(row['bar_width'] / 100)
        level, message = _STATUS_MESSAGES[row['status']]
        getattr(st, level)(message)

        if st.session_state.get(CONFIRM_DELETE_KEY) == index:
            st.warning(f"Are you sure you want to delete the budget for {row['category']}?")
            yes, no = st.columns(2)
            if yes.button("✅ Confirm", key=f"confirm_delete_budget_{index}"):
                state.delete_budget(index)
                st.session_state.pop(CONFIRM_DELETE_KEY, None)
                st.session_state.pop(EDITING_KEY, None)
                st.rerun()
            if no.button("❌ Cancel", key=f"cancel_delete_budget_{index}"):
                st.session_state.pop(CONFIRM_DELETE_KEY, None)
                st.rerun()


def render_budget_setup(state: BudgetState) -> None:
    """Render the budgets tab."""
    analytics = BudgetAnalytics(state.transactions, state.budgets)

    form_col, list_col = st.columns([1, 2])
    with form_col:
        editing = st.session_state.get(EDITING_KEY)
        if editing is not None and editing < len(state.budgets):
            _render_edit_form(state, editing)
        else:
            st.session_state.pop(EDITING_KEY, None)
            _render_create_form(state)

    with list_col:
        st.subheader("📋 Your Budgets")
        rows = analytics.budget_status()
        if not rows:
            st.info("Create budgets to help track and control your spending in different categories.")
            return
        for row in rows:
            _render_budget_row(state, row)

        overview = analytics.budget_overview()
        st.divider()
        col1, col2, col3 = st.columns(3)
        col1.metric("Total Budget", format_currency(overview['total_limit']))
        col2.metric("Total Spent", format_currency(overview['total_spent']))
        col3.metric("Overall Status", overview['status'])
