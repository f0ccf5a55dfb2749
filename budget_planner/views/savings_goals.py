"""Savings goals - create goals, add contributions and track projections."""

from __future__ import annotations

from datetime import date
from typing import Optional

import streamlit as st

from ..analytics import BudgetAnalytics
from ..config import GOAL_INCREMENTS
from ..formatting import escape_dollar_for_markdown, format_currency, format_date, format_time_until
from ..models import SavingsGoal
from ..state import BudgetState
from ..validation import ValidationError, validate_savings_goal

EDITING_KEY = 'editing_goal'
CONFIRM_DELETE_KEY = 'confirm_delete_goal'


def _render_goal_form(state: BudgetState, index: Optional[int], goal: Optional[SavingsGoal]) -> None:
    editing = goal is not None
    st.subheader("Edit Savings Goal" if editing else "Create Savings Goal")
    today = date.today()

    with st.form("savings_goal_form", clear_on_submit=not editing):
        name = st.text_input("Goal Name", value=goal.name if editing else "",
                             placeholder="e.g., New Laptop, Vacation")
        target_amount = st.number_input(
            "Target Amount ($)", min_value=0.0, step=0.01,
            value=float(goal.target_amount) if editing else None, placeholder="0.00",
        )
        current_amount = st.number_input(
            "Current Amount ($)", min_value=0.0, step=0.01,
            value=float(goal.current_amount) if editing else None, placeholder="0.00",
        )
        target_date = st.date_input(
            "Target Date",
            value=goal.target_date if editing else None,
            min_value=min(today, goal.target_date) if editing else today,
        )
        if editing:
            save_col, cancel_col = st.columns(2)
            submitted = save_col.form_submit_button("Save Changes")
            cancelled = cancel_col.form_submit_button("Cancel")
        else:
            submitted = st.form_submit_button("Add Goal")
            cancelled = False

    if cancelled:
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()
    if not submitted:
        return
    try:
        validated = validate_savings_goal(name, target_amount, current_amount, target_date, today=today)
    except ValidationError as exc:
        st.error(str(exc))
        return

    if editing:
        state.update_goal(index, validated)
        st.session_state.pop(EDITING_KEY, None)
    else:
        state.add_goal(validated)
        st.toast(f"Goal {validated.name} added")
    st.rerun()


def _render_savings_potential(analytics: BudgetAnalytics) -> None:
    if not analytics.transactions:
        return
    st.info(
        "Based on your income and expenses, you could save up to: "
        + escape_dollar_for_markdown(f"**{format_currency(analytics.savings_potential())}**")
        + "\n\nConsider allocating some of this to your savings goals!"
    )


def _render_goal_card(state: BudgetState, detail: dict) -> None:
    index = detail['index']
    goal = detail['goal']
    with st.container(border=True):
        col1, col2, col3 = st.columns([4, 1, 1])
        with col1:
            st.markdown(f"**{goal.name}**")
            st.caption(
                f"Target date: {format_date(goal.target_date)} "
                f"({format_time_until(detail['days_remaining'])})"
            )
        if col2.button("✎", key=f"edit_goal_{index}", help="Edit"):
            st.session_state[EDITING_KEY] = index
            st.rerun()
        if col3.button("×", key=f"delete_goal_{index}", help="Delete"):
            st.session_state[CONFIRM_DELETE_KEY] = index
            st.rerun()

        progress_text = f"{format_currency(goal.current_amount)} / {format_currency(goal.target_amount)}"
        remaining_text = (
            f"{format_currency(detail['amount_remaining'])} to go "
            f"({format_currency(detail['monthly_saving_needed'])}/month)"
        )
        st.markdown(escape_dollar_for_markdown(f"{progress_text} · {remaining_text}"))
        st.progress(min(detail['percentage'], 100.0) / 100, text=f"{detail['percentage']:.0f}%")

        buttons = st.columns(len(GOAL_INCREMENTS) + 1)
        for column, increment in zip(buttons, GOAL_INCREMENTS):
            if column.button(f"+${increment}", key=f"goal_{index}_add_{increment}"):
                state.increment_goal(index, increment)
                st.rerun()
        if detail['amount_remaining'] > 0:
            if buttons[-1].button("Complete Goal", key=f"goal_{index}_complete"):
                state.complete_goal(index)
                st.rerun()

        if st.session_state.get(CONFIRM_DELETE_KEY) == index:
            st.warning(f'Are you sure you want to delete the goal "{goal.name}"?')
            yes, no = st.columns(2)
            if yes.button("✅ Confirm", key=f"confirm_delete_goal_{index}"):
                state.delete_goal(index)
                st.session_state.pop(CONFIRM_DELETE_KEY, None)
                st.session_state.pop(EDITING_KEY, None)
                st.rerun()
            if no.button("❌ Cancel", key=f"cancel_delete_goal_{index}"):
                st.session_state.pop(CONFIRM_DELETE_KEY, None)
                st.rerun()


def render_savings_goals(state: BudgetState) -> None:
    """Render the savings tab."""
    analytics = BudgetAnalytics(state.transactions, savings_goals=state.savings_goals)

    form_col, list_col = st.columns([1, 2])
    with form_col:
        editing = st.session_state.get(EDITING_KEY)
        if editing is not None and editing < len(state.savings_goals):
            _render_goal_form(state, editing, state.savings_goals[editing])
        else:
            st.session_state.pop(EDITING_KEY, None)
            _render_goal_form(state, None, None)
            _render_savings_potential(analytics)

    with list_col:
        st.subheader("🎯 Your Savings Goals")
        details = analytics.savings_goals_detail()
        if not details:
            st.info("Create a goal to start tracking your progress toward your financial aspirations.")
            return
        for detail in details:
            _render_goal_card(state, detail)

        st.divider()
        st.metric("Total Saved", format_currency(analytics.total_saved()))
