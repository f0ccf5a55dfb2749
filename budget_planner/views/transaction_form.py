"""Transaction form - record a new income or expense."""

from __future__ import annotations

from datetime import date
from typing import Any, MutableMapping

import streamlit as st

from ..categories import transaction_category_options
from ..state import BudgetState
from ..validation import ValidationError, resolve_category, validate_transaction

_FIELD_KEYS = ('txn_description', 'txn_amount', 'txn_custom_category', 'txn_use_custom')
_RESET_KEY = 'txn_form_reset'
CATEGORY_KEY = 'txn_category'


def apply_pending_reset(session: MutableMapping[str, Any]) -> None:
    """Clear the form after a successful submit, keeping the last category."""
    last_category = session.pop(_RESET_KEY, None)
    if last_category is None:
        return
    for key in _FIELD_KEYS:
        session.pop(key, None)
    session[CATEGORY_KEY] = last_category


def request_form_reset(session: MutableMapping[str, Any], category: str) -> None:
    session[_RESET_KEY] = category


def render_transaction_form(state: BudgetState) -> None:
    """Render the add-transaction form."""
    apply_pending_reset(st.session_state)
    st.subheader("➕ Add Transaction")

    kind = st.radio(
        "Transaction Type",
        options=['expense', 'income'],
        format_func=str.title,
        horizontal=True,
        key='txn_type',
    )
    use_custom = st.checkbox("Use a custom category", key='txn_use_custom')
    options = transaction_category_options(kind, state.transactions)
    if st.session_state.get(CATEGORY_KEY) not in options:
        st.session_state.pop(CATEGORY_KEY, None)

    today = date.today()
    with st.form("add_transaction_form"):
        description = st.text_input(
            "Description",
            placeholder="e.g., Grocery shopping" if kind == 'expense' else "e.g., Monthly salary",
            key='txn_description',
        )
        amount = st.number_input(
            "Amount ($)", min_value=0.0, step=0.01, value=None, placeholder="0.00", key='txn_amount'
        )
        if use_custom:
            custom_category = st.text_input(
                "Custom Category", placeholder="Enter custom category", key='txn_custom_category'
            )
            selected_category = None
        else:
            custom_category = None
            selected_category = st.selectbox("Category", options=options, key=CATEGORY_KEY)
        when = st.date_input("Date", value=today, max_value=today, key='txn_date')
        submitted = st.form_submit_button("Add Transaction")

    if not submitted:
        return

    category = resolve_category(selected_category, custom_category, use_custom)
    try:
        transaction = validate_transaction(description, amount, category, kind, when)
    except ValidationError as exc:
        st.error(str(exc))
        return

    state.add_transaction(transaction)
    request_form_reset(st.session_state, transaction.category)
    st.toast(f"Added {transaction.description}")
    st.rerun()
