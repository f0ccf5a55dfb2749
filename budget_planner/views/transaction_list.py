"""Transaction list - search, filter, sort, paginate, edit and delete."""

from __future__ import annotations

from dataclasses import replace

import streamlit as st

from ..formatting import escape_dollar_for_markdown, format_currency, format_date, format_signed_amount
from ..models import Transaction
from ..state import BudgetState
from ..transaction_query import TYPE_FILTERS, QueryResult, TransactionQuery, run_query
from ..validation import ValidationError, validate_transaction

QUERY_KEY = 'txn_query'
EDITING_KEY = 'editing_transaction'
CONFIRM_DELETE_KEY = 'confirm_delete_transaction'
CONFIRM_RESET_KEY = 'confirm_reset_transactions'

_TYPE_LABELS = {'all': 'All', 'income': 'Income', 'expense': 'Expenses'}


def _current_query() -> TransactionQuery:
    if QUERY_KEY not in st.session_state:
        st.session_state[QUERY_KEY] = TransactionQuery()
    return st.session_state[QUERY_KEY]


def _store_query(query: TransactionQuery) -> None:
    st.session_state[QUERY_KEY] = query


def _render_controls(query: TransactionQuery) -> TransactionQuery:
    col1, col2 = st.columns([2, 1])
    with col1:
        search = st.text_input("Search transactions...", value=query.search, key='txn_search')
    with col2:
        type_filter = st.radio(
            "Type",
            options=list(TYPE_FILTERS),
            index=TYPE_FILTERS.index(query.type_filter),
            format_func=_TYPE_LABELS.get,
            horizontal=True,
            key='txn_type_filter',
        )
    updated = query.with_filters(search, type_filter)
    if updated is not query:
        _store_query(updated)
    return updated


def _render_sort_buttons(query: TransactionQuery, result: QueryResult) -> None:
    col1, col2, col3 = st.columns([3, 1, 1])
    col1.caption(
        f"Showing {result.first_shown}-{result.last_shown} of {result.total_matches} transactions"
    )
    for column, field_name in ((col2, 'date'), (col3, 'amount')):
        label = f"{field_name.title()} {query.sort_indicator(field_name)}".strip()
        if column.button(label, key=f"sort_{field_name}"):
            _store_query(query.toggle_sort(field_name))
            st.rerun()


def _render_totals(result: QueryResult) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Income", format_currency(result.total_income))
    col2.metric("Expenses", format_currency(result.total_expenses))
    col3.metric("Balance", format_currency(abs(result.balance)),
                delta="surplus" if result.balance >= 0 else "-deficit")


def _render_edit_form(state: BudgetState, index: int, transaction: Transaction) -> None:
    with st.form(f"edit_transaction_{index}"):
        col1, col2 = st.columns(2)
        with col1:
            description = st.text_input("Description", value=transaction.description)
            category = st.text_input("Category", value=transaction.category)
        with col2:
            amount = st.number_input("Amount ($)", min_value=0.0, step=0.01, value=float(transaction.amount))
            when = st.date_input("Date", value=transaction.date)
        save_col, cancel_col = st.columns(2)
        saved = save_col.form_submit_button("Save")
        cancelled = cancel_col.form_submit_button("Cancel")

    if cancelled:
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()
    if not saved:
        return
    try:
        edited = validate_transaction(description, amount, category, transaction.type, when)
    except ValidationError as exc:
        st.error(str(exc))
        return
    state.update_transaction(
        index,
        description=edited.description,
        amount=edited.amount,
        category=edited.category,
        date=edited.date,
    )
    st.session_state.pop(EDITING_KEY, None)
    st.rerun()


def _render_row(state: BudgetState, index: int, transaction: Transaction) -> None:
    if st.session_state.get(EDITING_KEY) == index:
        _render_edit_form(state, index, transaction)
        return

    icon = '🟢' if transaction.is_income else '🔴'
    col1, col2, col3, col4 = st.columns([4, 2, 1, 1])
    with col1:
        st.markdown(f"{icon} **{transaction.description}**")
        st.caption(f"{transaction.category} • {format_date(transaction.date)}")
    col2.markdown(escape_dollar_for_markdown(format_signed_amount(transaction.amount, transaction.type)))
    if col3.button("✎", key=f"edit_txn_{index}", help="Edit"):
        st.session_state[EDITING_KEY] = index
        st.session_state.pop(CONFIRM_DELETE_KEY, None)
        st.rerun()
    if col4.button("×", key=f"delete_txn_{index}", help="Delete"):
        st.session_state[CONFIRM_DELETE_KEY] = index
        st.rerun()

    if st.session_state.get(CONFIRM_DELETE_KEY) == index:
        st.warning("Are you sure you want to delete this transaction?")
        yes, no = st.columns(2)
        if yes.button("✅ Confirm", key=f"confirm_delete_txn_{index}"):
            state.delete_transaction(index)
            st.session_state.pop(CONFIRM_DELETE_KEY, None)
            st.session_state.pop(EDITING_KEY, None)
            st.rerun()
        if no.button("❌ Cancel", key=f"cancel_delete_txn_{index}"):
            st.session_state.pop(CONFIRM_DELETE_KEY, None)
            st.rerun()


def _render_pagination(query: TransactionQuery, result: QueryResult) -> None:
    if result.total_pages <= 1:
        return
    col1, col2, col3 = st.columns([1, 2, 1])
    if col1.button("Previous", disabled=result.page == 1, key="txn_prev_page"):
        _store_query(replace(query, page=max(1, result.page - 1)))
        st.rerun()
    page = col2.selectbox(
        "Page",
        options=list(range(1, result.total_pages + 1)),
        index=result.page - 1,
        key=f"txn_page_select_{result.page}_{result.total_pages}",
    )
    if page != result.page:
        _store_query(replace(query, page=page))
        st.rerun()
    if col3.button("Next", disabled=result.page == result.total_pages, key="txn_next_page"):
        _store_query(replace(query, page=min(result.total_pages, result.page + 1)))
        st.rerun()


def _render_reset_all(state: BudgetState) -> None:
    if not state.transactions:
        return
    if st.button("🗑️ Reset All Transactions", key="reset_all_transactions"):
        st.session_state[CONFIRM_RESET_KEY] = True
    if st.session_state.get(CONFIRM_RESET_KEY, False):
        st.warning("⚠️ This will delete ALL transactions! This cannot be undone.")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("✅ Confirm", key="confirm_reset_btn"):
                state.reset_transactions()
                st.session_state[CONFIRM_RESET_KEY] = False
                _store_query(TransactionQuery())
                st.session_state.pop('txn_search', None)
                st.rerun()
        with col2:
            if st.button("❌ Cancel", key="cancel_reset_btn"):
                st.session_state[CONFIRM_RESET_KEY] = False
                st.rerun()


def render_transaction_list(state: BudgetState) -> None:
    """Render the searchable, paginated transaction list."""
    st.subheader("📋 Transactions")
    query = _render_controls(_current_query())
    result = run_query(state.transactions, query)

    _render_sort_buttons(query, result)
    _render_totals(result)
    st.divider()

    if result.rows:
        for index, transaction in result.rows:
            _render_row(state, index, transaction)
    elif query.search:
        st.info("No transactions found. Try adjusting your search or filters.")
    else:
        st.info("No transactions found.")

    _render_pagination(query, result)
    st.divider()
    _render_reset_all(state)
