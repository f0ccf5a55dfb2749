"""Root view of the Budget Planner Streamlit app.

Run with:

```bash
streamlit run budget_planner/app.py
```

The root view restores the persisted state once per session, renders
the header with the tab selector and dispatches to the active view.
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports when run as a script
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from budget_planner import config
from budget_planner.state import ACTIVE_TAB_KEY, BudgetState, get_active_tab, get_state, pop_pending_tab
from budget_planner.views import (
    render_budget_setup,
    render_dashboard,
    render_monthly_overview,
    render_savings_goals,
    render_transaction_form,
    render_transaction_list,
)

TAB_LABELS = dict(config.TABS)
TAB_SELECTOR_KEY = 'tab_selector'


def render_header() -> str:
    """Render the title and tab selector; return the active tab id."""
    st.title(f"💰 {config.APP_TITLE}")
    pending = pop_pending_tab()
    if pending is not None:
        st.session_state[TAB_SELECTOR_KEY] = pending
    elif TAB_SELECTOR_KEY not in st.session_state:
        st.session_state[TAB_SELECTOR_KEY] = get_active_tab()
    selected = st.radio(
        "Navigation",
        options=[tab_id for tab_id, _ in config.TABS],
        format_func=TAB_LABELS.get,
        horizontal=True,
        label_visibility="collapsed",
        key=TAB_SELECTOR_KEY,
    )
    st.session_state[ACTIVE_TAB_KEY] = selected
    return selected


def render_transactions_tab(state: BudgetState) -> None:
    form_col, list_col = st.columns([1, 2])
    with form_col:
        render_transaction_form(state)
    with list_col:
        render_transaction_list(state)


VIEWS = {
    'dashboard': render_dashboard,
    'transactions': render_transactions_tab,
    'budgets': render_budget_setup,
    'savings': render_savings_goals,
    'reports': render_monthly_overview,
}


def main() -> None:
    """Main entry point for the app."""
    st.set_page_config(page_title=config.APP_TITLE, page_icon="💰", layout="wide")
    config.configure_logging()
    config.ensure_data_directories()

    state = get_state()
    active = render_header()
    st.divider()
    VIEWS.get(active, render_dashboard)(state)


if __name__ == "__main__":
    main()
