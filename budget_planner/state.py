"""Application state: the three record collections and their mutations.

:class:`BudgetState` is the single owner of transactions, budgets and
savings goals for a session.  Every mutation writes the whole snapshot
back to storage immediately afterwards; the write is fire-and-forget.
Records are addressed by their position in the collection because
duplicates are allowed and carry no identity of their own.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import streamlit as st

from .config import DEFAULT_TAB
from .models import Budget, SavingsGoal, Transaction
from .storage import Snapshot, SnapshotStore
from .validation import ValidationError

logger = logging.getLogger(__name__)

SESSION_KEY = 'budget_state'
ACTIVE_TAB_KEY = 'active_tab'
PENDING_TAB_KEY = 'pending_tab'


class BudgetState:
    """Owns the record collections and persists them on every change."""

    def __init__(self, store: Optional[SnapshotStore] = None, snapshot: Optional[Snapshot] = None):
        self.store = store or SnapshotStore()
        snapshot = snapshot if snapshot is not None else Snapshot()
        self.transactions: List[Transaction] = list(snapshot.transactions)
        self.budgets: List[Budget] = list(snapshot.budgets)
        self.savings_goals: List[SavingsGoal] = list(snapshot.savings_goals)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "BudgetState":
        """Restore state from the stored snapshot (empty if missing or malformed)."""
        store = SnapshotStore(path)
        return cls(store=store, snapshot=store.load())

    def snapshot(self) -> Snapshot:
        return Snapshot(
            transactions=list(self.transactions),
            budgets=list(self.budgets),
            savings_goals=list(self.savings_goals),
        )

    def persist(self) -> bool:
        return self.store.save(self.snapshot())

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------
    def add_transaction(self, transaction: Transaction) -> None:
        self.transactions.append(transaction)
        logger.debug("Added transaction %r", transaction.description)
        self.persist()

    def update_transaction(
        self,
        index: int,
        *,
        description: Optional[str] = None,
        amount: Optional[float] = None,
        category: Optional[str] = None,
        date=None,
    ) -> Transaction:
        """Edit the transaction at ``index``; its type is kept."""
        current = self.transactions[index]
        changes = {
            key: value
            for key, value in (
                ('description', description),
                ('amount', amount),
                ('category', category),
                ('date', date),
            )
            if value is not None
        }
        updated = replace(current, **changes)
        self.transactions[index] = updated
        logger.debug("Updated transaction %d", index)
        self.persist()
        return updated

    def delete_transaction(self, index: int) -> Transaction:
        removed = self.transactions.pop(index)
        logger.debug("Deleted transaction %d", index)
        self.persist()
        return removed

    def reset_transactions(self) -> None:
        self.transactions = []
        logger.info("Cleared all transactions")
        self.persist()

    # ------------------------------------------------------------------
    # Budgets
    # ------------------------------------------------------------------
    def add_budget(self, budget: Budget) -> None:
        """Add a budget; a category may only be budgeted once."""
        if any(b.category == budget.category for b in self.budgets):
            raise ValidationError(f"A budget for {budget.category} already exists")
        self.budgets.append(budget)
        logger.debug("Added budget for %r", budget.category)
        self.persist()

    def update_budget_limit(self, index: int, limit: float) -> Budget:
        updated = replace(self.budgets[index], limit=limit)
        self.budgets[index] = updated
        logger.debug("Updated budget %d limit to %.2f", index, limit)
        self.persist()
        return updated

    def delete_budget(self, index: int) -> Budget:
        removed = self.budgets.pop(index)
        logger.debug("Deleted budget for %r", removed.category)
        self.persist()
        return removed

    # ------------------------------------------------------------------
    # Savings goals
    # ------------------------------------------------------------------
    def add_goal(self, goal: SavingsGoal) -> None:
        self.savings_goals.append(goal)
        logger.debug("Added savings goal %r", goal.name)
        self.persist()

    def update_goal(self, index: int, goal: SavingsGoal) -> SavingsGoal:
        self.savings_goals[index] = goal
        logger.debug("Updated savings goal %d", index)
        self.persist()
        return goal

    def delete_goal(self, index: int) -> SavingsGoal:
        removed = self.savings_goals.pop(index)
        logger.debug("Deleted savings goal %r", removed.name)
        self.persist()
        return removed

    def increment_goal(self, index: int, amount: float) -> SavingsGoal:
        """Add ``amount`` to a goal, capped at its target."""
        goal = self.savings_goals[index]
        new_amount = min(goal.target_amount, goal.current_amount + amount)
        updated = replace(goal, current_amount=new_amount)
        self.savings_goals[index] = updated
        logger.debug("Goal %r now at %.2f of %.2f", goal.name, new_amount, goal.target_amount)
        self.persist()
        return updated

    def complete_goal(self, index: int) -> SavingsGoal:
        goal = self.savings_goals[index]
        updated = replace(goal, current_amount=goal.target_amount)
        self.savings_goals[index] = updated
        logger.debug("Goal %r completed", goal.name)
        self.persist()
        return updated


def get_state() -> BudgetState:
    """Return the session's state, restoring it from storage on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = BudgetState.load()
    return st.session_state[SESSION_KEY]


def get_active_tab() -> str:
    if ACTIVE_TAB_KEY not in st.session_state:
        st.session_state[ACTIVE_TAB_KEY] = DEFAULT_TAB
    return st.session_state[ACTIVE_TAB_KEY]


def set_active_tab(tab: str) -> None:
    """Switch tabs from inside a view; the header applies it on the next run."""
    st.session_state[ACTIVE_TAB_KEY] = tab
    st.session_state[PENDING_TAB_KEY] = tab


def pop_pending_tab() -> Optional[str]:
    return st.session_state.pop(PENDING_TAB_KEY, None)
