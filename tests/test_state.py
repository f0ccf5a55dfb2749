import json
from datetime import date
from types import SimpleNamespace

import pytest

from budget_planner import state as state_module
from budget_planner.models import Budget, SavingsGoal, Transaction
from budget_planner.state import BudgetState
from budget_planner.validation import ValidationError


@pytest.fixture
def path(tmp_path):
    return tmp_path / 'budget_data.json'


@pytest.fixture
def state(path):
    return BudgetState.load(path)


def stored(path):
    return json.loads(path.read_text())


def lunch():
    return Transaction('Lunch', 12.5, 'Food', 'expense', date(2024, 4, 2))


def test_load_missing_file_gives_empty_state(state):
    assert state.transactions == []
    assert state.budgets == []
    assert state.savings_goals == []


def test_load_malformed_file_gives_empty_state(path):
    path.write_text('not json at all')
    loaded = BudgetState.load(path)
    assert loaded.transactions == []


def test_add_transaction_persists(state, path):
    state.add_transaction(lunch())
    data = stored(path)
    assert data['transactions'][0]['description'] == 'Lunch'
    assert BudgetState.load(path).transactions == [lunch()]


def test_duplicates_are_addressed_by_index(state, path):
    state.add_transaction(lunch())
    state.add_transaction(lunch())
    state.delete_transaction(1)
    assert len(state.transactions) == 1
    assert len(stored(path)['transactions']) == 1


def test_update_transaction_keeps_type(state):
    state.add_transaction(lunch())
    updated = state.update_transaction(0, description='Dinner', amount=30.0)
    assert updated.description == 'Dinner'
    assert updated.amount == 30.0
    assert updated.type == 'expense'
    assert updated.category == 'Food'


def test_reset_transactions_keeps_budgets_and_goals(state, path):
    state.add_transaction(lunch())
    state.add_budget(Budget('Food', 100.0))
    state.reset_transactions()
    data = stored(path)
    assert data['transactions'] == []
    assert data['budgets'] == [{'category': 'Food', 'limit': 100.0}]


def test_duplicate_budget_is_rejected(state):
    state.add_budget(Budget('Food', 100.0))
    with pytest.raises(ValidationError, match='A budget for Food already exists'):
        state.add_budget(Budget('Food', 50.0))
    assert len(state.budgets) == 1


def test_update_and_delete_budget(state, path):
    state.add_budget(Budget('Food', 100.0))
    state.update_budget_limit(0, 150.0)
    assert stored(path)['budgets'][0]['limit'] == 150.0
    state.delete_budget(0)
    assert stored(path)['budgets'] == []


def test_increment_goal_is_capped_at_target(state, path):
    state.add_goal(SavingsGoal('Bike', 100.0, 80.0, date(2030, 1, 1)))
    goal = state.increment_goal(0, 50)
    assert goal.current_amount == 100.0
    assert stored(path)['savingsGoals'][0]['currentAmount'] == 100.0


def test_complete_goal(state):
    state.add_goal(SavingsGoal('Trip', 1000.0, 250.0, date(2030, 1, 1)))
    goal = state.complete_goal(0)
    assert goal.current_amount == goal.target_amount
    assert goal.percentage == 100


def test_complete_goal_lands_exactly_on_target(state, path):
    state.add_goal(SavingsGoal('Car', 3650.11, 576.74, date(2030, 1, 1)))
    goal = state.complete_goal(0)
    assert goal.current_amount == 3650.11
    assert goal.amount_remaining == 0
    assert stored(path)['savingsGoals'][0]['currentAmount'] == 3650.11


def test_update_and_delete_goal(state, path):
    state.add_goal(SavingsGoal('Trip', 1000.0, 250.0, date(2030, 1, 1)))
    state.update_goal(0, SavingsGoal('Holiday', 1200.0, 250.0, date(2031, 1, 1)))
    assert stored(path)['savingsGoals'][0]['name'] == 'Holiday'
    state.delete_goal(0)
    assert stored(path)['savingsGoals'] == []


def test_missing_index_raises(state):
    with pytest.raises(IndexError):
        state.delete_transaction(0)


def test_get_state_loads_once_per_session(monkeypatch, path):
    fake_st = SimpleNamespace(session_state={})
    monkeypatch.setattr(state_module, 'st', fake_st)
    calls = []

    def fake_load(cls, _path=None):
        calls.append(_path)
        return BudgetState.__new__(cls)

    monkeypatch.setattr(BudgetState, 'load', classmethod(fake_load))
    first = state_module.get_state()
    second = state_module.get_state()
    assert first is second
    assert len(calls) == 1


def test_tab_navigation(monkeypatch):
    fake_st = SimpleNamespace(session_state={})
    monkeypatch.setattr(state_module, 'st', fake_st)

    assert state_module.get_active_tab() == 'dashboard'
    assert state_module.pop_pending_tab() is None

    state_module.set_active_tab('budgets')
    assert state_module.get_active_tab() == 'budgets'
    assert state_module.pop_pending_tab() == 'budgets'
    assert state_module.pop_pending_tab() is None
