from datetime import date

import pytest

from budget_planner.validation import (
    ValidationError,
    parse_amount,
    resolve_category,
    validate_budget,
    validate_savings_goal,
    validate_transaction,
)

TODAY = date(2024, 6, 15)


def _error(func, *args, **kwargs) -> str:
    with pytest.raises(ValidationError) as excinfo:
        func(*args, **kwargs)
    return str(excinfo.value)


def test_parse_amount():
    assert parse_amount('12.50') == 12.5
    assert parse_amount(' ') is None
    assert parse_amount('abc') is None
    assert parse_amount(None) is None
    assert parse_amount(3) == 3.0


@pytest.mark.parametrize('value', ['inf', '-Infinity', 'nan', '1e400', float('inf'), True])
def test_parse_amount_rejects_non_finite_and_bool(value):
    assert parse_amount(value) is None


def test_infinite_transaction_amount_is_rejected():
    with pytest.raises(ValidationError, match='Please enter a valid amount'):
        validate_transaction('Lunch', 'inf', 'Food', 'expense', '2024-06-01')


def test_valid_transaction_is_trimmed():
    txn = validate_transaction('  Lunch  ', '12.5', ' Food ', 'expense', '2024-06-01')
    assert txn.description == 'Lunch'
    assert txn.category == 'Food'
    assert txn.amount == 12.5
    assert txn.date == date(2024, 6, 1)


@pytest.mark.parametrize(
    'args, message',
    [
        (('   ', 10, 'Food', 'expense', TODAY), 'Please enter a description'),
        (('Lunch', '', 'Food', 'expense', TODAY), 'Please enter a valid amount'),
        (('Lunch', 0, 'Food', 'expense', TODAY), 'Please enter a valid amount'),
        (('Lunch', -5, 'Food', 'expense', TODAY), 'Please enter a valid amount'),
        (('Lunch', 10, '  ', 'expense', TODAY), 'Please select or enter a category'),
        (('Lunch', 10, 'Food', 'transfer', TODAY), 'Please choose income or expense'),
        (('Lunch', 10, 'Food', 'expense', None), 'Please enter a date'),
    ],
)
def test_transaction_errors(args, message):
    assert _error(validate_transaction, *args) == message


def test_first_failing_check_wins():
    assert _error(validate_transaction, '', -1, '', 'bogus', None) == 'Please enter a description'


def test_resolve_category_prefers_custom_when_active():
    assert resolve_category('Food', '  Pets ', use_custom=True) == 'Pets'
    assert resolve_category('Food', 'Pets', use_custom=False) == 'Food'
    assert resolve_category(None, None, use_custom=False) == ''


def test_budget_validation():
    assert validate_budget('Food', '250', []).limit == 250.0
    assert _error(validate_budget, '', 100) == 'Please select or enter a category'
    assert _error(validate_budget, 'Food', '0') == 'Please enter a valid limit amount'


def test_duplicate_budget_category_rejected_on_create_only():
    assert _error(validate_budget, 'Food', 100, ['Food']) == 'A budget for Food already exists'
    assert validate_budget('Food', 100, ['Food'], editing=True).limit == 100.0


def test_savings_goal_validation():
    goal = validate_savings_goal(' Car ', 5000, 0, date(2025, 1, 1), today=TODAY)
    assert goal.name == 'Car'
    assert goal.current_amount == 0.0


def test_savings_goal_target_date_may_be_today():
    assert validate_savings_goal('Car', 100, 10, TODAY, today=TODAY).target_date == TODAY


@pytest.mark.parametrize(
    'args, message',
    [
        (('', 100, 0, date(2025, 1, 1)), 'Please enter a name for this goal'),
        (('Car', None, 0, date(2025, 1, 1)), 'Please enter a valid target amount'),
        (('Car', 100, None, date(2025, 1, 1)), 'Please enter a valid current amount'),
        (('Car', 100, -1, date(2025, 1, 1)), 'Please enter a valid current amount'),
        (('Car', 100, 150, date(2025, 1, 1)), 'Current amount cannot be greater than target amount'),
        (('Car', 100, 50, None), 'Please set a target date'),
        (('Car', 100, 50, date(2024, 6, 14)), 'Target date cannot be in the past'),
    ],
)
def test_savings_goal_errors(args, message):
    assert _error(validate_savings_goal, *args, today=TODAY) == message
