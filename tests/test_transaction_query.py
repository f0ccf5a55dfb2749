from datetime import date, timedelta

import pytest

from budget_planner.models import Transaction
from budget_planner.transaction_query import TransactionQuery, run_query


def sample():
    return [
        Transaction('Weekly groceries', 85.0, 'Food', 'expense', date(2024, 3, 2)),
        Transaction('March salary', 2500.0, 'Salary', 'income', date(2024, 3, 1)),
        Transaction('Cinema', 22.0, 'Entertainment', 'expense', date(2024, 3, 9)),
        Transaction('Food truck', 12.0, 'Other', 'expense', date(2024, 2, 20)),
        Transaction('Refund', 40.0, 'Refunds', 'income', date(2024, 3, 5)),
    ]


def many(count):
    start = date(2024, 1, 1)
    return [
        Transaction(f'Item {i}', float(i + 1), 'Misc', 'expense', start + timedelta(days=i))
        for i in range(count)
    ]


def test_default_query_sorts_newest_first():
    result = run_query(sample(), TransactionQuery())
    assert [t.description for _, t in result.rows] == [
        'Cinema', 'Refund', 'Weekly groceries', 'March salary', 'Food truck',
    ]


def test_type_filter_income_only():
    result = run_query(sample(), TransactionQuery(type_filter='income'))
    assert {t.type for _, t in result.rows} == {'income'}
    assert result.total_matches == 2


def test_search_is_case_insensitive_on_description_or_category():
    result = run_query(sample(), TransactionQuery(search='FOOD'))
    assert sorted(t.description for _, t in result.rows) == ['Food truck', 'Weekly groceries']


def test_search_treats_input_literally():
    assert run_query(sample(), TransactionQuery(search='(')).total_matches == 0


def test_sort_by_amount_ascending():
    result = run_query(sample(), TransactionQuery(sort_by='amount', sort_order='asc'))
    amounts = [t.amount for _, t in result.rows]
    assert amounts == sorted(amounts)


def test_rows_carry_collection_indices():
    transactions = sample()
    result = run_query(transactions, TransactionQuery(type_filter='income'))
    for index, transaction in result.rows:
        assert transactions[index] is transaction


def test_totals_cover_all_matches():
    result = run_query(sample(), TransactionQuery())
    assert result.total_income == 2540.0
    assert result.total_expenses == 119.0
    assert result.balance == pytest.approx(2421.0)


def test_pagination_ten_per_page():
    transactions = many(23)
    result = run_query(transactions, TransactionQuery(page=3))
    assert result.total_pages == 3
    assert len(result.rows) == 3
    assert (result.first_shown, result.last_shown) == (21, 23)
    # totals are not limited to the visible page
    assert result.total_expenses == sum(t.amount for t in transactions)


def test_page_is_clamped():
    result = run_query(many(12), TransactionQuery(page=9))
    assert result.page == 2
    assert len(result.rows) == 2
    assert run_query(many(12), TransactionQuery(page=0)).page == 1


def test_empty_result():
    result = run_query([], TransactionQuery(search='anything'))
    assert result.rows == []
    assert result.total_pages == 0
    assert (result.first_shown, result.last_shown) == (0, 0)


def test_toggle_sort():
    query = TransactionQuery()
    flipped = query.toggle_sort('date')
    assert (flipped.sort_by, flipped.sort_order) == ('date', 'asc')
    switched = flipped.toggle_sort('amount')
    assert (switched.sort_by, switched.sort_order) == ('amount', 'desc')
    assert switched.sort_indicator('amount') == '↓'
    assert switched.sort_indicator('date') == ''
    with pytest.raises(ValueError):
        query.toggle_sort('category')


def test_search_keeps_surrounding_spaces():
    assert run_query(sample(), TransactionQuery(search='salary ')).total_matches == 0
    result = run_query(sample(), TransactionQuery(search='march '))
    assert [t.description for _, t in result.rows] == ['March salary']


def test_changing_filters_returns_to_first_page():
    query = TransactionQuery(sort_by='amount', sort_order='asc', page=3)
    searched = query.with_filters('rent', 'all')
    assert searched.page == 1
    assert (searched.search, searched.sort_by, searched.sort_order) == ('rent', 'amount', 'asc')
    assert query.with_filters('', 'income').page == 1


def test_unchanged_filters_keep_the_page():
    query = TransactionQuery(search='rent', page=3)
    assert query.with_filters('rent', 'all') is query
