from datetime import date

import pytest

from budget_planner.formatting import (
    escape_dollar_for_markdown,
    format_balance,
    format_currency,
    format_date,
    format_signed_amount,
    format_time_until,
)


def test_format_currency():
    assert format_currency(1950) == '$1,950.00'
    assert format_currency(1234.567, include_sign=False) == '1,234.57'


def test_format_balance_labels_surplus_and_deficit():
    assert format_balance(1950.0) == '$1,950.00 surplus'
    assert format_balance(-20.5) == '$20.50 deficit'
    assert format_balance(0) == '$0.00 surplus'


def test_format_signed_amount():
    assert format_signed_amount(50, 'expense') == '-$50.00'
    assert format_signed_amount(2000, 'income') == '+$2,000.00'


def test_escape_dollar_for_markdown():
    assert escape_dollar_for_markdown('$5 / $10') == '\\$5 / \\$10'


def test_format_date():
    assert format_date(date(2024, 1, 5)) == 'Jan 05, 2024'


@pytest.mark.parametrize(
    'days, label',
    [(-3, 'Today'), (0, 'Today'), (1, 'Tomorrow'), (5, '5 days'), (7, '1 weeks'),
     (10, '2 weeks'), (30, '1 months'), (45, '2 months'), (365, '1 years'), (400, '2 years')],
)
def test_format_time_until(days, label):
    assert format_time_until(days) == label
