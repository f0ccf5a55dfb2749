import pandas as pd
import pytest

from budget_planner.charts import (
    category_color,
    category_hash,
    create_expense_pie_chart,
    pie_sectors,
)
from budget_planner.config import CHART_PALETTE


def test_category_hash_known_values():
    assert category_hash('') == 0
    assert category_hash('A') == 65
    assert category_hash('AB') == 66 + 65 * 32 - 65


def test_category_color_is_stable_and_from_palette():
    assert category_color('A') == CHART_PALETTE[5]
    assert category_color('AB') == CHART_PALETTE[1]
    assert category_color('Groceries and household supplies') == category_color('Groceries and household supplies')
    assert category_color('Entertainment') in CHART_PALETTE


def test_pie_sectors_are_proportional_and_cover_circle():
    totals = pd.Series({'Food': 50.0, 'Housing': 150.0})
    sectors = pie_sectors(totals)
    assert [s.category for s in sectors] == ['Housing', 'Food']
    housing, food = sectors
    assert housing.percentage == pytest.approx(75.0)
    assert housing.start_angle == 0
    assert housing.end_angle == pytest.approx(270.0)
    assert food.start_angle == pytest.approx(270.0)
    assert food.end_angle == pytest.approx(360.0)
    assert housing.large_arc and not food.large_arc


def test_svg_path_starts_at_twelve_o_clock():
    sector = pie_sectors(pd.Series({'Food': 1.0, 'Rent': 1.0}))[0]
    assert sector.svg_path.startswith('M 50 50 L 50.0000 10.0000 A 40 40 0 0 1 ')


def test_pie_sectors_empty_and_non_positive():
    assert pie_sectors(pd.Series(dtype=float)) == []
    assert pie_sectors(pd.Series({'Food': 0.0})) == []


def test_expense_pie_chart_uses_category_colors():
    totals = pd.Series({'Food': 30.0, 'Housing': 70.0})
    fig = create_expense_pie_chart(totals)
    pie = fig.data[0]
    assert list(pie.labels) == ['Housing', 'Food']
    assert list(pie.marker.colors) == [category_color('Housing'), category_color('Food')]


def test_expense_pie_chart_without_data():
    fig = create_expense_pie_chart(pd.Series(dtype=float))
    assert len(fig.data) == 0
    assert fig.layout.title.text == 'No data to display'
