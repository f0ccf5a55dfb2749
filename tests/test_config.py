import importlib

from budget_planner import config


def test_state_path_can_be_overridden(monkeypatch, tmp_path):
    target = tmp_path / 'custom.json'
    monkeypatch.setenv('BUDGET_PLANNER_STATE_PATH', str(target))
    try:
        reloaded = importlib.reload(config)
        assert reloaded.STATE_PATH == target.resolve()
    finally:
        monkeypatch.delenv('BUDGET_PLANNER_STATE_PATH')
        importlib.reload(config)


def test_tabs_start_with_default():
    assert config.TABS[0][0] == config.DEFAULT_TAB
    assert [tab_id for tab_id, _ in config.TABS] == [
        'dashboard', 'transactions', 'budgets', 'savings', 'reports',
    ]


def test_palette_has_ten_colours():
    assert len(config.CHART_PALETTE) == 10
