"""Configuration management for the budget planner.

This module centralizes all configuration values including paths,
UI constants, and environment variable overrides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

# Base project root - assumes this file is in budget_planner/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directory and the persisted snapshot file
DATA_DIR = Path(os.getenv("BUDGET_PLANNER_DATA_DIR", _PROJECT_ROOT / "data"))
STATE_PATH = Path(
    os.getenv("BUDGET_PLANNER_STATE_PATH", DATA_DIR / "budget_data.json")
).resolve()

LOG_LEVEL = os.getenv("BUDGET_PLANNER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

APP_TITLE = "Budget Planner"

# (tab id, label) in display order
TABS = [
    ("dashboard", "Dashboard"),
    ("transactions", "Transactions"),
    ("budgets", "Budgets"),
    ("savings", "Savings"),
    ("reports", "Reports"),
]
DEFAULT_TAB = "dashboard"

EXPENSE_CATEGORIES = [
    "Food", "Housing", "Transportation", "Entertainment",
    "Healthcare", "Education", "Utilities", "Shopping", "Personal", "Other",
]
INCOME_CATEGORIES = ["Salary", "Freelance", "Investments", "Gifts", "Refunds", "Other"]

TRANSACTION_TYPES = ("income", "expense")

ITEMS_PER_PAGE = 10
RECENT_TRANSACTION_COUNT = 5
TOP_EXPENSE_COUNT = 3

# Budget status thresholds (percent of limit)
BUDGET_WARNING_PCT = 75.0
BUDGET_DANGER_PCT = 90.0
BUDGET_EXCEEDED_PCT = 100.0

GOAL_INCREMENTS = (10, 25, 50, 100)
DAYS_PER_MONTH = 30
MIN_MONTHS_REMAINING = 0.1

CHART_PALETTE = [
    "#4F46E5", "#06B6D4", "#10B981", "#F59E0B", "#EF4444",
    "#8B5CF6", "#EC4899", "#6366F1", "#14B8A6", "#F97316",
]

_LOGGING_CONFIGURED = False


def ensure_data_directories() -> None:
    """Create the data directory (and the snapshot's parent) if missing."""
    for directory in [DATA_DIR, STATE_PATH.parent]:
        directory.mkdir(parents=True, exist_ok=True)


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
