"""Local persistent storage for the budget planner snapshot.

The whole application state lives in one JSON object stored under a
single slot and overwritten wholesale on every change:

.. code-block:: json

    {"transactions": [...], "budgets": [...], "savingsGoals": [...]}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .config import STATE_PATH
from .models import Budget, SavingsGoal, Transaction

logger = logging.getLogger(__name__)

T = TypeVar('T')

SNAPSHOT_KEYS = ('transactions', 'budgets', 'savingsGoals')


@dataclass
class Snapshot:
    """The three record collections as persisted together."""

    transactions: List[Transaction] = field(default_factory=list)
    budgets: List[Budget] = field(default_factory=list)
    savings_goals: List[SavingsGoal] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            'transactions': [t.to_dict() for t in self.transactions],
            'budgets': [b.to_dict() for b in self.budgets],
            'savingsGoals': [g.to_dict() for g in self.savings_goals],
        }


def _parse_records(raw: Any, key: str, parser: Callable[[Dict[str, Any]], T]) -> List[T]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Ignoring stored %s: expected a list, got %s", key, type(raw).__name__)
        return []
    records: List[T] = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.warning("Skipping stored %s[%d]: not an object", key, position)
            continue
        try:
            records.append(parser(item))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping stored %s[%d]: %s", key, position, exc)
    return records


def snapshot_from_dict(data: Any) -> Snapshot:
    """Build a snapshot from decoded JSON, dropping anything malformed."""
    if not isinstance(data, dict):
        logger.warning("Ignoring stored budget data: root is not an object")
        return Snapshot()
    return Snapshot(
        transactions=_parse_records(data.get('transactions'), 'transactions', Transaction.from_dict),
        budgets=_parse_records(data.get('budgets'), 'budgets', Budget.from_dict),
        savings_goals=_parse_records(data.get('savingsGoals'), 'savingsGoals', SavingsGoal.from_dict),
    )


class SnapshotStore:
    """Reads and writes the snapshot file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else STATE_PATH

    def load(self) -> Snapshot:
        """Load the stored snapshot.

        Missing, unreadable or malformed files yield an empty snapshot;
        nothing is raised.
        """
        if not self.path.exists():
            return Snapshot()
        try:
            with self.path.open('r', encoding='utf-8') as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
            logger.warning("Error loading saved data from %s: %s", self.path, exc)
            return Snapshot()
        return snapshot_from_dict(data)

    def save(self, snapshot: Snapshot) -> bool:
        """Overwrite the stored snapshot.

        Write failures are logged and reported through the return value
        rather than raised.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('w', encoding='utf-8') as handle:
                json.dump(snapshot.to_dict(), handle, indent=2)
        except OSError as exc:
            logger.error("Failed to save budget data to %s: %s", self.path, exc)
            return False
        return True
