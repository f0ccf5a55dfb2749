"""Top‑level package for the Budget Planner.

A personal budget tracker: record income and expense transactions,
set per-category budgets, track savings goals and review monthly
reports.  The primary modules are:

* ``models`` – the Transaction, Budget and SavingsGoal records
* ``analytics`` – totals, budget status, goal projections and monthly reports
* ``storage`` – the persisted snapshot of all three collections
* ``state`` – the session state object and its mutation operations
* ``app`` – the Streamlit app that ties everything together

To run the app from the command line you can execute:

```bash
streamlit run budget_planner/app.py
```

or use ``python run_budget_planner.py``.
"""

from .analytics import BudgetAnalytics
from .models import Budget, SavingsGoal, Transaction
from .validation import ValidationError

__all__ = ["BudgetAnalytics", "Budget", "SavingsGoal", "Transaction", "ValidationError"]
