#!/usr/bin/env python3
"""Direct launcher for the Budget Planner.

This script launches Streamlit on ``budget_planner/app.py`` from the
project root so the package imports resolve.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()

if __name__ == "__main__":
    os.chdir(project_root)
    sys.path.insert(0, str(project_root))
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(Path("budget_planner") / "app.py"),
        *sys.argv[1:],
    ])
