"""Root conftest: puts the flat packages (core, assumptions, engine, reports) on sys.path for pytest."""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
