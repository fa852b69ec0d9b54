"""Environment-variable-based configuration for the routine CLI."""

from __future__ import annotations

import os
from pathlib import Path

_seed = os.environ.get("ROUTINE_SEED", "")
_catalog_path = os.environ.get("ROUTINE_CATALOG_PATH", "")

TIME_BUDGET_MINUTES: int = int(os.environ.get("ROUTINE_TIME_BUDGET", "65"))
SEED: int | None = int(_seed) if _seed else None
CATALOG_PATH: Path | None = Path(_catalog_path).expanduser() if _catalog_path else None
LOG_LEVEL: str = os.environ.get("ROUTINE_LOG_LEVEL", "INFO").upper()
