"""Routine assembly: totals, naming, and merging regenerated sections."""

from routine_engine.assembly.builder import (
    RoutineBuilder,
    replace_cardio_finisher,
    replace_core_finishers,
    replace_main_exercises,
)
from routine_engine.assembly.naming import build_routine_name

__all__ = [
    "RoutineBuilder",
    "build_routine_name",
    "replace_cardio_finisher",
    "replace_core_finishers",
    "replace_main_exercises",
]
