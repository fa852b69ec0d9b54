"""Exercise cost model: estimated minutes and rest per exercise.

Time per exercise = (sets x work time) + ((sets - 1) x rest) + transition,
using the fixed per-tier tables in ``models.enums``. All functions are pure.
"""

from __future__ import annotations

from typing import Iterable

from routine_engine.models.enums import (
    REST_SECONDS,
    TIME_PER_SET_S,
    TRANSITION_S,
    ExerciseTier,
    ExperienceLevel,
)
from routine_engine.models.routine import SelectedExercise


def rest_seconds(tier: ExerciseTier, level: ExperienceLevel) -> int:
    """Rest between sets for a tier at a given experience level."""
    return REST_SECONDS[tier][level]


def estimate_minutes(tier: ExerciseTier, level: ExperienceLevel, sets: int) -> float:
    """Estimate how long an exercise takes, in minutes.

    Args:
        tier: Exercise tier (selects work time per set and rest).
        level: Experience level (selects rest between sets).
        sets: Number of working sets. Zero or fewer costs only the transition.

    Returns:
        Non-negative estimated minutes.
    """
    sets = max(sets, 0)
    work_s = sets * TIME_PER_SET_S[tier]
    rest_s = max(sets - 1, 0) * rest_seconds(tier, level)
    return (work_s + rest_s + TRANSITION_S) / 60.0


def total_exercise_minutes(
    exercises: Iterable[SelectedExercise], level: ExperienceLevel,
) -> float:
    """Sum of estimate_minutes() across selected exercises."""
    return sum(estimate_minutes(ex.tier, level, ex.sets) for ex in exercises)
