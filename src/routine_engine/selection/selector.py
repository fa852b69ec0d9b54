"""Budgeted greedy selector.

Walks the score-ordered queue once, admitting candidates while a per-muscle
cap, a total set budget, and a total time budget all hold. Candidates that
do not fit are degraded (fewer sets) while the shape minimum is unmet.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Sequence

from routine_engine.math.cost_model import estimate_minutes, rest_seconds
from routine_engine.models.constraints import LevelConstraints, WorkoutShape
from routine_engine.models.enums import (
    DEFAULT_REPS,
    DEFAULT_SETS,
    DEGRADE_MIN_REMAINING_MIN,
    DEGRADE_SET_FLOOR,
    TIER_PRIORITY,
    ExperienceLevel,
    MuscleGroup,
)
from routine_engine.models.routine import SelectedExercise
from routine_engine.selection.scorer import ScoredCandidate

logger = logging.getLogger(__name__)


def select_exercises(
    queue: Sequence[ScoredCandidate],
    constraints: LevelConstraints,
    time_budget_min: float,
    level: ExperienceLevel,
    shape: WorkoutShape,
) -> tuple[SelectedExercise, ...]:
    """Select the main-block exercises from a scored queue.

    Algorithm:
    1. Skip candidates whose muscle is at its cap or whose id is taken
    2. Default sets/reps from the tier (clamped when the shape compresses sets)
    3. Admit at full sets if both time and set budgets allow
    4. Otherwise, while under the shape minimum and with more than 5 min
       left, drop one set at a time (floor 2) and admit at the first fit
    5. Stop at the shape target; stop on an exhausted budget only once the
       minimum has been met
    6. Reorder by tier priority (compounds first) and number the positions

    Args:
        queue: Candidates in descending score order.
        constraints: Shape-overridden constraints for this call.
        time_budget_min: Minutes available for the main block.
        level: Experience level (sets, reps, rest, cost).
        shape: Detected shape (min/target counts, set compression).

    Returns:
        Selected exercises in execution order.
    """
    override = shape.override
    selected: list[SelectedExercise] = []
    selected_ids: set[str] = set()
    muscle_counts: dict[MuscleGroup, int] = {}
    time_remaining = float(time_budget_min)
    sets_remaining = constraints.max_total_sets

    for candidate in queue:
        if len(selected) >= override.target_exercises:
            break

        exercise = candidate.exercise
        count = muscle_counts.get(candidate.muscle_group, 0)
        if count >= constraints.max_exercises_per_muscle:
            continue
        if exercise.id in selected_ids:
            continue

        sets = DEFAULT_SETS[exercise.tier][level]
        if override.compress_sets:
            sets = min(sets, constraints.max_sets_per_exercise)
        cost = estimate_minutes(exercise.tier, level, sets)

        admitted_sets: int | None = None
        if cost <= time_remaining and sets <= sets_remaining:
            admitted_sets = sets
        elif (
            time_remaining > DEGRADE_MIN_REMAINING_MIN
            and len(selected) < override.min_exercises
        ):
            while sets > DEGRADE_SET_FLOOR:
                sets -= 1
                cost = estimate_minutes(exercise.tier, level, sets)
                if cost <= time_remaining and sets <= sets_remaining:
                    admitted_sets = sets
                    logger.debug(
                        "Degraded %s to %d sets (%.1f min left)",
                        exercise.id, sets, time_remaining,
                    )
                    break

        if admitted_sets is not None:
            selected.append(SelectedExercise(
                id=exercise.id,
                name=exercise.name,
                tier=exercise.tier,
                tag=exercise.tag,
                primary_muscle=exercise.primary_muscle,
                secondary_muscle=exercise.secondary_muscle,
                sets=admitted_sets,
                reps=DEFAULT_REPS[exercise.tier][level],
                rest_seconds=rest_seconds(exercise.tier, level),
                equipment=exercise.equipment,
            ))
            selected_ids.add(exercise.id)
            muscle_counts[candidate.muscle_group] = count + 1
            time_remaining -= cost
            sets_remaining -= admitted_sets

        if len(selected) >= override.target_exercises:
            break
        budget_exhausted = time_remaining <= 0 or sets_remaining <= 0
        if budget_exhausted and len(selected) >= override.min_exercises:
            break

    # Presentation order only: compounds before isolation
    ordered = sorted(selected, key=lambda ex: TIER_PRIORITY[ex.tier])
    return tuple(
        dataclasses.replace(ex, order=i) for i, ex in enumerate(ordered)
    )
