"""Workout-shape detection.

Classifies a request into one shape variant whose override record replaces
the level-derived constraints before selection runs. Precedence: full-body,
legs-only day, push/pull day, then custom single/dual/multi muscle.
"""

from __future__ import annotations

import math
from typing import Sequence

from routine_engine.models.constraints import (
    ShapeOverride,
    WorkoutShape,
    get_level_constraints,
)
from routine_engine.models.enums import (
    CUSTOM_MIN_EXERCISES,
    DUAL_MUSCLE_MAX_PER_MUSCLE,
    DUAL_MUSCLE_TARGET_EXERCISES,
    FULL_BODY_EXTRA_MIN,
    FULL_BODY_MAX_PER_MUSCLE,
    FULL_BODY_MAX_SETS_PER_EXERCISE,
    FULL_BODY_MAX_TOTAL_SETS,
    FULL_BODY_MIN_EXERCISES,
    FULL_BODY_MIN_GROUPS,
    FULL_BODY_TARGET_EXERCISES,
    LEG_DAY_EXTRA_MIN,
    LEG_DAY_EXTRA_SETS,
    LEG_DAY_MAX_PER_MUSCLE,
    LEG_DAY_MAX_SETS_PER_EXERCISE,
    LEG_DAY_MAX_TOTAL_SETS,
    LEG_DAY_MIN_EXERCISES,
    LEG_DAY_TARGET_EXERCISES,
    MULTI_MUSCLE_TARGET_EXERCISES,
    SINGLE_MUSCLE_EXERCISES,
    SPLIT_DAY_MAX_PER_MUSCLE,
    SPLIT_DAY_MIN_EXERCISES,
    SPLIT_DAY_TARGET_EXERCISES,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
    ShapeKind,
)


def detect_shape(
    primary_groups: Sequence[MuscleGroup],
    movement_pattern: MovementPattern,
    level: ExperienceLevel,
) -> WorkoutShape:
    """Classify a request into its workout shape.

    Args:
        primary_groups: Requested muscle groups without finisher flags.
        movement_pattern: Requested day pattern.
        level: Experience level (scales a few caps).

    Returns:
        The WorkoutShape with its constraint override record.
    """
    count = len(primary_groups)

    if count >= FULL_BODY_MIN_GROUPS:
        return WorkoutShape(
            kind=ShapeKind.FULL_BODY,
            override=ShapeOverride(
                min_exercises=FULL_BODY_MIN_EXERCISES,
                target_exercises=FULL_BODY_TARGET_EXERCISES,
                max_exercises_per_muscle=FULL_BODY_MAX_PER_MUSCLE,
                max_sets_per_exercise=FULL_BODY_MAX_SETS_PER_EXERCISE,
                max_total_sets=FULL_BODY_MAX_TOTAL_SETS,
                extra_minutes=FULL_BODY_EXTRA_MIN,
            ),
        )

    if tuple(primary_groups) == (MuscleGroup.LEGS,):
        # Brutal leg day: more movements to cover quads, hamstrings, glutes, calves
        level_sets = get_level_constraints(level).max_total_sets
        return WorkoutShape(
            kind=ShapeKind.PUSH_PULL_LEG,
            override=ShapeOverride(
                min_exercises=LEG_DAY_MIN_EXERCISES,
                target_exercises=LEG_DAY_TARGET_EXERCISES,
                max_exercises_per_muscle=LEG_DAY_MAX_PER_MUSCLE[level],
                max_sets_per_exercise=LEG_DAY_MAX_SETS_PER_EXERCISE,
                max_total_sets=min(level_sets + LEG_DAY_EXTRA_SETS, LEG_DAY_MAX_TOTAL_SETS),
                extra_minutes=LEG_DAY_EXTRA_MIN,
            ),
            is_leg_day=True,
        )

    if movement_pattern in (MovementPattern.PUSH, MovementPattern.PULL):
        # Fewer groups need a looser cap or the minimum is unreachable
        per_muscle = max(
            SPLIT_DAY_MAX_PER_MUSCLE[level],
            math.ceil(SPLIT_DAY_MIN_EXERCISES / max(count, 1)),
        )
        return WorkoutShape(
            kind=ShapeKind.PUSH_PULL_LEG,
            override=ShapeOverride(
                min_exercises=SPLIT_DAY_MIN_EXERCISES,
                target_exercises=SPLIT_DAY_TARGET_EXERCISES,
                max_exercises_per_muscle=per_muscle,
            ),
        )

    if count == 1:
        return WorkoutShape(
            kind=ShapeKind.SINGLE_MUSCLE,
            override=ShapeOverride(
                min_exercises=SINGLE_MUSCLE_EXERCISES,
                target_exercises=SINGLE_MUSCLE_EXERCISES,
                max_exercises_per_muscle=SINGLE_MUSCLE_EXERCISES,
            ),
        )

    if count == 2:
        return WorkoutShape(
            kind=ShapeKind.DUAL_MUSCLE,
            override=ShapeOverride(
                min_exercises=CUSTOM_MIN_EXERCISES,
                target_exercises=DUAL_MUSCLE_TARGET_EXERCISES,
                max_exercises_per_muscle=DUAL_MUSCLE_MAX_PER_MUSCLE,
            ),
        )

    # Three custom groups, or none at all (finisher-only request)
    per_muscle = math.ceil(MULTI_MUSCLE_TARGET_EXERCISES / max(count, 1))
    return WorkoutShape(
        kind=ShapeKind.MULTI_MUSCLE,
        override=ShapeOverride(
            min_exercises=CUSTOM_MIN_EXERCISES,
            target_exercises=MULTI_MUSCLE_TARGET_EXERCISES,
            max_exercises_per_muscle=per_muscle,
        ),
    )
