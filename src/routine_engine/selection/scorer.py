"""Candidate scorer: builds the score-ordered queue the selector walks.

Score = tier base + preference adjustment + pattern-match bonus + jitter.
The jitter is drawn from the injected generator on every call, so scores
are never persisted or compared across calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from routine_engine.catalog.catalog import ExerciseCatalog
from routine_engine.models.enums import (
    BALANCED_FLAT_BONUS,
    BALANCED_ISOLATION_BONUS,
    COMPOUND_FOCUS_BONUS,
    COMPOUND_FOCUS_ISOLATION_PENALTY,
    ISOLATION_FOCUS_BONUS,
    ISOLATION_FOCUS_COMPOUND_PENALTY,
    PATTERN_MATCH_BONUS,
    SCORE_JITTER_MAX,
    SCORE_TIER_CEILING,
    SCORE_TIER_WEIGHT,
    ExercisePreference,
    ExerciseTag,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
)
from routine_engine.models.exercise import ExerciseRecord


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog exercise considered for one requested muscle group."""

    exercise: ExerciseRecord
    muscle_group: MuscleGroup
    score: float


def is_pattern_excluded(
    requested: MovementPattern, exercise_pattern: MovementPattern,
) -> bool:
    """A push day never surfaces pull exercises, and vice versa."""
    if requested == MovementPattern.PUSH:
        return exercise_pattern == MovementPattern.PULL
    if requested == MovementPattern.PULL:
        return exercise_pattern == MovementPattern.PUSH
    return False


def preference_adjustment(tag: ExerciseTag, preference: ExercisePreference) -> float:
    """Bonus or penalty for a tier tag under the requested preference."""
    if preference == ExercisePreference.COMPOUND:
        if tag == ExerciseTag.COMPOUND:
            return COMPOUND_FOCUS_BONUS
        if tag == ExerciseTag.ISOLATION:
            return -COMPOUND_FOCUS_ISOLATION_PENALTY
        return 0.0
    if preference == ExercisePreference.ISOLATION:
        if tag == ExerciseTag.ISOLATION:
            return ISOLATION_FOCUS_BONUS
        if tag == ExerciseTag.COMPOUND:
            return -ISOLATION_FOCUS_COMPOUND_PENALTY
        return 0.0
    # Balanced
    bonus = BALANCED_FLAT_BONUS
    if tag == ExerciseTag.ISOLATION:
        bonus += BALANCED_ISOLATION_BONUS
    return bonus


def score_exercise(
    exercise: ExerciseRecord,
    preference: ExercisePreference,
    movement_pattern: MovementPattern,
    jitter: float = 0.0,
) -> float:
    """Desirability score of one exercise. ``jitter=0`` gives the pre-jitter score."""
    score = (SCORE_TIER_CEILING - exercise.tier_priority) * SCORE_TIER_WEIGHT
    score += preference_adjustment(exercise.tag, preference)
    if exercise.movement_pattern == movement_pattern:
        score += PATTERN_MATCH_BONUS
    return score + jitter


def build_queue(
    catalog: ExerciseCatalog,
    muscle_groups: Sequence[MuscleGroup],
    level: ExperienceLevel,
    preference: ExercisePreference,
    movement_pattern: MovementPattern,
    rng: np.random.Generator,
) -> list[ScoredCandidate]:
    """Score every compatible (exercise, muscle group) pair.

    Args:
        catalog: Exercise source.
        muscle_groups: Primary muscle groups, in request order.
        level: Experience level used for the catalog lookup.
        preference: Compound / balanced / isolation bias.
        movement_pattern: Requested day pattern (hard-excludes the opposite).
        rng: Entropy source for the jitter.

    Returns:
        Candidates sorted by descending score.
    """
    queue: list[ScoredCandidate] = []
    for group in muscle_groups:
        for exercise in catalog.lookup(group, level):
            if is_pattern_excluded(movement_pattern, exercise.movement_pattern):
                continue
            jitter = float(rng.uniform(0.0, SCORE_JITTER_MAX))
            queue.append(ScoredCandidate(
                exercise=exercise,
                muscle_group=group,
                score=score_exercise(exercise, preference, movement_pattern, jitter),
            ))

    queue.sort(key=lambda c: c.score, reverse=True)
    return queue
