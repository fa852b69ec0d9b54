"""Catalog exercise record: read-only input to the generator."""

from __future__ import annotations

from dataclasses import dataclass

from routine_engine.models.enums import (
    TIER_PRIORITY,
    TIER_TAG,
    ExerciseTag,
    ExerciseTier,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
)


@dataclass(frozen=True)
class ExerciseRecord:
    """One catalog exercise.

    ``is_high_impact`` is only meaningful for cardio entries and is used to
    keep leg days away from jumping/running finishers.
    """

    id: str
    name: str
    tier: ExerciseTier
    primary_muscle: MuscleGroup
    secondary_muscle: MuscleGroup | None
    allowed_levels: frozenset[ExperienceLevel]
    is_beginner_safe: bool
    equipment: str
    movement_pattern: MovementPattern
    is_high_impact: bool = False

    @property
    def tag(self) -> ExerciseTag:
        return TIER_TAG[self.tier]

    @property
    def tier_priority(self) -> int:
        return TIER_PRIORITY[self.tier]

    def is_allowed_for(self, level: ExperienceLevel) -> bool:
        """Level gate plus the beginner safety flag."""
        if level not in self.allowed_levels:
            return False
        return level != ExperienceLevel.BEGINNER or self.is_beginner_safe
