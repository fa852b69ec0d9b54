"""Per-call selection constraints: level defaults and workout-shape overrides."""

from __future__ import annotations

from dataclasses import dataclass

from routine_engine.models.enums import ExperienceLevel, ShapeKind


@dataclass(frozen=True)
class LevelConstraints:
    """Volume limits the selector must respect.

    Built from the experience level, then overwritten by the detected
    workout shape before selection runs.
    """

    max_exercises_per_muscle: int
    max_sets_per_exercise: int
    max_total_sets: int
    rest_seconds_range: tuple[int, int]


LEVEL_CONSTRAINTS: dict[ExperienceLevel, LevelConstraints] = {
    ExperienceLevel.BEGINNER: LevelConstraints(
        max_exercises_per_muscle=3,
        max_sets_per_exercise=3,
        max_total_sets=18,
        rest_seconds_range=(90, 180),
    ),
    ExperienceLevel.MODERATE: LevelConstraints(
        max_exercises_per_muscle=4,
        max_sets_per_exercise=4,
        max_total_sets=24,
        rest_seconds_range=(60, 150),
    ),
    ExperienceLevel.ADVANCED: LevelConstraints(
        max_exercises_per_muscle=5,
        max_sets_per_exercise=5,
        max_total_sets=30,
        rest_seconds_range=(45, 180),
    ),
}


def get_level_constraints(level: ExperienceLevel) -> LevelConstraints:
    """Look up the level-derived defaults (before any shape override)."""
    return LEVEL_CONSTRAINTS[level]


@dataclass(frozen=True)
class ShapeOverride:
    """Constraint overrides carried by a detected workout shape.

    Attributes:
        min_exercises: Degradation keeps trying until this many are admitted.
        target_exercises: Selection stops as soon as this many are admitted.
        max_exercises_per_muscle: Per-muscle cap replacing the level default.
        max_sets_per_exercise: Set clamp for compressed shapes (None = level default).
        max_total_sets: Total-set ceiling (None = level default).
        extra_minutes: Added to the requested time budget.
    """

    min_exercises: int
    target_exercises: int
    max_exercises_per_muscle: int
    max_sets_per_exercise: int | None = None
    max_total_sets: int | None = None
    extra_minutes: int = 0

    @property
    def compress_sets(self) -> bool:
        return self.max_sets_per_exercise is not None


@dataclass(frozen=True)
class WorkoutShape:
    """A shape variant plus its override record."""

    kind: ShapeKind
    override: ShapeOverride
    is_leg_day: bool = False

    def apply(self, base: LevelConstraints) -> LevelConstraints:
        """Overwrite level-derived constraints with this shape's overrides."""
        o = self.override
        return LevelConstraints(
            max_exercises_per_muscle=o.max_exercises_per_muscle,
            max_sets_per_exercise=(
                o.max_sets_per_exercise
                if o.max_sets_per_exercise is not None
                else base.max_sets_per_exercise
            ),
            max_total_sets=(
                o.max_total_sets if o.max_total_sets is not None else base.max_total_sets
            ),
            rest_seconds_range=base.rest_seconds_range,
        )
