"""Frozen generation request: the sole input to RoutineEngine.generate()."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from routine_engine.exceptions import InvalidConfigError
from routine_engine.models.enums import (
    DEFAULT_TIME_BUDGET_MIN,
    MAX_MUSCLE_GROUPS,
    ExercisePreference,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
    parse_enum,
)


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable generation request.

    ``muscle_groups`` keeps the caller's order. CARDIO and CORE in that list
    act as finisher flags, equivalent to the include_* booleans.
    """

    muscle_groups: tuple[MuscleGroup, ...]
    experience_level: ExperienceLevel = ExperienceLevel.MODERATE
    exercise_preference: ExercisePreference = ExercisePreference.BALANCED
    movement_pattern: MovementPattern = MovementPattern.MIXED
    include_cardio_finisher: bool = False
    include_core_finisher: bool = False
    time_budget_minutes: int = DEFAULT_TIME_BUDGET_MIN

    def __post_init__(self) -> None:
        groups = tuple(self.muscle_groups)
        object.__setattr__(self, "muscle_groups", groups)
        if not groups:
            raise InvalidConfigError(
                "At least one muscle group is required", field="muscle_groups",
            )
        if len(groups) > MAX_MUSCLE_GROUPS:
            raise InvalidConfigError(
                f"At most {MAX_MUSCLE_GROUPS} muscle groups may be selected, got {len(groups)}",
                field="muscle_groups",
            )
        if len(set(groups)) != len(groups):
            raise InvalidConfigError(
                "Muscle groups must not repeat", field="muscle_groups",
            )
        if self.movement_pattern == MovementPattern.NEUTRAL:
            raise InvalidConfigError(
                "Requested movement pattern must be push, pull or mixed",
                field="movement_pattern",
            )
        if self.time_budget_minutes <= 0:
            raise InvalidConfigError(
                f"Time budget must be positive, got {self.time_budget_minutes}",
                field="time_budget_minutes",
            )

    @classmethod
    def create(
        cls,
        muscle_groups: Iterable[str | MuscleGroup],
        experience_level: str | ExperienceLevel = ExperienceLevel.MODERATE,
        exercise_preference: str | ExercisePreference = ExercisePreference.BALANCED,
        movement_pattern: str | MovementPattern = MovementPattern.MIXED,
        include_cardio_finisher: bool = False,
        include_core_finisher: bool = False,
        time_budget_minutes: int = DEFAULT_TIME_BUDGET_MIN,
    ) -> GenerationConfig:
        """Build a config from plain strings such as ``"chest"`` or ``"isolation-focus"``.

        Raises:
            InvalidConfigError: On unknown identifiers or failed validation.
        """
        return cls(
            muscle_groups=tuple(
                parse_enum(MuscleGroup, g, field="muscle_groups") for g in muscle_groups
            ),
            experience_level=parse_enum(
                ExperienceLevel, experience_level, field="experience_level",
            ),
            exercise_preference=parse_enum(
                ExercisePreference, exercise_preference, field="exercise_preference",
            ),
            movement_pattern=parse_enum(
                MovementPattern, movement_pattern, field="movement_pattern",
            ),
            include_cardio_finisher=include_cardio_finisher,
            include_core_finisher=include_core_finisher,
            time_budget_minutes=int(time_budget_minutes),
        )

    @property
    def primary_muscle_groups(self) -> tuple[MuscleGroup, ...]:
        """Requested groups with the finisher flags removed."""
        return tuple(g for g in self.muscle_groups if not g.is_finisher)

    @property
    def wants_cardio_finisher(self) -> bool:
        return self.include_cardio_finisher or MuscleGroup.CARDIO in self.muscle_groups

    @property
    def wants_core_finisher(self) -> bool:
        return self.include_core_finisher or MuscleGroup.CORE in self.muscle_groups
