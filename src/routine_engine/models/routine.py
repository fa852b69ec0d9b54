"""Routine models: the final output of the routine engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from routine_engine.models.enums import (
    ExercisePreference,
    ExerciseTag,
    ExerciseTier,
    ExperienceLevel,
    FinisherKind,
    MovementPattern,
    MuscleGroup,
)


@dataclass(frozen=True)
class SelectedExercise:
    """A main-block exercise with its set/rep/rest prescription."""

    id: str
    name: str
    tier: ExerciseTier
    tag: ExerciseTag
    primary_muscle: MuscleGroup
    secondary_muscle: MuscleGroup | None
    sets: int
    reps: str                  # e.g. "8-10", "5"
    rest_seconds: int
    equipment: str
    order: int = 0             # final position in the main block


@dataclass(frozen=True)
class SectionEntry:
    """One line of a warm-up or cool-down block."""

    name: str
    duration: str              # display string, e.g. "1-2 min"
    notes: str = ""


@dataclass(frozen=True)
class SectionBlock:
    """Warm-up or cool-down block with its fixed duration."""

    duration_min: int
    entries: tuple[SectionEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FinisherEntry:
    """A core or cardio finisher item.

    ``exercise_id`` is None for the hardcoded cardio fallback.
    """

    name: str
    sets: int
    reps: str
    kind: FinisherKind
    estimated_time_min: float
    exercise_id: str | None = None


@dataclass(frozen=True)
class Routine:
    """A generated routine, handed as-is to persistence and preview.

    Carries no identity: the repository assigns one when saving.
    """

    routine_name: str
    muscle_groups: tuple[MuscleGroup, ...]
    level: ExperienceLevel
    movement_pattern: MovementPattern
    exercise_preference: ExercisePreference
    warmup: SectionBlock
    main_exercises: tuple[SelectedExercise, ...]
    finishers: tuple[FinisherEntry, ...]     # core entries before cardio
    cooldown: SectionBlock
    total_time_minutes: int
    total_sets: int
    total_exercise_count: int
    time_budget_minutes: int
    is_ai_generated: bool = True

    @property
    def primary_muscle_groups(self) -> tuple[MuscleGroup, ...]:
        return tuple(g for g in self.muscle_groups if not g.is_finisher)

    @property
    def core_finishers(self) -> tuple[FinisherEntry, ...]:
        return tuple(f for f in self.finishers if f.kind == FinisherKind.CORE)

    @property
    def cardio_finishers(self) -> tuple[FinisherEntry, ...]:
        return tuple(f for f in self.finishers if f.kind == FinisherKind.CARDIO)

    @property
    def exceeds_time_budget(self) -> bool:
        """Whether the assembled estimate runs past the requested budget.

        Section estimates are summed after selection and never trimmed, so
        this can legitimately be True.
        """
        return self.total_time_minutes > self.time_budget_minutes
