"""RoutineBuilder: assembles sections into a Routine and merges regenerated slices.

Totals are a sum of independently estimated sections. The sum is not
checked against the requested budget and may exceed it.
"""

from __future__ import annotations

import dataclasses
import math
from typing import Sequence

from routine_engine.assembly.naming import build_routine_name
from routine_engine.math.cost_model import total_exercise_minutes
from routine_engine.models.enums import ExperienceLevel, FinisherKind
from routine_engine.models.generation_config import GenerationConfig
from routine_engine.models.routine import (
    FinisherEntry,
    Routine,
    SectionBlock,
    SelectedExercise,
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_total_minutes(
    level: ExperienceLevel,
    warmup: SectionBlock,
    main_exercises: Sequence[SelectedExercise],
    finishers: Sequence[FinisherEntry],
    cooldown: SectionBlock,
) -> int:
    """Warm-up + main block + finisher estimates + cool-down, rounded to minutes."""
    total = (
        warmup.duration_min
        + total_exercise_minutes(main_exercises, level)
        + sum(f.estimated_time_min for f in finishers)
        + cooldown.duration_min
    )
    return _round_half_up(total)


def order_finishers(finishers: Sequence[FinisherEntry]) -> tuple[FinisherEntry, ...]:
    """Core finishers first, then cardio, keeping order within each family."""
    core = [f for f in finishers if f.kind == FinisherKind.CORE]
    cardio = [f for f in finishers if f.kind == FinisherKind.CARDIO]
    return tuple(core + cardio)


class RoutineBuilder:
    """Builds Routine records from generated sections.

    Usage::

        builder = RoutineBuilder()
        routine = builder.build(config, warmup, main, finishers, cooldown)
    """

    def build(
        self,
        config: GenerationConfig,
        warmup: SectionBlock,
        main_exercises: Sequence[SelectedExercise],
        finishers: Sequence[FinisherEntry],
        cooldown: SectionBlock,
    ) -> Routine:
        """Combine sections, compute totals, and name the routine."""
        main = tuple(main_exercises)
        ordered_finishers = order_finishers(finishers)
        level = config.experience_level
        return Routine(
            routine_name=build_routine_name(
                config.primary_muscle_groups, config.movement_pattern, level,
            ),
            muscle_groups=config.muscle_groups,
            level=level,
            movement_pattern=config.movement_pattern,
            exercise_preference=config.exercise_preference,
            warmup=warmup,
            main_exercises=main,
            finishers=ordered_finishers,
            cooldown=cooldown,
            total_time_minutes=compute_total_minutes(
                level, warmup, main, ordered_finishers, cooldown,
            ),
            total_sets=sum(ex.sets for ex in main),
            total_exercise_count=len(main),
            time_budget_minutes=config.time_budget_minutes,
        )


# ---------------------------------------------------------------------------
# Merging regenerated slices
# ---------------------------------------------------------------------------


def _with_sections(
    routine: Routine,
    main_exercises: Sequence[SelectedExercise],
    finishers: Sequence[FinisherEntry],
) -> Routine:
    main = tuple(main_exercises)
    ordered_finishers = order_finishers(finishers)
    return dataclasses.replace(
        routine,
        main_exercises=main,
        finishers=ordered_finishers,
        total_time_minutes=compute_total_minutes(
            routine.level, routine.warmup, main, ordered_finishers, routine.cooldown,
        ),
        total_sets=sum(ex.sets for ex in main),
        total_exercise_count=len(main),
    )


def replace_main_exercises(
    routine: Routine, exercises: Sequence[SelectedExercise],
) -> Routine:
    """New routine with the main block swapped; everything else untouched."""
    return _with_sections(routine, exercises, routine.finishers)


def replace_core_finishers(
    routine: Routine, entries: Sequence[FinisherEntry],
) -> Routine:
    """New routine with the core finishers swapped; the cardio finisher is kept."""
    return _with_sections(
        routine, routine.main_exercises, tuple(entries) + routine.cardio_finishers,
    )


def replace_cardio_finisher(routine: Routine, entry: FinisherEntry) -> Routine:
    """New routine with the cardio finisher swapped; core finishers are kept."""
    return _with_sections(
        routine, routine.main_exercises, routine.core_finishers + (entry,),
    )
