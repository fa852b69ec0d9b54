"""RoutineEngine: the main orchestrator that generates workout routines."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from routine_engine.assembly.builder import RoutineBuilder
from routine_engine.catalog.catalog import ExerciseCatalog, load_default_catalog
from routine_engine.models.constraints import WorkoutShape, get_level_constraints
from routine_engine.models.enums import (
    CARDIO_FINISHER_DEDUCTION_MIN,
    CORE_FINISHER_DEDUCTION_MIN,
    ExercisePreference,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
    parse_enum,
)
from routine_engine.models.generation_config import GenerationConfig
from routine_engine.models.routine import FinisherEntry, Routine, SelectedExercise
from routine_engine.sections.finishers import generate_cardio_finisher, generate_core_block
from routine_engine.sections.warmup_cooldown import generate_cooldown, generate_warmup
from routine_engine.selection.scorer import build_queue
from routine_engine.selection.selector import select_exercises
from routine_engine.selection.shape import detect_shape

logger = logging.getLogger(__name__)


def main_time_budget(
    time_budget_minutes: float,
    shape: WorkoutShape,
    level: ExperienceLevel,
    wants_cardio: bool,
    wants_core: bool,
) -> float:
    """Minutes available to the main block after shape extras and finisher deductions."""
    available = time_budget_minutes + shape.override.extra_minutes
    if wants_cardio:
        available -= CARDIO_FINISHER_DEDUCTION_MIN[level]
    if wants_core:
        available -= CORE_FINISHER_DEDUCTION_MIN
    return available


class RoutineEngine:
    """Generates routines and regenerates individual sections of them.

    Every call is independent. The only non-determinism is the injected
    numpy Generator; pass a seeded one to make output replayable.

    Usage:
        engine = RoutineEngine(rng=np.random.default_rng(7))
        routine = engine.generate(GenerationConfig.create(["chest", "back"]))
        new_main = engine.regenerate_main(routine)
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        rng: np.random.Generator | None = None,
        builder: RoutineBuilder | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.builder = builder or RoutineBuilder()

    def generate(self, config: GenerationConfig) -> Routine:
        """Generate a complete routine.

        Args:
            config: Frozen generation request.

        Returns:
            A Routine with warm-up, main block, finishers, and cool-down.
        """
        level = config.experience_level
        primary = config.primary_muscle_groups
        if not primary:
            logger.warning("No primary muscle group requested; main block will be empty")

        main = self._build_main(
            primary,
            level,
            config.exercise_preference,
            config.movement_pattern,
            config.time_budget_minutes,
            config.wants_cardio_finisher,
            config.wants_core_finisher,
        )

        finishers: list[FinisherEntry] = []
        if config.wants_core_finisher:
            finishers.extend(generate_core_block(self.catalog, level, self.rng))
        if config.wants_cardio_finisher:
            finishers.append(
                generate_cardio_finisher(self.catalog, primary, level, self.rng)
            )

        routine = self.builder.build(
            config,
            warmup=generate_warmup(primary, level),
            main_exercises=main,
            finishers=finishers,
            cooldown=generate_cooldown(primary),
        )

        if routine.exceeds_time_budget:
            logger.info(
                "Routine estimate %d min exceeds requested %d min",
                routine.total_time_minutes,
                routine.time_budget_minutes,
            )
        return routine

    def regenerate_main(self, routine: Routine) -> tuple[SelectedExercise, ...]:
        """Re-run scoring and selection for an existing routine's main block.

        Warm-up, cool-down, and finishers are untouched; the caller merges the
        returned list (see ``assembly.replace_main_exercises``).
        """
        wants_cardio = (
            bool(routine.cardio_finishers) or MuscleGroup.CARDIO in routine.muscle_groups
        )
        wants_core = (
            bool(routine.core_finishers) or MuscleGroup.CORE in routine.muscle_groups
        )
        return self._build_main(
            routine.primary_muscle_groups,
            routine.level,
            routine.exercise_preference,
            routine.movement_pattern,
            routine.time_budget_minutes,
            wants_cardio,
            wants_core,
        )

    def regenerate_core(
        self, level: ExperienceLevel | str,
    ) -> tuple[FinisherEntry, ...]:
        """Fresh core finisher entries (2 for beginners, 3 otherwise)."""
        level = parse_enum(ExperienceLevel, level, field="level")
        return generate_core_block(self.catalog, level, self.rng)

    def regenerate_cardio(
        self,
        muscle_groups: Sequence[MuscleGroup | str],
        level: ExperienceLevel | str,
    ) -> FinisherEntry:
        """A fresh cardio finisher entry."""
        groups = tuple(parse_enum(MuscleGroup, g, field="muscle_groups") for g in muscle_groups)
        level = parse_enum(ExperienceLevel, level, field="level")
        return generate_cardio_finisher(self.catalog, groups, level, self.rng)

    def _build_main(
        self,
        primary: Sequence[MuscleGroup],
        level: ExperienceLevel,
        preference: ExercisePreference,
        pattern: MovementPattern,
        time_budget_minutes: float,
        wants_cardio: bool,
        wants_core: bool,
    ) -> tuple[SelectedExercise, ...]:
        """Shape detection, scoring, and budgeted selection."""
        shape = detect_shape(primary, pattern, level)
        constraints = shape.apply(get_level_constraints(level))
        budget = main_time_budget(
            time_budget_minutes, shape, level, wants_cardio, wants_core,
        )
        logger.debug(
            "Shape %s: target=%d cap=%d sets<=%d budget=%.1f min",
            shape.kind.name,
            shape.override.target_exercises,
            constraints.max_exercises_per_muscle,
            constraints.max_total_sets,
            budget,
        )

        queue = build_queue(self.catalog, primary, level, preference, pattern, self.rng)
        main = select_exercises(queue, constraints, budget, level, shape)

        if primary and len(main) < shape.override.min_exercises:
            logger.warning(
                "Only %d exercises selected for %s (minimum %d)",
                len(main),
                shape.kind.name,
                shape.override.min_exercises,
            )
        return main
