"""Core and cardio finisher generators.

Both draw from the injected generator, so a seeded numpy Generator makes
their picks replayable.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from routine_engine.catalog.catalog import ExerciseCatalog
from routine_engine.models.enums import (
    CARDIO_FINISHER_ESTIMATED_MIN,
    CORE_FINISHER_COUNT,
    CORE_FINISHER_ESTIMATED_MIN,
    DEFAULT_REPS,
    DEFAULT_SETS,
    ExerciseTag,
    ExperienceLevel,
    FinisherKind,
    MuscleGroup,
)
from routine_engine.models.routine import FinisherEntry
from routine_engine.sections.templates import (
    CARDIO_FALLBACK_ESTIMATED_MIN,
    CARDIO_FALLBACK_NAME,
    CARDIO_FALLBACK_REPS,
    CARDIO_FALLBACK_SETS,
)

logger = logging.getLogger(__name__)


def generate_core_block(
    catalog: ExerciseCatalog,
    level: ExperienceLevel,
    rng: np.random.Generator,
) -> tuple[FinisherEntry, ...]:
    """Shuffle the level-filtered core exercises and take 2 (beginner) or 3."""
    pool = [
        ex for ex in catalog.lookup(MuscleGroup.CORE, level)
        if ex.tag == ExerciseTag.CORE
    ]
    count = min(CORE_FINISHER_COUNT[level], len(pool))
    picks = [pool[int(i)] for i in rng.permutation(len(pool))[:count]]
    return tuple(
        FinisherEntry(
            name=ex.name,
            sets=DEFAULT_SETS[ex.tier][level],
            reps=DEFAULT_REPS[ex.tier][level],
            kind=FinisherKind.CORE,
            estimated_time_min=CORE_FINISHER_ESTIMATED_MIN,
            exercise_id=ex.id,
        )
        for ex in picks
    )


def generate_cardio_finisher(
    catalog: ExerciseCatalog,
    muscle_groups: Sequence[MuscleGroup],
    level: ExperienceLevel,
    rng: np.random.Generator,
) -> FinisherEntry:
    """Pick one cardio finisher uniformly at random.

    Leg days are restricted to low-impact options. Falls back to incline
    walking when nothing qualifies.
    """
    if MuscleGroup.LEGS in muscle_groups:
        options = catalog.low_impact_cardio(level)
    else:
        options = catalog.lookup(MuscleGroup.CARDIO, level)
    options = [ex for ex in options if ex.tag == ExerciseTag.CARDIO]

    if not options:
        logger.info("No cardio finisher available at %s, using fallback", level.name)
        return FinisherEntry(
            name=CARDIO_FALLBACK_NAME,
            sets=CARDIO_FALLBACK_SETS,
            reps=CARDIO_FALLBACK_REPS,
            kind=FinisherKind.CARDIO,
            estimated_time_min=CARDIO_FALLBACK_ESTIMATED_MIN,
        )

    chosen = options[int(rng.integers(len(options)))]
    return FinisherEntry(
        name=chosen.name,
        sets=DEFAULT_SETS[chosen.tier][level],
        reps=DEFAULT_REPS[chosen.tier][level],
        kind=FinisherKind.CARDIO,
        estimated_time_min=CARDIO_FINISHER_ESTIMATED_MIN[level],
        exercise_id=chosen.id,
    )
