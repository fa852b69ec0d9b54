"""Shared test fixtures: bundled catalog, seeded generators, config factories."""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from routine_engine.catalog.catalog import ExerciseCatalog, load_default_catalog
from routine_engine.engine import RoutineEngine
from routine_engine.models.enums import MovementPattern, MuscleGroup
from routine_engine.models.generation_config import GenerationConfig


@pytest.fixture
def catalog() -> ExerciseCatalog:
    """The catalog bundled with the package (103 exercises)."""
    return load_default_catalog()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so jitter and finisher picks are replayable."""
    return np.random.default_rng(20240611)


@pytest.fixture
def engine(catalog: ExerciseCatalog, rng: np.random.Generator) -> RoutineEngine:
    return RoutineEngine(catalog=catalog, rng=rng)


@pytest.fixture
def config_factory() -> Callable[..., GenerationConfig]:
    """Factory fixture for GenerationConfig with moderate/balanced/mixed defaults.

    Usage:
        config = config_factory("chest", "back", level="advanced", core=True)
    """

    def _make(
        *muscles: str,
        level: str = "moderate",
        preference: str = "balanced",
        pattern: str = "mixed",
        cardio: bool = False,
        core: bool = False,
        time: int = 65,
    ) -> GenerationConfig:
        return GenerationConfig.create(
            muscle_groups=muscles or ("chest",),
            experience_level=level,
            exercise_preference=preference,
            movement_pattern=pattern,
            include_cardio_finisher=cardio,
            include_core_finisher=core,
            time_budget_minutes=time,
        )

    return _make


@pytest.fixture
def full_body_config() -> GenerationConfig:
    """All five primary groups, moderate, no finishers."""
    return GenerationConfig(
        muscle_groups=(
            MuscleGroup.CHEST,
            MuscleGroup.BACK,
            MuscleGroup.LEGS,
            MuscleGroup.SHOULDERS,
            MuscleGroup.ARMS,
        ),
    )


@pytest.fixture
def push_day_config() -> GenerationConfig:
    """Chest/shoulders/arms push day, moderate, balanced, 65 min."""
    return GenerationConfig(
        muscle_groups=(MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.ARMS),
        movement_pattern=MovementPattern.PUSH,
    )
