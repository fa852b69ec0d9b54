"""Tests for RoutineEngine: full orchestration tests."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable

import numpy as np
import pytest

from routine_engine.catalog.catalog import ExerciseCatalog
from routine_engine.engine import RoutineEngine, main_time_budget
from routine_engine.exceptions import InvalidConfigError
from routine_engine.models.enums import (
    ExerciseTag,
    ExperienceLevel,
    FinisherKind,
    MovementPattern,
    MuscleGroup,
)
from routine_engine.models.generation_config import GenerationConfig
from routine_engine.models.routine import Routine
from routine_engine.selection.shape import detect_shape


class TestGenerate:
    def test_returns_complete_routine(
        self, engine: RoutineEngine, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        routine = engine.generate(config_factory("chest", "back"))
        assert isinstance(routine, Routine)
        assert routine.main_exercises
        assert routine.warmup.entries
        assert routine.cooldown.entries
        assert routine.finishers == ()
        assert routine.total_exercise_count == len(routine.main_exercises)
        assert routine.total_sets == sum(ex.sets for ex in routine.main_exercises)

    def test_full_body_gets_ten_exercises(
        self, engine: RoutineEngine, full_body_config: GenerationConfig,
    ) -> None:
        routine = engine.generate(full_body_config)
        assert len(routine.main_exercises) == 10
        per_muscle = Counter(ex.primary_muscle for ex in routine.main_exercises)
        assert max(per_muscle.values()) <= 2
        assert all(ex.sets <= 3 for ex in routine.main_exercises)
        assert routine.total_sets <= 35

    def test_advanced_leg_day_gets_eight(
        self, engine: RoutineEngine, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        routine = engine.generate(config_factory("legs", level="advanced"))
        assert len(routine.main_exercises) == 8
        assert routine.routine_name == "Elite Legs Day"

    def test_push_day_scenario(
        self, engine: RoutineEngine, push_day_config: GenerationConfig,
        catalog: ExerciseCatalog,
    ) -> None:
        routine = engine.generate(push_day_config)
        assert 6 <= len(routine.main_exercises) <= 8
        for ex in routine.main_exercises:
            record = catalog.get(ex.id)
            assert record is not None
            assert record.movement_pattern != MovementPattern.PULL
        assert routine.warmup.duration_min == 12
        assert routine.cooldown.duration_min == 10
        assert routine.routine_name == "Power Push Chest & Shoulders & Arms"

    @pytest.mark.parametrize("muscle, level, pattern", [
        ("chest", "beginner", "push"),
        ("chest", "moderate", "push"),
        ("shoulders", "moderate", "push"),
        ("back", "moderate", "pull"),
    ])
    def test_single_group_split_day_reaches_minimum(
        self, catalog: ExerciseCatalog, config_factory: Callable[..., GenerationConfig],
        muscle: str, level: str, pattern: str,
    ) -> None:
        engine = RoutineEngine(catalog=catalog, rng=np.random.default_rng(0))
        routine = engine.generate(
            config_factory(muscle, level=level, pattern=pattern, time=120)
        )
        assert 6 <= len(routine.main_exercises) <= 8

    def test_isolation_focus_prefers_isolation(
        self, engine: RoutineEngine, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        routine = engine.generate(
            config_factory("chest", "back", preference="isolation-focus"),
        )
        tags = Counter(ex.tag for ex in routine.main_exercises)
        assert tags[ExerciseTag.ISOLATION] > tags[ExerciseTag.COMPOUND]

    def test_compounds_scheduled_first(
        self, engine: RoutineEngine, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        routine = engine.generate(config_factory("shoulders", "arms"))
        priorities = [ex.tier for ex in routine.main_exercises]
        assert priorities == sorted(priorities)
        assert [ex.order for ex in routine.main_exercises] == list(
            range(len(routine.main_exercises))
        )

    def test_finishers_follow_flags(
        self, engine: RoutineEngine, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        routine = engine.generate(config_factory("back", "cardio", "core", level="beginner"))
        kinds = [f.kind for f in routine.finishers]
        assert kinds == [FinisherKind.CORE, FinisherKind.CORE, FinisherKind.CARDIO]
        assert routine.warmup.duration_min == 15

    def test_finisher_only_request(
        self,
        engine: RoutineEngine,
        config_factory: Callable[..., GenerationConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="routine_engine.engine"):
            routine = engine.generate(config_factory("core", "cardio"))
        assert routine.main_exercises == ()
        assert routine.total_sets == 0
        assert len(routine.core_finishers) == 3
        assert len(routine.cardio_finishers) == 1
        assert "No primary muscle group" in caplog.text
        assert routine.routine_name == "Power Finisher Session"

    def test_over_budget_is_logged_not_trimmed(
        self,
        engine: RoutineEngine,
        config_factory: Callable[..., GenerationConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="routine_engine.engine"):
            routine = engine.generate(config_factory("chest", "back", time=20))
        assert routine.exceeds_time_budget
        assert routine.main_exercises
        assert "exceeds requested" in caplog.text

    def test_same_seed_same_routine(
        self, catalog: ExerciseCatalog, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        config = config_factory("chest", "back", "arms", core=True, cardio=True)
        a = RoutineEngine(catalog, np.random.default_rng(123)).generate(config)
        b = RoutineEngine(catalog, np.random.default_rng(123)).generate(config)
        assert a == b

    def test_default_engine_uses_bundled_catalog(self) -> None:
        engine = RoutineEngine()
        assert len(engine.catalog) == 103


class TestRegenerate:
    def test_regenerate_main_respects_shape(
        self, engine: RoutineEngine, push_day_config: GenerationConfig,
        catalog: ExerciseCatalog,
    ) -> None:
        routine = engine.generate(push_day_config)
        new_main = engine.regenerate_main(routine)
        assert 6 <= len(new_main) <= 8
        assert all(
            catalog.get(ex.id).movement_pattern != MovementPattern.PULL  # type: ignore[union-attr]
            for ex in new_main
        )

    def test_regenerate_main_reapplies_full_body(
        self, engine: RoutineEngine, full_body_config: GenerationConfig,
    ) -> None:
        routine = engine.generate(full_body_config)
        new_main = engine.regenerate_main(routine)
        assert len(new_main) == 10
        assert all(ex.sets <= 3 for ex in new_main)

    def test_regenerate_main_varies(
        self, engine: RoutineEngine, config_factory: Callable[..., GenerationConfig],
    ) -> None:
        routine = engine.generate(config_factory("arms", "shoulders", level="advanced"))
        draws = {tuple(ex.id for ex in engine.regenerate_main(routine)) for _ in range(10)}
        assert len(draws) > 1

    def test_regenerate_core_beginner_twice(self, engine: RoutineEngine) -> None:
        first = engine.regenerate_core(ExperienceLevel.BEGINNER)
        second = engine.regenerate_core("beginner")
        assert len(first) == 2
        assert len(second) == 2

    def test_regenerate_cardio_on_leg_day(
        self, engine: RoutineEngine, catalog: ExerciseCatalog,
    ) -> None:
        for _ in range(10):
            entry = engine.regenerate_cardio(["legs", "back"], "moderate")
            assert entry.kind == FinisherKind.CARDIO
            record = catalog.get(entry.exercise_id) if entry.exercise_id else None
            assert record is None or not record.is_high_impact

    def test_regenerate_rejects_unknown_level(self, engine: RoutineEngine) -> None:
        with pytest.raises(InvalidConfigError):
            engine.regenerate_core("olympian")


class TestMainTimeBudget:
    def test_full_body_extra_time(self) -> None:
        shape = detect_shape(tuple(MuscleGroup)[:5], MovementPattern.MIXED, ExperienceLevel.MODERATE)
        assert main_time_budget(65, shape, ExperienceLevel.MODERATE, False, False) == 95

    def test_finisher_deductions(self) -> None:
        shape = detect_shape((MuscleGroup.CHEST,), MovementPattern.MIXED, ExperienceLevel.BEGINNER)
        assert main_time_budget(65, shape, ExperienceLevel.BEGINNER, True, True) == 48

    def test_leg_day_extra_time(self) -> None:
        shape = detect_shape((MuscleGroup.LEGS,), MovementPattern.MIXED, ExperienceLevel.ADVANCED)
        assert main_time_budget(65, shape, ExperienceLevel.ADVANCED, True, False) == 65
