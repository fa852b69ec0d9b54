"""Tests for GenerationConfig validation and string parsing."""

from __future__ import annotations

import pytest

from routine_engine.exceptions import InvalidConfigError
from routine_engine.models.enums import (
    ExercisePreference,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
)
from routine_engine.models.generation_config import GenerationConfig


class TestValidation:
    def test_defaults(self) -> None:
        config = GenerationConfig(muscle_groups=(MuscleGroup.CHEST,))
        assert config.experience_level == ExperienceLevel.MODERATE
        assert config.exercise_preference == ExercisePreference.BALANCED
        assert config.movement_pattern == MovementPattern.MIXED
        assert config.time_budget_minutes == 65
        assert not config.wants_cardio_finisher
        assert not config.wants_core_finisher

    def test_empty_groups_rejected(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            GenerationConfig(muscle_groups=())
        assert exc_info.value.field == "muscle_groups"

    def test_more_than_five_groups_rejected(self) -> None:
        with pytest.raises(InvalidConfigError):
            GenerationConfig(muscle_groups=tuple(MuscleGroup)[:6])

    def test_five_groups_allowed(self) -> None:
        config = GenerationConfig(muscle_groups=tuple(MuscleGroup)[:5])
        assert len(config.primary_muscle_groups) == 5

    def test_duplicate_groups_rejected(self) -> None:
        with pytest.raises(InvalidConfigError):
            GenerationConfig(muscle_groups=(MuscleGroup.BACK, MuscleGroup.BACK))

    def test_neutral_pattern_rejected(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            GenerationConfig(
                muscle_groups=(MuscleGroup.BACK,),
                movement_pattern=MovementPattern.NEUTRAL,
            )
        assert exc_info.value.field == "movement_pattern"

    @pytest.mark.parametrize("budget", [0, -30])
    def test_non_positive_budget_rejected(self, budget: int) -> None:
        with pytest.raises(InvalidConfigError):
            GenerationConfig(muscle_groups=(MuscleGroup.BACK,), time_budget_minutes=budget)

    def test_config_is_frozen(self) -> None:
        config = GenerationConfig(muscle_groups=(MuscleGroup.CHEST,))
        with pytest.raises(AttributeError):
            config.time_budget_minutes = 90  # type: ignore[misc]

    def test_list_of_groups_stored_as_tuple(self) -> None:
        config = GenerationConfig(muscle_groups=[MuscleGroup.CHEST, MuscleGroup.BACK])
        assert config.muscle_groups == (MuscleGroup.CHEST, MuscleGroup.BACK)
        assert isinstance(config.muscle_groups, tuple)


class TestFinisherFlags:
    def test_finisher_groups_removed_from_primary(self) -> None:
        config = GenerationConfig(
            muscle_groups=(MuscleGroup.CHEST, MuscleGroup.CORE, MuscleGroup.BACK),
        )
        assert config.primary_muscle_groups == (MuscleGroup.CHEST, MuscleGroup.BACK)

    def test_core_group_acts_as_flag(self) -> None:
        config = GenerationConfig(muscle_groups=(MuscleGroup.CHEST, MuscleGroup.CORE))
        assert config.wants_core_finisher
        assert not config.wants_cardio_finisher

    def test_cardio_boolean_acts_as_flag(self) -> None:
        config = GenerationConfig(
            muscle_groups=(MuscleGroup.LEGS,), include_cardio_finisher=True,
        )
        assert config.wants_cardio_finisher

    def test_finisher_only_request_is_accepted(self) -> None:
        config = GenerationConfig(muscle_groups=(MuscleGroup.CARDIO, MuscleGroup.CORE))
        assert config.primary_muscle_groups == ()


class TestCreate:
    def test_parses_ui_strings(self) -> None:
        config = GenerationConfig.create(
            ["chest", "Shoulders", "core"],
            experience_level="advanced",
            exercise_preference="isolation-focus",
            movement_pattern="push",
            time_budget_minutes="45",  # type: ignore[arg-type]
        )
        assert config.muscle_groups == (
            MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.CORE,
        )
        assert config.experience_level == ExperienceLevel.ADVANCED
        assert config.exercise_preference == ExercisePreference.ISOLATION
        assert config.movement_pattern == MovementPattern.PUSH
        assert config.time_budget_minutes == 45

    def test_compound_focus_key(self) -> None:
        config = GenerationConfig.create(["back"], exercise_preference="compound-focus")
        assert config.exercise_preference == ExercisePreference.COMPOUND

    def test_unknown_muscle_rejected(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            GenerationConfig.create(["chest", "neck"])
        assert exc_info.value.field == "muscle_groups"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            GenerationConfig.create(["chest"], experience_level="expert")
        assert exc_info.value.field == "experience_level"
