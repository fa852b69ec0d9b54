"""Tests for workout-shape detection."""

from __future__ import annotations

import pytest

from routine_engine.models.constraints import get_level_constraints
from routine_engine.models.enums import (
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
    ShapeKind,
)
from routine_engine.selection.shape import detect_shape

_B = ExperienceLevel.BEGINNER
_M = ExperienceLevel.MODERATE
_A = ExperienceLevel.ADVANCED


class TestFullBody:
    def test_four_groups_is_full_body(self) -> None:
        shape = detect_shape(
            (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.LEGS, MuscleGroup.ARMS),
            MovementPattern.MIXED,
            _M,
        )
        assert shape.kind == ShapeKind.FULL_BODY
        assert shape.override.target_exercises == 10
        assert shape.override.max_exercises_per_muscle == 2
        assert shape.override.max_sets_per_exercise == 3
        assert shape.override.max_total_sets == 35
        assert shape.override.extra_minutes == 30

    def test_full_body_beats_push_pattern(self) -> None:
        shape = detect_shape(tuple(MuscleGroup)[:5], MovementPattern.PUSH, _A)
        assert shape.kind == ShapeKind.FULL_BODY


class TestLegDay:
    @pytest.mark.parametrize("level, cap, total_sets", [
        (_B, 6, 28),
        (_M, 7, 34),
        (_A, 8, 40),
    ])
    def test_brutal_leg_day(self, level: ExperienceLevel, cap: int, total_sets: int) -> None:
        shape = detect_shape((MuscleGroup.LEGS,), MovementPattern.MIXED, level)
        assert shape.kind == ShapeKind.PUSH_PULL_LEG
        assert shape.is_leg_day
        assert shape.override.target_exercises == 8
        assert shape.override.max_exercises_per_muscle == cap
        assert shape.override.max_total_sets == total_sets
        assert shape.override.extra_minutes == 10

    def test_total_sets_capped_at_forty(self) -> None:
        base = get_level_constraints(_A).max_total_sets
        shape = detect_shape((MuscleGroup.LEGS,), MovementPattern.PULL, _A)
        assert shape.override.max_total_sets == min(base + 10, 40)

    def test_legs_with_another_group_is_not_leg_day(self) -> None:
        shape = detect_shape(
            (MuscleGroup.LEGS, MuscleGroup.BACK), MovementPattern.MIXED, _M,
        )
        assert not shape.is_leg_day
        assert shape.kind == ShapeKind.DUAL_MUSCLE


class TestSplitDay:
    @pytest.mark.parametrize("pattern", [MovementPattern.PUSH, MovementPattern.PULL])
    def test_push_or_pull_pattern(self, pattern: MovementPattern) -> None:
        shape = detect_shape(
            (MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.ARMS), pattern, _M,
        )
        assert shape.kind == ShapeKind.PUSH_PULL_LEG
        assert not shape.is_leg_day
        assert shape.override.min_exercises == 6
        assert shape.override.target_exercises == 8
        assert shape.override.max_exercises_per_muscle == 5
        assert not shape.override.compress_sets

    def test_beginner_split_cap(self) -> None:
        shape = detect_shape(
            (MuscleGroup.BACK, MuscleGroup.ARMS), MovementPattern.PULL, _B,
        )
        assert shape.override.max_exercises_per_muscle == 4

    @pytest.mark.parametrize("level", [_B, _M, _A])
    def test_single_group_split_cap_reaches_minimum(self, level: ExperienceLevel) -> None:
        shape = detect_shape((MuscleGroup.CHEST,), MovementPattern.PUSH, level)
        assert shape.kind == ShapeKind.PUSH_PULL_LEG
        assert shape.override.max_exercises_per_muscle >= shape.override.min_exercises


class TestCustomShapes:
    def test_single_muscle(self) -> None:
        shape = detect_shape((MuscleGroup.CHEST,), MovementPattern.MIXED, _M)
        assert shape.kind == ShapeKind.SINGLE_MUSCLE
        assert shape.override.min_exercises == 6
        assert shape.override.target_exercises == 6
        assert shape.override.max_exercises_per_muscle == 6

    def test_dual_muscle(self) -> None:
        shape = detect_shape(
            (MuscleGroup.CHEST, MuscleGroup.BACK), MovementPattern.MIXED, _M,
        )
        assert shape.kind == ShapeKind.DUAL_MUSCLE
        assert shape.override.target_exercises == 8
        assert shape.override.max_exercises_per_muscle == 4

    def test_three_muscles(self) -> None:
        shape = detect_shape(
            (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.ARMS),
            MovementPattern.MIXED,
            _M,
        )
        assert shape.kind == ShapeKind.MULTI_MUSCLE
        assert shape.override.max_exercises_per_muscle == 3  # ceil(8 / 3)
        assert shape.override.target_exercises == 8

    def test_no_primary_groups(self) -> None:
        shape = detect_shape((), MovementPattern.MIXED, _M)
        assert shape.kind == ShapeKind.MULTI_MUSCLE

    def test_detection_is_deterministic(self) -> None:
        args = ((MuscleGroup.BACK, MuscleGroup.ARMS), MovementPattern.MIXED, _A)
        assert detect_shape(*args) == detect_shape(*args)
