"""Routine naming: level prefix, pattern name, and muscle names."""

from __future__ import annotations

from typing import Sequence

from routine_engine.models.enums import ExperienceLevel, MovementPattern, MuscleGroup

MUSCLE_LABELS: dict[MuscleGroup, str] = {
    MuscleGroup.LEGS: "Legs",
    MuscleGroup.CHEST: "Chest",
    MuscleGroup.BACK: "Back",
    MuscleGroup.SHOULDERS: "Shoulders",
    MuscleGroup.ARMS: "Arms",
    MuscleGroup.CARDIO: "Cardio",
    MuscleGroup.CORE: "Core",
}

PATTERN_LABELS: dict[MovementPattern, str] = {
    MovementPattern.PUSH: "Push",
    MovementPattern.PULL: "Pull",
    MovementPattern.MIXED: "Mixed",
}

LEVEL_PREFIXES: dict[ExperienceLevel, str] = {
    ExperienceLevel.BEGINNER: "Foundation",
    ExperienceLevel.MODERATE: "Power",
    ExperienceLevel.ADVANCED: "Elite",
}


def build_routine_name(
    muscle_groups: Sequence[MuscleGroup],
    movement_pattern: MovementPattern,
    level: ExperienceLevel,
) -> str:
    """Name a routine, e.g. "Power Push Chest & Shoulders" or "Elite Legs Day".

    Args:
        muscle_groups: Primary muscle groups (finisher flags already removed).
        movement_pattern: Requested day pattern.
        level: Experience level (selects the prefix).
    """
    prefix = LEVEL_PREFIXES.get(level, "")
    if not muscle_groups:
        return f"{prefix} Finisher Session"

    muscle_names = " & ".join(MUSCLE_LABELS.get(g, g.name.title()) for g in muscle_groups)

    if len(muscle_groups) == 1:
        return f"{prefix} {muscle_names} Day"

    pattern_name = PATTERN_LABELS.get(movement_pattern, "")
    return " ".join(part for part in (prefix, pattern_name, muscle_names) if part)
