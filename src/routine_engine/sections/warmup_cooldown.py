"""Warm-up and cool-down block generators."""

from __future__ import annotations

from typing import Sequence

from routine_engine.models.enums import (
    COOLDOWN_DURATION_MIN,
    WARMUP_DURATION_MIN,
    ExperienceLevel,
    MuscleGroup,
    enum_key,
)
from routine_engine.models.routine import SectionBlock, SectionEntry
from routine_engine.sections.templates import (
    BREATHING,
    DYNAMIC_STRETCH_DURATION,
    GENERAL_CARDIO_NOTES,
    GENERAL_CARDIO_WARMUP,
    WARMUP_SETS,
    WARMUP_SETS_NOTES,
    get_dynamic_stretch,
    get_static_stretch,
)


def generate_warmup(
    muscle_groups: Sequence[MuscleGroup], level: ExperienceLevel,
) -> SectionBlock:
    """Build the warm-up: general cardio, one dynamic stretch per group, warm-up sets.

    Beginners get 15 minutes, everyone else 12.
    """
    entries = [SectionEntry(
        name=GENERAL_CARDIO_WARMUP.name,
        duration=GENERAL_CARDIO_WARMUP.duration,
        notes=GENERAL_CARDIO_NOTES,
    )]
    for group in muscle_groups:
        stretch = get_dynamic_stretch(group)
        if stretch is None:
            continue
        entries.append(SectionEntry(
            name=stretch,
            duration=DYNAMIC_STRETCH_DURATION,
            notes=f"Prepare {enum_key(group)} for movement",
        ))
    entries.append(SectionEntry(
        name=WARMUP_SETS.name,
        duration=WARMUP_SETS.duration,
        notes=WARMUP_SETS_NOTES,
    ))
    return SectionBlock(duration_min=WARMUP_DURATION_MIN[level], entries=tuple(entries))


def generate_cooldown(muscle_groups: Sequence[MuscleGroup]) -> SectionBlock:
    """Build the 10-minute cool-down: one static stretch per group, then breathing."""
    entries = []
    for group in muscle_groups:
        stretch = get_static_stretch(group)
        if stretch is not None:
            entries.append(SectionEntry(name=stretch.name, duration=stretch.duration))
    entries.append(SectionEntry(name=BREATHING.name, duration=BREATHING.duration))
    return SectionBlock(duration_min=COOLDOWN_DURATION_MIN, entries=tuple(entries))
