"""Utility helpers bridging the Streamlit preview and the routine engine.

Pure functions for formatting, table building, and download naming.
"""

from __future__ import annotations

import pandas as pd

from routine_engine.assembly.naming import MUSCLE_LABELS, PATTERN_LABELS
from routine_engine.models.enums import (
    ExercisePreference,
    ExerciseTag,
    ExperienceLevel,
    FinisherKind,
    MuscleGroup,
)
from routine_engine.models.routine import Routine, SectionBlock

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(minutes: float) -> str:
    """Convert minutes to human string. e.g. 90.0 -> '1h 30m'."""
    if minutes <= 0:
        return "0m"
    h = int(minutes) // 60
    m = int(minutes) % 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def format_rest(seconds: int) -> str:
    """Convert rest seconds to 'M:SS'. e.g. 90 -> '1:30'."""
    if seconds <= 0:
        return "--"
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_muscles(groups) -> str:
    """Comma-joined display labels. e.g. (CHEST, CORE) -> 'Chest, Core'."""
    return ", ".join(MUSCLE_LABELS[g] for g in groups)


def download_file_name(routine: Routine) -> str:
    """File name for the routine JSON download."""
    return f"{routine.routine_name.replace(' & ', '_').replace(' ', '_')}.json"


# ---------------------------------------------------------------------------
# Labels and color maps
# ---------------------------------------------------------------------------

TAG_COLORS: dict[ExerciseTag, str] = {
    ExerciseTag.COMPOUND: "#E74C3C",    # red
    ExerciseTag.ISOLATION: "#3498DB",   # blue
    ExerciseTag.CARDIO: "#F5B041",      # amber
    ExerciseTag.CORE: "#2ECC71",        # green
}

LEVEL_LABELS: dict[ExperienceLevel, str] = {
    ExperienceLevel.BEGINNER: "Beginner",
    ExperienceLevel.MODERATE: "Moderate",
    ExperienceLevel.ADVANCED: "Advanced",
}

PREFERENCE_LABELS: dict[ExercisePreference, str] = {
    ExercisePreference.COMPOUND: "Compound focus",
    ExercisePreference.BALANCED: "Balanced",
    ExercisePreference.ISOLATION: "Isolation focus",
}

SELECTABLE_MUSCLES: tuple[MuscleGroup, ...] = tuple(MuscleGroup)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def exercises_dataframe(routine: Routine) -> pd.DataFrame:
    """Main-block table in execution order."""
    rows = [
        {
            "#": ex.order + 1,
            "Exercise": ex.name,
            "Tag": ex.tag.name.title(),
            "Muscle": MUSCLE_LABELS[ex.primary_muscle],
            "Sets": ex.sets,
            "Reps": ex.reps,
            "Rest": format_rest(ex.rest_seconds),
            "Equipment": ex.equipment,
        }
        for ex in routine.main_exercises
    ]
    return pd.DataFrame(
        rows,
        columns=["#", "Exercise", "Tag", "Muscle", "Sets", "Reps", "Rest", "Equipment"],
    )


def finishers_dataframe(routine: Routine, kind: FinisherKind) -> pd.DataFrame:
    """Finisher table for one family (core or cardio)."""
    rows = [
        {
            "Exercise": f.name,
            "Sets": f.sets,
            "Reps": f.reps,
            "Est. min": f.estimated_time_min,
        }
        for f in routine.finishers
        if f.kind == kind
    ]
    return pd.DataFrame(rows, columns=["Exercise", "Sets", "Reps", "Est. min"])


def section_dataframe(block: SectionBlock) -> pd.DataFrame:
    """Warm-up or cool-down entries."""
    return pd.DataFrame(
        [{"Item": e.name, "Duration": e.duration, "Notes": e.notes} for e in block.entries],
        columns=["Item", "Duration", "Notes"],
    )
