"""Routine record serialization.

Converts Routine → the camelCase record stored by the routine repository and
rendered by the preview screen, and back again so a stored routine can be
fed into regeneration.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from routine_engine.exceptions import InvalidConfigError
from routine_engine.models.enums import (
    ExercisePreference,
    ExerciseTag,
    ExerciseTier,
    ExperienceLevel,
    FinisherKind,
    MovementPattern,
    MuscleGroup,
    enum_key,
    parse_enum,
)
from routine_engine.models.routine import (
    FinisherEntry,
    Routine,
    SectionBlock,
    SectionEntry,
    SelectedExercise,
)

# Preference keys as the UI spells them.
_PREFERENCE_KEYS = {
    ExercisePreference.COMPOUND: "compound-focus",
    ExercisePreference.BALANCED: "balanced",
    ExercisePreference.ISOLATION: "isolation-focus",
}


def to_routine_dict(routine: Routine) -> dict:
    """Convert a Routine to the persistence/UI record.

    ``id`` is always None: the repository assigns identity on save.
    """
    return {
        "id": None,
        "routineName": routine.routine_name,
        "muscleGroups": [enum_key(g) for g in routine.muscle_groups],
        "level": enum_key(routine.level),
        "pushPullType": enum_key(routine.movement_pattern),
        "exercisePreference": _PREFERENCE_KEYS[routine.exercise_preference],
        "warmup": _section_to_dict(routine.warmup),
        "exercises": [_exercise_to_dict(ex) for ex in routine.main_exercises],
        "finishers": [_finisher_to_dict(f) for f in routine.finishers],
        "cooldown": _section_to_dict(routine.cooldown),
        "totalTime": routine.total_time_minutes,
        "totalSets": routine.total_sets,
        "totalExercises": routine.total_exercise_count,
        "isAIGenerated": routine.is_ai_generated,
        "timeBudget": routine.time_budget_minutes,
    }


def to_routine_json_string(routine: Routine, indent: int = 2) -> str:
    """Convert a Routine to a JSON string of its record."""
    return json.dumps(to_routine_dict(routine), indent=indent)


def routine_from_dict(data: dict) -> Routine:
    """Rebuild a Routine from a record produced by to_routine_dict().

    Raises:
        InvalidConfigError: If a required key is missing, a value has the wrong
            type, or an enum key is unknown.
    """
    try:
        return Routine(
            routine_name=data["routineName"],
            muscle_groups=tuple(
                parse_enum(MuscleGroup, g, field="muscleGroups")
                for g in data["muscleGroups"]
            ),
            level=parse_enum(ExperienceLevel, data["level"], field="level"),
            movement_pattern=parse_enum(
                MovementPattern, data["pushPullType"], field="pushPullType",
            ),
            exercise_preference=parse_enum(
                ExercisePreference, data["exercisePreference"], field="exercisePreference",
            ),
            warmup=_section_from_dict(data["warmup"]),
            main_exercises=tuple(_exercise_from_dict(ex) for ex in data["exercises"]),
            finishers=tuple(_finisher_from_dict(f) for f in data.get("finishers", [])),
            cooldown=_section_from_dict(data["cooldown"]),
            total_time_minutes=int(data["totalTime"]),
            total_sets=int(data["totalSets"]),
            total_exercise_count=int(data["totalExercises"]),
            time_budget_minutes=int(data["timeBudget"]),
            is_ai_generated=bool(data.get("isAIGenerated", True)),
        )
    except KeyError as exc:
        raise InvalidConfigError(
            f"Routine record is missing key {exc.args[0]!r}", field=exc.args[0],
        ) from exc
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidConfigError(f"Malformed routine record: {exc}") from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _section_to_dict(block: SectionBlock) -> dict:
    return {
        "duration": block.duration_min,
        "exercises": [
            {"name": e.name, "duration": e.duration, "notes": e.notes}
            for e in block.entries
        ],
    }


def _section_from_dict(data: dict) -> SectionBlock:
    return SectionBlock(
        duration_min=int(data["duration"]),
        entries=tuple(
            SectionEntry(name=e["name"], duration=e["duration"], notes=e.get("notes", ""))
            for e in data.get("exercises", [])
        ),
    )


def _exercise_to_dict(ex: SelectedExercise) -> dict:
    return {
        "id": ex.id,
        "name": ex.name,
        "type": enum_key(ex.tier),
        "tag": enum_key(ex.tag),
        "primaryMuscle": enum_key(ex.primary_muscle),
        "secondaryMuscle": (
            enum_key(ex.secondary_muscle) if ex.secondary_muscle is not None else None
        ),
        "sets": ex.sets,
        "reps": ex.reps,
        "rest": ex.rest_seconds,
        "equipment": ex.equipment,
        "order": ex.order,
    }


def _exercise_from_dict(data: dict) -> SelectedExercise:
    secondary = data.get("secondaryMuscle")
    return SelectedExercise(
        id=data["id"],
        name=data["name"],
        tier=parse_enum(ExerciseTier, data["type"], field="type"),
        tag=parse_enum(ExerciseTag, data["tag"], field="tag"),
        primary_muscle=parse_enum(MuscleGroup, data["primaryMuscle"], field="primaryMuscle"),
        secondary_muscle=(
            parse_enum(MuscleGroup, secondary, field="secondaryMuscle") if secondary else None
        ),
        sets=int(data["sets"]),
        reps=str(data["reps"]),
        rest_seconds=int(data["rest"]),
        equipment=data.get("equipment", ""),
        order=int(data.get("order", 0)),
    )


def _finisher_to_dict(entry: FinisherEntry) -> dict:
    return {
        "id": entry.exercise_id,
        "name": entry.name,
        "sets": entry.sets,
        "reps": entry.reps,
        "type": enum_key(entry.kind),
        "estimatedTime": entry.estimated_time_min,
    }


def _finisher_from_dict(data: dict) -> FinisherEntry:
    return FinisherEntry(
        name=data["name"],
        sets=int(data["sets"]),
        reps=str(data["reps"]),
        kind=parse_enum(FinisherKind, data["type"], field="type"),
        estimated_time_min=float(data["estimatedTime"]),
        exercise_id=data.get("id"),
    )
