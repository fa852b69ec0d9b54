"""Data models for the routine engine."""

from routine_engine.models.constraints import (
    LevelConstraints,
    ShapeOverride,
    WorkoutShape,
    get_level_constraints,
)
from routine_engine.models.enums import (
    ExercisePreference,
    ExerciseTag,
    ExerciseTier,
    ExperienceLevel,
    FinisherKind,
    MovementPattern,
    MuscleGroup,
    ShapeKind,
)
from routine_engine.models.exercise import ExerciseRecord
from routine_engine.models.generation_config import GenerationConfig
from routine_engine.models.routine import (
    FinisherEntry,
    Routine,
    SectionBlock,
    SectionEntry,
    SelectedExercise,
)

__all__ = [
    "ExercisePreference",
    "ExerciseRecord",
    "ExerciseTag",
    "ExerciseTier",
    "ExperienceLevel",
    "FinisherEntry",
    "FinisherKind",
    "GenerationConfig",
    "LevelConstraints",
    "MovementPattern",
    "MuscleGroup",
    "Routine",
    "SectionBlock",
    "SectionEntry",
    "SelectedExercise",
    "ShapeKind",
    "ShapeOverride",
    "WorkoutShape",
    "get_level_constraints",
]
