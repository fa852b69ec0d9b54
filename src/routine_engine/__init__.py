"""Workout routine generation engine."""

from routine_engine.engine import RoutineEngine
from routine_engine.exceptions import CatalogError, InvalidConfigError, RoutineEngineError
from routine_engine.models.generation_config import GenerationConfig

__all__ = [
    "CatalogError",
    "GenerationConfig",
    "InvalidConfigError",
    "RoutineEngine",
    "RoutineEngineError",
]
