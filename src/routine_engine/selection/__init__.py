"""Exercise selection: shape detection, candidate scoring, budgeted selection."""

from routine_engine.selection.scorer import ScoredCandidate, build_queue, score_exercise
from routine_engine.selection.selector import select_exercises
from routine_engine.selection.shape import detect_shape

__all__ = [
    "ScoredCandidate",
    "build_queue",
    "detect_shape",
    "score_exercise",
    "select_exercises",
]
