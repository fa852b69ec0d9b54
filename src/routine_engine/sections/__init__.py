"""Section generators: warm-up, cool-down, and finisher blocks."""

from routine_engine.sections.finishers import generate_cardio_finisher, generate_core_block
from routine_engine.sections.warmup_cooldown import generate_cooldown, generate_warmup

__all__ = [
    "generate_cardio_finisher",
    "generate_cooldown",
    "generate_core_block",
    "generate_warmup",
]
