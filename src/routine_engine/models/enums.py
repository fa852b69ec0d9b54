"""Enumerations and training constants for the routine engine.

Timing and volume tables are heuristics, not measurements: they are good
enough to keep a generated session near its requested length.
"""

from __future__ import annotations

from enum import IntEnum, auto

from routine_engine.exceptions import InvalidConfigError


class MuscleGroup(IntEnum):
    """Selectable muscle groups. CARDIO and CORE are finisher flags."""

    LEGS = auto()
    CHEST = auto()
    BACK = auto()
    SHOULDERS = auto()
    ARMS = auto()
    CARDIO = auto()
    CORE = auto()

    @property
    def is_finisher(self) -> bool:
        return self in FINISHER_GROUPS


class ExperienceLevel(IntEnum):
    """Training experience of the person the routine is built for."""

    BEGINNER = auto()
    MODERATE = auto()
    ADVANCED = auto()


class ExercisePreference(IntEnum):
    """Compound / isolation bias applied while scoring candidates."""

    COMPOUND = auto()
    BALANCED = auto()
    ISOLATION = auto()


class MovementPattern(IntEnum):
    """Requested day pattern. NEUTRAL only appears on catalog records."""

    PUSH = auto()
    PULL = auto()
    MIXED = auto()
    NEUTRAL = auto()


class ExerciseTier(IntEnum):
    """Catalog tiers, mixing movement complexity and cardio/core class."""

    PRIMARY_COMPOUND = auto()
    SECONDARY_COMPOUND = auto()
    HEAVY_ISOLATION = auto()
    LIGHT_ISOLATION = auto()
    HIIT = auto()
    STEADY_STATE = auto()
    DYNAMIC_CORE = auto()
    ISOMETRIC_CORE = auto()


class ExerciseTag(IntEnum):
    """Display tag derived from the tier."""

    COMPOUND = auto()
    ISOLATION = auto()
    CARDIO = auto()
    CORE = auto()


class FinisherKind(IntEnum):
    """Finisher families appended after the main block."""

    CORE = auto()
    CARDIO = auto()


class ShapeKind(IntEnum):
    """Detected workout archetype, evaluated once per generation call."""

    FULL_BODY = auto()
    PUSH_PULL_LEG = auto()
    SINGLE_MUSCLE = auto()
    DUAL_MUSCLE = auto()
    MULTI_MUSCLE = auto()


FINISHER_GROUPS = frozenset({MuscleGroup.CARDIO, MuscleGroup.CORE})

_B = ExperienceLevel.BEGINNER
_M = ExperienceLevel.MODERATE
_A = ExperienceLevel.ADVANCED

# ---------------------------------------------------------------------------
# Tier tables
# ---------------------------------------------------------------------------

# Lower value = scheduled earlier and scored higher
TIER_PRIORITY: dict[ExerciseTier, int] = {
    ExerciseTier.PRIMARY_COMPOUND: 1,
    ExerciseTier.SECONDARY_COMPOUND: 2,
    ExerciseTier.HEAVY_ISOLATION: 3,
    ExerciseTier.LIGHT_ISOLATION: 4,
    ExerciseTier.HIIT: 5,
    ExerciseTier.STEADY_STATE: 5,
    ExerciseTier.DYNAMIC_CORE: 6,
    ExerciseTier.ISOMETRIC_CORE: 6,
}

TIER_TAG: dict[ExerciseTier, ExerciseTag] = {
    ExerciseTier.PRIMARY_COMPOUND: ExerciseTag.COMPOUND,
    ExerciseTier.SECONDARY_COMPOUND: ExerciseTag.COMPOUND,
    ExerciseTier.HEAVY_ISOLATION: ExerciseTag.ISOLATION,
    ExerciseTier.LIGHT_ISOLATION: ExerciseTag.ISOLATION,
    ExerciseTier.HIIT: ExerciseTag.CARDIO,
    ExerciseTier.STEADY_STATE: ExerciseTag.CARDIO,
    ExerciseTier.DYNAMIC_CORE: ExerciseTag.CORE,
    ExerciseTier.ISOMETRIC_CORE: ExerciseTag.CORE,
}

DEFAULT_SETS: dict[ExerciseTier, dict[ExperienceLevel, int]] = {
    ExerciseTier.PRIMARY_COMPOUND: {_B: 3, _M: 4, _A: 5},
    ExerciseTier.SECONDARY_COMPOUND: {_B: 3, _M: 4, _A: 4},
    ExerciseTier.HEAVY_ISOLATION: {_B: 3, _M: 3, _A: 4},
    ExerciseTier.LIGHT_ISOLATION: {_B: 2, _M: 3, _A: 3},
    ExerciseTier.HIIT: {_B: 8, _M: 10, _A: 12},
    ExerciseTier.STEADY_STATE: {_B: 1, _M: 1, _A: 1},
    ExerciseTier.DYNAMIC_CORE: {_B: 3, _M: 3, _A: 4},
    ExerciseTier.ISOMETRIC_CORE: {_B: 3, _M: 3, _A: 4},
}

DEFAULT_REPS: dict[ExerciseTier, dict[ExperienceLevel, str]] = {
    ExerciseTier.PRIMARY_COMPOUND: {_B: "8-10", _M: "6-8", _A: "5"},
    ExerciseTier.SECONDARY_COMPOUND: {_B: "10-12", _M: "8-10", _A: "8-10"},
    ExerciseTier.HEAVY_ISOLATION: {_B: "12-15", _M: "10-12", _A: "10-12"},
    ExerciseTier.LIGHT_ISOLATION: {_B: "15-20", _M: "12-15", _A: "12-15"},
    ExerciseTier.HIIT: {_B: "20s/40s", _M: "30s/30s", _A: "30s/20s"},
    ExerciseTier.STEADY_STATE: {_B: "15 min", _M: "12 min", _A: "10 min"},
    ExerciseTier.DYNAMIC_CORE: {_B: "12-15", _M: "15-20", _A: "15-20"},
    ExerciseTier.ISOMETRIC_CORE: {_B: "30s", _M: "45s", _A: "60s"},
}

# ---------------------------------------------------------------------------
# Cost model tables (seconds)
# ---------------------------------------------------------------------------

TIME_PER_SET_S: dict[ExerciseTier, int] = {
    ExerciseTier.PRIMARY_COMPOUND: 55,
    ExerciseTier.SECONDARY_COMPOUND: 45,
    ExerciseTier.HEAVY_ISOLATION: 40,
    ExerciseTier.LIGHT_ISOLATION: 30,
    ExerciseTier.HIIT: 30,
    ExerciseTier.STEADY_STATE: 40,
    ExerciseTier.DYNAMIC_CORE: 25,
    ExerciseTier.ISOMETRIC_CORE: 45,
}

REST_SECONDS: dict[ExerciseTier, dict[ExperienceLevel, int]] = {
    ExerciseTier.PRIMARY_COMPOUND: {_B: 180, _M: 150, _A: 120},
    ExerciseTier.SECONDARY_COMPOUND: {_B: 150, _M: 120, _A: 90},
    ExerciseTier.HEAVY_ISOLATION: {_B: 90, _M: 75, _A: 60},
    ExerciseTier.LIGHT_ISOLATION: {_B: 60, _M: 45, _A: 45},
    ExerciseTier.HIIT: {_B: 60, _M: 45, _A: 30},
    ExerciseTier.STEADY_STATE: {_B: 90, _M: 90, _A: 90},
    ExerciseTier.DYNAMIC_CORE: {_B: 45, _M: 30, _A: 30},
    ExerciseTier.ISOMETRIC_CORE: {_B: 45, _M: 30, _A: 30},
}

TRANSITION_S = 30  # Moving between stations

# ---------------------------------------------------------------------------
# Scoring weights
# ---------------------------------------------------------------------------
SCORE_TIER_CEILING = 6
SCORE_TIER_WEIGHT = 20

COMPOUND_FOCUS_BONUS = 50
COMPOUND_FOCUS_ISOLATION_PENALTY = 30
ISOLATION_FOCUS_BONUS = 60
ISOLATION_FOCUS_COMPOUND_PENALTY = 40
# Offsets the compounds' structurally higher base score
BALANCED_ISOLATION_BONUS = 30
BALANCED_FLAT_BONUS = 5

PATTERN_MATCH_BONUS = 15
SCORE_JITTER_MAX = 10.0

# ---------------------------------------------------------------------------
# Budget constants (minutes unless noted)
# ---------------------------------------------------------------------------
DEFAULT_TIME_BUDGET_MIN = 65
MAX_MUSCLE_GROUPS = 5

CARDIO_FINISHER_DEDUCTION_MIN = {_B: 12, _M: 10, _A: 10}
CORE_FINISHER_DEDUCTION_MIN = 5

# Degradation is only attempted with more than this much time left
DEGRADE_MIN_REMAINING_MIN = 5.0
DEGRADE_SET_FLOOR = 2

FULL_BODY_MIN_GROUPS = 4
FULL_BODY_TARGET_EXERCISES = 10
FULL_BODY_MIN_EXERCISES = 8
FULL_BODY_MAX_PER_MUSCLE = 2
FULL_BODY_MAX_SETS_PER_EXERCISE = 3
FULL_BODY_MAX_TOTAL_SETS = 35
FULL_BODY_EXTRA_MIN = 30

# Legs-only "brutal" day
LEG_DAY_TARGET_EXERCISES = 8
LEG_DAY_MIN_EXERCISES = 6
LEG_DAY_MAX_PER_MUSCLE = {_B: 6, _M: 7, _A: 8}
LEG_DAY_MAX_SETS_PER_EXERCISE = 3
LEG_DAY_EXTRA_SETS = 10
LEG_DAY_MAX_TOTAL_SETS = 40
LEG_DAY_EXTRA_MIN = 10

SPLIT_DAY_TARGET_EXERCISES = 8
SPLIT_DAY_MIN_EXERCISES = 6
SPLIT_DAY_MAX_PER_MUSCLE = {_B: 4, _M: 5, _A: 5}

SINGLE_MUSCLE_EXERCISES = 6
DUAL_MUSCLE_TARGET_EXERCISES = 8
DUAL_MUSCLE_MAX_PER_MUSCLE = 4
CUSTOM_MIN_EXERCISES = 6
MULTI_MUSCLE_TARGET_EXERCISES = 8

# ---------------------------------------------------------------------------
# Section templates
# ---------------------------------------------------------------------------
WARMUP_DURATION_MIN = {_B: 15, _M: 12, _A: 12}
COOLDOWN_DURATION_MIN = 10

CORE_FINISHER_COUNT = {_B: 2, _M: 3, _A: 3}
CORE_FINISHER_ESTIMATED_MIN = 3
CARDIO_FINISHER_ESTIMATED_MIN = {_B: 12, _M: 10, _A: 10}


# ---------------------------------------------------------------------------
# String keys
# ---------------------------------------------------------------------------


def enum_key(member: IntEnum) -> str:
    """Wire/CSV key for an enum member, e.g. PRIMARY_COMPOUND -> 'primary_compound'."""
    return member.name.lower()


def parse_enum(enum_cls, value, field: str | None = None):
    """Parse a member from a key such as ``'chest'`` or ``'isolation-focus'``.

    Members pass through unchanged.

    Raises:
        InvalidConfigError: If the value names no member of ``enum_cls``.
    """
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip().upper().replace("-", "_").removesuffix("_FOCUS")
    try:
        return enum_cls[key]
    except KeyError:
        raise InvalidConfigError(
            f"Unknown {enum_cls.__name__} value: {value!r}", field=field,
        ) from None
