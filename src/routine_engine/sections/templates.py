"""Section templates: fixed warm-up and cool-down content per muscle group.

The warm-up uses the first dynamic stretch listed for each requested group;
the cool-down uses one static stretch per group.
"""

from __future__ import annotations

from dataclasses import dataclass

from routine_engine.models.enums import MuscleGroup


@dataclass(frozen=True)
class StretchTemplate:
    """A single stretch line.

    Attributes:
        name: Display name.
        duration: Display duration, e.g. "1-2 min".
    """

    name: str
    duration: str


# ---------------------------------------------------------------------------
# Warm-up
# ---------------------------------------------------------------------------

GENERAL_CARDIO_WARMUP = StretchTemplate(name="Light Cardio (Treadmill/Bike)", duration="5 min")
GENERAL_CARDIO_NOTES = "Low intensity, gradually increase heart rate"

WARMUP_SETS = StretchTemplate(name="Light Warm-up Sets", duration="3-5 min")
WARMUP_SETS_NOTES = "2-3 sets at 50% working weight of first exercise"

DYNAMIC_STRETCH_DURATION = "1-2 min"

DYNAMIC_STRETCHES: dict[MuscleGroup, tuple[str, ...]] = {
    MuscleGroup.CHEST: ("Arm Circles", "Chest Opener Stretch"),
    MuscleGroup.BACK: ("Cat-Cow Stretch", "Thoracic Rotations"),
    MuscleGroup.LEGS: ("Leg Swings", "Walking Lunges", "Bodyweight Squats"),
    MuscleGroup.SHOULDERS: ("Arm Circles", "Wall Slides"),
    MuscleGroup.ARMS: ("Wrist Circles", "Arm Swings"),
}

# ---------------------------------------------------------------------------
# Cool-down
# ---------------------------------------------------------------------------

STATIC_STRETCHES: dict[MuscleGroup, StretchTemplate] = {
    MuscleGroup.CHEST: StretchTemplate(name="Chest Doorway Stretch", duration="1-2 min"),
    MuscleGroup.BACK: StretchTemplate(name="Child's Pose", duration="1-2 min"),
    MuscleGroup.LEGS: StretchTemplate(name="Quad & Hamstring Stretch", duration="2-3 min"),
    MuscleGroup.SHOULDERS: StretchTemplate(name="Cross-Body Shoulder Stretch", duration="1 min"),
    MuscleGroup.ARMS: StretchTemplate(name="Bicep & Tricep Stretch", duration="1 min"),
}

BREATHING = StretchTemplate(name="Deep Breathing & Relaxation", duration="2 min")

# ---------------------------------------------------------------------------
# Cardio finisher fallback
# ---------------------------------------------------------------------------

CARDIO_FALLBACK_NAME = "Incline Walking"
CARDIO_FALLBACK_SETS = 1
CARDIO_FALLBACK_REPS = "10-12 min"
CARDIO_FALLBACK_ESTIMATED_MIN = 10


def get_dynamic_stretch(group: MuscleGroup) -> str | None:
    """First dynamic stretch for a group, or None for finisher flags."""
    stretches = DYNAMIC_STRETCHES.get(group)
    return stretches[0] if stretches else None


def get_static_stretch(group: MuscleGroup) -> StretchTemplate | None:
    """Static stretch for a group, or None for finisher flags."""
    return STATIC_STRETCHES.get(group)
