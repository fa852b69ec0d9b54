"""Routine Builder: Streamlit preview dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import numpy as np
import streamlit as st

from routine_engine.assembly import (
    replace_cardio_finisher,
    replace_core_finishers,
    replace_main_exercises,
)
from routine_engine.catalog import load_default_catalog
from routine_engine.engine import RoutineEngine
from routine_engine.exceptions import RoutineEngineError
from routine_engine.models.enums import (
    DEFAULT_TIME_BUDGET_MIN,
    ExercisePreference,
    ExperienceLevel,
    FinisherKind,
    MovementPattern,
)
from routine_engine.models.generation_config import GenerationConfig
from routine_engine.serialization import to_routine_json_string

from helpers import (
    LEVEL_LABELS,
    PATTERN_LABELS,
    PREFERENCE_LABELS,
    SELECTABLE_MUSCLES,
    TAG_COLORS,
    download_file_name,
    exercises_dataframe,
    finishers_dataframe,
    format_duration,
    format_muscles,
    section_dataframe,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Routine Builder",
    page_icon="🏋️",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached engine
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine() -> RoutineEngine:
    return RoutineEngine(catalog=load_default_catalog(), rng=np.random.default_rng())


# ---------------------------------------------------------------------------
# Rendering helpers (must be defined before use)
# ---------------------------------------------------------------------------


def _render_tag_legend() -> None:
    """Colored tag chips above the main table."""
    chips = "".join(
        f'<span style="background:{color};padding:2px 8px;border-radius:6px;'
        f'margin-right:6px;color:white;">{tag.name.title()}</span>'
        for tag, color in TAG_COLORS.items()
    )
    st.markdown(chips, unsafe_allow_html=True)


def _collect_config_from_sidebar() -> dict:
    """Sidebar widgets, returned as GenerationConfig keyword arguments."""
    st.sidebar.header("Routine Options")
    muscles = st.sidebar.multiselect(
        "Muscle groups",
        options=list(SELECTABLE_MUSCLES),
        default=[SELECTABLE_MUSCLES[1], SELECTABLE_MUSCLES[2]],
        format_func=lambda g: format_muscles([g]),
        max_selections=5,
    )
    level = st.sidebar.selectbox(
        "Experience level",
        options=list(ExperienceLevel),
        index=1,
        format_func=LEVEL_LABELS.get,
    )
    preference = st.sidebar.selectbox(
        "Exercise preference",
        options=list(ExercisePreference),
        index=1,
        format_func=PREFERENCE_LABELS.get,
    )
    pattern = st.sidebar.selectbox(
        "Push / pull",
        options=[MovementPattern.MIXED, MovementPattern.PUSH, MovementPattern.PULL],
        format_func=PATTERN_LABELS.get,
    )
    cardio = st.sidebar.checkbox("Cardio finisher")
    core = st.sidebar.checkbox("Core finisher")
    time_budget = st.sidebar.slider(
        "Time available (min)", min_value=30, max_value=120,
        value=DEFAULT_TIME_BUDGET_MIN, step=5,
    )
    return {
        "muscle_groups": tuple(muscles),
        "experience_level": level,
        "exercise_preference": preference,
        "movement_pattern": pattern,
        "include_cardio_finisher": cardio,
        "include_core_finisher": core,
        "time_budget_minutes": time_budget,
    }


# ---------------------------------------------------------------------------
# Generate
# ---------------------------------------------------------------------------

engine = get_engine()

st.title("Routine Builder")

options = _collect_config_from_sidebar()

if st.sidebar.button("Generate Routine", type="primary"):
    try:
        st.session_state["routine"] = engine.generate(GenerationConfig(**options))
    except RoutineEngineError as e:
        st.error(f"Cannot generate routine: {e}")

routine = st.session_state.get("routine")

if routine is None:
    st.info("Pick muscle groups and click **Generate Routine** to get started.")
    st.stop()

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

st.header(routine.routine_name)
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Time", format_duration(routine.total_time_minutes))
c2.metric("Exercises", str(routine.total_exercise_count))
c3.metric("Total Sets", str(routine.total_sets))
c4.metric("Level", LEVEL_LABELS[routine.level])
st.caption(format_muscles(routine.muscle_groups))

if routine.exceeds_time_budget:
    st.warning(
        f"Estimated {routine.total_time_minutes} min runs past the "
        f"{routine.time_budget_minutes} min you asked for"
    )

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

with st.expander(f"Warm-up ({routine.warmup.duration_min} min)"):
    st.dataframe(section_dataframe(routine.warmup), hide_index=True)

st.subheader("Main Workout")
_render_tag_legend()
st.dataframe(exercises_dataframe(routine), hide_index=True, use_container_width=True)
if st.button("Shuffle exercises", key="shuffle_main"):
    st.session_state["routine"] = replace_main_exercises(
        routine, engine.regenerate_main(routine),
    )
    st.rerun()

if routine.core_finishers:
    st.subheader("Core Finisher")
    st.dataframe(finishers_dataframe(routine, FinisherKind.CORE), hide_index=True)
    if st.button("Shuffle core", key="shuffle_core"):
        st.session_state["routine"] = replace_core_finishers(
            routine, engine.regenerate_core(routine.level),
        )
        st.rerun()

if routine.cardio_finishers:
    st.subheader("Cardio Finisher")
    st.dataframe(finishers_dataframe(routine, FinisherKind.CARDIO), hide_index=True)
    if st.button("Shuffle cardio", key="shuffle_cardio"):
        st.session_state["routine"] = replace_cardio_finisher(
            routine,
            engine.regenerate_cardio(routine.primary_muscle_groups, routine.level),
        )
        st.rerun()

with st.expander(f"Cool-down ({routine.cooldown.duration_min} min)"):
    st.dataframe(section_dataframe(routine.cooldown), hide_index=True)

st.divider()
st.download_button(
    "Download Routine (.json)",
    data=to_routine_json_string(routine),
    file_name=download_file_name(routine),
    mime="application/json",
)
