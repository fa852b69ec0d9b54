"""Exercise catalog: static, pre-validated lookup table of exercises.

The bundled catalog ships as ``exercises.csv`` next to this module and is
parsed with pandas. The generator only ever reads from it.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator

import pandas as pd

from routine_engine.exceptions import CatalogError, InvalidConfigError
from routine_engine.models.enums import (
    ExerciseTier,
    ExperienceLevel,
    MovementPattern,
    MuscleGroup,
    parse_enum,
)
from routine_engine.models.exercise import ExerciseRecord

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "exercises.csv"

_REQUIRED_COLUMNS = (
    "id",
    "name",
    "tier",
    "primary_muscle",
    "secondary_muscle",
    "allowed_levels",
    "is_beginner_safe",
    "equipment",
    "movement_pattern",
)

_CARDIO_TIERS = frozenset({ExerciseTier.HIIT, ExerciseTier.STEADY_STATE})


class ExerciseCatalog:
    """Read-only collection of ExerciseRecord keyed by id.

    Usage::

        catalog = load_default_catalog()
        chest = catalog.lookup(MuscleGroup.CHEST, ExperienceLevel.BEGINNER)
    """

    def __init__(self, records: Iterable[ExerciseRecord]) -> None:
        self._records: dict[str, ExerciseRecord] = {}
        for record in records:
            if record.id in self._records:
                raise CatalogError(f"Duplicate exercise id: {record.id}")
            self._records[record.id] = record

    @classmethod
    def from_csv(cls, path: str | Path) -> ExerciseCatalog:
        """Load a catalog from a CSV file.

        Raises:
            CatalogError: If the file is unreadable or a row is malformed.
        """
        try:
            frame = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise CatalogError(f"Cannot read exercise catalog {path}: {exc}") from exc

        missing = [c for c in _REQUIRED_COLUMNS if c not in frame.columns]
        if missing:
            raise CatalogError(f"Catalog {path} is missing columns: {', '.join(missing)}")

        records = [_row_to_record(row) for row in frame.to_dict(orient="records")]
        logger.debug("Loaded %d exercises from %s", len(records), path)
        return cls(records)

    def get(self, exercise_id: str) -> ExerciseRecord | None:
        return self._records.get(exercise_id)

    def lookup(
        self, muscle_group: MuscleGroup, level: ExperienceLevel,
    ) -> list[ExerciseRecord]:
        """Exercises whose primary muscle matches, filtered by level and safety."""
        return [
            r for r in self._records.values()
            if r.primary_muscle == muscle_group and r.is_allowed_for(level)
        ]

    def low_impact_cardio(self, level: ExperienceLevel) -> list[ExerciseRecord]:
        """Level-filtered cardio entries that avoid jumping and running."""
        return [
            r for r in self.lookup(MuscleGroup.CARDIO, level)
            if not r.is_high_impact
        ]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExerciseRecord]:
        return iter(self._records.values())


@lru_cache(maxsize=1)
def load_default_catalog() -> ExerciseCatalog:
    """Load (once) the catalog bundled with the package."""
    return ExerciseCatalog.from_csv(DEFAULT_CATALOG_PATH)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_bool(value: str) -> bool:
    return str(value).strip().lower() in ("true", "1", "yes")


def _row_to_record(row: dict) -> ExerciseRecord:
    """Convert one CSV row into an ExerciseRecord."""
    exercise_id = str(row["id"]).strip()
    if not exercise_id:
        raise CatalogError("Catalog row without an id")
    try:
        tier = parse_enum(ExerciseTier, row["tier"])
        secondary = row["secondary_muscle"].strip()
        levels = frozenset(
            parse_enum(ExperienceLevel, lv)
            for lv in row["allowed_levels"].split(";")
            if lv.strip()
        )
        record = ExerciseRecord(
            id=exercise_id,
            name=str(row["name"]).strip(),
            tier=tier,
            primary_muscle=parse_enum(MuscleGroup, row["primary_muscle"]),
            secondary_muscle=parse_enum(MuscleGroup, secondary) if secondary else None,
            allowed_levels=levels,
            is_beginner_safe=_parse_bool(row["is_beginner_safe"]),
            equipment=str(row["equipment"]).strip(),
            movement_pattern=parse_enum(MovementPattern, row["movement_pattern"]),
            is_high_impact=_parse_bool(row.get("is_high_impact", "false")),
        )
    except InvalidConfigError as exc:
        raise CatalogError(f"Malformed catalog row {exercise_id!r}: {exc}") from exc

    if not levels:
        raise CatalogError(f"Exercise {exercise_id!r} allows no experience level")
    if record.is_high_impact and tier not in _CARDIO_TIERS:
        logger.warning("Impact flag ignored on non-cardio exercise %s", exercise_id)
    return record
