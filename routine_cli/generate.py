"""Routine CLI: generates a routine or regenerates one section of a stored routine.

Usage:
    python -m routine_cli.generate generate --muscles chest,back --level moderate
    python -m routine_cli.generate regenerate core routine.json --seed 7
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from routine_engine.assembly import (
    replace_cardio_finisher,
    replace_core_finishers,
    replace_main_exercises,
)
from routine_engine.catalog import ExerciseCatalog, load_default_catalog
from routine_engine.engine import RoutineEngine
from routine_engine.exceptions import RoutineEngineError
from routine_engine.models.generation_config import GenerationConfig
from routine_engine.models.routine import Routine
from routine_engine.serialization import routine_from_dict, to_routine_json_string

from routine_cli.config import CATALOG_PATH, LOG_LEVEL, SEED, TIME_BUDGET_MINUTES

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _build_engine(seed: int | None) -> RoutineEngine:
    """Engine wired to the configured catalog and a (possibly seeded) generator."""
    catalog = (
        ExerciseCatalog.from_csv(CATALOG_PATH)
        if CATALOG_PATH is not None
        else load_default_catalog()
    )
    return RoutineEngine(catalog=catalog, rng=np.random.default_rng(seed))


def _load_routine(path: Path) -> Routine:
    """Load a stored routine record from disk."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise RoutineEngineError(f"Cannot read routine record {path}: {exc}") from exc
    return routine_from_dict(data)


def _emit(routine: Routine, output: Path | None) -> None:
    text = to_routine_json_string(routine)
    if output is None:
        print(text)
        return
    output.write_text(text + "\n")
    logger.info("Wrote %s to %s", routine.routine_name, output)


def run_generate(args: argparse.Namespace) -> Routine:
    """Handle the ``generate`` subcommand."""
    config = GenerationConfig.create(
        muscle_groups=[m for m in args.muscles.split(",") if m.strip()],
        experience_level=args.level,
        exercise_preference=args.preference,
        movement_pattern=args.pattern,
        include_cardio_finisher=args.cardio,
        include_core_finisher=args.core,
        time_budget_minutes=args.time,
    )
    routine = _build_engine(args.seed).generate(config)
    logger.info(
        "Generated %s: %d exercises, %d sets, ~%d min",
        routine.routine_name,
        routine.total_exercise_count,
        routine.total_sets,
        routine.total_time_minutes,
    )
    return routine


def run_regenerate(args: argparse.Namespace) -> Routine:
    """Handle the ``regenerate`` subcommand: swap one section, keep the rest."""
    routine = _load_routine(args.routine)
    engine = _build_engine(args.seed)

    if args.section == "main":
        updated = replace_main_exercises(routine, engine.regenerate_main(routine))
    elif args.section == "core":
        updated = replace_core_finishers(routine, engine.regenerate_core(routine.level))
    else:
        updated = replace_cardio_finisher(
            routine,
            engine.regenerate_cardio(routine.primary_muscle_groups, routine.level),
        )

    logger.info("Regenerated %s section of %s", args.section, routine.routine_name)
    return updated


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Workout routine generator")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a new routine")
    gen.add_argument("--muscles", required=True, help="Comma-separated, e.g. chest,back,core")
    gen.add_argument("--level", default="moderate", help="beginner | moderate | advanced")
    gen.add_argument(
        "--preference", default="balanced",
        help="compound-focus | balanced | isolation-focus",
    )
    gen.add_argument("--pattern", default="mixed", help="push | pull | mixed")
    gen.add_argument("--cardio", action="store_true", help="Append a cardio finisher")
    gen.add_argument("--core", action="store_true", help="Append core finishers")
    gen.add_argument("--time", type=int, default=TIME_BUDGET_MINUTES, help="Minutes available")
    gen.add_argument("--seed", type=int, default=SEED, help="Seed for reproducible output")
    gen.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")

    regen = sub.add_parser("regenerate", help="Regenerate one section of a stored routine")
    regen.add_argument("section", choices=("main", "core", "cardio"))
    regen.add_argument("routine", type=Path, help="Routine JSON record")
    regen.add_argument("--seed", type=int, default=SEED, help="Seed for reproducible output")
    regen.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "generate":
            routine = run_generate(args)
        else:
            routine = run_regenerate(args)
        _emit(routine, args.output)
    except RoutineEngineError as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
