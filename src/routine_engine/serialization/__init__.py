"""Serialization module: export routines to the persistence/UI record format."""

from routine_engine.serialization.routine_json import (
    routine_from_dict,
    to_routine_dict,
    to_routine_json_string,
)

__all__ = ["routine_from_dict", "to_routine_dict", "to_routine_json_string"]
