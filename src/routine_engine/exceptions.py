"""Exception hierarchy for the routine engine.

Generation itself degrades instead of raising; these cover bad input and
unreadable catalog data.
"""

from __future__ import annotations


class RoutineEngineError(Exception):
    """Base exception for all routine_engine errors."""


class InvalidConfigError(RoutineEngineError):
    """A generation request or routine record failed validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CatalogError(RoutineEngineError):
    """Exercise catalog data is missing or malformed."""
