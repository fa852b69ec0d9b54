"""Exercise catalog: the generator's read-only exercise source."""

from routine_engine.catalog.catalog import (
    DEFAULT_CATALOG_PATH,
    ExerciseCatalog,
    load_default_catalog,
)

__all__ = ["DEFAULT_CATALOG_PATH", "ExerciseCatalog", "load_default_catalog"]
