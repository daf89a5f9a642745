"""Schema catalog and validation of machine-readable output."""

from .catalog import REPORT_SCHEMA, CatalogEntry, load_catalog, schema_path, schemas_root
from .validate import validate

__all__ = [
    "REPORT_SCHEMA",
    "CatalogEntry",
    "load_catalog",
    "schema_path",
    "schemas_root",
    "validate",
]
