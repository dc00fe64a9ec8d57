"""Schema introspection, Go type mapping and import bookkeeping for code generation."""

__version__ = "0.1.0"

__all__ = [
    "importers",
    "schema",
    "sqlite_types",
    "sqlite_driver",
    "naming",
    "psql",
    "psql_imports",
]