"""Type mapping and imports for SQLite schemas."""

from __future__ import annotations

from dataclasses import replace

from schemaboil.importers import Collection, ImportSet
from schemaboil.schema import Column

_NULL_PACKAGE = '"github.com/volatiletech/null/v8"'
_TYPES_PACKAGE = '"github.com/volatiletech/sqlboiler/v4/types"'

# Base SQL type -> (type when nullable, type when not null)
_TYPE_MAP: dict[str, tuple[str, str]] = {}


def _register(names: tuple[str, ...], nullable: str, not_null: str) -> None:
    for name in names:
        _TYPE_MAP[name] = (nullable, not_null)


_register(("INT", "INTEGER", "BIGINT"), "null.Int64", "int64")
_register(("TINYINT", "INT8"), "null.Int8", "int8")
_register(("SMALLINT", "INT2"), "null.Int16", "int16")
_register(("MEDIUMINT",), "null.Int32", "int32")
_register(("UNSIGNED BIG INT",), "null.Uint64", "uint64")
_register(
    (
        "CHARACTER",
        "VARCHAR",
        "VARYING CHARACTER",
        "NCHAR",
        "NATIVE CHARACTER",
        "NVARCHAR",
        "TEXT",
        "CLOB",
    ),
    "null.String",
    "string",
)
_register(("BLOB",), "null.Bytes", "[]byte")
_register(("FLOAT",), "null.Float32", "float32")
_register(("REAL", "DOUBLE", "DOUBLE PRECISION"), "null.Float64", "float64")
_register(("NUMERIC", "DECIMAL"), "types.NullDecimal", "types.Decimal")
_register(("BOOLEAN",), "null.Bool", "bool")
_register(("DATE", "DATETIME"), "null.Time", "time.Time")
_register(("JSON",), "null.JSON", "types.JSON")

_FALLBACK = ("null.String", "string")


def build_query_string(file: str) -> str:
    """Build a read-only connection string for a database file."""
    return "file:" + file + "?_loc=UTC&mode=ro"


def translate_column_type(column: Column) -> Column:
    """Return a copy of the column with its generated type filled in."""
    base = column.db_type.split("(", 1)[0]
    nullable_type, not_null_type = _TYPE_MAP.get(base, _FALLBACK)
    return replace(column, type=nullable_type if column.nullable else not_null_type)


def imports() -> Collection:
    """Return the imports generated SQLite code needs."""
    null_types = (
        "null.Float32",
        "null.Float64",
        "null.Int",
        "null.Int8",
        "null.Int16",
        "null.Int32",
        "null.Int64",
        "null.Uint",
        "null.Uint8",
        "null.Uint16",
        "null.Uint32",
        "null.Uint64",
        "null.String",
        "null.Bool",
        "null.Time",
        "null.Bytes",
        "null.JSON",
    )
    based_on_type = {name: ImportSet(third_party=[_NULL_PACKAGE]) for name in null_types}
    based_on_type["time.Time"] = ImportSet(standard=['"time"'])
    for name in ("types.Decimal", "types.NullDecimal", "types.JSON"):
        based_on_type[name] = ImportSet(third_party=[_TYPES_PACKAGE])

    return Collection(
        all=ImportSet(standard=['"strconv"']),
        singleton={
            "sqlite_upsert": ImportSet(
                standard=['"fmt"', '"strings"'],
                third_party=[
                    '"github.com/volatiletech/strmangle"',
                    '"github.com/volatiletech/sqlboiler/v4/drivers"',
                ],
            ),
        },
        test_singleton={
            "sqlite3_suites_test": ImportSet(standard=['"testing"']),
            "sqlite3_main_test": ImportSet(
                standard=[
                    '"database/sql"',
                    '"fmt"',
                    '"io"',
                    '"math/rand"',
                    '"os"',
                    '"os/exec"',
                    '"path/filepath"',
                    '"regexp"',
                ],
                third_party=[
                    '"github.com/pkg/errors"',
                    '"github.com/spf13/viper"',
                    '_ "modernc.org/sqlite"',
                ],
            ),
        },
        based_on_type=based_on_type,
    )