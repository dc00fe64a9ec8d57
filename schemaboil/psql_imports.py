"""Imports needed by code generated for PostgreSQL schemas."""

from __future__ import annotations

from schemaboil.importers import Collection, ImportSet

_NULL_PACKAGE = '"github.com/volatiletech/null/v8"'
_TYPES_PACKAGE = '"github.com/volatiletech/sqlboiler/v4/types"'
_PGEO_PACKAGE = '"github.com/volatiletech/sqlboiler/v4/types/pgeo"'

_NULL_TYPES = (
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
    "null.JSON",
    "null.Bytes",
)

_TYPES_TYPES = (
    "types.JSON",
    "types.Decimal",
    "types.Byte",
    "types.BytesArray",
    "types.Int64Array",
    "types.Float64Array",
    "types.BoolArray",
    "types.StringArray",
    "types.DecimalArray",
    "types.HStore",
    "types.NullDecimal",
)

_PGEO_TYPES = (
    "pgeo.Point",
    "pgeo.Line",
    "pgeo.Lseg",
    "pgeo.Box",
    "pgeo.Path",
    "pgeo.Polygon",
    "pgeo.Circle",
    "pgeo.NullPoint",
    "pgeo.NullLine",
    "pgeo.NullLseg",
    "pgeo.NullBox",
    "pgeo.NullPath",
    "pgeo.NullPolygon",
    "pgeo.NullCircle",
)


def imports() -> Collection:
    """Return the imports generated PostgreSQL code needs."""
    based_on_type: dict[str, ImportSet] = {
        name: ImportSet(third_party=[_NULL_PACKAGE]) for name in _NULL_TYPES
    }
    based_on_type["time.Time"] = ImportSet(standard=['"time"'])
    for name in _TYPES_TYPES:
        based_on_type[name] = ImportSet(third_party=[_TYPES_PACKAGE])
    for name in _PGEO_TYPES:
        based_on_type[name] = ImportSet(third_party=[_PGEO_PACKAGE])

    return Collection(
        all=ImportSet(standard=['"strconv"']),
        singleton={
            "psql_upsert": ImportSet(
                standard=['"fmt"', '"strings"'],
                third_party=[
                    '"github.com/volatiletech/strmangle"',
                    '"github.com/volatiletech/sqlboiler/v4/drivers"',
                ],
            ),
        },
        test_singleton={
            "psql_suites_test": ImportSet(standard=['"testing"']),
            "psql_main_test": ImportSet(
                standard=[
                    '"bytes"',
                    '"database/sql"',
                    '"fmt"',
                    '"io"',
                    '"os"',
                    '"os/exec"',
                    '"regexp"',
                    '"strings"',
                ],
                third_party=[
                    '"github.com/kat-co/vala"',
                    '"github.com/friendsofgo/errors"',
                    '"github.com/spf13/viper"',
                    '"github.com/volatiletech/sqlboiler/v4/drivers/sqlboiler-psql/driver"',
                    '"github.com/volatiletech/randomize"',
                    '_ "github.com/lib/pq"',
                ],
            ),
        },
        based_on_type=based_on_type,
    )