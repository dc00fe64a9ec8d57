"""Type mapping and connection strings for PostgreSQL schemas."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace

from schemaboil.naming import parse_enum_name, title_case
from schemaboil.schema import Column

# SQL type -> (type when nullable, type when not null)
_TYPE_MAP: dict[str, tuple[str, str]] = {}


def _register(names: tuple[str, ...], nullable: str, not_null: str) -> None:
    for name in names:
        _TYPE_MAP[name] = (nullable, not_null)


_register(("bigint", "bigserial"), "null.Int64", "int64")
_register(("integer", "serial"), "null.Int", "int")
_register(("oid",), "null.Uint32", "uint32")
_register(("smallint", "smallserial"), "null.Int16", "int16")
_register(("decimal", "numeric"), "types.NullDecimal", "types.Decimal")
_register(("double precision",), "null.Float64", "float64")
_register(("real",), "null.Float32", "float32")
_register(
    (
        "bit",
        "interval",
        "bit varying",
        "character",
        "money",
        "character varying",
        "cidr",
        "inet",
        "macaddr",
        "text",
        "uuid",
        "xml",
    ),
    "null.String",
    "string",
)
_register(('"char"',), "null.Byte", "types.Byte")
_register(("bytea",), "null.Bytes", "[]byte")
_register(("json", "jsonb"), "null.JSON", "types.JSON")
_register(("boolean",), "null.Bool", "bool")
_register(
    (
        "date",
        "time",
        "timestamp without time zone",
        "timestamp with time zone",
        "time without time zone",
        "time with time zone",
    ),
    "null.Time",
    "time.Time",
)
_register(("point",), "pgeo.NullPoint", "pgeo.Point")
_register(("line",), "pgeo.NullLine", "pgeo.Line")
_register(("lseg",), "pgeo.NullLseg", "pgeo.Lseg")
_register(("box",), "pgeo.NullBox", "pgeo.Box")
_register(("path",), "pgeo.NullPath", "pgeo.Path")
_register(("polygon",), "pgeo.NullPolygon", "pgeo.Polygon")
_register(("circle",), "pgeo.NullCircle", "pgeo.Circle")

# "uuint" is only recognised for columns that are not null.
_NOT_NULL_ONLY: dict[str, str] = {"uuint": "string"}

_ARRAY_BY_ELEMENT: dict[str, str] = {}
for _name in ("bigint", "bigserial", "integer", "serial", "smallint", "smallserial", "oid"):
    _ARRAY_BY_ELEMENT[_name] = "types.Int64Array"
_ARRAY_BY_ELEMENT["bytea"] = "types.BytesArray"
for _name in (
    "bit",
    "interval",
    "uuint",
    "bit varying",
    "character",
    "money",
    "character varying",
    "cidr",
    "inet",
    "macaddr",
    "text",
    "uuid",
    "xml",
):
    _ARRAY_BY_ELEMENT[_name] = "types.StringArray"
_ARRAY_BY_ELEMENT["boolean"] = "types.BoolArray"
for _name in ("decimal", "numeric"):
    _ARRAY_BY_ELEMENT[_name] = "types.DecimalArray"
for _name in ("double precision", "real"):
    _ARRAY_BY_ELEMENT[_name] = "types.Float64Array"

_ARRAY_BY_UDT: dict[str, str] = {}
for _name in ("_int4", "_int8"):
    _ARRAY_BY_UDT[_name] = "types.Int64Array"
_ARRAY_BY_UDT["_bytea"] = "types.BytesArray"
for _name in (
    "_bit",
    "_interval",
    "_varbit",
    "_char",
    "_money",
    "_varchar",
    "_cidr",
    "_inet",
    "_macaddr",
    "_citext",
    "_text",
    "_uuid",
    "_xml",
):
    _ARRAY_BY_UDT[_name] = "types.StringArray"
_ARRAY_BY_UDT["_bool"] = "types.BoolArray"
_ARRAY_BY_UDT["_numeric"] = "types.DecimalArray"
for _name in ("_float4", "_float8"):
    _ARRAY_BY_UDT[_name] = "types.Float64Array"

_DEFAULT_ARRAY = "types.StringArray"


def build_query_string(
    user: str, password: str, dbname: str, host: str, port: int, sslmode: str
) -> str:
    """Build a key=value connection string, leaving out empty parts."""
    parts = []
    if user:
        parts.append(f"user={user}")
    if password:
        parts.append(f"password={password}")
    if dbname:
        parts.append(f"dbname={dbname}")
    if host:
        parts.append(f"host={host}")
    if port:
        parts.append(f"port={port}")
    if sslmode:
        parts.append(f"sslmode={sslmode}")
    return " ".join(parts)


def get_array_type(column: Column) -> tuple[str, str]:
    """Return the array type for a column and the element type name it came from.

    The element type is read from ``arr_type`` when present; otherwise the
    underscore-prefixed ``udt_name`` of a domain over an array is used.
    Unknown element types fall back to a string array.
    """
    if column.arr_type is not None:
        return _ARRAY_BY_ELEMENT.get(column.arr_type, _DEFAULT_ARRAY), column.arr_type
    return _ARRAY_BY_UDT.get(column.udt_name, _DEFAULT_ARRAY), column.udt_name


@dataclass
class PostgresTranslator:
    """Maps PostgreSQL column types to generated types."""

    add_enum_types: bool = False
    enum_null_prefix: str = "Null"

    def __post_init__(self) -> None:
        self.enum_null_prefix = title_case(self.enum_null_prefix)

    def translate_column_type(self, column: Column) -> Column:
        """Return a copy of the column with its generated type filled in."""
        db_type = column.db_type
        nullable = column.nullable

        if db_type in _TYPE_MAP:
            nullable_type, not_null_type = _TYPE_MAP[db_type]
            return replace(column, type=nullable_type if nullable else not_null_type)

        if not nullable and db_type in _NOT_NULL_ONLY:
            return replace(column, type=_NOT_NULL_ONLY[db_type])

        if db_type == "ARRAY":
            array_type, element = get_array_type(column)
            # DBType becomes e.g. ARRAYinteger so value generators can parse it.
            return replace(column, type=array_type, db_type=db_type + element)

        if db_type == "USER-DEFINED":
            if column.udt_name == "hstore":
                return replace(column, type="types.HStore", db_type="hstore")
            if column.udt_name == "citext":
                return replace(column, type="null.String" if nullable else "string")
            print(
                f"warning: incompatible data type detected: {column.udt_name}",
                file=sys.stderr,
            )
            return replace(column, type="string")

        enum_name = parse_enum_name(db_type)
        if enum_name and self.add_enum_types:
            type_name = title_case(enum_name)
            if nullable:
                type_name = self.enum_null_prefix + type_name
            return replace(column, type=type_name)

        return replace(column, type="null.String" if nullable else "string")