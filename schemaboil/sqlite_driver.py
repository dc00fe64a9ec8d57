"""Read table, view, column and key metadata from an SQLite database file."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import quote

from schemaboil.schema import Column, ForeignKey, PrimaryKey, ViewCapabilities

_SEQUENCE_TABLE = "sqlite_sequence"


@dataclass
class _Index:
    name: str
    unique: bool
    partial: bool
    columns: list[str] = field(default_factory=list)


@dataclass
class _ColumnInfo:
    name: str
    type: str
    not_null: bool
    default: str | None
    pk: int
    hidden: int


def _tables_from_list(entries: Iterable[str]) -> list[str]:
    """Entries without a dot name whole tables."""
    return [entry for entry in entries if "." not in entry]


def _columns_from_list(entries: Iterable[str], table_name: str) -> list[str]:
    """Entries of the form table.column (or *.column) name columns of a table."""
    columns = []
    for entry in entries:
        parts = entry.split(".")
        if len(parts) == 2 and parts[0] in (table_name, "*"):
            columns.append(parts[1])
    return columns


class SQLiteDriver:
    """A read-only connection to an SQLite file that reports its schema.

    The whitelist and blacklist hold table names, or ``table.column`` entries
    that restrict the columns of one table (``*.column`` matches every table).
    """

    def __init__(
        self,
        dbname: str | os.PathLike[str],
        whitelist: Iterable[str] = (),
        blacklist: Iterable[str] = (),
    ) -> None:
        self.dbname = os.fspath(dbname)
        self.whitelist = list(whitelist)
        self.blacklist = list(blacklist)
        uri = f"file:{quote(self.dbname)}?mode=ro"
        self._conn = sqlite3.connect(uri, uri=True)

    def __enter__(self) -> SQLiteDriver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def _names_of(self, kind: str) -> list[str]:
        query = "SELECT name FROM sqlite_master WHERE type = ?"
        args: list[str] = [kind]

        allowed = _tables_from_list(self.whitelist)
        if allowed:
            query += f" AND tbl_name IN ({', '.join('?' * len(allowed))})"
            args.extend(allowed)
        denied = _tables_from_list(self.blacklist)
        if denied:
            query += f" AND tbl_name NOT IN ({', '.join('?' * len(denied))})"
            args.extend(denied)

        rows = self._conn.execute(query, args).fetchall()
        return [name for (name,) in rows if name != _SEQUENCE_TABLE]

    def table_names(self) -> list[str]:
        """Names of the tables, honouring the whitelist and blacklist."""
        return self._names_of("table")

    def view_names(self) -> list[str]:
        """Names of the views, honouring the whitelist and blacklist."""
        return self._names_of("view")

    def view_capabilities(self, name: str) -> ViewCapabilities:
        """Views are treated as neither insertable nor upsertable."""
        return ViewCapabilities(can_insert=False, can_upsert=False)

    def _table_info(self, table_name: str) -> list[_ColumnInfo]:
        rows = self._conn.execute(
            'SELECT name, type, "notnull", dflt_value, pk, hidden '
            "FROM pragma_table_xinfo(?) ORDER BY cid",
            (table_name,),
        ).fetchall()
        return [
            _ColumnInfo(
                name=name,
                type=col_type or "",
                not_null=bool(not_null),
                default=None if default is None else str(default),
                pk=pk,
                hidden=hidden,
            )
            for name, col_type, not_null, default, pk, hidden in rows
        ]

    def _indexes(self, table_name: str) -> list[_Index]:
        rows = self._conn.execute(
            'SELECT name, "unique", partial FROM pragma_index_list(?) ORDER BY seq',
            (table_name,),
        ).fetchall()
        indexes = []
        for name, unique, partial in rows:
            columns = [
                column
                for (column,) in self._conn.execute(
                    "SELECT name FROM pragma_index_info(?) ORDER BY seqno", (name,)
                )
            ]
            indexes.append(
                _Index(name=name, unique=unique > 0, partial=partial != 0, columns=columns)
            )
        return indexes

    def _has_autoincrement(self, table_name: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ? "
            "AND sql LIKE '%AUTOINCREMENT%'",
            (table_name,),
        ).fetchone()
        return row is not None

    def columns(self, table_name: str) -> list[Column]:
        """Columns of a table or view, in declaration order."""
        indexes = self._indexes(table_name)
        info = self._table_info(table_name)
        has_autoincrement = self._has_autoincrement(table_name)

        white = _columns_from_list(self.whitelist, table_name)
        black = _columns_from_list(self.blacklist, table_name)
        pkey_count = sum(1 for column in info if column.pk != 0)

        result = []
        for column in info:
            if white:
                if column.name not in white:
                    continue
            elif column.name in black:
                continue

            db_type = column.type.upper()
            built = Column(
                name=column.name,
                full_db_type=db_type,
                db_type=db_type,
                nullable=not column.not_null,
            )

            # Only single-column indexes make a column unique; the last one wins.
            for index in indexes:
                if len(index.columns) > 1:
                    continue
                if column.name in index.columns:
                    built.unique = index.unique and not index.partial

            # An INTEGER primary key aliases the rowid and increments by itself.
            integer_pk = column.pk == 1 and db_type == "INTEGER"
            auto_increment = integer_pk and (has_autoincrement or pkey_count == 1)
            built.auto_generated = auto_increment or column.hidden in (2, 3)

            if column.default is not None:
                built.default = column.default
            elif auto_increment:
                built.default = "auto_increment"
            elif built.auto_generated:
                built.default = "auto_generated"

            if built.nullable and not built.default:
                built.default = "NULL"

            result.append(built)
        return result

    def primary_key_info(self, table_name: str) -> PrimaryKey | None:
        """The primary key columns of a table, or None if it has none."""
        columns = [column.name for column in self._table_info(table_name) if column.pk > 0]
        return PrimaryKey(columns=columns) if columns else None

    def foreign_key_info(self, table_name: str) -> list[ForeignKey]:
        """Foreign keys declared on a table, one entry per column pair."""
        rows = self._conn.execute(
            'SELECT id, "table", "from", "to" FROM pragma_foreign_key_list(?) '
            "ORDER BY id, seq",
            (table_name,),
        ).fetchall()
        return [
            ForeignKey(
                name=f"FK_{key_id}",
                table=table_name,
                column=column or "",
                foreign_table=foreign_table or "",
                foreign_column=foreign_column or "",
            )
            for key_id, foreign_table, column, foreign_column in rows
        ]