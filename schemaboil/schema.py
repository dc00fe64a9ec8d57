"""Schema metadata: tables, columns, keys and the relationships between tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_INTEGER_TYPES = frozenset(
    {
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
    }
)

DEFAULT_DELETE_COLUMN = "deleted_at"


@dataclass
class Column:
    """A column as read from the database, plus its generated type."""

    name: str = ""
    type: str = ""
    db_type: str = ""
    full_db_type: str = ""
    default: str = ""
    comment: str = ""
    nullable: bool = False
    unique: bool = False
    auto_generated: bool = False
    arr_type: str | None = None
    udt_name: str = ""
    domain_name: str | None = None


@dataclass
class ForeignKey:
    """A foreign key from a column of one table to a column of another."""

    name: str = ""
    table: str = ""
    column: str = ""
    nullable: bool = False
    unique: bool = False
    foreign_table: str = ""
    foreign_column: str = ""
    foreign_column_nullable: bool = False
    foreign_column_unique: bool = False


@dataclass
class PrimaryKey:
    """A primary key constraint and the columns it covers."""

    name: str = ""
    columns: list[str] = field(default_factory=list)


@dataclass
class ViewCapabilities:
    """What may be done to a view."""

    can_insert: bool = False
    can_upsert: bool = False


@dataclass
class ToOneRelationship:
    """A foreign table whose unique column refers to the local table."""

    name: str = ""
    table: str = ""
    column: str = ""
    nullable: bool = False
    unique: bool = False
    foreign_table: str = ""
    foreign_column: str = ""
    foreign_column_nullable: bool = False
    foreign_column_unique: bool = False


@dataclass
class ToManyRelationship:
    """A foreign table, direct or through a join table, holding many local rows."""

    name: str = ""
    table: str = ""
    column: str = ""
    nullable: bool = False
    unique: bool = False
    foreign_table: str = ""
    foreign_column: str = ""
    foreign_column_nullable: bool = False
    foreign_column_unique: bool = False
    to_join_table: bool = False
    join_table: str = ""
    join_local_fkey_name: str = ""
    join_local_column: str = ""
    join_local_column_nullable: bool = False
    join_local_column_unique: bool = False
    join_foreign_fkey_name: str = ""
    join_foreign_column: str = ""
    join_foreign_column_nullable: bool = False
    join_foreign_column_unique: bool = False


@dataclass
class Table:
    """Table or view metadata from the database schema."""

    name: str = ""
    schema_name: str = ""
    columns: list[Column] = field(default_factory=list)
    pkey: PrimaryKey | None = None
    fkeys: list[ForeignKey] = field(default_factory=list)
    is_join_table: bool = False
    to_one_relationships: list[ToOneRelationship] = field(default_factory=list)
    to_many_relationships: list[ToManyRelationship] = field(default_factory=list)
    is_view: bool = False
    view_capabilities: ViewCapabilities = field(default_factory=ViewCapabilities)

    def get_column(self, name: str) -> Column:
        """Return the column called name; raise LookupError if there is none."""
        for column in self.columns:
            if column.name == name:
                return column
        raise LookupError(f"could not find column name: {name}")

    def can_last_insert_id(self) -> bool:
        """True if the table has one defaulted integer primary key column."""
        if self.pkey is None or len(self.pkey.columns) != 1:
            return False
        column = self.get_column(self.pkey.columns[0])
        if not column.default:
            return False
        return column.type in _INTEGER_TYPES

    def can_soft_delete(self, delete_column: str = "") -> bool:
        """True if the table has a nullable time column used for soft deletes."""
        wanted = delete_column or DEFAULT_DELETE_COLUMN
        return any(
            column.name == wanted and column.type == "null.Time"
            for column in self.columns
        )


def get_table(tables: Sequence[Table], name: str) -> Table:
    """Return the table called name; raise LookupError if there is none."""
    for table in tables:
        if table.name == name:
            return table
    raise LookupError(f"could not find table name: {name}")


def to_one_relationships(table: str, tables: Sequence[Table]) -> list[ToOneRelationship]:
    """Find the one-to-one relationships pointing at the named table."""
    local = get_table(tables, table)
    return [
        _build_to_one(local, fkey, other)
        for other in tables
        for fkey in other.fkeys
        if fkey.foreign_table == local.name and not other.is_join_table and fkey.unique
    ]


def to_many_relationships(table: str, tables: Sequence[Table]) -> list[ToManyRelationship]:
    """Find the one-to-many and many-to-many relationships of the named table."""
    local = get_table(tables, table)
    return [
        _build_to_many(local, fkey, other)
        for other in tables
        for fkey in other.fkeys
        if fkey.foreign_table == local.name and (other.is_join_table or not fkey.unique)
    ]


def _build_to_one(local: Table, fkey: ForeignKey, foreign: Table) -> ToOneRelationship:
    return ToOneRelationship(
        name=fkey.name,
        table=local.name,
        column=fkey.foreign_column,
        nullable=fkey.foreign_column_nullable,
        unique=fkey.foreign_column_unique,
        foreign_table=foreign.name,
        foreign_column=fkey.column,
        foreign_column_nullable=fkey.nullable,
        foreign_column_unique=fkey.unique,
    )


def _build_to_many(local: Table, fkey: ForeignKey, foreign: Table) -> ToManyRelationship:
    if not foreign.is_join_table:
        return ToManyRelationship(
            name=fkey.name,
            table=local.name,
            column=fkey.foreign_column,
            nullable=fkey.foreign_column_nullable,
            unique=fkey.foreign_column_unique,
            foreign_table=foreign.name,
            foreign_column=fkey.column,
            foreign_column_nullable=fkey.nullable,
            foreign_column_unique=fkey.unique,
            to_join_table=False,
        )

    relationship = ToManyRelationship(
        table=local.name,
        column=fkey.foreign_column,
        nullable=fkey.foreign_column_nullable,
        unique=fkey.foreign_column_unique,
        to_join_table=True,
        join_table=foreign.name,
        join_local_fkey_name=fkey.name,
        join_local_column=fkey.column,
        join_local_column_nullable=fkey.nullable,
        join_local_column_unique=fkey.unique,
    )

    # The other key of the join table names the far side; the last one wins.
    for other in foreign.fkeys:
        if other.name == fkey.name:
            continue
        relationship.join_foreign_fkey_name = other.name
        relationship.join_foreign_column = other.column
        relationship.join_foreign_column_nullable = other.nullable
        relationship.join_foreign_column_unique = other.unique
        relationship.foreign_table = other.foreign_table
        relationship.foreign_column = other.foreign_column
        relationship.foreign_column_nullable = other.foreign_column_nullable
        relationship.foreign_column_unique = other.foreign_column_unique

    return relationship