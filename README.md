# schemaboil

Building blocks for generating a Go database access layer from a schema.

schemaboil reads table, view, column and key metadata out of an SQLite
database file, maps SQLite and PostgreSQL column types onto the Go types used
by generated code, works out the one-to-one and one-to-many relationships
between tables, and keeps track of which import lines every generated file
needs.

## Install

```
pip install schemaboil
```

Python 3.10 or later is required. The package has no runtime dependencies;
SQLite access uses the standard library's `sqlite3`.

## Modules

### `schemaboil.importers`

- `ImportSet(standard, third_party)` holds the import lines of one file.
  `ImportSet.format()` renders them: an empty string for no imports,
  `import X` for one, otherwise a parenthesised block with a blank line
  between the standard and third-party groups.
- `Collection` groups the sets a generator run needs: `all`, `test`,
  `singleton`, `test_singleton` and `based_on_type` (the last three map a
  file or type name to an `ImportSet`).
- `new_default_imports()` returns the base collection;
  `nullable_enum_imports()` the extra imports for nullable enum types.
- `merge(a, b)` and `merge_set(a, b)` combine collections or sets, dropping
  duplicates and sorting each group. `combine_string_lists(a, b)`
  concatenates two lists, either of which may be `None`.
- `add_type_imports(base, type_map, column_types)` returns a new set with the
  imports that the given column types call for, de-duplicated and sorted.
- `sort_imports(imports)` sorts import lines, ignoring leading underscores
  and spaces, so `_ "github.com/lib/pq"` sorts by its path.
- `set_from_interface(value)` and `map_from_interface(value)` build sets and
  maps from loosely typed configuration data. A map may be given as a mapping
  of name to set or as a list of sets that each carry a `name`. Malformed data
  raises `ValueError`; a map that is neither a mapping nor a list raises
  `TypeError`.

### `schemaboil.schema`

- Dataclasses `Table`, `Column`, `ForeignKey`, `PrimaryKey`,
  `ViewCapabilities`, `ToOneRelationship` and `ToManyRelationship`.
- `get_table(tables, name)` and `Table.get_column(name)` raise `LookupError`
  when the name is missing.
- `Table.can_last_insert_id()` is true when the table has a single primary
  key column with a default and an integer Go type.
- `Table.can_soft_delete(delete_column="")` is true when the table has a
  `null.Time` column of that name (`deleted_at` by default).
- `to_one_relationships(table, tables)` and
  `to_many_relationships(table, tables)` derive relationships for the named
  table from the foreign keys of the other tables, including many-to-many
  relationships through tables marked `is_join_table`.

### `schemaboil.sqlite_types` and `schemaboil.sqlite_driver`

- `sqlite_types.translate_column_type(column)` returns a copy of a column
  with its Go type set, based on the part of `db_type` before any `(`.
- `sqlite_types.build_query_string(file)` gives the read-only connection
  string `file:<file>?_loc=UTC&mode=ro`.
- `sqlite_types.imports()` returns the import collection for SQLite output.
- `sqlite_driver.SQLiteDriver(dbname, whitelist=(), blacklist=())` opens a
  file read-only and is a context manager. It offers `table_names()`,
  `view_names()`, `view_capabilities(name)`, `columns(table_name)`,
  `primary_key_info(table_name)`, `foreign_key_info(table_name)` and
  `close()`. List entries without a dot name tables; `table.column` (or
  `*.column`) entries restrict the columns of a table.

### `schemaboil.naming`

- `title_case(name)` turns `snake_case` into `TitleCase`.
- `parse_enum_vals(db_type)` returns the values of `enum('a','b')` or
  `enum.name('a','b')`; `parse_enum_name(db_type)` returns `name` from the
  latter, or an empty string.

### `schemaboil.psql` and `schemaboil.psql_imports`

- `psql.build_query_string(user, password, dbname, host, port, sslmode)`
  builds a `key=value` connection string, leaving out empty parts.
- `psql.PostgresTranslator(add_enum_types=False, enum_null_prefix="Null")`
  maps PostgreSQL column types with `translate_column_type(column)`,
  including arrays, enums, `hstore`, `citext` and geometric types. Unknown
  user-defined types become `string` with a warning on standard error.
- `psql.get_array_type(column)` returns the Go array type and the element
  type name it was chosen from.
- `psql_imports.imports()` returns the import collection for PostgreSQL
  output.

## Examples

Order import lines:

```python
from schemaboil.importers import sort_imports

sort_imports(['"fmt"', '"errors"'])
# ['"errors"', '"fmt"']
```

Translate a column and add the imports its type needs:

```python
from schemaboil.importers import ImportSet, add_type_imports
from schemaboil.schema import Column
from schemaboil.sqlite_types import imports, translate_column_type

column = translate_column_type(Column(name="created", db_type="DATETIME", nullable=True))
column.type
# 'null.Time'

needed = add_type_imports(
    ImportSet(standard=['"fmt"']), imports().based_on_type, [column.type]
)
print(needed.format())
# import (
#     "fmt"
#
#     "github.com/volatiletech/null/v8"
# )
```

Read a schema from an SQLite file:

```python
from schemaboil.sqlite_driver import SQLiteDriver
from schemaboil.sqlite_types import translate_column_type

with SQLiteDriver("app.db", blacklist=["migrations"]) as driver:
    for name in driver.table_names():
        columns = [translate_column_type(c) for c in driver.columns(name)]
        pkey = driver.primary_key_info(name)
        fkeys = driver.foreign_key_info(name)
```

Map a PostgreSQL enum column:

```python
from schemaboil.psql import PostgresTranslator, build_query_string
from schemaboil.schema import Column

translator = PostgresTranslator(add_enum_types=True)
translator.translate_column_type(
    Column(name="mood", db_type="enum.mood('happy','sad')", nullable=True)
).type
# 'NullMood'

password = "password"
build_query_string("user", password, "app", "localhost", 5432, "disable")
# 'user=user password=password dbname=app host=localhost port=5432 sslmode=disable'
```

## What it does not do

- There is no command-line tool; everything is used as a library.
- It does not render templates or write generated code; it supplies the
  schema data, type names and import blocks such a generator would use.
- Only SQLite databases are read. For PostgreSQL the package maps column
  types, builds connection strings and lists imports, but does not connect
  to a server or read its schema. Other databases are not covered.

## Running the tests

```
pip install -e ".[test]"
pytest
```