"""Import collections used when rendering generated source files."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


def _dedupe(items: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def _sort_key(item: str) -> str:
    return item.lstrip("_ ")


def sort_imports(imports: Iterable[str]) -> list[str]:
    """Sort import lines, ignoring leading underscores and spaces."""
    return sorted(imports, key=_sort_key)


@dataclass
class ImportSet:
    """Standard-library and third-party imports for one file."""

    standard: list[str] = field(default_factory=list)
    third_party: list[str] = field(default_factory=list)

    def format(self) -> str:
        """Render the set as an import declaration."""
        total = len(self.standard) + len(self.third_party)
        if total == 0:
            return ""
        if total == 1:
            only = self.standard[0] if self.standard else self.third_party[0]
            return f"import {only}"

        lines = ["import ("]
        lines.extend(f"\t{imp}" for imp in self.standard)
        if self.standard and self.third_party:
            lines.append("")
        lines.extend(f"\t{imp}" for imp in self.third_party)
        lines.append(")")
        return "\n".join(lines) + "\n"


ImportMap = dict[str, ImportSet]


@dataclass
class Collection:
    """Every group of imports a generator run may need."""

    all: ImportSet = field(default_factory=ImportSet)
    test: ImportSet = field(default_factory=ImportSet)
    singleton: ImportMap = field(default_factory=dict)
    test_singleton: ImportMap = field(default_factory=dict)
    based_on_type: ImportMap = field(default_factory=dict)


def _string_list(value: Any, what: str) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"import set {what} must be a list")
    result = []
    for position, element in enumerate(value):
        if not isinstance(element, str):
            raise ValueError(
                f"import set {what} element {position} ({element!r}) must be string"
            )
        result.append(element)
    return result


def set_from_interface(value: Any) -> ImportSet:
    """Build an ImportSet from a loosely typed configuration mapping."""
    if not isinstance(value, Mapping):
        raise ValueError("import set should be a mapping")

    result = ImportSet()
    if "standard" in value:
        result.standard = _string_list(value["standard"], "standard")
    if "third_party" in value:
        result.third_party = _string_list(value["third_party"], "third_party")
    return result


def map_from_interface(value: Any) -> ImportMap:
    """Build an import map from a mapping of name to set, or a list of named sets."""
    if isinstance(value, Mapping):
        entries = list(value.items())
    elif isinstance(value, (list, tuple)):
        entries = []
        for item in value:
            if not isinstance(item, Mapping):
                raise ValueError("import map list entries should be mappings")
            name = item.get("name")
            if not isinstance(name, str):
                raise ValueError("import map list entries need a string 'name'")
            entries.append((name, item))
    else:
        raise TypeError("import map should be a mapping or a list of mappings")

    return {name: set_from_interface(entry) for name, entry in entries}


def combine_string_lists(
    a: Iterable[str] | None, b: Iterable[str] | None
) -> list[str]:
    """Concatenate two possibly missing lists of strings."""
    return [*(a or ()), *(b or ())]


def merge_set(a: ImportSet, b: ImportSet) -> ImportSet:
    """Combine two sets, removing duplicates and sorting each half."""
    return ImportSet(
        standard=sort_imports(_dedupe(combine_string_lists(a.standard, b.standard))),
        third_party=sort_imports(
            _dedupe(combine_string_lists(a.third_party, b.third_party))
        ),
    )


def _merge_map(a: Mapping[str, ImportSet], b: Mapping[str, ImportSet]) -> ImportMap:
    merged: ImportMap = dict(a)
    for key, to_merge in b.items():
        merged[key] = merge_set(merged.get(key, ImportSet()), to_merge)
    return merged


def merge(a: Collection, b: Collection) -> Collection:
    """Create a new collection holding the de-duplicated contents of both."""
    return Collection(
        all=merge_set(a.all, b.all),
        test=merge_set(a.test, b.test),
        singleton=_merge_map(a.singleton, b.singleton),
        test_singleton=_merge_map(a.test_singleton, b.test_singleton),
        based_on_type=_merge_map(a.based_on_type, b.based_on_type),
    )


def add_type_imports(
    base: ImportSet, type_map: Mapping[str, ImportSet], column_types: Iterable[str]
) -> ImportSet:
    """Extend a set with the imports needed by the column types in use."""
    standard = list(base.standard)
    third_party = list(base.third_party)

    for type_name in column_types:
        extra = type_map.get(type_name)
        if extra is not None:
            standard.extend(extra.standard)
            third_party.extend(extra.third_party)

    return ImportSet(
        standard=sort_imports(_dedupe(standard)),
        third_party=sort_imports(_dedupe(third_party)),
    )


def new_default_imports() -> Collection:
    """Return the imports every generated package starts from."""
    return Collection(
        all=ImportSet(
            standard=[
                '"database/sql"',
                '"fmt"',
                '"reflect"',
                '"strings"',
                '"sync"',
                '"time"',
            ],
            third_party=[
                '"github.com/friendsofgo/errors"',
                '"github.com/volatiletech/sqlboiler/v4/boil"',
                '"github.com/volatiletech/sqlboiler/v4/queries"',
                '"github.com/volatiletech/sqlboiler/v4/queries/qm"',
                '"github.com/volatiletech/sqlboiler/v4/queries/qmhelper"',
                '"github.com/volatiletech/strmangle"',
            ],
        ),
        singleton={
            "boil_queries": ImportSet(
                standard=['"regexp"'],
                third_party=[
                    '"github.com/volatiletech/sqlboiler/v4/drivers"',
                    '"github.com/volatiletech/sqlboiler/v4/queries"',
                    '"github.com/volatiletech/sqlboiler/v4/queries/qm"',
                ],
            ),
            "boil_types": ImportSet(
                standard=['"strconv"'],
                third_party=[
                    '"github.com/friendsofgo/errors"',
                    '"github.com/volatiletech/sqlboiler/v4/boil"',
                    '"github.com/volatiletech/strmangle"',
                ],
            ),
        },
        test=ImportSet(
            standard=['"bytes"', '"reflect"', '"testing"'],
            third_party=[
                '"github.com/volatiletech/sqlboiler/v4/boil"',
                '"github.com/volatiletech/sqlboiler/v4/queries"',
                '"github.com/volatiletech/randomize"',
                '"github.com/volatiletech/strmangle"',
            ],
        ),
        test_singleton={
            "boil_main_test": ImportSet(
                standard=[
                    '"database/sql"',
                    '"flag"',
                    '"fmt"',
                    '"math/rand"',
                    '"os"',
                    '"path/filepath"',
                    '"strings"',
                    '"testing"',
                    '"time"',
                ],
                third_party=[
                    '"github.com/spf13/viper"',
                    '"github.com/volatiletech/sqlboiler/v4/boil"',
                ],
            ),
            "boil_queries_test": ImportSet(
                standard=['"bytes"', '"fmt"', '"io"', '"math/rand"', '"regexp"'],
                third_party=['"github.com/volatiletech/sqlboiler/v4/boil"'],
            ),
            "boil_suites_test": ImportSet(standard=['"testing"']),
        },
    )


def nullable_enum_imports() -> Collection:
    """Return the extra imports needed for nullable enum types."""
    return Collection(
        singleton={
            "boil_types": ImportSet(
                standard=['"bytes"', '"database/sql/driver"', '"encoding/json"'],
                third_party=[
                    '"github.com/volatiletech/null/v8"',
                    '"github.com/volatiletech/null/v8/convert"',
                ],
            ),
        },
    )