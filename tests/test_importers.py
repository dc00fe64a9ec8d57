import pytest

from schemaboil.importers import (
    Collection,
    ImportSet,
    add_type_imports,
    combine_string_lists,
    map_from_interface,
    merge,
    merge_set,
    new_default_imports,
    nullable_enum_imports,
    set_from_interface,
    sort_imports,
)


def test_set_from_interface():
    result = set_from_interface(
        {"standard": ["hello", "there"], "third_party": ["there", "hello"]}
    )
    assert result.standard == ["hello", "there"]
    assert result.third_party == ["there", "hello"]


def test_set_from_interface_rejects_non_mapping():
    with pytest.raises(ValueError):
        set_from_interface(["hello"])


def test_set_from_interface_rejects_non_list_standard():
    with pytest.raises(ValueError):
        set_from_interface({"standard": "hello"})


def test_set_from_interface_rejects_non_string_element():
    with pytest.raises(ValueError):
        set_from_interface({"third_party": ["ok", 3]})


def test_set_from_interface_missing_keys_are_empty():
    result = set_from_interface({})
    assert result == ImportSet()


def test_map_from_interface():
    mapping = map_from_interface(
        {
            "test_main": {
                "standard": ["hello", "there"],
                "third_party": ["there", "hello"],
            }
        }
    )
    assert set(mapping) == {"test_main"}
    assert mapping["test_main"].standard == ["hello", "there"]
    assert mapping["test_main"].third_party == ["there", "hello"]


def test_map_from_interface_alt_syntax():
    mapping = map_from_interface(
        [
            {
                "name": "test_main",
                "standard": ["hello", "there"],
                "third_party": ["there", "hello"],
            }
        ]
    )
    assert mapping["test_main"].standard == ["hello", "there"]
    assert mapping["test_main"].third_party == ["there", "hello"]


def test_map_from_interface_rejects_other_types():
    with pytest.raises(TypeError):
        map_from_interface("nope")


def test_map_from_interface_propagates_set_errors():
    with pytest.raises(ValueError):
        map_from_interface({"x": {"standard": [1]}})


def test_imports_sort():
    a1 = ['"fmt"', '"errors"']
    a2 = [
        '_ "github.com/lib/pq"',
        '_ "github.com/gorilla/n"',
        '"github.com/gorilla/mux"',
        '"github.com/gorilla/websocket"',
    ]
    assert sort_imports(a1) == ['"errors"', '"fmt"']
    assert sort_imports(a2) == [
        '"github.com/gorilla/mux"',
        '_ "github.com/gorilla/n"',
        '"github.com/gorilla/websocket"',
        '_ "github.com/lib/pq"',
    ]


def test_add_type_imports():
    imports1 = ImportSet(
        standard=['"errors"', '"fmt"'],
        third_party=['"github.com/volatiletech/sqlboiler/v4/boil"'],
    )
    expected = ImportSet(
        standard=['"errors"', '"fmt"', '"time"'],
        third_party=[
            '"github.com/volatiletech/null/v8"',
            '"github.com/volatiletech/sqlboiler/v4/boil"',
        ],
    )
    types = ["null.Time", "null.Time", "time.Time"]

    imps = new_default_imports()
    imps.based_on_type = {
        "null.Time": ImportSet(third_party=['"github.com/volatiletech/null/v8"']),
        "time.Time": ImportSet(standard=['"time"']),
    }

    assert add_type_imports(imports1, imps.based_on_type, types) == expected

    imports2 = ImportSet(
        standard=['"errors"', '"fmt"', '"time"'],
        third_party=[
            '"github.com/volatiletech/null/v8"',
            '"github.com/volatiletech/sqlboiler/v4/boil"',
        ],
    )
    assert add_type_imports(imports2, imps.based_on_type, types) == expected


def test_add_type_imports_does_not_mutate_base():
    base = ImportSet(standard=['"fmt"'])
    add_type_imports(base, {"time.Time": ImportSet(standard=['"time"'])}, ["time.Time"])
    assert base.standard == ['"fmt"']


def test_merge_set():
    a = ImportSet(
        standard=["fmt"],
        third_party=["github.com/volatiletech/sqlboiler/v4", "github.com/volatiletech/null/v8"],
    )
    b = ImportSet(standard=["os"], third_party=["github.com/volatiletech/sqlboiler/v4"])
    c = merge_set(a, b)
    assert c.standard == ["fmt", "os"]
    assert c.third_party == [
        "github.com/volatiletech/null/v8",
        "github.com/volatiletech/sqlboiler/v4",
    ]


def test_combine_string_lists():
    assert combine_string_lists(None, None) == []
    a = ["1", "2"]
    assert combine_string_lists(a, None) == ["1", "2"]
    assert combine_string_lists(None, a) == ["1", "2"]
    assert combine_string_lists(a, ["3", "4"]) == ["1", "2", "3", "4"]


def test_merge():
    a = Collection(
        all=ImportSet(["aa"], ["aa"]),
        test=ImportSet(["at"], ["at"]),
        singleton={"a": ImportSet(["as"], ["as"]), "c": ImportSet(["as"], ["as"])},
        test_singleton={"a": ImportSet(["at"], ["at"]), "c": ImportSet(["at"], ["at"])},
        based_on_type={
            "a": ImportSet(["abot"], ["abot"]),
            "c": ImportSet(["abot"], ["abot"]),
        },
    )
    b = Collection(
        all=ImportSet(["bb"], ["bb"]),
        test=ImportSet(["bt"], ["bt"]),
        singleton={"b": ImportSet(["bs"], ["bs"]), "c": ImportSet(["bs"], ["bs"])},
        test_singleton={"b": ImportSet(["bt"], ["bt"]), "c": ImportSet(["bt"], ["bt"])},
        based_on_type={
            "b": ImportSet(["bbot"], ["bbot"]),
            "c": ImportSet(["bbot"], ["bbot"]),
        },
    )

    c = merge(a, b)

    assert c.all == ImportSet(["aa", "bb"], ["aa", "bb"])
    assert c.test == ImportSet(["at", "bt"], ["at", "bt"])
    assert c.singleton["c"] == ImportSet(["as", "bs"], ["as", "bs"])
    assert c.test_singleton["c"] == ImportSet(["at", "bt"], ["at", "bt"])
    assert c.based_on_type["c"] == ImportSet(["abot", "bbot"], ["abot", "bbot"])
    assert set(c.singleton) == {"a", "b", "c"}
    assert c.singleton["b"] == ImportSet(["bs"], ["bs"])


def test_set_format():
    s = ImportSet(standard=['"fmt"'], third_party=['"github.com/friendsofgo/errors"'])
    expected = 'import (\n\t"fmt"\n\n\t"github.com/friendsofgo/errors"\n)'
    assert s.format().strip() == expected


def test_set_format_empty_and_single():
    assert ImportSet().format() == ""
    assert ImportSet(third_party=['"x"']).format() == 'import "x"'
    assert ImportSet(standard=['"fmt"']).format() == 'import "fmt"'


def test_set_format_only_standard_has_no_blank_line():
    s = ImportSet(standard=['"fmt"', '"os"'])
    assert s.format() == 'import (\n\t"fmt"\n\t"os"\n)\n'


def test_default_imports_values():
    col = new_default_imports()
    assert col.all.standard[0] == '"database/sql"'
    assert set(col.singleton) == {"boil_queries", "boil_types"}
    assert col.test_singleton["boil_suites_test"].standard == ['"testing"']
    assert col.based_on_type == {}


def test_nullable_enum_imports():
    col = nullable_enum_imports()
    assert col.singleton["boil_types"].third_party == [
        '"github.com/volatiletech/null/v8"',
        '"github.com/volatiletech/null/v8/convert"',
    ]
    assert col.all == ImportSet()