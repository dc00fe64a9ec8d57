import pytest

from schemaboil.schema import (
    Column,
    ForeignKey,
    PrimaryKey,
    Table,
    ToManyRelationship,
    ToOneRelationship,
    get_table,
    to_many_relationships,
    to_one_relationships,
)


def test_get_table():
    tables = [Table(name="one")]
    assert get_table(tables, "one").name == "one"


def test_get_table_missing():
    with pytest.raises(LookupError):
        get_table([Table(name="one")], "missing")


def test_get_column():
    table = Table(columns=[Column(name="one")])
    assert table.get_column("one").name == "one"


def test_get_column_missing():
    table = Table(columns=[Column(name="one")])
    with pytest.raises(LookupError):
        table.get_column("missing")


@pytest.mark.parametrize(
    "can, pkeys",
    [
        (True, [Column(name="id", type="int64", default="a")]),
        (True, [Column(name="id", type="uint64", default="a")]),
        (True, [Column(name="id", type="int", default="a")]),
        (True, [Column(name="id", type="uint", default="a")]),
        (True, [Column(name="id", type="uint", default="a")]),
        (
            False,
            [
                Column(name="id", type="uint", default="a"),
                Column(name="id2", type="uint", default="a"),
            ],
        ),
        (False, [Column(name="id", type="string", default="a")]),
        (False, [Column(name="id", type="int", default="")]),
        (False, []),
    ],
)
def test_can_last_insert_id(can, pkeys):
    table = Table(
        columns=pkeys,
        pkey=PrimaryKey(columns=[column.name for column in pkeys]),
    )
    assert table.can_last_insert_id() is can


def test_can_last_insert_id_without_primary_key():
    table = Table(columns=[Column(name="id", type="int", default="a")])
    assert table.can_last_insert_id() is False


@pytest.mark.parametrize(
    "can, columns",
    [
        (True, [Column(name="deleted_at", type="null.Time")]),
        (False, [Column(name="deleted_at", type="time.Time")]),
        (False, [Column(name="deleted_at", type="int")]),
        (False, []),
    ],
)
def test_can_soft_delete(can, columns):
    assert Table(columns=columns).can_soft_delete("deleted_at") is can


def test_can_soft_delete_defaults_column_name():
    table = Table(columns=[Column(name="deleted_at", type="null.Time")])
    assert table.can_soft_delete("") is True
    assert table.can_soft_delete("removed_at") is False


def _tables(unique=False, nullable=False):
    def col(name):
        return Column(name=name, unique=unique, nullable=nullable)

    def fk(name, column, foreign_table):
        return ForeignKey(
            name=name,
            column=column,
            foreign_table=foreign_table,
            foreign_column="id",
            unique=unique,
            nullable=nullable,
            foreign_column_nullable=nullable,
        )

    return [
        Table(name="pilots", columns=[col("id"), col("name")]),
        Table(name="airports", columns=[col("id"), col("size")]),
        Table(
            name="jets",
            columns=[col("id"), col("pilot_id"), col("airport_id")],
            fkeys=[
                fk("jets_pilot_id_fk", "pilot_id", "pilots"),
                fk("jets_airport_id_fk", "airport_id", "airports"),
            ],
        ),
        Table(
            name="licenses",
            columns=[col("id"), col("pilot_id")],
            fkeys=[fk("licenses_pilot_id_fk", "pilot_id", "pilots")],
        ),
        Table(name="hangars", columns=[col("id"), col("name")]),
        Table(name="languages", columns=[col("id"), col("language")]),
        Table(
            name="pilot_languages",
            is_join_table=True,
            columns=[col("pilot_id"), col("language_id")],
            fkeys=[
                fk("pilot_id_fk", "pilot_id", "pilots"),
                fk("language_id_fk", "language_id", "languages"),
            ],
        ),
    ]


def test_to_one_relationships():
    relationships = to_one_relationships("pilots", _tables(unique=True))
    assert relationships == [
        ToOneRelationship(
            name="jets_pilot_id_fk",
            table="pilots",
            column="id",
            nullable=False,
            unique=False,
            foreign_table="jets",
            foreign_column="pilot_id",
            foreign_column_nullable=False,
            foreign_column_unique=True,
        ),
        ToOneRelationship(
            name="licenses_pilot_id_fk",
            table="pilots",
            column="id",
            nullable=False,
            unique=False,
            foreign_table="licenses",
            foreign_column="pilot_id",
            foreign_column_nullable=False,
            foreign_column_unique=True,
        ),
    ]


def _expected_to_many(nullable):
    return [
        ToManyRelationship(
            name="jets_pilot_id_fk",
            table="pilots",
            column="id",
            nullable=nullable,
            unique=False,
            foreign_table="jets",
            foreign_column="pilot_id",
            foreign_column_nullable=nullable,
            foreign_column_unique=False,
            to_join_table=False,
        ),
        ToManyRelationship(
            name="licenses_pilot_id_fk",
            table="pilots",
            column="id",
            nullable=nullable,
            unique=False,
            foreign_table="licenses",
            foreign_column="pilot_id",
            foreign_column_nullable=nullable,
            foreign_column_unique=False,
            to_join_table=False,
        ),
        ToManyRelationship(
            table="pilots",
            column="id",
            nullable=nullable,
            unique=False,
            foreign_table="languages",
            foreign_column="id",
            foreign_column_nullable=nullable,
            foreign_column_unique=False,
            to_join_table=True,
            join_table="pilot_languages",
            join_local_fkey_name="pilot_id_fk",
            join_local_column="pilot_id",
            join_local_column_nullable=nullable,
            join_local_column_unique=False,
            join_foreign_fkey_name="language_id_fk",
            join_foreign_column="language_id",
            join_foreign_column_nullable=nullable,
            join_foreign_column_unique=False,
        ),
    ]


def test_to_many_relationships():
    relationships = to_many_relationships("pilots", _tables())
    assert len(relationships) == 3
    assert relationships == _expected_to_many(nullable=False)


def test_to_many_relationships_null():
    relationships = to_many_relationships("pilots", _tables(nullable=True))
    assert len(relationships) == 3
    assert relationships == _expected_to_many(nullable=True)


def test_relationships_unknown_table():
    with pytest.raises(LookupError):
        to_many_relationships("missing", _tables())
    with pytest.raises(LookupError):
        to_one_relationships("missing", _tables())