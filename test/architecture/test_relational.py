import pytest
from pydantic import ValidationError

from dbdiff.architecture import (
    CatalogSchema,
    Column,
    ColumnType,
    ForeignKey,
    RelationalDatabase,
    RelationalIndex,
    RelationalTable,
)
from dbdiff.onto import SqlType


def make_column(name, ordinal, table_name="orders", **kwargs):
    return Column(
        table_name=table_name,
        name=name,
        ordinal=ordinal,
        column_type=ColumnType(code=SqlType.INTEGER, type_name="int4"),
        **kwargs,
    )


def make_fk(key_seq="1", **kwargs):
    fields = dict(
        fk_table="orders",
        fk_column="customer_id",
        pk_table="customers",
        pk_column="id",
        name="fk_orders_customer",
        key_seq=key_seq,
    )
    fields.update(kwargs)
    return ForeignKey(**fields)


def test_catalog_schema_default():
    assert CatalogSchema.default() == CatalogSchema(catalog=None, schema_name=None)


def test_catalog_schema_hashable():
    assert len({CatalogSchema(schema_name="a"), CatalogSchema(schema_name="a")}) == 1


def test_foreign_key_value_equality():
    assert make_fk() == make_fk()
    assert hash(make_fk()) == hash(make_fk())
    assert len({make_fk(), make_fk(), make_fk(key_seq="2")}) == 2


def test_foreign_key_catalog_schema_matters():
    other = make_fk(fk_catalog_schema=CatalogSchema(schema_name="other"))
    assert other != make_fk()


def test_table_requires_dense_ordinals():
    with pytest.raises(ValidationError):
        RelationalTable(
            name="orders", columns=[make_column("id", 1), make_column("amount", 3)]
        )


def test_table_requires_ordinals_from_one():
    with pytest.raises(ValidationError):
        RelationalTable(name="orders", columns=[make_column("id", 2)])


def test_table_pk_must_name_columns():
    with pytest.raises(ValidationError):
        RelationalTable(
            name="orders", columns=[make_column("id", 1)], pk_columns=["missing"]
        )


def test_column_ordinal_positive():
    with pytest.raises(ValidationError):
        make_column("id", 0)


def test_table_lookups():
    id_column = make_column("id", 1, nullable=False)
    table = RelationalTable(
        name="orders",
        columns=[id_column, make_column("amount", 2)],
        pk_columns=["id"],
        foreign_keys=frozenset({make_fk()}),
        indices=[RelationalIndex(columns=[id_column])],
    )
    assert table.column("id") is id_column
    assert table.column("missing") is None
    assert table.column_names == ["id", "amount"]
    assert table.indices[0].column_names == ["id"]
    assert table.indices[0].name is None


def test_column_type_code():
    assert make_column("id", 1).type_code == SqlType.INTEGER


def test_entities_are_frozen():
    column = make_column("id", 1)
    with pytest.raises(ValidationError):
        column.name = "other"


def test_database_lookup():
    db = RelationalDatabase(
        tables=[RelationalTable(name="orders"), RelationalTable(name="customers")]
    )
    assert db.table_names == ["orders", "customers"]
    assert db.table("customers").name == "customers"
    assert db.table("missing") is None


def test_database_to_yaml_str():
    table = RelationalTable(
        name="orders",
        columns=[make_column("id", 1)],
        foreign_keys=frozenset({make_fk()}),
    )
    dumped = RelationalDatabase(tables=[table]).to_yaml_str()
    assert "name: orders" in dumped
    assert "fk_orders_customer" in dumped
