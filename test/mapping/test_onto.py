import pytest
import yaml
from pydantic import ValidationError

from dbdiff.mapping.onto import (
    DEFAULT_LENGTH,
    DEFAULT_PRECISION,
    MappedColumn,
    MappedForeignKey,
    MappedTable,
    MappingDocument,
)


def test_document_from_dict(orders_document):
    assert orders_document.dialect_name == "org.hibernate.dialect.PostgreSQL82Dialect"
    assert [t.name for t in orders_document.tables()] == ["ORDERS", "CUSTOMERS"]
    assert orders_document.table("CUSTOMERS").primary_key_columns == ["ID"]
    assert orders_document.table("MISSING") is None


def test_tables_are_restartable(orders_document):
    assert [t.name for t in orders_document.tables()] == [
        t.name for t in orders_document.tables()
    ]


def test_column_defaults():
    column = MappedColumn(name="ID", sql_type_code=4, sql_type="int4")
    assert column.nullable
    assert not column.unique
    assert column.precision == DEFAULT_PRECISION
    assert column.length == DEFAULT_LENGTH
    assert column.default_value is None
    assert column.value_type_name == "int4"


def test_value_type_overrides_sql_type():
    column = MappedColumn(
        name="FLAG", sql_type_code=1, sql_type="char(1)", value_type="character"
    )
    assert column.value_type_name == "character"


def test_primary_key_membership(orders_document):
    orders = orders_document.table("ORDERS")
    id_column, amount_column = orders.columns[0], orders.columns[1]
    assert orders.is_primary_key_column(id_column)
    assert not orders.is_primary_key_column(amount_column)


def test_unknown_constraint_column_rejected():
    with pytest.raises(ValidationError):
        MappedTable(
            name="T",
            columns=[MappedColumn(name="A", sql_type_code=4, sql_type="int4")],
            indices=[{"name": "IDX", "columns": ["B"]}],
        )


def test_unknown_primary_key_column_rejected():
    with pytest.raises(ValidationError):
        MappedTable(
            name="T",
            columns=[MappedColumn(name="A", sql_type_code=4, sql_type="int4")],
            primary_key={"columns": ["B"]},
        )


def test_foreign_key_arity_checked():
    with pytest.raises(ValidationError):
        MappedForeignKey(
            name="FK",
            columns=["A", "B"],
            referenced_table="T",
            referenced_columns=["X"],
        )


def test_empty_constraint_rejected():
    with pytest.raises(ValidationError):
        MappedForeignKey(name="FK", columns=[], referenced_table="T")


def test_duplicate_tables_rejected():
    with pytest.raises(ValidationError):
        MappingDocument.from_dict(
            {"dialect": "H2Dialect", "tables": [{"name": "T"}, {"name": "T"}]}
        )


def test_unknown_keys_rejected():
    with pytest.raises(ValidationError):
        MappingDocument.from_dict({"dialect": "H2Dialect", "tabels": []})


def test_yaml_roundtrip(orders_document, tmp_path):
    path = tmp_path / "mapping.yaml"
    orders_document.to_yaml(str(path))
    with open(path) as f:
        assert yaml.safe_load(f)["tables"][0]["name"] == "ORDERS"
    assert MappingDocument.from_yaml(str(path)) == orders_document
