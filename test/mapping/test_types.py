import pytest

from dbdiff.architecture import ColumnType
from dbdiff.mapping.types import (
    MySqlTypeMapper,
    NoopTypeMapper,
    OracleTypeMapper,
    PostgreSqlTypeMapper,
    base_type_name,
)
from dbdiff.onto import SqlType


def test_base_type_name():
    assert base_type_name("varchar(20)") == "varchar"
    assert base_type_name("numeric(10, 2)") == "numeric"
    assert base_type_name("character varying(40)") == "character varying"
    assert base_type_name("TEXT") == "text"


def test_noop_mapper_keeps_code():
    column_type = ColumnType(code=SqlType.CLOB, type_name="clob")
    assert NoopTypeMapper().map_type(column_type) is column_type


def test_noop_mapper_keeps_unknown_code():
    column_type = ColumnType(code=-100, type_name="geometry")
    assert NoopTypeMapper().map_type(column_type).code == -100


@pytest.mark.parametrize(
    "code, type_name, expected",
    [
        (SqlType.BOOLEAN, "bool", SqlType.BIT),
        (SqlType.BOOLEAN, "something", SqlType.BIT),
        (SqlType.TINYINT, "int2", SqlType.SMALLINT),
        (SqlType.FLOAT, "float8", SqlType.DOUBLE),
        (SqlType.DECIMAL, "numeric(19, 2)", SqlType.NUMERIC),
        (SqlType.CLOB, "text", SqlType.VARCHAR),
        (SqlType.LONGVARCHAR, "varchar", SqlType.VARCHAR),
        (SqlType.VARBINARY, "bytea", SqlType.BINARY),
        (SqlType.BLOB, "oid", SqlType.BIGINT),
        (SqlType.INTEGER, "int4", SqlType.INTEGER),
        (SqlType.VARCHAR, "varchar(255)", SqlType.VARCHAR),
    ],
)
def test_postgresql_mapping(code, type_name, expected):
    mapped = PostgreSqlTypeMapper().map_type(ColumnType(code=code, type_name=type_name))
    assert mapped.code == expected


@pytest.mark.parametrize(
    "code, type_name, expected",
    [
        (SqlType.BOOLEAN, "bit", SqlType.BIT),
        (SqlType.NUMERIC, "decimal(10,2)", SqlType.DECIMAL),
        (SqlType.FLOAT, "float", SqlType.REAL),
        (SqlType.CLOB, "longtext", SqlType.LONGVARCHAR),
        (SqlType.VARCHAR, "text", SqlType.LONGVARCHAR),
        (SqlType.BLOB, "longblob", SqlType.LONGVARBINARY),
        (SqlType.BIT, "tinyint(1)", SqlType.TINYINT),
        (SqlType.TIMESTAMP, "datetime", SqlType.TIMESTAMP),
    ],
)
def test_mysql_mapping(code, type_name, expected):
    mapped = MySqlTypeMapper().map_type(ColumnType(code=code, type_name=type_name))
    assert mapped.code == expected


@pytest.mark.parametrize(
    "code, type_name, expected",
    [
        (SqlType.INTEGER, "number(10,0)", SqlType.DECIMAL),
        (SqlType.BIGINT, "number(19,0)", SqlType.DECIMAL),
        (SqlType.BIT, "number(1,0)", SqlType.DECIMAL),
        (SqlType.DOUBLE, "double precision", SqlType.FLOAT),
        (SqlType.VARCHAR, "varchar2(255 char)", SqlType.VARCHAR),
        (SqlType.DATE, "date", SqlType.TIMESTAMP),
        (SqlType.BINARY, "raw(16)", SqlType.VARBINARY),
        (SqlType.LONGVARCHAR, "long", SqlType.LONGVARCHAR),
    ],
)
def test_oracle_mapping(code, type_name, expected):
    mapped = OracleTypeMapper().map_type(ColumnType(code=code, type_name=type_name))
    assert mapped.code == expected


def test_mapper_only_changes_code():
    column_type = ColumnType(code=SqlType.BOOLEAN, type_name="bool")
    mapped = PostgreSqlTypeMapper().map_type(column_type)
    assert mapped.type_name == "bool"
    assert column_type.code == SqlType.BOOLEAN
