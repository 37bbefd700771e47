"""Dialect-specific mapping of vendor column types to canonical type codes.

Each supported dialect has a ``TypeMapper`` that rewrites the type code an ORM
reports for a column into the code the database itself reports for it, so that a
schema built from mappings compares cleanly with an introspected one. The mapper
only ever replaces ``ColumnType.code``; the vendor type string is kept as is.

Key Components:
    - TypeMapper: Abstract mapper interface
    - NoopTypeMapper: Identity mapping used for unsupported dialects
    - TableTypeMapper: Mapper driven by a type-name table and a type-code table
    - PostgreSqlTypeMapper, MySqlTypeMapper, OracleTypeMapper: Vendor tables
"""

from __future__ import annotations

import abc
from typing import ClassVar

from dbdiff.architecture.relational import ColumnType
from dbdiff.onto import SqlType


def base_type_name(type_name: str) -> str:
    """Strip size/precision arguments from a vendor type, e.g. 'varchar(20)' -> 'varchar'."""
    return type_name.split("(", 1)[0].strip().lower()


class TypeMapper(abc.ABC):
    """Assigns the canonical type code of a column."""

    @abc.abstractmethod
    def canonical_code(self, code: int, type_name: str) -> int:
        """Return the canonical code for a raw vendor code and native type name."""

    def map_type(self, column_type: ColumnType) -> ColumnType:
        """Return ``column_type`` with its code replaced by the canonical one."""
        code = self.canonical_code(column_type.code, column_type.type_name)
        if code == column_type.code:
            return column_type
        return column_type.model_copy(update={"code": code})

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoopTypeMapper(TypeMapper):
    """Pass-through mapper: the canonical code is the raw vendor code."""

    def canonical_code(self, code: int, type_name: str) -> int:
        return code


class TableTypeMapper(TypeMapper):
    """Mapper looking up the native type name first, then the raw code."""

    NAME_MAP: ClassVar[dict[str, int]] = {}
    CODE_MAP: ClassVar[dict[int, int]] = {}

    def canonical_code(self, code: int, type_name: str) -> int:
        by_name = self.NAME_MAP.get(base_type_name(type_name))
        if by_name is not None:
            return int(by_name)
        return int(self.CODE_MAP.get(code, code))


class PostgreSqlTypeMapper(TableTypeMapper):
    """Codes as reported by the PostgreSQL JDBC driver."""

    NAME_MAP = {
        "text": SqlType.VARCHAR,
        "bytea": SqlType.BINARY,
        "bool": SqlType.BIT,
        "boolean": SqlType.BIT,
        "oid": SqlType.BIGINT,
    }
    CODE_MAP = {
        SqlType.BOOLEAN: SqlType.BIT,
        SqlType.TINYINT: SqlType.SMALLINT,
        SqlType.FLOAT: SqlType.DOUBLE,
        SqlType.DECIMAL: SqlType.NUMERIC,
        SqlType.CLOB: SqlType.VARCHAR,
        SqlType.LONGVARCHAR: SqlType.VARCHAR,
        SqlType.NVARCHAR: SqlType.VARCHAR,
        SqlType.LONGNVARCHAR: SqlType.VARCHAR,
        SqlType.NCHAR: SqlType.CHAR,
        SqlType.BLOB: SqlType.BINARY,
        SqlType.VARBINARY: SqlType.BINARY,
        SqlType.LONGVARBINARY: SqlType.BINARY,
    }


class MySqlTypeMapper(TableTypeMapper):
    """Codes as reported by MySQL Connector/J."""

    NAME_MAP = {
        "text": SqlType.LONGVARCHAR,
        "mediumtext": SqlType.LONGVARCHAR,
        "longtext": SqlType.LONGVARCHAR,
        "blob": SqlType.LONGVARBINARY,
        "mediumblob": SqlType.LONGVARBINARY,
        "longblob": SqlType.LONGVARBINARY,
        "tinyint": SqlType.TINYINT,
        "datetime": SqlType.TIMESTAMP,
    }
    CODE_MAP = {
        SqlType.BOOLEAN: SqlType.BIT,
        SqlType.NUMERIC: SqlType.DECIMAL,
        SqlType.FLOAT: SqlType.REAL,
        SqlType.CLOB: SqlType.LONGVARCHAR,
        SqlType.BLOB: SqlType.LONGVARBINARY,
    }


class OracleTypeMapper(TableTypeMapper):
    """Codes as reported by the Oracle JDBC driver.

    Oracle stores every exact numeric as NUMBER, which the driver reports as
    DECIMAL, and its DATE carries a time part.
    """

    NAME_MAP = {
        "number": SqlType.DECIMAL,
        "varchar2": SqlType.VARCHAR,
        "nvarchar2": SqlType.VARCHAR,
        "raw": SqlType.VARBINARY,
        "long": SqlType.LONGVARCHAR,
        "clob": SqlType.CLOB,
        "blob": SqlType.BLOB,
    }
    CODE_MAP = {
        SqlType.BIT: SqlType.DECIMAL,
        SqlType.BOOLEAN: SqlType.DECIMAL,
        SqlType.TINYINT: SqlType.DECIMAL,
        SqlType.SMALLINT: SqlType.DECIMAL,
        SqlType.INTEGER: SqlType.DECIMAL,
        SqlType.BIGINT: SqlType.DECIMAL,
        SqlType.NUMERIC: SqlType.DECIMAL,
        SqlType.REAL: SqlType.FLOAT,
        SqlType.DOUBLE: SqlType.FLOAT,
        SqlType.DATE: SqlType.TIMESTAMP,
        SqlType.BINARY: SqlType.VARBINARY,
    }
