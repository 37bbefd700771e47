"""Core enumerations shared across dbdiff.

Key Components:
    - BaseEnum: Base class for string-based enumerations with flexible membership testing
    - SqlType: Canonical numeric column type codes (JDBC ``java.sql.Types`` numbering)
    - ConversionErrorKind: Closed set of fatal conversion failures

Example:
    >>> "missing_dialect_config" in ConversionErrorKind  # True
    >>> SqlType.VARCHAR == 12  # True
"""

from enum import EnumMeta, IntEnum

import yaml
from strenum import StrEnum


class MetaEnum(EnumMeta):
    """Metaclass allowing ``value in Enum`` membership tests on raw values."""

    def __contains__(self, member: object) -> bool:
        if isinstance(member, self):
            return True
        try:
            self(member)
            return True
        except ValueError:
            return False


class BaseEnum(StrEnum, metaclass=MetaEnum):
    """Base class for string-based enumerations."""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


def _base_enum_representer(dumper, data):
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data.value))


yaml.add_multi_representer(BaseEnum, _base_enum_representer)
yaml.add_multi_representer(
    BaseEnum, _base_enum_representer, Dumper=yaml.SafeDumper
)


class SqlType(IntEnum):
    """Canonical column type codes.

    Values follow the JDBC ``java.sql.Types`` numbering so that codes reported by
    ORM frameworks and database drivers can be compared directly. Codes outside this
    enumeration are still valid canonical codes; they are simply carried as ``int``.
    """

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    NULL = 0
    OTHER = 1111
    JAVA_OBJECT = 2000
    DISTINCT = 2001
    STRUCT = 2002
    ARRAY = 2003
    BLOB = 2004
    CLOB = 2005
    REF = 2006
    DATALINK = 70
    BOOLEAN = 16
    ROWID = -8
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011
    SQLXML = 2009
    TIME_WITH_TIMEZONE = 2013
    TIMESTAMP_WITH_TIMEZONE = 2014


# type codes whose size is the declared precision rather than the declared length
NUMERIC_TYPES: frozenset[int] = frozenset(
    {
        SqlType.BIGINT,
        SqlType.BOOLEAN,
        SqlType.BIT,
        SqlType.DECIMAL,
        SqlType.TINYINT,
        SqlType.SMALLINT,
        SqlType.INTEGER,
        SqlType.FLOAT,
        SqlType.DOUBLE,
        SqlType.NUMERIC,
        SqlType.REAL,
    }
)


class ConversionErrorKind(BaseEnum):
    """Fatal, non-retryable failures of a schema conversion.

    Attributes:
        MISSING_DIALECT_CONFIG: The metadata source does not name a dialect
        DIALECT_RESOLUTION_FAILED: The named dialect cannot be located or instantiated
        MISSING_REFERENCED_PRIMARY_KEY: A foreign key without explicit referenced
            columns points at a table that has no primary key
    """

    MISSING_DIALECT_CONFIG = "missing_dialect_config"
    DIALECT_RESOLUTION_FAILED = "dialect_resolution_failed"
    MISSING_REFERENCED_PRIMARY_KEY = "missing_referenced_primary_key"
