"""Dialect classes and their resolution from a dialect identifier.

A mapping names its dialect by identifier, either a fully qualified class path
(``org.hibernate.dialect.PostgreSQL82Dialect``) or a bare class name. The
identifier is resolved against a fixed table of known dialect classes; nothing
is imported dynamically.

Example:
    >>> DEFAULT_DIALECTS.resolve("org.hibernate.dialect.PostgreSQL82Dialect")
    PostgreSQL82Dialect()
"""

from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class DialectResolutionError(LookupError):
    """Raised when a dialect identifier cannot be turned into a dialect instance."""


class Dialect:
    """Vendor behaviour profile selected by a mapping.

    Dialect profiles (identifier limits, type mapping) are keyed by the class name,
    see ``dbdiff.mapping.registry``.
    """

    @property
    def type_name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.type_name}()"


class PostgreSQLDialect(Dialect):
    pass


class PostgreSQL81Dialect(PostgreSQLDialect):
    pass


class PostgreSQL82Dialect(PostgreSQL81Dialect):
    pass


class PostgreSQL9Dialect(PostgreSQL82Dialect):
    pass


class PostgreSQL91Dialect(PostgreSQL9Dialect):
    pass


class PostgreSQL92Dialect(PostgreSQL91Dialect):
    pass


class PostgreSQL93Dialect(PostgreSQL92Dialect):
    pass


class PostgreSQL94Dialect(PostgreSQL93Dialect):
    pass


class PostgreSQL95Dialect(PostgreSQL94Dialect):
    pass


class PostgreSQL10Dialect(PostgreSQL95Dialect):
    pass


class PostgresPlusDialect(PostgreSQLDialect):
    pass


class MySQLDialect(Dialect):
    pass


class MySQLInnoDBDialect(MySQLDialect):
    pass


class MySQLMyISAMDialect(MySQLDialect):
    pass


class MySQL5Dialect(MySQLDialect):
    pass


class MySQL5InnoDBDialect(MySQL5Dialect):
    pass


class MySQL55Dialect(MySQL5Dialect):
    pass


class MySQL57Dialect(MySQL55Dialect):
    pass


class MySQL57InnoDBDialect(MySQL57Dialect):
    pass


class MySQL8Dialect(MySQL57Dialect):
    pass


class MariaDBDialect(MySQL5Dialect):
    pass


class MariaDB53Dialect(MariaDBDialect):
    pass


class MariaDB10Dialect(MariaDB53Dialect):
    pass


class MariaDB102Dialect(MariaDB10Dialect):
    pass


class MariaDB103Dialect(MariaDB102Dialect):
    pass


class OracleDialect(Dialect):
    pass


class Oracle8iDialect(OracleDialect):
    pass


class Oracle9iDialect(Oracle8iDialect):
    pass


class Oracle10gDialect(Oracle9iDialect):
    pass


class Oracle12cDialect(Oracle10gDialect):
    pass


class H2Dialect(Dialect):
    pass


class HSQLDialect(Dialect):
    pass


class DerbyDialect(Dialect):
    pass


class DerbyTenFiveDialect(DerbyDialect):
    pass


class DerbyTenSixDialect(DerbyTenFiveDialect):
    pass


class DerbyTenSevenDialect(DerbyTenSixDialect):
    pass


class DB2Dialect(Dialect):
    pass


class DB2400Dialect(DB2Dialect):
    pass


class DB2390Dialect(DB2Dialect):
    pass


class SQLServerDialect(Dialect):
    pass


class SQLServer2005Dialect(SQLServerDialect):
    pass


class SQLServer2008Dialect(SQLServer2005Dialect):
    pass


class SQLServer2012Dialect(SQLServer2008Dialect):
    pass


class SybaseDialect(Dialect):
    pass


class SybaseASE15Dialect(SybaseDialect):
    pass


class SybaseASE157Dialect(SybaseASE15Dialect):
    pass


class SybaseAnywhereDialect(SybaseDialect):
    pass


class SQLiteDialect(Dialect):
    pass


class InformixDialect(Dialect):
    pass


class Ingres9Dialect(Dialect):
    pass


class FirebirdDialect(Dialect):
    pass


class InterbaseDialect(Dialect):
    pass


class TeradataDialect(Dialect):
    pass


class HANAColumnStoreDialect(Dialect):
    pass


class HANARowStoreDialect(Dialect):
    pass


class CUBRIDDialect(Dialect):
    pass


KNOWN_DIALECTS: tuple[type[Dialect], ...] = (
    PostgreSQLDialect,
    PostgreSQL81Dialect,
    PostgreSQL82Dialect,
    PostgreSQL9Dialect,
    PostgreSQL91Dialect,
    PostgreSQL92Dialect,
    PostgreSQL93Dialect,
    PostgreSQL94Dialect,
    PostgreSQL95Dialect,
    PostgreSQL10Dialect,
    PostgresPlusDialect,
    MySQLDialect,
    MySQLInnoDBDialect,
    MySQLMyISAMDialect,
    MySQL5Dialect,
    MySQL5InnoDBDialect,
    MySQL55Dialect,
    MySQL57Dialect,
    MySQL57InnoDBDialect,
    MySQL8Dialect,
    MariaDBDialect,
    MariaDB53Dialect,
    MariaDB10Dialect,
    MariaDB102Dialect,
    MariaDB103Dialect,
    OracleDialect,
    Oracle8iDialect,
    Oracle9iDialect,
    Oracle10gDialect,
    Oracle12cDialect,
    H2Dialect,
    HSQLDialect,
    DerbyDialect,
    DerbyTenFiveDialect,
    DerbyTenSixDialect,
    DerbyTenSevenDialect,
    DB2Dialect,
    DB2400Dialect,
    DB2390Dialect,
    SQLServerDialect,
    SQLServer2005Dialect,
    SQLServer2008Dialect,
    SQLServer2012Dialect,
    SybaseDialect,
    SybaseASE15Dialect,
    SybaseASE157Dialect,
    SybaseAnywhereDialect,
    SQLiteDialect,
    InformixDialect,
    Ingres9Dialect,
    FirebirdDialect,
    InterbaseDialect,
    TeradataDialect,
    HANAColumnStoreDialect,
    HANARowStoreDialect,
    CUBRIDDialect,
)


def short_dialect_name(identifier: str) -> str:
    """Return the last dotted segment of a dialect identifier."""
    return identifier.strip().rsplit(".", 1)[-1]


class DialectResolver:
    """Immutable table of dialect classes keyed by class name."""

    def __init__(self, dialects: Iterable[type[Dialect]] = KNOWN_DIALECTS):
        self._dialects: dict[str, type[Dialect]] = {d.__name__: d for d in dialects}

    @property
    def names(self) -> list[str]:
        return list(self._dialects)

    def with_dialects(self, *dialects: type[Dialect]) -> DialectResolver:
        """Return a new resolver that also knows ``dialects``."""
        return DialectResolver([*self._dialects.values(), *dialects])

    def resolve(self, identifier: str) -> Dialect:
        """Instantiate the dialect named by ``identifier``.

        Raises:
            DialectResolutionError: If the identifier is unknown or the dialect
                cannot be instantiated
        """
        name = short_dialect_name(identifier)
        dialect_class = self._dialects.get(name)
        if dialect_class is None:
            raise DialectResolutionError(f"Unknown dialect '{identifier}'")
        try:
            dialect = dialect_class()
        except Exception as e:
            raise DialectResolutionError(f"Can't create dialect '{identifier}'") from e
        logger.debug(f"Resolved dialect '{identifier}' to {dialect!r}")
        return dialect


DEFAULT_DIALECTS = DialectResolver()
