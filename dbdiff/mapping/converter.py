"""Conversion of ORM mapping metadata into the canonical relational model.

``SchemaConverter`` resolves the dialect named by a metadata source, picks the
matching dialect profile and walks the source table by table, producing a
``RelationalDatabase``. Identifier truncation and type mapping come from the
profile; size, nullability, index and foreign key rules are dialect independent.

The converter keeps only its configuration (default catalog/schema, dialect
registry) as instance state. Every call to ``convert`` works on call-local
state, so one converter can serve concurrent conversions.

Example:
    >>> source = MappingDocument.from_yaml("mapping.yaml")
    >>> result = SchemaConverter(CatalogSchema(schema_name="public")).convert(source)
    >>> db = result.unwrap()
"""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import model_validator
from suthing import Timer

from dbdiff.architecture.base import ConfigBaseModel
from dbdiff.architecture.relational import (
    CatalogSchema,
    Column,
    ColumnType,
    ForeignKey,
    RelationalDatabase,
    RelationalIndex,
    RelationalTable,
)
from dbdiff.mapping.dialect import DialectResolutionError
from dbdiff.mapping.onto import (
    DEFAULT_LENGTH,
    DEFAULT_PRECISION,
    MappedColumn,
    MappedForeignKey,
    MappedTable,
    MetadataSource,
)
from dbdiff.mapping.registry import DEFAULT_REGISTRY, DialectMappingInfo, DialectRegistry
from dbdiff.onto import NUMERIC_TYPES, ConversionErrorKind

logger = logging.getLogger(__name__)

DEFAULT_KEY_SEQ = 1


class ConversionFailure(ConfigBaseModel):
    """Why a conversion was aborted."""

    kind: ConversionErrorKind
    message: str


class ConversionError(Exception):
    """Raised by ``ConversionResult.unwrap`` and ``resolve_mapping_info``."""

    def __init__(self, kind: ConversionErrorKind, message: str):
        super().__init__(message)
        self.kind = ConversionErrorKind(kind)
        self.message = message

    @property
    def failure(self) -> ConversionFailure:
        return ConversionFailure(kind=self.kind, message=self.message)


class ConversionResult(ConfigBaseModel):
    """Either the converted database or the failure that aborted the conversion."""

    database: RelationalDatabase | None = None
    failure: ConversionFailure | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> ConversionResult:
        if (self.database is None) == (self.failure is None):
            raise ValueError("Exactly one of database and failure must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> RelationalDatabase:
        """Return the database.

        Raises:
            ConversionError: If the conversion failed
        """
        if self.database is not None:
            return self.database
        raise ConversionError(self.failure.kind, self.failure.message)


class SchemaConverter:
    """Builds a ``RelationalDatabase`` from an ORM ``MetadataSource``.

    Attributes:
        catalog_schema: Catalog/schema assigned to every converted entity
        registry: Dialect profiles consulted for truncation and type mapping
    """

    def __init__(
        self,
        catalog_schema: CatalogSchema | None = None,
        registry: DialectRegistry = DEFAULT_REGISTRY,
    ):
        self.catalog_schema = catalog_schema or CatalogSchema.default()
        self.registry = registry

    def resolve_mapping_info(self, source: MetadataSource) -> DialectMappingInfo:
        """Resolve the dialect profile for ``source``.

        Raises:
            ConversionError: If the dialect is not configured or cannot be resolved
        """
        dialect_name = source.dialect_name
        if not dialect_name:
            raise ConversionError(
                ConversionErrorKind.MISSING_DIALECT_CONFIG, "dialect is not set"
            )
        try:
            dialect = source.resolve_dialect(dialect_name)
        except DialectResolutionError as e:
            raise ConversionError(
                ConversionErrorKind.DIALECT_RESOLUTION_FAILED,
                f"can't resolve dialect '{dialect_name}': {e}",
            ) from e
        return self.registry.resolve(type(dialect).__name__)

    def convert(self, source: MetadataSource) -> ConversionResult:
        """Convert ``source`` into a ``RelationalDatabase``.

        Returns:
            ConversionResult: The database, or the failure that aborted the
                conversion; no partial result is ever returned
        """
        try:
            with Timer() as timer:
                info = self.resolve_mapping_info(source)
                database = _ConversionPass(self.catalog_schema, info, source).run()
        except ConversionError as e:
            logger.warning(f"Schema conversion failed ({e.kind}): {e.message}")
            return ConversionResult(failure=e.failure)
        logger.info(
            f"Converted {len(database.tables)} tables in {timer.elapsed:.3f} sec"
        )
        return ConversionResult(database=database)


class _ConversionPass:
    """State of a single ``SchemaConverter.convert`` call."""

    def __init__(
        self,
        catalog_schema: CatalogSchema,
        info: DialectMappingInfo,
        source: MetadataSource,
    ):
        self.catalog_schema = catalog_schema
        self.info = info
        self.source = source

    def table_name(self, table: MappedTable | str) -> str:
        name = table if isinstance(table, str) else table.name
        return self.info.truncate_info.truncate_table_name(name)

    def column_name(self, name: str) -> str:
        return self.info.truncate_info.truncate_column_name(name)

    def run(self) -> RelationalDatabase:
        return RelationalDatabase(
            tables=[self.convert_table(t) for t in self.source.tables()]
        )

    def convert_table(self, mapped_table: MappedTable) -> RelationalTable:
        name = self.table_name(mapped_table)
        columns: list[Column] = []
        indices: list[RelationalIndex] = []

        for ordinal, mapped_column in enumerate(mapped_table.columns, start=1):
            column = self.convert_column(mapped_column, mapped_table, ordinal)
            columns.append(column)
            if mapped_column.unique:
                indices.append(
                    RelationalIndex(
                        catalog_schema=self.catalog_schema, name=None, columns=[column]
                    )
                )

        foreign_keys: set[ForeignKey] = set()
        for mapped_key in mapped_table.foreign_keys:
            foreign_keys.update(self.convert_foreign_key(mapped_key, mapped_table))

        columns_by_name = {c.name: c for c in columns}
        for mapped_index in mapped_table.indices:
            indices.append(
                self.convert_index(
                    _lower(mapped_index.name), mapped_index.columns, columns_by_name, name
                )
            )
        for unique_key in mapped_table.unique_keys:
            indices.append(
                self.convert_index(None, unique_key.columns, columns_by_name, name)
            )

        pk_columns: list[str] = []
        if mapped_table.primary_key is not None:
            indices.append(
                self.convert_index(
                    None, mapped_table.primary_key.columns, columns_by_name, name
                )
            )
            pk_columns = [self.column_name(c) for c in mapped_table.primary_key.columns]

        logger.debug(
            f"Converted table '{mapped_table.name}' -> '{name}' with {len(columns)} "
            f"columns, {len(foreign_keys)} foreign key columns and {len(indices)} indices"
        )
        return RelationalTable(
            catalog_schema=self.catalog_schema,
            name=name,
            columns=columns,
            pk_columns=pk_columns,
            foreign_keys=frozenset(foreign_keys),
            indices=indices,
        )

    def convert_column(
        self, mapped_column: MappedColumn, owner: MappedTable, ordinal: int
    ) -> Column:
        column_type = self.info.type_mapper.map_type(
            ColumnType(code=mapped_column.sql_type_code, type_name=mapped_column.sql_type)
        )
        not_null = not mapped_column.nullable or owner.is_primary_key_column(
            mapped_column
        )
        return Column(
            catalog_schema=self.catalog_schema,
            table_name=self.table_name(owner),
            name=self.column_name(mapped_column.name),
            ordinal=ordinal,
            column_type=column_type,
            column_size=infer_column_size(mapped_column, column_type.code),
            nullable=not not_null,
            default_value=mapped_column.default_value,
        )

    def convert_foreign_key(
        self, mapped_key: MappedForeignKey, owner: MappedTable
    ) -> list[ForeignKey]:
        """Split a (possibly composite) foreign key into one record per column."""
        if mapped_key.referenced_columns:
            referenced_columns = list(mapped_key.referenced_columns)
            if len(referenced_columns) != len(mapped_key.columns):
                raise ValueError(
                    f"Foreign key '{mapped_key.name}' of table '{owner.name}' has "
                    f"{len(mapped_key.columns)} columns but "
                    f"{len(referenced_columns)} referenced columns"
                )
        else:
            referenced_columns = self._referenced_primary_key(mapped_key, owner)

        fkeys = []
        for i, fk_column in enumerate(mapped_key.columns):
            fkeys.append(
                ForeignKey(
                    fk_catalog_schema=self.catalog_schema,
                    fk_table=self.table_name(owner),
                    fk_column=self.column_name(fk_column),
                    pk_catalog_schema=self.catalog_schema,
                    pk_table=self.table_name(mapped_key.referenced_table),
                    pk_column=self.column_name(referenced_columns[i]),
                    name=_lower(mapped_key.name),
                    key_seq=str(DEFAULT_KEY_SEQ + i),
                )
            )
        return fkeys

    def find_table(self, name: str) -> MappedTable | None:
        """Look up a source table by name, falling back to the folded database name."""
        table = self.source.table(name)
        if table is not None:
            return table
        folded = self.table_name(name)
        for candidate in self.source.tables():
            if self.table_name(candidate) == folded:
                return candidate
        return None

    def _referenced_primary_key(
        self, mapped_key: MappedForeignKey, owner: MappedTable
    ) -> list[str]:
        referenced = self.find_table(mapped_key.referenced_table)
        if referenced is None:
            raise ConversionError(
                ConversionErrorKind.MISSING_REFERENCED_PRIMARY_KEY,
                f"foreign key '{mapped_key.name}' of table '{owner.name}' references "
                f"table '{mapped_key.referenced_table}' which is not mapped",
            )
        if referenced.primary_key is None:
            raise ConversionError(
                ConversionErrorKind.MISSING_REFERENCED_PRIMARY_KEY,
                f"foreign key '{mapped_key.name}' of table '{owner.name}' references "
                f"table '{referenced.name}' which has no primary key",
            )
        pk_columns = referenced.primary_key.columns
        if len(pk_columns) < len(mapped_key.columns):
            raise ConversionError(
                ConversionErrorKind.MISSING_REFERENCED_PRIMARY_KEY,
                f"foreign key '{mapped_key.name}' of table '{owner.name}' has "
                f"{len(mapped_key.columns)} columns but the primary key of "
                f"'{referenced.name}' has {len(pk_columns)}",
            )
        return list(pk_columns)

    def convert_index(
        self,
        name: str | None,
        mapped_columns: Sequence[str],
        columns_by_name: dict[str, Column],
        table_name: str,
    ) -> RelationalIndex:
        """Build an index over already converted columns of ``table_name``."""
        columns = []
        for mapped_column in mapped_columns:
            column_name = self.column_name(mapped_column)
            column = columns_by_name.get(column_name)
            if column is None:
                raise ValueError(
                    f"Index column '{column_name}' is not a column of table '{table_name}'"
                )
            columns.append(column)
        return RelationalIndex(
            catalog_schema=self.catalog_schema, name=name, columns=columns
        )


def infer_column_size(mapped_column: MappedColumn, type_code: int) -> int | None:
    """Size of a column given its canonical type code; first matching rule wins.

    Numeric types take the declared precision, single characters are size 1,
    anything but binary takes the declared length. Declarations equal to the
    ORM defaults count as undeclared.
    """
    if type_code in NUMERIC_TYPES:
        if mapped_column.precision != DEFAULT_PRECISION:
            return mapped_column.precision
        return None
    value_type = mapped_column.value_type_name
    if value_type == "character":
        return 1
    if value_type != "binary" and mapped_column.length != DEFAULT_LENGTH:
        return mapped_column.length
    return None


def _lower(name: str | None) -> str | None:
    return None if name is None else name.lower()
