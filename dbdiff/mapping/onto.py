"""ORM metadata source: the input side of a schema conversion.

The converter reads tables, columns and constraints through the ``MetadataSource``
interface, so it never depends on a particular ORM framework. Any adapter over an
ORM's resolved mapping model implements ``MetadataSource`` and hands out the record
types defined here. ``MappingDocument`` is the adapter over a plain YAML/dict
description of such a model.

Key Components:
    - MappedColumn: Column as declared by the ORM mapping
    - MappedConstraint: Index, unique key or primary key over named columns
    - MappedForeignKey: Foreign key constraint, possibly composite
    - MappedTable: Table with its columns and constraints
    - MetadataSource: Abstract read-only metadata capability
    - MappingDocument: Metadata source loaded from YAML or a dict

Example:
    >>> doc = MappingDocument.from_yaml("mapping.yaml")
    >>> [t.name for t in doc.tables()]
"""

from __future__ import annotations

import abc
from typing import Sequence

from pydantic import Field, model_validator

from dbdiff.architecture.base import ConfigBaseModel
from dbdiff.mapping.dialect import DEFAULT_DIALECTS, Dialect

# values an ORM reports when no length/precision was declared
DEFAULT_LENGTH = 255
DEFAULT_PRECISION = 19


class MappedColumn(ConfigBaseModel):
    """Column as declared by the ORM mapping."""

    name: str
    sql_type_code: int = Field(..., description="Raw vendor type code.")
    sql_type: str = Field(
        ..., description="Native SQL type rendered by the dialect, e.g. 'varchar(20)'."
    )
    value_type: str | None = Field(
        default=None,
        description="ORM value type name (e.g. 'character', 'binary'); defaults to sql_type.",
    )
    nullable: bool = True
    unique: bool = Field(
        default=False, description="Column carries a single-column unique constraint."
    )
    precision: int = DEFAULT_PRECISION
    length: int = DEFAULT_LENGTH
    default_value: str | None = None

    @property
    def value_type_name(self) -> str:
        return self.value_type if self.value_type is not None else self.sql_type


class MappedConstraint(ConfigBaseModel):
    """Index, unique key or primary key over columns of the owning table."""

    name: str | None = None
    columns: list[str] = Field(..., min_length=1)


class MappedForeignKey(ConfigBaseModel):
    """Foreign key from the owning table to ``referenced_table``.

    When ``referenced_columns`` is empty, the key references the primary key
    of the referenced table, position by position.
    """

    name: str | None = None
    columns: list[str] = Field(..., min_length=1)
    referenced_table: str
    referenced_columns: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_arity(self) -> MappedForeignKey:
        if self.referenced_columns and len(self.referenced_columns) != len(
            self.columns
        ):
            raise ValueError(
                f"Foreign key '{self.name}' has {len(self.columns)} columns but "
                f"{len(self.referenced_columns)} referenced columns"
            )
        return self


class MappedTable(ConfigBaseModel):
    """Table as declared by the ORM mapping."""

    name: str
    columns: list[MappedColumn] = Field(default_factory=list)
    primary_key: MappedConstraint | None = None
    foreign_keys: list[MappedForeignKey] = Field(default_factory=list)
    indices: list[MappedConstraint] = Field(default_factory=list)
    unique_keys: list[MappedConstraint] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_column_references(self) -> MappedTable:
        declared = {c.name for c in self.columns}
        constraints: list[tuple[str, list[str]]] = [
            (f"index '{i.name}'", i.columns) for i in self.indices
        ]
        constraints += [(f"unique key '{u.name}'", u.columns) for u in self.unique_keys]
        constraints += [(f"foreign key '{fk.name}'", fk.columns) for fk in self.foreign_keys]
        if self.primary_key is not None:
            constraints.append(("primary key", self.primary_key.columns))
        for label, columns in constraints:
            unknown = [c for c in columns if c not in declared]
            if unknown:
                raise ValueError(
                    f"{label} of table '{self.name}' references unknown columns {unknown}"
                )
        return self

    @property
    def primary_key_columns(self) -> list[str]:
        return [] if self.primary_key is None else list(self.primary_key.columns)

    def is_primary_key_column(self, column: MappedColumn) -> bool:
        return column.name in self.primary_key_columns


class MetadataSource(abc.ABC):
    """Read-only view over a resolved ORM mapping model."""

    @property
    @abc.abstractmethod
    def dialect_name(self) -> str | None:
        """Dialect identifier configured for the mapping, None when unset."""

    @abc.abstractmethod
    def tables(self) -> Sequence[MappedTable]:
        """Mapped tables in declaration order; may be iterated repeatedly."""

    def table(self, name: str) -> MappedTable | None:
        for t in self.tables():
            if t.name == name:
                return t
        return None

    def resolve_dialect(self, name: str) -> Dialect:
        """Instantiate the dialect named ``name``.

        Raises:
            DialectResolutionError: If the dialect cannot be resolved
        """
        return DEFAULT_DIALECTS.resolve(name)


class MappingDocument(ConfigBaseModel, MetadataSource):
    """Metadata source described as a YAML document or a dict."""

    dialect: str | None = Field(
        default=None,
        description="Dialect identifier, e.g. 'org.hibernate.dialect.PostgreSQL82Dialect'.",
    )
    mapped_tables: list[MappedTable] = Field(
        default_factory=list, alias="tables", description="Mapped tables in order."
    )

    @model_validator(mode="after")
    def _check_unique_tables(self) -> MappingDocument:
        seen: set[str] = set()
        for t in self.mapped_tables:
            if t.name in seen:
                raise ValueError(f"Table '{t.name}' is declared more than once")
            seen.add(t.name)
        return self

    @property
    def dialect_name(self) -> str | None:
        return self.dialect

    def tables(self) -> Sequence[MappedTable]:
        return self.mapped_tables
