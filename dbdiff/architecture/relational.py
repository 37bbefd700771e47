"""Canonical, dialect-neutral relational schema model.

This module defines the output of a schema conversion: a ``RelationalDatabase``
made of ``RelationalTable`` objects with their columns, foreign keys and indices.
Every entity is frozen once built; a fresh conversion produces a fresh graph.

Key Components:
    - CatalogSchema: Catalog and schema name pair attached to table-scoped entities
    - ColumnType: Canonical type code plus native vendor type string
    - Column: A table column with ordinal, size and nullability
    - ForeignKey: One column position of a (possibly composite) foreign key
    - RelationalIndex: Named or anonymous index over an ordered list of columns
    - RelationalTable: Columns, primary key, foreign keys and indices of one table
    - RelationalDatabase: Ordered sequence of tables

Example:
    >>> cs = CatalogSchema(schema_name="public")
    >>> col = Column(
    ...     catalog_schema=cs,
    ...     table_name="orders",
    ...     name="id",
    ...     ordinal=1,
    ...     column_type=ColumnType(code=4, type_name="int4"),
    ...     nullable=False,
    ... )
    >>> RelationalTable(catalog_schema=cs, name="orders", columns=[col], pk_columns=["id"])
"""

from __future__ import annotations

from pydantic import Field, model_validator

from dbdiff.architecture.base import FrozenModel


class CatalogSchema(FrozenModel):
    """Catalog/schema pair; either part may be absent."""

    catalog: str | None = Field(default=None, description="Catalog name.")
    schema_name: str | None = Field(default=None, description="Schema name.")

    @classmethod
    def default(cls) -> CatalogSchema:
        return cls()


class ColumnType(FrozenModel):
    """Column type as a canonical numeric code and the vendor's type string."""

    code: int = Field(..., description="Canonical type code (see SqlType).")
    type_name: str = Field(..., description="Native vendor type, e.g. 'varchar(20)'.")


class Column(FrozenModel):
    """A column of a relational table.

    The owning table is referenced by name only.
    """

    catalog_schema: CatalogSchema = Field(default_factory=CatalogSchema)
    table_name: str = Field(..., description="Name of the owning table.")
    name: str
    ordinal: int = Field(..., ge=1, description="1-based position within the table.")
    column_type: ColumnType
    column_size: int | None = Field(
        default=None, description="Size or precision, absent when not inferable."
    )
    nullable: bool = True
    default_value: str | None = Field(
        default=None, description="Default value expression, copied verbatim."
    )

    @property
    def type_code(self) -> int:
        return self.column_type.code


class ForeignKey(FrozenModel):
    """Single column position of a foreign key constraint.

    Composite foreign keys are represented by one record per column, told apart
    by ``key_seq``. Records compare and hash by value.
    """

    fk_catalog_schema: CatalogSchema = Field(default_factory=CatalogSchema)
    fk_table: str
    fk_column: str
    pk_catalog_schema: CatalogSchema = Field(default_factory=CatalogSchema)
    pk_table: str
    pk_column: str
    name: str | None = None
    key_seq: str = Field(..., description="1-based position within the key, as text.")


class RelationalIndex(FrozenModel):
    """Index over an ordered list of columns; ``name`` is None for anonymous indices."""

    catalog_schema: CatalogSchema = Field(default_factory=CatalogSchema)
    name: str | None = None
    columns: list[Column] = Field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]


class RelationalTable(FrozenModel):
    """A relational table with its columns, keys and indices."""

    catalog_schema: CatalogSchema = Field(default_factory=CatalogSchema)
    name: str
    columns: list[Column] = Field(default_factory=list)
    pk_columns: list[str] = Field(
        default_factory=list, description="Ordered primary key column names."
    )
    foreign_keys: frozenset[ForeignKey] = Field(default_factory=frozenset)
    indices: list[RelationalIndex] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_columns(self) -> RelationalTable:
        ordinals = [c.ordinal for c in self.columns]
        if ordinals != list(range(1, len(self.columns) + 1)):
            raise ValueError(
                f"Column ordinals of table '{self.name}' must be 1..N, got {ordinals}"
            )
        names = {c.name for c in self.columns}
        missing = [pk for pk in self.pk_columns if pk not in names]
        if missing:
            raise ValueError(
                f"Primary key columns {missing} are not columns of table '{self.name}'"
            )
        return self

    def column(self, name: str) -> Column | None:
        for c in self.columns:
            if c.name == name:
                return c
        return None

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]


class RelationalDatabase(FrozenModel):
    """Ordered sequence of tables produced by one conversion."""

    tables: list[RelationalTable] = Field(default_factory=list)

    def table(self, name: str) -> RelationalTable | None:
        for t in self.tables:
            if t.name == name:
                return t
        return None

    @property
    def table_names(self) -> list[str]:
        return [t.name for t in self.tables]
