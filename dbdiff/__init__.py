"""dbdiff: canonical relational schema models for schema comparison.

dbdiff turns the resolved metadata of an object-relational mapping (tables,
columns, keys and indices as the ORM understands them) into a dialect-neutral
relational model that can be compared against another schema, for instance one
introspected from a live database.

Key Features:
    - Dialect-aware identifier truncation and type mapping
    - Composite and implicit (primary-key targeted) foreign keys
    - Size/precision and nullability inference per column
    - YAML-described mapping documents as a metadata source

Example:
    >>> from dbdiff import CatalogSchema, MappingDocument, SchemaConverter
    >>> source = MappingDocument.from_yaml("mapping.yaml")
    >>> db = SchemaConverter(CatalogSchema(schema_name="public")).convert(source).unwrap()
"""

# --- Relational model ------------------------------------------------------
from .architecture import (
    CatalogSchema,
    Column,
    ColumnType,
    ForeignKey,
    RelationalDatabase,
    RelationalIndex,
    RelationalTable,
)

# --- Conversion ------------------------------------------------------------
from .mapping import (
    ConversionError,
    ConversionResult,
    DialectMappingInfo,
    DialectRegistry,
    MappingDocument,
    MetadataSource,
    NameTruncateInfo,
    SchemaConverter,
    TypeMapper,
)

# --- Enums -----------------------------------------------------------------
from .onto import ConversionErrorKind, SqlType

__all__ = [
    # Relational model
    "CatalogSchema",
    "Column",
    "ColumnType",
    "ForeignKey",
    "RelationalDatabase",
    "RelationalIndex",
    "RelationalTable",
    # Conversion
    "ConversionError",
    "ConversionResult",
    "DialectMappingInfo",
    "DialectRegistry",
    "MappingDocument",
    "MetadataSource",
    "NameTruncateInfo",
    "SchemaConverter",
    "TypeMapper",
    # Enums
    "ConversionErrorKind",
    "SqlType",
]
