"""Conversion of ORM mapping metadata into the canonical relational model.

Key Components:
    - SchemaConverter: Orchestrates the table-by-table conversion
    - MetadataSource / MappingDocument: Input side of the conversion
    - DialectRegistry: Dialect profiles (identifier limits, type mapper)
    - DialectResolver: Dialect identifier to dialect instance
    - NameTruncateInfo: Identifier truncation
    - TypeMapper: Vendor type code to canonical type code

Example:
    >>> from dbdiff.mapping import MappingDocument, SchemaConverter
    >>> db = SchemaConverter().convert(MappingDocument.from_yaml("mapping.yaml")).unwrap()
"""

from .converter import (
    ConversionError,
    ConversionFailure,
    ConversionResult,
    SchemaConverter,
    infer_column_size,
)
from .dialect import (
    DEFAULT_DIALECTS,
    Dialect,
    DialectResolutionError,
    DialectResolver,
)
from .onto import (
    MappedColumn,
    MappedConstraint,
    MappedForeignKey,
    MappedTable,
    MappingDocument,
    MetadataSource,
)
from .registry import (
    DEFAULT_REGISTRY,
    GENERIC_MAPPING_INFO,
    DialectMappingInfo,
    DialectRegistry,
)
from .truncate import NameTruncateInfo, truncate_name
from .types import (
    MySqlTypeMapper,
    NoopTypeMapper,
    OracleTypeMapper,
    PostgreSqlTypeMapper,
    TypeMapper,
)

__all__ = [
    "ConversionError",
    "ConversionFailure",
    "ConversionResult",
    "DEFAULT_DIALECTS",
    "DEFAULT_REGISTRY",
    "Dialect",
    "DialectMappingInfo",
    "DialectRegistry",
    "DialectResolutionError",
    "DialectResolver",
    "GENERIC_MAPPING_INFO",
    "MappedColumn",
    "MappedConstraint",
    "MappedForeignKey",
    "MappedTable",
    "MappingDocument",
    "MetadataSource",
    "MySqlTypeMapper",
    "NameTruncateInfo",
    "NoopTypeMapper",
    "OracleTypeMapper",
    "PostgreSqlTypeMapper",
    "SchemaConverter",
    "TypeMapper",
    "infer_column_size",
    "truncate_name",
]
