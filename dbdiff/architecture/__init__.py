"""Canonical relational schema model.

Key Components:
    - ConfigBaseModel: pydantic base with YAML support
    - RelationalDatabase, RelationalTable, Column, ForeignKey, RelationalIndex
"""

from .base import ConfigBaseModel, FrozenModel
from .relational import (
    CatalogSchema,
    Column,
    ColumnType,
    ForeignKey,
    RelationalDatabase,
    RelationalIndex,
    RelationalTable,
)

__all__ = [
    "CatalogSchema",
    "Column",
    "ColumnType",
    "ConfigBaseModel",
    "ForeignKey",
    "FrozenModel",
    "RelationalDatabase",
    "RelationalIndex",
    "RelationalTable",
]
