"""Dialect profiles: identifier limits and type mapper per database vendor.

Profiles are matched by prefix against the runtime type name of the resolved
dialect (``PostgreSQL82Dialect`` matches the ``PostgreSQL`` profile). The first
matching profile wins; when none matches, the generic profile applies: names
are not truncated and type codes pass through.

Supporting a new database means adding one ``DialectMappingInfo`` to the
registry handed to the converter; the converter itself does not change.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import ConfigDict, Field

from dbdiff.architecture.base import FrozenModel
from dbdiff.mapping.truncate import NameTruncateInfo
from dbdiff.mapping.types import (
    MySqlTypeMapper,
    NoopTypeMapper,
    OracleTypeMapper,
    PostgreSqlTypeMapper,
    TypeMapper,
)

logger = logging.getLogger(__name__)


class DialectMappingInfo(FrozenModel):
    """Dialect profile matched by ``short_name`` prefix."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    short_name: str = Field(
        ..., description="Prefix of the dialect type name this profile applies to."
    )
    truncate_info: NameTruncateInfo = Field(default_factory=NameTruncateInfo)
    type_mapper: TypeMapper = Field(default_factory=NoopTypeMapper)

    def matches(self, dialect_type_name: str) -> bool:
        return dialect_type_name.startswith(self.short_name)


GENERIC_MAPPING_INFO = DialectMappingInfo(
    short_name="",
    truncate_info=NameTruncateInfo.no_truncate(),
    type_mapper=NoopTypeMapper(),
)


class DialectRegistry:
    """Ordered, immutable list of dialect profiles."""

    def __init__(
        self,
        mappings: Iterable[DialectMappingInfo] = (),
        default: DialectMappingInfo = GENERIC_MAPPING_INFO,
    ):
        self._mappings: tuple[DialectMappingInfo, ...] = tuple(mappings)
        self._default = default

    @property
    def mappings(self) -> tuple[DialectMappingInfo, ...]:
        return self._mappings

    @property
    def default(self) -> DialectMappingInfo:
        return self._default

    def with_mapping(self, info: DialectMappingInfo) -> DialectRegistry:
        """Return a new registry with ``info`` appended after the existing profiles."""
        return DialectRegistry([*self._mappings, info], default=self._default)

    def resolve(self, dialect_type_name: str) -> DialectMappingInfo:
        """Return the first profile whose short name prefixes ``dialect_type_name``."""
        for info in self._mappings:
            if info.matches(dialect_type_name):
                logger.debug(
                    f"Using '{info.short_name}' profile for dialect '{dialect_type_name}'"
                )
                return info
        logger.debug(f"No profile for dialect '{dialect_type_name}', using generic")
        return self._default


DEFAULT_REGISTRY = DialectRegistry(
    [
        DialectMappingInfo(
            short_name="PostgreSQL",
            truncate_info=NameTruncateInfo(
                max_table_name_length=63, max_column_name_length=63
            ),
            type_mapper=PostgreSqlTypeMapper(),
        ),
        DialectMappingInfo(
            short_name="MySQL",
            truncate_info=NameTruncateInfo(
                max_table_name_length=64, max_column_name_length=64
            ),
            type_mapper=MySqlTypeMapper(),
        ),
        DialectMappingInfo(
            short_name="Oracle",
            truncate_info=NameTruncateInfo(
                max_table_name_length=30, max_column_name_length=30
            ),
            type_mapper=OracleTypeMapper(),
        ),
    ]
)
