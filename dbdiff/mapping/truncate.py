"""Identifier truncation to a dialect's maximum name length.

Names are case-folded to lowercase (unquoted SQL identifiers are case-insensitive
and the supported dialects render them in lowercase) and then cut to the first
``max_length`` characters. The cut is a plain prefix: two distinct long names
sharing a prefix collapse to the same identifier.
"""

from __future__ import annotations

from pydantic import Field, PositiveInt

from dbdiff.architecture.base import FrozenModel


def truncate_name(name: str, max_length: int | None) -> str:
    """Lowercase ``name`` and cut it to ``max_length`` characters.

    Args:
        name: Identifier as declared in the mapping
        max_length: Maximum identifier length; None disables truncation

    Returns:
        str: The identifier as it would appear in the database
    """
    folded = name.lower()
    if max_length is None or len(folded) <= max_length:
        return folded
    return folded[:max_length]


class NameTruncateInfo(FrozenModel):
    """Maximum identifier lengths for table and column names.

    A limit of None means names pass through (lowercased) regardless of length.
    """

    max_table_name_length: PositiveInt | None = Field(
        default=None, description="Maximum table name length."
    )
    max_column_name_length: PositiveInt | None = Field(
        default=None, description="Maximum column name length."
    )

    @classmethod
    def no_truncate(cls) -> NameTruncateInfo:
        return cls()

    def truncate_table_name(self, name: str) -> str:
        return truncate_name(name, self.max_table_name_length)

    def truncate_column_name(self, name: str) -> str:
        return truncate_name(name, self.max_column_name_length)
