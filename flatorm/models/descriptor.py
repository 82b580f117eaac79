"""Intermediate representation of a record.

Descriptors are produced by the introspector and consumed by the SQL
generators. They are dialect-agnostic except for the resolved SQL types.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field as PydanticField

IDENTITY_COLUMN = "id"


class ColumnDescriptor(BaseModel):
    """One record field as seen by the SQL generators.

    Examples:
        >>> ColumnDescriptor(name="author", sql_type="TEXT", literal_value="A")
    """

    name: str = PydanticField(
        ...,
        min_length=1,
        description="Declared column identifier",
    )

    sql_type: str = PydanticField(
        "",
        description="Resolved SQL column type, empty unless type resolution was requested",
    )

    literal_value: str = PydanticField(
        "",
        description="Field value rendered as text; empty means absent for filters",
    )

    is_null: bool = PydanticField(
        False,
        description="Field value was None; inserted as NULL",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def is_identity(self) -> bool:
        """Whether this is the ``id`` column."""
        return self.name == IDENTITY_COLUMN

    @property
    def is_present(self) -> bool:
        """Whether the value takes part in filters and SET clauses."""
        return self.literal_value != ""

    @property
    def bind_value(self) -> Optional[str]:
        """Value bound for this column in an INSERT."""
        return None if self.is_null else self.literal_value

    def as_tuple(self) -> tuple[str, str, str]:
        """Return ``(name, sql_type, literal_value)``."""
        return (self.name, self.sql_type, self.literal_value)


class TableDescriptor(BaseModel):
    """A record's table name and its ordered columns."""

    table_name: str = PydanticField(
        ...,
        min_length=1,
        description="Table name derived from the record type name",
    )

    columns: tuple[ColumnDescriptor, ...] = PydanticField(
        default_factory=tuple,
        description="Columns in field declaration order",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def column_names(self) -> list[str]:
        """Column names in declaration order."""
        return [c.name for c in self.columns]

    @property
    def identity(self) -> Optional[ColumnDescriptor]:
        """The ``id`` column, if the record has one."""
        for col in self.columns:
            if col.is_identity:
                return col
        return None

    def data_columns(self) -> list[ColumnDescriptor]:
        """Columns other than ``id``."""
        return [c for c in self.columns if not c.is_identity]

    def filter_columns(self) -> list[ColumnDescriptor]:
        """Columns that become equality conditions in a WHERE clause.

        A column takes part when its value is non-empty. The ``id`` column
        is additionally skipped when its value is ``"0"``.
        """
        return [
            c
            for c in self.columns
            if not (c.is_identity and c.literal_value == "0") and c.is_present
        ]
