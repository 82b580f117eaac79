"""Column annotation and scalar kinds for record fields.

Records are plain dataclasses. Every field declares its SQL column name
through :func:`column`, which stores the name in the dataclass field
metadata. There is no inference from the Python attribute name.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

# Key under which the column name is stored in dataclass field metadata
COLUMN_KEY = "db"


class ScalarKind(str, Enum):
    """Scalar categories a record field can be classified into.

    Only these three categories have a dedicated SQL type; everything
    else is stored as text.
    """

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OTHER = "other"

    @classmethod
    def of(cls, python_type: Any) -> ScalarKind:
        """Classify a Python type.

        ``bool`` counts as integer-like.

        Examples:
            >>> ScalarKind.of(int)
            <ScalarKind.INTEGER: 'integer'>
            >>> ScalarKind.of(bytes)
            <ScalarKind.OTHER: 'other'>
        """
        if not isinstance(python_type, type):
            return cls.OTHER
        if issubclass(python_type, int):
            return cls.INTEGER
        if issubclass(python_type, float):
            return cls.FLOAT
        if issubclass(python_type, str):
            return cls.STRING
        return cls.OTHER


def column(
    name: str,
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare the SQL column a dataclass field maps to.

    Args:
        name: Column identifier (lower-case by convention)
        default: Field default value
        default_factory: Field default factory

    Returns:
        A dataclasses.Field carrying the column name in its metadata

    Examples:
        >>> @dataclasses.dataclass
        ... class Book:
        ...     id: int = column("id", default=0)
        ...     author: str = column("author", default="")
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={COLUMN_KEY: name},
    )


def column_name(field: dataclasses.Field) -> str:
    """Get the declared column name of a dataclass field ("" if absent)."""
    return field.metadata.get(COLUMN_KEY, "") or ""
