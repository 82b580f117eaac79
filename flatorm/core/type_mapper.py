"""Base TypeMapper abstract class.

This module defines the TypeMapper interface for converting record field
types into SQL column types for one dialect.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from flatorm.models.descriptor import IDENTITY_COLUMN
from flatorm.models.dialect import Dialect
from flatorm.models.field import ScalarKind


class TypeMapper(ABC):
    """Base class for mapping record field types to SQL column types.

    The scalar mapping is shared by every dialect: integer-like fields
    become ``INTEGER``, floating-point fields ``REAL`` and text fields
    ``TEXT``. Anything else is stored as ``TEXT``. Dialects differ in the
    clause used for the ``id`` column.

    The mapping tables are class constants and are never mutated.

    Examples:
        >>> mapper = SQLiteTypeMapper()
        >>> mapper.to_target(ScalarKind.FLOAT)
        'REAL'
        >>> mapper.column_type("id", int)
        'INTEGER PRIMARY KEY AUTOINCREMENT'
    """

    KIND_TO_TARGET: dict[ScalarKind, str] = {
        ScalarKind.INTEGER: "INTEGER",
        ScalarKind.FLOAT: "REAL",
        ScalarKind.STRING: "TEXT",
    }

    DEFAULT_TYPE = "TEXT"

    @property
    @abstractmethod
    def dialect(self) -> Dialect:
        """Dialect this mapper produces types for."""

    @abstractmethod
    def identity_type(self) -> str:
        """Get the auto-increment primary key clause for the ``id`` column.

        Examples:
            SQLite:     "INTEGER PRIMARY KEY AUTOINCREMENT"
            PostgreSQL: "SERIAL PRIMARY KEY"
            MySQL:      "INT AUTO_INCREMENT PRIMARY KEY"
        """

    def to_target(self, kind: ScalarKind, target_hint: Optional[str] = None) -> str:
        """Convert a scalar kind to a SQL column type.

        Args:
            kind: Scalar kind of the field
            target_hint: Explicit SQL type; used as-is when given

        Returns:
            SQL type string
        """
        if target_hint:
            return target_hint

        return self.KIND_TO_TARGET.get(kind, self.DEFAULT_TYPE)

    def column_type(self, column_name: str, python_type: Any) -> str:
        """Get the DDL type for a record field.

        The ``id`` column always gets the identity clause, whatever its
        Python type.

        Args:
            column_name: Declared column name
            python_type: Field annotation or runtime value type

        Returns:
            SQL type string for CREATE TABLE
        """
        if column_name == IDENTITY_COLUMN:
            return self.identity_type()

        return self.to_target(ScalarKind.of(python_type))
