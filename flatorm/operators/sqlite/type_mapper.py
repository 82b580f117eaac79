"""SQLite type mapper implementation."""

from __future__ import annotations

from flatorm.core.type_mapper import TypeMapper
from flatorm.models.dialect import Dialect


class SQLiteTypeMapper(TypeMapper):
    """Type mapper for SQLite.

    SQLite has dynamic typing with only 5 storage classes
    (INTEGER, REAL, TEXT, BLOB, NULL); the shared scalar mapping uses
    the first three directly.

    ``AUTOINCREMENT`` is only allowed on an ``INTEGER PRIMARY KEY``
    column and prevents rowid reuse.
    """

    IDENTITY_TYPE = "INTEGER PRIMARY KEY AUTOINCREMENT"

    @property
    def dialect(self) -> Dialect:
        return Dialect.SQLITE

    def identity_type(self) -> str:
        return self.IDENTITY_TYPE
