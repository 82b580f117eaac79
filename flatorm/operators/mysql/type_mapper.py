"""MySQL type mapper implementation."""

from __future__ import annotations

from flatorm.core.type_mapper import TypeMapper
from flatorm.models.dialect import Dialect


class MySQLTypeMapper(TypeMapper):
    """Type mapper for MySQL / MariaDB."""

    IDENTITY_TYPE = "INT AUTO_INCREMENT PRIMARY KEY"

    @property
    def dialect(self) -> Dialect:
        return Dialect.MYSQL

    def identity_type(self) -> str:
        return self.IDENTITY_TYPE
