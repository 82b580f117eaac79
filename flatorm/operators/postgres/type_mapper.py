"""PostgreSQL type mapper implementation."""

from __future__ import annotations

from flatorm.core.type_mapper import TypeMapper
from flatorm.models.dialect import Dialect


class PostgresTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL.

    ``SERIAL`` creates an implicit ``<table>_id_seq`` sequence; the
    PostgreSQL generator keeps an explicit sequence of the same name in
    sync with it.
    """

    IDENTITY_TYPE = "SERIAL PRIMARY KEY"

    @property
    def dialect(self) -> Dialect:
        return Dialect.POSTGRES

    def identity_type(self) -> str:
        return self.IDENTITY_TYPE
