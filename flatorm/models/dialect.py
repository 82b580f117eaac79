"""SQL dialect identifiers."""

from __future__ import annotations

from enum import Enum
from typing import Union

from flatorm.exceptions import UnsupportedDialectError


class Dialect(str, Enum):
    """SQL backends flatorm generates statements for.

    Each dialect has its own placeholder syntax, identity column clause
    and CREATE TABLE shape.
    """

    SQLITE = "sqlite"
    POSTGRES = "postgres"
    MYSQL = "mysql"

    @classmethod
    def parse(cls, value: Union[Dialect, str]) -> Dialect:
        """Resolve a dialect or a driver/dialect name to a Dialect.

        Accepts the canonical names as well as the driver names
        SQLAlchemy and DBAPI modules report (``sqlite3``, ``postgresql``,
        ``psycopg2``, ``mariadb``, ...).

        Args:
            value: Dialect member or name

        Returns:
            Matching Dialect

        Raises:
            UnsupportedDialectError: If the name is not recognized

        Examples:
            >>> Dialect.parse("postgresql")
            <Dialect.POSTGRES: 'postgres'>
            >>> Dialect.parse("sqlite3")
            <Dialect.SQLITE: 'sqlite'>
        """
        if isinstance(value, Dialect):
            return value

        normalized = str(value).lower().strip()
        if normalized in DIALECT_ALIASES:
            return DIALECT_ALIASES[normalized]

        raise UnsupportedDialectError(str(value), available=[d.value for d in cls])


# Alternative names -> Dialect
DIALECT_ALIASES: dict[str, Dialect] = {
    "sqlite": Dialect.SQLITE,
    "sqlite3": Dialect.SQLITE,
    "pysqlite": Dialect.SQLITE,
    "postgres": Dialect.POSTGRES,
    "postgresql": Dialect.POSTGRES,
    "psycopg2": Dialect.POSTGRES,
    "psycopg": Dialect.POSTGRES,
    "pg8000": Dialect.POSTGRES,
    "mysql": Dialect.MYSQL,
    "mariadb": Dialect.MYSQL,
    "pymysql": Dialect.MYSQL,
}
