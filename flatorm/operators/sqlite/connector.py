"""SQLite connector implementation using SQLAlchemy.

This module provides connection management for SQLite databases.
"""

from __future__ import annotations

from typing import Optional

from flatorm.exceptions import ConnectorError
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.connector import SQLConnector


class SQLiteConnector(SQLConnector):
    """SQLite connector using SQLAlchemy.

    Configuration keys:
        - database: Database file path (required, or ":memory:" for in-memory)
        - connection_string: Full connection string (alternative)
        - echo: Enable SQL logging (default: FLATORM_ECHO_SQL)

    Note that every statement borrows a pooled connection, so an
    in-memory database is only shared between statements when
    SQLAlchemy keeps a single connection for it (its default for
    ":memory:").

    Examples:
        >>> with SQLiteConnector({"database": "/path/to/books.db"}) as conn:
        ...     create_table(conn, Book())
    """

    @property
    def dialect(self) -> Dialect:
        return Dialect.SQLITE

    def _build_connection_string(self) -> str:
        """Build SQLite connection string from config.

        Raises:
            ConnectorError: If required config is missing
        """
        if "connection_string" in self.config:
            return self.config["connection_string"]

        if "database" not in self.config:
            raise ConnectorError("Missing required config key: database")

        return f"sqlite:///{self.config['database']}"

    def _parse_table_ref(self, ref: str) -> tuple[Optional[str], str]:
        """SQLite has no schemas: the reference is the table name."""
        return None, ref

    def _get_database_name(self) -> str:
        return "SQLite"
