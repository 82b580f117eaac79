"""PostgreSQL connector implementation using SQLAlchemy.

This module provides connection management for PostgreSQL databases.
"""

from __future__ import annotations

from typing import Optional

from flatorm.exceptions import ConnectorError
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.connector import SQLConnector


class PostgresConnector(SQLConnector):
    """PostgreSQL connector using SQLAlchemy.

    Configuration keys:
        - host: Database host (default: localhost)
        - port: Database port (default: 5432)
        - database: Database name (required)
        - user: Username (required)
        - password: Password (required)
        - schema: Default schema (default: public)
        - connection_string: Full connection string (alternative to individual params)
        - echo: Enable SQL logging (default: FLATORM_ECHO_SQL)

    Examples:
        >>> config = {
        ...     "database": "library",
        ...     "user": "postgres",
        ...     "password": "secret",
        ... }
        >>> with PostgresConnector(config) as conn:
        ...     books = find_many(conn, Book(genre="Programming"))
    """

    @property
    def dialect(self) -> Dialect:
        return Dialect.POSTGRES

    def _build_connection_string(self) -> str:
        """Build PostgreSQL connection string from config.

        Raises:
            ConnectorError: If required config is missing
        """
        if "connection_string" in self.config:
            return self.config["connection_string"]

        for key in ("database", "user", "password"):
            if key not in self.config:
                raise ConnectorError(f"Missing required config key: {key}")

        host = self.config.get("host", "localhost")
        port = self.config.get("port", 5432)
        database = self.config["database"]
        user = self.config["user"]
        password = self.config["password"]

        return f"postgresql://{user}:{password}@{host}:{port}/{database}"

    def _parse_table_ref(self, ref: str) -> tuple[Optional[str], str]:
        """Parse "schema.table" or "table" (default schema from config).

        Raises:
            ConnectorError: If reference format is invalid
        """
        parts = ref.split(".")
        if len(parts) == 2:
            return parts[0], parts[1]
        elif len(parts) == 1:
            return self.config.get("schema", "public"), parts[0]
        else:
            raise ConnectorError(f"Invalid table reference: {ref}")

    def _get_database_name(self) -> str:
        return "PostgreSQL"
