"""MySQL connector implementation using SQLAlchemy.

This module provides connection management for MySQL and MariaDB
databases through the PyMySQL driver.
"""

from __future__ import annotations

from typing import Optional

from flatorm.exceptions import ConnectorError
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.connector import SQLConnector


class MySQLConnector(SQLConnector):
    """MySQL connector using SQLAlchemy.

    Configuration keys:
        - host: Database host (default: localhost)
        - port: Database port (default: 3306)
        - database: Database name (required)
        - user: Username (required)
        - password: Password (required)
        - connection_string: Full connection string (alternative to individual params)
        - echo: Enable SQL logging (default: FLATORM_ECHO_SQL)
    """

    @property
    def dialect(self) -> Dialect:
        return Dialect.MYSQL

    def _build_connection_string(self) -> str:
        """Build MySQL connection string from config.

        Raises:
            ConnectorError: If required config is missing
        """
        if "connection_string" in self.config:
            return self.config["connection_string"]

        for key in ("database", "user", "password"):
            if key not in self.config:
                raise ConnectorError(f"Missing required config key: {key}")

        host = self.config.get("host", "localhost")
        port = self.config.get("port", 3306)
        database = self.config["database"]
        user = self.config["user"]
        password = self.config["password"]

        return f"mysql+pymysql://{user}:{password}@{host}:{port}/{database}"

    def _parse_table_ref(self, ref: str) -> tuple[Optional[str], str]:
        """Parse "database.table" or "table" (connection's database)."""
        parts = ref.split(".")
        if len(parts) == 2:
            return parts[0], parts[1]
        elif len(parts) == 1:
            return None, parts[0]
        else:
            raise ConnectorError(f"Invalid table reference: {ref}")

    def _get_database_name(self) -> str:
        return "MySQL"
