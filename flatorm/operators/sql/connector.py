"""SQL-based connector base class using SQLAlchemy.

This module provides a base class for SQL database connectors
that use SQLAlchemy for connection management.
"""

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from typing import Any, Optional, Union

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine

from flatorm.core.config import config as default_config
from flatorm.core.connector import Connector
from flatorm.core.registry import get_operator_class
from flatorm.exceptions import ConfigurationError, ConnectionError, ConnectorError
from flatorm.models.statement import Statement

logger = logging.getLogger(__name__)

# Generated placeholders: "?" or "$<n>"
_PLACEHOLDER_RE = re.compile(r"\?|\$(\d+)(?![\w$])")


def adapt_placeholders(
    sql: str, args: tuple[Any, ...], paramstyle: str
) -> tuple[str, Union[tuple[Any, ...], dict[str, Any]]]:
    """Rewrite generated placeholders into a DBAPI driver's paramstyle.

    Generated SQL uses ``?`` (SQLite, MySQL) or ``$n`` (PostgreSQL), the
    forms the database itself documents. Python drivers each accept one
    PEP 249 paramstyle, so the statement is rewritten before it is sent.

    Args:
        sql: Generated SQL text
        args: Positional arguments in placeholder order
        paramstyle: Driver paramstyle (qmark, numeric, numeric_dollar,
            named, format, pyformat)

    Returns:
        Tuple of (sql, parameters) ready for ``exec_driver_sql``

    Raises:
        ConnectorError: If the paramstyle is unknown

    Examples:
        >>> adapt_placeholders("a = $1 AND b = $2", ("x", "y"), "pyformat")
        ('a = %s AND b = %s', ('x', 'y'))
        >>> adapt_placeholders("a = ? AND b = ?", ("x", "y"), "numeric_dollar")
        ('a = $1 AND b = $2', ('x', 'y'))
    """
    counter = 0

    def _index(match: re.Match) -> int:
        nonlocal counter
        counter += 1
        return int(match.group(1)) if match.group(1) else counter

    if paramstyle == "qmark":
        return _PLACEHOLDER_RE.sub("?", sql), args

    if paramstyle == "numeric":
        return _PLACEHOLDER_RE.sub(lambda m: f":{_index(m)}", sql), args

    if paramstyle == "numeric_dollar":
        return _PLACEHOLDER_RE.sub(lambda m: f"${_index(m)}", sql), args

    if paramstyle == "named":
        adapted = _PLACEHOLDER_RE.sub(lambda m: f":p{_index(m)}", sql)
        return adapted, {f"p{i}": value for i, value in enumerate(args, start=1)}

    if paramstyle in ("format", "pyformat"):
        # Literal percent signs must be doubled once parameters are bound
        escaped = sql.replace("%", "%%")
        return _PLACEHOLDER_RE.sub("%s", escaped), args

    raise ConnectorError(f"Unsupported DBAPI paramstyle: {paramstyle}")


class SQLConnector(Connector):
    """Base class for SQL database connectors using SQLAlchemy.

    Provides common functionality for SQL databases including:
    - SQLAlchemy engine management
    - Connection lifecycle (connect, disconnect, test)
    - Execution of generated statements with positional arguments
    - Table existence checking

    Subclasses must implement:
    - dialect: The flatorm Dialect to generate SQL for
    - _build_connection_string(): Database-specific connection string
    - _parse_table_ref(): Database-specific table reference parsing
    - _get_database_name(): Return database name for error messages

    Examples:
        Subclass implementation:
        >>> class MyDBConnector(SQLConnector):
        ...     @property
        ...     def dialect(self) -> Dialect:
        ...         return Dialect.SQLITE
        ...
        ...     def _build_connection_string(self) -> str:
        ...         return f"sqlite:///{self.config['database']}"
        ...
        ...     def _parse_table_ref(self, ref: str) -> tuple[Optional[str], str]:
        ...         return None, ref
        ...
        ...     def _get_database_name(self) -> str:
        ...         return "MyDB"
    """

    def __init__(self, config: dict[str, Any]):
        """Initialize SQL connector.

        Args:
            config: Connection configuration dictionary
        """
        super().__init__(config)
        self.engine: Optional[Engine] = None

    @abstractmethod
    def _build_connection_string(self) -> str:
        """Build database-specific connection string from config.

        Returns:
            SQLAlchemy connection string (e.g., "postgresql://...", "sqlite:///...")

        Raises:
            ConnectorError: If required config is missing or invalid
        """
        pass

    @abstractmethod
    def _parse_table_ref(self, ref: str) -> tuple[Optional[str], str]:
        """Parse table reference into schema and table name.

        Args:
            ref: Table reference string (e.g., "public.books", "books")

        Returns:
            Tuple of (schema_name, table_name).
            schema_name may be None for databases without schema support.
        """
        pass

    @abstractmethod
    def _get_database_name(self) -> str:
        """Get database name for error messages (e.g., "PostgreSQL")."""
        pass

    def connect(self) -> None:
        """Establish connection to the SQL database.

        Creates a SQLAlchemy engine with the connection string from
        _build_connection_string() and tests the connection.

        Raises:
            ConnectionError: If connection fails
        """
        try:
            connection_string = self._build_connection_string()
            self.engine = create_engine(
                connection_string,
                pool_pre_ping=True,  # Verify connections before using
                echo=self.config.get("echo", default_config.echo_sql),
            )
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            self.connection = self.engine
            logger.info("Connected to %s", self._get_database_name())
        except ConnectorError:
            raise
        except Exception as e:
            db_name = self._get_database_name()
            raise ConnectionError(f"Failed to connect to {db_name}: {e}") from e

    def disconnect(self) -> None:
        """Close connection to the SQL database.

        Disposes the SQLAlchemy engine and clears connection references.
        Safe to call even if already disconnected.
        """
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.connection = None

    def test_connection(self) -> bool:
        """Test connectivity to the SQL database.

        Returns:
            True if connection is successful, False otherwise
        """
        try:
            if not self.is_connected:
                self.connect()
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Connection test failed: %s", e)
            return False

    def execute(self, statement: Statement) -> int:
        """Execute a DDL/DML statement and commit.

        Empty statements are skipped.

        Args:
            statement: Generated statement

        Returns:
            Number of affected rows (0 for skipped statements)

        Raises:
            ConnectorError: If not connected or execution fails
        """
        if statement.is_empty:
            logger.warning("Skipping empty statement")
            return 0

        self._ensure_connected()
        sql, params = self._prepare(statement)
        try:
            with self.engine.connect() as conn:
                result = conn.exec_driver_sql(sql, params)
                rowcount = result.rowcount
                conn.commit()
            return rowcount
        except Exception as e:
            raise ConnectorError(f"Failed to execute statement: {e}") from e

    def query(self, statement: Statement) -> list[dict[str, Any]]:
        """Execute a SELECT statement and return rows as dictionaries.

        Args:
            statement: Generated statement

        Returns:
            List of records as dictionaries (column_name -> value)

        Raises:
            ConnectorError: If not connected or execution fails
        """
        if statement.is_empty:
            logger.warning("Skipping empty query")
            return []

        self._ensure_connected()
        sql, params = self._prepare(statement)
        try:
            with self.engine.connect() as conn:
                result = conn.exec_driver_sql(sql, params)
                return [dict(row) for row in result.mappings()]
        except Exception as e:
            raise ConnectorError(f"Failed to execute query: {e}") from e

    def table_exists(self, ref: str) -> bool:
        """Check if a table exists in the database.

        Args:
            ref: Table reference

        Returns:
            True if table exists, False otherwise
        """
        if not self.is_connected:
            return False

        schema_name, table_name = self._parse_table_ref(ref)
        return inspect(self.engine).has_table(table_name, schema=schema_name)

    def _ensure_connected(self) -> None:
        if not self.is_connected:
            raise ConnectorError("Not connected to database")

    def _prepare(
        self, statement: Statement
    ) -> tuple[str, Optional[Union[tuple[Any, ...], dict[str, Any]]]]:
        """Adapt a statement to the driver; statements without args are sent verbatim."""
        if not statement.args:
            return statement.sql, None
        return adapt_placeholders(statement.sql, statement.args, self.engine.dialect.paramstyle)


def create_connector(config: dict[str, Any]) -> SQLConnector:
    """Create the connector for the dialect named in config.

    Args:
        config: Connection configuration; ``dialect`` selects the connector
            (defaults to FLATORM_DEFAULT_DIALECT)

    Returns:
        Unconnected connector instance

    Raises:
        UnsupportedDialectError: If the dialect is unknown
        ConfigurationError: If no connector is registered for it
    """
    dialect = config.get("dialect", default_config.default_dialect)
    connector_class = get_operator_class(dialect, "connector")
    if not issubclass(connector_class, SQLConnector):
        raise ConfigurationError(f"{connector_class.__name__} is not a SQLConnector")
    return connector_class(config)
