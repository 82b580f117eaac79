"""Base Connector abstract class.

This module defines the Connector interface for managing connections
to databases and executing generated statements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from flatorm.models.dialect import Dialect
from flatorm.models.statement import Statement


class Connector(ABC):
    """Base class for managing connections to databases.

    Connectors handle connection lifecycle and execute the statements
    produced by the SQL generators. They are passed to the repository
    operations rather than subclassed by them.

    Examples:
        Using a connector as a context manager:
        >>> with SQLiteConnector({"database": "books.db"}) as conn:
        ...     rows = conn.query(Statement(sql="SELECT * FROM books;"))
    """

    def __init__(self, config: dict[str, Any]):
        """Initialize connector with configuration.

        Args:
            config: Connection configuration dictionary
        """
        self.config = config
        self.connection: Optional[Any] = None

    @property
    @abstractmethod
    def dialect(self) -> Dialect:
        """Dialect used to generate SQL for this connector."""
        pass

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the database.

        Raises:
            ConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to the database.

        Should handle cases where connection is already closed gracefully.
        """
        pass

    @abstractmethod
    def test_connection(self) -> bool:
        """Test connectivity to the database.

        Returns:
            True if connection is successful, False otherwise
        """
        pass

    @abstractmethod
    def execute(self, statement: Statement) -> int:
        """Execute a DDL/DML statement and commit.

        Args:
            statement: Statement to execute

        Returns:
            Number of affected rows (as reported by the driver)

        Raises:
            ConnectorError: If execution fails
        """
        pass

    @abstractmethod
    def query(self, statement: Statement) -> list[dict[str, Any]]:
        """Execute a SELECT statement and return its rows.

        Args:
            statement: Statement to execute

        Returns:
            List of rows as dictionaries

        Raises:
            ConnectorError: If execution fails
        """
        pass

    def __enter__(self) -> Connector:
        """Context manager entry: establish connection.

        Returns:
            Self
        """
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit: close connection."""
        self.disconnect()

    @property
    def is_connected(self) -> bool:
        """Check if connection is established.

        Returns:
            True if connected, False otherwise
        """
        return self.connection is not None
