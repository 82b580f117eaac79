"""Record-level database operations.

Each operation introspects its record argument(s), generates the statement
for the connector's dialect and executes it. Introspection errors propagate
unchanged; database errors surface as ConnectorError.

Examples:
    >>> with SQLiteConnector({"database": "library.db"}) as conn:
    ...     create_table(conn, Book())
    ...     insert_one(conn, Book(author="Alin Devon", title="Python Tutorial"))
    ...     book = find_one(conn, Book(author="Alin Devon"))
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, TypeVar

from flatorm.core.connector import Connector
from flatorm.core.introspector import extract, hydrate
from flatorm.operators.sql.generator import get_generator

logger = logging.getLogger(__name__)

R = TypeVar("R")


def create_table(conn: Connector, record: Any) -> None:
    """Create the record's table if it does not exist.

    Args:
        conn: Connected connector
        record: Record instance (its values are ignored)
    """
    descriptor = extract(record, resolve_types=True, dialect=conn.dialect)
    statement = get_generator(conn.dialect).create_table(descriptor)
    conn.execute(statement)
    logger.info("Ensured table %s exists", descriptor.table_name)


def insert_one(conn: Connector, record: Any) -> int:
    """Insert a single record (its ``id`` is left to the database).

    Returns:
        Number of inserted rows
    """
    return insert_many(conn, [record])


def insert_many(conn: Connector, records: Sequence[Any]) -> int:
    """Insert records with one multi-row INSERT.

    All records must be of the same class.

    Returns:
        Number of inserted rows

    Raises:
        GenerationError: If records is empty
    """
    descriptors = [extract(record, dialect=conn.dialect) for record in records]
    statement = get_generator(conn.dialect).insert(descriptors)
    return conn.execute(statement)


def find_one(conn: Connector, query: R) -> Optional[R]:
    """Find the first record matching the query record's present values.

    Returns:
        A new record of the query's class, or None if nothing matches
    """
    rows = _find(conn, query, limit=1, skip=0)
    return rows[0] if rows else None


def find_many(conn: Connector, query: R) -> list[R]:
    """Find every record matching the query record's present values."""
    return find_many_limit_skip(conn, query, 0, 0)


def find_many_limit_skip(conn: Connector, query: R, limit: int, skip: int) -> list[R]:
    """Find matching records with LIMIT/OFFSET pagination.

    ``skip`` is ignored when ``limit`` is 0.
    """
    return _find(conn, query, limit=limit, skip=skip)


def update_many(conn: Connector, query: Any, data: Any) -> int:
    """Set data's present values on every row matching query.

    Returns:
        Number of updated rows

    Raises:
        GenerationError: If data has nothing to set or query has no condition
    """
    query_descriptor = extract(query, dialect=conn.dialect)
    data_descriptor = extract(data, dialect=conn.dialect)
    statement = get_generator(conn.dialect).update(query_descriptor, data_descriptor)
    return conn.execute(statement)


def delete_many(conn: Connector, query: Any) -> int:
    """Delete every row matching query.

    Returns:
        Number of deleted rows

    Raises:
        GenerationError: If query has no condition
    """
    descriptor = extract(query, dialect=conn.dialect)
    statement = get_generator(conn.dialect).delete(descriptor)
    return conn.execute(statement)


def delete_all_rows(conn: Connector, query: Any) -> int:
    """Delete every row of the query record's table."""
    descriptor = extract(query, dialect=conn.dialect)
    statement = get_generator(conn.dialect).delete_all(descriptor)
    return conn.execute(statement)


def _find(conn: Connector, query: R, limit: int, skip: int) -> list[R]:
    descriptor = extract(query, dialect=conn.dialect)
    statement = get_generator(conn.dialect).find(descriptor, limit=limit, skip=skip)
    rows = conn.query(statement)
    return [hydrate(type(query), row) for row in rows]
