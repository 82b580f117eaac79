"""SQL statement generation from table descriptors.

This module provides the base generator shared by all dialects and
module-level helpers that pick the generator for a dialect.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Union

from flatorm.core.registry import get_operator_class
from flatorm.exceptions import GenerationError, UnsupportedDialectError
from flatorm.models.descriptor import ColumnDescriptor, TableDescriptor
from flatorm.models.dialect import Dialect
from flatorm.models.statement import Statement

logger = logging.getLogger(__name__)


class SQLGenerator:
    """Builds parameterized SQL statements from table descriptors.

    The base class emits the generic ``?`` placeholder and has no CREATE
    TABLE shape; it is used as-is for dialect names flatorm does not know.
    Dialect subclasses override :meth:`placeholder` and
    :meth:`create_table_sql`.

    All builders are pure: the same descriptors always produce the same
    statement, and nothing is kept between calls.

    Examples:
        >>> generator = SQLiteGenerator()
        >>> stmt = generator.find(descriptor, limit=1)
        >>> stmt.sql
        'SELECT * FROM books WHERE author = ? LIMIT 1;'
    """

    COLUMN_SEPARATOR = ",\n\t"

    def __init__(self, name: str = "generic"):
        """Initialize generator.

        Args:
            name: Dialect name, used in log messages
        """
        self.name = name

    def placeholder(self, index: int) -> str:
        """Get the placeholder for the 1-based argument ``index``."""
        return "?"

    def column_definitions(self, descriptor: TableDescriptor) -> str:
        """Render ``name type`` column clauses for CREATE TABLE."""
        return self.COLUMN_SEPARATOR.join(
            f"{col.name} {col.sql_type}" for col in descriptor.columns
        )

    def create_table_sql(self, descriptor: TableDescriptor) -> str:
        """Get the CREATE TABLE text for the descriptor.

        The base implementation does not know any DDL shape: it logs the
        dialect as unsupported and returns an empty string.
        """
        logger.error("Unsupported dialect '%s': cannot create table %s", self.name, descriptor.table_name)
        return ""

    def create_table(self, descriptor: TableDescriptor) -> Statement:
        """Build the CREATE TABLE statement (no arguments).

        Args:
            descriptor: Descriptor extracted with resolved types

        Returns:
            Statement; empty if the dialect has no CREATE TABLE shape
        """
        sql = self.create_table_sql(descriptor)
        if not sql:
            return Statement.empty()
        logger.debug("Create table SQL for %s:\n%s", descriptor.table_name, sql)
        return Statement(sql=sql)

    def insert(self, descriptors: Sequence[TableDescriptor]) -> Statement:
        """Build one multi-row INSERT.

        The column list comes from the first descriptor, without ``id``.
        Every descriptor adds one value group; all descriptors are expected
        to share the first one's columns. Fields that were None are bound
        as NULL.

        Args:
            descriptors: Records to insert, at least one

        Returns:
            Statement with the values of all rows in order

        Raises:
            GenerationError: If descriptors is empty
        """
        if not descriptors:
            raise GenerationError("Cannot build an INSERT without records")

        first = descriptors[0]
        columns = [col.name for col in first.data_columns()]

        args: list[Any] = []
        groups: list[str] = []
        for descriptor in descriptors:
            placeholders = []
            for col in descriptor.data_columns():
                args.append(col.bind_value)
                placeholders.append(self.placeholder(len(args)))
            groups.append(f"({', '.join(placeholders)})")

        sql = (
            f"INSERT INTO {first.table_name} ({', '.join(columns)}) "
            f"VALUES {', '.join(groups)};"
        )
        return self._statement(sql, args)

    def find(self, descriptor: TableDescriptor, limit: int = 0, skip: int = 0) -> Statement:
        """Build a SELECT filtered on the descriptor's present values.

        ``skip`` only applies together with a positive ``limit``. Without
        any condition the WHERE clause is left out and every row matches.

        Args:
            descriptor: Query record descriptor
            limit: Maximum number of rows (0 for no limit)
            skip: Number of rows to skip (used only with a limit)

        Returns:
            Statement with the condition values in order
        """
        conditions, args = self._conditions(descriptor.filter_columns(), start=1)

        sql = f"SELECT * FROM {descriptor.table_name}"
        if conditions:
            sql += f" WHERE {conditions}"

        if limit > 0:
            sql += f" LIMIT {limit}"
            if skip > 0:
                sql += f" OFFSET {skip}"

        sql += ";"
        return self._statement(sql, args)

    def update(self, query: TableDescriptor, data: TableDescriptor) -> Statement:
        """Build an UPDATE setting data's values on rows matching query.

        SET placeholders are numbered first, WHERE placeholders continue
        after them; arguments follow the same order.

        Args:
            query: Descriptor whose present values select the rows
            data: Descriptor whose present non-``id`` values are written

        Returns:
            Statement with SET values followed by WHERE values

        Raises:
            GenerationError: If data has nothing to set or query has no condition
        """
        set_columns = [col for col in data.data_columns() if col.is_present]
        if not set_columns:
            raise GenerationError(f"UPDATE on {data.table_name} has no values to set")

        filter_columns = query.filter_columns()
        if not filter_columns:
            raise GenerationError(
                f"UPDATE on {data.table_name} has no condition; refusing to update every row"
            )

        updates, set_args = self._assignments(set_columns, start=1, separator=", ")
        conditions, where_args = self._conditions(filter_columns, start=len(set_args) + 1)

        sql = f"UPDATE {data.table_name} SET {updates} WHERE {conditions};"
        return self._statement(sql, set_args + where_args)

    def delete(self, query: TableDescriptor) -> Statement:
        """Build a DELETE of the rows matching query.

        Raises:
            GenerationError: If query has no condition (use delete_all instead)
        """
        filter_columns = query.filter_columns()
        if not filter_columns:
            raise GenerationError(
                f"DELETE on {query.table_name} has no condition; use delete_all to empty the table"
            )

        conditions, args = self._conditions(filter_columns, start=1)
        sql = f"DELETE FROM {query.table_name} WHERE {conditions};"
        return self._statement(sql, args)

    def delete_all(self, query: TableDescriptor) -> Statement:
        """Build an unconditional DELETE of every row of the table."""
        return self._statement(f"DELETE FROM {query.table_name};", [])

    def _conditions(
        self, columns: Sequence[ColumnDescriptor], start: int
    ) -> tuple[str, list[Any]]:
        """Render equality conditions joined with AND."""
        return self._assignments(columns, start, separator=" AND ")

    def _assignments(
        self, columns: Sequence[ColumnDescriptor], start: int, separator: str
    ) -> tuple[str, list[Any]]:
        clauses = []
        args: list[Any] = []
        for offset, col in enumerate(columns):
            clauses.append(f"{col.name} = {self.placeholder(start + offset)}")
            args.append(col.literal_value)
        return separator.join(clauses), args

    def _statement(self, sql: str, args: list[Any]) -> Statement:
        logger.debug("Generated SQL (%s): %s args=%s", self.name, sql, args)
        return Statement(sql=sql, args=tuple(args))


def get_generator(dialect: Union[Dialect, str]) -> SQLGenerator:
    """Get the generator for a dialect.

    Unknown dialect names get the generic generator, which uses ``?``
    placeholders and cannot create tables.

    Args:
        dialect: Dialect member or name

    Returns:
        SQLGenerator instance
    """
    try:
        return get_operator_class(dialect, "generator")()
    except UnsupportedDialectError as e:
        logger.warning("%s; falling back to generic SQL", e)
        return SQLGenerator(name=str(dialect))


def generate_create_table(descriptor: TableDescriptor, dialect: Union[Dialect, str]) -> Statement:
    """Build CREATE TABLE for a dialect (empty statement if unsupported)."""
    return get_generator(dialect).create_table(descriptor)


def generate_insert(
    descriptors: Sequence[TableDescriptor], dialect: Union[Dialect, str]
) -> Statement:
    """Build a multi-row INSERT for a dialect."""
    return get_generator(dialect).insert(descriptors)


def generate_find(
    descriptor: TableDescriptor,
    dialect: Union[Dialect, str],
    limit: int = 0,
    skip: int = 0,
) -> Statement:
    """Build a filtered SELECT for a dialect."""
    return get_generator(dialect).find(descriptor, limit=limit, skip=skip)


def generate_update(
    query: TableDescriptor, data: TableDescriptor, dialect: Union[Dialect, str]
) -> Statement:
    """Build an UPDATE for a dialect."""
    return get_generator(dialect).update(query, data)


def generate_delete(query: TableDescriptor, dialect: Union[Dialect, str]) -> Statement:
    """Build a filtered DELETE for a dialect."""
    return get_generator(dialect).delete(query)


def generate_delete_all(query: TableDescriptor) -> Statement:
    """Build a table-wide DELETE (the same for every dialect)."""
    return SQLGenerator().delete_all(query)
