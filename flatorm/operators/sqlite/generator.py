"""SQLite statement generator."""

from __future__ import annotations

from flatorm.models.descriptor import TableDescriptor
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.generator import SQLGenerator


class SQLiteGenerator(SQLGenerator):
    """Generator for SQLite (``?`` placeholders)."""

    def __init__(self):
        super().__init__(name=Dialect.SQLITE.value)

    def create_table_sql(self, descriptor: TableDescriptor) -> str:
        return (
            f"CREATE TABLE IF NOT EXISTS {descriptor.table_name} (\n"
            f"\t{self.column_definitions(descriptor)}\n"
            f");"
        )
