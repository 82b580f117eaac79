"""MySQL statement generator."""

from __future__ import annotations

from flatorm.models.descriptor import TableDescriptor
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.generator import SQLGenerator


class MySQLGenerator(SQLGenerator):
    """Generator for MySQL (``?`` placeholders, InnoDB tables)."""

    TABLE_OPTIONS = "ENGINE=InnoDB DEFAULT CHARSET=utf8"

    def __init__(self):
        super().__init__(name=Dialect.MYSQL.value)

    def create_table_sql(self, descriptor: TableDescriptor) -> str:
        return (
            f"CREATE TABLE IF NOT EXISTS {descriptor.table_name} (\n"
            f"\t{self.column_definitions(descriptor)}\n"
            f") {self.TABLE_OPTIONS};"
        )
