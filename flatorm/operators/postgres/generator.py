"""PostgreSQL statement generator."""

from __future__ import annotations

from flatorm.models.descriptor import TableDescriptor
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.generator import SQLGenerator

CREATE_TABLE_TEMPLATE = """\
DO
$do$
BEGIN
   IF NOT EXISTS (
      SELECT FROM pg_class c
      WHERE c.relkind = 'S'
      AND c.relname = '{table}_id_seq'
   ) THEN
      CREATE SEQUENCE {table}_id_seq;
   END IF;
END
$do$;
CREATE TABLE IF NOT EXISTS {table} (
\t{columns}
);
ALTER SEQUENCE {table}_id_seq OWNED BY {table}.id;"""


class PostgresGenerator(SQLGenerator):
    """Generator for PostgreSQL (``$1, $2, ...`` placeholders).

    CREATE TABLE creates ``<table>_id_seq`` up front when the catalog has
    no such sequence, and ties it to the ``id`` column afterwards, so the
    script can be run again against an existing table.
    """

    def __init__(self):
        super().__init__(name=Dialect.POSTGRES.value)

    def placeholder(self, index: int) -> str:
        return f"${index}"

    def create_table_sql(self, descriptor: TableDescriptor) -> str:
        return CREATE_TABLE_TEMPLATE.format(
            table=descriptor.table_name,
            columns=self.column_definitions(descriptor),
        )
