"""PostgreSQL operators for flatorm."""

from flatorm.operators.postgres.connector import PostgresConnector
from flatorm.operators.postgres.generator import PostgresGenerator
from flatorm.operators.postgres.type_mapper import PostgresTypeMapper

__all__ = ["PostgresConnector", "PostgresGenerator", "PostgresTypeMapper"]
