"""SQLite operators for flatorm."""

from flatorm.operators.sqlite.connector import SQLiteConnector
from flatorm.operators.sqlite.generator import SQLiteGenerator
from flatorm.operators.sqlite.type_mapper import SQLiteTypeMapper

__all__ = ["SQLiteConnector", "SQLiteGenerator", "SQLiteTypeMapper"]
