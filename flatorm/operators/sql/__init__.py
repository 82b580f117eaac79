"""Generic SQL operators for SQLAlchemy-based databases.

This package provides the base classes shared by every dialect:
- SQLGenerator: Statement generation from table descriptors
- SQLConnector: Connection management and statement execution

Dialect subclasses override placeholder syntax, CREATE TABLE shape and
connection strings but inherit everything else.
"""

from flatorm.operators.sql.connector import SQLConnector, adapt_placeholders, create_connector
from flatorm.operators.sql.generator import (
    SQLGenerator,
    generate_create_table,
    generate_delete,
    generate_delete_all,
    generate_find,
    generate_insert,
    generate_update,
    get_generator,
)

__all__ = [
    "SQLConnector",
    "SQLGenerator",
    "adapt_placeholders",
    "create_connector",
    "generate_create_table",
    "generate_delete",
    "generate_delete_all",
    "generate_find",
    "generate_insert",
    "generate_update",
    "get_generator",
]
