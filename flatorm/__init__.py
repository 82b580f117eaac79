"""flatorm - SQL for flat, column-annotated records."""

__version__ = "0.1.0"

# Re-export key models for convenience
from flatorm.models import (
    ColumnDescriptor,
    Dialect,
    ScalarKind,
    Statement,
    TableDescriptor,
    column,
)

# Re-export core classes and functions
from flatorm.core import Connector, TypeMapper, extract, get_type_mapper, hydrate

# Re-export SQL generation and connectors
from flatorm.operators.sql import (
    SQLConnector,
    SQLGenerator,
    create_connector,
    generate_create_table,
    generate_delete,
    generate_delete_all,
    generate_find,
    generate_insert,
    generate_update,
    get_generator,
)
from flatorm.operators.mysql import MySQLConnector
from flatorm.operators.postgres import PostgresConnector
from flatorm.operators.sqlite import SQLiteConnector

# Re-export record operations
from flatorm.repository import (
    create_table,
    delete_all_rows,
    delete_many,
    find_many,
    find_many_limit_skip,
    find_one,
    insert_many,
    insert_one,
    update_many,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "ColumnDescriptor",
    "Dialect",
    "ScalarKind",
    "Statement",
    "TableDescriptor",
    "column",
    # Introspection
    "extract",
    "hydrate",
    "get_type_mapper",
    # Core ABCs
    "Connector",
    "TypeMapper",
    # Generation
    "SQLGenerator",
    "get_generator",
    "generate_create_table",
    "generate_insert",
    "generate_find",
    "generate_update",
    "generate_delete",
    "generate_delete_all",
    # Connectors
    "SQLConnector",
    "SQLiteConnector",
    "PostgresConnector",
    "MySQLConnector",
    "create_connector",
    # Record operations
    "create_table",
    "insert_one",
    "insert_many",
    "find_one",
    "find_many",
    "find_many_limit_skip",
    "update_many",
    "delete_many",
    "delete_all_rows",
]
