"""Per-dialect operator lookup.

Maps each dialect to the classes implementing it. The table is fixed at
import time and resolved lazily through importlib so that the operator
packages can depend on ``flatorm.core`` without import cycles.
"""

from __future__ import annotations

import importlib
from functools import lru_cache
from typing import Literal, Union

from flatorm.exceptions import ConfigurationError
from flatorm.models.dialect import Dialect

OperatorType = Literal["type_mapper", "generator", "connector"]

# Default operators - maps dialect to operator classes
DEFAULT_OPERATORS: dict[Dialect, dict[str, str]] = {
    Dialect.SQLITE: {
        "type_mapper": "flatorm.operators.sqlite.type_mapper.SQLiteTypeMapper",
        "generator": "flatorm.operators.sqlite.generator.SQLiteGenerator",
        "connector": "flatorm.operators.sqlite.connector.SQLiteConnector",
    },
    Dialect.POSTGRES: {
        "type_mapper": "flatorm.operators.postgres.type_mapper.PostgresTypeMapper",
        "generator": "flatorm.operators.postgres.generator.PostgresGenerator",
        "connector": "flatorm.operators.postgres.connector.PostgresConnector",
    },
    Dialect.MYSQL: {
        "type_mapper": "flatorm.operators.mysql.type_mapper.MySQLTypeMapper",
        "generator": "flatorm.operators.mysql.generator.MySQLGenerator",
        "connector": "flatorm.operators.mysql.connector.MySQLConnector",
    },
}


@lru_cache(maxsize=None)
def load_operator_class(full_path: str) -> type:
    """Import and return a class from its dotted path.

    Args:
        full_path: e.g., "flatorm.operators.sqlite.generator.SQLiteGenerator"

    Returns:
        The class object

    Raises:
        ConfigurationError: If module or class cannot be found
    """
    module_path, _, class_name = full_path.rpartition(".")
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigurationError(f"Failed to import operator module '{module_path}': {e}") from e

    try:
        return getattr(module, class_name)
    except AttributeError as e:
        raise ConfigurationError(
            f"Class '{class_name}' not found in module '{module_path}'"
        ) from e


def get_operator_class(dialect: Union[Dialect, str], operator_type: OperatorType) -> type:
    """Get the class implementing an operator type for a dialect.

    Args:
        dialect: Dialect member or name
        operator_type: "type_mapper", "generator" or "connector"

    Returns:
        Operator class

    Raises:
        UnsupportedDialectError: If the dialect is unknown
        ConfigurationError: If no operator of that type is registered
    """
    resolved = Dialect.parse(dialect)
    operators = DEFAULT_OPERATORS[resolved]
    if operator_type not in operators:
        raise ConfigurationError(
            f"No {operator_type} registered for dialect '{resolved.value}'"
        )
    return load_operator_class(operators[operator_type])


@lru_cache(maxsize=None)
def _type_mapper_for(dialect: Dialect):
    return get_operator_class(dialect, "type_mapper")()


def get_type_mapper(dialect: Union[Dialect, str]):
    """Get the (shared, stateless) type mapper for a dialect.

    Raises:
        UnsupportedDialectError: If the dialect is unknown

    Examples:
        >>> get_type_mapper("postgres").identity_type()
        'SERIAL PRIMARY KEY'
    """
    return _type_mapper_for(Dialect.parse(dialect))
