"""flatorm core package.

This package contains the abstract base classes, the record introspector
and the per-dialect operator lookup.
"""

from flatorm.core.connector import Connector
from flatorm.core.introspector import extract, hydrate, render_value, table_name_for
from flatorm.core.registry import get_operator_class, get_type_mapper
from flatorm.core.type_mapper import TypeMapper

__all__ = [
    "Connector",
    "TypeMapper",
    "extract",
    "get_operator_class",
    "get_type_mapper",
    "hydrate",
    "render_value",
    "table_name_for",
]
