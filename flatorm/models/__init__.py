"""flatorm models package.

This package contains the value objects passed between the introspector,
the SQL generators and the connectors.
"""

from flatorm.models.descriptor import IDENTITY_COLUMN, ColumnDescriptor, TableDescriptor
from flatorm.models.dialect import Dialect
from flatorm.models.field import COLUMN_KEY, ScalarKind, column
from flatorm.models.statement import Statement

__all__ = [
    # Record annotation
    "COLUMN_KEY",
    "ScalarKind",
    "column",
    # Descriptors
    "IDENTITY_COLUMN",
    "ColumnDescriptor",
    "TableDescriptor",
    # Dialects and statements
    "Dialect",
    "Statement",
]
