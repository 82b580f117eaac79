"""Record introspection.

Turns a record (a dataclass instance whose fields are declared with
:func:`flatorm.column`) into a :class:`TableDescriptor`, and turns result
rows back into records of the same class.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel

from flatorm.core.config import config
from flatorm.core.registry import get_type_mapper
from flatorm.exceptions import (
    DuplicateColumnAnnotation,
    InvalidInputKind,
    MissingColumnAnnotation,
    MissingIdentityColumn,
    NestedFieldNotSupported,
)
from flatorm.models.descriptor import IDENTITY_COLUMN, ColumnDescriptor, TableDescriptor
from flatorm.models.dialect import Dialect
from flatorm.models.field import column_name

logger = logging.getLogger(__name__)

_COLLECTION_TYPES = (list, tuple, set, frozenset, dict)
_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)


def table_name_for(record_type: type) -> str:
    """Derive the table name of a record class.

    Examples:
        >>> table_name_for(Book)
        'books'
        >>> table_name_for(Books)
        'books'
    """
    name = record_type.__name__.lower()
    if not name.endswith("s"):
        name += "s"
    return name


def render_value(value: Any) -> str:
    """Render a field value as text.

    ``None`` renders as the empty string (absent). Booleans render as
    ``1``/``0`` to match their INTEGER column; every other scalar uses
    ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def extract(
    record: Any,
    resolve_types: bool = False,
    dialect: Union[Dialect, str, None] = None,
) -> TableDescriptor:
    """Build the descriptor of a record.

    Args:
        record: Dataclass instance with column-annotated fields
        resolve_types: Resolve the SQL type of every column (schema creation)
        dialect: Target dialect, only consulted when resolving types
            (defaults to FLATORM_DEFAULT_DIALECT)

    Returns:
        TableDescriptor with columns in field declaration order

    Raises:
        InvalidInputKind: If record is not a dataclass instance
        NestedFieldNotSupported: If a field holds a structured value or its
            annotation cannot be resolved
        MissingColumnAnnotation: If a field has no column name
        DuplicateColumnAnnotation: If two fields share a column name
        MissingIdentityColumn: If resolving types and no field maps to ``id``
        UnsupportedDialectError: If resolving types for an unknown dialect
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise InvalidInputKind(
            f"Expected a record (dataclass instance), got {type(record).__name__}"
        )

    record_type = type(record)
    hints = _field_types(record_type)
    if resolve_types and dialect is None:
        dialect = config.dialect
    type_mapper = get_type_mapper(dialect) if resolve_types else None

    columns: list[ColumnDescriptor] = []
    seen: set[str] = set()
    identity_found = False

    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        annotation = _unwrap_optional(hints.get(field.name, field.type))

        if _is_structured_type(annotation) or _is_structured_value(value):
            raise NestedFieldNotSupported(
                f"{record_type.__name__}.{field.name}: only flat records are accepted"
            )

        name = column_name(field)
        if not name:
            raise MissingColumnAnnotation(
                f"{record_type.__name__}.{field.name}: column name must be provided "
                f"for all record fields, e.g. id: int = column(\"id\", default=0)"
            )
        if name in seen:
            raise DuplicateColumnAnnotation(
                f"{record_type.__name__}.{field.name}: column '{name}' is declared twice"
            )
        seen.add(name)

        if name == IDENTITY_COLUMN and _is_unassigned_identity(value):
            literal = ""
        else:
            literal = render_value(value)

        sql_type = ""
        if type_mapper is not None:
            python_type = annotation if isinstance(annotation, type) else type(value)
            sql_type = type_mapper.column_type(name, python_type)
            if name == IDENTITY_COLUMN:
                identity_found = True

        columns.append(
            ColumnDescriptor(
                name=name, sql_type=sql_type, literal_value=literal, is_null=value is None
            )
        )

    if resolve_types and not identity_found:
        raise MissingIdentityColumn(
            f"{record_type.__name__} must have a field mapped to column 'id', "
            f"e.g. id: int = column(\"id\", default=0)"
        )

    descriptor = TableDescriptor(table_name=table_name_for(record_type), columns=tuple(columns))
    logger.debug("Extracted %s with columns %s", descriptor.table_name, descriptor.column_names)
    return descriptor


def hydrate(record_type: type, row: Mapping[str, Any]) -> Any:
    """Create a record from a result row.

    Row keys are matched against the declared column names; keys that do
    not belong to any field are ignored and fields missing from the row
    keep their defaults. Integers read into ``bool`` fields become bools.

    Args:
        record_type: Dataclass record class
        row: Column name -> value mapping

    Returns:
        New record instance

    Raises:
        InvalidInputKind: If record_type is not a dataclass class
    """
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise InvalidInputKind(f"Expected a record class, got {record_type!r}")

    hints = _field_types(record_type)
    kwargs = {}
    for field in dataclasses.fields(record_type):
        name = column_name(field)
        if field.init and name and name in row:
            value = row[name]
            if _unwrap_optional(hints.get(field.name)) is bool and isinstance(value, int):
                value = bool(value)
            kwargs[field.name] = value
    return record_type(**kwargs)


def _field_types(record_type: type) -> dict[str, Any]:
    """Resolve field annotations.

    Scalar annotations always resolve, so a name that cannot be found refers
    to a type defined out of reach (e.g. a class local to a function).
    """
    try:
        return typing.get_type_hints(record_type)
    except NameError as e:
        raise NestedFieldNotSupported(
            f"{record_type.__name__}: cannot resolve field annotation ({e}); "
            f"only flat records are accepted"
        ) from e
    except TypeError:
        # PEP 604 unions on interpreters that cannot evaluate them
        return {}


def _unwrap_optional(annotation: Any) -> Any:
    """``Optional[X]`` -> ``X``; other annotations are returned unchanged."""
    if typing.get_origin(annotation) in _UNION_TYPES:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_structured_type(annotation: Any) -> bool:
    if typing.get_origin(annotation) in _COLLECTION_TYPES:
        return True
    if not isinstance(annotation, type):
        return False
    return (
        dataclasses.is_dataclass(annotation)
        or issubclass(annotation, BaseModel)
        or issubclass(annotation, _COLLECTION_TYPES)
    )


def _is_structured_value(value: Any) -> bool:
    return (
        dataclasses.is_dataclass(value)
        or isinstance(value, (BaseModel, Mapping))
        or isinstance(value, _COLLECTION_TYPES)
    )


def _is_unassigned_identity(value: Any) -> bool:
    return value is None or (isinstance(value, int) and not isinstance(value, bool) and value == 0)
