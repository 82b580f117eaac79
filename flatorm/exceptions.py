"""flatorm exception hierarchy."""

from __future__ import annotations


class FlatORMError(Exception):
    """Base exception for all flatorm errors."""

    pass


class ConfigurationError(FlatORMError):
    """Raised when configuration is invalid or missing."""

    pass


class ConnectionError(FlatORMError):
    """Raised when connection to a database fails."""

    pass


class ConnectorError(FlatORMError):
    """Raised when a connector operation fails."""

    pass


class UnsupportedDialectError(FlatORMError):
    """Raised when a dialect name does not match a supported dialect."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(f"Unsupported dialect '{name}'. Available: {', '.join(available)}")


class GenerationError(FlatORMError):
    """Raised when a statement cannot be built from the given descriptors."""

    pass


class IntrospectionError(FlatORMError):
    """Base class for record introspection failures.

    These indicate misuse of the record annotation contract and are never
    caught inside flatorm.
    """

    pass


class InvalidInputKind(IntrospectionError):
    """Raised when a value that is not a record instance is introspected."""

    pass


class NestedFieldNotSupported(IntrospectionError):
    """Raised when a record field holds a structured value."""

    pass


class MissingColumnAnnotation(IntrospectionError):
    """Raised when a record field does not declare its column name."""

    pass


class DuplicateColumnAnnotation(IntrospectionError):
    """Raised when two record fields declare the same column name."""

    pass


class MissingIdentityColumn(IntrospectionError):
    """Raised when schema creation is requested for a record without an ``id`` column."""

    pass
