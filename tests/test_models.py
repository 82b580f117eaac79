"""Tests for dialects, type mappers and placeholder adaptation."""

import pytest

from flatorm import ColumnDescriptor, Dialect, ScalarKind, Statement, get_type_mapper
from flatorm.exceptions import ConnectorError, UnsupportedDialectError
from flatorm.operators.postgres import PostgresTypeMapper
from flatorm.operators.sql import adapt_placeholders


class TestDialect:
    """Test dialect parsing."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("sqlite", Dialect.SQLITE),
            ("SQLite3", Dialect.SQLITE),
            ("postgresql", Dialect.POSTGRES),
            ("psycopg2", Dialect.POSTGRES),
            ("mariadb", Dialect.MYSQL),
            (Dialect.MYSQL, Dialect.MYSQL),
        ],
    )
    def test_parse(self, name, expected):
        assert Dialect.parse(name) is expected

    def test_unknown(self):
        with pytest.raises(UnsupportedDialectError) as exc_info:
            Dialect.parse("oracle")
        assert exc_info.value.available == ["sqlite", "postgres", "mysql"]


class TestTypeMapper:
    """Test scalar kind to SQL type mapping."""

    def test_shared_lookup(self):
        mapper = get_type_mapper("postgresql")
        assert isinstance(mapper, PostgresTypeMapper)
        assert mapper is get_type_mapper(Dialect.POSTGRES)

    def test_kinds(self):
        mapper = get_type_mapper("mysql")
        assert mapper.to_target(ScalarKind.INTEGER) == "INTEGER"
        assert mapper.to_target(ScalarKind.FLOAT) == "REAL"
        assert mapper.to_target(ScalarKind.STRING) == "TEXT"
        assert mapper.to_target(ScalarKind.OTHER) == "TEXT"
        assert mapper.to_target(ScalarKind.STRING, target_hint="VARCHAR(64)") == "VARCHAR(64)"

    def test_identity_overrides_type(self):
        assert get_type_mapper("sqlite").column_type("id", str) == "INTEGER PRIMARY KEY AUTOINCREMENT"
        assert get_type_mapper("mysql").column_type("name", str) == "TEXT"

    @pytest.mark.parametrize(
        "python_type,kind",
        [(int, ScalarKind.INTEGER), (bool, ScalarKind.INTEGER), (float, ScalarKind.FLOAT),
         (str, ScalarKind.STRING), (bytes, ScalarKind.OTHER), ("int", ScalarKind.OTHER)],
    )
    def test_scalar_kind(self, python_type, kind):
        assert ScalarKind.of(python_type) is kind


class TestDescriptorModels:
    """Test descriptor and statement value objects."""

    def test_column_requires_name(self):
        with pytest.raises(ValueError):
            ColumnDescriptor(name="")

    def test_statement_empty(self):
        assert Statement.empty().is_empty
        assert not Statement(sql="DELETE FROM books;").is_empty


class TestAdaptPlaceholders:
    """Test rewriting generated placeholders for DBAPI drivers."""

    def test_postgres_to_pyformat(self):
        sql, params = adapt_placeholders("SELECT * FROM books WHERE a = $1 AND b = $2;", ("x", "y"), "pyformat")
        assert sql == "SELECT * FROM books WHERE a = %s AND b = %s;"
        assert params == ("x", "y")

    def test_qmark_to_format_escapes_percent(self):
        sql, _ = adapt_placeholders("SELECT '100%' WHERE a = ?;", ("x",), "format")
        assert sql == "SELECT '100%%' WHERE a = %s;"

    def test_qmark_to_numeric_dollar(self):
        sql, _ = adapt_placeholders("(?, ?), (?)", (1, 2, 3), "numeric_dollar")
        assert sql == "($1, $2), ($3)"

    def test_named(self):
        sql, params = adapt_placeholders("a = $1 AND b = $2", ("x", "y"), "named")
        assert sql == "a = :p1 AND b = :p2"
        assert params == {"p1": "x", "p2": "y"}

    def test_dollar_quoting_untouched(self):
        sql, _ = adapt_placeholders("$do$ BEGIN END $do$; a = $1", ("x",), "qmark")
        assert sql == "$do$ BEGIN END $do$; a = ?"

    def test_unknown_paramstyle(self):
        with pytest.raises(ConnectorError):
            adapt_placeholders("a = ?", ("x",), "weird")
