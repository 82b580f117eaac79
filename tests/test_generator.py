"""Tests for SQL statement generation."""

import logging
import re

import pytest

from flatorm import (
    Dialect,
    extract,
    generate_create_table,
    generate_delete,
    generate_delete_all,
    generate_find,
    generate_insert,
    generate_update,
    get_generator,
)
from flatorm.exceptions import GenerationError
from flatorm.operators.mysql import MySQLGenerator
from flatorm.operators.postgres import PostgresGenerator
from flatorm.operators.sql import SQLGenerator
from flatorm.operators.sqlite import SQLiteGenerator
from tests.records import Book, Flag, Measurement, Tag, Ticket


def schema(dialect):
    return extract(Book(), resolve_types=True, dialect=dialect)


class TestGeneratorLookup:
    """Test generator resolution per dialect."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("sqlite", SQLiteGenerator),
            ("sqlite3", SQLiteGenerator),
            ("postgres", PostgresGenerator),
            ("postgresql", PostgresGenerator),
            ("mysql", MySQLGenerator),
            (Dialect.MYSQL, MySQLGenerator),
        ],
    )
    def test_known_dialects(self, name, expected):
        assert type(get_generator(name)) is expected

    def test_unknown_dialect_falls_back_to_generic(self):
        generator = get_generator("oracle")
        assert type(generator) is SQLGenerator
        assert generator.placeholder(3) == "?"


class TestCreateTable:
    """Test CREATE TABLE generation."""

    def test_sqlite(self):
        stmt = generate_create_table(schema("sqlite"), "sqlite")

        assert stmt.args == ()
        assert stmt.sql == (
            "CREATE TABLE IF NOT EXISTS books (\n"
            "\tid INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "\tauthor TEXT,\n"
            "\tdate_published TEXT,\n"
            "\ttitle TEXT,\n"
            "\tgenre TEXT,\n"
            "\tpreface TEXT\n"
            ");"
        )

    def test_mysql(self):
        stmt = generate_create_table(schema("mysql"), "mysql")

        assert stmt.sql.startswith("CREATE TABLE IF NOT EXISTS books (\n\tid INT AUTO_INCREMENT PRIMARY KEY,\n")
        assert stmt.sql.endswith("\n) ENGINE=InnoDB DEFAULT CHARSET=utf8;")

    def test_postgres_keeps_sequence_in_sync(self):
        sql = generate_create_table(schema("postgres"), "postgres").sql

        assert "c.relname = 'books_id_seq'" in sql
        assert "CREATE SEQUENCE books_id_seq;" in sql
        assert "\tid SERIAL PRIMARY KEY,\n\tauthor TEXT," in sql
        assert sql.endswith("ALTER SEQUENCE books_id_seq OWNED BY books.id;")
        # Sequence guard, then table, then ownership
        assert sql.index("CREATE SEQUENCE") < sql.index("CREATE TABLE") < sql.index("ALTER SEQUENCE")

    def test_unsupported_dialect_is_empty(self, caplog):
        descriptor = schema("sqlite")

        with caplog.at_level(logging.ERROR):
            stmt = generate_create_table(descriptor, "oracle")

        assert stmt.is_empty
        assert stmt.args == ()
        assert "Unsupported dialect" in caplog.text


class TestInsert:
    """Test multi-row INSERT generation."""

    def test_single_row_sqlite(self):
        stmt = generate_insert([extract(Book(author="A", title="T"))], "sqlite")

        assert stmt.sql == (
            "INSERT INTO books (author, date_published, title, genre, preface) "
            "VALUES (?, ?, ?, ?, ?);"
        )
        assert stmt.args == ("A", "", "T", "", "")

    def test_id_is_excluded(self):
        stmt = generate_insert([extract(Book(id=9, author="A"))], "sqlite")

        assert "id," not in stmt.sql.split("VALUES")[0]
        assert "9" not in stmt.args

    def test_multi_row_postgres_numbering(self):
        books = [Book(author=f"A{i}", title=f"T{i}") for i in range(3)]
        stmt = generate_insert([extract(b) for b in books], "postgres")

        numbers = [int(n) for n in re.findall(r"\$(\d+)", stmt.sql)]
        assert numbers == list(range(1, len(stmt.args) + 1))
        assert len(stmt.args) == 15
        assert "VALUES ($1, $2, $3, $4, $5), ($6, $7, $8, $9, $10), ($11, $12, $13, $14, $15);" in stmt.sql
        assert stmt.args[5] == "A1"

    def test_multi_row_mysql(self):
        stmt = generate_insert([extract(Tag(label="a")), extract(Tag(label="b"))], "mysql")

        assert stmt.sql == "INSERT INTO tags (label) VALUES (?), (?);"
        assert stmt.args == ("a", "b")

    def test_empty_batch(self):
        with pytest.raises(GenerationError):
            generate_insert([], "sqlite")

    def test_none_is_bound_as_null(self):
        stmt = generate_insert([extract(Flag(name="x", active=True))], "postgres")

        assert stmt.sql == "INSERT INTO flags (name, active, quantity) VALUES ($1, $2, $3);"
        assert stmt.args == ("x", "1", None)


class TestFind:
    """Test SELECT generation."""

    def test_filters_present_values(self):
        stmt = generate_find(extract(Book(author="A", genre="G")), "sqlite")

        assert stmt.sql == "SELECT * FROM books WHERE author = ? AND genre = ?;"
        assert stmt.args == ("A", "G")

    def test_zero_id_is_omitted(self):
        stmt = generate_find(extract(Book(id=0, title="T")), "postgres")

        assert stmt.sql == "SELECT * FROM books WHERE title = $1;"
        assert stmt.args == ("T",)

    def test_nonzero_id_is_a_condition(self):
        stmt = generate_find(extract(Book(id=4)), "postgres")

        assert stmt.sql == "SELECT * FROM books WHERE id = $1;"
        assert stmt.args == ("4",)

    def test_empty_string_value_is_dropped(self):
        """An empty string cannot be searched for: the field is treated as absent."""
        stmt = generate_find(extract(Book(author="", title="T")), "sqlite")

        assert "author" not in stmt.sql
        assert stmt.args == ("T",)

    def test_zero_text_id_is_omitted(self):
        stmt = generate_find(extract(Ticket(code="A1")), "sqlite")

        assert stmt.sql == "SELECT * FROM tickets WHERE code = ?;"
        assert stmt.args == ("A1",)

    def test_zero_on_other_columns_is_a_condition(self):
        """Only the id column treats zero as unset."""
        stmt = generate_find(extract(Measurement(sensor="t")), "sqlite")
        conditions = dict(zip(re.findall(r"(\w+) = \?", stmt.sql), stmt.args))

        assert conditions["count"] == "0"
        assert conditions["reading"] == "0.0"
        assert conditions["active"] == "0"
        assert "id" not in conditions

    def test_none_is_not_a_condition(self):
        stmt = generate_find(extract(Flag(name="x", active=True)), "sqlite")

        assert stmt.sql == "SELECT * FROM flags WHERE name = ? AND active = ?;"
        assert stmt.args == ("x", "1")

    def test_no_conditions_selects_everything(self):
        stmt = generate_find(extract(Book()), "sqlite")

        assert stmt.sql == "SELECT * FROM books;"
        assert stmt.args == ()

    def test_limit_and_skip(self):
        descriptor = extract(Book(genre="G"))

        assert generate_find(descriptor, "sqlite", limit=2).sql.endswith("WHERE genre = ? LIMIT 2;")
        assert generate_find(descriptor, "sqlite", limit=2, skip=4).sql.endswith(
            "LIMIT 2 OFFSET 4;"
        )

    def test_skip_without_limit_is_ignored(self):
        stmt = generate_find(extract(Book(genre="G")), "sqlite", limit=0, skip=4)

        assert "OFFSET" not in stmt.sql
        assert "LIMIT" not in stmt.sql


class TestUpdate:
    """Test UPDATE generation."""

    def test_scenario_sqlite(self):
        stmt = generate_update(extract(Book(author="A")), extract(Book(author="A2")), "sqlite")

        assert stmt.sql == "UPDATE books SET author = ? WHERE author = ?;"
        assert stmt.args == ("A2", "A")

    def test_postgres_numbering_continues(self):
        query = extract(Book(genre="G", author="A"))
        data = extract(Book(id=5, title="T2", preface="P2"))
        stmt = generate_update(query, data, "postgres")

        # id is never set; SET comes first, WHERE continues numbering
        assert stmt.sql == (
            "UPDATE books SET title = $1, preface = $2 WHERE author = $3 AND genre = $4;"
        )
        assert stmt.args == ("T2", "P2", "A", "G")

    def test_nothing_to_set(self):
        with pytest.raises(GenerationError):
            generate_update(extract(Book(author="A")), extract(Book(id=3)), "sqlite")

    def test_no_condition(self):
        with pytest.raises(GenerationError):
            generate_update(extract(Book()), extract(Book(title="T")), "sqlite")


class TestDelete:
    """Test DELETE generation."""

    def test_filtered(self):
        stmt = generate_delete(extract(Book(id=0, genre="G")), "postgres")

        assert stmt.sql == "DELETE FROM books WHERE genre = $1;"
        assert stmt.args == ("G",)

    def test_no_condition(self):
        with pytest.raises(GenerationError):
            generate_delete(extract(Book()), "sqlite")

    @pytest.mark.parametrize("record", [Book(), Book(id=3, author="A"), Tag(label="x")])
    def test_delete_all(self, record):
        stmt = generate_delete_all(extract(record))

        assert "WHERE" not in stmt.sql
        assert stmt.sql.startswith("DELETE FROM ")
        assert stmt.args == ()
