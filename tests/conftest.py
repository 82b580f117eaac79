"""Shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from flatorm import SQLiteConnector, create_table, insert_many
from tests.records import Book


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database file."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield db_path
    # Cleanup
    Path(db_path).unlink(missing_ok=True)


@pytest.fixture
def sqlite_connector(temp_db):
    """Create a connected SQLite connector."""
    connector = SQLiteConnector({"database": temp_db})
    connector.connect()
    yield connector
    connector.disconnect()


@pytest.fixture
def library(sqlite_connector):
    """A books table holding three books."""
    create_table(sqlite_connector, Book())
    insert_many(
        sqlite_connector,
        [
            Book(
                author="Alin Devon",
                date_published="2056-34-34",
                title="Python Tutorial",
                genre="Programming",
                preface="Learning Python",
            ),
            Book(
                author="Cornel Marcon",
                date_published="2020-05-23",
                title="SQL Tutorial",
                genre="SQL",
                preface="Learning SQLITE3",
            ),
            Book(
                author="Razvan Rapden",
                date_published="2020-23-04",
                title="Java Tutorial",
                genre="Programming",
                preface="Learning Java",
            ),
        ],
    )
    return sqlite_connector
