"""Pytest configuration and shared fixtures."""

import pytest
from sqlalchemy import create_engine

from sqlwhere import WhereBuilder


PEOPLE = [
    (1, "anna", 17, "A", None),
    (2, "joanna", 18, "B", "joanna@example.com"),
    (3, "bob", 40, "A", "bob@example.com"),
    (4, "hannah", 65, "C", None),
    (5, "carl", 70, "B", "carl@example.com"),
]


@pytest.fixture
def where() -> WhereBuilder:
    """An empty builder."""
    return WhereBuilder()


@pytest.fixture
def sqlite_connection():
    """
    Connection to an in-memory SQLite database with a populated people table.

    SQLite uses the qmark paramstyle, so rendered clauses run unchanged.
    """
    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE people ("
            "id INTEGER PRIMARY KEY, name TEXT, age INTEGER, "
            "status TEXT, email TEXT)"
        )
        for row in PEOPLE:
            conn.exec_driver_sql("INSERT INTO people VALUES (?, ?, ?, ?, ?)", row)
        yield conn
    engine.dispose()
