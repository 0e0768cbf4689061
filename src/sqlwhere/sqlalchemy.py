"""Optional SQLAlchemy integration for running a WhereBuilder's clause

Requires the ``sqlalchemy`` extra (and ``pandas`` for fetch_df). The
connection's DB-API driver must use the qmark paramstyle, as sqlite3 does.
"""

import logging
from typing import Any

import pandas as pd
from sqlalchemy import Connection, CursorResult

from sqlwhere.builder import WhereBuilder

logger = logging.getLogger(__name__)


def render(template: str, builder: WhereBuilder) -> tuple[str, tuple[Any, ...]]:
    """Splice the builder's clause into template's ``{where}`` field

    Example:
        >>> where = WhereBuilder().equals("id", 5)
        >>> render("SELECT * FROM people{where} ORDER BY id", where)
        ('SELECT * FROM people WHERE id = ? ORDER BY id', (5,))
    """
    clause, bindings = builder.as_tuple()
    return template.format(where=clause), bindings


def execute_where(
    connection: Connection,
    template: str,
    builder: WhereBuilder
) -> CursorResult:
    """Render template with the builder and execute it on connection"""
    sql, bindings = render(template, builder)
    logger.debug(f"Executing {sql!r} with {len(bindings)} binding(s)")
    return connection.exec_driver_sql(sql, bindings)


def fetch_df(
    connection: Connection,
    template: str,
    builder: WhereBuilder,
    lowercase_columns: bool = True
) -> pd.DataFrame:
    """Execute and return all rows as a DataFrame with optional column casing"""
    result = execute_where(connection, template, builder)
    df = pd.DataFrame(result.fetchall(), columns=list(result.keys()))
    if lowercase_columns and len(df.columns) > 0:
        df.columns = df.columns.str.lower()
    return df
