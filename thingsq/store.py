"""Read-only access to the Things database and view execution."""

import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from urllib.parse import quote

from thingsq.exceptions import QueryError, StoreNotFoundError
from thingsq.logging_config import get_logger
from thingsq.views import View

log = get_logger("thingsq.store")


def require_store(path: Path) -> None:
    if not (path.is_file() and os.access(path, os.R_OK)):
        raise StoreNotFoundError(f"Things database not found at {path}.")


@contextmanager
def open_store(path: Path) -> Iterator[sqlite3.Connection]:
    """Open the database read-only; the connection is closed on exit."""
    require_store(path)
    uri = f"file:{quote(str(path.resolve()))}?mode=ro"
    try:
        conn = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as e:
        raise StoreNotFoundError(f"Things database not found at {path}: {e}") from e
    log.debug("Opened %s read-only", path)
    try:
        yield conn
    finally:
        conn.close()


@lru_cache
def compile_view(view: View) -> tuple[str, tuple]:
    """Build the parameterized SELECT for a view. Cached per view."""
    where, params = view.where.compile(view.alias)
    sql = f"SELECT {', '.join(view.columns)} FROM {view.source} WHERE {where}"
    if view.order_by:
        sql += f" ORDER BY {', '.join(view.order_by)}"
    if view.limit is not None:
        sql += " LIMIT ?"
        params += (view.limit,)
    return sql, params


def _run(conn: sqlite3.Connection, sql: str, params: tuple) -> sqlite3.Cursor:
    log.debug("SQL: %s %s", sql, params)
    try:
        return conn.execute(sql, params)
    except sqlite3.Error as e:
        raise QueryError(f"Query failed: {e}") from e


def execute(conn: sqlite3.Connection, view: View) -> Iterator[tuple]:
    """Yield the view's rows lazily, in the view's order."""
    sql, params = compile_view(view)
    cursor = _run(conn, sql, params)
    try:
        yield from cursor
    except sqlite3.Error as e:
        raise QueryError(f"Query failed while reading {view.name}: {e}") from e
    finally:
        cursor.close()


def fetch(conn: sqlite3.Connection, view: View) -> list[tuple]:
    """All rows of a view, or an exception; never a partial result."""
    return list(execute(conn, view))


def count(conn: sqlite3.Connection, view: View) -> int:
    sql, params = compile_view(view)
    row = _run(conn, f"SELECT COUNT(*) FROM ({sql})", params).fetchone()
    return row[0]


def first(conn: sqlite3.Connection, view: View) -> tuple | None:
    rows = execute(conn, view)
    try:
        return next(rows, None)
    finally:
        rows.close()
