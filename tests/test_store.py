import sqlite3
from contextlib import closing

import pytest

from thingsq import store, views
from thingsq.exceptions import QueryError, StoreNotFoundError


class TestOpenStore:
    def test_missing_file(self, tmp_path):
        with pytest.raises(StoreNotFoundError, match="not found"):
            with store.open_store(tmp_path / "nope.sqlite3"):
                pass

    def test_directory_is_not_a_store(self, tmp_path):
        with pytest.raises(StoreNotFoundError):
            with store.open_store(tmp_path):
                pass

    def test_connection_is_read_only(self, conn):
        with pytest.raises(sqlite3.OperationalError, match="readonly"):
            conn.execute("INSERT INTO TMArea (uuid, title) VALUES ('x', 'y')")

    def test_path_with_spaces(self, tmp_path):
        path = tmp_path / "Application Support" / "Things.sqlite3"
        path.parent.mkdir()
        with closing(sqlite3.connect(path)) as c:
            c.execute("CREATE TABLE t (x)")
        with store.open_store(path) as conn:
            assert conn.execute("SELECT COUNT(*) FROM t").fetchone() == (0,)

    def test_connection_closed_on_error(self, things):
        with pytest.raises(RuntimeError):
            with store.open_store(things.path) as conn:
                raise RuntimeError("boom")
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")


class TestCompileView:
    def test_values_are_bound_not_inlined(self):
        sql, params = store.compile_view(views.DUE)
        assert "?" in sql
        assert sql.endswith("ORDER BY t.dueDate LIMIT ?")
        assert params == (0, 0, 20)

    def test_no_order_or_limit(self):
        sql, _ = store.compile_view(views.INBOX)
        assert sql.startswith("SELECT t.title FROM TMTask t WHERE ")
        assert "ORDER BY" not in sql
        assert "LIMIT" not in sql

    def test_cached(self):
        assert store.compile_view(views.TODAY) is store.compile_view(views.TODAY)


class TestExecute:
    def test_execute_is_lazy(self, sample, conn):
        rows = store.execute(conn, views.ALL)
        assert next(rows)
        rows.close()

    def test_count_matches_fetch(self, sample, conn):
        for view in views.VIEWS.values():
            assert store.count(conn, view) == len(store.fetch(conn, view))

    def test_first(self, sample, conn):
        assert store.first(conn, views.OLD) == ("2019-05-05", "Write report")

    def test_first_of_empty_view(self, conn):
        assert store.first(conn, views.FUTURE) is None

    def test_missing_table_raises_query_error(self, tmp_path):
        path = tmp_path / "empty.sqlite3"
        with closing(sqlite3.connect(path)) as c:
            c.execute("CREATE TABLE other (x)")
        with store.open_store(path) as conn:
            with pytest.raises(QueryError, match="no such table"):
                store.fetch(conn, views.INBOX)
            with pytest.raises(QueryError):
                store.count(conn, views.INBOX)
