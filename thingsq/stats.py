"""Summary counts across the catalog, as printed by ``thingsq stat``."""

import sqlite3

from thingsq import render, store, views
from thingsq.models.stats import Stats

# Stats field -> view counted for it, in report order.
COUNTED = (
    ("inbox", views.INBOX),
    ("today", views.TODAY),
    ("upcoming", views.UPCOMING),
    ("next", views.NEXT),
    ("someday", views.SOMEDAY),
    ("completed", views.COMPLETED),
    ("tasks", views.ALL),
    ("subtasks", views.SUBTASKS),
    ("projects", views.PROJECTS),
    ("repeating", views.REPEATING),
    ("nextish", views.NEXTISH),
)


def line_count(conn: sqlite3.Connection, view: views.View) -> int:
    """Lines the view prints; a title with embedded newlines counts once per line."""
    return render.lines(store.fetch(conn, view)).count("\n")


def collect(conn: sqlite3.Connection) -> Stats:
    counts = {field: line_count(conn, view) for field, view in COUNTED}
    return Stats(
        **counts,
        oldest=store.first(conn, views.OLDEST),
        farthest=store.first(conn, views.FUTURE),
    )
