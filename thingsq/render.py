"""Text renderings of view rows."""

from collections.abc import Iterable

from thingsq.models.stats import Stats
from thingsq.views import CSV_HEADER


def _cell(value) -> str:
    return "" if value is None else str(value)


def lines(rows: Iterable[tuple]) -> str:
    """One line per row, fields separated by a tab."""
    return "".join("\t".join(_cell(v) for v in row) + "\n" for row in rows)


CSV_SEPARATOR = ";"
CSV_ROW_END = "\r\n"


def _needs_quotes(text: str) -> bool:
    # Control characters, space, double and single quote, DEL and any
    # non-ASCII character force quoting, as does an empty string.
    if not text or CSV_SEPARATOR in text:
        return True
    return any(ch <= " " or ch in "\"'" or ch >= "\x7f" for ch in text)


def csv_field(value) -> str:
    """One field as the sqlite3 shell writes it in csv mode; NULL is empty."""
    if value is None:
        return ""
    text = str(value)
    if _needs_quotes(text):
        return '"' + text.replace('"', '""') + '"'
    return text


def _csv_rows(rows: Iterable[tuple]) -> str:
    return "".join(CSV_SEPARATOR.join(csv_field(v) for v in row) + CSV_ROW_END for row in rows)


def csv_report(task_rows: Iterable[tuple], checklist_rows: Iterable[tuple]) -> str:
    """Semicolon separated export: header, open tasks, then open checklist items.

    The header line ends in a bare newline and data rows in CRLF, so existing
    consumers of the export see the same bytes as before.
    """
    return CSV_HEADER + "\n" + _csv_rows(task_rows) + _csv_rows(checklist_rows)


def _pair(row: tuple | None) -> str:
    return "" if row is None else "\t".join(_cell(v) for v in row)


def stats_report(stats: Stats) -> str:
    return (
        f"Inbox\t\t: {stats.inbox}\n"
        "\n"
        f"Today\t\t: {stats.today}\n"
        f"Upcoming\t: {stats.upcoming}\n"
        f"Next\t\t: {stats.next}\n"
        f"Someday\t\t: {stats.someday}\n"
        "\n"
        f"Completed\t: {stats.completed}\n"
        "\n"
        f"Tasks\t\t: {stats.tasks}\n"
        f"Subtasks\t: {stats.subtasks}\n"
        f"Projects\t: {stats.projects}\n"
        f"Repeating\t: {stats.repeating}\n"
        f"Nextish\t\t: {stats.nextish}\n"
        "\n"
        f"Oldest     \t: {_pair(stats.oldest)}\n"
        f"Farest     \t: {_pair(stats.farthest)}\n"
    )
