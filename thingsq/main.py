"""Command-line entry point: ``thingsq [COMMAND]``."""

import argparse
import importlib.util
import sys

from thingsq.config import Settings, get_settings
from thingsq.exceptions import (
    MissingDependencyError,
    QueryError,
    StoreNotFoundError,
    UnknownViewError,
)
from thingsq.logging_config import configure, get_logger

log = get_logger("thingsq")

# Command -> usage note; commands without a note print bare.
COMMANDS = {
    "inbox": "",
    "today": "",
    "upcoming": "",
    "next": "",
    "anytime": "",
    "someday": "",
    "completed": "",
    "all": "show all tasks",
    "nextish": "show next tasks that are also in someday projects",
    "old": "show 20 tasks ordered by creation date",
    "due": "show 20 tasks ordered by due date",
    "repeating": "show all repeating tasks",
    "subtasks": "show all subtasks",
    "projects": "show all projects ordered by creation date",
    "csv": "show all tasks as semicolon separated values",
    "stat": "show an overview of the numbers of tasks",
}

EXIT_OK = 0
EXIT_MISSING_DEPENDENCY = 1
EXIT_MISSING_STORE = 2
EXIT_QUERY_FAILED = 3


def usage(prog: str = "thingsq") -> str:
    lines = [
        f"usage: {prog} [COMMAND]",
        "",
        "List to do items from your Things database given a focus area.",
        "",
        "COMMAND:",
        "  inbox",
        "  today",
        "  upcoming",
        "  next / anytime",
    ]
    for name, note in COMMANDS.items():
        if name in ("inbox", "today", "upcoming", "next", "anytime"):
            continue
        if not note:
            lines.append(f"  {name}")
            continue
        pad = "\t" if len(name) >= 6 else "\t\t"
        lines.append(f"  {name}{pad}({note})")
    return "\n".join(lines) + "\n"


def require_sqlite() -> None:
    """Fail unless the sqlite3 query engine can be loaded."""
    if importlib.util.find_spec("_sqlite3") is None:
        raise MissingDependencyError("SQLite3 is required but could not be found.")


def render_command(command: str, settings: Settings) -> str:
    """Run one command against the store and return its full output."""
    from thingsq import render, stats, store, views

    with store.open_store(settings.db_path.expanduser()) as conn:
        if command == "stat":
            return render.stats_report(stats.collect(conn))
        if command == "csv":
            return render.csv_report(
                store.fetch(conn, views.CSV_TASKS),
                store.fetch(conn, views.CSV_CHECKLIST),
            )
        return render.lines(store.fetch(conn, views.get_view(command)))


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    parser = argparse.ArgumentParser(prog="thingsq", add_help=False)
    parser.add_argument("command", nargs="?", default="")
    args, extra = parser.parse_known_args(argv)

    settings = settings or get_settings()
    configure(settings.log_level)

    try:
        require_sqlite()
    except MissingDependencyError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_MISSING_DEPENDENCY

    if extra or args.command not in COMMANDS:
        sys.stdout.write(usage(parser.prog))
        return EXIT_OK

    try:
        output = render_command(args.command, settings)
    except StoreNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_MISSING_STORE
    except UnknownViewError:
        sys.stdout.write(usage(parser.prog))
        return EXIT_OK
    except QueryError as e:
        log.debug("Query failure for %s", args.command, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_QUERY_FAILED

    sys.stdout.write(output)
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
