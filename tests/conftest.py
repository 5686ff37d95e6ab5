import calendar
import sqlite3
from contextlib import closing
from datetime import date

import pytest

from thingsq.config import Settings
from thingsq.models.things import Area, ChecklistItem, Start, Status, Task, TaskType, row_for, table_for
from thingsq.store import open_store

# Subset of the Things 3 schema that the views read.
SCHEMA = """
CREATE TABLE TMTask (
    uuid TEXT PRIMARY KEY,
    title TEXT,
    trashed INTEGER DEFAULT 0,
    status INTEGER DEFAULT 0,
    start INTEGER DEFAULT 0,
    type INTEGER DEFAULT 0,
    area TEXT,
    project TEXT,
    startDate REAL,
    dueDate REAL,
    creationDate REAL,
    userModificationDate REAL,
    recurrenceRule BLOB,
    todayIndex INTEGER DEFAULT 0
);
CREATE TABLE TMChecklistItem (
    uuid TEXT PRIMARY KEY,
    title TEXT,
    status INTEGER DEFAULT 0,
    task TEXT,
    creationDate REAL,
    userModificationDate REAL
);
CREATE TABLE TMArea (
    uuid TEXT PRIMARY KEY,
    title TEXT
);
"""


def ts(day: str) -> float:
    """Epoch seconds for midnight UTC of an ISO date."""
    return float(calendar.timegm(date.fromisoformat(day).timetuple()))


class ThingsDB:
    """A throwaway Things database seeded from record models."""

    def __init__(self, path):
        self.path = path
        with closing(sqlite3.connect(path)) as conn:
            conn.executescript(SCHEMA)

    def add(self, *records):
        with closing(sqlite3.connect(self.path)) as conn, conn:
            for record in records:
                row = row_for(record)
                columns = ", ".join(row)
                marks = ", ".join("?" for _ in row)
                conn.execute(
                    f"INSERT INTO {table_for(record)} ({columns}) VALUES ({marks})",
                    tuple(row.values()),
                )
        return records


@pytest.fixture
def things(tmp_path):
    return ThingsDB(tmp_path / "Things.sqlite3")


@pytest.fixture
def conn(things):
    with open_store(things.path) as c:
        yield c


@pytest.fixture
def settings(things):
    return Settings(THINGSDB=str(things.path))


@pytest.fixture
def sample(things):
    """One record for most buckets, plus noise that no view should show."""
    things.add(
        Area(uuid="area1", title="Work"),
        Task(uuid="proj1", title="Launch", type=TaskType.PROJECT, start=Start.STARTED,
             creation_date=ts("2020-03-01")),
        Task(uuid="proj2", title="Dream", type=TaskType.PROJECT, start=Start.POSTPONED,
             creation_date=ts("2020-01-01")),
        Task(uuid="inbox1", title="Call mom", creation_date=ts("2021-02-01")),
        Task(uuid="today1", title="Write report", start=Start.STARTED, area="area1",
             start_date=ts("2021-01-01"), creation_date=ts("2019-05-05"), today_index=2),
        Task(uuid="today2", title="Review PR", start=Start.STARTED, project="proj1",
             start_date=ts("2021-01-01"), creation_date=ts("2019-06-06"), today_index=1,
             due_date=ts("2021-02-10")),
        Task(uuid="up1", title="Dentist", start=Start.POSTPONED,
             start_date=ts("2021-06-15"), creation_date=ts("2020-02-02")),
        Task(uuid="rep1", title="Water plants", start=Start.POSTPONED,
             recurrence_rule="weekly", creation_date=ts("2018-01-01")),
        Task(uuid="some1", title="Learn piano", start=Start.POSTPONED, project="proj2"),
        Task(uuid="nextish1", title="Sketch logo", start=Start.STARTED, project="proj2",
             creation_date=ts("2020-07-07")),
        Task(uuid="done1", title="Pay rent", status=Status.COMPLETED),
        Task(uuid="gone1", title="Trashed thing", trashed=True, start=Start.STARTED,
             area="area1", creation_date=ts("2000-01-01"), start_date=ts("2030-01-01")),
        ChecklistItem(uuid="c1", title="Outline", task="today1"),
        ChecklistItem(uuid="c2", title="Already done", task="today1", status=Status.COMPLETED),
        ChecklistItem(uuid="c3", title="Orphaned by completion", task="done1"),
    )
    return things
