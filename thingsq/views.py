"""The fixed catalog of named views over the Things database.

A view is a frozen value: source tables, projected columns, a predicate,
ordering and an optional row limit. Nothing here touches the store; see
``thingsq.store`` for execution.
"""

from pydantic import BaseModel, ConfigDict

from thingsq.exceptions import UnknownViewError
from thingsq.predicates import (
    IS_COMPLETED,
    IS_OPEN,
    IS_POSTPONED,
    IS_PROJECT,
    IS_STARTED,
    IS_TASK,
    NOT_STARTED,
    NOT_TRASHED,
    Predicate,
    is_not_null,
    project_matches,
)

TASKS = "TMTask t"
CHECKLIST = "TMChecklistItem c LEFT OUTER JOIN TMTask t ON c.task = t.uuid"
TASKS_WITH_PARENTS = (
    "TMTask t"
    " LEFT OUTER JOIN TMTask p ON t.project = p.uuid"
    " LEFT OUTER JOIN TMArea a ON t.area = a.uuid"
)

TITLE = ("t.title",)


def utc_date(column: str) -> str:
    """SQL expression rendering an epoch-seconds column as YYYY-MM-DD (UTC)."""
    return f"date({column}, 'unixepoch')"


class View(BaseModel):
    name: str
    source: str = TASKS
    alias: str = "t"
    columns: tuple[str, ...] = TITLE
    where: Predicate
    order_by: tuple[str, ...] = ()
    limit: int | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


OPEN_TASK = NOT_TRASHED & IS_OPEN & IS_TASK
OPEN_CHECKLIST_ITEM = IS_OPEN.on("c") & IS_OPEN.on("t")

INBOX = View(
    name="inbox",
    where=NOT_TRASHED & IS_TASK & NOT_STARTED & IS_OPEN,
)

TODAY = View(
    name="today",
    where=NOT_TRASHED & IS_OPEN & IS_TASK & IS_STARTED & is_not_null("startDate"),
    order_by=("t.startDate", "t.todayIndex"),
)

UPCOMING = View(
    name="upcoming",
    where=(
        NOT_TRASHED & IS_OPEN & IS_TASK & IS_POSTPONED
        & (is_not_null("startDate") | is_not_null("recurrenceRule"))
    ),
    order_by=("t.startDate", "t.todayIndex"),
)

NEXT = View(
    name="next",
    where=(
        NOT_TRASHED & IS_TASK & IS_OPEN & IS_STARTED
        & (is_not_null("area") | project_matches(IS_STARTED))
    ),
    order_by=("t.todayIndex",),
)

SOMEDAY = View(
    name="someday",
    where=NOT_TRASHED & IS_TASK & IS_POSTPONED & IS_OPEN,
)

COMPLETED = View(
    name="completed",
    where=NOT_TRASHED & IS_TASK & IS_COMPLETED,
)

NEXTISH = View(
    name="nextish",
    where=NOT_TRASHED & IS_STARTED & IS_OPEN & IS_TASK,
)

ALL = View(
    name="all",
    where=OPEN_TASK,
)

SUBTASKS = View(
    name="subtasks",
    source=CHECKLIST,
    alias="c",
    columns=("c.title",),
    where=OPEN_CHECKLIST_ITEM,
)

OLD = View(
    name="old",
    columns=(utc_date("t.creationDate"), "t.title"),
    where=NOT_TRASHED & IS_OPEN & IS_STARTED,
    order_by=("t.creationDate",),
    limit=20,
)

OLDEST = OLD.model_copy(update={"name": "oldest", "limit": 1})

DUE = View(
    name="due",
    columns=(utc_date("t.dueDate"), "t.title"),
    where=NOT_TRASHED & IS_OPEN & is_not_null("dueDate"),
    order_by=("t.dueDate",),
    limit=20,
)

FUTURE = View(
    name="future",
    columns=(utc_date("t.startDate"), "t.title"),
    where=NOT_TRASHED & IS_OPEN & is_not_null("startDate"),
    order_by=("t.startDate DESC",),
    limit=1,
)

REPEATING = View(
    name="repeating",
    where=NOT_TRASHED & IS_OPEN & IS_POSTPONED & is_not_null("recurrenceRule"),
    order_by=("t.creationDate",),
)

PROJECTS = View(
    name="projects",
    where=NOT_TRASHED & IS_OPEN & IS_PROJECT,
    order_by=("t.creationDate",),
)

CSV_HEADER = 'Title;"Creation Date";"Modification Date";"Due Date";"Start Date";Project;Area'

CSV_TASKS = View(
    name="csv-tasks",
    source=TASKS_WITH_PARENTS,
    columns=(
        "t.title",
        utc_date("t.creationDate"),
        utc_date("t.userModificationDate"),
        utc_date("t.dueDate"),
        utc_date("t.startDate"),
        "p.title",
        "a.title",
    ),
    where=OPEN_TASK,
)

# Checklist rows keep their historical five-column shape under the
# seven-column header; consumers of the export depend on it.
CSV_CHECKLIST = View(
    name="csv-checklist",
    source=CHECKLIST,
    alias="c",
    columns=(
        "c.title",
        utc_date("c.creationDate"),
        utc_date("c.userModificationDate"),
        "''",
        "t.title",
    ),
    where=OPEN_CHECKLIST_ITEM,
)

VIEWS: dict[str, View] = {
    view.name: view
    for view in (
        INBOX, TODAY, UPCOMING, NEXT, SOMEDAY, COMPLETED, NEXTISH, ALL, SUBTASKS,
        OLD, OLDEST, DUE, FUTURE, REPEATING, PROJECTS, CSV_TASKS, CSV_CHECKLIST,
    )
}
VIEWS["anytime"] = NEXT


def get_view(name: str) -> View:
    try:
        return VIEWS[name]
    except KeyError:
        raise UnknownViewError(f"Unknown view: {name}") from None
