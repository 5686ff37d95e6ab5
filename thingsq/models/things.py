"""Records of the Things database (read-only)."""

from enum import IntEnum

from pydantic import BaseModel, Field


class Status(IntEnum):
    OPEN = 0
    CANCELED = 2
    COMPLETED = 3


class Start(IntEnum):
    NOT_STARTED = 0
    STARTED = 1
    POSTPONED = 2


class TaskType(IntEnum):
    TASK = 0
    PROJECT = 1
    HEADING = 2


class Area(BaseModel):
    uuid: str
    title: str


class Task(BaseModel):
    """A row of TMTask. Projects are tasks with type=PROJECT."""

    uuid: str
    title: str
    trashed: bool = False
    status: int = Status.OPEN
    start: int = Start.NOT_STARTED
    type: int = TaskType.TASK
    area: str | None = None
    project: str | None = None
    start_date: float | None = Field(default=None, alias="startDate")
    due_date: float | None = Field(default=None, alias="dueDate")
    creation_date: float | None = Field(default=None, alias="creationDate")
    user_modification_date: float | None = Field(default=None, alias="userModificationDate")
    recurrence_rule: str | None = Field(default=None, alias="recurrenceRule")
    today_index: int = Field(default=0, alias="todayIndex")

    model_config = {"populate_by_name": True, "frozen": True}


class ChecklistItem(BaseModel):
    """A row of TMChecklistItem, owned by a task."""

    uuid: str
    title: str
    status: int = Status.OPEN
    task: str | None = None
    creation_date: float | None = Field(default=None, alias="creationDate")
    user_modification_date: float | None = Field(default=None, alias="userModificationDate")

    model_config = {"populate_by_name": True, "frozen": True}


TABLES: dict[type[BaseModel], str] = {
    Task: "TMTask",
    ChecklistItem: "TMChecklistItem",
    Area: "TMArea",
}


def table_for(record: BaseModel) -> str:
    return TABLES[type(record)]


def row_for(record: BaseModel) -> dict:
    """Column name -> value mapping, using the store's column names."""
    return record.model_dump(by_alias=True, mode="json")
