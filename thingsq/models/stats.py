from pydantic import BaseModel


class Stats(BaseModel):
    inbox: int
    today: int
    upcoming: int
    next: int
    someday: int
    completed: int
    tasks: int
    subtasks: int
    projects: int
    repeating: int
    nextish: int
    oldest: tuple[str | None, str | None] | None = None
    farthest: tuple[str | None, str | None] | None = None
