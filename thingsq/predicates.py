"""Named conditions over a task record, compiled to parameterized SQL.

Every leaf is a single equality or NOT NULL test on one column. Leaves combine
with ``&`` (AND) and ``|`` (OR); there is no negation. ``compile()`` returns a
``(sql, params)`` pair with all values bound as ``?`` placeholders, optionally
qualifying columns with a table alias so the same predicate works on joins.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from thingsq.models.things import Start, Status, TaskType


class Predicate(ABC):
    @abstractmethod
    def compile(self, alias: str | None = None) -> tuple[str, tuple]:
        """Return ``(sql, params)``, qualifying columns with ``alias`` if given."""

    def __and__(self, other: "Predicate") -> "Predicate":
        return All(self, other)

    def __or__(self, other: "Predicate") -> "Predicate":
        return Any(self, other)

    def on(self, alias: str) -> "Predicate":
        return Qualified(alias, self)


def _column(name: str, alias: str | None) -> str:
    return f"{alias}.{name}" if alias else name


@dataclass(frozen=True)
class Eq(Predicate):
    column: str
    value: int

    def compile(self, alias=None):
        return f"{_column(self.column, alias)} = ?", (int(self.value),)


@dataclass(frozen=True)
class NotNull(Predicate):
    column: str

    def compile(self, alias=None):
        return f"{_column(self.column, alias)} IS NOT NULL", ()


@dataclass(frozen=True)
class ProjectMatches(Predicate):
    """The task's parent project exists and satisfies ``condition``."""

    condition: Predicate

    def compile(self, alias=None):
        if alias is None:
            raise ValueError("ProjectMatches needs the outer task table to be aliased")
        inner, params = self.condition.compile("p")
        outer = _column("project", alias)
        return f"{outer} IN (SELECT p.uuid FROM TMTask p WHERE p.uuid = {outer} AND {inner})", params


@dataclass(frozen=True)
class Qualified(Predicate):
    """Pins ``condition`` to one table alias regardless of the caller's alias."""

    alias: str
    condition: Predicate

    def compile(self, alias=None):
        return self.condition.compile(self.alias)


class _Junction(Predicate):
    joiner = ""

    def __init__(self, *parts: Predicate):
        flat: list[Predicate] = []
        for part in parts:
            # (a & b) & c -> All(a, b, c)
            if type(part) is type(self):
                flat.extend(part.parts)
            else:
                flat.append(part)
        self.parts = tuple(flat)

    def __eq__(self, other):
        return type(other) is type(self) and other.parts == self.parts

    def __hash__(self):
        return hash((type(self), self.parts))

    def __repr__(self):
        return f"{type(self).__name__}{self.parts!r}"

    def compile(self, alias=None):
        fragments = []
        params: tuple = ()
        for part in self.parts:
            sql, part_params = part.compile(alias)
            if isinstance(part, _Junction) and len(part.parts) > 1:
                sql = f"({sql})"
            fragments.append(sql)
            params += part_params
        return f" {self.joiner} ".join(fragments), params


class All(_Junction):
    joiner = "AND"


class Any(_Junction):
    joiner = "OR"


def is_not_null(column: str) -> Predicate:
    return NotNull(column)


def project_matches(condition: Predicate) -> Predicate:
    return ProjectMatches(condition)


NOT_TRASHED = Eq("trashed", 0)
IS_OPEN = Eq("status", Status.OPEN)
IS_COMPLETED = Eq("status", Status.COMPLETED)
NOT_STARTED = Eq("start", Start.NOT_STARTED)
IS_STARTED = Eq("start", Start.STARTED)
IS_POSTPONED = Eq("start", Start.POSTPONED)
IS_TASK = Eq("type", TaskType.TASK)
IS_PROJECT = Eq("type", TaskType.PROJECT)
