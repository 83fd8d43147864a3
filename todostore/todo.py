from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Todo:
    id: int
    name: str
    email: str
    validated: bool = False  # never reset by a dedicated operation, only by an edit
    archived: bool = False


@dataclass(frozen=True)
class EditSession:
    """
    the todo currently being edited plus the values staged in the shared input fields.
    position is where the todo was shown when the edit started, todo_id is what the
    update is applied to
    """

    todo_id: int
    position: int
    name: str
    email: str


class View(Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class Outcome(Enum):
    APPLIED = "applied"
    REJECTED = "rejected"  # empty or whitespace-only input
    NOT_FOUND = "not_found"  # position out of range or unknown id

    @property
    def applied(self) -> bool:
        return self is Outcome.APPLIED
