from dataclasses import dataclass, field
from enum import Enum

from .todo import Outcome, Todo, View
from .todostore import TodoStore

# what a renderer needs to draw the two tables and the input form, without the markup


class Action(Enum):
    EDIT = "edit"
    DELETE = "delete"
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    VALIDATE = "validate"


ADD_LABEL = "Add"
UPDATE_LABEL = "Update"


@dataclass(frozen=True)
class TodoRow:
    view: View
    position: int
    todo: Todo
    highlighted: bool
    actions: tuple[Action, ...]


@dataclass(frozen=True)
class FormState:
    name: str = ""
    email: str = ""
    submit_label: str = ADD_LABEL
    show_cancel: bool = False


@dataclass(frozen=True)
class TodoListViewModel:
    active_rows: list[TodoRow] = field(default_factory=list)
    archived_rows: list[TodoRow] = field(default_factory=list)
    form: FormState = field(default_factory=FormState)

    @property
    def show_archived(self) -> bool:
        return len(self.archived_rows) > 0


def active_row(position: int, todo: Todo) -> TodoRow:
    actions = [Action.EDIT, Action.DELETE, Action.ARCHIVE]
    if not todo.validated:
        actions.append(Action.VALIDATE)
    return TodoRow(View.ACTIVE, position, todo, todo.validated, tuple(actions))


def archived_row(position: int, todo: Todo) -> TodoRow:
    return TodoRow(View.ARCHIVED, position, todo, False, (Action.UNARCHIVE,))


def form_state(store: TodoStore) -> FormState:
    session = store.edit_session
    if session is None:
        return FormState()
    return FormState(session.name, session.email, UPDATE_LABEL, show_cancel=True)


def build_view_model(store: TodoStore) -> TodoListViewModel:
    return TodoListViewModel(
        active_rows=[active_row(i, t) for i, t in enumerate(store.active_view())],
        archived_rows=[archived_row(i, t) for i, t in enumerate(store.archived_view())],
        form=form_state(store),
    )


def dispatch(store: TodoStore, row: TodoRow, action: Action) -> Outcome:
    """
    forwards a click on one of the row controls to the store.
    rows address todos by their position in the rendered table, so a row is only
    valid until the next change of the store
    """
    if action not in row.actions:
        raise ValueError(f"{action} is not offered for todo {row.todo.id}")
    if action is Action.EDIT:
        return store.begin_edit(row.position, row.view)
    if action is Action.DELETE:
        return store.remove(row.todo.id)
    if action in (Action.ARCHIVE, Action.UNARCHIVE):
        return store.toggle_archive(row.position, row.view)
    if action is Action.VALIDATE:
        return store.validate(row.position)
    raise ValueError(f"unknown action: {action}")
