import json
import logging
from dataclasses import dataclass, field, replace
from typing import Callable

from marshmallow import ValidationError

from kvstore.kvstore import KeyValueStore

from .todo import EditSession, Outcome, Todo, View
from .todo_schema import dump_todos, load_todos

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"

Listener = Callable[["TodoStore"], None]


@dataclass
class TodoStore:
    """
    in-memory todo collection mirrored into a single slot of a key-value store.

    every intent operation returns an Outcome instead of raising: empty input and
    positions / ids which do not exist leave the collection and the storage untouched.
    each applied change of the collection is persisted before the listeners are called.
    """

    name: str
    kvstore: KeyValueStore
    storage_key: str = DEFAULT_STORAGE_KEY

    todos: list[Todo] = field(default_factory=list, init=False)
    last_id: int = field(default=0, init=False)
    edit_session: EditSession | None = field(default=None, init=False)
    listeners: list[Listener] = field(default_factory=list, init=False)

    def hydrate(self) -> None:
        raw = self.kvstore.get_item(self.storage_key)
        if raw is None:
            logger.info("%s: nothing stored under %r", self.name, self.storage_key)
            return
        try:
            todos = load_todos(raw)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(
                "%s: ignoring unreadable content under %r: %s",
                self.name,
                self.storage_key,
                e,
            )
            return
        self.todos = todos
        # ids are handed out above everything already stored
        self.last_id = max((t.id for t in todos), default=0)
        logger.info("%s: hydrated %d todos", self.name, len(todos))

    def persist(self) -> None:
        self.kvstore.set_item(self.storage_key, dump_todos(self.todos))

    def add_listener(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def submit(self, name: str, email: str) -> Outcome:
        # adds a todo, or updates the edited one while an edit session is open
        if not name.strip() or not email.strip():
            return Outcome.REJECTED

        session = self.edit_session
        if session is None:
            self.last_id += 1
            self.todos.append(Todo(self.last_id, name, email))
            return self._collection_changed(f"added todo {self.last_id}")

        self.edit_session = None
        index = self._index_of(session.todo_id)
        if index is None:
            # removed while being edited
            self._notify()
            return Outcome.NOT_FOUND
        # an update starts over: not validated, not archived
        self.todos[index] = Todo(session.todo_id, name, email)
        return self._collection_changed(f"updated todo {session.todo_id}")

    def begin_edit(self, position: int, view: View = View.ACTIVE) -> Outcome:
        todo = self._at(position, view)
        if todo is None:
            return Outcome.NOT_FOUND
        self.edit_session = EditSession(todo.id, position, todo.name, todo.email)
        self._notify()
        return Outcome.APPLIED

    def begin_edit_todo(self, todo_id: int) -> Outcome:
        todo = self.get_todo(todo_id)
        if todo is None:
            return Outcome.NOT_FOUND
        position = self.get_view(view_of(todo)).index(todo)
        return self.begin_edit(position, view_of(todo))

    def cancel_edit(self) -> Outcome:
        self.edit_session = None
        self._notify()
        return Outcome.APPLIED

    def remove(self, todo_id: int) -> Outcome:
        index = self._index_of(todo_id)
        if index is None:
            return Outcome.NOT_FOUND
        del self.todos[index]
        return self._collection_changed(f"removed todo {todo_id}")

    def validate(self, position: int) -> Outcome:
        return self._validate(self._at(position, View.ACTIVE))

    def validate_todo(self, todo_id: int) -> Outcome:
        return self._validate(self.get_todo(todo_id))

    def toggle_archive(self, position: int, view: View = View.ACTIVE) -> Outcome:
        return self._toggle_archive(self._at(position, view))

    def toggle_archive_todo(self, todo_id: int) -> Outcome:
        return self._toggle_archive(self.get_todo(todo_id))

    def active_view(self) -> list[Todo]:
        return [t for t in self.todos if not t.archived]

    def archived_view(self) -> list[Todo]:
        return [t for t in self.todos if t.archived]

    def get_view(self, view: View) -> list[Todo]:
        if view is View.ACTIVE:
            return self.active_view()
        if view is View.ARCHIVED:
            return self.archived_view()
        raise ValueError(f"unknown view: {view}")

    def get_todo(self, todo_id: int) -> Todo | None:
        index = self._index_of(todo_id)
        return self.todos[index] if index is not None else None

    def _validate(self, todo: Todo | None) -> Outcome:
        if todo is None:
            return Outcome.NOT_FOUND
        self._replace(todo, validated=True)
        return self._collection_changed(f"validated todo {todo.id}")

    def _toggle_archive(self, todo: Todo | None) -> Outcome:
        if todo is None:
            return Outcome.NOT_FOUND
        self._replace(todo, archived=not todo.archived)
        return self._collection_changed(f"toggled archive of todo {todo.id}")

    def _at(self, position: int, view: View) -> Todo | None:
        todos = self.get_view(view)
        if 0 <= position < len(todos):
            return todos[position]
        return None

    def _index_of(self, todo_id: int) -> int | None:
        for i, t in enumerate(self.todos):
            if t.id == todo_id:
                return i
        return None

    def _replace(self, todo: Todo, **changes) -> None:
        index = self._index_of(todo.id)
        assert index is not None
        self.todos[index] = replace(todo, **changes)

    def _collection_changed(self, action: str) -> Outcome:
        self.persist()
        logger.debug("%s: %s, %d todos persisted", self.name, action, len(self.todos))
        self._notify()
        return Outcome.APPLIED

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self)


def view_of(todo: Todo) -> View:
    return View.ARCHIVED if todo.archived else View.ACTIVE
