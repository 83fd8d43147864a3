import pytest

from todostore.todo import Outcome, Todo, View
from todostore.todo_view_model import (
    ADD_LABEL,
    UPDATE_LABEL,
    Action,
    FormState,
    TodoRow,
    build_view_model,
    dispatch,
)
from todostore.todostore import TodoStore


@pytest.fixture
def filled(s: TodoStore) -> TodoStore:
    s.submit("Alice", "alice@x.com")
    s.submit("Bob", "bob@x.com")
    s.submit("Carol", "carol@x.com")
    return s


def test_empty_store(s: TodoStore):
    vm = build_view_model(s)
    assert vm.active_rows == []
    assert vm.archived_rows == []
    assert not vm.show_archived
    assert vm.form == FormState("", "", ADD_LABEL, show_cancel=False)


def test_rows_and_controls(filled: TodoStore):
    filled.validate(0)
    filled.toggle_archive(1)

    vm = build_view_model(filled)
    assert vm.active_rows == [
        TodoRow(
            View.ACTIVE,
            0,
            Todo(1, "Alice", "alice@x.com", validated=True),
            highlighted=True,
            actions=(Action.EDIT, Action.DELETE, Action.ARCHIVE),
        ),
        TodoRow(
            View.ACTIVE,
            1,
            Todo(3, "Carol", "carol@x.com"),
            highlighted=False,
            actions=(Action.EDIT, Action.DELETE, Action.ARCHIVE, Action.VALIDATE),
        ),
    ]
    assert vm.show_archived
    assert vm.archived_rows == [
        TodoRow(
            View.ARCHIVED,
            0,
            Todo(2, "Bob", "bob@x.com", archived=True),
            highlighted=False,
            actions=(Action.UNARCHIVE,),
        )
    ]


def test_form_during_edit(filled: TodoStore):
    filled.begin_edit(2)

    form = build_view_model(filled).form
    assert form == FormState("Carol", "carol@x.com", UPDATE_LABEL, show_cancel=True)

    filled.cancel_edit()
    assert build_view_model(filled).form.submit_label == ADD_LABEL


def test_dispatch_row_actions(filled: TodoStore):
    vm = build_view_model(filled)

    assert dispatch(filled, vm.active_rows[2], Action.VALIDATE) == Outcome.APPLIED
    assert filled.get_todo(3).validated

    assert dispatch(filled, vm.active_rows[1], Action.ARCHIVE) == Outcome.APPLIED
    vm = build_view_model(filled)
    assert [r.todo.id for r in vm.archived_rows] == [2]

    assert dispatch(filled, vm.archived_rows[0], Action.UNARCHIVE) == Outcome.APPLIED
    assert filled.archived_view() == []

    vm = build_view_model(filled)
    assert dispatch(filled, vm.active_rows[0], Action.EDIT) == Outcome.APPLIED
    assert build_view_model(filled).form.name == "Alice"

    assert dispatch(filled, vm.active_rows[0], Action.DELETE) == Outcome.APPLIED
    assert [t.id for t in filled.todos] == [2, 3]


def test_dispatch_rejects_hidden_control(filled: TodoStore):
    filled.validate(0)
    row = build_view_model(filled).active_rows[0]

    with pytest.raises(ValueError):
        dispatch(filled, row, Action.VALIDATE)


def test_view_model_follows_store(filled: TodoStore):
    rendered: list[int] = []
    filled.add_listener(lambda store: rendered.append(len(build_view_model(store).active_rows)))

    filled.toggle_archive(0)
    filled.remove(3)
    assert rendered == [2, 1]
