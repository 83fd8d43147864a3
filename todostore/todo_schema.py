from marshmallow import EXCLUDE, Schema
from marshmallow_dataclass import class_schema

from .todo import Todo

# persisted as a json array of {id, name, email, validated, archived}

todo_schema: Schema = class_schema(Todo)(unknown=EXCLUDE)


def dump_todos(todos: list[Todo]) -> str:
    return todo_schema.dumps(todos, many=True)


def load_todos(raw: str) -> list[Todo]:
    """
    raises json.JSONDecodeError for text which is no json at all and
    marshmallow.ValidationError for json which is no array of todos
    """
    return todo_schema.loads(raw, many=True)  # type: ignore
