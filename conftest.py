import pytest

from kvstore.kvstore import InMemoryKeyValueStore
from kvstore.sql_kvstore import SqlKeyValueStore
from sqlite_setup import get_engine
from todostore.todostore import TodoStore

SQL_ECHO = False


@pytest.fixture
def db_file(tmp_path) -> str:
    return str(tmp_path / "todolist_test.db")


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore("kv")


@pytest.fixture
def sql_kv(db_file) -> SqlKeyValueStore:
    return SqlKeyValueStore("sql_kv", engine=get_engine(db_file=db_file, echo=SQL_ECHO))


@pytest.fixture
def s(kv) -> TodoStore:
    store = TodoStore("s", kv)
    store.hydrate()
    return store
