import logging
from dataclasses import dataclass

from sqlalchemy import Engine, delete, select
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    MappedAsDataclass,
    Session,
    mapped_column,
)

from .kvstore import KeyValueStore

logger = logging.getLogger(__name__)


class KeyValueBase(DeclarativeBase, MappedAsDataclass):
    pass


class PItem(KeyValueBase):
    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(primary_key=True, nullable=False)
    value: Mapped[str] = mapped_column(nullable=False)


def create_all(engine: Engine) -> None:
    KeyValueBase.metadata.create_all(engine)


@dataclass
class SqlKeyValueStore(KeyValueStore):
    engine: Engine

    def __post_init__(self):
        create_all(self.engine)

    def get_item(self, key: str) -> str | None:
        with Session(self.engine) as session:
            return session.scalar(select(PItem.value).where(PItem.key == key))

    def set_item(self, key: str, value: str) -> None:
        with Session(self.engine) as session, session.begin():
            session.merge(PItem(key=key, value=value))
        logger.debug("%s: wrote %d chars to %r", self.name, len(value), key)

    def remove_item(self, key: str) -> None:
        with Session(self.engine) as session, session.begin():
            session.execute(delete(PItem).where(PItem.key == key))
