import logging
from sqlite3 import Connection

from sqlalchemy import Engine, create_engine
from sqlalchemy.event import listen

logger = logging.getLogger(__name__)

DEFAULT_DB_FILE = "./todolist.db"


def set_synchronous_pragma(dbapi_connection: Connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    # every persist overwrites the whole slot, make it durable before returning
    cursor.execute("PRAGMA synchronous = FULL")
    cursor.close()
    logger.debug("synchronous pragma set")


def get_engine(db_file: str = DEFAULT_DB_FILE, echo=False) -> Engine:
    engine: Engine = create_engine("sqlite:///" + db_file, echo=echo)
    listen(engine, "connect", set_synchronous_pragma)
    return engine
