"""Engine / session setup for the local SQLite file"""

from typing import Generator

from sqlalchemy import Connection, Engine, StaticPool, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from gosgf.db.migrations import migrate

MEMORY_PATH = ":memory:"


def create_sqlite_engine(db_path: str, echo: bool = False) -> Engine:
    """Engine for a single SQLite file. ':memory:' keeps one shared connection so every session sees the same tables."""
    if db_path == MEMORY_PATH:
        engine = create_engine(
            "sqlite:///:memory:",
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(f"sqlite:///{db_path}", echo=echo)
    _use_explicit_transactions(engine)
    return engine


def _use_explicit_transactions(engine: Engine) -> None:
    """
    pysqlite only opens a transaction before DML, so DDL would autocommit statement by statement.
    Turn its own handling off and emit BEGIN ourselves: a migration then commits or rolls back as a whole.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn: Connection) -> None:
        conn.exec_driver_sql("BEGIN")


def open_database(db_path: str, echo: bool = False) -> tuple[Engine, sessionmaker[Session]]:
    """Create the engine, make sure the schema is current, and hand out a session factory."""
    engine = create_sqlite_engine(db_path, echo=echo)
    try:
        migrate(engine)
    except Exception:
        engine.dispose()
        raise
    return engine, sessionmaker(bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
