"""Entry point for the UI layer: a local, append-only log of finished games."""

import logging
from types import TracebackType
from typing import Optional, Self

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from gosgf.core.config import load_settings
from gosgf.core.models import GameRecord
from gosgf.db.database import open_database
from gosgf.db.sql_repository import SQLGameRecordRepository

logger = logging.getLogger(__name__)


class GameStore:
    """
    Owns the database file and hands calls on to the repository.
    ----
    The file is opened (and the schema created/migrated) on the first call, not in __init__.
    Every call blocks on disk I/O; callers on a latency-sensitive thread should offload it themselves.
    """

    def __init__(self, db_path: Optional[str] = None, echo: Optional[bool] = None) -> None:
        settings = load_settings()
        self.db_path = db_path if db_path is not None else settings.db_path
        self.echo = echo if echo is not None else settings.db_echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker[Session]] = None

    def add_game_record(
        self,
        player_black: str,
        player_white: str,
        date: str,
        moves: str,
        result: str,
    ) -> int:
        """Append one game. Returns the new row id, or INSERT_FAILED."""
        with self._session() as session:
            return SQLGameRecordRepository(session).add_game_record(
                player_black, player_white, date, moves, result
            )

    def get_all_games(self) -> list[GameRecord]:
        with self._session() as session:
            return SQLGameRecordRepository(session).get_all_games()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    # -- Internal helpers --
    def _session(self) -> Session:
        if self._session_factory is None:
            logger.debug("Opening game database at %s", self.db_path)
            self._engine, self._session_factory = open_database(self.db_path, echo=self.echo)
        return self._session_factory()
