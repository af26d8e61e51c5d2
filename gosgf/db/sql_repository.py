"""Implementation of GameRecordRepository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from gosgf.core.exceptions import RepositoryError
from gosgf.core.models import GameRecord
from gosgf.db.repository import INSERT_FAILED
from gosgf.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRecordRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add_game_record(
        self,
        player_black: str,
        player_white: str,
        date: str,
        moves: str,
        result: str,
    ) -> int:
        """Store a finished game and return its new row id, or INSERT_FAILED if a constraint rejected the row."""
        game_db = DBGame(
            player_black=player_black,
            player_white=player_white,
            date=date,
            moves=moves,
            result=result,
        )
        try:
            self.db.add(game_db)
            self.db.flush()
            game_id = game_db.id
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.error("Rejected game record %s vs %s: %s", player_black, player_white, exc)
            return INSERT_FAILED
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not store game record: {exc}") from exc
        return game_id

    def get_all_games(self) -> list[GameRecord]:
        """Every stored game, in the table's natural row order."""
        try:
            rows = self.db.scalars(select(DBGame)).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not read game records: {exc}") from exc
        return [self._to_model(game_db) for game_db in rows]

    def _to_model(self, game_db: DBGame) -> GameRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return GameRecord(
            id=game_db.id,
            player_black=game_db.player_black,
            player_white=game_db.player_white,
            date=game_db.date,
            moves=game_db.moves,
            game_result=game_db.result,
        )
