"""Protocol repository (SQLAlchemy implementation lives in sql_repository.py)"""

from typing import Protocol

from gosgf.core.models import GameRecord

# Returned by add_game_record when the row could not be inserted
INSERT_FAILED = -1


class GameRecordRepository(Protocol):
    """Append-only persistence of finished games"""

    def add_game_record(
        self,
        player_black: str,
        player_white: str,
        date: str,
        moves: str,
        result: str,
    ) -> int:
        """Store a finished game and return its new row id, or INSERT_FAILED."""
        ...

    def get_all_games(self) -> list[GameRecord]:
        """Every stored game, in the table's natural row order."""
        ...
