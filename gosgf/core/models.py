"""
Boundary layer data model(s).

Two unrelated shapes live here, both describing "a game":
* GameRecord is what the store persists and hands back (flat text fields + the row id).
* BoardSnapshot is an in-memory picture of a board, for screens that want to show a position.
They never convert into each other.
"""

from dataclasses import dataclass, field
from typing import Self

from gosgf.core.shared_types import DEFAULT_BOARD_SIZE, Stone

# Type aliases to make the models easier to read
PlayerName = str
Point = tuple[int, int]


@dataclass(frozen=True)
class GameRecord:
    """A finished game as stored in the games table. Immutable once written."""

    id: int
    player_black: PlayerName
    player_white: PlayerName
    date: str
    moves: str
    game_result: str


@dataclass
class BoardSnapshot:
    """Board contents plus game info. Not persisted by the store."""

    board_state: list[list[Stone]]
    black_player: PlayerName
    white_player: PlayerName
    moves: list[Point] = field(default_factory=list)
    game_result: str = ""

    @classmethod
    def empty(
        cls,
        black_player: PlayerName,
        white_player: PlayerName,
        size: int = DEFAULT_BOARD_SIZE,
    ) -> Self:
        """Snapshot of a board before the first move."""
        board = [[Stone.EMPTY for _ in range(size)] for _ in range(size)]
        return cls(board, black_player, white_player)

    @property
    def size(self) -> int:
        return len(self.board_state)
