"""Unit tests for gosgf/db/sql_repository.py"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from gosgf.core.exceptions import RepositoryError
from gosgf.core.models import GameRecord
from gosgf.db.repository import INSERT_FAILED
from gosgf.db.sql_repository import SQLGameRecordRepository

MOVES = "B[pd];W[dd];B[pq];W[dp]"


def test_empty_store_returns_no_games(db_session_repo: Session) -> None:
    repo = SQLGameRecordRepository(db_session_repo)
    assert repo.get_all_games() == []


def test_add_game_record(db_session_repo: Session) -> None:
    """A stored game comes back with the same five text fields and the id returned on insert."""
    repo = SQLGameRecordRepository(db_session_repo)
    game_id = repo.add_game_record("Honinbo Shusaku", "Gennan Inseki", "1846-09-11", MOVES, "Black wins")

    assert game_id > 0
    assert repo.get_all_games() == [
        GameRecord(
            id=game_id,
            player_black="Honinbo Shusaku",
            player_white="Gennan Inseki",
            date="1846-09-11",
            moves=MOVES,
            game_result="Black wins",
        )
    ]


def test_each_insert_adds_exactly_one_record(db_session_repo: Session) -> None:
    repo = SQLGameRecordRepository(db_session_repo)
    first_id = repo.add_game_record("a", "b", "2024-01-01", MOVES, "Draw")
    before = repo.get_all_games()

    second_id = repo.add_game_record("c", "d", "2024-01-02", "", "White wins")
    after = repo.get_all_games()

    assert len(after) == len(before) + 1
    assert second_id > first_id
    assert after[-1].id == second_id
    assert after[:-1] == before


def test_ids_increase_in_insertion_order(db_session_repo: Session) -> None:
    repo = SQLGameRecordRepository(db_session_repo)
    inserted = [
        repo.add_game_record(f"black {i}", f"white {i}", "today", MOVES, "Draw")
        for i in range(10)
    ]

    games = repo.get_all_games()
    ids = [game.id for game in games]
    assert len(games) == 10
    assert ids == inserted
    assert all(earlier < later for earlier, later in zip(ids, ids[1:]))
    assert [game.player_black for game in games] == [f"black {i}" for i in range(10)]


def test_content_is_passed_through_untouched(db_session_repo: Session) -> None:
    """No validation: empty strings and unusual text are stored as given."""
    repo = SQLGameRecordRepository(db_session_repo)
    odd_moves = "not; really [sgf] \n 黑 ☗"
    game_id = repo.add_game_record("", "", "", odd_moves, "")

    (game,) = repo.get_all_games()
    assert game == GameRecord(game_id, "", "", "", odd_moves, "")


def test_rejected_insert_returns_sentinel(db_session_repo: Session) -> None:
    repo = SQLGameRecordRepository(db_session_repo)
    error = IntegrityError("INSERT INTO games ...", {}, Exception("constraint failed"))

    with patch.object(db_session_repo, "commit", side_effect=error):
        assert repo.add_game_record("a", "b", "c", "d", "e") == INSERT_FAILED

    # session is usable again after the rollback
    assert repo.get_all_games() == []


def test_storage_failure_on_insert_propagates(db_session_repo: Session) -> None:
    repo = SQLGameRecordRepository(db_session_repo)
    error = OperationalError("INSERT INTO games ...", {}, Exception("disk I/O error"))

    with patch.object(db_session_repo, "commit", side_effect=error):
        with pytest.raises(RepositoryError) as exc_info:
            repo.add_game_record("a", "b", "c", "d", "e")
    assert exc_info.value.__cause__ is error


def test_storage_failure_on_read_propagates(db_session_repo: Session) -> None:
    repo = SQLGameRecordRepository(db_session_repo)
    error = OperationalError("SELECT ...", {}, Exception("database disk image is malformed"))

    with patch.object(db_session_repo, "scalars", side_effect=error):
        with pytest.raises(RepositoryError):
            repo.get_all_games()


def test_new_id_does_not_need_reloading_after_commit(db_session_repo: Session) -> None:
    """The id is known once the row is flushed; nothing is read back after the commit."""
    repo = SQLGameRecordRepository(db_session_repo)
    commit = db_session_repo.commit

    def commit_and_detach() -> None:
        commit()
        db_session_repo.expunge_all()

    with patch.object(db_session_repo, "commit", side_effect=commit_and_detach):
        game_id = repo.add_game_record("a", "b", "c", "d", "e")

    assert game_id > 0
    assert [game.id for game in repo.get_all_games()] == [game_id]
