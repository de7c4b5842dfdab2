"""Unit tests for src/db/kv_repository.py"""

from dataclasses import replace

import pytest
from sqlalchemy.orm import Session

from src.core.exceptions import StoreError, VersionConflictError
from src.core.models import GameModel
from src.db.kv_repository import KVGameRepository, decode_record, encode_record
from src.db.kv_store import InMemoryKeyValueStore, SQLKeyValueStore


def mock_game(game_id: str = "game-1") -> GameModel:
    return GameModel(
        id=game_id,
        solution="apple",
        grid=[[""] * 5 for _ in range(6)],
        current_row=0,
        solved=False,
        status="in_progress",
    )


def test_record_layout() -> None:
    """Persisted JSON mirrors the game fields, with camelCase keys."""
    record = encode_record(mock_game())
    assert record == {
        "id": "game-1",
        "solution": "apple",
        "grid": [[""] * 5 for _ in range(6)],
        "currentRow": 0,
        "solved": False,
        "status": "in_progress",
    }


def test_decode_record_without_status() -> None:
    """Records written before status existed can still be read."""
    record = encode_record(mock_game())
    del record["status"]
    model = decode_record(record, version=4)
    assert model.status == ""
    assert model.version == 4


def test_decode_corrupt_record() -> None:
    with pytest.raises(StoreError):
        _ = decode_record({"id": "game-1"}, version=1)


def test_create_and_get_game(db_session_repo: Session) -> None:
    """Round trip through the SQL table: the loaded record equals the created one."""
    repo = KVGameRepository(SQLKeyValueStore(db_session_repo))
    created = repo.create_game(mock_game())
    found = repo.get_game("game-1")

    assert found is not None
    assert found == created == mock_game()
    assert found.version == created.version == 1


def test_get_unknown_game(db_session_repo: Session) -> None:
    repo = KVGameRepository(SQLKeyValueStore(db_session_repo))
    assert repo.get_game("nope") is None

    repo.create_game(mock_game())
    assert repo.get_game("wrong-id") is None


def test_update_game() -> None:
    repo = KVGameRepository(InMemoryKeyValueStore())
    created = repo.create_game(mock_game())

    grid = [row[:] for row in created.grid]
    grid[0] = list("crane")
    after = replace(created, grid=grid, current_row=1)
    updated = repo.update_game(after)

    assert updated == after
    assert updated.version == 2
    assert repo.get_game("game-1") == after


def test_update_with_stale_version() -> None:
    repo = KVGameRepository(InMemoryKeyValueStore())
    created = repo.create_game(mock_game())
    repo.update_game(replace(created, current_row=1))

    with pytest.raises(VersionConflictError):
        repo.update_game(replace(created, current_row=2))
    stored = repo.get_game("game-1")
    assert stored is not None
    assert stored.current_row == 1
