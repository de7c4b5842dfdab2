"""Implementation of the GameRepository on top of any KeyValueStore."""

import logging
from dataclasses import replace

from src.core.exceptions import StoreError
from src.core.models import GameModel
from src.db.repository import KeyValueStore, Record

logger = logging.getLogger(__name__)


def encode_record(game: GameModel) -> Record:
    """Persisted layout of a game. Mirrors the fields of the game (the version lives next to it in the store)."""
    return {
        "id": game.id,
        "solution": game.solution,
        "grid": [list(row) for row in game.grid],
        "currentRow": game.current_row,
        "solved": game.solved,
        "status": game.status,
    }


def decode_record(record: Record, version: int) -> GameModel:
    try:
        return GameModel(
            id=record["id"],
            solution=record["solution"],
            grid=[list(row) for row in record["grid"]],
            current_row=int(record["currentRow"]),
            solved=bool(record["solved"]),
            status=record.get("status", ""),
            version=version,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Stored game record is corrupt: {e!r}") from e


class KVGameRepository:
    """Games are stored as JSON objects keyed by game id."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        stored = self.store.get(game_id)
        if stored is None:
            return None
        return decode_record(stored.value, stored.version)

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game and return the stored data."""
        version = self.store.create(game.id, encode_record(game))
        logger.debug("Created record for game %s", game.id)
        return replace(game, version=version)

    def update_game(self, game: GameModel) -> GameModel:
        """Versioned overwrite. VersionConflictError propagates, so the caller can reload and retry."""
        version = self.store.compare_and_set(game.id, encode_record(game), game.version)
        logger.debug("Updated record for game %s to version %d", game.id, version)
        return replace(game, version=version)
