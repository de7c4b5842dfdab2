"""Protocols for the persistence layer (key-value store and the game repository built on top of it)."""

from dataclasses import dataclass
from typing import Any, Protocol

from src.core.models import GameModel

Record = dict[str, Any]


@dataclass(frozen=True)
class VersionedRecord:
    value: Record
    version: int


class KeyValueStore(Protocol):
    """Opaque get/set-by-key persistence with versioned (conditional) writes."""

    def get(self, key: str) -> VersionedRecord | None:
        """Current value + version for `key`, if it exists."""
        ...

    def create(self, key: str, value: Record) -> int:
        """Store a value under a new key and return its version. Raises VersionConflictError if the key exists."""
        ...

    def compare_and_set(self, key: str, value: Record, expected_version: int) -> int:
        """Overwrite only if the stored version equals `expected_version`. Returns the new version."""
        ...


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game and return the stored data."""
        ...

    def update_game(self, game: GameModel) -> GameModel:
        """Overwrite the record of an existing game, provided nobody else wrote it since `game.version`."""
        ...
