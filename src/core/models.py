"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the domain layer (Game) and the db layer (repository) convert to/from the GameModel,
so neither needs to know the representation used by the other.
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
Row = list[str]


@dataclass
class GameModel:
    """Transport-safe representation of a word game used between Service, DB, and Game layers."""

    id: str
    solution: str
    grid: list[Row]
    current_row: int
    solved: bool
    status: str
    version: int = field(default=0, compare=False)
