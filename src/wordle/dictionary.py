"""The fixed list of words a solution is drawn from and guesses are checked against."""

from pathlib import Path
from random import Random
from typing import Iterable, Iterator, Self

from src.core.exceptions import ConfigurationError

WORD_LENGTH = 5

DEFAULT_WORDS = (
    "about", "again", "alarm", "apple", "beach", "brave", "bread", "chair",
    "cloud", "crane", "dates", "dream", "eagle", "earth", "elder", "fable",
    "flame", "frost", "ghost", "grape", "heart", "honey", "house", "jelly",
    "knife", "lemon", "light", "mango", "money", "night", "ocean", "olive",
    "piano", "plant", "quiet", "river", "robin", "sheep", "smile", "stone",
    "table", "tiger", "toast", "train", "vivid", "water", "whale", "world",
    "youth", "zebra",
)  # fmt: skip


def is_well_formed(word: str) -> bool:
    """Exactly WORD_LENGTH characters, letters only."""
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


class WordList:
    """Immutable, case-normalized set of playable words."""

    def __init__(self, words: Iterable[str]) -> None:
        normalized = []
        for word in words:
            word = word.strip().lower()
            if not word:
                continue
            if not is_well_formed(word):
                raise ConfigurationError(
                    f"Word list entry {word!r} is not a {WORD_LENGTH}-letter word."
                )
            normalized.append(word)

        # keep first-seen order, so random_word() is reproducible with a seeded Random
        self._words: tuple[str, ...] = tuple(dict.fromkeys(normalized))
        if not self._words:
            raise ConfigurationError("Word list is empty.")
        self._lookup = frozenset(self._words)

    @classmethod
    def default(cls) -> Self:
        return cls(DEFAULT_WORDS)

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """One word per line. Blank lines are ignored."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read word list {str(path)!r}: {e}") from e
        return cls(content.splitlines())

    def random_word(self, rng: Random) -> str:
        return rng.choice(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
