"""
Custom exceptions raised by the domain, persistence and service layers.

The API layer maps each family onto an HTTP status code:
validation-type errors -> 400, not found -> 404, external dependency failures -> 500.
"""


class WordleError(Exception):
    """Top-level exception for anything this backend raises on purpose."""


# --- 400 ---
class InvalidRequestError(WordleError):
    """Request is missing information or cannot be interpreted."""


class ValidationError(InvalidRequestError):
    """A guess was rejected before touching the game state."""


class GuessFormatError(ValidationError):
    """Guess is not exactly 5 alphabetic characters."""


class UnknownWordError(ValidationError):
    """Guess is well-formed, but not part of the word list."""


class GameOverError(InvalidRequestError):
    """The game is already solved or out of rows."""


# --- 404 ---
class GameNotFoundError(WordleError):
    """No record stored under the requested game id."""


# --- 500 ---
class StoreError(WordleError):
    """The key-value store failed to read or write a record."""


class VersionConflictError(StoreError):
    """A conditional write lost against a concurrent write to the same key."""


class HintGenerationError(WordleError):
    """The language model could not produce a hint."""


class ConfigurationError(WordleError):
    """Invalid runtime wiring (word list, store URL, ...)."""
