"""Runtime configuration, read from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import ConfigurationError

DEFAULT_HINT_MODEL = "llama2-chat"
DEFAULT_HINT_TIMEOUT = 30.0
DEFAULT_MAX_WRITE_ATTEMPTS = 3


def _optional(name: str) -> Optional[str]:
    value = os.environ.get(name, "").strip()
    return value or None


def _number(name: str, default: float, cast: type) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name}={raw!r} is not a valid number.") from e


@dataclass(frozen=True)
class Settings:
    """
    All knobs of the backend.
    ----
    database_url: SQLAlchemy URL of the key-value table. None -> in-memory store (lost on restart).
    words_file: newline-separated list of five-letter words. None -> built-in list.
    hint_api_url: OpenAI-compatible chat completions endpoint. None -> hints disabled.
    """

    database_url: Optional[str] = None
    words_file: Optional[str] = None
    hint_api_url: Optional[str] = None
    hint_api_key: Optional[str] = None
    hint_model: str = DEFAULT_HINT_MODEL
    hint_timeout: float = DEFAULT_HINT_TIMEOUT
    log_level: str = "INFO"
    max_write_attempts: int = DEFAULT_MAX_WRITE_ATTEMPTS

    @classmethod
    def from_env(cls) -> Self:
        max_write_attempts = int(
            _number("WORDLE_MAX_WRITE_ATTEMPTS", DEFAULT_MAX_WRITE_ATTEMPTS, int)
        )
        if max_write_attempts < 1:
            raise ConfigurationError("WORDLE_MAX_WRITE_ATTEMPTS must be at least 1.")

        log_level = (_optional("WORDLE_LOG_LEVEL") or "INFO").upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"WORDLE_LOG_LEVEL={log_level!r} is not a logging level.")

        return cls(
            database_url=_optional("WORDLE_DATABASE_URL"),
            words_file=_optional("WORDLE_WORDS_FILE"),
            hint_api_url=_optional("WORDLE_HINT_API_URL"),
            hint_api_key=_optional("WORDLE_HINT_API_KEY"),
            hint_model=_optional("WORDLE_HINT_MODEL") or DEFAULT_HINT_MODEL,
            hint_timeout=_number("WORDLE_HINT_TIMEOUT", DEFAULT_HINT_TIMEOUT, float),
            log_level=log_level,
            max_write_attempts=max_write_attempts,
        )
