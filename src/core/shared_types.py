"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class LetterMark(StrEnum):
    """Feedback category for a single letter of a guess."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
