"""Unit tests for src/wordle/feedback.py"""

import pytest

from src.core.shared_types import LetterMark
from src.wordle.feedback import correct_letters, letter_marks

C = LetterMark.CORRECT
P = LetterMark.PRESENT
A = LetterMark.ABSENT


def test_all_letters_correct() -> None:
    assert correct_letters("apple", "apple") == ["a", "p", "p", "l", "e"]
    assert letter_marks("apple", "apple") == [C] * 5


def test_same_position_matches_only() -> None:
    """again vs alarm: 'a' on positions 0 and 2 coincide, everything else is a placeholder."""
    assert correct_letters("again", "alarm") == ["a", "_", "a", "_", "_"]


def test_no_match_at_all() -> None:
    assert correct_letters("dates", "crumb") == ["_"] * 5


@pytest.mark.parametrize(
    "guess, solution, expected",
    [
        ("again", "alarm", [C, A, C, A, A]),
        ("plate", "apple", [P, P, P, A, C]),
        ("crane", "dates", [A, A, P, A, P]),
        # duplicate letters: only as many PRESENT marks as the solution has spare copies
        ("belle", "level", [A, C, P, P, P]),
        ("lemon", "level", [C, C, A, A, A]),
        ("eerie", "apple", [A, A, A, A, C]),
    ],
)
def test_letter_marks(guess: str, solution: str, expected: list[LetterMark]) -> None:
    assert letter_marks(guess, solution) == expected


def test_length_mismatch_is_a_programming_error() -> None:
    with pytest.raises(ValueError):
        _ = correct_letters("appl", "apple")
