"""
Per-letter feedback for a guess compared to the solution.
----

Two flavors are computed for every accepted guess:

1. correct_letters: same-position matches only. Matching positions show the letter, the others a placeholder.
2. letter_marks: full three-category feedback (correct / present / absent).
"""

from collections import Counter

from src.core.shared_types import LetterMark

PLACEHOLDER = "_"


def correct_letters(guess: str, solution: str) -> list[str]:
    """
    e.g.
    -----
    again vs alarm -> ["a", "_", "a", "_", "_"]
    """
    return [g if g == s else PLACEHOLDER for g, s in zip(guess, solution, strict=True)]


def letter_marks(guess: str, solution: str) -> list[LetterMark]:
    """
    Two passes, so repeated letters in the guess are not marked PRESENT more often than they occur in the solution.

    1. mark exact matches and count the solution letters that are left over.
    2. a remaining guess letter is PRESENT while there are leftover copies of it, ABSENT otherwise.
    """
    marks = [LetterMark.ABSENT] * len(guess)
    leftover: Counter[str] = Counter()

    for i, (g, s) in enumerate(zip(guess, solution, strict=True)):
        if g == s:
            marks[i] = LetterMark.CORRECT
        else:
            leftover[s] += 1

    for i, g in enumerate(guess):
        if marks[i] == LetterMark.CORRECT:
            continue
        if leftover[g] > 0:
            marks[i] = LetterMark.PRESENT
            leftover[g] -= 1

    return marks
