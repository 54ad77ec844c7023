"""Difficulty levels and their attempt budgets."""

from enum import Enum
from typing import Optional


class Difficulty(str, Enum):
    """Game difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def max_attempts(self) -> int:
        """Number of wrong guesses allowed before the round is lost."""
        return _ATTEMPTS[self]

    @classmethod
    def from_selector(cls, selector: int) -> "Difficulty":
        """
        Map a menu selector (1, 2, 3) to a difficulty.

        Any other value falls back to medium.
        """
        return _SELECTORS.get(selector, cls.MEDIUM)

    @classmethod
    def from_attempts(cls, max_attempts: int) -> Optional["Difficulty"]:
        """Find the difficulty with the given attempt budget."""
        for difficulty, attempts in _ATTEMPTS.items():
            if attempts == max_attempts:
                return difficulty
        return None


_ATTEMPTS = {
    Difficulty.EASY: 8,
    Difficulty.MEDIUM: 6,
    Difficulty.HARD: 4,
}

_SELECTORS = {
    1: Difficulty.EASY,
    2: Difficulty.MEDIUM,
    3: Difficulty.HARD,
}
