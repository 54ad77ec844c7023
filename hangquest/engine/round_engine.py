"""Round engine: guess resolution and scoring for a single game."""

import logging

from hangquest.config import (
    POINTS_PER_HIT,
    POINTS_PER_MISS,
    POINTS_PER_REMAINING_ATTEMPT,
    WIN_BONUS,
)
from hangquest.engine.letters import normalize
from hangquest.models.difficulty import Difficulty
from hangquest.models.round import RoundState, RoundStatus

logger = logging.getLogger(__name__.split(".")[-1])


class RoundEngine:
    """State machine for one round, from the first guess to won/lost."""

    def __init__(self, word: str, difficulty: Difficulty = Difficulty.MEDIUM) -> None:
        """
        Initialize a round.

        Args:
            word: Word to guess (stored lowercase)
            difficulty: Difficulty that fixes the attempt budget
        """
        self._state = RoundState(
            word=word.lower(),
            max_attempts=difficulty.max_attempts,
            difficulty=difficulty,
        )

    @property
    def state(self) -> RoundState:
        """Get current round state."""
        return self._state

    @property
    def word(self) -> str:
        return self._state.word

    @property
    def status(self) -> RoundStatus:
        return self._state.status

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def is_finished(self) -> bool:
        """Whether the round reached a terminal status."""
        return self._state.status != RoundStatus.PLAYING

    @property
    def remaining_attempts(self) -> int:
        """Wrong guesses left before the round is lost."""
        return self._state.max_attempts - len(self._state.wrong_letters)

    def guess(self, letter: str) -> bool:
        """
        Resolve one guess.

        Args:
            letter: Letter as typed by the player

        Returns:
            True if the guess was novel and changed the round, False otherwise
        """
        if self.is_finished:
            return False

        if not isinstance(letter, str) or len(letter) != 1 or letter.isspace():
            return False

        normalized = normalize(letter)
        if self._is_guessed(normalized) or self._is_wrong(normalized):
            return False

        state = self._state
        if any(normalize(char) == normalized for char in state.word):
            guessed_letters = state.guessed_letters + [letter]
            score = state.score + POINTS_PER_HIT
            status = state.status

            covered = {normalize(char) for char in guessed_letters}
            if all(normalize(char) in covered for char in state.word):
                status = RoundStatus.WON
                remaining = state.max_attempts - len(state.wrong_letters)
                score += WIN_BONUS + POINTS_PER_REMAINING_ATTEMPT * remaining
                logger.debug(f"Round won: '{state.word}' with score {score}")

            self._state = state.model_copy(
                update={"guessed_letters": guessed_letters, "score": score, "status": status}
            )
        else:
            wrong_letters = state.wrong_letters + [letter]
            status = state.status
            if len(wrong_letters) >= state.max_attempts:
                status = RoundStatus.LOST
                logger.debug(f"Round lost: '{state.word}'")

            self._state = state.model_copy(
                update={
                    "wrong_letters": wrong_letters,
                    "score": state.score - POINTS_PER_MISS,
                    "status": status,
                }
            )

        return True

    def _is_guessed(self, normalized: str) -> bool:
        return any(normalize(guessed) == normalized for guessed in self._state.guessed_letters)

    def _is_wrong(self, normalized: str) -> bool:
        return any(normalize(wrong) == normalized for wrong in self._state.wrong_letters)

    def reveal(self, mask: str = "_") -> str:
        """Word with guessed letters shown and the rest masked, separated by spaces."""
        return " ".join(char if self._is_guessed(normalize(char)) else mask for char in self._state.word)

    def wrong_guesses_text(self) -> str:
        """Wrong letters separated by spaces."""
        return " ".join(self._state.wrong_letters)

    def completion_percentage(self) -> float:
        """Share of the word's distinct letters already guessed, in percent."""
        letters = {normalize(char) for char in self._state.word if char.isalpha()}
        if not letters:
            return 0.0
        covered = {letter for letter in letters if self._is_guessed(letter)}
        return len(covered) / len(letters) * 100
