"""Round state model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from hangquest.models.difficulty import Difficulty


class RoundStatus(str, Enum):
    """Status of a single round."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class RoundState(BaseModel):
    """Complete state of one round, from word selection to won/lost."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    word: str = Field(description="Lowercase word to guess")
    guessed_letters: list[str] = Field(
        default_factory=list, description="Correct guesses in the form they were typed"
    )
    wrong_letters: list[str] = Field(
        default_factory=list, description="Wrong guesses in the form they were typed"
    )
    max_attempts: int = Field(ge=1, description="Wrong guesses allowed")
    score: int = Field(default=0, description="Round score (may be negative)")
    status: RoundStatus = Field(default=RoundStatus.PLAYING, description="Round status")
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM, description="Difficulty the round was started with")
