"""Game statistics models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GameRecord(BaseModel):
    """Result of one finished round."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    word: str = Field(description="Word of the round")
    result: Literal["win", "lose"] = Field(description="Round outcome")
    points: int = Field(description="Round score")
    difficulty: int = Field(description="Maximum attempts of the round")
    date: datetime = Field(default_factory=datetime.now, description="When the round finished")


class PlayerStats(BaseModel):
    """Aggregated statistics of all recorded rounds."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    games_played: int = Field(ge=0, default=0, description="Number of finished rounds")
    games_won: int = Field(ge=0, default=0, description="Number of won rounds")
    total_points: int = Field(default=0, description="Sum of all round scores")
    highest_score: int = Field(default=0, description="Best round score")
    game_history: list[GameRecord] = Field(default_factory=list, description="All rounds in order")
