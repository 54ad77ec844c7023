"""Player profile and round outcome models."""

from pydantic import BaseModel, ConfigDict, Field

from hangquest.localization import Language
from hangquest.models.character import Progression
from hangquest.models.difficulty import Difficulty
from hangquest.models.items import Inventory
from hangquest.models.quests import Quest


class PlayerProfile(BaseModel):
    """Everything about one player that outlives a round."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    player_id: str = Field(description="Unique player identifier")
    name: str = Field(default="Player", description="Player name")
    progression: Progression = Field(default_factory=Progression, description="Level, experience, attributes")
    inventory: Inventory = Field(default_factory=Inventory, description="Carried items")
    quests: list[Quest] = Field(default_factory=list, description="Tracked quests")
    language: Language = Field(default=Language.POLISH, description="Preferred language")
    default_difficulty: Difficulty = Field(default=Difficulty.MEDIUM, description="Preferred difficulty")


class RoundOutcome(BaseModel):
    """What happened when a round finished."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    won: bool = Field(description="Whether the round was won")
    word: str = Field(description="Word of the round")
    score: int = Field(description="Final round score")
    xp_gained: int = Field(default=0, description="Experience from the round score")
    quest_xp: int = Field(default=0, description="Experience from completed quests")
    leveled_up: bool = Field(default=False, description="Whether at least one level was gained")
    levels_gained: int = Field(default=0, description="Number of levels gained")
    level: int = Field(default=1, description="Level after the round")
    completed_quests: list[Quest] = Field(default_factory=list, description="Quests completed by this round")
