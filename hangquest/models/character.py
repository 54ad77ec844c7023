"""Character attributes and progression models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hangquest.config import BASE_LEVEL_XP


class Attributes(BaseModel):
    """Character attributes."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    intelligence: int = Field(ge=0, default=1, description="Raises the chance of a hint")
    luck: int = Field(ge=0, default=1, description="Raises the chance of a free mistake")
    perception: int = Field(ge=0, default=1, description="Extra points per correct letter")
    resilience: int = Field(ge=0, default=1, description="Every 3 points give one extra attempt")

    def intelligence_bonus(self) -> float:
        """Hint chance, 2% per point."""
        return self.intelligence * 0.02

    def luck_bonus(self) -> float:
        """Mistake-avoidance chance, 1.5% per point."""
        return self.luck * 0.015

    def perception_bonus(self) -> int:
        """Flat bonus points per correct letter."""
        return self.perception

    def resilience_bonus(self) -> int:
        """Extra attempts."""
        return self.resilience // 3


class Progression(BaseModel):
    """Persistent experience, level and attributes of the player's character."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    level: int = Field(ge=1, default=1, description="Character level")
    experience: int = Field(ge=0, default=0, description="Experience towards the next level")
    next_level_xp: int = Field(ge=1, default=BASE_LEVEL_XP, description="Experience required for the next level")
    attributes: Attributes = Field(default_factory=Attributes, description="Character attributes")

    @model_validator(mode="after")
    def check_experience_below_threshold(self) -> "Progression":
        """Experience must stay below the next level threshold."""
        if self.experience >= self.next_level_xp:
            raise ValueError(
                f"experience ({self.experience}) must be lower than next_level_xp ({self.next_level_xp})"
            )
        return self
