"""Game configuration."""

from typing import Optional

from pydantic import BaseModel, Field

from hangquest.config import (
    DEFAULT_DIFFICULTY,
    DEFAULT_INVENTORY_CAPACITY,
    DEFAULT_LANGUAGE,
    DEFAULT_PROFILE_DIR,
    DEFAULT_STATS_DIR,
    DEFAULT_STATS_FILE,
    DEFAULT_WORDS_FILE,
)
from hangquest.localization import Language
from hangquest.models.difficulty import Difficulty


class GameConfig(BaseModel):
    """Game configuration model."""

    default_difficulty: Difficulty = Field(
        default=Difficulty.from_selector(DEFAULT_DIFFICULTY), description="Difficulty of new rounds"
    )
    language: Language = Field(default=Language.from_code(DEFAULT_LANGUAGE), description="Interface language")
    inventory_capacity: int = Field(
        default=DEFAULT_INVENTORY_CAPACITY, ge=1, le=100, description="Capacity of new inventories"
    )
    words_file: str = Field(default=DEFAULT_WORDS_FILE, description="Word list, one word per line")
    stats_file: str = Field(default=DEFAULT_STATS_FILE, description="Statistics JSON file")
    profile_dir: str = Field(default=DEFAULT_PROFILE_DIR, description="Directory of player profiles")
    stats_dir: str = Field(default=DEFAULT_STATS_DIR, description="Directory of per-player statistics (API)")

    def with_selector(self, selector: int) -> "GameConfig":
        """Copy with the default difficulty picked by a menu selector (invalid means medium)."""
        return self.model_copy(update={"default_difficulty": Difficulty.from_selector(selector)})


class GameConfigManager:
    """Manages game configuration."""

    def __init__(self, initial_config: Optional[GameConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or GameConfig()

    @property
    def config(self) -> GameConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: GameConfig) -> None:
        """Update configuration."""
        self._config = new_config
