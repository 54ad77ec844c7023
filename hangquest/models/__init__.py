"""Data models module for hangquest."""

# Difficulty
from hangquest.models.difficulty import Difficulty

# Rounds
from hangquest.models.round import RoundState, RoundStatus

# Character
from hangquest.models.character import Attributes, Progression

# Quests
from hangquest.models.quests import Quest

# Items and Inventory
from hangquest.models.items import Effect, EffectKind, Inventory, Item, ItemKind, Rarity

# Statistics
from hangquest.models.stats import GameRecord, PlayerStats

# Profile
from hangquest.models.profile import PlayerProfile, RoundOutcome

__all__ = [
    # Difficulty
    "Difficulty",
    # Rounds
    "RoundState",
    "RoundStatus",
    # Character
    "Attributes",
    "Progression",
    # Quests
    "Quest",
    # Items and Inventory
    "Effect",
    "EffectKind",
    "Inventory",
    "Item",
    "ItemKind",
    "Rarity",
    # Statistics
    "GameRecord",
    "PlayerStats",
    # Profile
    "PlayerProfile",
    "RoundOutcome",
]
