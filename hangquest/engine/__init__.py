"""Game engine package."""

from hangquest.engine.catalog import basic_items, basic_quests
from hangquest.engine.inventory_manager import InventoryManager
from hangquest.engine.letters import normalize, normalize_word
from hangquest.engine.progression import ProgressionEngine
from hangquest.engine.quest_tracker import QuestTracker
from hangquest.engine.round_engine import RoundEngine
from hangquest.engine.session import GameSession
from hangquest.engine.stat_calculator import StatCalculator
from hangquest.engine.words import WordsManager

__all__ = [
    "basic_items",
    "basic_quests",
    "GameSession",
    "InventoryManager",
    "normalize",
    "normalize_word",
    "ProgressionEngine",
    "QuestTracker",
    "RoundEngine",
    "StatCalculator",
    "WordsManager",
]
