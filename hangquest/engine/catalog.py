"""Starter items and quests."""

from typing import Optional

from hangquest.engine.quest_tracker import PERFECT_GAME, WIN_GAMES, WIN_HARD
from hangquest.models.items import Effect, EffectKind, Item, ItemKind, Rarity
from hangquest.models.quests import Quest


def basic_items() -> list[Item]:
    """Items offered in the shop."""
    return [
        Item(
            item_id="potion_hint",
            name="Potion of Hints",
            description="Reveals a random letter of the current word",
            kind=ItemKind.CONSUMABLE,
            rarity=Rarity.COMMON,
            effects=[Effect(kind=EffectKind.REVEAL_LETTER, value=1)],
        ),
        Item(
            item_id="scroll_extra_life",
            name="Scroll of Extra Life",
            description="Adds one extra attempt",
            kind=ItemKind.CONSUMABLE,
            rarity=Rarity.UNCOMMON,
            effects=[Effect(kind=EffectKind.EXTRA_LIFE, value=1)],
        ),
        Item(
            item_id="amulet_wisdom",
            name="Amulet of Wisdom",
            description="Intelligence +2 while worn",
            kind=ItemKind.EQUIPMENT,
            rarity=Rarity.RARE,
            effects=[Effect(kind=EffectKind.INTELLIGENCE_BOOST, value=2)],
        ),
        Item(
            item_id="ring_fortune",
            name="Ring of Fortune",
            description="Luck +3 while worn",
            kind=ItemKind.EQUIPMENT,
            rarity=Rarity.RARE,
            effects=[Effect(kind=EffectKind.LUCK_BOOST, value=3)],
        ),
    ]


def basic_quests() -> list[Quest]:
    """Quests every new profile starts with."""
    return [
        Quest(
            quest_id="quest_novice",
            name="Novice Guesser",
            description="Guess 3 words",
            objective=WIN_GAMES,
            target=3,
            reward=50,
        ),
        Quest(
            quest_id="quest_perfect",
            name="Perfect Game",
            description="Guess a word without a single mistake",
            objective=PERFECT_GAME,
            target=1,
            reward=100,
        ),
        Quest(
            quest_id="quest_difficult",
            name="Master of Difficulty",
            description="Win a game on hard",
            objective=WIN_HARD,
            target=1,
            reward=150,
        ),
    ]


def find_item(item_id: str) -> Optional[Item]:
    """Catalog item by id."""
    return next((item for item in basic_items() if item.item_id == item_id), None)
