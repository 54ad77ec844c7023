"""Item and inventory models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """How an item behaves when used."""

    CONSUMABLE = "consumable"
    EQUIPMENT = "equipment"


class Rarity(str, Enum):
    """Item rarity."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class EffectKind(str, Enum):
    """Effects an item can carry."""

    REVEAL_LETTER = "reveal_letter"
    EXTRA_LIFE = "extra_life"
    INTELLIGENCE_BOOST = "intelligence_boost"
    LUCK_BOOST = "luck_boost"
    PERCEPTION_BOOST = "perception_boost"
    RESILIENCE_BOOST = "resilience_boost"


class Effect(BaseModel):
    """Effect payload attached to an item."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    kind: EffectKind = Field(description="Effect kind")
    value: int = Field(description="Effect magnitude")
    duration: int = Field(ge=0, default=0, description="Rounds the effect lasts (0 = one-shot)")


class Item(BaseModel):
    """Complete item information."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    item_id: str = Field(description="Item identifier")
    name: str = Field(description="Item name")
    description: str = Field(default="", description="Item description")
    kind: ItemKind = Field(description="Consumable or equipment")
    rarity: Rarity = Field(default=Rarity.COMMON, description="Item rarity")
    effects: list[Effect] = Field(default_factory=list, description="Effects applied on use")
    used: bool = Field(default=False, description="Whether a consumable has been used")


class Inventory(BaseModel):
    """Capacity-bounded, ordered item collection."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    items: list[Item] = Field(default_factory=list, description="Items in insertion order")
    capacity: int = Field(ge=0, default=10, description="Maximum number of items")
