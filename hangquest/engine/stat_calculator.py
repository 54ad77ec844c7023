"""Stat calculation system."""

from hangquest.models.character import Attributes
from hangquest.models.items import EffectKind, Inventory, ItemKind

_BOOSTS = {
    EffectKind.INTELLIGENCE_BOOST: "intelligence",
    EffectKind.LUCK_BOOST: "luck",
    EffectKind.PERCEPTION_BOOST: "perception",
    EffectKind.RESILIENCE_BOOST: "resilience",
}


class StatCalculator:
    """Computes effective attributes (base + carried equipment)."""

    @staticmethod
    def effective_attributes(attributes: Attributes, inventory: Inventory) -> Attributes:
        """
        Calculate effective attributes.

        Args:
            attributes: Base attributes from progression
            inventory: Inventory whose equipment is worn passively

        Returns:
            New Attributes with effective values
        """
        effective = attributes.model_dump()

        for item in inventory.items:
            if item.kind != ItemKind.EQUIPMENT:
                continue
            for effect in item.effects:
                stat_name = _BOOSTS.get(effect.kind)
                if stat_name:
                    effective[stat_name] += effect.value

        # Ensure stats don't go below 0
        for stat_name in effective:
            effective[stat_name] = max(0, effective[stat_name])

        return Attributes(**effective)

    @staticmethod
    def bonuses(attributes: Attributes) -> dict[str, float]:
        """Derived bonuses for display."""
        return {
            "hint_chance": attributes.intelligence_bonus(),
            "mistake_avoidance": attributes.luck_bonus(),
            "points_per_hit": attributes.perception_bonus(),
            "extra_attempts": attributes.resilience_bonus(),
        }
