"""Experience, leveling and attribute growth."""

import logging
from typing import Optional

from hangquest.config import ATTRIBUTE_POINTS_PER_LEVEL, LEVEL_XP_MULTIPLIER
from hangquest.models.character import Attributes, Progression

logger = logging.getLogger(__name__.split(".")[-1])


class ProgressionEngine:
    """Converts earned experience into levels and attribute points."""

    def __init__(self, progression: Optional[Progression] = None) -> None:
        """
        Initialize progression engine.

        Args:
            progression: Optional saved progression, a fresh level 1 character otherwise
        """
        self._progression = progression or Progression()

    @property
    def progression(self) -> Progression:
        """Get current progression."""
        return self._progression

    @property
    def attributes(self) -> Attributes:
        return self._progression.attributes

    def add_experience(self, xp: int) -> tuple[bool, int]:
        """
        Add experience and level up as many times as it allows.

        Args:
            xp: Experience to add; non-positive values are ignored

        Returns:
            Tuple of (leveled_up, levels_gained)
        """
        if xp <= 0:
            return False, 0

        level = self._progression.level
        experience = self._progression.experience + xp
        next_level_xp = self._progression.next_level_xp
        levels_gained = 0

        while experience >= next_level_xp:
            level += 1
            levels_gained += 1
            experience -= next_level_xp
            next_level_xp = int(next_level_xp * LEVEL_XP_MULTIPLIER)

        self._progression = self._progression.model_copy(
            update={"level": level, "experience": experience, "next_level_xp": next_level_xp}
        )

        # Points are granted level by level; the remainder rule applies per grant
        for _ in range(levels_gained):
            self.add_attribute_points(ATTRIBUTE_POINTS_PER_LEVEL)

        if levels_gained:
            logger.info(f"Gained {levels_gained} level(s), now level {level}")
        return levels_gained > 0, levels_gained

    def add_attribute_points(self, points: int) -> None:
        """
        Spread attribute points evenly; the remainder goes to intelligence.

        Args:
            points: Number of points to distribute
        """
        share, remainder = divmod(points, 4)
        attributes = self._progression.attributes
        new_attributes = attributes.model_copy(
            update={
                "intelligence": attributes.intelligence + share + remainder,
                "luck": attributes.luck + share,
                "perception": attributes.perception + share,
                "resilience": attributes.resilience + share,
            }
        )
        self._progression = self._progression.model_copy(update={"attributes": new_attributes})

    def xp_progress(self) -> float:
        """Fraction of the way to the next level, capped at 1.0."""
        return min(self._progression.experience / self._progression.next_level_xp, 1.0)
