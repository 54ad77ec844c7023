"""Quest progress tracking."""

import logging
from typing import Optional

from hangquest.models.quests import Quest

logger = logging.getLogger(__name__.split(".")[-1])

# Event keys emitted by the game session
WIN_GAMES = "win_games"
PERFECT_GAME = "perfect_game"
WIN_HARD = "win_hard"


class QuestTracker:
    """Advances quests on game events and collects their rewards."""

    def __init__(self, quests: Optional[list[Quest]] = None) -> None:
        """Initialize with the tracked quests."""
        self._quests = list(quests or [])

    @property
    def quests(self) -> list[Quest]:
        """Get tracked quests."""
        return list(self._quests)

    def active(self) -> list[Quest]:
        """Quests not yet completed."""
        return [quest for quest in self._quests if not quest.completed]

    def completed(self) -> list[Quest]:
        """Completed quests."""
        return [quest for quest in self._quests if quest.completed]

    def record(self, event_key: str, amount: int = 1) -> tuple[int, list[Quest]]:
        """
        Apply an event to the tracked quests.

        Returns:
            Tuple of (bonus_xp, quests completed by this event)
        """
        updated, bonus_xp = self.update(self._quests, event_key, amount)
        newly_completed = [
            new for old, new in zip(self._quests, updated) if new.completed and not old.completed
        ]
        self._quests = updated
        for quest in newly_completed:
            logger.info(f"Quest completed: {quest.quest_id} (+{quest.reward} XP)")
        return bonus_xp, newly_completed

    @staticmethod
    def update(quests: list[Quest], event_key: str, amount: int) -> tuple[list[Quest], int]:
        """
        Advance every open quest whose objective matches the event.

        Args:
            quests: Quests in processing order
            event_key: Event that happened (e.g. 'win_games')
            amount: Progress to add

        Returns:
            Tuple of (updated_quests, bonus_xp); bonus_xp sums the rewards of
            quests completed by this call
        """
        bonus_xp = 0
        updated_quests = []

        for quest in quests:
            if quest.completed or quest.objective != event_key:
                updated_quests.append(quest)
                continue

            progress = quest.progress + amount
            completed = False
            if progress >= quest.target:
                progress = quest.target
                completed = True
                bonus_xp += quest.reward

            updated_quests.append(quest.model_copy(update={"progress": progress, "completed": completed}))

        return updated_quests, bonus_xp
