"""Game session: drives rounds and folds their outcomes into the profile."""

import logging
from typing import Optional

from hangquest.engine.inventory_manager import InventoryManager
from hangquest.engine.progression import ProgressionEngine
from hangquest.engine.quest_tracker import PERFECT_GAME, WIN_GAMES, WIN_HARD, QuestTracker
from hangquest.engine.round_engine import RoundEngine
from hangquest.engine.stat_calculator import StatCalculator
from hangquest.engine.words import WordsManager
from hangquest.helpers import log_call
from hangquest.localization import Language
from hangquest.models.character import Attributes
from hangquest.models.difficulty import Difficulty
from hangquest.models.items import Effect, Item
from hangquest.models.profile import PlayerProfile, RoundOutcome
from hangquest.models.round import RoundState, RoundStatus
from hangquest.persistence.stats_store import StatsStore

logger = logging.getLogger(__name__.split(".")[-1])


class GameSession:
    """Owns one player's progression, quests and inventory, and their current round."""

    def __init__(
        self,
        profile: PlayerProfile,
        words: WordsManager,
        stats_store: Optional[StatsStore] = None,
        default_difficulty: Optional[Difficulty] = None,
    ) -> None:
        """
        Initialize game session.

        Args:
            profile: Player profile to start from
            words: Word source for new rounds
            stats_store: Optional store that records finished rounds
            default_difficulty: Difficulty used when start_round gets none;
                the profile's preference otherwise
        """
        self._player_id = profile.player_id
        self._name = profile.name
        self._language = profile.language
        self._default_difficulty = default_difficulty or profile.default_difficulty
        self._progression = ProgressionEngine(profile.progression)
        self._quests = QuestTracker(profile.quests)
        self._inventory = InventoryManager(profile.inventory)
        self._words = words
        self._stats_store = stats_store
        self._round: Optional[RoundEngine] = None
        self._last_outcome: Optional[RoundOutcome] = None

    @property
    def profile(self) -> PlayerProfile:
        """Snapshot of the player's persistent state."""
        return PlayerProfile(
            player_id=self._player_id,
            name=self._name,
            progression=self._progression.progression,
            inventory=self._inventory.inventory,
            quests=self._quests.quests,
            language=self._language,
            default_difficulty=self._default_difficulty,
        )

    @property
    def current_round(self) -> Optional[RoundEngine]:
        return self._round

    @property
    def last_outcome(self) -> Optional[RoundOutcome]:
        """Outcome of the most recently finished round."""
        return self._last_outcome

    @property
    def progression(self) -> ProgressionEngine:
        return self._progression

    @property
    def quests(self) -> QuestTracker:
        return self._quests

    @property
    def inventory(self) -> InventoryManager:
        return self._inventory

    @property
    def stats_store(self) -> Optional[StatsStore]:
        return self._stats_store

    @property
    def default_difficulty(self) -> Difficulty:
        return self._default_difficulty

    def set_default_difficulty(self, difficulty: Difficulty) -> None:
        self._default_difficulty = difficulty

    def set_language(self, language: Language) -> None:
        self._language = language

    @log_call
    def start_round(self, difficulty: Optional[Difficulty] = None) -> RoundEngine:
        """
        Start a new round with a random word.

        Args:
            difficulty: Difficulty for this round, the session default otherwise

        Returns:
            The new round
        """
        difficulty = difficulty or self._default_difficulty
        self._round = RoundEngine(self._words.random_word(), difficulty)
        self._last_outcome = None
        logger.info(f"Player {self._player_id} started a {difficulty.value} round")
        return self._round

    def guess(self, letter: str) -> bool:
        """
        Guess a letter in the current round.

        Returns:
            Whether the guess was accepted; finishing the round fills last_outcome
        """
        if self._round is None:
            raise RuntimeError("No round in progress")

        was_finished = self._round.is_finished
        accepted = self._round.guess(letter)
        if accepted and not was_finished and self._round.is_finished:
            self._last_outcome = self._finish_round(self._round)
        return accepted

    def _finish_round(self, round_engine: RoundEngine) -> RoundOutcome:
        """Convert a win into experience and quest progress, then record the round."""
        state = round_engine.state
        if state.status == RoundStatus.WON:
            outcome = self._apply_win(state)
        else:
            logger.info(f"Player {self._player_id} lost '{state.word}' with {state.score} points")
            outcome = RoundOutcome(won=False, word=state.word, score=state.score, level=self._progression.progression.level)

        self._record_stats(state.word, outcome.won, state.score, state.max_attempts)
        return outcome

    def _apply_win(self, state: RoundState) -> RoundOutcome:
        leveled_up, levels_gained = self._progression.add_experience(state.score)

        events = [WIN_GAMES]
        if not state.wrong_letters:
            events.append(PERFECT_GAME)
        if state.difficulty == Difficulty.HARD:
            events.append(WIN_HARD)

        quest_xp = 0
        completed_quests = []
        for event in events:
            bonus_xp, newly_completed = self._quests.record(event, 1)
            quest_xp += bonus_xp
            completed_quests.extend(newly_completed)

        if quest_xp:
            quest_leveled_up, quest_levels = self._progression.add_experience(quest_xp)
            leveled_up = leveled_up or quest_leveled_up
            levels_gained += quest_levels

        logger.info(
            f"Player {self._player_id} won '{state.word}' with {state.score} points (+{quest_xp} quest XP)"
        )
        return RoundOutcome(
            won=True,
            word=state.word,
            score=state.score,
            xp_gained=state.score,
            quest_xp=quest_xp,
            leveled_up=leveled_up,
            levels_gained=levels_gained,
            level=self._progression.progression.level,
            completed_quests=completed_quests,
        )

    def _record_stats(self, word: str, won: bool, score: int, max_attempts: int) -> None:
        """Record the round in the stats store, logging save failures."""
        if self._stats_store is None:
            return
        try:
            self._stats_store.record_game(word, "win" if won else "lose", score, max_attempts)
        except OSError as e:
            logger.error(f"Failed to record statistics for player {self._player_id}: {e}", exc_info=True)

    def add_item(self, item: Item) -> bool:
        """Put an item into the inventory; False when it is full."""
        return self._inventory.add_item(item)

    def use_item(self, item_id: str) -> tuple[list[Effect], bool]:
        """Use an inventory item and return its effects."""
        return self._inventory.use_item(item_id)

    def effective_attributes(self) -> Attributes:
        """Attributes including worn equipment."""
        return StatCalculator.effective_attributes(self._progression.attributes, self._inventory.inventory)
