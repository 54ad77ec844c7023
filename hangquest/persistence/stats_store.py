"""JSON store for game statistics."""

import json
import logging
from pathlib import Path
from typing import Literal

from hangquest.models.stats import GameRecord, PlayerStats

logger = logging.getLogger(__name__.split(".")[-1])


class StatsStore:
    """Records finished rounds and keeps aggregate statistics on disk."""

    def __init__(self, file_path: str | Path):
        """
        Initialize stats store.

        Args:
            file_path: JSON file holding the statistics; a missing file means no games yet
        """
        self.file_path = Path(file_path)
        self._stats = PlayerStats()
        if self.file_path.exists():
            self._stats = self._load()

    @property
    def stats(self) -> PlayerStats:
        """Get current statistics."""
        return self._stats

    def _load(self) -> PlayerStats:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                stats_data = json.load(f)
            stats = PlayerStats.model_validate(stats_data)
            logger.debug(f"Loaded statistics from {self.file_path}")
            return stats
        except Exception as e:
            logger.error(f"Error loading statistics from {self.file_path}: {e}", exc_info=True)
            raise

    def _save(self, stats: PlayerStats) -> None:
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)

            # Write to file atomically
            temp_path = self.file_path.with_suffix(".tmp")
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(stats.model_dump_json(indent=2))

            # Atomic rename
            temp_path.replace(self.file_path)
        except Exception as e:
            logger.error(f"Error saving statistics to {self.file_path}: {e}", exc_info=True)
            raise

    def record_game(self, word: str, result: Literal["win", "lose"], points: int, max_attempts: int) -> GameRecord:
        """
        Record a finished round and save.

        Args:
            word: Word of the round
            result: "win" or "lose"
            points: Round score
            max_attempts: Attempt budget of the round

        Returns:
            The stored record
        """
        record = GameRecord(word=word, result=result, points=points, difficulty=max_attempts)
        stats = self._stats
        new_stats = stats.model_copy(
            update={
                "games_played": stats.games_played + 1,
                "games_won": stats.games_won + (1 if result == "win" else 0),
                "total_points": stats.total_points + points,
                "highest_score": max(stats.highest_score, points),
                "game_history": stats.game_history + [record],
            }
        )
        self._save(new_stats)
        self._stats = new_stats
        logger.debug(f"Recorded {result} for '{word}' ({points} points)")
        return record

    def win_rate(self) -> float:
        """Share of won games, in percent."""
        if self._stats.games_played == 0:
            return 0.0
        return self._stats.games_won / self._stats.games_played * 100

    def average_score(self) -> float:
        """Average score per game."""
        if self._stats.games_played == 0:
            return 0.0
        return self._stats.total_points / self._stats.games_played

    def last_games(self, n: int) -> list[GameRecord]:
        """The n most recent games, oldest first."""
        if n <= 0:
            return []
        return self._stats.game_history[-n:]

    def reset(self) -> None:
        """Forget every recorded game."""
        new_stats = PlayerStats()
        self._save(new_stats)
        self._stats = new_stats
        logger.info(f"Statistics reset in {self.file_path}")
