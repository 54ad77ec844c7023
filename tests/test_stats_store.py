"""Tests for StatsStore."""

import json

import pytest

from hangquest.persistence.stats_store import StatsStore


class TestStatsStore:
    """Test suite for StatsStore."""

    def test_empty_store(self, stats_store):
        """Test a store without a file."""
        assert stats_store.stats.games_played == 0
        assert stats_store.win_rate() == 0.0
        assert stats_store.average_score() == 0.0
        assert stats_store.last_games(5) == []

    def test_record_game(self, stats_store):
        """Test aggregate updates."""
        stats_store.record_game("kot", "win", 110, 6)
        stats_store.record_game("dom", "lose", -30, 6)

        stats = stats_store.stats
        assert stats.games_played == 2
        assert stats.games_won == 1
        assert stats.total_points == 80
        assert stats.highest_score == 110
        assert stats_store.win_rate() == 50.0
        assert stats_store.average_score() == 40.0

    def test_last_games(self, stats_store):
        """Test the recent-games window."""
        for index in range(7):
            stats_store.record_game(f"word{index}", "win", index, 8)
        assert [record.word for record in stats_store.last_games(3)] == ["word4", "word5", "word6"]
        assert len(stats_store.last_games(10)) == 7
        assert stats_store.last_games(0) == []

    def test_persisted(self, tmp_path):
        """Test that records survive a reload."""
        path = tmp_path / "nested" / "stats.json"
        StatsStore(path).record_game("kot", "win", 110, 4)

        reloaded = StatsStore(path)
        assert reloaded.stats.games_played == 1
        assert reloaded.stats.game_history[0].word == "kot"
        assert not path.with_suffix(".tmp").exists()

    def test_reset(self, stats_store):
        """Test clearing the statistics."""
        stats_store.record_game("kot", "win", 110, 6)
        stats_store.reset()
        assert stats_store.stats.games_played == 0
        assert json.loads(stats_store.file_path.read_text(encoding="utf-8"))["games_played"] == 0

    def test_corrupt_file_raises(self, tmp_path):
        """Test that an unreadable file is reported."""
        path = tmp_path / "stats.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            StatsStore(path)

    def test_failed_save_raises_and_keeps_stats(self, tmp_path):
        """Test that a failed save is reported and not applied in memory."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = StatsStore(blocker / "stats.json")
        with pytest.raises(OSError):
            store.record_game("kot", "win", 110, 6)
        assert store.stats.games_played == 0
