"""Pytest configuration and fixtures."""

import pytest

from hangquest.engine.catalog import basic_quests
from hangquest.engine.session import GameSession
from hangquest.engine.words import WordsManager
from hangquest.localization import Language
from hangquest.models.profile import PlayerProfile
from hangquest.persistence.stats_store import StatsStore


@pytest.fixture
def words():
    """Word source that always returns 'kot'."""
    return WordsManager(["kot"])


@pytest.fixture
def profile():
    """Fresh player profile with the starter quests."""
    return PlayerProfile(player_id="player-1", name="Tester", quests=basic_quests(), language=Language.ENGLISH)


@pytest.fixture
def stats_store(tmp_path):
    """Stats store writing into a temporary directory."""
    return StatsStore(tmp_path / "stats.json")


@pytest.fixture
def session(profile, words, stats_store):
    """Game session for the fresh profile."""
    return GameSession(profile, words, stats_store=stats_store)
