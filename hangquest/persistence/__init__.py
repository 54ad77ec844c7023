"""Persistence of statistics and player profiles."""

from hangquest.persistence.profile_store import ProfileStore
from hangquest.persistence.stats_store import StatsStore

__all__ = ["ProfileStore", "StatsStore"]
