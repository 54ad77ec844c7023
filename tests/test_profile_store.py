"""Tests for ProfileStore."""

from hangquest.engine.catalog import basic_quests, find_item
from hangquest.models.character import Progression
from hangquest.models.items import Inventory
from hangquest.models.profile import PlayerProfile
from hangquest.persistence.profile_store import ProfileStore


class TestProfileStore:
    """Test suite for ProfileStore."""

    def test_creates_directory(self, tmp_path):
        """Test that the dump directory is created."""
        directory = tmp_path / "profiles"
        ProfileStore(directory)
        assert directory.is_dir()

    def test_dump_and_load(self, tmp_path):
        """Test saving and restoring a profile."""
        store = ProfileStore(tmp_path)
        profile = PlayerProfile(
            player_id="abc",
            name="Ola",
            progression=Progression(level=3, experience=20, next_level_xp=225),
            inventory=Inventory(items=[find_item("amulet_wisdom")]),
            quests=basic_quests(),
        )

        path = store.dump_profile(profile)
        assert path.endswith("abc.json")
        assert store.load_profile("abc") == profile

    def test_missing_profile(self, tmp_path):
        """Test loading an unknown player."""
        assert ProfileStore(tmp_path).load_profile("nobody") is None

    def test_invalid_profile(self, tmp_path):
        """Test that a broken file loads as None."""
        (tmp_path / "broken.json").write_text("[]", encoding="utf-8")
        assert ProfileStore(tmp_path).load_profile("broken") is None

    def test_list_and_load_all(self, tmp_path):
        """Test listing saved players."""
        store = ProfileStore(tmp_path)
        store.dump_profile(PlayerProfile(player_id="b"))
        store.dump_profile(PlayerProfile(player_id="a"))
        (tmp_path / "broken.json").write_text("{", encoding="utf-8")

        assert store.list_players() == ["a", "b", "broken"]
        assert sorted(store.load_all_profiles()) == ["a", "b"]
