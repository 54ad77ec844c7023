"""Profile store for saving player profiles to disk."""

import json
import logging
from pathlib import Path
from typing import Optional

from hangquest.models.profile import PlayerProfile

logger = logging.getLogger(__name__.split(".")[-1])


class ProfileStore:
    """Dumps player profiles to disk and loads them back."""

    def __init__(self, dump_directory: str | Path = "data/profiles"):
        """
        Initialize profile store.

        Args:
            dump_directory: Directory where profiles will be saved
        """
        self.dump_directory = Path(dump_directory)
        self._ensure_directory_exists()

    def _ensure_directory_exists(self) -> None:
        """Ensure dump directory exists, create if it doesn't."""
        try:
            self.dump_directory.mkdir(parents=True, exist_ok=True)
            logger.info(f"Profile directory ready: {self.dump_directory}")
        except PermissionError:
            logger.error(f"Permission denied creating directory: {self.dump_directory}")
            raise
        except OSError as e:
            logger.error(f"Error creating directory {self.dump_directory}: {e}")
            raise

    def _get_profile_path(self, player_id: str) -> Path:
        return self.dump_directory / f"{player_id}.json"

    def dump_profile(self, profile: PlayerProfile) -> str:
        """
        Dump a profile to {player_id}.json.

        Returns:
            Path to the dumped file
        """
        file_path = self._get_profile_path(profile.player_id)

        try:
            # Write to file atomically
            temp_path = file_path.with_suffix(".tmp")
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(profile.model_dump_json(indent=2))

            # Atomic rename
            temp_path.replace(file_path)

            logger.debug(f"Dumped profile {profile.player_id} to {file_path}")
            return str(file_path)

        except Exception as e:
            logger.error(f"Error dumping profile {profile.player_id} to {file_path}: {e}", exc_info=True)
            raise

    def load_profile(self, player_id: str) -> Optional[PlayerProfile]:
        """
        Load a profile from disk.

        Returns:
            PlayerProfile if found and valid, None otherwise
        """
        file_path = self._get_profile_path(player_id)
        if not file_path.exists():
            logger.warning(f"Profile file not found: {file_path}")
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                profile_data = json.load(f)

            profile = PlayerProfile.model_validate(profile_data)
            logger.debug(f"Loaded profile from {file_path}")
            return profile
        except Exception as e:
            logger.error(f"Error loading profile from {file_path}: {e}", exc_info=True)
            return None

    def list_players(self) -> list[str]:
        """
        List all player IDs that have saved profiles.

        Returns:
            List of player IDs
        """
        if not self.dump_directory.exists():
            return []
        return sorted(path.stem for path in self.dump_directory.glob("*.json") if path.is_file())

    def load_all_profiles(self) -> dict[str, PlayerProfile]:
        """
        Load every saved profile.

        Returns:
            Dictionary mapping player_id to PlayerProfile
        """
        profiles = {}
        for player_id in self.list_players():
            profile = self.load_profile(player_id)
            if profile:
                profiles[player_id] = profile
            else:
                logger.warning(f"Failed to load profile {player_id}")
        return profiles
