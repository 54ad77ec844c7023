"""Central configuration defaults and constants for hangquest."""

import os

# Storage locations
DEFAULT_DATA_DIR = os.getenv("HANGQUEST_DATA_DIR", "data")
DEFAULT_WORDS_FILE = os.getenv(
    "HANGQUEST_WORDS_FILE", os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "words.txt")
)
DEFAULT_STATS_FILE = os.getenv("HANGQUEST_STATS_FILE", os.path.join(DEFAULT_DATA_DIR, "stats.json"))
DEFAULT_PROFILE_DIR = os.getenv("HANGQUEST_PROFILE_DIR", os.path.join(DEFAULT_DATA_DIR, "profiles"))
DEFAULT_STATS_DIR = os.getenv("HANGQUEST_STATS_DIR", os.path.join(DEFAULT_DATA_DIR, "stats"))

# Gameplay Defaults
# Selector as shown in the difficulty menu: 1 = easy, 2 = medium, 3 = hard
DEFAULT_DIFFICULTY = int(os.getenv("HANGQUEST_DEFAULT_DIFFICULTY", "2"))
DEFAULT_INVENTORY_CAPACITY = int(os.getenv("HANGQUEST_INVENTORY_CAPACITY", "10"))
DEFAULT_LANGUAGE = os.getenv("HANGQUEST_LANGUAGE", "pl")

# Scoring
POINTS_PER_HIT = 10
POINTS_PER_MISS = 5
WIN_BONUS = 50
POINTS_PER_REMAINING_ATTEMPT = 5

# Progression
BASE_LEVEL_XP = 100
LEVEL_XP_MULTIPLIER = 1.5
ATTRIBUTE_POINTS_PER_LEVEL = 2

# Input
DEFAULT_MAX_INPUT_LENGTH = int(os.getenv("HANGQUEST_MAX_INPUT_LENGTH", "16"))

# API
DEFAULT_MAX_SESSIONS = int(os.getenv("HANGQUEST_MAX_SESSIONS", "100"))

# Logging
DEFAULT_LOG_LEVEL = os.getenv("HANGQUEST_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"
