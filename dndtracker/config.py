"""Central configuration defaults and constants for dndtracker."""

import os

# Encounter Settings Defaults
# Fixed values: default constructors must not depend on the environment
DEFAULT_ALLOW_PLAYER_VISIBILITY = True
DEFAULT_AUTO_ROLL_INITIATIVE = False
DEFAULT_TRACK_RESOURCES = True
DEFAULT_ENABLE_LAIR_ACTIONS = False
DEFAULT_ENABLE_GRID_MOVEMENT = False
DEFAULT_GRID_SIZE = 5  # feet per square

# Combat State Defaults
DEFAULT_CURRENT_ROUND = 0
DEFAULT_CURRENT_TURN = 0
DEFAULT_TOTAL_DURATION = 0  # milliseconds

# Initiative
INITIATIVE_DIE_SIDES = 20
DEFAULT_DEXTERITY = 10  # Tie-break score when the caller supplies none
UNROLLED_INITIATIVE = 0

# Difficulty thresholds: upper bound (exclusive) of combatants-per-player ratio
DIFFICULTY_TRIVIAL_MAX_RATIO = 1.5
DIFFICULTY_EASY_MAX_RATIO = 2.5
DIFFICULTY_MEDIUM_MAX_RATIO = 3.0
DIFFICULTY_HARD_MAX_RATIO = 3.5

# Encounter Defaults
DEFAULT_ENCOUNTER_VERSION = 1
DEFAULT_COPY_SUFFIX = " (Copy)"

# Logging
DEFAULT_LOG_LEVEL = os.getenv("DNDTRACKER_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"
