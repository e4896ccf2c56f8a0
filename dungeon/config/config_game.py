# dungeon/config/config_game.py
"""
Configuration for logging, numeric helpers, and the command system.
"""

# --- Logging ---
# Matches dungeon.utils.logger.LogLevel (0=DEBUG ... 4=CRITICAL)
LOG_LEVEL = 2

# --- Math Settings ---
FUZZY_COMPARE_TOLERANCE = 1e-8
FIBONACCI_TIME_LIMIT_SECONDS = 1.0
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# --- Command Settings ---
HELP_MAX_COMMANDS_PER_CATEGORY = 6
