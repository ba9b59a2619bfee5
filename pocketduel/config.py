"""
Settings loaded from environment variables.
"""

import os

# Logging
LOG_LEVEL = os.getenv("POCKETDUEL_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Game settings
DEFAULT_SEED = int(os.getenv("POCKETDUEL_DEFAULT_SEED", "12345"))
OPENING_HAND_SIZE = int(os.getenv("POCKETDUEL_OPENING_HAND", "0"))
MAX_TURNS = int(os.getenv("POCKETDUEL_MAX_TURNS", "20"))
