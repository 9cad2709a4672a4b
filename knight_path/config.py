"""
Configuration constants for the Knight Path project.

All tunable parameters are defined here. Values can be overridden from
the environment or a local .env file.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Board Configuration
# =============================================================================

# Side length of the (square) board
BOARD_SIZE = int(os.environ.get("KNIGHT_BOARD_SIZE", "8"))

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when none is requested (bfs guarantees a shortest path)
DEFAULT_ALGORITHM = "bfs"

# Names accepted by knight_path.search.get_search
AVAILABLE_ALGORITHMS = ("bfs", "dfs")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
