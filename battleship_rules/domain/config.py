# Board constraints enforced when a battlefield is created
MIN_WIDTH = 1
MIN_HEIGHT = 2

# Classic board defaults (used by the builtin fleets)
CLASSIC_BOARD_SIZE = 10

NUM_PLAYERS = 2

# Debug logging (enable with env BATTLESHIP_DEBUG=1)
DEBUG_ENV_VAR = "BATTLESHIP_DEBUG"
DEBUG_LOG_ENV_VAR = "BATTLESHIP_DEBUG_LOG"
DEFAULT_DEBUG_LOG_PATH = "battleship_debug.log"
LOGGER_NAME = "battleship_rules"
