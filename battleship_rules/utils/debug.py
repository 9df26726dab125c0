import logging
import os
from typing import Optional

from battleship_rules.domain.config import (
    DEBUG_ENV_VAR,
    DEBUG_LOG_ENV_VAR,
    DEFAULT_DEBUG_LOG_PATH,
    LOGGER_NAME,
)

# -----------------------------
# Debug helpers (enable with env BATTLESHIP_DEBUG=1 or set DEBUG_ENABLED)
# -----------------------------
DEBUG_ENABLED = False
DEBUG_LOG_PATH = os.environ.get(DEBUG_LOG_ENV_VAR, DEFAULT_DEBUG_LOG_PATH)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_file_handler: Optional[logging.FileHandler] = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    return DEBUG_ENABLED or _env_flag(DEBUG_ENV_VAR, False)


def _close_file_handler() -> None:
    global _file_handler
    if _file_handler is None:
        return
    logger.removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None
    logger.setLevel(logging.NOTSET)


def _ensure_file_handler() -> None:
    global _file_handler
    if _file_handler is not None and _file_handler.baseFilename == os.path.abspath(DEBUG_LOG_PATH):
        return
    _close_file_handler()
    handler = logging.FileHandler(DEBUG_LOG_PATH, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    _file_handler = handler


def debug_event(
    title: str,
    message: str,
    details: str = "",
    *,
    level: str = "info",
) -> None:
    """Log a debug event, mirrored to the debug log file when debug mode is on."""
    lvl = _LEVELS.get(level, logging.INFO)
    try:
        if debug_enabled():
            _ensure_file_handler()
        else:
            _close_file_handler()
        logger.log(lvl, "%s | %s", title, message)
        if details:
            for ln in details.splitlines():
                logger.log(lvl, "    %s", ln)
    except OSError:
        # an unwritable log file must not break a game call
        pass
