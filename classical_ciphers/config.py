import logging
import os

ALPHABET_SIZE = 26

# --- Playfair ---
FILLER = 'X'
MERGED_LETTER = 'J'      # never stored in the square
MERGED_INTO = 'I'
SQUARE_SIZE = 5

# --- Caesar key range accepted by the command line ---
CAESAR_KEY_MIN = 1
CAESAR_KEY_MAX = 25

# --- Logging ---
PACKAGE_LOGGER = "classical_ciphers"
LOG_LEVEL_ENV = "CLASSICAL_CIPHERS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def log_level_from_env(default: int = logging.WARNING) -> int:
    """
    Reads the log level name (DEBUG, INFO, ...) from CLASSICAL_CIPHERS_LOG_LEVEL.
    Unknown names fall back to the default.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(verbose: bool = False) -> None:
    """
    Sets the level on the classical_ciphers logger only, so third-party
    loggers (matplotlib) stay at WARNING.
    """
    level = logging.DEBUG if verbose else log_level_from_env()
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
