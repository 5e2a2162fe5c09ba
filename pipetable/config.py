# pipetable/config.py
"""Environment configuration for the pipetable CLI.

Settings come from the process environment, optionally seeded from a .env
file. None of them change how a table is parsed or rendered.

Environment variables:
    PIPETABLE_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default: WARNING)
    PIPETABLE_TRACE_LOG: Trace file path (default: tracing disabled)
"""

import logging
import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

LOG_LEVEL_ENV_VAR = "PIPETABLE_LOG_LEVEL"
DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def load_environment(env_file: Union[str, Path] = DEFAULT_ENV_FILE) -> bool:
    """Load variables from an env file without overriding existing ones.

    Returns:
        True if the file existed and was loaded.
    """
    path = Path(env_file)
    if not path.is_file():
        return False
    return load_dotenv(path, override=False)


def resolve_log_level() -> int:
    """Return the logging level named by PIPETABLE_LOG_LEVEL."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    return _LOG_LEVELS.get(value, DEFAULT_LOG_LEVEL)


def configure_logging() -> None:
    """Configure root logging to stderr at the resolved level."""
    logging.basicConfig(level=resolve_log_level(), format=LOG_FORMAT)
