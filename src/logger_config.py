"""Opt-in logging setup for applications that use the checksum modules.

The library modules only create named loggers; nothing here runs on import.
"""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path

DEFAULT_LOG_CONFIG = "logging_config.ini"


def setup_logging(
    config_path: str | Path | None = None,
    default_level: int = logging.INFO,
    env_key: str = "LOG_CFG",
) -> Path | None:
    """Configure logging from an ini file, or fall back to basicConfig.

    The file is taken from *config_path*, then from the *env_key* environment
    variable, then ``logging_config.ini`` in the working directory. Returns
    the file that was loaded, or None when basicConfig was used.
    """
    value = os.getenv(env_key, None)
    if config_path is not None:
        path = Path(config_path)
    elif value:
        path = Path(value)
    else:
        path = Path(DEFAULT_LOG_CONFIG)

    if path.exists():
        logging.config.fileConfig(path.resolve(), disable_existing_loggers=False)
        return path

    logging.basicConfig(level=default_level)
    logging.getLogger(__name__).debug(
        "No logging config at %s, using basicConfig", path
    )
    return None
