"""Environment-driven settings.

Values come from the process environment. The CLI loads a ``.env`` file from
the working directory first (``python-dotenv``, never overriding variables
that are already set), so both sources work.

- ``TRANSACTION_ANALYSIS_DATA``: path to the JSON transactions file
  (default ``transaction.json`` in the working directory).
- ``TRANSACTION_ANALYSIS_LOG_LEVEL``: package log level, a standard level
  name or a number (default ``INFO``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

DATA_PATH_ENV = "TRANSACTION_ANALYSIS_DATA"
LOG_LEVEL_ENV = "TRANSACTION_ANALYSIS_LOG_LEVEL"
DEFAULT_DATA_FILE = "transaction.json"


@dataclass(frozen=True, slots=True)
class Settings:
    data_path: Path
    log_level: int = logging.INFO


def parse_log_level(value: str) -> int:
    """Resolve a level name (case-insensitive) or numeric string.

    Only the names registered with :mod:`logging` count as levels; anything
    else raises :class:`ConfigError`.
    """

    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigError(f"{LOG_LEVEL_ENV}: unknown log level {value!r}")
    return level


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""

    raw_path = os.getenv(DATA_PATH_ENV)
    if raw_path and raw_path.strip():
        data_path = Path(raw_path.strip()).expanduser()
    else:
        data_path = Path.cwd() / DEFAULT_DATA_FILE

    raw_level = os.getenv(LOG_LEVEL_ENV)
    if raw_level and raw_level.strip():
        return Settings(data_path=data_path, log_level=parse_log_level(raw_level))
    return Settings(data_path=data_path)


__all__ = [
    "DATA_PATH_ENV",
    "DEFAULT_DATA_FILE",
    "LOG_LEVEL_ENV",
    "Settings",
    "load_settings",
    "parse_log_level",
]
