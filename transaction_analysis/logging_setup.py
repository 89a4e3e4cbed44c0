"""Package logging for ``transaction_analysis``.

Modules log through ``get_logger("transaction_analysis.<module>")`` and never
add handlers. Output is switched on once per process by the CLI, which passes
its :class:`~transaction_analysis.config.Settings` to :func:`configure_logging`.
Until then the package logger carries only a ``NullHandler``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import Settings

PACKAGE_LOGGER = "transaction_analysis"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def configure_logging(settings: Settings, *, stream: IO[str] | None = None) -> None:
    """Send package logs at ``settings.log_level`` and above to ``stream``.

    ``stream`` defaults to the ``sys.stderr`` current at call time. Only the
    first call has an effect.
    """

    global _configured
    if _configured:
        return

    pkg = logging.getLogger(PACKAGE_LOGGER)
    for h in [h for h in pkg.handlers if isinstance(h, logging.NullHandler)]:
        pkg.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg.addHandler(handler)
    pkg.setLevel(settings.log_level)
    # Records stop at the package logger; the root logger's handlers stay quiet.
    pkg.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not _configured and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "configure_logging", "get_logger"]
