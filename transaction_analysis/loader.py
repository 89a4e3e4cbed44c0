"""Record source: read a JSON array of transaction objects from disk.

Only the file shape is checked here (top-level array of objects). Field-level
validation is the store's job at ingestion.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from .errors import MalformedRecordError
from .logging_setup import get_logger

_logger = get_logger("transaction_analysis.loader")


def load_records(path: str | PathLike[str]) -> list[Mapping[str, Any]]:
    """Return the objects stored in the JSON array at ``path``.

    The file is read as UTF-8; a leading byte-order mark is skipped. ``OSError``
    (missing file, directory, no permission) propagates unchanged. Undecodable
    bytes, invalid JSON, a non-array top level, or a non-object element raise
    :class:`MalformedRecordError`.
    """

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{p}: not valid UTF-8: {e}") from e
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"{p}: invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedRecordError(
            f"{p}: expected a JSON array of transactions, got {type(data).__name__}"
        )
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise MalformedRecordError(
                f"{p}: element {i} is {type(item).__name__}, expected an object"
            )

    _logger.info("loaded %d transaction records from %s", len(data), p)
    return data


__all__ = ["load_records"]
