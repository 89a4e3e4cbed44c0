"""Exception classes for ``transaction_analysis``.

All library errors derive from :class:`TransactionAnalysisError`. The concrete
classes also subclass ``ValueError`` so callers that already guard numeric or
parsing code with ``except ValueError`` keep working.

Absence is not an error: :meth:`TransactionStore.find_by_id` returns ``None``
when no record matches, and filters return empty lists.
"""

from __future__ import annotations

from typing import Any


class TransactionAnalysisError(Exception):
    """Base exception for transaction_analysis."""


class EmptyCollectionError(TransactionAnalysisError, ValueError):
    """An aggregation that needs at least one record ran over none."""


class InvalidDateError(TransactionAnalysisError, ValueError):
    """A date argument or record date could not be parsed."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"invalid date: {value!r}")


class MalformedRecordError(TransactionAnalysisError, ValueError):
    """A transaction record failed validation at the ingestion boundary."""


class ConfigError(TransactionAnalysisError, ValueError):
    """A setting from the environment or ``.env`` has an unusable value."""


__all__ = [
    "TransactionAnalysisError",
    "EmptyCollectionError",
    "InvalidDateError",
    "MalformedRecordError",
    "ConfigError",
]
