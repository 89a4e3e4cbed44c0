"""Date parsing shared by record validation and store queries.

Every date is reduced to a naive ``datetime`` in UTC so that records and query
bounds compare on one timeline:

- ``YYYY-MM-DD`` (and ``datetime.date`` values) mean midnight UTC.
- Full ISO-8601 date-times are accepted; an offset or ``Z`` suffix is
  converted to UTC and then dropped. Naive date-times are taken as UTC.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any, TypeAlias

from .errors import InvalidDateError

DateLike: TypeAlias = str | date | datetime


def to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def parse_date(value: Any) -> datetime:
    """Return ``value`` as a naive UTC ``datetime``.

    Raises :class:`InvalidDateError` for empty strings, unparseable strings,
    and values that are not strings, dates, or datetimes.
    """

    # datetime is a subclass of date; check it first.
    if isinstance(value, datetime):
        return to_utc_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise InvalidDateError(
            value, f"expected an ISO-8601 date string, got {type(value).__name__}"
        )

    s = value.strip()
    if not s:
        raise InvalidDateError(value, "empty date string")
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError as e:
        raise InvalidDateError(value) from e
    return to_utc_naive(parsed)


__all__ = ["DateLike", "parse_date", "to_utc_naive"]
