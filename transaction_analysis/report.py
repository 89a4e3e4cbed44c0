"""Presentation helpers: the full console report over a store.

:func:`build_report` returns ``(label, value)`` pairs in display order; values
are plain Python data (records as export-style dicts) ready for JSON output.
Aggregations that are undefined for the data at hand (e.g. the average of an
empty store) are reported as ``None``, never as ``0``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .errors import EmptyCollectionError
from .models import CREDIT, DEBIT, Transaction
from .store import TransactionStore

# Fixed query arguments of the standard report.
REPORT_DATE_RANGE = ("2019-01-01", "2019-12-31")
REPORT_MERCHANT = "SuperMart"
REPORT_AMOUNT_RANGE = (50, 100)
REPORT_BEFORE_DATE = "2019-06-01"
REPORT_LOOKUP_ID = "3"


def to_jsonable(value: Any) -> Any:
    """Convert records (and sequences of them) into JSON-ready values."""

    if isinstance(value, Transaction):
        return value.to_record()
    if isinstance(value, list | tuple):
        return [to_jsonable(v) for v in value]
    return value


def _defined(compute: Callable[[], Any]) -> Any:
    try:
        return compute()
    except EmptyCollectionError:
        return None


def build_report(store: TransactionStore) -> Sequence[tuple[str, Any]]:
    """Run every standard query against ``store`` and collect the results."""

    start, end = REPORT_DATE_RANGE
    lo, hi = REPORT_AMOUNT_RANGE
    rows: list[tuple[str, Any]] = [
        ("All transactions", store.get_all()),
        ("Unique transaction types", store.unique_types()),
        ("Total amount", store.total_amount()),
        ("Average amount", _defined(store.average_amount)),
        (f"Transactions of type '{DEBIT}'", store.by_type(DEBIT)),
        (f"Transactions of type '{CREDIT}'", store.by_type(CREDIT)),
        (f"Transactions from {start} to {end}", store.by_date_range(start, end)),
        (f"Transactions at '{REPORT_MERCHANT}'", store.by_merchant(REPORT_MERCHANT)),
        (f"Transactions between {lo} and {hi}", store.by_amount_range(lo, hi)),
        ("Total debit amount", store.total_debit()),
        ("Most active month", _defined(store.most_active_month)),
        ("Most active debit month", _defined(store.most_active_debit_month)),
        ("Dominant transaction type", store.dominant_type()),
        (f"Transactions before {REPORT_BEFORE_DATE}", store.before(REPORT_BEFORE_DATE)),
        (f"Transaction with id '{REPORT_LOOKUP_ID}'", store.find_by_id(REPORT_LOOKUP_ID)),
        ("Transaction descriptions", store.descriptions()),
    ]
    return [(label, to_jsonable(value)) for label, value in rows]


__all__ = ["build_report", "to_jsonable"]
