"""In-memory transaction store and its query/aggregation surface.

:class:`TransactionStore` holds an ordered list of validated
:class:`~transaction_analysis.models.Transaction` records and answers read
queries over it. Every query is a single linear scan; none mutates the store.
The only write is :meth:`TransactionStore.add_transaction`, which appends.

Concurrency: single writer. Readers must not run while another thread calls
``add_transaction``; the store does no locking of its own.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterator
from os import PathLike
from typing import Literal, TypeAlias

from .dates import DateLike, parse_date
from .errors import EmptyCollectionError
from .logging_setup import get_logger
from .models import (
    CREDIT,
    DEBIT,
    Transaction,
    TransactionId,
    TransactionRecord,
    TransactionRecords,
)

_logger = get_logger("transaction_analysis.store")

DominantType: TypeAlias = Literal["debit", "credit", "equal"]


def _most_common_month(transactions: list[Transaction], *, what: str) -> int:
    """Return the month (1-12) with the most records.

    Ties go to the lowest month number, regardless of record order.
    """

    if not transactions:
        raise EmptyCollectionError(f"no {what} to find the most active month")
    counts = Counter(t.month() for t in transactions)
    # max() keeps the first maximal item, and the months are iterated ascending.
    month = max(sorted(counts), key=counts.__getitem__)
    _logger.debug("most active month over %d %s: %d", len(transactions), what, month)
    return month


class TransactionStore:
    """Ordered, append-only collection of transactions with read queries."""

    def __init__(self, transactions: TransactionRecords = ()) -> None:
        self._transactions: list[Transaction] = [
            Transaction.from_record(record) for record in transactions
        ]
        _logger.debug("store created with %d transactions", len(self._transactions))

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> TransactionStore:
        """Build a store from a JSON array file (see :mod:`.loader`)."""

        from .loader import load_records

        return cls(load_records(path))

    # ---- Mutation -----------------------------------------------------------

    def add_transaction(self, transaction: TransactionRecord) -> Transaction:
        """Validate ``transaction`` and append it; return the stored record.

        Raises :class:`MalformedRecordError` before touching the store when the
        record is not a valid transaction.
        """

        record = Transaction.from_record(transaction)
        self._transactions.append(record)
        _logger.debug("appended transaction id=%r", record.id)
        return record

    # ---- Plain reads --------------------------------------------------------

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    def get_all(self) -> tuple[Transaction, ...]:
        """All records in insertion order, as an immutable snapshot."""

        return tuple(self._transactions)

    def unique_types(self) -> list[str]:
        """Distinct ``type`` values in order of first occurrence."""

        return list(dict.fromkeys(t.type for t in self._transactions))

    def descriptions(self) -> list[str]:
        return [t.description for t in self._transactions]

    def find_by_id(self, transaction_id: TransactionId) -> Transaction | None:
        """First record whose id equals ``transaction_id``, or ``None``.

        Equality is type-sensitive: ``3`` does not match ``"3"``.
        """

        for t in self._transactions:
            if type(t.id) is type(transaction_id) and t.id == transaction_id:
                return t
        return None

    # ---- Filters ------------------------------------------------------------

    def _filter(self, predicate: Callable[[Transaction], bool]) -> list[Transaction]:
        return [t for t in self._transactions if predicate(t)]

    def by_type(self, transaction_type: str) -> list[Transaction]:
        return self._filter(lambda t: t.type == transaction_type)

    def by_merchant(self, merchant_name: str) -> list[Transaction]:
        return self._filter(lambda t: t.merchant_name == merchant_name)

    def by_amount_range(self, min_amount: float, max_amount: float) -> list[Transaction]:
        """Records with ``min_amount <= amount <= max_amount``.

        An inverted range (``min_amount > max_amount``) matches nothing.
        """

        if min_amount > max_amount:
            return []
        return self._filter(lambda t: min_amount <= t.amount <= max_amount)

    def by_date_range(self, start: DateLike, end: DateLike) -> list[Transaction]:
        """Records dated between ``start`` and ``end``, both inclusive.

        Both bounds are parsed before scanning; an unparseable bound raises
        :class:`InvalidDateError` instead of matching nothing.
        """

        lo = parse_date(start)
        hi = parse_date(end)
        return self._filter(lambda t: lo <= t.date <= hi)

    def before(self, when: DateLike) -> list[Transaction]:
        """Records dated strictly earlier than ``when``."""

        cutoff = parse_date(when)
        return self._filter(lambda t: t.date < cutoff)

    def after(self, when: DateLike) -> list[Transaction]:
        """Records dated strictly later than ``when``."""

        cutoff = parse_date(when)
        return self._filter(lambda t: t.date > cutoff)

    # ---- Aggregations -------------------------------------------------------

    def total_amount(self) -> float:
        """Sum of all amounts; ``0`` for an empty store."""

        return sum(t.amount for t in self._transactions)

    def average_amount(self) -> float:
        """Mean amount.

        Raises :class:`EmptyCollectionError` on an empty store; the mean of no
        records is undefined and is never reported as ``0``.
        """

        if not self._transactions:
            raise EmptyCollectionError("cannot average an empty store")
        return self.total_amount() / len(self._transactions)

    def total_debit(self) -> float:
        return sum(t.amount for t in self._transactions if t.type == DEBIT)

    def total_credit(self) -> float:
        return sum(t.amount for t in self._transactions if t.type == CREDIT)

    def most_active_month(self) -> int:
        """Month (1-12) with the most records; ties go to the lowest month."""

        return _most_common_month(self._transactions, what="transactions")

    def most_active_debit_month(self) -> int:
        """As :meth:`most_active_month`, over debit records only."""

        return _most_common_month(self.by_type(DEBIT), what="debit transactions")

    def dominant_type(self) -> DominantType:
        """``"debit"`` or ``"credit"``, whichever is more frequent, else ``"equal"``.

        Only those two types are counted; other types never win, however many
        there are.
        """

        counts = Counter(t.type for t in self._transactions)
        debits, credits = counts[DEBIT], counts[CREDIT]
        if debits > credits:
            return "debit"
        if credits > debits:
            return "credit"
        return "equal"


__all__ = ["DominantType", "TransactionStore"]
