"""Data models and type aliases for ``transaction_analysis``.

The record shape follows the JSON export the store is loaded from. Each input
key may appear under the export's own name (``transaction_amount``), the
camelCase name used by other producers (``merchantName``), or the plain
attribute name. Validation happens once, when a record enters the store;
queries rely on the typed fields afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, TypeAlias

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from .dates import parse_date
from .errors import MalformedRecordError

# ---------------------------------------------------------------------------
# Core record
# ---------------------------------------------------------------------------

# Opaque identifier. Kept exactly as supplied: ``3`` and ``"3"`` are different ids.
TransactionId: TypeAlias = StrictInt | StrictStr


class Transaction(BaseModel):
    """A single, immutable transaction record.

    Attributes
    ----------
    id:
        Opaque identifier (``int`` or ``str``). Uniqueness is not enforced.
    type:
        Open string label; ``"debit"`` and ``"credit"`` are the values the
        aggregations know about. Matching is exact and case-sensitive.
    amount:
        Real number with no sign or range constraint.
    date:
        Naive UTC timestamp (see :mod:`transaction_analysis.dates`).
    merchant_name:
        Free-form merchant label.
    description:
        Free-form description.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: StrictInt | StrictStr = Field(validation_alias=AliasChoices("transaction_id", "id"))
    type: StrictStr = Field(validation_alias=AliasChoices("transaction_type", "type"))
    amount: float = Field(validation_alias=AliasChoices("transaction_amount", "amount"))
    date: datetime = Field(validation_alias=AliasChoices("transaction_date", "date"))
    merchant_name: StrictStr = Field(
        validation_alias=AliasChoices("merchant_name", "merchantName")
    )
    description: StrictStr = Field(
        validation_alias=AliasChoices("transaction_description", "description")
    )

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_is_number(cls, v: Any) -> Any:
        # bool is an int subclass; "50" would otherwise be coerced in lax mode.
        if isinstance(v, bool) or not isinstance(v, int | float):
            raise ValueError(f"amount must be a number, got {type(v).__name__}")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> datetime:
        return parse_date(v)

    @classmethod
    def from_record(cls, record: Transaction | Mapping[str, Any]) -> Transaction:
        """Validate ``record`` into a :class:`Transaction`.

        Instances pass through unchanged. Anything else must be a mapping with
        every required field; failures raise :class:`MalformedRecordError`
        chained to the underlying pydantic error.
        """

        if isinstance(record, cls):
            return record
        if not isinstance(record, Mapping):
            raise MalformedRecordError(
                f"transaction record must be a mapping, got {type(record).__name__}"
            )
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            raise MalformedRecordError(f"invalid transaction record: {e}") from e

    def month(self) -> int:
        """Calendar month (1-12) of :attr:`date`."""

        return self.date.month

    def to_record(self) -> dict[str, Any]:
        """JSON-ready dict using the export's key names."""

        return {
            "transaction_id": self.id,
            "transaction_date": self.date.isoformat(),
            "transaction_amount": self.amount,
            "transaction_type": self.type,
            "transaction_description": self.description,
            "merchant_name": self.merchant_name,
        }


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

TransactionRecord: TypeAlias = Transaction | Mapping[str, Any]
"""Anything the store accepts as a record: a model or a raw JSON object."""

TransactionRecords: TypeAlias = Iterable[TransactionRecord]

# The two types that :meth:`TransactionStore.dominant_type` compares.
DEBIT = "debit"
CREDIT = "credit"
