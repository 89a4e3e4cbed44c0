"""Public interface for the ``transaction_analysis`` package.

Re-exports the store, the record model, and the error types. There is no
runtime logic here.
"""

from .errors import (
    ConfigError,
    EmptyCollectionError,
    InvalidDateError,
    MalformedRecordError,
    TransactionAnalysisError,
)
from .loader import load_records
from .models import CREDIT, DEBIT, Transaction, TransactionId, TransactionRecord
from .report import build_report
from .store import DominantType, TransactionStore

__all__ = [
    # Store
    "TransactionStore",
    "DominantType",
    "load_records",
    "build_report",
    # Models / types
    "Transaction",
    "TransactionId",
    "TransactionRecord",
    "DEBIT",
    "CREDIT",
    # Errors
    "ConfigError",
    "TransactionAnalysisError",
    "EmptyCollectionError",
    "InvalidDateError",
    "MalformedRecordError",
]
