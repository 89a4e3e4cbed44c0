"""Pytest configuration and shared fixtures.

Every test runs in its own temporary working directory with the package's
environment variables cleared, so a developer's ``.env`` or exported settings
never leak into assertions. The package logger is reset afterwards because
``configure_logging`` is a process-wide, run-once switch.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from transaction_analysis import logging_setup
from transaction_analysis.store import TransactionStore

# Six records spanning two years, three types, and one integer id.
SAMPLE_RECORDS: tuple[dict[str, Any], ...] = (
    {
        "transaction_id": "1",
        "transaction_date": "2019-01-10",
        "transaction_amount": 50,
        "transaction_type": "debit",
        "transaction_description": "Groceries",
        "merchant_name": "SuperMart",
    },
    {
        "transaction_id": "2",
        "transaction_date": "2019-02-10",
        "transaction_amount": 30,
        "transaction_type": "credit",
        "transaction_description": "Refund",
        "merchant_name": "Electronics Store",
    },
    {
        "transaction_id": "3",
        "transaction_date": "2019-01-15",
        "transaction_amount": 75.5,
        "transaction_type": "debit",
        "transaction_description": "Dinner",
        "merchant_name": "Cafe Central",
    },
    {
        "transaction_id": "4",
        "transaction_date": "2019-03-05",
        "transaction_amount": 120,
        "transaction_type": "credit",
        "transaction_description": "Salary",
        "merchant_name": "Employer Inc",
    },
    {
        "transaction_id": "5",
        "transaction_date": "2019-07-20",
        "transaction_amount": 100,
        "transaction_type": "debit",
        "transaction_description": "Groceries",
        "merchant_name": "SuperMart",
    },
    {
        "transaction_id": 6,
        "transaction_date": "2020-01-02",
        "transaction_amount": 20,
        "transaction_type": "transfer",
        "transaction_description": "Top-up",
        "merchant_name": "Bank",
    },
)


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TRANSACTION_ANALYSIS_DATA", raising=False)
    monkeypatch.delenv("TRANSACTION_ANALYSIS_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("transaction_analysis")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._configured = False


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def store(sample_records: list[dict[str, Any]]) -> TransactionStore:
    return TransactionStore(sample_records)


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    """Factory for a valid raw record; keyword arguments override fields."""

    counter = iter(range(1000, 10_000))

    def _make(**overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "transaction_id": str(next(counter)),
            "transaction_date": "2019-05-01",
            "transaction_amount": 10,
            "transaction_type": "debit",
            "transaction_description": "Coffee",
            "merchant_name": "Cafe",
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def data_file(tmp_path: Path, sample_records: list[dict[str, Any]]) -> Path:
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path
