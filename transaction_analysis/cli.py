"""CLI for the ``transaction_analysis`` package.

A Typer console interface over :class:`~transaction_analysis.store.TransactionStore`.
The root callback loads ``.env`` from the working directory (without
overriding variables already set), configures logging, and records which data
file to read. Each subcommand loads the store, runs one query, and prints the
result as JSON on stdout. Library errors are reported on stderr as
``Error: ...`` with exit status 1.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import load_settings
from .errors import ConfigError, TransactionAnalysisError
from .logging_setup import configure_logging, get_logger
from .report import build_report, to_jsonable
from .store import TransactionStore

_logger = get_logger("transaction_analysis.cli")

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="transaction-analysis",
    no_args_is_help=True,
    add_completion=False,
    help="Query and aggregate transactions from a JSON file.",
)


def _fail(message: str) -> typer.Exit:
    err_console.print(f"Error: {message}", markup=False, highlight=False, soft_wrap=True)
    return typer.Exit(1)


def _open_store(ctx: typer.Context) -> TransactionStore:
    data_path: Path = ctx.obj["data_path"]
    try:
        return TransactionStore.from_file(data_path)
    except FileNotFoundError:
        raise _fail(f"File not found: {data_path}") from None
    except PermissionError:
        raise _fail(f"Permission denied: {data_path}") from None
    except OSError as e:
        raise _fail(f"Cannot read {data_path}: {e.strerror or e}") from None
    except TransactionAnalysisError as e:
        raise _fail(str(e)) from e


def _run(ctx: typer.Context, query: Callable[[TransactionStore], Any]) -> None:
    """Load the store, run ``query`` and print its result as JSON."""

    store = _open_store(ctx)
    try:
        result = query(store)
    except TransactionAnalysisError as e:
        _logger.debug("query failed: %s", e)
        raise _fail(str(e)) from e
    typer.echo(json.dumps(to_jsonable(result), ensure_ascii=False, indent=2))


# ---- Commands -----------------------------------------------------------------


@app.command("report")
def report_cmd(ctx: typer.Context) -> None:
    """Print every standard query, one labelled section each."""

    store = _open_store(ctx)
    for label, value in build_report(store):
        console.print(f"{label}:", markup=False, highlight=False)
        console.print_json(data=value, ensure_ascii=False)


@app.command("all")
def all_cmd(ctx: typer.Context) -> None:
    """All transactions in file order."""

    _run(ctx, lambda s: s.get_all())


@app.command("types")
def types_cmd(ctx: typer.Context) -> None:
    """Distinct transaction types, first occurrence first."""

    _run(ctx, lambda s: s.unique_types())


@app.command("total")
def total_cmd(ctx: typer.Context) -> None:
    """Sum of all amounts."""

    _run(ctx, lambda s: s.total_amount())


@app.command("average")
def average_cmd(ctx: typer.Context) -> None:
    """Mean amount (fails on an empty file)."""

    _run(ctx, lambda s: s.average_amount())


@app.command("by-type")
def by_type_cmd(
    ctx: typer.Context,
    transaction_type: Annotated[str, typer.Argument(help="Exact type, e.g. debit")],
) -> None:
    """Transactions of one type."""

    _run(ctx, lambda s: s.by_type(transaction_type))


@app.command("date-range")
def date_range_cmd(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Inclusive start, YYYY-MM-DD")],
    end: Annotated[str, typer.Argument(help="Inclusive end, YYYY-MM-DD")],
) -> None:
    """Transactions dated within [START, END]."""

    _run(ctx, lambda s: s.by_date_range(start, end))


@app.command("merchant")
def merchant_cmd(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Exact merchant name")],
) -> None:
    """Transactions at one merchant."""

    _run(ctx, lambda s: s.by_merchant(name))


@app.command("amount-range")
def amount_range_cmd(
    ctx: typer.Context,
    min_amount: Annotated[float, typer.Argument(help="Inclusive lower bound")],
    max_amount: Annotated[float, typer.Argument(help="Inclusive upper bound")],
) -> None:
    """Transactions with MIN <= amount <= MAX."""

    _run(ctx, lambda s: s.by_amount_range(min_amount, max_amount))


@app.command("total-debit")
def total_debit_cmd(ctx: typer.Context) -> None:
    """Sum of debit amounts."""

    _run(ctx, lambda s: s.total_debit())


@app.command("total-credit")
def total_credit_cmd(ctx: typer.Context) -> None:
    """Sum of credit amounts."""

    _run(ctx, lambda s: s.total_credit())


@app.command("active-month")
def active_month_cmd(
    ctx: typer.Context,
    debit: Annotated[bool, typer.Option("--debit", help="Count debit transactions only")] = False,
) -> None:
    """Month (1-12) with the most transactions; ties go to the earliest month."""

    if debit:
        _run(ctx, lambda s: s.most_active_debit_month())
    else:
        _run(ctx, lambda s: s.most_active_month())


@app.command("dominant-type")
def dominant_type_cmd(ctx: typer.Context) -> None:
    """debit, credit, or equal."""

    _run(ctx, lambda s: s.dominant_type())


@app.command("before")
def before_cmd(
    ctx: typer.Context,
    when: Annotated[str, typer.Argument(help="Exclusive cutoff, YYYY-MM-DD")],
) -> None:
    """Transactions dated strictly before DATE."""

    _run(ctx, lambda s: s.before(when))


@app.command("after")
def after_cmd(
    ctx: typer.Context,
    when: Annotated[str, typer.Argument(help="Exclusive cutoff, YYYY-MM-DD")],
) -> None:
    """Transactions dated strictly after DATE."""

    _run(ctx, lambda s: s.after(when))


@app.command("find")
def find_cmd(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(help="Transaction id")],
    numeric: Annotated[
        bool, typer.Option("--numeric", help="Match the id as an integer, not a string")
    ] = False,
) -> None:
    """Look up a transaction by id; prints null when absent."""

    lookup: int | str = transaction_id
    if numeric:
        try:
            lookup = int(transaction_id)
        except ValueError:
            raise _fail(f"not an integer id: {transaction_id!r}") from None
    _run(ctx, lambda s: s.find_by_id(lookup))


@app.command("descriptions")
def descriptions_cmd(ctx: typer.Context) -> None:
    """Every description, in file order."""

    _run(ctx, lambda s: s.descriptions())


@app.callback()
def _root(
    ctx: typer.Context,
    data: Annotated[
        Path | None,
        typer.Option(
            "--data",
            help=(
                "JSON transactions file "
                "(default: TRANSACTION_ANALYSIS_DATA or ./transaction.json)"
            ),
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Root command: load ``.env``, configure logging, resolve the data file."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    try:
        settings = load_settings()
    except ConfigError as e:
        raise _fail(str(e)) from e
    configure_logging(settings)
    ctx.obj = {"data_path": data if data is not None else settings.data_path}


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
