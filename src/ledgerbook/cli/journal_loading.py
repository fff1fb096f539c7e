"""CLI helpers for loading a journal and resolving date filters."""

from datetime import date
from typing import Callable

import click

from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import Transaction
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.journal_import import JournalImportService
from ledgerbook.domain.rules import CategorizationService
from ledgerbook.utils.date_parser import get_date_range, parse_date


def journal_options(func: Callable) -> Callable:
    """Add the journal argument and date filter options to a command."""
    func = click.option("--last-year", is_flag=True, help="Filter to previous year")(func)
    func = click.option("--last-month", is_flag=True, help="Filter to previous month")(func)
    func = click.option("--this-year", is_flag=True, help="Filter to current year")(func)
    func = click.option("--this-month", is_flag=True, help="Filter to current month")(func)
    func = click.option(
        "--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'last month')"
    )(func)
    func = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like 'this year')"
    )(func)
    func = click.argument("journal", type=click.Path())(func)
    return func


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --last-month, --last-year) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period_count == 1:
        period = next(name for name, is_set in period_flags.items() if is_set)
        return get_date_range(period)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return start, end


def load_journal_or_exit(
    ctx: click.Context,
    journal: str,
    *,
    start_date: str | None = None,
    end_date: str | None = None,
    this_month: bool = False,
    this_year: bool = False,
    last_month: bool = False,
    last_year: bool = False,
) -> list[Transaction]:
    """Load, categorize and date-filter a journal, or exit with a CLI error.

    Rejected rows are reported on stderr and skipped.
    """
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "this-year": this_year,
            "last-month": last_month,
            "last-year": last_year,
        },
    )

    import_service = JournalImportService()
    try:
        result = import_service.load_transactions(journal)
        rules_path = (ctx.obj or {}).get("rules_path")
        rules = import_service.load_rules(rules_path) if rules_path else []
    except DomainError as e:
        handle_domain_error(ctx, e)

    for error in result.errors:
        click.echo(f"Warning: {error}", err=True)

    transactions = CategorizationService(rules).apply(result.transactions)
    return [
        txn
        for txn in transactions
        if (start is None or txn.date >= start) and (end is None or txn.date <= end)
    ]
