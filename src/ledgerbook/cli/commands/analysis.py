"""Analysis commands."""

import click

from ledgerbook.cli.commands.reports import format_amount
from ledgerbook.cli.journal_loading import journal_options, load_journal_or_exit
from ledgerbook.domain.analysis import cash_balance, expense_breakdown, monthly_trend
from ledgerbook.domain.reports import ReportService


@click.command("trend")
@journal_options
@click.pass_context
def trend(ctx, journal: str, **options):
    """Show revenue and operating expenses per month."""
    transactions = load_journal_or_exit(ctx, journal, **options)
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Month':<10} {'Revenue':>15} {'Expenses':>15} {'Net':>15}")
    click.echo("-" * 58)
    for totals in monthly_trend(transactions):
        click.echo(
            f"{totals.month:<10} {format_amount(totals.revenue):>15} "
            f"{format_amount(totals.expenses):>15} {format_amount(totals.net):>15}"
        )


@click.command("overview")
@journal_options
@click.option(
    "--max-slices",
    type=click.IntRange(min=1),
    default=6,
    show_default=True,
    help="Expense accounts to list before grouping the rest",
)
@click.pass_context
def overview(ctx, journal: str, max_slices: int, **options):
    """Show headline figures and the largest expense accounts."""
    transactions = load_journal_or_exit(ctx, journal, **options)
    if not transactions:
        click.echo("No transactions found.")
        return

    reports = ReportService().build_reports(transactions)
    pnl = reports.profit_and_loss

    click.echo(f"{'Total Revenue':<30} {format_amount(pnl.total_revenue):>15}")
    click.echo(f"{'Total Expenses':<30} {format_amount(pnl.total_expenses):>15}")
    click.echo(f"{'Net Profit / (Loss)':<30} {format_amount(pnl.net_profit):>15}")
    click.echo(
        f"{'Cash Balance':<30} {format_amount(cash_balance(reports.balance_sheet)):>15}"
    )

    breakdown = expense_breakdown(pnl, max_slices=max_slices)
    if breakdown:
        click.echo()
        click.echo("Largest Expenses")
        click.echo("-" * 46)
        for line in breakdown:
            click.echo(f"  {line.account[:28]:<28} {format_amount(line.amount):>15}")


def register_commands(cli):
    """Register analysis commands with main CLI."""
    cli.add_command(trend)
    cli.add_command(overview)
