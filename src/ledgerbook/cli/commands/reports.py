"""Financial report commands."""

from decimal import Decimal

import click

from ledgerbook.cli.journal_loading import journal_options, load_journal_or_exit
from ledgerbook.domain.entities import (
    BalanceSheet,
    CashFlowStatement,
    FinancialReports,
    ProfitAndLoss,
    ReportLine,
    TrialBalance,
)
from ledgerbook.domain.reports import ReportService

WIDTH = 72
NAME_WIDTH = 44


def format_amount(amount: Decimal) -> str:
    """Format an amount with thousands separators, negatives in parentheses."""
    if amount < 0:
        return f"({-amount:,.2f})"
    return f"{amount:,.2f}"


def echo_line(name: str, amount: Decimal, indent: int = 2) -> None:
    """Echo one labelled amount, right-aligned to the report width."""
    name_width = NAME_WIDTH - indent
    click.echo(f"{' ' * indent}{name:<{name_width}} {format_amount(amount):>{WIDTH - NAME_WIDTH - 1}}")


def echo_section(title: str, lines: tuple[ReportLine, ...], total_label: str, total: Decimal) -> None:
    """Echo a titled report section followed by its total."""
    click.echo(title)
    if not lines:
        click.echo("  (none)")
    for line in lines:
        echo_line(line.account, line.amount, indent=4)
    echo_line(total_label, total)


def display_trial_balance(trial_balance: TrialBalance) -> None:
    """Display trial balance rows in debit and credit columns."""
    click.echo("Trial Balance")
    click.echo("=" * WIDTH)
    click.echo(f"{'Account':<40} {'Debit':>15} {'Credit':>15}")
    click.echo("-" * WIDTH)
    for row in trial_balance.balances:
        debit = format_amount(row.debit) if row.debit else ""
        credit = format_amount(row.credit) if row.credit else ""
        click.echo(f"{row.account[:40]:<40} {debit:>15} {credit:>15}")
    click.echo("-" * WIDTH)
    click.echo(
        f"{'Total':<40} {format_amount(trial_balance.total_debit):>15} "
        f"{format_amount(trial_balance.total_credit):>15}"
    )


def display_profit_and_loss(pnl: ProfitAndLoss) -> None:
    """Display the profit & loss statement."""
    click.echo("Profit & Loss Statement")
    click.echo("=" * WIDTH)
    echo_section("Revenue", pnl.revenues, "Total Revenue", pnl.total_revenue)
    click.echo()
    echo_section("Operating Expenses", pnl.expenses, "Total Expenses", pnl.total_expenses)
    click.echo("-" * WIDTH)
    echo_line("Net Profit / (Loss)", pnl.net_profit, indent=0)


def display_balance_sheet(balance_sheet: BalanceSheet) -> None:
    """Display the balance sheet."""
    click.echo("Balance Sheet")
    click.echo("=" * WIDTH)
    echo_section("Assets", balance_sheet.assets, "Total Assets", balance_sheet.total_assets)
    click.echo()
    echo_section(
        "Liabilities",
        balance_sheet.liabilities,
        "Total Liabilities",
        balance_sheet.total_liabilities,
    )
    click.echo()
    echo_section("Equity", balance_sheet.equity, "Total Equity", balance_sheet.total_equity)
    click.echo("-" * WIDTH)
    echo_line(
        "Total Liabilities & Equity",
        balance_sheet.total_liabilities_and_equity,
        indent=0,
    )


def display_cash_flow(cash_flow: CashFlowStatement) -> None:
    """Display the cash flow statement with opening and closing cash."""
    click.echo("Cash Flow Statement")
    click.echo("=" * WIDTH)
    echo_section(
        "Operating Activities",
        cash_flow.operating,
        "Net Cash from Operating Activities",
        cash_flow.total_operating,
    )
    click.echo()
    echo_section(
        "Investing Activities",
        cash_flow.investing,
        "Net Cash from Investing Activities",
        cash_flow.total_investing,
    )
    click.echo()
    echo_section(
        "Financing Activities",
        cash_flow.financing,
        "Net Cash from Financing Activities",
        cash_flow.total_financing,
    )
    click.echo("-" * WIDTH)
    echo_line("Net Increase / (Decrease) in Cash", cash_flow.net_cash_flow, indent=0)
    echo_line("Cash at Beginning of Period", cash_flow.starting_bank_balance, indent=0)
    echo_line("Cash at End of Period", cash_flow.ending_bank_balance, indent=0)


def display_diagnostics(reports: FinancialReports) -> None:
    """Display diagnostics, if the reports raised any."""
    if not reports.has_warnings:
        return
    click.echo()
    click.echo("Diagnostics")
    click.echo("-" * WIDTH)
    for diagnostic in reports.diagnostics:
        click.echo(f"  [{diagnostic.code}] {diagnostic.message}")


def build_reports_or_exit(
    ctx: click.Context,
    journal: str,
    options: dict,
    owner_movements_as_financing: bool = False,
) -> FinancialReports | None:
    """Load a journal and build its reports; None when nothing is in range."""
    transactions = load_journal_or_exit(ctx, journal, **options)
    if not transactions:
        click.echo("No transactions found.")
        return None
    service = ReportService(owner_movements_as_financing=owner_movements_as_financing)
    return service.build_reports(transactions)


owner_movements_option = click.option(
    "--owner-movements-as-financing",
    is_flag=True,
    help="Show personal movements against capital or drawings accounts as financing",
)


@click.command("trial-balance")
@journal_options
@click.pass_context
def trial_balance(ctx, journal: str, **options):
    """Show the trial balance of a journal file."""
    reports = build_reports_or_exit(ctx, journal, options)
    if reports is not None:
        display_trial_balance(reports.trial_balance)


@click.command("pnl")
@journal_options
@click.pass_context
def profit_and_loss(ctx, journal: str, **options):
    """Show the profit & loss statement of a journal file."""
    reports = build_reports_or_exit(ctx, journal, options)
    if reports is not None:
        display_profit_and_loss(reports.profit_and_loss)


@click.command("balance-sheet")
@journal_options
@click.pass_context
def balance_sheet(ctx, journal: str, **options):
    """Show the balance sheet of a journal file."""
    reports = build_reports_or_exit(ctx, journal, options)
    if reports is not None:
        display_balance_sheet(reports.balance_sheet)


@click.command("cash-flow")
@journal_options
@owner_movements_option
@click.pass_context
def cash_flow(ctx, journal: str, owner_movements_as_financing: bool, **options):
    """Show the cash flow statement of a journal file."""
    reports = build_reports_or_exit(ctx, journal, options, owner_movements_as_financing)
    if reports is not None:
        display_cash_flow(reports.cash_flow)


@click.command("report")
@journal_options
@owner_movements_option
@click.pass_context
def full_report(ctx, journal: str, owner_movements_as_financing: bool, **options):
    """Show all four reports and any diagnostics.

    Examples:
        ledgerbook report journal.csv
        ledgerbook --rules rules.csv report journal.csv --this-year
    """
    reports = build_reports_or_exit(ctx, journal, options, owner_movements_as_financing)
    if reports is None:
        return
    display_trial_balance(reports.trial_balance)
    click.echo()
    display_profit_and_loss(reports.profit_and_loss)
    click.echo()
    display_balance_sheet(reports.balance_sheet)
    click.echo()
    display_cash_flow(reports.cash_flow)
    display_diagnostics(reports)


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(trial_balance)
    cli.add_command(profit_and_loss)
    cli.add_command(balance_sheet)
    cli.add_command(cash_flow)
    cli.add_command(full_report)
