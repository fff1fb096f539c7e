"""Main CLI entry point."""

import click

from ledgerbook.config import LOG_FORMATS, LOG_LEVELS, get_settings
from ledgerbook.log import configure_logging

# Import and register all commands at module level
from ledgerbook.cli.commands import reports, analysis


@click.group()
@click.option(
    "--rules",
    "rules_path",
    type=click.Path(),
    help="Categorization rules CSV (overrides LEDGERBOOK_RULES_PATH environment variable)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (overrides LEDGERBOOK_LOG_LEVEL environment variable)",
    envvar="LEDGERBOOK_LOG_LEVEL",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    help="Log output format (overrides LEDGERBOOK_LOG_FORMAT environment variable)",
    envvar="LEDGERBOOK_LOG_FORMAT",
)
@click.pass_context
def cli(ctx, rules_path: str | None, log_level: str | None, log_format: str | None):
    """Ledgerbook - Bookkeeping reports from double-entry transactions.

    Reads a journal CSV file and derives a trial balance, profit & loss,
    balance sheet and cash flow statement.
    """
    ctx.ensure_object(dict)
    configure_logging(
        level=log_level.upper() if log_level else None,
        format=log_format.lower() if log_format else None,
    )
    ctx.obj["rules_path"] = rules_path or get_settings().rules_path


# Register all commands
reports.register_commands(cli)
analysis.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
