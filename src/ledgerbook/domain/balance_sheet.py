"""Balance sheet generator."""

from decimal import Decimal
from typing import Optional, Sequence

from ledgerbook.domain.classifier import AccountClassifier, default_classifier
from ledgerbook.domain.entities import (
    AccountType,
    BalanceSheet,
    ReportLine,
    Transaction,
    lines_total,
)
from ledgerbook.domain.trial_balance import build_trial_balance

RETAINED_EARNINGS = "Retained Earnings (Profit/Loss)"


def build_balance_sheet(
    transactions: Sequence[Transaction],
    net_profit: Decimal,
    classifier: Optional[AccountClassifier] = None,
) -> BalanceSheet:
    """Build a balance sheet.

    Assets are shown at their net debit balance; liabilities and equity at
    their net credit balance, so drawings come out negative and reduce
    equity. Revenue and expense accounts are represented by the retained
    earnings line. Accounts the classifier cannot place are left out and
    listed in ``unclassified``.

    Args:
        transactions: Transactions to derive balances from
        net_profit: Net profit from the P&L, shown as retained earnings
        classifier: Optional account classifier

    Returns:
        BalanceSheet
    """
    classifier = classifier or default_classifier
    trial_balance = build_trial_balance(transactions, classifier)

    assets: list[ReportLine] = []
    liabilities: list[ReportLine] = []
    equity: list[ReportLine] = [ReportLine(account=RETAINED_EARNINGS, amount=net_profit)]
    unclassified: list[str] = []

    for row in trial_balance.balances:
        if row.account_type is AccountType.ASSET:
            assets.append(ReportLine(account=row.account, amount=row.net))
        elif row.account_type is AccountType.LIABILITY:
            liabilities.append(ReportLine(account=row.account, amount=-row.net))
        elif row.account_type is AccountType.EQUITY:
            equity.append(ReportLine(account=row.account, amount=-row.net))
        elif row.account_type is AccountType.UNCLASSIFIED:
            unclassified.append(row.account)

    return BalanceSheet(
        assets=tuple(assets),
        liabilities=tuple(liabilities),
        equity=tuple(equity),
        total_assets=lines_total(tuple(assets)),
        total_liabilities=lines_total(tuple(liabilities)),
        total_equity=lines_total(tuple(equity)),
        unclassified=tuple(unclassified),
    )
