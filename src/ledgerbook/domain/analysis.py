"""Dashboard-style analysis helpers."""

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from ledgerbook.domain.entities import (
    ZERO,
    BalanceSheet,
    ProfitAndLoss,
    ReportLine,
    Transaction,
    TransactionCategory,
    lines_total,
)

OTHER_EXPENSES = "Other Expenses"


@dataclass(frozen=True)
class MonthlyTotals:
    """Revenue and operating expenses for one calendar month."""

    month: str
    revenue: Decimal = ZERO
    expenses: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.revenue - self.expenses


def monthly_trend(transactions: Sequence[Transaction]) -> list[MonthlyTotals]:
    """Group revenue and operating expenses by month (YYYY-MM), oldest first."""
    revenue: dict[str, Decimal] = defaultdict(lambda: ZERO)
    expenses: dict[str, Decimal] = defaultdict(lambda: ZERO)
    months: set[str] = set()

    for txn in transactions:
        month = txn.date.strftime("%Y-%m")
        months.add(month)
        if txn.category is TransactionCategory.REVENUE:
            revenue[month] += txn.amount
        elif txn.category is TransactionCategory.OPERATING_EXPENSE:
            expenses[month] += txn.amount

    return [
        MonthlyTotals(month=month, revenue=revenue[month], expenses=expenses[month])
        for month in sorted(months)
    ]


def expense_breakdown(
    profit_and_loss: ProfitAndLoss, max_slices: int = 6
) -> list[ReportLine]:
    """Return the largest expense lines, folding the rest into one line.

    Args:
        profit_and_loss: P&L statement to break down
        max_slices: Number of expense lines to keep before folding

    Returns:
        Expense lines, largest first, plus an "Other Expenses" line if any
        were folded
    """
    if max_slices < 1:
        raise ValueError("max_slices must be at least 1")

    ordered = sorted(
        profit_and_loss.expenses, key=lambda line: (-line.amount, line.account)
    )
    kept = ordered[:max_slices]
    rest = tuple(ordered[max_slices:])
    if rest:
        kept.append(ReportLine(account=OTHER_EXPENSES, amount=lines_total(rest)))
    return kept


def cash_balance(balance_sheet: BalanceSheet) -> Decimal:
    """Sum the balance sheet's bank asset lines."""
    return lines_total(
        tuple(line for line in balance_sheet.assets if "bank" in line.account.lower())
    )
