"""Profit & Loss generator."""

from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from ledgerbook.domain.entities import (
    ZERO,
    ProfitAndLoss,
    ReportLine,
    Transaction,
    TransactionCategory,
    lines_total,
)


def to_lines(amounts: dict[str, Decimal]) -> tuple[ReportLine, ...]:
    """Convert an account -> amount mapping into name-ordered report lines."""
    return tuple(
        ReportLine(account=account, amount=amounts[account])
        for account in sorted(amounts)
    )


def build_profit_and_loss(transactions: Sequence[Transaction]) -> ProfitAndLoss:
    """Build a Profit & Loss statement.

    Revenue is attributed to the credited account and operating expenses to
    the debited account. Financing, investing and personal transactions do
    not affect profit.

    Args:
        transactions: Transactions to summarize

    Returns:
        ProfitAndLoss statement
    """
    revenues: dict[str, Decimal] = defaultdict(lambda: ZERO)
    expenses: dict[str, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        if txn.category is TransactionCategory.REVENUE:
            revenues[txn.credit_account] += txn.amount
        elif txn.category is TransactionCategory.OPERATING_EXPENSE:
            expenses[txn.debit_account] += txn.amount

    revenue_lines = to_lines(revenues)
    expense_lines = to_lines(expenses)
    total_revenue = lines_total(revenue_lines)
    total_expenses = lines_total(expense_lines)

    return ProfitAndLoss(
        revenues=revenue_lines,
        expenses=expense_lines,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_profit=total_revenue - total_expenses,
    )
