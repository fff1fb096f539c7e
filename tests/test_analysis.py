"""Tests for dashboard analysis helpers."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.domain.analysis import (
    OTHER_EXPENSES,
    cash_balance,
    expense_breakdown,
    monthly_trend,
)
from ledgerbook.domain.entities import (
    BalanceSheet,
    ProfitAndLoss,
    ReportLine,
    TransactionCategory,
)


def test_monthly_trend(business_transactions):
    trend = monthly_trend(business_transactions)

    assert [t.month for t in trend] == ["2024-01", "2024-02"]
    january, february = trend
    assert january.revenue == Decimal("4500.00")
    assert january.expenses == Decimal("1200.00")
    assert january.net == Decimal("3300.00")
    assert february.revenue == Decimal("2100.50")
    assert february.expenses == Decimal("349.99")


def test_monthly_trend_includes_months_without_operating_activity(make_transaction):
    trend = monthly_trend(
        [
            make_transaction(
                "Bank", "Owner Capital", 100, TransactionCategory.FINANCING,
                txn_date=date(2023, 12, 1),
            )
        ]
    )
    assert len(trend) == 1
    assert trend[0].month == "2023-12"
    assert trend[0].revenue == Decimal("0")


def test_monthly_trend_empty():
    assert monthly_trend([]) == []


def _pnl_with_expenses(amounts):
    lines = tuple(
        ReportLine(account=f"Expense {i}", amount=Decimal(a)) for i, a in enumerate(amounts)
    )
    return ProfitAndLoss(expenses=lines)


def test_expense_breakdown_folds_remainder():
    pnl = _pnl_with_expenses(["10", "50", "30", "5", "20", "1", "2", "3"])
    breakdown = expense_breakdown(pnl, max_slices=3)

    assert [line.amount for line in breakdown] == [
        Decimal("50"),
        Decimal("30"),
        Decimal("20"),
        Decimal("21"),
    ]
    assert breakdown[-1].account == OTHER_EXPENSES


def test_expense_breakdown_without_remainder():
    pnl = _pnl_with_expenses(["10", "50"])
    breakdown = expense_breakdown(pnl)
    assert [line.account for line in breakdown] == ["Expense 1", "Expense 0"]


def test_expense_breakdown_rejects_zero_slices():
    with pytest.raises(ValueError):
        expense_breakdown(ProfitAndLoss(), max_slices=0)


def test_cash_balance_sums_bank_assets():
    balance_sheet = BalanceSheet(
        assets=(
            ReportLine(account="Bank", amount=Decimal("100")),
            ReportLine(account="Savings Bank", amount=Decimal("50")),
            ReportLine(account="Equipment Assets", amount=Decimal("900")),
        )
    )
    assert cash_balance(balance_sheet) == Decimal("150")
