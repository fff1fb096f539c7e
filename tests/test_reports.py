"""Tests for the report service and end-to-end report properties."""

from decimal import Decimal

import pytest

from ledgerbook.domain.classifier import AccountClassifier
from ledgerbook.domain.entities import AccountType, TransactionCategory, lines_as_dict
from ledgerbook.domain.reports import ReportService, build_reports


def _codes(reports):
    return [diagnostic.code for diagnostic in reports.diagnostics]


def test_empty_transactions_yield_zero_reports():
    reports = build_reports([])

    assert reports.trial_balance.balances == ()
    assert reports.trial_balance.total_debit == Decimal("0")
    assert reports.trial_balance.total_credit == Decimal("0")
    assert reports.profit_and_loss.revenues == ()
    assert reports.profit_and_loss.expenses == ()
    assert reports.profit_and_loss.net_profit == Decimal("0")
    assert reports.balance_sheet.assets == ()
    assert reports.balance_sheet.liabilities == ()
    assert reports.balance_sheet.total_assets == Decimal("0")
    assert reports.balance_sheet.total_liabilities_and_equity == Decimal("0")
    assert reports.cash_flow.operating == ()
    assert reports.cash_flow.net_cash_flow == Decimal("0")
    assert reports.cash_flow.starting_bank_balance == Decimal("0")
    assert reports.diagnostics == ()


def test_single_sale_scenario(make_transaction):
    reports = build_reports([make_transaction("Bank", "Sales Revenue", 1000)])

    trial_balance = reports.trial_balance
    assert trial_balance.get("Bank").debit == Decimal("1000")
    assert trial_balance.get("Sales Revenue").credit == Decimal("1000")
    assert (trial_balance.total_debit, trial_balance.total_credit) == (
        Decimal("1000"),
        Decimal("1000"),
    )
    assert reports.profit_and_loss.total_revenue == Decimal("1000")
    assert reports.profit_and_loss.net_profit == Decimal("1000")
    assert lines_as_dict(reports.cash_flow.operating) == {"Sales Revenue": Decimal("1000")}
    assert reports.cash_flow.ending_bank_balance == Decimal("1000")
    assert reports.cash_flow.starting_bank_balance == Decimal("0")
    assert reports.diagnostics == ()


def test_rent_and_sales_scenario(make_transaction):
    reports = build_reports(
        [
            make_transaction(
                "Rent Expense", "Bank", 500, TransactionCategory.OPERATING_EXPENSE
            ),
            make_transaction("Bank", "Sales Revenue", 1000),
        ]
    )

    assert reports.profit_and_loss.net_profit == Decimal("500")
    assert reports.trial_balance.get("Bank").net == Decimal("500")
    assert reports.cash_flow.ending_bank_balance == Decimal("500")
    assert reports.cash_flow.net_cash_flow == Decimal("500")
    assert reports.balance_sheet.is_balanced


def test_personal_transaction_scenario(make_transaction):
    sale = make_transaction("Bank", "Sales Revenue", 1000)
    personal = make_transaction("Drawings", "Bank", 300, TransactionCategory.PERSONAL)
    reports = build_reports([sale, personal])

    assert reports.profit_and_loss.net_profit == Decimal("1000")
    flow_accounts = {
        line.account
        for line in reports.cash_flow.operating
        + reports.cash_flow.investing
        + reports.cash_flow.financing
    }
    assert "Drawings" not in flow_accounts
    assert reports.cash_flow.excluded_transaction_ids == (personal.id,)


def test_business_reports_are_consistent(business_transactions):
    reports = build_reports(business_transactions)

    assert reports.trial_balance.is_balanced
    assert reports.balance_sheet.is_balanced
    assert reports.trial_balance.unclassified_accounts == ()
    assert reports.balance_sheet.equity[0].amount == reports.profit_and_loss.net_profit
    assert (
        reports.cash_flow.starting_bank_balance + reports.cash_flow.net_cash_flow
        == reports.cash_flow.ending_bank_balance
    )
    assert _codes(reports) == ["cash_flow_exclusions"]


def test_owner_movements_option(business_transactions):
    reports = ReportService(owner_movements_as_financing=True).build_reports(
        business_transactions
    )
    assert reports.diagnostics == ()
    assert reports.cash_flow.starting_bank_balance == Decimal("0")


def test_build_reports_is_idempotent(business_transactions):
    service = ReportService()
    assert service.build_reports(business_transactions) == service.build_reports(
        business_transactions
    )


def test_input_list_not_modified(business_transactions):
    snapshot = list(business_transactions)
    build_reports(business_transactions)
    assert business_transactions == snapshot


def test_reports_are_immutable(business_transactions):
    reports = build_reports(business_transactions)
    with pytest.raises(AttributeError):
        reports.profit_and_loss.net_profit = Decimal("0")


def test_unclassified_accounts_diagnostic(make_transaction):
    reports = build_reports(
        [
            make_transaction("Bank", "Sales Revenue", 100),
            make_transaction("Suspense", "Bank", 40, TransactionCategory.OPERATING_EXPENSE),
        ]
    )

    assert _codes(reports) == ["unclassified_accounts"]
    message = next(
        d.message for d in reports.diagnostics if d.code == "unclassified_accounts"
    )
    assert message.startswith("1 account unclassified")
    assert "Suspense" in message
    # Diagnostics never change the numbers
    assert reports.balance_sheet.total_assets == Decimal("60")
    assert reports.profit_and_loss.net_profit == Decimal("60")


def test_balance_sheet_imbalance_diagnostic(make_transaction):
    reports = build_reports(
        [
            make_transaction("Bank", "Sales Revenue", 100),
            make_transaction("Suspense", "Bank", 25, TransactionCategory.PERSONAL),
        ]
    )

    codes = _codes(reports)
    assert "balance_sheet_imbalance" in codes
    assert "unclassified_accounts" in codes
    assert reports.balance_sheet.difference == Decimal("-25")


def test_missing_bank_account_diagnostic(make_transaction):
    reports = build_reports([make_transaction("Cash On Hand", "Sales Revenue", 100)])
    assert "missing_bank_account" in _codes(reports)
    assert reports.cash_flow.ending_bank_balance == Decimal("0")


def test_custom_classifier_shared_by_reports(make_transaction):
    classifier = AccountClassifier(
        rules=[
            (("bank",), AccountType.ASSET),
            (("suspense",), AccountType.LIABILITY),
            (("revenue",), AccountType.REVENUE),
        ]
    )
    reports = ReportService(classifier=classifier).build_reports(
        [
            make_transaction("Bank", "Sales Revenue", 100),
            make_transaction("Bank", "Suspense", 30, TransactionCategory.FINANCING),
        ]
    )

    assert lines_as_dict(reports.balance_sheet.liabilities) == {"Suspense": Decimal("30")}
    assert reports.balance_sheet.is_balanced
    assert reports.diagnostics == ()


def test_multiple_bank_accounts_diagnostic(make_transaction):
    reports = build_reports(
        [
            make_transaction("Bank", "Sales Revenue", 1000),
            make_transaction("Rent Expense", "BANK", 300, TransactionCategory.OPERATING_EXPENSE),
        ]
    )

    assert _codes(reports) == ["multiple_bank_accounts"]
    assert "BANK, Bank" in reports.diagnostics[0].message
    assert reports.cash_flow.starting_bank_balance == Decimal("0")
    assert reports.has_warnings
