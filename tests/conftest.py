"""Shared pytest fixtures for ledgerbook tests."""

from datetime import date
from decimal import Decimal
from itertools import count

import pytest

from ledgerbook.domain.entities import BankEffect, Transaction, TransactionCategory

JOURNAL_HEADER = "id,date,description,amount,bank_effect,debit_account,credit_account,category\n"


@pytest.fixture
def make_transaction():
    """Return a factory for transactions with sensible defaults."""
    ids = count(1)

    def factory(
        debit_account: str,
        credit_account: str,
        amount: str | int | Decimal,
        category: TransactionCategory = TransactionCategory.REVENUE,
        txn_date: date = date(2024, 1, 15),
        description: str = "",
        bank_effect: BankEffect | None = None,
        id: str | None = None,
    ) -> Transaction:
        if bank_effect is None:
            bank_effect = (
                BankEffect.CREDIT if debit_account.lower() == "bank" else BankEffect.DEBIT
            )
        return Transaction(
            id=id or f"txn-{next(ids)}",
            date=txn_date,
            description=description,
            amount=Decimal(str(amount)),
            bank_effect=bank_effect,
            debit_account=debit_account,
            credit_account=credit_account,
            category=category,
        )

    return factory


@pytest.fixture
def business_transactions(make_transaction):
    """A small, well-formed set of business transactions."""
    return [
        make_transaction(
            "Bank", "Owner Capital", "10000.00", TransactionCategory.FINANCING,
            txn_date=date(2024, 1, 2), description="Owner contribution",
        ),
        make_transaction(
            "Bank", "Sales Revenue", "4500.00", TransactionCategory.REVENUE,
            txn_date=date(2024, 1, 10), description="Invoice 001",
        ),
        make_transaction(
            "Rent Expense", "Bank", "1200.00", TransactionCategory.OPERATING_EXPENSE,
            txn_date=date(2024, 1, 31), description="January rent",
        ),
        make_transaction(
            "Equipment Assets", "Bank", "3000.00", TransactionCategory.INVESTING,
            txn_date=date(2024, 2, 3), description="Laptop",
        ),
        make_transaction(
            "Bank", "Term Loan", "5000.00", TransactionCategory.FINANCING,
            txn_date=date(2024, 2, 5), description="Loan drawdown",
        ),
        make_transaction(
            "Drawings", "Bank", "800.00", TransactionCategory.PERSONAL,
            txn_date=date(2024, 2, 20), description="Owner withdrawal",
        ),
        make_transaction(
            "Bank", "Consulting Income", "2100.50", TransactionCategory.REVENUE,
            txn_date=date(2024, 2, 25), description="Consulting",
        ),
        make_transaction(
            "Office Expense", "Bank", "349.99", TransactionCategory.OPERATING_EXPENSE,
            txn_date=date(2024, 2, 28), description="Stationery",
        ),
    ]


@pytest.fixture
def write_journal(tmp_path):
    """Return a helper that writes a journal CSV and returns its path."""

    def writer(rows: list[str], header: str = JOURNAL_HEADER, name: str = "journal.csv"):
        path = tmp_path / name
        path.write_text(header + "".join(f"{row}\n" for row in rows), encoding="utf-8")
        return path

    return writer


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
