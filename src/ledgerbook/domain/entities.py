"""Domain model entities for ledgerbook.

These are pure data classes representing bookkeeping concepts. Transactions
come in from the outside (manual entry, statement extraction); every report
is derived from them and held in frozen dataclasses so a consumer can never
mutate a report in place.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

ZERO = Decimal("0")


def normalize_account(name: str) -> str:
    """Return the comparison key of an account name (trimmed, lower-cased)."""
    return name.strip().lower()


class BankEffect(str, Enum):
    """Effect of a transaction on the bank account, as the bank reports it."""

    DEBIT = "Debit"
    CREDIT = "Credit"

    @classmethod
    def from_text(cls, value: str) -> "BankEffect":
        """Look up a bank effect by its label (case-insensitive)."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown bank effect '{value}'")


class TransactionCategory(str, Enum):
    """High-level tag assigned to a transaction before derivation."""

    REVENUE = "Revenue"
    OPERATING_EXPENSE = "Operating Expense"
    FINANCING = "Financing"
    INVESTING = "Investing"
    PERSONAL = "Personal"

    @classmethod
    def from_text(cls, value: str) -> "TransactionCategory":
        """Look up a category by its label (case-insensitive)."""
        normalized = " ".join(value.strip().lower().split())
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown transaction category '{value}'")


class NormalBalance(str, Enum):
    """Side on which an account type normally carries a positive balance."""

    DEBIT = "debit"
    CREDIT = "credit"


class AccountType(str, Enum):
    """Financial statement bucket of a general-ledger account."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"
    UNCLASSIFIED = "Unclassified"

    @property
    def normal_balance(self) -> Optional[NormalBalance]:
        if self in (AccountType.ASSET, AccountType.EXPENSE):
            return NormalBalance.DEBIT
        if self in (AccountType.LIABILITY, AccountType.EQUITY, AccountType.REVENUE):
            return NormalBalance.CREDIT
        return None


@dataclass(frozen=True)
class Transaction:
    """Balanced double-entry posting.

    ``amount`` is posted once as a debit to ``debit_account`` and once as a
    credit to ``credit_account``, so every transaction balances on its own.
    """

    id: str
    date: date
    description: str
    amount: Decimal
    bank_effect: BankEffect
    debit_account: str
    credit_account: str
    category: TransactionCategory


@dataclass(frozen=True)
class CategorizationRule:
    """Keyword rule that assigns an account and category to a transaction."""

    keyword: str
    account: str
    category: TransactionCategory


@dataclass(frozen=True)
class AccountBalance:
    """Trial balance row. One of ``debit``/``credit`` is always zero."""

    account: str
    debit: Decimal
    credit: Decimal
    account_type: AccountType = AccountType.UNCLASSIFIED

    @property
    def net(self) -> Decimal:
        return self.debit - self.credit


@dataclass(frozen=True)
class TrialBalance:
    """Per-account balances ordered by account name, with column totals."""

    balances: tuple[AccountBalance, ...] = ()
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit

    def get(self, account: str) -> Optional[AccountBalance]:
        """Find a row by account name, ignoring case and surrounding spaces."""
        matches = self.matching(account)
        return matches[0] if matches else None

    def matching(self, account: str) -> tuple[AccountBalance, ...]:
        """Return every row whose name spells ``account`` in some variant."""
        wanted = normalize_account(account)
        return tuple(b for b in self.balances if normalize_account(b.account) == wanted)

    @property
    def unclassified_accounts(self) -> tuple[str, ...]:
        return tuple(
            b.account
            for b in self.balances
            if b.account_type is AccountType.UNCLASSIFIED
        )


@dataclass(frozen=True)
class ReportLine:
    """One ``{account, amount}`` entry of a report section."""

    account: str
    amount: Decimal


def lines_total(lines: tuple[ReportLine, ...]) -> Decimal:
    """Sum the amounts of a report section."""
    return sum((line.amount for line in lines), ZERO)


def lines_as_dict(lines: tuple[ReportLine, ...]) -> dict[str, Decimal]:
    """Return a fresh account -> amount mapping for a report section."""
    return {line.account: line.amount for line in lines}


@dataclass(frozen=True)
class ProfitAndLoss:
    """Profit & Loss statement."""

    revenues: tuple[ReportLine, ...] = ()
    expenses: tuple[ReportLine, ...] = ()
    total_revenue: Decimal = ZERO
    total_expenses: Decimal = ZERO
    net_profit: Decimal = ZERO


@dataclass(frozen=True)
class BalanceSheet:
    """Balance sheet with retained earnings folded into equity."""

    assets: tuple[ReportLine, ...] = ()
    liabilities: tuple[ReportLine, ...] = ()
    equity: tuple[ReportLine, ...] = ()
    total_assets: Decimal = ZERO
    total_liabilities: Decimal = ZERO
    total_equity: Decimal = ZERO
    unclassified: tuple[str, ...] = ()

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        return self.total_liabilities + self.total_equity

    @property
    def difference(self) -> Decimal:
        return self.total_assets - self.total_liabilities_and_equity

    @property
    def is_balanced(self) -> bool:
        return self.difference == ZERO


@dataclass(frozen=True)
class CashFlowStatement:
    """Cash flow statement reconciled to the bank account balance."""

    operating: tuple[ReportLine, ...] = ()
    investing: tuple[ReportLine, ...] = ()
    financing: tuple[ReportLine, ...] = ()
    total_operating: Decimal = ZERO
    total_investing: Decimal = ZERO
    total_financing: Decimal = ZERO
    ending_bank_balance: Decimal = ZERO
    bank_accounts: tuple[str, ...] = ()
    excluded_transaction_ids: tuple[str, ...] = ()

    @property
    def has_bank_account(self) -> bool:
        return bool(self.bank_accounts)

    @property
    def net_cash_flow(self) -> Decimal:
        return self.total_operating + self.total_investing + self.total_financing

    @property
    def starting_bank_balance(self) -> Decimal:
        return self.ending_bank_balance - self.net_cash_flow


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal finding about a derived report."""

    code: str
    message: str


@dataclass(frozen=True)
class FinancialReports:
    """All four reports derived from one transaction snapshot."""

    trial_balance: TrialBalance
    profit_and_loss: ProfitAndLoss
    balance_sheet: BalanceSheet
    cash_flow: CashFlowStatement
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def has_warnings(self) -> bool:
        return bool(self.diagnostics)
