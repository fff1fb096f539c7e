"""Cash flow statement generator."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional, Sequence

from ledgerbook.domain.classifier import AccountClassifier, default_classifier
from ledgerbook.domain.entities import (
    ZERO,
    AccountType,
    CashFlowStatement,
    Transaction,
    TransactionCategory,
    TrialBalance,
    lines_total,
    normalize_account,
)
from ledgerbook.domain.profit_and_loss import to_lines

BANK_ACCOUNT = "Bank"

OPERATING_CATEGORIES = (
    TransactionCategory.REVENUE,
    TransactionCategory.OPERATING_EXPENSE,
)


def is_bank_account(account: str) -> bool:
    """Return True if the account is the bank account, ignoring case and spaces."""
    return normalize_account(account) == normalize_account(BANK_ACCOUNT)


def cash_movement(txn: Transaction) -> Optional[tuple[str, Decimal]]:
    """Return the non-bank account and signed cash amount of a transaction.

    Money into the bank is positive, money out is negative. Returns None for
    transactions that do not move cash in or out of the bank.
    """
    debit_is_bank = is_bank_account(txn.debit_account)
    credit_is_bank = is_bank_account(txn.credit_account)
    if debit_is_bank == credit_is_bank:
        return None
    if debit_is_bank:
        return txn.credit_account, txn.amount
    return txn.debit_account, -txn.amount


def build_cash_flow(
    transactions: Sequence[Transaction],
    trial_balance: TrialBalance,
    classifier: Optional[AccountClassifier] = None,
    owner_movements_as_financing: bool = False,
) -> CashFlowStatement:
    """Build a cash flow statement.

    Revenue and operating expense movements are operating activities,
    investing movements are investing activities, and financing movements
    are financing activities. Personal movements are left out unless
    ``owner_movements_as_financing`` is set, in which case those against an
    equity account (capital, drawings) count as financing. Anything left out
    has its ID recorded.

    The ending bank balance sums every trial balance row that spells the
    bank account, whatever its case or spacing. The starting bank balance is
    derived from it, so starting balance plus net cash flow always equals the
    ending balance.

    Args:
        transactions: Transactions to classify
        trial_balance: Trial balance of the same transactions
        classifier: Optional account classifier
        owner_movements_as_financing: Treat personal movements against
            capital or drawings accounts as financing activities

    Returns:
        CashFlowStatement
    """
    classifier = classifier or default_classifier

    operating: dict[str, Decimal] = defaultdict(lambda: ZERO)
    investing: dict[str, Decimal] = defaultdict(lambda: ZERO)
    financing: dict[str, Decimal] = defaultdict(lambda: ZERO)
    excluded: list[str] = []

    for txn in transactions:
        movement = cash_movement(txn)
        if movement is None:
            excluded.append(txn.id)
            continue

        account, cash_amount = movement
        if txn.category in OPERATING_CATEGORIES:
            operating[account] += cash_amount
        elif txn.category is TransactionCategory.INVESTING:
            investing[account] += cash_amount
        elif txn.category is TransactionCategory.FINANCING or (
            owner_movements_as_financing
            and classifier.classify(account) is AccountType.EQUITY
        ):
            financing[account] += cash_amount
        else:
            excluded.append(txn.id)

    bank_rows = trial_balance.matching(BANK_ACCOUNT)
    operating_lines = to_lines(operating)
    investing_lines = to_lines(investing)
    financing_lines = to_lines(financing)

    return CashFlowStatement(
        operating=operating_lines,
        investing=investing_lines,
        financing=financing_lines,
        total_operating=lines_total(operating_lines),
        total_investing=lines_total(investing_lines),
        total_financing=lines_total(financing_lines),
        ending_bank_balance=sum((row.net for row in bank_rows), ZERO),
        bank_accounts=tuple(row.account for row in bank_rows),
        excluded_transaction_ids=tuple(excluded),
    )
