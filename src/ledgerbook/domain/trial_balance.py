"""Trial balance builder."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional, Sequence

from ledgerbook.domain.classifier import AccountClassifier, default_classifier
from ledgerbook.domain.entities import ZERO, AccountBalance, Transaction, TrialBalance


def accumulate_postings(
    transactions: Sequence[Transaction],
) -> dict[str, tuple[Decimal, Decimal]]:
    """Sum debit and credit postings per account.

    Args:
        transactions: Transactions to post

    Returns:
        Mapping of account name to (debit total, credit total)
    """
    debits: dict[str, Decimal] = defaultdict(lambda: ZERO)
    credits: dict[str, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        debits[txn.debit_account] += txn.amount
        credits[txn.credit_account] += txn.amount

    accounts = set(debits) | set(credits)
    return {account: (debits[account], credits[account]) for account in accounts}


def present_balance(raw_balance: Decimal) -> tuple[Decimal, Decimal]:
    """Split a net balance into (debit, credit) columns.

    A positive balance is shown as a debit, anything else as a credit; only
    the magnitude is kept. For a well-formed journal this puts debit-natured
    accounts in the debit column and credit-natured accounts in the credit
    column, and an account on its unusual side still lands by its sign.
    """
    if raw_balance > 0:
        return raw_balance, ZERO
    return ZERO, -raw_balance


def build_trial_balance(
    transactions: Sequence[Transaction],
    classifier: Optional[AccountClassifier] = None,
) -> TrialBalance:
    """Build a trial balance from a list of transactions.

    Accounts are listed in name order. Each transaction contributes its
    amount once to each column, so the debit and credit totals always agree.

    Args:
        transactions: Transactions to aggregate
        classifier: Optional account classifier used to tag each row

    Returns:
        TrialBalance with one row per account
    """
    classifier = classifier or default_classifier
    postings = accumulate_postings(transactions)

    balances: list[AccountBalance] = []
    total_debit = ZERO
    total_credit = ZERO

    for account in sorted(postings):
        debit, credit = postings[account]
        shown_debit, shown_credit = present_balance(debit - credit)
        balances.append(
            AccountBalance(
                account=account,
                debit=shown_debit,
                credit=shown_credit,
                account_type=classifier.classify(account),
            )
        )
        total_debit += shown_debit
        total_credit += shown_credit

    return TrialBalance(
        balances=tuple(balances),
        total_debit=total_debit,
        total_credit=total_credit,
    )
