"""Categorization rule domain service."""

from dataclasses import replace
from typing import Optional, Sequence

from ledgerbook.domain.cash_flow import BANK_ACCOUNT
from ledgerbook.domain.entities import (
    BankEffect,
    CategorizationRule,
    Transaction,
    TransactionCategory,
)
from ledgerbook.domain.errors import ValidationError, empty_rule_field
from ledgerbook.log import get_logger

logger = get_logger(__name__)


def create_rule(
    keyword: str, account: str, category: TransactionCategory | str
) -> CategorizationRule:
    """Create a validated categorization rule.

    Args:
        keyword: Text to look for in transaction descriptions
        account: Account to post matching transactions against
        category: Category (enum member or label) for matching transactions

    Returns:
        CategorizationRule

    Raises:
        ValidationError: If keyword or account is empty or the category is unknown
    """
    keyword = keyword.strip()
    account = account.strip()
    if not keyword:
        raise ValidationError(empty_rule_field("keyword"))
    if not account:
        raise ValidationError(empty_rule_field("account"))

    if not isinstance(category, TransactionCategory):
        try:
            category = TransactionCategory.from_text(category)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    return CategorizationRule(keyword=keyword, account=account, category=category)


class CategorizationService:
    """Service for rewriting transactions with keyword rules."""

    def __init__(self, rules: Sequence[CategorizationRule]):
        """Initialize categorization service.

        Args:
            rules: Rules in priority order; the first match wins
        """
        self.rules = tuple(rules)

    def find_rule(self, description: str) -> Optional[CategorizationRule]:
        """Find the first rule whose keyword occurs in the description."""
        lowered = description.lower()
        for rule in self.rules:
            if rule.keyword.lower() in lowered:
                return rule
        return None

    def apply_rule(self, txn: Transaction, rule: CategorizationRule) -> Transaction:
        """Return a copy of the transaction posted against the rule's account.

        Money leaving the bank debits the rule account; money arriving
        credits it. The other side is always the bank.
        """
        if txn.bank_effect is BankEffect.DEBIT:
            return replace(
                txn,
                category=rule.category,
                debit_account=rule.account,
                credit_account=BANK_ACCOUNT,
            )
        return replace(
            txn,
            category=rule.category,
            debit_account=BANK_ACCOUNT,
            credit_account=rule.account,
        )

    def apply(self, transactions: Sequence[Transaction]) -> list[Transaction]:
        """Apply rules to transactions.

        Args:
            transactions: Transactions to categorize

        Returns:
            New list of transactions; unmatched transactions are unchanged
        """
        if not self.rules:
            return list(transactions)

        result: list[Transaction] = []
        matched = 0
        for txn in transactions:
            rule = self.find_rule(txn.description)
            if rule is None:
                result.append(txn)
                continue
            result.append(self.apply_rule(txn, rule))
            matched += 1

        logger.info(
            "categorization_rules_applied",
            rules=len(self.rules),
            transactions=len(result),
            matched=matched,
        )
        return result
