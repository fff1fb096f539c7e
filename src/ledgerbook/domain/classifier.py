"""Account classification by account-name keywords."""

from typing import Optional, Sequence

from ledgerbook.domain.entities import AccountType

# Ordered (keywords, type) rules; the first rule with a keyword contained in
# the lower-cased account name wins. Asset/expense markers come first.
DEFAULT_RULES: tuple[tuple[tuple[str, ...], AccountType], ...] = (
    (("expense",), AccountType.EXPENSE),
    (("bank", "asset"), AccountType.ASSET),
    (("drawings",), AccountType.EQUITY),
    (("liabilit", "loan"), AccountType.LIABILITY),
    (("capital",), AccountType.EQUITY),
    (("revenue", "income"), AccountType.REVENUE),
)

DEBIT_NATURED_MARKERS = ("expense", "bank", "drawings", "assets")
CREDIT_NATURED_MARKERS = ("revenue", "income", "capital", "liabilities")


class AccountClassifier:
    """Classify free-text account names into financial statement buckets."""

    def __init__(
        self,
        rules: Optional[Sequence[tuple[Sequence[str], AccountType]]] = None,
    ):
        """Initialize classifier.

        Args:
            rules: Optional ordered (keywords, account type) rules replacing
                the default table
        """
        source = DEFAULT_RULES if rules is None else rules
        self.rules = tuple(
            (tuple(keyword.lower() for keyword in keywords), account_type)
            for keywords, account_type in source
        )

    def classify(self, account: str) -> AccountType:
        """Classify an account name.

        Args:
            account: Account name, matched case-insensitively

        Returns:
            Matching AccountType, or UNCLASSIFIED if no rule matches
        """
        lowered = account.lower()
        for keywords, account_type in self.rules:
            if any(keyword in lowered for keyword in keywords):
                return account_type
        return AccountType.UNCLASSIFIED

    def is_debit_natured(self, account: str) -> bool:
        """Return True for asset/expense-type names (normal debit balance).

        The trial balance does not branch on this: a debit-natured account in
        credit shows in the credit column, which is the same split as
        ``present_balance`` makes by sign alone.
        """
        lowered = account.lower()
        return any(marker in lowered for marker in DEBIT_NATURED_MARKERS)

    def is_credit_natured(self, account: str) -> bool:
        """Return True for liability/equity/revenue-type names.

        A debit marker wins, so "Drawings Capital" is debit-natured.
        """
        if self.is_debit_natured(account):
            return False
        lowered = account.lower()
        return any(marker in lowered for marker in CREDIT_NATURED_MARKERS)


default_classifier = AccountClassifier()
