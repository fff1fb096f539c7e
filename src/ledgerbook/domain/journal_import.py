"""Journal CSV import domain service."""

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from ledgerbook.domain.entities import (
    BankEffect,
    CategorizationRule,
    Transaction,
    TransactionCategory,
)
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    journal_not_found,
    missing_columns,
    non_positive_amount,
)
from ledgerbook.domain.rules import create_rule
from ledgerbook.log import get_logger
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date

logger = get_logger(__name__)

TRANSACTION_COLUMNS = (
    "date",
    "description",
    "amount",
    "bank_effect",
    "debit_account",
    "credit_account",
    "category",
)
RULE_COLUMNS = ("keyword", "account", "category")


@dataclass(frozen=True)
class ImportResult:
    """Transactions read from a journal file plus per-row errors."""

    transactions: tuple[Transaction, ...] = ()
    errors: tuple[str, ...] = field(default=())


def normalize_header(name: str) -> str:
    """Map a CSV header such as "Debit Account" to "debit_account"."""
    return "_".join(name.strip().lower().replace("-", " ").split())


class JournalImportService:
    """Service for loading journal and rule files."""

    def read_rows(
        self, file_path: str | Path, required: tuple[str, ...]
    ) -> Iterator[tuple[int, dict[str, str]]]:
        """Yield (row number, normalized row) pairs from a CSV file.

        Raises:
            NotFoundError: If the file doesn't exist
            ValidationError: If required columns are missing
        """
        path = Path(file_path)
        if not path.exists():
            raise NotFoundError(journal_not_found(str(file_path)))

        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            sample = f.read(1024)
            f.seek(0)
            try:
                delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t").delimiter
            except csv.Error:
                delimiter = ","

            reader = csv.DictReader(f, delimiter=delimiter)
            if reader.fieldnames is None:
                raise ValidationError("CSV file has no columns")

            headers = {normalize_header(name): name for name in reader.fieldnames}
            missing = [column for column in required if column not in headers]
            if missing:
                raise ValidationError(missing_columns(missing))

            # Header is row 1
            for row_num, row in enumerate(reader, start=2):
                yield row_num, {
                    key: (row.get(original) or "").strip()
                    for key, original in headers.items()
                }

    def parse_transaction(self, row_num: int, values: dict[str, str]) -> Transaction:
        """Build a transaction from one normalized CSV row.

        Raises:
            ValueError: If a field is missing or cannot be parsed
        """
        for column in TRANSACTION_COLUMNS:
            if column != "description" and not values.get(column):
                raise ValueError(f"Missing {column}")

        amount = parse_amount(values["amount"])
        if amount <= 0:
            raise ValueError(non_positive_amount(amount))

        return Transaction(
            id=values.get("id") or f"row-{row_num}",
            date=parse_date(values["date"]),
            description=values.get("description", ""),
            amount=amount,
            bank_effect=BankEffect.from_text(values["bank_effect"]),
            debit_account=values["debit_account"],
            credit_account=values["credit_account"],
            category=TransactionCategory.from_text(values["category"]),
        )

    def load_transactions(self, file_path: str | Path) -> ImportResult:
        """Load transactions from a journal CSV file.

        Expected columns: id (optional), date, description, amount,
        bank_effect, debit_account, credit_account, category. Header names
        are matched case-insensitively.

        Args:
            file_path: Path to the journal CSV file

        Returns:
            ImportResult with the parsed transactions and one message per
            rejected row

        Raises:
            NotFoundError: If the file doesn't exist
            ValidationError: If required columns are missing
        """
        transactions: list[Transaction] = []
        errors: list[str] = []

        for row_num, values in self.read_rows(file_path, TRANSACTION_COLUMNS):
            try:
                transactions.append(self.parse_transaction(row_num, values))
            except ValueError as e:
                errors.append(f"Row {row_num}: {e}")

        logger.info(
            "journal_loaded",
            path=str(file_path),
            transactions=len(transactions),
            errors=len(errors),
        )
        return ImportResult(transactions=tuple(transactions), errors=tuple(errors))

    def load_rules(self, file_path: str | Path) -> list[CategorizationRule]:
        """Load categorization rules (keyword, account, category) in file order.

        Raises:
            NotFoundError: If the file doesn't exist
            ValidationError: If columns are missing or a rule is invalid
        """
        rules: list[CategorizationRule] = []
        for row_num, values in self.read_rows(file_path, RULE_COLUMNS):
            try:
                rules.append(
                    create_rule(values["keyword"], values["account"], values["category"])
                )
            except ValidationError as e:
                raise ValidationError(f"Row {row_num}: {e}") from e
        return rules
