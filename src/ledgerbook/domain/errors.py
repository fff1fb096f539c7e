"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested file or entity does not exist."""


def journal_not_found(path: str) -> str:
    """Return message for a missing journal or rules file."""
    return f"File not found: {path}"


def missing_columns(columns: list[str]) -> str:
    """Return message for a CSV file lacking required columns."""
    return f"CSV file missing required columns: {', '.join(sorted(columns))}"


def non_positive_amount(amount: object) -> str:
    """Return message for a transaction amount that is zero or negative."""
    return f"Amount must be positive, got {amount}"


def empty_rule_field(field_name: str) -> str:
    """Return message for a categorization rule with an empty field."""
    return f"Categorization rule {field_name} cannot be empty"
