"""Domain layer for ledgerbook application."""

from ledgerbook.domain.classifier import AccountClassifier
from ledgerbook.domain.trial_balance import build_trial_balance
from ledgerbook.domain.profit_and_loss import build_profit_and_loss
from ledgerbook.domain.balance_sheet import build_balance_sheet
from ledgerbook.domain.cash_flow import build_cash_flow
from ledgerbook.domain.reports import ReportService, build_reports
from ledgerbook.domain.rules import CategorizationService
from ledgerbook.domain.journal_import import JournalImportService

__all__ = [
    "AccountClassifier",
    "build_trial_balance",
    "build_profit_and_loss",
    "build_balance_sheet",
    "build_cash_flow",
    "ReportService",
    "build_reports",
    "CategorizationService",
    "JournalImportService",
]
