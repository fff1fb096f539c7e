"""Financial reports domain service."""

from typing import Optional, Sequence

from ledgerbook.domain.balance_sheet import build_balance_sheet
from ledgerbook.domain.cash_flow import build_cash_flow
from ledgerbook.domain.classifier import AccountClassifier, default_classifier
from ledgerbook.domain.entities import (
    BalanceSheet,
    CashFlowStatement,
    Diagnostic,
    FinancialReports,
    Transaction,
    TrialBalance,
)
from ledgerbook.domain.profit_and_loss import build_profit_and_loss
from ledgerbook.domain.trial_balance import build_trial_balance
from ledgerbook.log import get_logger

logger = get_logger(__name__)


class ReportService:
    """Service for deriving the four financial reports from transactions."""

    def __init__(
        self,
        classifier: Optional[AccountClassifier] = None,
        owner_movements_as_financing: bool = False,
    ):
        """Initialize report service.

        Args:
            classifier: Optional account classifier shared by all reports
            owner_movements_as_financing: Passed through to the cash flow
                generator
        """
        self.classifier = classifier or default_classifier
        self.owner_movements_as_financing = owner_movements_as_financing

    def build_reports(self, transactions: Sequence[Transaction]) -> FinancialReports:
        """Build all reports from one snapshot of the transactions.

        Args:
            transactions: Transactions to derive reports from

        Returns:
            FinancialReports with diagnostics for anything the reports
            could not place
        """
        snapshot = tuple(transactions)

        trial_balance = build_trial_balance(snapshot, self.classifier)
        profit_and_loss = build_profit_and_loss(snapshot)
        balance_sheet = build_balance_sheet(
            snapshot, profit_and_loss.net_profit, self.classifier
        )
        cash_flow = build_cash_flow(
            snapshot,
            trial_balance,
            self.classifier,
            owner_movements_as_financing=self.owner_movements_as_financing,
        )

        diagnostics = self.collect_diagnostics(
            snapshot, trial_balance, balance_sheet, cash_flow
        )
        logger.debug(
            "reports_built",
            transactions=len(snapshot),
            accounts=len(trial_balance.balances),
            diagnostics=len(diagnostics),
        )
        for diagnostic in diagnostics:
            logger.warning(diagnostic.code, detail=diagnostic.message)

        return FinancialReports(
            trial_balance=trial_balance,
            profit_and_loss=profit_and_loss,
            balance_sheet=balance_sheet,
            cash_flow=cash_flow,
            diagnostics=diagnostics,
        )

    def collect_diagnostics(
        self,
        transactions: Sequence[Transaction],
        trial_balance: TrialBalance,
        balance_sheet: BalanceSheet,
        cash_flow: CashFlowStatement,
    ) -> tuple[Diagnostic, ...]:
        """Describe accounts and transactions the reports silently left out."""
        diagnostics: list[Diagnostic] = []

        unclassified = trial_balance.unclassified_accounts
        if unclassified:
            count = len(unclassified)
            diagnostics.append(
                Diagnostic(
                    code="unclassified_accounts",
                    message=(
                        f"{count} account{'s' if count != 1 else ''} unclassified "
                        f"and left off the balance sheet: {', '.join(unclassified)}"
                    ),
                )
            )

        if not balance_sheet.is_balanced:
            diagnostics.append(
                Diagnostic(
                    code="balance_sheet_imbalance",
                    message=(
                        f"Assets {balance_sheet.total_assets} do not equal liabilities "
                        f"and equity {balance_sheet.total_liabilities_and_equity} "
                        f"(difference {balance_sheet.difference})"
                    ),
                )
            )

        if transactions and not cash_flow.has_bank_account:
            diagnostics.append(
                Diagnostic(
                    code="missing_bank_account",
                    message="No account named 'Bank'; ending bank balance defaults to 0",
                )
            )

        if len(cash_flow.bank_accounts) > 1:
            diagnostics.append(
                Diagnostic(
                    code="multiple_bank_accounts",
                    message=(
                        "Bank account spelled several ways and combined: "
                        f"{', '.join(cash_flow.bank_accounts)}"
                    ),
                )
            )

        excluded = cash_flow.excluded_transaction_ids
        if excluded:
            count = len(excluded)
            diagnostics.append(
                Diagnostic(
                    code="cash_flow_exclusions",
                    message=(
                        f"{count} transaction{'s' if count != 1 else ''} left out of "
                        f"the cash flow statement: {', '.join(excluded)}"
                    ),
                )
            )

        return tuple(diagnostics)


def build_reports(transactions: Sequence[Transaction]) -> FinancialReports:
    """Build all reports with the default classifier."""
    return ReportService().build_reports(transactions)
