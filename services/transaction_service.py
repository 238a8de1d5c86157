"""
Transaction query service.
Read-only aggregate queries over an in-memory list of transactions.
"""
from typing import Dict, Iterable, List, Optional, Set, Tuple

from core.config import Settings, get_settings
from core.exceptions import EmptyTransactionsError, ValidationError
from core.logger import setup_logger
from core.schema import Transaction, TransactionSummary

logger = setup_logger(__name__)


class TransactionQueryService:
    """Answers statistics and lookup queries over a fixed list of transactions."""

    def __init__(self, transactions: Iterable[Transaction], settings: Optional[Settings] = None):
        """
        Initialize transaction query service.

        Args:
            transactions: Transactions to query, in their original order
            settings: Optional settings (defaults to the application settings)
        """
        self.settings = settings or get_settings()
        self._transactions: Tuple[Transaction, ...] = tuple(transactions)
        logger.info(f"Loaded {len(self._transactions)} transactions")

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def get_total_transaction_amount(self) -> float:
        """Return the sum of the amounts of all transactions."""
        total_amount = 0.0
        for txn in self._transactions:
            total_amount += txn.amount
        return total_amount

    def get_total_transaction_amount_sent_by(self, sender_full_name: str) -> float:
        """
        Return the sum of the amounts of all transactions sent by a client.

        Sender names are compared exactly, including case.
        """
        total_amount = 0.0
        for txn in self._transactions:
            if txn.sender_full_name == sender_full_name:
                total_amount += txn.amount
        logger.debug(f"Total sent by '{sender_full_name}': {total_amount}")
        return total_amount

    def get_max_transaction_amount(self) -> float:
        """
        Return the highest transaction amount.

        The running maximum starts at 0.0, so a list of non-positive amounts
        yields 0.0.

        Raises:
            EmptyTransactionsError: If there are no transactions
        """
        if not self._transactions:
            logger.error("Cannot compute max transaction amount: transaction list is empty")
            raise EmptyTransactionsError(
                "Transaction list is empty",
                details={"operation": "get_max_transaction_amount"}
            )

        max_amount = 0.0
        for txn in self._transactions:
            if txn.amount > max_amount:
                max_amount = txn.amount
        return max_amount

    def count_unique_clients(self) -> int:
        """Count the distinct client names that sent or received a transaction."""
        unique_clients: Set[str] = set()
        for txn in self._transactions:
            unique_clients.add(txn.sender_full_name)
            unique_clients.add(txn.beneficiary_full_name)
        return len(unique_clients)

    def has_open_compliance_issues(self, client_full_name: str) -> bool:
        """
        Return whether a client has at least one transaction with an unsolved issue.

        The client may be the sender or the beneficiary; names are compared
        case-insensitively.
        """
        # lower(), not casefold(): "straße" must not match "STRASSE"
        client = client_full_name.lower()
        for txn in self._transactions:
            involved = (
                txn.sender_full_name.lower() == client
                or txn.beneficiary_full_name.lower() == client
            )
            if involved and not txn.issue_solved:
                logger.debug(f"Open compliance issue {txn.issue_id} found for '{client_full_name}'")
                return True
        return False

    def get_transactions_by_beneficiary_name(self) -> Dict[str, Transaction]:
        """
        Return transactions indexed by beneficiary name.

        When a beneficiary appears more than once, the latest transaction wins.
        """
        by_beneficiary: Dict[str, Transaction] = {}
        for txn in self._transactions:
            by_beneficiary[txn.beneficiary_full_name] = txn
        return by_beneficiary

    def get_unsolved_issue_ids(self) -> Set[int]:
        """Return the identifiers of all open compliance issues."""
        unsolved_issue_ids: Set[int] = set()
        for txn in self._transactions:
            if txn.issue_solved:
                continue
            if txn.issue_id is None:
                logger.debug(f"Unsolved transaction {txn.mtn} has no issue id, skipping")
                continue
            unsolved_issue_ids.add(txn.issue_id)
        return unsolved_issue_ids

    def get_all_solved_issue_messages(self) -> List[Optional[str]]:
        """
        Return the issue messages of all solved transactions, in transaction order.

        Every solved transaction contributes one entry, None when it has no message.
        """
        return [txn.issue_message for txn in self._transactions if txn.issue_solved]

    def get_top_transactions_by_amount(self, limit: Optional[int] = None) -> List[Transaction]:
        """
        Return the transactions with the highest amounts, sorted descending.

        Transactions with equal amounts keep their original relative order.

        Args:
            limit: Number of transactions to return (defaults to configured value)

        Raises:
            ValidationError: If limit is negative
        """
        if limit is None:
            limit = self.settings.top_transactions_limit
        if limit < 0:
            raise ValidationError(
                f"Limit must not be negative, got {limit}",
                details={"limit": limit}
            )

        # sorted() is stable, so reverse=True keeps ties in input order
        ranked = sorted(self._transactions, key=lambda txn: txn.amount, reverse=True)
        return ranked[:limit]

    def get_top3_transactions_by_amount(self) -> List[Transaction]:
        """Return the 3 transactions with the highest amount, sorted descending."""
        return self.get_top_transactions_by_amount(3)

    def get_total_amount_by_sender(self) -> Dict[str, float]:
        """Return the summed amount per sender, in order of first appearance."""
        totals: Dict[str, float] = {}
        for txn in self._transactions:
            totals[txn.sender_full_name] = totals.get(txn.sender_full_name, 0.0) + txn.amount
        return totals

    def get_top_sender(self) -> Optional[str]:
        """
        Return the name of the sender with the most total sent amount.

        Only a strictly positive total can win; on ties the sender seen first
        wins. Returns None when no sender qualifies.
        """
        top_sender = None
        max_total = 0.0
        for sender, total in self.get_total_amount_by_sender().items():
            if total > max_total:
                top_sender = sender
                max_total = total
        return top_sender

    def build_summary(self) -> TransactionSummary:
        """
        Build aggregate statistics for the reporting layer.

        Returns:
            TransactionSummary; max_amount is None for an empty list
        """
        max_amount = self.get_max_transaction_amount() if self._transactions else None

        summary = TransactionSummary(
            transaction_count=len(self._transactions),
            total_amount=self.get_total_transaction_amount(),
            max_amount=max_amount,
            unique_clients=self.count_unique_clients(),
            unsolved_issue_ids=sorted(self.get_unsolved_issue_ids()),
            solved_message_count=len(self.get_all_solved_issue_messages()),
            top_sender=self.get_top_sender(),
        )
        logger.info(
            f"Summary: {summary.transaction_count} transactions, "
            f"total {summary.total_amount:,.2f}, "
            f"{len(summary.unsolved_issue_ids)} open issues"
        )
        return summary
