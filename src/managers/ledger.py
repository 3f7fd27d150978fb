"""Savings account ledger manager.

This module records debit transactions against a savings account whose
balance is derived from the opening balance and the stored transactions.
Transactions are indexed by category, newest first.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.constants import (
    DEFAULT_ACCOUNT_NUMBER,
    DEFAULT_OPENING_BALANCE,
    DEFAULT_PAYMENT_CHANNEL,
    PAYMENT_CHANNELS,
)
from core.errors import InvalidValueError, KeepstoreError
from core.logging_config import get_logger
from core.types import OperationOutcome, PaymentChannel, SeedData, Transaction
from managers.outcomes import failed, flush_snapshots, succeeded, with_flush_error
from managers.seed_data import default_seed_data
from store.derived_index import DerivedIndex, chronological_key
from store.record_payload import TRANSACTION_CODEC
from store.repository import Repository
from store.snapshot_io import JsonSnapshotFile, SnapshotTarget

_LOGGER = get_logger(__name__)


class LedgerManager:
    """Savings account ledger with a transactions-by-category index."""

    def __init__(
        self,
        target: SnapshotTarget,
        opening_balance: Decimal = DEFAULT_OPENING_BALANCE,
        account_number: str = DEFAULT_ACCOUNT_NUMBER,
        autosave: bool = True,
    ) -> None:
        """Create a ledger bound to one snapshot location.

        Args:
            target: Snapshot location for transactions.
            opening_balance: Balance before any stored transaction.
            account_number: Account identifier used in log events.
            autosave: Flush the snapshot after each applied verb.

        Raises:
            InvalidValueError: If the opening balance is not a finite number.
        """
        if not opening_balance.is_finite():
            raise InvalidValueError(
                f"Opening balance must be a finite amount (got {opening_balance})."
            )
        self._transactions: Repository[Transaction] = Repository("transaction")
        self._by_category: DerivedIndex[str, Transaction] = DerivedIndex(
            group_key_of=lambda transaction: transaction.category,
            sort_key_of=lambda transaction: chronological_key(transaction.date),
            descending=True,
        )
        self._snapshot_file = JsonSnapshotFile(target, TRANSACTION_CODEC)
        self._opening_balance = opening_balance
        self._account_number = account_number
        self._autosave = autosave

    @property
    def transactions(self) -> Repository[Transaction]:
        return self._transactions

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        """Opening balance minus every stored transaction amount."""
        amounts = (transaction.amount for transaction in self._transactions.get_all())
        spent = sum(amounts, Decimal(0))
        return self._opening_balance - spent

    def seed(
        self,
        seed_data: SeedData | None = None,
        now: datetime | None = None,
    ) -> OperationOutcome:
        """Apply starter transactions in order, stopping at the first rejection."""
        data = seed_data or default_seed_data(now)
        for transaction in data.transactions:
            try:
                self._apply(transaction)
            except KeepstoreError as error:
                self._by_category.rebuild(self._transactions.get_all())
                return failed("ledger_seed", error, transaction_id=transaction.id)
        self._by_category.rebuild(self._transactions.get_all())
        return self._after_change(
            succeeded(f"Seeded {len(data.transactions)} transactions. Balance: {self.balance}")
        )

    def record_transaction(
        self,
        transaction_id: int,
        amount: Decimal,
        category: str,
        date: datetime | None = None,
        channel: PaymentChannel = DEFAULT_PAYMENT_CHANNEL,
    ) -> OperationOutcome:
        """Debit the account and store the transaction.

        Args:
            transaction_id: New transaction identifier.
            amount: Positive amount to debit.
            category: Spending category.
            date: Booking time; current time when omitted.
            channel: Payment channel that processed the debit.

        Returns:
            Outcome carrying the stored transaction on success.
        """
        try:
            if channel not in PAYMENT_CHANNELS:
                raise InvalidValueError(
                    f"Unknown payment channel '{channel}'. "
                    f"Use one of: {', '.join(PAYMENT_CHANNELS)}."
                )
            if not category.strip():
                raise InvalidValueError("Transaction category cannot be empty.")
            transaction = Transaction(
                id=transaction_id,
                date=date or datetime.now(),
                amount=amount,
                category=category.strip(),
            )
            self._apply(transaction)
        except KeepstoreError as error:
            return failed("record_transaction", error, transaction_id=transaction_id)
        self._by_category.rebuild(self._transactions.get_all())
        _LOGGER.info(
            "transaction_processed",
            account_number=self._account_number,
            transaction_id=transaction_id,
            channel=channel,
            amount=str(amount),
        )
        outcome = succeeded(
            f"Transaction successful. Updated balance: {self.balance}",
            value=transaction,
        )
        return self._after_change(outcome)

    def transactions_in(self, category: str) -> tuple[Transaction, ...] | None:
        """Return a category's transactions newest-first, or None when there are none."""
        return self._by_category.lookup(category)

    def list_transactions(self) -> list[Transaction]:
        """Return all transactions ordered by id."""
        return sorted(self._transactions.get_all(), key=lambda transaction: transaction.id)

    def save(self) -> OperationOutcome:
        """Flush the transactions snapshot."""
        flush_error = flush_snapshots([(self._snapshot_file, self._transactions)])
        if flush_error is not None:
            return OperationOutcome(ok=False, message=str(flush_error), error=flush_error)
        return succeeded("Ledger saved.")

    def load(self) -> OperationOutcome:
        """Replace the repository with the persisted snapshot and rebuild the index."""
        try:
            records = self._snapshot_file.load()
            self._transactions.replace_all(records)
        except KeepstoreError as error:
            return failed("ledger_load", error)
        self._by_category.rebuild(self._transactions.get_all())
        return succeeded(f"Loaded {len(records)} transactions. Balance: {self.balance}")

    def _apply(self, transaction: Transaction) -> None:
        """Validate a debit against the balance and store it."""
        if not transaction.amount.is_finite() or transaction.amount <= 0:
            raise InvalidValueError(
                f"Transaction amount must be a positive finite number (got {transaction.amount})."
            )
        if transaction.amount > self.balance:
            raise InvalidValueError(
                f"Insufficient funds: transaction {transaction.id} needs {transaction.amount}, "
                f"balance is {self.balance}."
            )
        self._transactions.add(transaction)

    def _after_change(self, outcome: OperationOutcome) -> OperationOutcome:
        if not self._autosave:
            return outcome
        return with_flush_error(
            outcome,
            flush_snapshots([(self._snapshot_file, self._transactions)]),
        )
