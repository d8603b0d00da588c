"""Transactions repository adapters.

Records live in process memory only; everything is lost on restart.
"""

from __future__ import annotations

import threading
from datetime import date, timedelta
from typing import Iterable, Protocol

from shared.models import Transaction, TransactionPayload, TransactionType


class TransactionsRepository(Protocol):
    def list_transactions(self) -> list[Transaction]:
        """Return every stored transaction in insertion order."""

    def get_transaction(self, transaction_id: int) -> Transaction | None:
        """Return the first transaction with ``transaction_id`` or ``None``."""

    def insert_transaction(self, payload: TransactionPayload) -> Transaction:
        """Store ``payload`` under a freshly minted id and return the record."""

    def replace_transaction(self, transaction_id: int, payload: TransactionPayload) -> Transaction | None:
        """Overwrite the mutable fields of a stored transaction."""

    def remove_transaction(self, transaction_id: int) -> bool:
        """Remove every transaction with ``transaction_id``; report whether any matched."""


def default_seed(today: date) -> list[TransactionPayload]:
    """Return the demonstration records inserted at startup."""

    yesterday = today - timedelta(days=1)
    return [
        TransactionPayload(type=TransactionType.INCOME, amount=1500.00, description="Salary", date=yesterday),
        TransactionPayload(type=TransactionType.EXPENSE, amount=75.50, description="Groceries", date=yesterday),
        TransactionPayload(type=TransactionType.EXPENSE, amount=12.00, description="Coffee", date=today),
    ]


class InMemoryTransactionsRepository:
    """Insertion-ordered in-memory store guarded by a single lock.

    Ids start at 1, only ever increase and are never reissued, even after
    deletion. Records handed out are copies, so callers cannot mutate the
    store outside the lock.
    """

    def __init__(self, seed: Iterable[TransactionPayload] = ()) -> None:
        self._lock = threading.Lock()
        self._rows: list[Transaction] = []
        self._last_id = 0
        for payload in seed:
            self.insert_transaction(payload)

    def _next_id(self) -> int:
        # caller holds self._lock
        self._last_id += 1
        return self._last_id

    def _find(self, transaction_id: int) -> Transaction | None:
        for row in self._rows:
            if row.id == transaction_id:
                return row
        return None

    def list_transactions(self) -> list[Transaction]:
        with self._lock:
            return [row.model_copy() for row in self._rows]

    def get_transaction(self, transaction_id: int) -> Transaction | None:
        with self._lock:
            row = self._find(transaction_id)
            return row.model_copy() if row is not None else None

    def insert_transaction(self, payload: TransactionPayload) -> Transaction:
        with self._lock:
            row = Transaction(id=self._next_id(), **payload.model_dump(exclude={"id"}))
            self._rows.append(row)
            return row.model_copy()

    def replace_transaction(self, transaction_id: int, payload: TransactionPayload) -> Transaction | None:
        with self._lock:
            row = self._find(transaction_id)
            if row is None:
                return None
            row.apply(payload)
            return row.model_copy()

    def remove_transaction(self, transaction_id: int) -> bool:
        with self._lock:
            kept = [row for row in self._rows if row.id != transaction_id]
            removed = len(kept) != len(self._rows)
            self._rows = kept
            return removed
