"""Transaction service: the CRUD operations exposed over HTTP."""

from __future__ import annotations

import logging

from backend.repositories.transactions_repository import TransactionsRepository
from shared.models import Transaction, TransactionPayload, TransactionType


logger = logging.getLogger(__name__)


class TransactionNotFoundError(LookupError):
    """Raised when no stored transaction carries the requested id."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id


class TransactionService:
    """Thin service over a transactions repository."""

    def __init__(self, repository: TransactionsRepository) -> None:
        self._repository = repository

    def list_transactions(self, type_filter: str | None = None) -> list[Transaction]:
        """Return all transactions, or those whose type matches ``type_filter``.

        The filter is case-insensitive and matched verbatim, without trimming.
        An unknown type yields an empty list rather than an error, and rows
        stored without a type never match a filter.
        """
        rows = self._repository.list_transactions()
        if not type_filter:
            return rows

        transaction_type = TransactionType.from_filter(type_filter)
        if transaction_type is None:
            logger.info("transactions_list_unknown_type type_filter=%s", type_filter)
            return []
        return [row for row in rows if row.type == transaction_type]

    def get_transaction(self, transaction_id: int) -> Transaction:
        row = self._repository.get_transaction(transaction_id)
        if row is None:
            raise TransactionNotFoundError(transaction_id)
        return row

    def create_transaction(self, payload: TransactionPayload) -> Transaction:
        row = self._repository.insert_transaction(payload)
        logger.info(
            "transaction_created transaction_id=%s type=%s",
            row.id,
            row.type.value if row.type is not None else None,
        )
        return row

    def update_transaction(self, transaction_id: int, payload: TransactionPayload) -> Transaction:
        row = self._repository.replace_transaction(transaction_id, payload)
        if row is None:
            raise TransactionNotFoundError(transaction_id)
        logger.info("transaction_updated transaction_id=%s", transaction_id)
        return row

    def delete_transaction(self, transaction_id: int) -> None:
        if not self._repository.remove_transaction(transaction_id):
            raise TransactionNotFoundError(transaction_id)
        logger.info("transaction_deleted transaction_id=%s", transaction_id)
