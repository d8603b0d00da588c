"""Composition root for backend services."""

from __future__ import annotations

from datetime import date

from backend.repositories.transactions_repository import InMemoryTransactionsRepository, default_seed
from backend.services.transaction_service import TransactionService


def build_transaction_service(today: date | None = None) -> TransactionService:
    """Build the transaction service over a freshly seeded in-memory store."""

    repository = InMemoryTransactionsRepository(seed=default_seed(today or date.today()))
    return TransactionService(repository=repository)
