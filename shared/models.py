"""Pydantic contracts shared across the transactions backend and HTTP layer."""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class TransactionType(str, Enum):
    """Direction of a recorded financial event."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @classmethod
    def from_filter(cls, value: str | None) -> TransactionType | None:
        """Return the member whose name equals ``value`` ignoring case, or ``None``."""
        if value is None:
            return None
        for member in cls:
            if member.name.lower() == value.lower():
                return member
        return None


class TransactionPayload(BaseModel):
    """Client-supplied transaction fields.

    Every field may be omitted or null, mirroring a plain bean binding: no
    value is rejected here. Any ``id`` in the body is dropped.
    """

    model_config = ConfigDict(extra="ignore")

    type: TransactionType | None = None
    amount: float = 0.0
    description: str | None = None
    date: datetime.date | None = None


class Transaction(TransactionPayload):
    id: int

    def apply(self, payload: TransactionPayload) -> None:
        """Overwrite every mutable field in place, keeping ``id``."""
        self.type = payload.type
        self.amount = payload.amount
        self.description = payload.description
        self.date = payload.date
