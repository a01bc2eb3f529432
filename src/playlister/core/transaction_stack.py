"""Undo/redo history of reversible transactions."""

from __future__ import annotations

import logging
from typing import List, Optional

from playlister.core.transactions import Transaction

logger = logging.getLogger(__name__)


class TransactionStack:
    """Ordered history with a cursor between done and redoable transactions.

    Transactions below ``position`` have been performed; those at or above it
    were either reversed or never performed.
    """

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def size(self) -> int:
        return len(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def push(self, transaction: Transaction) -> None:
        transaction.perform()
        if self._position < len(self._transactions):
            discarded = len(self._transactions) - self._position
            del self._transactions[self._position:]
            logger.debug("Discarded %d redoable transaction(s)", discarded)
        self._transactions.append(transaction)
        self._position += 1
        logger.debug("Performed %s (position=%d)", transaction.label, self._position)

    def undo(self) -> bool:
        if not self.can_undo():
            logger.debug("Nothing to undo")
            return False
        self._position -= 1
        transaction = self._transactions[self._position]
        transaction.reverse()
        logger.debug("Undid %s (position=%d)", transaction.label, self._position)
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            logger.debug("Nothing to redo")
            return False
        transaction = self._transactions[self._position]
        transaction.perform()
        self._position += 1
        logger.debug("Redid %s (position=%d)", transaction.label, self._position)
        return True

    def can_undo(self) -> bool:
        return self._position > 0

    def can_redo(self) -> bool:
        return self._position < len(self._transactions)

    def peek_undo(self) -> Optional[Transaction]:
        if not self.can_undo():
            return None
        return self._transactions[self._position - 1]

    def peek_redo(self) -> Optional[Transaction]:
        if not self.can_redo():
            return None
        return self._transactions[self._position]

    def clear(self) -> None:
        self._transactions.clear()
        self._position = 0


__all__ = [
    "TransactionStack",
]
