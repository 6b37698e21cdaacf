import logging
from typing import List, Optional

from libcatalog.book import Transaction, TransactionAction

logger = logging.getLogger(__name__)


class TransactionLog:
    """Last-in-first-out history of issue/return actions."""

    def __init__(self) -> None:
        self._stack: List[Transaction] = []

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, book_id: int, action: TransactionAction) -> Transaction:
        transaction = Transaction(book_id, action)
        self._stack.append(transaction)
        logger.debug(f"Pushed {action.value} for book {book_id} (depth {len(self._stack)})")
        return transaction

    def pop(self) -> Optional[Transaction]:
        """Remove and return the most recent transaction, or None when empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def peek_all(self) -> List[Transaction]:
        """Most recent first. Leaves the log untouched."""
        return list(reversed(self._stack))

    def is_empty(self) -> bool:
        return not self._stack
