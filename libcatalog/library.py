import logging
from typing import List, Optional

from libcatalog.book import Book, BookStatus, Transaction, TransactionAction
from libcatalog.outcome import Outcome, Result
from libcatalog.registry import BookRegistry
from libcatalog.transactions import TransactionLog

logger = logging.getLogger(__name__)


class Library:
    """Coordinates the book registry and the transaction log.

    Every operation returns a Result; none of the failure outcomes raise, so
    the caller can always go on to the next command.
    """

    def __init__(self) -> None:
        self.registry = BookRegistry()
        self.transactions = TransactionLog()

    # ------------------------- Catalog operations ------------------------- #
    def insert_book(self, book_id: int, title: str, author: str) -> Result:
        if book_id <= 0:
            logger.info(f"Insert rejected, invalid book ID {book_id}")
            return Result(Outcome.INVALID_INPUT)
        outcome = self.registry.insert(book_id, title, author)
        book = self.registry.find(book_id) if outcome is Outcome.SUCCESS else None
        return Result(outcome, book=book)

    def delete_book(self, book_id: int) -> Result:
        return Result(self.registry.delete(book_id))

    def find_book(self, book_id: int) -> Optional[Book]:
        return self.registry.find(book_id)

    # ------------------------- Lending ------------------------- #
    def issue_book(self, book_id: int) -> Result:
        book = self.registry.find(book_id)
        if book is None:
            return Result(Outcome.NOT_FOUND)
        if book.status is BookStatus.ISSUED:
            logger.info(f"Book {book_id} is already issued")
            return Result(Outcome.ALREADY_ISSUED, book=book)

        book.status = BookStatus.ISSUED
        transaction = self.transactions.push(book_id, TransactionAction.ISSUE)
        logger.info(f"Book {book_id} issued")
        return Result(Outcome.SUCCESS, book=book, transaction=transaction)

    def return_book(self, book_id: int) -> Result:
        book = self.registry.find(book_id)
        if book is None:
            return Result(Outcome.NOT_FOUND)
        if book.status is BookStatus.AVAILABLE:
            logger.info(f"Book {book_id} is already available")
            return Result(Outcome.ALREADY_AVAILABLE, book=book)

        book.status = BookStatus.AVAILABLE
        transaction = self.transactions.push(book_id, TransactionAction.RETURN)
        logger.info(f"Book {book_id} returned")
        return Result(Outcome.SUCCESS, book=book, transaction=transaction)

    def undo(self) -> Result:
        """Revert the most recent issue or return.

        The transaction is consumed even when its book has since been deleted;
        in that case nothing is restored and NOT_FOUND is reported.
        """
        transaction = self.transactions.pop()
        if transaction is None:
            return Result(Outcome.NOTHING_TO_UNDO)

        book = self.registry.find(transaction.book_id)
        if book is None:
            logger.info(f"Undo dropped {transaction.action.value} for deleted book {transaction.book_id}")
            return Result(Outcome.NOT_FOUND, transaction=transaction)

        if transaction.action is TransactionAction.ISSUE:
            book.status = BookStatus.AVAILABLE
        else:
            book.status = BookStatus.ISSUED
        logger.info(f"Undo {transaction.action.value}: book {book.id} is now {book.status.value}")
        return Result(Outcome.SUCCESS, book=book, transaction=transaction)

    # ------------------------- Views ------------------------- #
    def list_books(self) -> List[Book]:
        return self.registry.list_all()

    def list_transactions(self) -> List[Transaction]:
        return self.transactions.peek_all()
