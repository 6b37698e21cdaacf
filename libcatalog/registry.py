import logging
from typing import List, Optional

from libcatalog.book import Book
from libcatalog.outcome import Outcome

logger = logging.getLogger(__name__)


class BookRegistry:
    """Owns the catalog's books, kept in insertion order."""

    def __init__(self) -> None:
        self.books: List[Book] = []

    def __len__(self) -> int:
        return len(self.books)

    def insert(self, book_id: int, title: str, author: str) -> Outcome:
        """Append a new Available book. Rejects ids already present."""
        if self.find(book_id):
            logger.info(f"Insert rejected, book ID {book_id} already exists")
            return Outcome.DUPLICATE_KEY
        self.books.append(Book(book_id, title, author))
        logger.info(f"Book {book_id} inserted ({len(self.books)} total)")
        return Outcome.SUCCESS

    def delete(self, book_id: int) -> Outcome:
        for index, book in enumerate(self.books):
            if book.id == book_id:
                del self.books[index]
                logger.info(f"Book {book_id} deleted")
                return Outcome.SUCCESS
        logger.info(f"Delete skipped, book ID {book_id} not found")
        return Outcome.NOT_FOUND

    def find(self, book_id: int) -> Optional[Book]:
        logger.debug(f"Scanning {len(self.books)} books for ID {book_id}")
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def list_all(self) -> List[Book]:
        return list(self.books)
