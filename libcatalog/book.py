from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BookStatus(Enum):
    """Lending state of a book."""
    AVAILABLE = "Available"
    ISSUED = "Issued"


class TransactionAction(Enum):
    """Kind of recorded lending action."""
    ISSUE = "issue"
    RETURN = "return"


class Book:
    """Represents a single book in the catalog."""

    def __init__(self, book_id: int, title: str, author: str,
                 status: BookStatus = BookStatus.AVAILABLE) -> None:
        self.id = book_id
        self.title = title.strip()
        self.author = author.strip()
        self.status = status

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.id})"

    def __repr__(self) -> str:  # pragma: no cover
        return f"Book(id={self.id!r}, title={self.title!r}, status={self.status.value})"

    @property
    def is_issued(self) -> bool:
        return self.status is BookStatus.ISSUED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class Transaction:
    """One successful issue or return, kept for undo."""
    book_id: int
    action: TransactionAction

    def to_dict(self) -> dict:
        return {
            "book_id": self.book_id,
            "action": self.action.value,
        }
