from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from libcatalog.book import Book, Transaction


class Outcome(Enum):
    """Result kinds reported by catalog operations"""
    SUCCESS = "success"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    ALREADY_ISSUED = "already_issued"
    ALREADY_AVAILABLE = "already_available"
    NOTHING_TO_UNDO = "nothing_to_undo"
    INVALID_INPUT = "invalid_input"


@dataclass
class Result:
    """Outcome of a controller operation plus whatever it touched"""
    outcome: Outcome
    book: Optional[Book] = None
    transaction: Optional[Transaction] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS
