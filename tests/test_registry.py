from libcatalog.book import BookStatus
from libcatalog.outcome import Outcome
from libcatalog.registry import BookRegistry


def test_insert_find_and_list_in_insertion_order():
    registry = BookRegistry()
    assert registry.list_all() == []

    for book_id in (7, 2, 9):
        assert registry.insert(book_id, f"Title {book_id}", "Author") is Outcome.SUCCESS

    assert [b.id for b in registry.list_all()] == [7, 2, 9]
    for book_id in (7, 2, 9):
        assert registry.find(book_id).title == f"Title {book_id}"
    assert len(registry) == 3


def test_new_books_start_available_and_are_stripped():
    registry = BookRegistry()
    registry.insert(1, "  Dune ", " Frank Herbert  ")

    book = registry.find(1)
    assert book.status is BookStatus.AVAILABLE
    assert book.title == "Dune"
    assert book.author == "Frank Herbert"


def test_duplicate_insert_does_not_mutate():
    registry = BookRegistry()
    registry.insert(1, "Dune", "Frank Herbert")

    assert registry.insert(1, "Other", "Someone") is Outcome.DUPLICATE_KEY
    assert len(registry) == 1
    assert registry.find(1).title == "Dune"
    assert registry.find(1).author == "Frank Herbert"


def test_delete():
    registry = BookRegistry()
    registry.insert(1, "A", "X")
    registry.insert(2, "B", "Y")
    registry.insert(3, "C", "Z")

    assert registry.delete(2) is Outcome.SUCCESS
    assert registry.find(2) is None
    assert [b.id for b in registry.list_all()] == [1, 3]
    assert registry.delete(2) is Outcome.NOT_FOUND


def test_delete_head_and_tail():
    registry = BookRegistry()
    registry.insert(1, "A", "X")
    registry.insert(2, "B", "Y")
    registry.insert(3, "C", "Z")

    assert registry.delete(1) is Outcome.SUCCESS
    assert registry.delete(3) is Outcome.SUCCESS
    assert [b.id for b in registry.list_all()] == [2]


def test_find_missing_and_non_positive_ids():
    registry = BookRegistry()
    registry.insert(1, "A", "X")
    assert registry.find(42) is None
    assert registry.find(0) is None
    assert registry.find(-1) is None


def test_list_all_returns_a_copy():
    registry = BookRegistry()
    registry.insert(1, "A", "X")

    books = registry.list_all()
    books.clear()
    assert len(registry) == 1
