from libcatalog.book import Transaction, TransactionAction
from libcatalog.transactions import TransactionLog


def test_new_log_is_empty():
    log = TransactionLog()
    assert log.is_empty()
    assert log.pop() is None
    assert log.peek_all() == []


def test_push_and_pop_are_last_in_first_out():
    log = TransactionLog()
    log.push(1, TransactionAction.ISSUE)
    log.push(2, TransactionAction.ISSUE)
    log.push(1, TransactionAction.RETURN)

    assert log.pop() == Transaction(1, TransactionAction.RETURN)
    assert log.pop() == Transaction(2, TransactionAction.ISSUE)
    assert log.pop() == Transaction(1, TransactionAction.ISSUE)
    assert log.pop() is None
    assert log.is_empty()


def test_peek_all_is_most_recent_first_and_non_destructive():
    log = TransactionLog()
    log.push(1, TransactionAction.ISSUE)
    log.push(1, TransactionAction.RETURN)

    expected = [
        Transaction(1, TransactionAction.RETURN),
        Transaction(1, TransactionAction.ISSUE),
    ]
    assert log.peek_all() == expected
    assert log.peek_all() == expected
    assert len(log) == 2


def test_push_returns_the_recorded_transaction():
    log = TransactionLog()
    transaction = log.push(5, TransactionAction.ISSUE)
    assert transaction.book_id == 5
    assert transaction.action is TransactionAction.ISSUE
    assert transaction.to_dict() == {"book_id": 5, "action": "issue"}
