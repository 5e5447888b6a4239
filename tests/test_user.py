from datetime import date

from libdesk.dates import add_days
from libdesk.user import User


def test_borrow_and_return():
    user = User("U1", "Alice")
    due = date(2024, 5, 1)
    user.borrow_book("B1", due)
    assert user.borrowed == {"B1": due}
    user.return_book("B1")
    assert user.borrowed == {}


def test_return_unknown_book_leaves_loans_alone():
    user = User("U1", "Alice")
    user.borrow_book("B1", date(2024, 5, 1))
    user.return_book("B9")
    assert list(user.borrowed) == ["B1"]


def test_describe_without_loans():
    user = User("U1", "Alice")
    assert user.describe() == "User ID: U1 | Name: Alice\nBorrowed Books:\n  None"


def test_describe_lists_loans_in_id_order():
    user = User("U1", "Alice")
    user.borrow_book("B2", date(2024, 6, 2))
    user.borrow_book("B1", date(2024, 5, 1))
    lines = user.describe().splitlines()
    assert lines[2:] == [
        "  Book ID: B1, Due Date: 01/05/2024",
        "  Book ID: B2, Due Date: 02/06/2024",
    ]


def test_no_fine_when_nothing_overdue():
    user = User("U1", "Alice")
    due = date(2024, 5, 1)
    user.borrow_book("B1", due)
    assert user.calculate_fine(due, 2) == 0
    assert user.calculate_fine(add_days(due, -3), 2) == 0


def test_fine_for_single_overdue_loan():
    user = User("U1", "Alice")
    due = date(2024, 1, 1)
    user.borrow_book("B1", due)
    assert user.calculate_fine(add_days(due, 5), 2) == 10


def test_fine_sums_overdue_loans_only():
    user = User("U1", "Alice")
    current = date(2024, 3, 10)
    user.borrow_book("B1", add_days(current, -3))
    user.borrow_book("B2", add_days(current, -4))
    user.borrow_book("B3", add_days(current, 7))
    assert user.calculate_fine(current, 2) == 14


def test_fine_scales_with_rate():
    user = User("U1", "Alice")
    due = date(2024, 1, 1)
    user.borrow_book("B1", due)
    later = add_days(due, 9)
    assert user.calculate_fine(later, 4) == 2 * user.calculate_fine(later, 2)