"""The library catalogue, its members, loans and the text files behind them."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from pathlib import Path

from libdesk.book import Book
from libdesk.dates import add_days, days_between, format_date, parse_date, today
from libdesk.user import User


class LibraryError(Exception):
    """Base class for refused library operations."""


class DuplicateIdError(LibraryError):
    """A book or user with the given id already exists."""


class NotFoundError(LibraryError):
    """The named book or user does not exist."""


class BookUnavailableError(LibraryError):
    """The book is already lent out."""


class NotBorrowedError(LibraryError):
    """The user does not hold the book being returned."""


def _take(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError(f"data file ends before {what}") from None


def _parse_flag(text: str) -> bool:
    value = text.strip()
    if value not in ("0", "1"):
        raise ValueError(f"availability flag must be 0 or 1, not {text!r}")
    return value == "1"


def _read_lines(path: str | Path) -> Iterator[str] | None:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return None
    return iter(text.splitlines())


def _write_text(path: str | Path, text: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


class LibrarySystem:
    """Books and users keyed by id, with loans and overdue fines."""

    LOAN_PERIOD_DAYS = 14
    FINE_PER_DAY = 2

    def __init__(self) -> None:
        self.books: dict[str, Book] = {}
        self.users: dict[str, User] = {}

    def load_books(self, path: str | Path) -> None:
        """Read books from ``path``; a file that cannot be opened is skipped."""
        lines = _read_lines(path)
        if lines is None:
            return
        for book_id in lines:
            title = _take(lines, "book title")
            author = _take(lines, "book author")
            available = _parse_flag(_take(lines, "availability flag"))
            self.books[book_id] = Book(book_id, title, author, available)

    def save_books(self, path: str | Path) -> None:
        """Write every book to ``path``, four lines each."""
        _write_text(
            path,
            "".join(
                f"{book.book_id}\n{book.title}\n{book.author}\n{int(book.available)}\n"
                for book in self.list_books()
            ),
        )

    def load_users(self, path: str | Path) -> None:
        """Read users and their loans from ``path``; an unreadable file is skipped."""
        lines = _read_lines(path)
        if lines is None:
            return
        for user_id in lines:
            name = _take(lines, "user name")
            count = int(_take(lines, "loan count").strip())
            user = User(user_id, name)
            for _ in range(count):
                book_id = _take(lines, "borrowed book id")
                user.borrow_book(book_id, parse_date(_take(lines, "due date")))
            self.users[user_id] = user

    def save_users(self, path: str | Path) -> None:
        """Write every user and their loans to ``path``."""
        parts = []
        for user in self.list_users():
            parts.append(f"{user.user_id}\n{user.name}\n{len(user.borrowed)}\n")
            parts.extend(
                f"{book_id}\n{format_date(due)}\n"
                for book_id, due in sorted(user.borrowed.items())
            )
        _write_text(path, "".join(parts))

    def add_book(self, book_id: str, title: str, author: str) -> Book:
        """Catalogue a new book; raises DuplicateIdError if the id is taken."""
        if book_id in self.books:
            raise DuplicateIdError("Book with this ID already exists.")
        book = Book(book_id, title, author)
        self.books[book_id] = book
        return book

    def register_user(self, user_id: str, name: str) -> User:
        """Register a new member; raises DuplicateIdError if the id is taken."""
        if user_id in self.users:
            raise DuplicateIdError("User with this ID already exists.")
        user = User(user_id, name)
        self.users[user_id] = user
        return user

    def _user(self, user_id: str) -> User:
        try:
            return self.users[user_id]
        except KeyError:
            raise NotFoundError("User not found.") from None

    def _book(self, book_id: str) -> Book:
        try:
            return self.books[book_id]
        except KeyError:
            raise NotFoundError("Book not found.") from None

    def borrow_book(self, user_id: str, book_id: str, on_date: date | None = None) -> date:
        """Lend a book to a user and return its due date."""
        user = self._user(user_id)
        book = self._book(book_id)
        if not book.available:
            raise BookUnavailableError("Book is currently not available.")
        due = add_days(on_date or today(), self.LOAN_PERIOD_DAYS)
        book.available = False
        user.borrow_book(book_id, due)
        return due

    def return_book(self, user_id: str, book_id: str, on_date: date | None = None) -> int:
        """Take a book back and return the fine charged for lateness."""
        user = self._user(user_id)
        book = self._book(book_id)
        if book_id not in user.borrowed:
            raise NotBorrowedError("This user has not borrowed the specified book.")
        current = on_date or today()
        due = user.borrowed[book_id]
        fine = days_between(due, current) * self.FINE_PER_DAY if due < current else 0
        book.available = True
        user.return_book(book_id)
        return fine

    def list_books(self) -> list[Book]:
        """Return all books ordered by id."""
        return [self.books[key] for key in sorted(self.books)]

    def list_users(self) -> list[User]:
        """Return all users ordered by id."""
        return [self.users[key] for key in sorted(self.users)]

    def user_fine(self, user_id: str, on_date: date | None = None) -> int:
        """Return the fine a user currently owes on overdue loans."""
        return self._user(user_id).calculate_fine(on_date or today(), self.FINE_PER_DAY)