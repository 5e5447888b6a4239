"""Interactive menu for running the library from a terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from libdesk.dates import format_date
from libdesk.library import BookUnavailableError, LibraryError, LibrarySystem

MENU = (
    "\n--- Library Management System ---\n"
    "1. Add a new book\n"
    "2. Register a new user\n"
    "3. Borrow a book\n"
    "4. Return a book\n"
    "5. Calculate user fine\n"
    "6. List all books\n"
    "7. List all users\n"
    "8. Exit\n"
    "---------------------------------\n"
    "Enter your choice: "
)

EXIT_CHOICE = 8


def _error_text(exc: LibraryError) -> str:
    if isinstance(exc, BookUnavailableError):
        return str(exc)
    return f"Error: {exc}"


def run_menu(library: LibrarySystem, stdin: TextIO, stdout: TextIO) -> None:
    """Serve menu choices read from ``stdin`` until exit or end of input."""

    def ask(prompt: str) -> str:
        stdout.write(prompt)
        line = stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def say(text: str) -> None:
        print(text, file=stdout)

    def add_book() -> None:
        book_id = ask("Enter Book ID: ")
        title = ask("Enter Title: ")
        author = ask("Enter Author: ")
        library.add_book(book_id, title, author)
        say("Book added successfully.")

    def register_user() -> None:
        user_id = ask("Enter User ID: ")
        name = ask("Enter User Name: ")
        library.register_user(user_id, name)
        say("User registered successfully.")

    def borrow_book() -> None:
        user_id = ask("Enter User ID: ")
        book_id = ask("Enter Book ID: ")
        due = library.borrow_book(user_id, book_id)
        say(f"Book borrowed successfully. Due date: {format_date(due)}")

    def return_book() -> None:
        user_id = ask("Enter User ID: ")
        book_id = ask("Enter Book ID: ")
        fine = library.return_book(user_id, book_id)
        say("Book returned successfully.")
        if fine > 0:
            say(f"A fine of Rs. {fine} has been charged for the overdue return.")

    def user_fine() -> None:
        user_id = ask("Enter User ID to calculate fine: ")
        fine = library.user_fine(user_id)
        say(f"Total outstanding fine for user {user_id} is Rs. {fine}")

    def list_books() -> None:
        say("\n--- All Books ---")
        books = library.list_books()
        if not books:
            say("No books in the library.")
        for book in books:
            say(book.describe())

    def list_users() -> None:
        say("\n--- All Users ---")
        users = library.list_users()
        if not users:
            say("No users registered in the system.")
        for user in users:
            say(user.describe())
            say("---------------------")

    actions: dict[int, Callable[[], None]] = {
        1: add_book,
        2: register_user,
        3: borrow_book,
        4: return_book,
        5: user_fine,
        6: list_books,
        7: list_users,
    }

    while True:
        stdout.write(MENU)
        line = stdin.readline()
        if not line:
            break
        try:
            choice = int(line.strip())
        except ValueError:
            choice = None
        if choice == EXIT_CHOICE:
            break
        action = actions.get(choice) if choice is not None else None
        if action is None:
            say("Invalid choice. Please try again.")
            continue
        try:
            action()
        except EOFError:
            break
        except LibraryError as exc:
            say(_error_text(exc))


def main(argv: list[str] | None = None) -> int:
    """Load the data files, run the menu, then save the data back."""
    parser = argparse.ArgumentParser(description="Library management system.")
    parser.add_argument("--books", default="data/books.txt", help="book data file")
    parser.add_argument("--users", default="data/users.txt", help="user data file")
    args = parser.parse_args(argv)

    library = LibrarySystem()
    library.load_books(args.books)
    library.load_users(args.users)

    run_menu(library, sys.stdin, sys.stdout)

    library.save_books(args.books)
    library.save_users(args.users)
    print("Data saved. Exiting system. Goodbye! 👋")
    return 0


if __name__ == "__main__":
    sys.exit(main())