import io
import sys

from libdesk.cli import main, run_menu
from libdesk.library import LibrarySystem


def run(library, text):
    out = io.StringIO()
    run_menu(library, io.StringIO(text), out)
    return out.getvalue()


def test_add_and_list_book():
    lib = LibrarySystem()
    output = run(lib, "1\nB1\nDune\nHerbert\n6\n8\n")
    assert "Book added successfully." in output
    assert "ID: B1 | Title: Dune | Author: Herbert | Available: Yes" in output
    assert lib.books["B1"].author == "Herbert"


def test_duplicate_book_reports_error():
    lib = LibrarySystem()
    lib.add_book("B1", "Dune", "Herbert")
    output = run(lib, "1\nB1\nOther\nSomeone\n8\n")
    assert "Error: Book with this ID already exists." in output


def test_invalid_choice():
    output = run(LibrarySystem(), "9\nabc\n8\n")
    assert output.count("Invalid choice. Please try again.") == 2


def test_end_of_input_stops_menu():
    output = run(LibrarySystem(), "")
    assert output.startswith("\n--- Library Management System ---")


def test_return_book():
    lib = LibrarySystem()
    lib.add_book("B1", "Dune", "Herbert")
    lib.register_user("U1", "Alice")
    output = run(lib, "3\nU1\nB1\n4\nU1\nB1\n8\n")
    assert "Book returned successfully." in output
    assert "A fine of" not in output
    assert lib.books["B1"].available is True


def test_fine_for_user_without_loans():
    lib = LibrarySystem()
    lib.register_user("U1", "Alice")
    output = run(lib, "5\nU1\n8\n")
    assert "Total outstanding fine for user U1 is Rs. 0" in output


def test_fine_for_unknown_user():
    output = run(LibrarySystem(), "5\nU1\n8\n")
    assert "Error: User not found." in output


def test_list_empty_library():
    output = run(LibrarySystem(), "6\n7\n8\n")
    assert "No books in the library." in output
    assert "No users registered in the system." in output


def test_list_users_shows_separator():
    lib = LibrarySystem()
    lib.register_user("U1", "Alice")
    output = run(lib, "7\n8\n")
    assert "User ID: U1 | Name: Alice\nBorrowed Books:\n  None\n---------------------" in output


def test_main_saves_data(tmp_path, monkeypatch, capsys):
    books = tmp_path / "books.txt"
    users = tmp_path / "users.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\nU1\nAlice\n8\n"))
    assert main(["--books", str(books), "--users", str(users)]) == 0
    assert users.read_text(encoding="utf-8") == "U1\nAlice\n0\n"
    assert books.read_text(encoding="utf-8") == ""
    assert "Data saved. Exiting system. Goodbye!" in capsys.readouterr().out