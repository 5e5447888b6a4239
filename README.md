# libdesk

A small lending-library desk for the terminal and for Python code. It keeps a
catalogue of books and a register of members, lends books out for 14 days and
charges a fine of 2 per day for every day a book is returned late.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The interactive desk

```
libdesk
```

The command opens a numbered menu:

1. Add a new book
2. Register a new user
3. Borrow a book
4. Return a book
5. Calculate user fine
6. List all books
7. List all users
8. Exit

Any other input prints `Invalid choice. Please try again.` The menu ends on
choice 8 or at the end of input.

On start the command reads `data/books.txt` and `data/users.txt` from the
current directory; a file that cannot be opened is skipped. On exit it writes
both files back, creating the `data` directory if needed. Other files can be
named with options:

```
libdesk --books shelf.txt --users members.txt
```

### File formats

`books.txt` holds four lines per book: the ID, the title, the author, and
`1` if the book is on the shelf or `0` if it is lent out.

`users.txt` holds, per member, the ID, the name, the number of books on loan,
and then two lines per loan: the book ID and the due date as `DD/MM/YYYY`.

A file that is cut short, or holds a bad flag, count or date, makes loading
raise `ValueError`. Books and users are written in order of their IDs.

## Using it from Python

```python
from datetime import date

from libdesk.library import BookUnavailableError, LibrarySystem

library = LibrarySystem()
library.add_book("B1", "A Field Guide to Mosses", "J. Smith")
library.register_user("U1", "Ada")

library.borrow_book("U1", "B1", date(2024, 3, 1))   # returns date(2024, 3, 15)

try:
    library.borrow_book("U1", "B1", date(2024, 3, 2))
except BookUnavailableError:
    print("already lent out")

print(library.user_fine("U1", date(2024, 3, 20)))   # 5 days late -> 10
library.return_book("U1", "B1", date(2024, 3, 20))  # returns the fine, 10

library.save_books("books.txt")
library.save_users("users.txt")
```

The date argument of `borrow_book`, `return_book` and `user_fine` may be left
out; today's date is then used. `list_books()` and `list_users()` return the
`Book` and `User` records ordered by ID, and each record's `describe()` gives
its text listing.

Failures raise exceptions derived from `LibraryError`: `DuplicateIdError` for
an ID that is already taken, `NotFoundError` for an unknown user or book,
`BookUnavailableError` for a book that is lent out, and `NotBorrowedError`
when a member returns a book they do not hold.

The `libdesk.dates` module holds the date helpers the desk uses:
`today`, `parse_date`, `format_date`, `add_days` and `days_between`.

## What it does not do

Data is kept only in the two plain text files; there is no database, no
search, no loan renewal and no record of fines once a book has been returned.