"""The book record held by the library."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Book:
    """A catalogued book and whether it is on the shelf."""

    book_id: str
    title: str
    author: str
    available: bool = True

    def describe(self) -> str:
        """Return the one-line listing for this book."""
        return (
            f"ID: {self.book_id} | Title: {self.title} | Author: {self.author}"
            f" | Available: {'Yes' if self.available else 'No'}"
        )