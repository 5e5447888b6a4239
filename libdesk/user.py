"""Library members and the books they hold."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from libdesk.dates import days_between, format_date


@dataclass
class User:
    """A registered member; ``borrowed`` maps book ids to due dates."""

    user_id: str
    name: str
    borrowed: dict[str, date] = field(default_factory=dict)

    def borrow_book(self, book_id: str, due_date: date) -> None:
        """Record that the member holds ``book_id`` until ``due_date``."""
        self.borrowed[book_id] = due_date

    def return_book(self, book_id: str) -> None:
        """Forget the loan of ``book_id``; unknown ids are ignored."""
        self.borrowed.pop(book_id, None)

    def describe(self) -> str:
        """Return the multi-line listing for this member."""
        lines = [f"User ID: {self.user_id} | Name: {self.name}", "Borrowed Books:"]
        if not self.borrowed:
            lines.append("  None")
        else:
            lines.extend(
                f"  Book ID: {book_id}, Due Date: {format_date(due)}"
                for book_id, due in sorted(self.borrowed.items())
            )
        return "\n".join(lines)

    def calculate_fine(self, current_date: date, fine_per_day: int) -> int:
        """Return the total fine owed for loans overdue on ``current_date``."""
        return sum(
            days_between(due, current_date) * fine_per_day
            for due in self.borrowed.values()
            if due < current_date
        )