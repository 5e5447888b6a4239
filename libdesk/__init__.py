"""A lending-library desk: books, members, loans and overdue fines."""

__version__ = "0.1.0"