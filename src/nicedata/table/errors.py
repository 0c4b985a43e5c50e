"""Hard errors raised by Table.add_column.

These are contract violations by the caller; every other lookup on a table
is a soft absence that returns None.
"""

from __future__ import annotations


class ColumnExistsError(ValueError):
    """Raised when adding a column whose key is already present."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"column already exists: {key!r}")


class ColumnLengthError(ValueError):
    """Raised when adding a column whose length differs from the table length."""

    def __init__(self, key: str, expected: int, actual: int) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected column {key!r} of length {expected}, "
            f"got column of length {actual} instead"
        )
