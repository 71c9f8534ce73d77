"""Custom exception hierarchy for board operations."""

from __future__ import annotations

from typing import Optional, Tuple


class WordsmithError(Exception):
    """Base exception for board failures."""


class OutOfBoundsError(WordsmithError):
    """Raised when a coordinate or flat index falls outside the board."""

    def __init__(
        self,
        row: Optional[int] = None,
        col: Optional[int] = None,
        rows: int = 0,
        cols: int = 0,
        *,
        index: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        self.index = index
        if message is None:
            if index is not None:
                message = f"Index {index} is out of bounds [0, {rows * cols})"
            else:
                message = f"({row}, {col}) is out of bounds ({rows}, {cols})"
        super().__init__(message)

    @classmethod
    def for_index(cls, index: int, rows: int, cols: int) -> "OutOfBoundsError":
        return cls(rows=rows, cols=cols, index=index)

    @property
    def coord(self) -> Optional[Tuple[int, int]]:
        if self.row is None or self.col is None:
            return None
        return (self.row, self.col)


class ConflictingLetterError(WordsmithError):
    """Raised when a word would overwrite a different, already placed letter."""

    def __init__(self, existing: str, requested: str, word: str, row: int, col: int) -> None:
        self.existing = existing
        self.requested = requested
        self.word = word
        self.row = row
        self.col = col
        super().__init__(
            f"Cannot place {word!r}: ({row}, {col}) holds {existing!r}, "
            f"word needs {requested!r}"
        )


class InvalidWordError(WordsmithError):
    """Raised when a placement request is malformed (empty word, unknown direction)."""
