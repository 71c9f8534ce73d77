"""Wordsmith: a 15x15 word-placement board with premium squares.

This package exposes the public API surface via:

- ``wordsmith.engine.board.Board``: owns the cells and places words atomically.
- ``wordsmith.engine.coords``: flat index <-> (row, col) conversions.
- ``wordsmith.utils.pretty``: terminal rendering of a board snapshot.
"""

from .core.constants import Direction, SquareCategory
from .core.exceptions import (
    ConflictingLetterError,
    InvalidWordError,
    OutOfBoundsError,
    WordsmithError,
)
from .engine.board import Board

__all__ = [
    "Board",
    "Direction",
    "SquareCategory",
    "WordsmithError",
    "OutOfBoundsError",
    "ConflictingLetterError",
    "InvalidWordError",
]

__version__ = "0.1.0"
