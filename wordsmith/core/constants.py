"""Shared constants and enumerations for the wordsmith board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


ROWS = 15
COLS = 15
BOARD_SIZE = ROWS * COLS

CENTER_SQUARE: Tuple[int, int] = (0x7, 0x7)

EMPTY_CHAR = "_"
STAR_CHAR = "*"


class Direction(str, Enum):
    """Axes a word can be laid along."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.HORIZONTAL else (1, 0)


class CellKind(str, Enum):
    """Tag of a board cell."""

    EMPTY = "EMPTY"
    ANCHOR = "ANCHOR"
    LETTER = "LETTER"


class SquareCategory(str, Enum):
    """Premium classification of a board coordinate."""

    TRIPLE_WORD = "TRIPLE_WORD"
    DOUBLE_WORD = "DOUBLE_WORD"
    TRIPLE_LETTER = "TRIPLE_LETTER"
    DOUBLE_LETTER = "DOUBLE_LETTER"
    CENTER = "CENTER"
    NONE = "NONE"


# Premium positions, (row, col).
TRIPLE_WORD_SQUARES: FrozenSet[Tuple[int, int]] = frozenset(
    {
        (0x0, 0x0), (0x0, 0x7), (0x0, 0xE),
        (0x7, 0x0), (0x7, 0xE),
        (0xE, 0x0), (0xE, 0x7), (0xE, 0xE),
    }
)

DOUBLE_WORD_SQUARES: FrozenSet[Tuple[int, int]] = frozenset(
    {
        (0x1, 0x1), (0x1, 0xD),
        (0x2, 0x2), (0x2, 0xC),
        (0x3, 0x3), (0x3, 0xB),
        (0x4, 0x4), (0x4, 0xA),
        (0xA, 0x4), (0xA, 0xA),
        (0xB, 0x3), (0xB, 0xB),
        (0xC, 0x2), (0xC, 0xC),
        (0xD, 0x1), (0xD, 0xD),
    }
)

TRIPLE_LETTER_SQUARES: FrozenSet[Tuple[int, int]] = frozenset(
    {
        (0x1, 0x5), (0x1, 0x9),
        (0x5, 0x1), (0x5, 0x5), (0x5, 0x9), (0x5, 0xD),
        (0x9, 0x1), (0x9, 0x5), (0x9, 0x9), (0x9, 0xD),
        (0xE, 0x5), (0xE, 0x9),
    }
)

DOUBLE_LETTER_SQUARES: FrozenSet[Tuple[int, int]] = frozenset(
    {
        (0x0, 0x3), (0x0, 0xB),
        (0x2, 0x6), (0x2, 0x8),
        (0x3, 0x0), (0x3, 0x7), (0x3, 0xE),
        (0x6, 0x2), (0x6, 0x6), (0x6, 0x8), (0x6, 0xC),
        (0x7, 0x3), (0x7, 0xB),
        (0x8, 0x2), (0x8, 0x6), (0x8, 0x8), (0x8, 0xC),
        (0xB, 0x0), (0xB, 0x7), (0xB, 0xE),
        (0xC, 0x6), (0xC, 0x8),
        (0xE, 0x3), (0xE, 0xB),
    }
)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


BOARD_BOUNDS = Bounds(rows=ROWS, cols=COLS)
