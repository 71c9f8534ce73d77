"""Premium square lookup."""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Tuple

from ..core.constants import (
    CENTER_SQUARE,
    DOUBLE_LETTER_SQUARES,
    DOUBLE_WORD_SQUARES,
    TRIPLE_LETTER_SQUARES,
    TRIPLE_WORD_SQUARES,
    SquareCategory,
)
from .coords import check_bounds


# Checked in order; the first matching set wins.
PRECEDENCE: Tuple[Tuple[SquareCategory, FrozenSet[Tuple[int, int]]], ...] = (
    (SquareCategory.TRIPLE_WORD, TRIPLE_WORD_SQUARES),
    (SquareCategory.DOUBLE_WORD, DOUBLE_WORD_SQUARES),
    (SquareCategory.TRIPLE_LETTER, TRIPLE_LETTER_SQUARES),
    (SquareCategory.DOUBLE_LETTER, DOUBLE_LETTER_SQUARES),
    (SquareCategory.CENTER, frozenset({CENTER_SQUARE})),
)


def square_category(row: int, col: int) -> SquareCategory:
    """Classify ``(row, col)`` against the fixed premium layout."""

    check_bounds(row, col)
    coord = (row, col)
    for category, squares in PRECEDENCE:
        if coord in squares:
            return category
    return SquareCategory.NONE


def squares_by_category() -> Dict[SquareCategory, List[Tuple[int, int]]]:
    """Return the sorted coordinates of every premium category."""

    return {category: sorted(squares) for category, squares in PRECEDENCE}
