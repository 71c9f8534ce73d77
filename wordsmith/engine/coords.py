"""Conversions between flat row-major indices and (row, col) coordinates.

Everything here is pure: no module state is touched, so the helpers can be
called from any thread without locking.
"""

from __future__ import annotations

from ..core.constants import BOARD_BOUNDS, Bounds
from ..core.exceptions import OutOfBoundsError
from ..core.models import Coordinate


def in_bounds(row: int, col: int, bounds: Bounds = BOARD_BOUNDS) -> bool:
    return bounds.contains(row, col)


def check_bounds(row: int, col: int, bounds: Bounds = BOARD_BOUNDS) -> None:
    """Raise :class:`OutOfBoundsError` unless ``0 <= row < rows`` and ``0 <= col < cols``."""

    if not bounds.contains(row, col):
        raise OutOfBoundsError(row, col, bounds.rows, bounds.cols)


def check_index(index: int, bounds: Bounds = BOARD_BOUNDS) -> None:
    if not 0 <= index < bounds.size:
        raise OutOfBoundsError.for_index(index, bounds.rows, bounds.cols)


def index_to_coord(index: int, bounds: Bounds = BOARD_BOUNDS) -> Coordinate:
    check_index(index, bounds)
    return Coordinate(index // bounds.cols, index % bounds.cols)


def coord_to_index(row: int, col: int, bounds: Bounds = BOARD_BOUNDS) -> int:
    check_bounds(row, col, bounds)
    return row * bounds.cols + col
