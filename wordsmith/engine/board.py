"""Board representation and word placement."""

from __future__ import annotations

from typing import List, Union

from ..core.constants import BOARD_BOUNDS, CENTER_SQUARE, CellKind, Direction
from ..core.exceptions import ConflictingLetterError, WordsmithError
from ..core.models import BoardSquare, Cell, PlacementRequest
from ..utils.logger import get_logger
from .coords import check_bounds, check_index, coord_to_index, index_to_coord
from .squares import square_category


LOGGER = get_logger(__name__)


class Board:
    """Fixed 15x15 board with atomic word placement.

    Not thread-safe. Callers sharing one board across threads must serialize
    :meth:`place_word` calls, since validation and commit have to run as one
    unit.
    """

    def __init__(self) -> None:
        self.bounds = BOARD_BOUNDS
        self._cells: List[Cell] = [Cell.empty()] * self.bounds.size
        self._cells[coord_to_index(*CENTER_SQUARE)] = Cell.anchor()

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(
        self,
        word: str,
        start_row: int,
        start_col: int,
        direction: Union[Direction, str],
    ) -> PlacementRequest:
        """Lay ``word`` from ``(start_row, start_col)`` along ``direction``.

        Either every cell of the run is written or the board is left as it
        was. Raises :class:`OutOfBoundsError` if the start or the last letter
        falls off the board, :class:`ConflictingLetterError` if a cell already
        holds a different letter and :class:`InvalidWordError` for an empty
        word, an unknown direction or non-integer coordinates.
        """

        request = PlacementRequest(word, start_row, start_col, direction)
        return self.place(request)

    def place(self, request: PlacementRequest) -> PlacementRequest:
        try:
            self._validate(request)
        except WordsmithError as exc:
            LOGGER.debug("Rejected %r at %s %s: %s", request.word, request.start,
                         request.direction.value, exc)
            raise

        # All checks passed, mutate board
        for letter, (row, col) in zip(request.word, request.cells):
            self._cells[coord_to_index(row, col)] = Cell.of(letter)

        LOGGER.debug("Placed %r from %s to %s", request.word, request.start, request.end)
        return request

    def can_place(
        self,
        word: str,
        start_row: int,
        start_col: int,
        direction: Union[Direction, str],
    ) -> bool:
        try:
            self._validate(PlacementRequest(word, start_row, start_col, direction))
        except WordsmithError:
            return False
        return True

    def _validate(self, request: PlacementRequest) -> None:
        check_bounds(request.start_row, request.start_col, self.bounds)
        check_bounds(request.end.row, request.end.col, self.bounds)
        for letter, (row, col) in zip(request.word, request.cells):
            cell = self._cells[coord_to_index(row, col)]
            if not cell.accepts(letter):
                raise ConflictingLetterError(cell.symbol, letter, request.word, row, col)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def read_cell(self, row: int, col: int) -> Cell:
        return self._cells[coord_to_index(row, col, self.bounds)]

    def read_index(self, index: int) -> Cell:
        check_index(index, self.bounds)
        return self._cells[index]

    @property
    def letter_count(self) -> int:
        return sum(1 for cell in self._cells if cell.kind == CellKind.LETTER)

    def rows(self) -> List[List[Cell]]:
        cols = self.bounds.cols
        return [self._cells[r * cols:(r + 1) * cols] for r in range(self.bounds.rows)]

    def snapshot(self) -> List[BoardSquare]:
        """Every cell in row-major order with its premium category."""

        squares: List[BoardSquare] = []
        for index, cell in enumerate(self._cells):
            coord = index_to_coord(index, self.bounds)
            squares.append(BoardSquare(coord, cell, square_category(*coord)))
        return squares

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        serialized: List[List[dict]] = [[] for _ in range(self.bounds.rows)]
        for square in self.snapshot():
            serialized[square.row].append(
                {
                    "symbol": square.cell.symbol,
                    "kind": square.cell.kind.value,
                    "category": square.category.value,
                }
            )
        return serialized
