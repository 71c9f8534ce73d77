"""Data models supporting the wordsmith board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Union

from .constants import EMPTY_CHAR, STAR_CHAR, CellKind, Direction, SquareCategory
from .exceptions import InvalidWordError


class Coordinate(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Cell:
    """A single board slot: empty, the center anchor, or a placed letter."""

    kind: CellKind = CellKind.EMPTY
    letter: Optional[str] = None

    @classmethod
    def empty(cls) -> "Cell":
        return cls(CellKind.EMPTY)

    @classmethod
    def anchor(cls) -> "Cell":
        return cls(CellKind.ANCHOR)

    @classmethod
    def of(cls, letter: str) -> "Cell":
        if len(letter) != 1:
            raise InvalidWordError(f"Cell letter must be a single character, got {letter!r}")
        return cls(CellKind.LETTER, letter)

    def is_empty(self) -> bool:
        return self.kind == CellKind.EMPTY

    def is_anchor(self) -> bool:
        return self.kind == CellKind.ANCHOR

    def is_letter(self) -> bool:
        return self.kind == CellKind.LETTER

    def accepts(self, letter: str) -> bool:
        """Whether ``letter`` may be written here without a conflict."""

        if self.kind == CellKind.LETTER:
            return self.letter == letter
        return True

    @property
    def symbol(self) -> str:
        if self.kind == CellKind.LETTER:
            return self.letter or "?"
        if self.kind == CellKind.ANCHOR:
            return STAR_CHAR
        return EMPTY_CHAR


def parse_direction(value: Union[Direction, str]) -> Direction:
    if isinstance(value, Direction):
        return value
    key = str(value).strip().upper()
    aliases = {"H": Direction.HORIZONTAL, "V": Direction.VERTICAL}
    if key in aliases:
        return aliases[key]
    try:
        return Direction(key)
    except ValueError:
        raise InvalidWordError(f"Unknown direction: {value!r}") from None


@dataclass(frozen=True)
class PlacementRequest:
    """A word to lay along one axis from a start coordinate."""

    word: str
    start_row: int
    start_col: int
    direction: Direction

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", parse_direction(self.direction))
        if not isinstance(self.word, str) or not self.word:
            raise InvalidWordError("Cannot place an empty word")
        for value in (self.start_row, self.start_col):
            # bool is an int subclass but never a coordinate
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidWordError(f"Coordinates must be integers, got {value!r}")

    @property
    def start(self) -> Coordinate:
        return Coordinate(self.start_row, self.start_col)

    @property
    def end(self) -> Coordinate:
        return self.cells[-1]

    @property
    def cells(self) -> List[Coordinate]:
        dr, dc = self.direction.step
        return [
            Coordinate(self.start_row + dr * i, self.start_col + dc * i)
            for i in range(len(self.word))
        ]


@dataclass(frozen=True)
class BoardSquare:
    """Snapshot entry handed to the renderer."""

    coord: Coordinate
    cell: Cell
    category: SquareCategory

    @property
    def row(self) -> int:
        return self.coord.row

    @property
    def col(self) -> int:
        return self.coord.col
