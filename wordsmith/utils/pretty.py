"""Pretty-print helpers for the wordsmith board."""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from ..core.constants import COLS, SquareCategory
from ..core.models import BoardSquare

if TYPE_CHECKING:
    from ..engine.board import Board


# See https://gist.github.com/fnky/458719343aabd01cfb17a3a4f7296797
RESET = "\x1b[39m\x1b[49m"
CATEGORY_COLORS: Dict[SquareCategory, str] = {
    SquareCategory.TRIPLE_WORD: "\x1b[48;5;161m\x1b[38;5;16m",
    SquareCategory.DOUBLE_WORD: "\x1b[48;5;217m\x1b[38;5;16m",
    SquareCategory.TRIPLE_LETTER: "\x1b[48;5;32m\x1b[38;5;16m",
    SquareCategory.DOUBLE_LETTER: "\x1b[45;5;51m\x1b[38;5;16m",
    SquareCategory.CENTER: "\x1b[48;5;226m\x1b[38;5;16m",
}
LEGEND_LABELS: Dict[SquareCategory, str] = {
    SquareCategory.TRIPLE_WORD: "TW",
    SquareCategory.DOUBLE_WORD: "DW",
    SquareCategory.TRIPLE_LETTER: "TL",
    SquareCategory.DOUBLE_LETTER: "DL",
    SquareCategory.CENTER: "**",
}

# "| X " row label, two columns per cell, closing "|"
FRAME_WIDTH = 4 + 2 * COLS + 1


@dataclass
class RenderConfig:
    """Options for the terminal rendering."""

    color: bool = True
    center: bool = True
    title: str = "WORDSMITH"
    terminal_width: Optional[int] = None

    def resolve_width(self) -> int:
        if self.terminal_width is not None:
            return self.terminal_width
        return shutil.get_terminal_size(fallback=(80, 24)).columns


def paint(text: str, category: SquareCategory, config: RenderConfig) -> str:
    color = CATEGORY_COLORS.get(category)
    if not config.color or color is None:
        return text
    return f"{color}{text}{RESET}"


def format_board(squares: Sequence[BoardSquare], config: Optional[RenderConfig] = None) -> str:
    config = config or RenderConfig()
    rule = "-" * FRAME_WIDTH
    lines: List[str] = [rule, "|" + config.title.center(FRAME_WIDTH - 2) + "|", rule]
    lines.append("|   " + "".join(f"{c:X} " for c in range(COLS)) + "|")

    row_cells: List[str] = []
    for square in squares:
        if square.col == 0:
            row_cells = [f"| {square.row:X} "]
        row_cells.append(paint(square.cell.symbol, square.category, config) + " ")
        if square.col == COLS - 1:
            lines.append("".join(row_cells) + "|")
    lines.append(rule)

    if config.center:
        pad = " " * max(0, (config.resolve_width() - FRAME_WIDTH) // 2)
        lines = [pad + line for line in lines]
    return "\n".join(lines)


def legend(config: Optional[RenderConfig] = None) -> str:
    config = config or RenderConfig()
    parts = [
        f"{paint(label, category, config)} {category.value.replace('_', ' ').lower()}"
        for category, label in LEGEND_LABELS.items()
    ]
    return "  ".join(parts)


def pretty_print_board(
    board: Board,
    config: Optional[RenderConfig] = None,
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the board snapshot in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board.snapshot(), config), file=stream)
