"""CLI entrypoint for the wordsmith board."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from wordsmith.core.exceptions import InvalidWordError, WordsmithError
from wordsmith.core.models import PlacementRequest
from wordsmith.engine.board import Board
from wordsmith.utils.logger import configure_logging, get_logger
from wordsmith.utils.pretty import RenderConfig, format_board, legend


LOGGER = get_logger("wordsmith.cli")

DEFAULT_PLACEMENT = PlacementRequest("hello", 0x7, 0x7, "HORIZONTAL")


def parse_placement(spec: str) -> PlacementRequest:
    """Parse ``WORD:ROW:COL:DIR``. Row and col may be decimal or ``0x`` hex."""

    parts = spec.split(":")
    if len(parts) != 4:
        raise ValueError(f"expected WORD:ROW:COL:DIR, got {spec!r}")
    word, row, col, direction = parts
    try:
        start_row = int(row, 0)
        start_col = int(col, 0)
    except ValueError:
        raise ValueError(f"row and column must be integers in {spec!r}") from None
    try:
        return PlacementRequest(word, start_row, start_col, direction)
    except InvalidWordError as exc:
        raise ValueError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place words on a 15x15 board and render it",
    )
    parser.add_argument(
        "--place",
        action="append",
        metavar="WORD:ROW:COL:DIR",
        help="Word placement; DIR is h/v or horizontal/vertical (repeatable)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument("--no-center", action="store_true", help="Do not center the board in the terminal")
    parser.add_argument("--legend", action="store_true", help="Print a premium square legend")
    parser.add_argument("--json", action="store_true", help="Emit the board as JSON instead of rendering it")
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    placements: List[PlacementRequest] = []
    for spec in args.place or []:
        try:
            placements.append(parse_placement(spec))
        except ValueError as exc:
            parser.error(f"--place: {exc}")
    if not placements:
        placements = [DEFAULT_PLACEMENT]

    board = Board()
    failures = 0
    for request in placements:
        try:
            board.place(request)
        except WordsmithError as exc:
            failures += 1
            LOGGER.error("Skipping %r: %s", request.word, exc)

    if args.json:
        output_text = json.dumps(board.to_jsonable(), indent=2)
    else:
        config = RenderConfig(
            color=not args.no_color and not args.output,
            center=not args.no_center,
        )
        output_text = format_board(board.snapshot(), config)
        if args.legend:
            output_text += "\n" + legend(config)

    if args.output:
        args.output.write_text(output_text + "\n", encoding="utf-8")
    else:
        print(output_text)
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
