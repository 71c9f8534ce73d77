import io
import unittest
from unittest.mock import patch

from wordsmith.core.constants import Direction, SquareCategory
from wordsmith.engine.board import Board
from wordsmith.utils.pretty import (
    CATEGORY_COLORS,
    FRAME_WIDTH,
    RESET,
    RenderConfig,
    format_board,
    legend,
    pretty_print_board,
)


PLAIN = RenderConfig(color=False, center=False)


class FormatBoardTests(unittest.TestCase):
    def test_plain_layout(self) -> None:
        lines = format_board(Board().snapshot(), PLAIN).splitlines()
        self.assertEqual(FRAME_WIDTH, 35)
        self.assertEqual(lines[0], "-" * 35)
        self.assertEqual(lines[1], "|            WORDSMITH            |")
        self.assertEqual(lines[3], "|   0 1 2 3 4 5 6 7 8 9 A B C D E |")
        self.assertEqual(lines[4 + 7], "| 7 _ _ _ _ _ _ _ * _ _ _ _ _ _ _ |")
        self.assertEqual(lines[4 + 14][:4], "| E ")
        self.assertEqual(lines[-1], "-" * 35)
        self.assertEqual(len(lines), 4 + 15 + 1)
        self.assertTrue(all(len(line) == 35 for line in lines))

    def test_letters_are_rendered(self) -> None:
        board = Board()
        board.place_word("hello", 7, 7, Direction.HORIZONTAL)
        lines = format_board(board.snapshot(), PLAIN).splitlines()
        self.assertEqual(lines[4 + 7], "| 7 _ _ _ _ _ _ _ h e l l o _ _ _ |")

    def test_colors_wrap_premium_cells(self) -> None:
        text = format_board(Board().snapshot(), RenderConfig(color=True, center=False))
        center = CATEGORY_COLORS[SquareCategory.CENTER] + "*" + RESET
        triple_word = CATEGORY_COLORS[SquareCategory.TRIPLE_WORD] + "_" + RESET
        self.assertIn(center, text)
        self.assertEqual(text.count(triple_word), 8)
        self.assertNotIn("\x1b", format_board(Board().snapshot(), PLAIN))

    def test_center_pads_to_terminal_width(self) -> None:
        config = RenderConfig(color=False, center=True, terminal_width=75)
        lines = format_board(Board().snapshot(), config).splitlines()
        self.assertTrue(all(line.startswith(" " * 20 + "|") or line.startswith(" " * 20 + "-") for line in lines))

    def test_narrow_terminal_is_not_padded(self) -> None:
        config = RenderConfig(color=False, center=True, terminal_width=10)
        lines = format_board(Board().snapshot(), config).splitlines()
        self.assertEqual(lines[0], "-" * 35)

    def test_width_falls_back_to_terminal_size(self) -> None:
        with patch("wordsmith.utils.pretty.shutil.get_terminal_size") as fake:
            fake.return_value.columns = 45
            self.assertEqual(RenderConfig().resolve_width(), 45)

    def test_legend_names_every_category(self) -> None:
        text = legend(RenderConfig(color=False))
        for name in ("triple word", "double word", "triple letter", "double letter", "center"):
            self.assertIn(name, text)

    def test_pretty_print_writes_to_stream(self) -> None:
        stream = io.StringIO()
        pretty_print_board(Board(), PLAIN, label="Board", stream=stream)
        output = stream.getvalue()
        self.assertTrue(output.startswith("Board\n"))
        self.assertIn("WORDSMITH", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
