"""Text rendering and the exhaustive solution checks."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from saqueens.board import Board
from saqueens.position import Position
from saqueens.rendering import render_board
from saqueens.utils import board_to_rows, conflicts, is_valid_solution


def board_from_rows(rows):
    board = Board(len(rows))
    for x, y in enumerate(rows, start=1):
        board.add(Position(x, y))
    return board


class RenderingTests(unittest.TestCase):

    def test_render_four_queens(self):
        board = board_from_rows([2, 4, 1, 3])
        expected = (
            "  4321\n"
            "1 +Q++\n"
            "2 +++Q\n"
            "3 Q+++\n"
            "4 ++Q+\n"
        )
        self.assertEqual(render_board(board), expected)

    def test_render_empty_board(self):
        self.assertEqual(render_board(Board(2)), "  21\n1 ++\n2 ++\n")


class UtilsTests(unittest.TestCase):

    def test_board_to_rows(self):
        self.assertEqual(board_to_rows(board_from_rows([2, 4, 1, 3])), [2, 4, 1, 3])
        board = Board(3)
        board.add(Position(2, 3))
        self.assertEqual(board_to_rows(board), [0, 3, 0])

    def test_conflicts(self):
        self.assertEqual(conflicts([2, 4, 1, 3]), 0)
        self.assertEqual(conflicts([1, 1, 1]), 3)
        self.assertEqual(conflicts([1, 2, 3, 4]), 6)
        self.assertEqual(conflicts([0, 3, 0]), 0)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution(board_from_rows([2, 4, 1, 3])))
        self.assertTrue(is_valid_solution(board_from_rows([1])))
        self.assertFalse(is_valid_solution(board_from_rows([1, 2])))
        self.assertFalse(is_valid_solution(board_from_rows([2, 4, 1, 1])))

    def test_incomplete_board_is_not_a_solution(self):
        board = Board(4)
        board.add(Position(1, 2))
        board.add(Position(2, 4))
        self.assertTrue(board.is_correct())
        self.assertFalse(is_valid_solution(board))

    def test_two_queens_in_one_column_are_rejected(self):
        board = Board(4)
        for x, y in [(1, 1), (1, 3), (3, 2), (4, 4)]:
            board.add(Position(x, y))
        self.assertFalse(is_valid_solution(board))


if __name__ == "__main__":
    unittest.main()
