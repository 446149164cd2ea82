"""Attack relation and value semantics of queen positions."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from saqueens.position import Position


class PositionTests(unittest.TestCase):

    def test_attacks_on_diagonals(self):
        self.assertTrue(Position(1, 1).can_attack(Position(2, 2)))
        self.assertTrue(Position(1, 2).can_attack(Position(2, 3)))
        self.assertTrue(Position(5, 5).can_attack(Position(4, 4)))
        self.assertTrue(Position(3, 2).can_attack(Position(2, 1)))
        self.assertTrue(Position(1, 4).can_attack(Position(4, 1)))
        self.assertTrue(Position(101, 102).can_attack(Position(102, 103)))

    def test_attacks_on_row_and_column(self):
        self.assertTrue(Position(1, 1).can_attack(Position(5, 1)))
        self.assertTrue(Position(1, 1).can_attack(Position(1, 5)))

    def test_no_attack_off_lines(self):
        self.assertFalse(Position(1, 1).can_attack(Position(2, 3)))
        self.assertFalse(Position(4, 1).can_attack(Position(6, 2)))

    def test_never_attacks_itself(self):
        for x in range(1, 6):
            for y in range(1, 6):
                self.assertFalse(Position(x, y).can_attack(Position(x, y)))

    def test_attack_is_symmetric(self):
        squares = [Position(x, y) for x in range(1, 6) for y in range(1, 6)]
        for p in squares:
            for q in squares:
                self.assertEqual(p.can_attack(q), q.can_attack(p), f"{p} vs {q}")

    def test_value_equality_and_hashing(self):
        self.assertEqual(Position(3, 4), Position(3, 4))
        self.assertNotEqual(Position(3, 4), Position(4, 3))
        self.assertEqual(len({Position(3, 4), Position(3, 4)}), 1)
        with self.assertRaises(AttributeError):
            Position(1, 1).x = 2  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
