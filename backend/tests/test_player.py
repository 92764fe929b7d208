import unittest

from microchess.config import EngineConfig
from microchess.core import Color, Move, Position, Square
from microchess.fen import parse_fen, position_to_fen
from microchess.player import AIPlayer


HANGING_QUEEN = "3k/4/2q1/1P2/K3 w"


class TestAIPlayer(unittest.TestCase):
    def test_defaults_come_from_config(self):
        p = AIPlayer(Color.BLACK, config=EngineConfig(depth=4, hint_depth=1))
        self.assertEqual(p.depth, 4)
        self.assertEqual(p.hint_depth, 1)
        self.assertEqual(AIPlayer(Color.WHITE).depth, 3)

    def test_rejects_bad_color(self):
        with self.assertRaises(ValueError):
            AIPlayer("white")
        p = AIPlayer(Color.WHITE)
        with self.assertRaises(ValueError):
            p.set_color(1)
        p.set_color(Color.BLACK)
        self.assertIs(p.color, Color.BLACK)

    def test_rejects_bad_depth(self):
        for bad in (0, 7, -1, 2.5, True):
            with self.subTest(depth=bad):
                with self.assertRaises(ValueError):
                    AIPlayer(Color.WHITE, depth=bad)
        p = AIPlayer(Color.WHITE)
        with self.assertRaises(ValueError):
            p.set_depth(10)
        p.set_depth(1)
        self.assertEqual(p.depth, 1)

    def test_waits_for_its_turn(self):
        self.assertIsNone(AIPlayer(Color.BLACK, depth=1).get_move(Position()))

    def test_get_move(self):
        pos = parse_fen(HANGING_QUEEN)
        self.assertEqual(AIPlayer(Color.WHITE, depth=1).get_move(pos), Move(Square(1, 1), Square(2, 2)))

    def test_hint_leaves_live_position_alone(self):
        pos = parse_fen(HANGING_QUEEN)
        before = position_to_fen(pos)
        hint = AIPlayer(Color.BLACK).get_hint(pos)
        self.assertEqual(hint, Move(Square(1, 1), Square(2, 2)))
        self.assertEqual(position_to_fen(pos), before)
        self.assertEqual(pos.ply, 0)


if __name__ == "__main__":
    unittest.main()
