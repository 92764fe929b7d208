import unittest

from microchess.core import Color, Piece, PieceKind, Position
from microchess.fen import STARTPOS_FEN, parse_fen, position_to_fen


class TestFEN(unittest.TestCase):
    def test_startpos_matches_fresh_game(self):
        self.assertEqual(position_to_fen(Position()), STARTPOS_FEN)
        self.assertEqual(parse_fen(STARTPOS_FEN).board, Position().board)

    def test_roundtrip(self):
        for fen in (STARTPOS_FEN, "rkr1/1Q2/P3/4/K3 b", "4/k1P1/4/4/K3 w"):
            with self.subTest(fen=fen):
                self.assertEqual(position_to_fen(parse_fen(fen)), fen)

    def test_placement_and_side(self):
        pos = parse_fen("k3/4/1Q2/4/3K b")
        self.assertIs(pos.side_to_move, Color.BLACK)
        self.assertEqual(pos.piece_at(2, 1), Piece(PieceKind.QUEEN, Color.WHITE))
        self.assertEqual(pos.piece_at(4, 0), Piece(PieceKind.KING, Color.BLACK))

    def test_kingless_board_allowed(self):
        pos = parse_fen("4/4/2q1/4/4 w")
        self.assertIsNone(pos.board.find_king(Color.WHITE))

    def test_fen_invalid_cases(self):
        fen_invalid_cases = (
            "rnbk/1p2/4/1P2/RNBK",  # missing side to move
            "rnbk/1p2/4/1P2/RNBK w extra",  # too many fields
            "rnbk/1p2/4/RNBK w",  # four ranks
            "rnbk/1p2/4/1P2/RNBK/4 w",  # six ranks
            "rnbkr/1p2/4/1P2/RNBK w",  # five files
            "rnb/1p2/4/1P2/RNBK w",  # three files
            "5/1p2/4/1P2/RNBK w",  # run too long
            "rnbk/1p2/0/1P2/RNBK w",  # zero run
            "rnbk/1x2/4/1P2/RNBK w",  # unknown piece
            "rnbk/1p2/4/1P2/RNKK w",  # two white kings
            "rnbk/1p2/4/1P2/RNBK x",  # bad side to move
        )
        for fen in fen_invalid_cases:
            with self.subTest(fen=fen):
                with self.assertRaises(ValueError):
                    parse_fen(fen)


if __name__ == "__main__":
    unittest.main()
