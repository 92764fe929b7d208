import unittest

from microchess.core import Board, Color, Piece, PieceKind, Square, standard_board
from microchess.evaluate import (
    PIECE_VALUES, count_material, evaluate_center_control, evaluate_king_safety,
    evaluate_pawn_structure, evaluate_position,
)


W, B = Color.WHITE, Color.BLACK


def _board(*placements):
    return Board.from_pieces((Square(r, f), Piece(kind, color)) for r, f, kind, color in placements)


class TestMaterial(unittest.TestCase):
    def test_piece_values(self):
        self.assertEqual(PIECE_VALUES[PieceKind.QUEEN], 9)
        self.assertEqual(PIECE_VALUES[PieceKind.ROOK], 5)
        self.assertEqual(PIECE_VALUES[PieceKind.BISHOP], 3)
        self.assertEqual(PIECE_VALUES[PieceKind.KNIGHT], 3)
        self.assertEqual(PIECE_VALUES[PieceKind.PAWN], 1)
        self.assertEqual(PIECE_VALUES[PieceKind.KING], 20000)

    def test_empty_board(self):
        self.assertEqual(count_material(Board(), W), 0)
        self.assertEqual(count_material(Board(), B), 0)

    def test_king_carries_no_material(self):
        self.assertEqual(count_material(_board((0, 0, PieceKind.KING, W)), W), 0)

    def test_sums_one_side_only(self):
        b = _board(
            (0, 0, PieceKind.KING, W), (0, 1, PieceKind.ROOK, W), (1, 1, PieceKind.PAWN, W),
            (4, 0, PieceKind.QUEEN, B), (4, 1, PieceKind.KNIGHT, B),
        )
        self.assertEqual(count_material(b, W), 6)
        self.assertEqual(count_material(b, B), 12)


class TestPositionalTerms(unittest.TestCase):
    def test_pawn_advancement(self):
        b = _board((3, 1, PieceKind.PAWN, W), (1, 2, PieceKind.PAWN, B))
        self.assertAlmostEqual(evaluate_pawn_structure(b, W), 0.2)
        self.assertAlmostEqual(evaluate_pawn_structure(b, B), 0.2)

    def test_pawns_on_start_ranks_score_nothing(self):
        b = standard_board()
        self.assertEqual(evaluate_pawn_structure(b, W), 0)
        self.assertEqual(evaluate_pawn_structure(b, B), 0)

    def test_central_king_is_penalized(self):
        self.assertEqual(evaluate_king_safety(_board((2, 2, PieceKind.KING, W)), W), -0.5)
        self.assertEqual(evaluate_king_safety(_board((1, 1, PieceKind.KING, B)), B), -0.5)

    def test_corner_king_is_safe(self):
        self.assertEqual(evaluate_king_safety(_board((0, 0, PieceKind.KING, W)), W), 0)
        self.assertEqual(evaluate_king_safety(Board(), W), 0)

    def test_center_control(self):
        self.assertAlmostEqual(evaluate_center_control(_board((2, 1, PieceKind.KNIGHT, W)), W), 0.1)
        self.assertEqual(evaluate_center_control(_board((0, 0, PieceKind.KNIGHT, W)), W), 0)
        self.assertEqual(evaluate_center_control(_board((0, 1, PieceKind.KNIGHT, W)), W), 0)


class TestEvaluatePosition(unittest.TestCase):
    def test_empty_board_is_zero(self):
        self.assertEqual(evaluate_position(Board(), W), 0)
        self.assertEqual(evaluate_position(Board(), B), 0)

    def test_queen_beats_rook_and_pawn(self):
        queen = _board((2, 1, PieceKind.QUEEN, W))
        rook_pawn = _board((2, 1, PieceKind.ROOK, W), (2, 2, PieceKind.PAWN, W))
        self.assertAlmostEqual(evaluate_position(queen, W), 9.1)
        self.assertAlmostEqual(evaluate_position(rook_pawn, W), 6.3)
        self.assertGreater(evaluate_position(queen, W), evaluate_position(rook_pawn, W))

    def test_start_position(self):
        # material, pawns and king safety cancel; only the b2/b4 pawn sits near the center
        self.assertAlmostEqual(evaluate_position(standard_board(), W), 0.1)
        self.assertAlmostEqual(evaluate_position(standard_board(), B), 0.1)

    def test_center_control_is_not_subtracted(self):
        b = _board((0, 0, PieceKind.KING, W), (2, 1, PieceKind.ROOK, B), (4, 3, PieceKind.KING, B))
        self.assertAlmostEqual(evaluate_position(b, W), -5.0)
        self.assertAlmostEqual(evaluate_position(b, B), 5.1)


if __name__ == "__main__":
    unittest.main()
