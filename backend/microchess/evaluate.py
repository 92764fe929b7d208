from __future__ import annotations

from typing import Dict

from .core import Board, Color, PieceKind

PIECE_VALUES: Dict[PieceKind, int] = {
    PieceKind.KING: 20000,
    PieceKind.QUEEN: 9,
    PieceKind.ROOK: 5,
    PieceKind.BISHOP: 3,
    PieceKind.KNIGHT: 3,
    PieceKind.PAWN: 1,
}

PAWN_START_RANK = {Color.WHITE: 1, Color.BLACK: 3}
PAWN_ADVANCE_BONUS = 0.1
KING_EXPOSED_PENALTY = -0.5
CENTER_BONUS = 0.1
CENTER = (2.0, 1.5)


def _center_distance(rank: int, file: int) -> float:
    return abs(rank - CENTER[0]) + abs(file - CENTER[1])


def count_material(board: Board, color: Color) -> int:
    """Material for one side. The king carries no material weight."""
    total = 0
    for _, p in board.pieces_of(color):
        if p.kind is not PieceKind.KING:
            total += PIECE_VALUES[p.kind]
    return total


def evaluate_pawn_structure(board: Board, color: Color) -> float:
    score = 0.0
    start = PAWN_START_RANK[color]
    for s, p in board.pieces_of(color):
        if p.kind is PieceKind.PAWN:
            advancement = (s.rank - start) * color.forward
            if advancement > 0:
                score += advancement * PAWN_ADVANCE_BONUS
    return score


def evaluate_king_safety(board: Board, color: Color) -> float:
    king_sq = board.find_king(color)
    if king_sq is None:
        return 0.0
    if _center_distance(king_sq.rank, king_sq.file) < 2:
        return KING_EXPOSED_PENALTY
    return 0.0


def evaluate_center_control(board: Board, color: Color) -> float:
    score = 0.0
    for s, _ in board.pieces_of(color):
        if _center_distance(s.rank, s.file) <= 2:
            score += CENTER_BONUS
    return score


def evaluate_position(board: Board, color: Color) -> float:
    """Score ``board`` for ``color``; positive favours ``color``.

    Only the side's own center control is added. The opponent's is not
    subtracted, so the score is not antisymmetric between colors.
    """
    opp = color.opponent()
    material = count_material(board, color) - count_material(board, opp)
    pawns = evaluate_pawn_structure(board, color) - evaluate_pawn_structure(board, opp)
    king_safety = evaluate_king_safety(board, color) - evaluate_king_safety(board, opp)
    return material + pawns + king_safety + evaluate_center_control(board, color)
