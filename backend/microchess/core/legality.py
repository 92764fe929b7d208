"""Pseudo-legal move geometry for each piece kind.

Nothing here knows about check; see :mod:`microchess.core.rules` for the
king-safety filter built on top of it.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .board import Board
from .types import ALL_SQUARES, Color, PieceKind, Square, in_bounds

ShapeRule = Callable[[Board, Square, Square, Color], bool]


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """True if every cell strictly between two collinear squares is empty."""
    dr = _sign(to_sq.rank - from_sq.rank)
    df = _sign(to_sq.file - from_sq.file)
    r, f = from_sq.rank + dr, from_sq.file + df
    while (r, f) != (to_sq.rank, to_sq.file):
        if board.piece_at(Square(r, f)) is not None:
            return False
        r += dr
        f += df
    return True


def _rook(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    if from_sq.rank != to_sq.rank and from_sq.file != to_sq.file:
        return False
    return is_path_clear(board, from_sq, to_sq)


def _bishop(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    if abs(to_sq.rank - from_sq.rank) != abs(to_sq.file - from_sq.file):
        return False
    return is_path_clear(board, from_sq, to_sq)


def _queen(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    return _rook(board, from_sq, to_sq, color) or _bishop(board, from_sq, to_sq, color)


def _knight(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    deltas = {abs(to_sq.rank - from_sq.rank), abs(to_sq.file - from_sq.file)}
    return deltas == {1, 2}


def _king(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    return abs(to_sq.rank - from_sq.rank) <= 1 and abs(to_sq.file - from_sq.file) <= 1


def _pawn(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    if to_sq.rank - from_sq.rank != color.forward:
        return False
    df = abs(to_sq.file - from_sq.file)
    target = board.piece_at(to_sq)
    if df == 0:
        return target is None
    if df == 1:
        return target is not None and target.color is not color
    return False


_SHAPE_RULES: Dict[PieceKind, ShapeRule] = {
    PieceKind.KING: _king,
    PieceKind.QUEEN: _queen,
    PieceKind.ROOK: _rook,
    PieceKind.BISHOP: _bishop,
    PieceKind.KNIGHT: _knight,
    PieceKind.PAWN: _pawn,
}

_missing = set(PieceKind) - set(_SHAPE_RULES)
if _missing:
    raise RuntimeError(f"No movement rule for: {sorted(k.name for k in _missing)}")


def is_pseudo_legal_move(
    board: Board, from_sq: Square, to_sq: Square, kind: PieceKind, color: Color
) -> bool:
    if not in_bounds(to_sq.rank, to_sq.file):
        return False
    if from_sq == to_sq:
        return False
    target = board.piece_at(to_sq)
    if target is not None and target.color is color:
        return False
    return _SHAPE_RULES[kind](board, from_sq, to_sq, color)


def possible_moves(board: Board, from_sq: Square, kind: PieceKind, color: Color) -> List[Square]:
    """Every destination the piece could reach ignoring check, in rank-major order."""
    return [to for to in ALL_SQUARES if is_pseudo_legal_move(board, from_sq, to, kind, color)]
