from __future__ import annotations

from typing import Tuple

from .board import Board
from .piece import Piece
from .types import FILE_NAMES, FILES, RANKS, Color, PieceKind, Square

_W = Color.WHITE
_B = Color.BLACK

INITIAL_POSITION: Tuple[Tuple[Square, Piece], ...] = (
    # White
    (Square(0, 0), Piece(PieceKind.ROOK, _W)),
    (Square(0, 1), Piece(PieceKind.KNIGHT, _W)),
    (Square(0, 2), Piece(PieceKind.BISHOP, _W)),
    (Square(0, 3), Piece(PieceKind.KING, _W)),
    (Square(1, 1), Piece(PieceKind.PAWN, _W)),
    # Black
    (Square(4, 0), Piece(PieceKind.ROOK, _B)),
    (Square(4, 1), Piece(PieceKind.KNIGHT, _B)),
    (Square(4, 2), Piece(PieceKind.BISHOP, _B)),
    (Square(4, 3), Piece(PieceKind.KING, _B)),
    (Square(3, 1), Piece(PieceKind.PAWN, _B)),
)


def standard_board() -> Board:
    return Board.from_pieces(INITIAL_POSITION)


def ascii_board(board: Board) -> str:
    rows = []
    for r in range(RANKS - 1, -1, -1):
        row = []
        for f in range(FILES):
            p = board.piece_at(Square(r, f))
            row.append(p.symbol if p else ".")
        rows.append(f"{r + 1} " + " ".join(row))
    rows.append("  " + " ".join(FILE_NAMES))
    return "\n".join(rows)
