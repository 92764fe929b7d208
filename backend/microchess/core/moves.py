from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .piece import Piece
from .types import RANKS, Color, PieceKind, Square, check_square, sq_name

PROMOTION_KINDS = (PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT)


def promotion_rank(color: Color) -> int:
    return RANKS - 1 if color is Color.WHITE else 0


@dataclass(frozen=True)
class Move:
    from_sq: Square
    to_sq: Square
    promotion: Optional[PieceKind] = None

    @classmethod
    def from_coords(
        cls,
        from_rank: object,
        from_file: object,
        to_rank: object,
        to_file: object,
        promotion: Optional[PieceKind] = None,
    ) -> "Move":
        return cls(check_square(from_rank, from_file), check_square(to_rank, to_file), promotion)

    def __str__(self) -> str:
        promo = self.promotion.value.lower() if self.promotion is not None else ""
        return f"{sq_name(self.from_sq)}{sq_name(self.to_sq)}{promo}"


@dataclass(frozen=True)
class MoveRecord:
    """Everything needed to reverse a move: both cells' previous contents."""

    move: Move
    piece: Piece
    captured: Optional[Piece] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
