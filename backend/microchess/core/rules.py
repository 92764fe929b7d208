"""Filters run over pseudo-legal moves, in order, by :class:`~microchess.core.game.Position`.

A rule may drop moves or rewrite them; it never adds new destinations.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Iterable, Iterator, List, Protocol

from .moves import PROMOTION_KINDS, Move, promotion_rank
from .types import Color, PieceKind

if TYPE_CHECKING:
    from .game import Position


class Rule(Protocol):
    def apply(self, position: "Position", color: Color, moves: Iterable[Move]) -> Iterable[Move]:
        ...


class PromotionRule:
    """Tag pawn moves onto the far rank with a promotion piece (Queen by default).

    Moves that already name a piece are left alone, so generation yields a
    single move per far-rank push rather than one per promotion kind.
    """

    def __init__(self, kind: PieceKind = PieceKind.QUEEN) -> None:
        if kind not in PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {kind.name}")
        self.kind = kind

    def apply(self, position: "Position", color: Color, moves: Iterable[Move]) -> Iterator[Move]:
        far = promotion_rank(color)
        board = position.board
        for m in moves:
            if m.promotion is None and m.to_sq.rank == far:
                piece = board.piece_at(m.from_sq)
                if piece is not None and piece.kind is PieceKind.PAWN:
                    yield replace(m, promotion=self.kind)
                    continue
            yield m


class KingSafetyRule:
    """Drop moves that leave ``color``'s own king attacked.

    Simulates each relocation on the live board and restores it, so the
    position must not be read concurrently while the filter runs.
    """

    def apply(self, position: "Position", color: Color, moves: Iterable[Move]) -> Iterator[Move]:
        return (m for m in moves if position.is_king_safe_after(m.from_sq, m.to_sq, color))


def default_rules() -> List[Rule]:
    return [PromotionRule(), KingSafetyRule()]
