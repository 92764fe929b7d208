"""Move-generator counting.

``perft`` counts leaf moves; ``perft_stats`` also classifies them, which is
how promotion and mate detection on the small board get checked against
hand-counted positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator

from .core import Move, Position
from .notation import move_to_uci


@dataclass
class PerftStats:
    nodes: int = 0
    captures: int = 0
    promotions: int = 0
    checks: int = 0
    checkmates: int = 0


def _last_ply_moves(position: Position, depth: int) -> Iterator[Move]:
    # While a move is being consumed the position sits at that move's parent.
    moves = position.legal_moves()
    if depth == 1:
        yield from moves
        return
    for m in moves:
        position.push(m)
        try:
            yield from _last_ply_moves(position, depth - 1)
        finally:
            position.pop()


def perft(position: Position, depth: int) -> int:
    if depth <= 0:
        return 1
    return sum(1 for _ in _last_ply_moves(position, depth))


def perft_stats(position: Position, depth: int) -> PerftStats:
    """Count and classify the moves played at ply ``depth``.

    Checks and checkmates are judged after the move, against the side that
    has to reply.
    """
    stats = PerftStats()
    if depth <= 0:
        stats.nodes = 1
        return stats
    board = position.board
    for m in _last_ply_moves(position, depth):
        stats.nodes += 1
        if board.piece_at(m.to_sq) is not None:
            stats.captures += 1
        if m.promotion is not None:
            stats.promotions += 1
        position.push(m)
        defender = position.side_to_move
        if position.is_king_in_check(defender):
            stats.checks += 1
            if not position.has_legal_moves(defender):
                stats.checkmates += 1
        position.pop()
    return stats


def perft_divide(position: Position, depth: int) -> Dict[str, int]:
    """Leaf count below each root move, keyed by coordinate notation."""
    out: Dict[str, int] = {}
    for m in position.legal_moves():
        position.push(m)
        try:
            out[move_to_uci(m)] = perft(position, depth - 1)
        finally:
            position.pop()
    return out
