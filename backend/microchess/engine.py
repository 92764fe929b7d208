from __future__ import annotations

import logging
from typing import List, Optional

from .core import Move, Position
from .evaluate import PIECE_VALUES, evaluate_position

LOGGER = logging.getLogger("microchess.engine")

MATE_SCORE = 50_000
INF = float("inf")


def capture_value(position: Position, move: Move) -> int:
    cap = position.board.piece_at(move.to_sq)
    return 0 if cap is None else PIECE_VALUES[cap.kind]


def order_moves(position: Position, moves: List[Move]) -> List[Move]:
    """Captures first, most valuable victim first; quiet moves keep their order."""
    def key(m: Move):
        v = capture_value(position, m)
        return (0, -v) if v else (1, 0)
    return sorted(moves, key=key)


class Engine:
    """Fixed-depth minimax with alpha-beta pruning.

    Notes:
    - Searches by pushing and popping moves on the given position, so one
      Position must not be searched from two threads at once.
    - No transposition table, no iterative deepening, no clock.
    """

    def __init__(self) -> None:
        self.nodes = 0

    def reset(self) -> None:
        self.nodes = 0

    def _terminal_score(self, position: Position, depth: int, maximizing: bool) -> float:
        if not position.is_king_in_check(position.side_to_move):
            return 0
        # the side to move is mated; a bigger remaining depth means a quicker mate
        score = MATE_SCORE + max(depth, 0)
        return -score if maximizing else score

    def minimax(self, position: Position, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        self.nodes += 1
        mover = position.side_to_move

        if depth <= 0:
            if not position.has_legal_moves(mover):
                return self._terminal_score(position, depth, maximizing)
            perspective = mover if maximizing else mover.opponent()
            return evaluate_position(position.board, perspective)

        moves = position.legal_moves(mover)
        if not moves:
            return self._terminal_score(position, depth, maximizing)

        if maximizing:
            best = -INF
            for m in order_moves(position, moves):
                position.push(m)
                val = self.minimax(position, depth - 1, alpha, beta, False)
                position.pop()
                if val > best:
                    best = val
                if best > alpha:
                    alpha = best
                if beta <= alpha:
                    break
            return best

        best = INF
        for m in order_moves(position, moves):
            position.push(m)
            val = self.minimax(position, depth - 1, alpha, beta, True)
            position.pop()
            if val < best:
                best = val
            if best < beta:
                beta = best
            if beta <= alpha:
                break
        return best

    def best_move(self, position: Position, depth: int = 3) -> Optional[Move]:
        moves = position.legal_moves()
        if not moves:
            LOGGER.debug("search_no_moves", extra={"side": position.side_to_move.name})
            return None

        start_ply = position.ply
        self.nodes = 0
        best: Optional[Move] = None
        best_val = -INF
        alpha = -INF

        for m in order_moves(position, moves):
            position.push(m)
            val = self.minimax(position, depth - 1, alpha, INF, False)
            position.pop()

            if val > best_val:
                best_val = val
                best = m
            alpha = max(alpha, val)

        if position.ply != start_ply:
            raise RuntimeError("Search left the position with unbalanced moves")

        LOGGER.debug(
            "search_complete",
            extra={"depth": depth, "nodes": self.nodes, "best": str(best), "score": best_val},
        )
        return best


def minimax(position: Position, depth: int, alpha: float = -INF, beta: float = INF, maximizing: bool = True) -> float:
    return Engine().minimax(position, depth, alpha, beta, maximizing)


def get_best_move(position: Position, depth: int) -> Optional[Move]:
    return Engine().best_move(position, depth)
