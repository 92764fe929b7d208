from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional, Sequence

from .board import Board
from .legality import is_pseudo_legal_move, possible_moves
from .moves import PROMOTION_KINDS, Move, MoveRecord, promotion_rank
from .piece import Piece
from .rules import Rule, default_rules
from .setup import standard_board
from .status import GameStatus
from .types import Color, InvalidSquareError, PieceKind, Square, check_square

LOGGER = logging.getLogger("microchess.core.game")


def _as_square(obj: object) -> Square:
    try:
        rank, file = obj  # type: ignore[misc]
    except (TypeError, ValueError):
        raise InvalidSquareError(f"Bad square: {obj!r}") from None
    return check_square(rank, file)


class Position:
    """Board, side to move and move history for one game of microchess.

    The status is derived on every read from the current position, except that
    a resignation sticks until :meth:`reset`.
    """

    def __init__(self, board: Optional[Board] = None, side_to_move: Color = Color.WHITE) -> None:
        self._board = board.copy() if board is not None else standard_board()
        self.side_to_move: Color = side_to_move
        self._history: List[MoveRecord] = []
        self._resigned: Optional[Color] = None

        self.rules: List[Rule] = default_rules()

    # --- queries ---
    @property
    def board(self) -> Board:
        return self._board

    @property
    def history(self) -> List[MoveRecord]:
        return list(self._history)

    @property
    def last_move(self) -> Optional[Move]:
        return self._history[-1].move if self._history else None

    @property
    def ply(self) -> int:
        return len(self._history)

    @property
    def resigned_by(self) -> Optional[Color]:
        return self._resigned

    def piece_at(self, rank: object, file: object) -> Optional[Piece]:
        return self._board.piece_at(check_square(rank, file))

    def copy(self) -> "Position":
        clone = Position(self._board, self.side_to_move)
        clone._history = list(self._history)
        clone._resigned = self._resigned
        clone.rules = list(self.rules)
        return clone

    # --- move generation ---
    def pseudo_legal_moves_from(self, from_sq: Square) -> Iterator[Move]:
        piece = self._board.piece_at(from_sq)
        if piece is None:
            return
        for to_sq in possible_moves(self._board, from_sq, piece.kind, piece.color):
            yield Move(from_sq, to_sq)

    def pseudo_legal_moves(self, color: Color) -> Iterator[Move]:
        for s, _ in self._board.pieces_of(color):
            yield from self.pseudo_legal_moves_from(s)

    def apply_rules(self, color: Color, moves: Iterable[Move]) -> Iterable[Move]:
        out: Iterable[Move] = moves
        for rule in self.rules:
            out = rule.apply(self, color, out)
        return out

    def legal_moves(self, color: Optional[Color] = None) -> List[Move]:
        color = self.side_to_move if color is None else color
        return list(self.apply_rules(color, self.pseudo_legal_moves(color)))

    def valid_moves_for_piece(self, rank: object, file: object) -> List[Move]:
        s = check_square(rank, file)
        piece = self._board.piece_at(s)
        if piece is None or piece.color is not self.side_to_move:
            return []
        return list(self.apply_rules(piece.color, self.pseudo_legal_moves_from(s)))

    # --- check detection ---
    def is_king_in_check(self, color: Color) -> bool:
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        for s, p in self._board.pieces_of(color.opponent()):
            if is_pseudo_legal_move(self._board, s, king_sq, p.kind, p.color):
                return True
        return False

    def is_king_safe_after(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        """Simulate relocating the piece on ``from_sq`` and test ``color``'s king."""
        board = self._board
        moved = board.piece_at(from_sq)
        captured = board.piece_at(to_sq)
        board.set_piece(to_sq, moved)
        board.set_piece(from_sq, None)
        safe = not self.is_king_in_check(color)
        board.set_piece(from_sq, moved)
        board.set_piece(to_sq, captured)
        return safe

    def has_legal_moves(self, color: Color) -> bool:
        for s, p in self._board.pieces_of(color):
            for to_sq in possible_moves(self._board, s, p.kind, p.color):
                if self.is_king_safe_after(s, to_sq, color):
                    return True
        return False

    def is_checkmate(self, color: Color) -> bool:
        return self.is_king_in_check(color) and not self.has_legal_moves(color)

    def is_stalemate(self, color: Color) -> bool:
        return not self.is_king_in_check(color) and not self.has_legal_moves(color)

    def checked_king_square(self) -> Optional[Square]:
        if not self.is_king_in_check(self.side_to_move):
            return None
        return self._board.find_king(self.side_to_move)

    @property
    def status(self) -> GameStatus:
        if self._resigned is not None:
            return GameStatus.RESIGNED
        color = self.side_to_move
        if self.has_legal_moves(color):
            return GameStatus.PLAYING
        if self.is_king_in_check(color):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE

    # --- trusted make/unmake, used by search and perft ---
    def push(self, move: Move) -> MoveRecord:
        board = self._board
        piece = board.piece_at(move.from_sq)
        if piece is None:
            raise ValueError("No piece on from-square")
        captured = board.piece_at(move.to_sq)
        placed = piece if move.promotion is None else Piece(move.promotion, piece.color)
        board.set_piece(move.to_sq, placed)
        board.set_piece(move.from_sq, None)

        record = MoveRecord(move=move, piece=piece, captured=captured)
        self._history.append(record)
        self.side_to_move = self.side_to_move.opponent()
        return record

    def pop(self) -> MoveRecord:
        if not self._history:
            raise ValueError("No moves to undo")
        record = self._history.pop()
        self._board.set_piece(record.move.from_sq, record.piece)
        self._board.set_piece(record.move.to_sq, record.captured)
        self.side_to_move = self.side_to_move.opponent()
        return record

    # --- checked mutation surface ---
    def _coerce_move(self, args: Sequence[object], promotion: Optional[PieceKind]) -> Move:
        if len(args) == 1 and isinstance(args[0], Move):
            m = args[0]
            move = Move(_as_square(m.from_sq), _as_square(m.to_sq), m.promotion)
        elif len(args) == 2:
            move = Move(_as_square(args[0]), _as_square(args[1]))
        elif len(args) == 4:
            move = Move.from_coords(*args)
        else:
            raise TypeError("execute_move expects a Move, two squares, or four coordinates")
        if promotion is not None:
            move = replace(move, promotion=promotion)
        return move

    def _reject(self, move: Move, reason: str) -> bool:
        LOGGER.debug("move_rejected", extra={"move": str(move), "reason": reason})
        return False

    def execute_move(self, *args: object, promotion: Optional[PieceKind] = None) -> bool:
        """Play a move if it is legal for the side to move.

        Accepts a :class:`Move`, two ``(rank, file)`` squares, or four flat
        coordinates. Malformed coordinates raise :class:`InvalidSquareError`;
        an illegal move returns False and leaves the position untouched.
        """
        move = self._coerce_move(args, promotion)

        if self._resigned is not None:
            return self._reject(move, "game_resigned")
        piece = self._board.piece_at(move.from_sq)
        if piece is None:
            return self._reject(move, "no_piece")
        if piece.color is not self.side_to_move:
            return self._reject(move, "wrong_side")
        if not is_pseudo_legal_move(self._board, move.from_sq, move.to_sq, piece.kind, piece.color):
            return self._reject(move, "not_pseudo_legal")

        if piece.kind is PieceKind.PAWN and move.to_sq.rank == promotion_rank(piece.color):
            if move.promotion is None:
                move = replace(move, promotion=PieceKind.QUEEN)
            elif move.promotion not in PROMOTION_KINDS:
                return self._reject(move, "bad_promotion")
        elif move.promotion is not None:
            return self._reject(move, "bad_promotion")

        if not self.is_king_safe_after(move.from_sq, move.to_sq, piece.color):
            return self._reject(move, "self_check")

        self.push(move)
        return True

    def undo_last_move(self) -> bool:
        """Take back the last move. Refused (False) with no history or after a resignation."""
        if not self._history or self._resigned is not None:
            return False
        self.pop()
        return True

    def resign(self, color: Optional[Color] = None) -> bool:
        if not self.status.can_transition_to(GameStatus.RESIGNED):
            return False
        self._resigned = self.side_to_move if color is None else color
        return True

    def reset(self) -> None:
        self._board = standard_board()
        self.side_to_move = Color.WHITE
        self._history = []
        self._resigned = None
