from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .core import Move, PieceKind, Position, parse_square

_PROMO_CHARS = {"q": PieceKind.QUEEN, "r": PieceKind.ROOK, "b": PieceKind.BISHOP, "n": PieceKind.KNIGHT}


def move_to_uci(m: Move) -> str:
    return str(m)


def parse_uci(text: str) -> Move:
    """Parse coordinate notation such as ``b2b3`` or ``c4c5q`` (no legality check)."""
    s = text.strip().lower()
    if len(s) not in (4, 5):
        raise ValueError(f"Bad move text: {text!r}")
    promo = None
    if len(s) == 5:
        promo = _PROMO_CHARS.get(s[4])
        if promo is None:
            raise ValueError(f"Bad promotion piece: {s[4]!r}")
    return Move(parse_square(s[:2]), parse_square(s[2:4]), promo)


def uci_to_legal_move(position: Position, text: str) -> Optional[Move]:
    """Match text against the side to move's legal moves.

    A far-rank pawn push without a suffix means Queen; an explicit suffix picks
    the promotion piece. Unparseable text returns None.
    """
    try:
        wanted = parse_uci(text)
    except ValueError:
        return None
    for m in position.legal_moves():
        if (m.from_sq, m.to_sq) != (wanted.from_sq, wanted.to_sq):
            continue
        if m.promotion is None:
            return m if wanted.promotion is None else None
        return m if wanted.promotion is None else replace(m, promotion=wanted.promotion)
    return None
