from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core import Color, Move, PieceKind, Position, Square, check_square, parse_square, sq_name
from ..fen import position_to_fen


_PIECE_NAME_TO_KIND: Dict[str, PieceKind] = {
    "Queen": PieceKind.QUEEN,
    "Rook": PieceKind.ROOK,
    "Bishop": PieceKind.BISHOP,
    "Knight": PieceKind.KNIGHT,
}


def _color_to_str(c: Color) -> str:
    return "WHITE" if c is Color.WHITE else "BLACK"


def _square_to_dict(s: Square) -> Dict[str, Any]:
    return {"rank": s.rank, "file": s.file, "alg": sq_name(s)}


def move_to_dict(m: Move) -> Dict[str, Any]:
    return {
        "from": _square_to_dict(m.from_sq),
        "to": _square_to_dict(m.to_sq),
        "from_alg": sq_name(m.from_sq),
        "to_alg": sq_name(m.to_sq),
        "promote_to": m.promotion.name.capitalize() if m.promotion is not None else None,
    }


def dict_to_move(d: Dict[str, Any]) -> Move:
    def get_sq(key: str, key_alg: str) -> Square:
        if key in d:
            raw = d[key]
            if isinstance(raw, dict):
                return check_square(raw.get("rank"), raw.get("file"))
            raise ValueError(f"Bad square for {key!r}: {raw!r}")
        if key_alg in d:
            return parse_square(str(d[key_alg]))
        raise ValueError(f"Missing square: {key}/{key_alg}")

    fr = get_sq("from", "from_alg")
    to = get_sq("to", "to_alg")

    promo: Optional[PieceKind] = None
    name = d.get("promote_to")
    if name is not None:
        promo = _PIECE_NAME_TO_KIND.get(str(name).capitalize())
        if promo is None:
            raise ValueError(f"Bad promotion piece: {name!r}")
    return Move(fr, to, promo)


def snapshot(position: Position) -> Dict[str, Any]:
    """JSON-friendly snapshot of the current game."""

    pieces: List[Dict[str, Any]] = []
    for s, p in position.board.iter_pieces():
        pieces.append(
            {
                "color": _color_to_str(p.color),
                "type": p.kind.name.capitalize(),
                "square": _square_to_dict(s),
                "symbol": p.symbol,
            }
        )

    last = position.last_move
    checked = position.checked_king_square()
    return {
        "side_to_move": _color_to_str(position.side_to_move),
        "status": position.status.value,
        "pieces": pieces,
        "last_move": move_to_dict(last) if last is not None else None,
        "check": checked is not None,
        "checked_king": _square_to_dict(checked) if checked is not None else None,
        "ply": position.ply,
        "fen": position_to_fen(position),
    }
