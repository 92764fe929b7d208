from __future__ import annotations

from .core import Board, Color, Piece, PieceKind, Position, Square, FILES, RANKS

STARTPOS_FEN = "rnbk/1p2/4/1P2/RNBK w"


def parse_fen(fen: str) -> Position:
    """Parse a 5x4 placement plus side to move into a Position.

    Boards without kings are accepted (handy for evaluation tests); more than
    one king per side is not.
    """
    parts = fen.strip().split()
    if len(parts) != 2:
        raise ValueError("FEN must have 2 fields: placement and side to move")

    placement, stm = parts

    ranks = placement.split("/")
    if len(ranks) != RANKS:
        raise ValueError(f"FEN placement must have {RANKS} ranks")

    board = Board()
    kings = {Color.WHITE: 0, Color.BLACK: 0}

    for rank_idx, row in enumerate(ranks):
        r = RANKS - 1 - rank_idx
        f = 0
        for ch in row:
            if ch.isdigit():
                gap = int(ch)
                if gap < 1 or gap > FILES:
                    raise ValueError("Bad empty-square run in FEN")
                f += gap
                if f > FILES:
                    raise ValueError("Bad rank width in FEN")
                continue
            if f >= FILES:
                raise ValueError("Bad rank width in FEN")
            piece = Piece.from_symbol(ch)
            board.add_piece(Square(r, f), piece)
            if piece.kind is PieceKind.KING:
                kings[piece.color] += 1
            f += 1
        if f != FILES:
            raise ValueError("Bad rank width in FEN")

    if kings[Color.WHITE] > 1 or kings[Color.BLACK] > 1:
        raise ValueError("FEN must contain at most one king per side")

    if stm == "w":
        side = Color.WHITE
    elif stm == "b":
        side = Color.BLACK
    else:
        raise ValueError("Bad side-to-move in FEN")

    return Position(board, side)


def position_to_fen(position: Position) -> str:
    rows = []
    for r in range(RANKS - 1, -1, -1):
        empty = 0
        row = []
        for f in range(FILES):
            p = position.board.piece_at(Square(r, f))
            if p is None:
                empty += 1
                continue
            if empty:
                row.append(str(empty))
                empty = 0
            row.append(p.symbol)
        if empty:
            row.append(str(empty))
        rows.append("".join(row))
    stm = "w" if position.side_to_move is Color.WHITE else "b"
    return f"{'/'.join(rows)} {stm}"
