from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .piece import Piece
from .types import ALL_SQUARES, FILES, RANKS, Color, PieceKind, Square, sq_name

Cell = Optional[Piece]


class Board:
    """Fixed 5x4 grid of optional pieces, indexed ``[rank][file]``.

    Accessors trust their squares; coordinate validation belongs to
    :class:`~microchess.core.game.Position`.
    """

    __slots__ = ("_cells",)

    def __init__(self, rows: Optional[Sequence[Sequence[Cell]]] = None) -> None:
        if rows is None:
            self._cells: List[List[Cell]] = [[None] * FILES for _ in range(RANKS)]
            return
        if len(rows) != RANKS or any(len(row) != FILES for row in rows):
            raise ValueError(f"Board must be {RANKS} ranks of {FILES} files")
        self._cells = [list(row) for row in rows]

    @classmethod
    def from_pieces(cls, placements: Iterable[Tuple[Square, Piece]]) -> "Board":
        board = cls()
        for s, p in placements:
            board.add_piece(s, p)
        return board

    def copy(self) -> "Board":
        return Board(self._cells)

    def piece_at(self, s: Square) -> Cell:
        return self._cells[s.rank][s.file]

    def set_piece(self, s: Square, p: Cell) -> None:
        self._cells[s.rank][s.file] = p

    def add_piece(self, s: Square, p: Piece) -> None:
        if self._cells[s.rank][s.file] is not None:
            raise ValueError(f"Square {sq_name(s)} occupied")
        self._cells[s.rank][s.file] = p

    def remove_piece(self, s: Square) -> Cell:
        p = self._cells[s.rank][s.file]
        self._cells[s.rank][s.file] = None
        return p

    def iter_pieces(self) -> Iterator[Tuple[Square, Piece]]:
        for s in ALL_SQUARES:
            p = self._cells[s.rank][s.file]
            if p is not None:
                yield s, p

    def pieces_of(self, color: Color) -> List[Tuple[Square, Piece]]:
        return [(s, p) for s, p in self.iter_pieces() if p.color is color]

    def find_king(self, color: Color) -> Optional[Square]:
        for s, p in self.iter_pieces():
            if p.kind is PieceKind.KING and p.color is color:
                return s
        return None

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        ranks = []
        for r in range(RANKS - 1, -1, -1):
            ranks.append("".join(p.symbol if p else "." for p in self._cells[r]))
        return f"Board({'/'.join(ranks)})"
