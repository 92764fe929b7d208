from __future__ import annotations

import operator
from enum import Enum
from typing import NamedTuple

RANKS = 5
FILES = 4
FILE_NAMES = "abcd"


class Color(Enum):
    WHITE = 1
    BLACK = -1

    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Rank step a pawn of this color advances by."""
        return self.value


class PieceKind(Enum):
    KING = "K"
    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"
    PAWN = "P"


class InvalidSquareError(ValueError):
    """Raised for coordinates that are not integers or fall off the board."""


class Square(NamedTuple):
    rank: int
    file: int


def in_bounds(rank: int, file: int) -> bool:
    return 0 <= rank < RANKS and 0 <= file < FILES


def check_square(rank: object, file: object) -> Square:
    """Validate raw coordinates coming from outside the core.

    Floats (including NaN), strings and other non-integers are rejected rather
    than truncated, and out-of-range values are never clamped.
    """
    try:
        r = operator.index(rank)  # type: ignore[arg-type]
        f = operator.index(file)  # type: ignore[arg-type]
    except TypeError:
        raise InvalidSquareError(f"Bad square coordinates: ({rank!r}, {file!r})") from None
    if not in_bounds(r, f):
        raise InvalidSquareError(f"Square off the board: ({r}, {f})")
    return Square(r, f)


def sq_name(s: Square) -> str:
    return f"{FILE_NAMES[s.file]}{s.rank + 1}"


def parse_square(name: str) -> Square:
    a = name.strip().lower()
    if len(a) != 2 or a[0] not in FILE_NAMES or not a[1].isdigit():
        raise InvalidSquareError(f"Bad square: {name!r}")
    return check_square(int(a[1]) - 1, FILE_NAMES.index(a[0]))


ALL_SQUARES = tuple(Square(r, f) for r in range(RANKS) for f in range(FILES))
