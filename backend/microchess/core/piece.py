from __future__ import annotations

from dataclasses import dataclass

from .types import Color, PieceKind


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @property
    def symbol(self) -> str:
        letter = self.kind.value
        return letter if self.color is Color.WHITE else letter.lower()

    @classmethod
    def from_symbol(cls, ch: str) -> "Piece":
        try:
            kind = PieceKind(ch.upper())
        except ValueError:
            raise ValueError(f"Unknown piece char: {ch!r}") from None
        return cls(kind, Color.WHITE if ch.isupper() else Color.BLACK)

    def __repr__(self) -> str:
        return f"Piece({self.kind.name}, {self.color.name})"
