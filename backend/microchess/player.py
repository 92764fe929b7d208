from __future__ import annotations

from typing import Optional

from .config import EngineConfig, validate_depth
from .core import Color, Move, Position
from .engine import Engine


class AIPlayer:
    """Engine-backed player for one color, plus hints for the other side.

    Presentation delays belong to the caller; moves are returned as soon as
    the search finishes.
    """

    def __init__(self, color: Color, depth: Optional[int] = None, config: Optional[EngineConfig] = None) -> None:
        cfg = config or EngineConfig()
        self.color = self._validate_color(color)
        self.depth = validate_depth(cfg.depth if depth is None else depth)
        self.hint_depth = cfg.hint_depth
        self.engine = Engine()

    @staticmethod
    def _validate_color(color: object) -> Color:
        if not isinstance(color, Color):
            raise ValueError("Invalid color")
        return color

    def set_color(self, color: Color) -> None:
        self.color = self._validate_color(color)

    def set_depth(self, depth: int) -> None:
        self.depth = validate_depth(depth)

    def get_move(self, position: Position) -> Optional[Move]:
        if position.side_to_move is not self.color:
            return None
        return self.engine.best_move(position, self.depth)

    def get_hint(self, position: Position) -> Optional[Move]:
        # searched on a copy so a UI can keep reading the live position
        return self.engine.best_move(position.copy(), self.hint_depth)
