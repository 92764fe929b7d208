from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class GameStatus(Enum):
    PLAYING = "playing"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    RESIGNED = "resigned"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING

    def can_transition_to(self, target: "GameStatus") -> bool:
        return target in _TRANSITIONS[self]


# Leaving a terminal state takes an explicit reset (or an undo that changes the
# position the status is derived from); resignation is never recomputed away.
_TRANSITIONS: Dict[GameStatus, FrozenSet[GameStatus]] = {
    GameStatus.PLAYING: frozenset({GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.RESIGNED}),
    GameStatus.CHECKMATE: frozenset(),
    GameStatus.STALEMATE: frozenset(),
    GameStatus.RESIGNED: frozenset(),
}
