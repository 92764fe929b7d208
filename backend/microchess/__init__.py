"""Microchess (backend).

- core: 5x4 board, move legality, position/game state
- evaluate/engine: positional evaluation and alpha-beta search
- player: engine-backed player and hints
- api: JSON-oriented snapshots for UIs
- formats/tools: FEN/notation/perft helpers
"""

from . import core, api
from .engine import Engine, get_best_move, minimax, order_moves, MATE_SCORE
from .evaluate import evaluate_position, PIECE_VALUES
from .player import AIPlayer
from .config import EngineConfig
from .fen import parse_fen, position_to_fen, STARTPOS_FEN
from .perft import PerftStats, perft, perft_divide, perft_stats
from .notation import move_to_uci, parse_uci

__all__ = [
    "core","api",
    "Engine","get_best_move","minimax","order_moves","MATE_SCORE",
    "evaluate_position","PIECE_VALUES",
    "AIPlayer","EngineConfig",
    "parse_fen","position_to_fen","STARTPOS_FEN",
    "perft","perft_divide","perft_stats","PerftStats",
    "move_to_uci","parse_uci",
]
