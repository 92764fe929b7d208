from .types import (
    Color, PieceKind, Square, InvalidSquareError,
    RANKS, FILES, check_square, in_bounds, sq_name, parse_square,
)
from .piece import Piece
from .board import Board
from .moves import Move, MoveRecord, PROMOTION_KINDS, promotion_rank
from .legality import is_path_clear, is_pseudo_legal_move, possible_moves
from .rules import KingSafetyRule, PromotionRule, default_rules
from .status import GameStatus
from .game import Position
from .setup import INITIAL_POSITION, standard_board, ascii_board

__all__ = [
    "Color","PieceKind","Square","InvalidSquareError",
    "RANKS","FILES","check_square","in_bounds","sq_name","parse_square",
    "Piece","Board",
    "Move","MoveRecord","PROMOTION_KINDS",
    "is_path_clear","is_pseudo_legal_move","possible_moves",
    "KingSafetyRule","PromotionRule","default_rules","GameStatus",
    "Position","promotion_rank",
    "INITIAL_POSITION","standard_board","ascii_board",
]
