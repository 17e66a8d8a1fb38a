"""Battle_Ataxx_AI package exports."""

from .Move import Move
from .Board import Board, BoardChange, PieceColor, EMPTY, RED, BLUE, BLOCKED, JUMP_LIMIT
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer
from .Ataxxgame import Ataxxgame

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Move",
    "Board",
    "BoardChange",
    "PieceColor",
    "EMPTY",
    "RED",
    "BLUE",
    "BLOCKED",
    "JUMP_LIMIT",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "Ataxxgame",
    "ai",
    "engine",
    "utils",
]
