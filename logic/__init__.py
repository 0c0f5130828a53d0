"""
Logic module for the TicTacToe engine.
Handles game state, rules, and win detection.
"""

__version__ = "1.0.0"

from .game_state import GameState, GameStatus, Move, PlayedMove, Player
from .config import GameConfig
from .move_validator import MoveValidator, RejectReason, ValidationResult
from .win_checker import WinChecker
from .game_engine import GameEngine, PlayResult
