"""
Logic module for TicTacToe.
Handles the board, rules, turn order, and AI opponent.
"""

from .board import Board, CellOccupied, Mark, label_to_position, position_to_label
from .config import GameConfig
from .win_checker import GameStatus, Outcome, WinChecker
from .search_engine import SearchEngine, SearchResult
from .difficulty import Difficulty, DifficultyPolicy
from .game_state import AwaitingMove, Finished, Move, TurnStateMachine
from .move_validator import MoveValidator, ValidationResult

__version__ = "1.0.0"
