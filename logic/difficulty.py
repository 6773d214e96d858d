"""
Difficulty levels for the TicTacToe computer player.
Decides how often the computer plays the searched move
instead of a random one.
"""

import logging
import random
from enum import Enum
from typing import Optional

from .board import Board, Mark, Position
from .config import GameConfig
from .search_engine import SearchEngine

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Coin flip between random and best
    HARD = 3      # Full minimax

    @classmethod
    def from_label(cls, label: str) -> "Difficulty":
        """
        Parse a difficulty from user input.

        Accepts the name ("easy", "HARD") or the number ("1"-"3").
        """
        text = label.strip().upper()
        if text.isdigit():
            return cls(int(text))
        return cls[text]

    @classmethod
    def default(cls) -> "Difficulty":
        return cls[GameConfig.DEFAULT_DIFFICULTY]

    @property
    def label(self) -> str:
        return self.name.lower()


class DifficultyPolicy:
    """
    Picks the computer's move for a difficulty level.

    EASY samples uniformly from the empty cells, HARD asks the search
    engine, and MEDIUM flips a coin between the two on every move.
    """

    def __init__(
        self,
        engine: Optional[SearchEngine] = None,
        rng: Optional[random.Random] = None,
        optimal_probability: float = GameConfig.MEDIUM_OPTIMAL_PROBABILITY
    ):
        """
        Initialize the policy.

        Args:
            engine: Search engine used for optimal moves.
            rng: Source of randomness; pass a seeded random.Random for
                reproducible games.
            optimal_probability: Chance that MEDIUM plays the optimal move.
        """
        self.engine = engine or SearchEngine()
        self.rng = rng or random.Random()
        self.optimal_probability = optimal_probability

    def select_move(self, board: Board, difficulty: Difficulty, mark: Mark) -> Position:
        """
        Get the computer's move.

        Args:
            board: Current board (must have at least one empty cell).
            difficulty: Difficulty of the computer player.
            mark: The mark the computer plays.

        Returns:
            (row, col) of an empty cell.
        """
        if board.is_full():
            raise ValueError("No moves available on a full board")

        if difficulty == Difficulty.EASY:
            return self._random_move(board)
        elif difficulty == Difficulty.MEDIUM:
            return self._medium_move(board, mark)
        elif difficulty == Difficulty.HARD:
            return self._best_move(board, mark)
        raise ValueError(f"Unknown difficulty: {difficulty!r}")

    def _random_move(self, board: Board) -> Position:
        """Get a random valid move (easy difficulty)."""
        return self.rng.choice(board.legal_moves())

    def _medium_move(self, board: Board, mark: Mark) -> Position:
        """Get a somewhat strategic move (medium difficulty)."""
        if self.rng.random() < self.optimal_probability:
            logger.debug("Medium plays the best move")
            return self._best_move(board, mark)
        logger.debug("Medium plays a random move")
        return self._random_move(board)

    def _best_move(self, board: Board, mark: Mark) -> Position:
        return self.engine.best_move(board, mark)
