"""
Win checker for TicTacToe.
Checks if a mark has three in a row, scores finished boards and
classifies the board as won, drawn or still in progress.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import Board, Mark, Position
from .config import GameConfig


class GameStatus(Enum):
    """Where a round stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of classifying a board.
    Derived from the board after every move, never stored on it.
    """
    status: GameStatus
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(GameStatus.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status == GameStatus.WIN:
            return f"Win({self.winner.value})"
        if self.status == GameStatus.DRAW:
            return "Draw"
        return "InProgress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES: List[List[Position]] = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def has_line(self, board: Board, mark: Mark) -> bool:
        """
        Check if a mark owns a complete line.

        Args:
            board: The board to check.
            mark: The mark to look for.

        Returns:
            True if any row, column or diagonal is filled by the mark.
        """
        cells = board.cells
        for (r0, c0), (r1, c1), (r2, c2) in self.WINNING_LINES:
            if cells[r0][c0] == mark and cells[r1][c1] == mark and cells[r2][c2] == mark:
                return True
        return False

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The Mark owning a complete line, or None if no line is complete.
        """
        cells = board.cells
        for (r0, c0), (r1, c1), (r2, c2) in self.WINNING_LINES:
            first = cells[r0][c0]
            if first is not None and first == cells[r1][c1] == cells[r2][c2]:
                return first
        return None

    def is_terminal(self, board: Board) -> bool:
        """True if a line is complete or no empty cell is left."""
        return self.check_winner(board) is not None or board.is_full()

    def score(self, board: Board, for_mark: Mark) -> int:
        """
        Score a board from one mark's point of view.

        Only the win/draw/loss class counts, not how many moves it took.

        Args:
            board: The board to score.
            for_mark: The mark whose perspective the score is from.

        Returns:
            +10 if for_mark has a line, -10 if the other mark has one,
            0 otherwise (including boards that are not finished).
        """
        if self.has_line(board, for_mark):
            return GameConfig.WIN_SCORE
        if self.has_line(board, for_mark.opposite()):
            return -GameConfig.WIN_SCORE
        return GameConfig.DRAW_SCORE

    def classify(self, board: Board) -> Outcome:
        """
        Classify the board as Win, Draw or InProgress.

        Args:
            board: The board to classify.

        Returns:
            Win(mark) if exactly one mark has a line, Draw if the board is
            full, InProgress otherwise.
        """
        winners = [mark for mark in Mark if self.has_line(board, mark)]
        if len(winners) == 1:
            return Outcome.win(winners[0])
        if board.is_full():
            return Outcome.draw()
        return Outcome.in_progress()

    def get_winning_line(self, board: Board) -> Optional[List[Position]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        cells = board.cells
        for line in self.WINNING_LINES:
            marks = {cells[row][col] for row, col in line}
            if len(marks) == 1 and None not in marks:
                return line
        return None
