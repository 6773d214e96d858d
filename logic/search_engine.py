"""
Search engine for the TicTacToe computer player.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board, Mark, Position
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Best move found by a search and its value."""
    move: Optional[Position]    # None only when the board is full
    score: int                  # From the searching mark's point of view
    nodes: int                  # Positions evaluated


class SearchEngine:
    """
    Exhaustive Minimax over the whole game tree.

    Both sides are assumed to play optimally. There is no pruning and no
    caching: the tree is small enough to search completely on every move.
    The board is changed while searching and restored before returning.
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        """
        Initialize the search engine.

        Args:
            win_checker: Scores terminal boards (default: a new WinChecker).
        """
        self.win_checker = win_checker or WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.nodes_evaluated = 0

    def best_move(self, board: Board, maximizing_mark: Mark) -> Optional[Position]:
        """
        Get the best move for a mark.

        Args:
            board: Current board.
            maximizing_mark: The mark to move.

        Returns:
            (row, col) of the best move, or None if no moves are available.
        """
        return self.choose(board, maximizing_mark).move

    def choose(self, board: Board, maximizing_mark: Mark) -> SearchResult:
        """
        Search every legal move and keep the one with the highest value.

        Ties go to the move found first, i.e. the lowest row and then the
        lowest column.

        Args:
            board: Current board.
            maximizing_mark: The mark to move.

        Returns:
            SearchResult with the move, its value and the node count.
        """
        self.nodes_evaluated = 0

        best_score = None
        best_move = None
        opponent = maximizing_mark.opposite()

        for move in board.legal_moves():
            board.place(move, maximizing_mark)
            try:
                score = self.search(board, opponent, False, maximizing_mark)
            finally:
                board.undo(move)

            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            best_score = self.win_checker.score(board, maximizing_mark)

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %d)",
            self.nodes_evaluated, best_move, best_score
        )
        return SearchResult(best_move, best_score, self.nodes_evaluated)

    def search(
        self,
        board: Board,
        turn_mark: Mark,
        maximizing: bool,
        root_mark: Mark
    ) -> int:
        """
        Minimax value of a position.

        Args:
            board: Position to evaluate.
            turn_mark: The mark to move in this position.
            maximizing: True if turn_mark is the root mark's side.
            root_mark: The mark the score is measured for.

        Returns:
            +10 / 0 / -10 for a root-mark win, draw or loss under optimal play.
        """
        self.nodes_evaluated += 1

        # Check terminal states
        if self.win_checker.is_terminal(board):
            return self.win_checker.score(board, root_mark)

        next_mark = turn_mark.opposite()
        scores = []
        for move in board.legal_moves():
            board.place(move, turn_mark)
            try:
                scores.append(self.search(board, next_mark, not maximizing, root_mark))
            finally:
                board.undo(move)

        return max(scores) if maximizing else min(scores)


# Quick test
if __name__ == "__main__":
    print("Testing SearchEngine...")

    engine = SearchEngine()

    # Test 1: AI should block a winning move
    board = Board.from_rows([
        [Mark.A, Mark.A, None],
        [None, Mark.B, None],
        [None, None, None],
    ])
    result = engine.choose(board, Mark.B)
    print(f"B must block (0, 2): got {result.move} (score: {result.score}, nodes: {result.nodes})")
    assert result.move == (0, 2)

    # Test 2: empty board is a draw
    result = engine.choose(Board(), Mark.A)
    print(f"Empty board: {result.move} (score: {result.score}, nodes: {result.nodes})")
    assert result.score == 0

    print("\nSearchEngine test done!")
