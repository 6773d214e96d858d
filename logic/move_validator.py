"""
Move validator for TicTacToe.
Turns what a player typed into a board position before it reaches the game.
"""

from typing import List, Optional
from dataclasses import dataclass

from .board import Position, label_to_position, position_to_label
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    position: Optional[Position] = None


class MoveValidator:
    """
    Validates TicTacToe moves typed by a player.

    Rules:
    1. Input must be a whole number
    2. Number must be a cell label 1-9
    3. Cell must still be empty
    """

    def validate_label(self, raw: str, legal_moves: List[Position]) -> ValidationResult:
        """
        Validate a move.

        Args:
            raw: Text entered by the player (e.g. "5").
            legal_moves: Empty cells on the board.

        Returns:
            ValidationResult with is_valid, error_message and the position.
        """
        text = raw.strip()

        # Check if it's a number at all, then a cell label
        try:
            label = int(text)
        except ValueError:
            label = None
        if label is None or not 1 <= label <= GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Enter a number between 1 and {GameConfig.CELL_COUNT}."
            )

        # Check if cell is empty
        position = label_to_position(label)
        if position not in legal_moves:
            return ValidationResult(
                is_valid=False,
                error_message="Cell already taken. Try again.",
                position=position
            )

        # All checks passed!
        return ValidationResult(is_valid=True, position=position)

    def get_valid_labels(self, legal_moves: List[Position]) -> List[int]:
        """
        Get the labels a player may currently enter.

        Args:
            legal_moves: Empty cells on the board.

        Returns:
            Sorted list of 1-9 labels.
        """
        return sorted(position_to_label(position) for position in legal_moves)
