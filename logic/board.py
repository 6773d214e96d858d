"""
Board for TicTacToe.
Holds the 3x3 grid and the one rule every move has to pass: a cell can
only be taken while it is empty.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import GameConfig


# (row, col) with row and col in 0..2
Position = Tuple[int, int]


class Mark(Enum):
    """The two marks that take turns in a round."""
    A = "A"
    B = "B"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.B if self == Mark.A else Mark.A


class CellOccupied(ValueError):
    """Raised when a mark is placed on a cell that is not empty."""

    def __init__(self, position: Position, occupant: Mark):
        row, col = position
        super().__init__(f"Cell ({row}, {col}) is already occupied by {occupant.value}")
        self.position = position
        self.occupant = occupant


def position_to_label(position: Position) -> int:
    """Map (row, col) to the 1-9 label shown to players."""
    row, col = position
    return row * GameConfig.BOARD_SIZE + col + 1


def label_to_position(label: int) -> Position:
    """Map a 1-9 label back to (row, col)."""
    if not 1 <= label <= GameConfig.CELL_COUNT:
        raise IndexError(f"Label {label} is out of range 1-{GameConfig.CELL_COUNT}")
    return divmod(label - 1, GameConfig.BOARD_SIZE)


class Board:
    """
    The 3x3 TicTacToe grid.

    Each cell is None (empty) or the Mark that occupies it. The board is
    mutated in place: place() is the only way to put a mark down and
    undo() the only way to take one back.
    """

    def __init__(self):
        self.cells: List[List[Optional[Mark]]] = [
            [None for _ in range(GameConfig.BOARD_SIZE)]
            for _ in range(GameConfig.BOARD_SIZE)
        ]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Optional[Mark]]]) -> "Board":
        """
        Build a board from three rows of cells.

        Args:
            rows: Three sequences of three cells (Mark or None).

        Returns:
            A new Board with those cells.
        """
        board = cls()
        rows = [list(row) for row in rows]
        if len(rows) != GameConfig.BOARD_SIZE or any(
            len(row) != GameConfig.BOARD_SIZE for row in rows
        ):
            raise ValueError("Board needs 3 rows of 3 cells")
        for row in rows:
            for cell in row:
                if cell is not None and not isinstance(cell, Mark):
                    raise ValueError(f"Cell must be a Mark or None, got {cell!r}")
        board.cells = rows
        return board

    def reset(self):
        """Empty every cell."""
        for row in self.cells:
            for col in range(GameConfig.BOARD_SIZE):
                row[col] = None

    def get(self, position: Position) -> Optional[Mark]:
        """Get the mark at a position, or None if it is empty."""
        row, col = self._check(position)
        return self.cells[row][col]

    def legal_moves(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [
            (row, col)
            for row in range(GameConfig.BOARD_SIZE)
            for col in range(GameConfig.BOARD_SIZE)
            if self.cells[row][col] is None
        ]

    def is_full(self) -> bool:
        """True if no empty cell is left."""
        return all(cell is not None for row in self.cells for cell in row)

    def place(self, position: Position, mark: Mark):
        """
        Put a mark on an empty cell.

        Args:
            position: (row, col) of the cell.
            mark: The mark to place.

        Raises:
            CellOccupied: The cell already holds a mark. The board is
                left unchanged.
        """
        row, col = self._check(position)
        occupant = self.cells[row][col]
        if occupant is not None:
            raise CellOccupied((row, col), occupant)
        self.cells[row][col] = mark

    def undo(self, position: Position):
        """Clear a single cell (used to backtrack)."""
        row, col = self._check(position)
        self.cells[row][col] = None

    def count(self, mark: Mark) -> int:
        """Number of cells holding this mark."""
        return sum(1 for row in self.cells for cell in row if cell == mark)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board.from_rows([list(row) for row in self.cells])

    def snapshot(self) -> Tuple[Tuple[Optional[Mark], ...], ...]:
        """Immutable copy of the grid, for rendering and comparisons."""
        return tuple(tuple(row) for row in self.cells)

    def _check(self, position: Position) -> Position:
        row, col = position
        if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
            raise IndexError(f"Invalid position ({row}, {col}). Must be 0-2.")
        return row, col

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        rows = [
            "".join(cell.value if cell else "." for cell in row)
            for row in self.cells
        ]
        return f"Board({'/'.join(rows)})"
