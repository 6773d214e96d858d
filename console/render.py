"""
Text rendering for TicTacToe.
Draws the board, the header and the result of a round.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from colorama import Style

from logic.board import Board, Mark, position_to_label
from logic.config import GameConfig
from logic.difficulty import Difficulty
from logic.win_checker import GameStatus, Outcome, WinChecker

from .config import ConsoleConfig


@dataclass
class PlayerProfile:
    """How a mark is shown to the players."""
    name: str
    mark: Mark
    symbol: str
    color: str = "white"    # Key of ConsoleConfig.ALLOWED_COLORS

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.symbol})"


def colored(text: str, color: str) -> str:
    """Wrap text in the colorama code for a color name."""
    code = ConsoleConfig.ALLOWED_COLORS.get(color, "")
    return f"{code}{text}{Style.RESET_ALL}"


def render_cell(
    board: Board,
    row: int,
    col: int,
    profiles: Dict[Mark, PlayerProfile],
    highlight: bool = False
) -> str:
    mark = board.cells[row][col]
    if mark is None:
        # Empty cells show the label to type
        return str(position_to_label((row, col)))
    profile = profiles[mark]
    text = colored(profile.symbol, profile.color)
    return Style.BRIGHT + text if highlight else text


def render_board(board: Board, profiles: Dict[Mark, PlayerProfile]) -> str:
    """
    Draw the 3x3 grid. A completed line is drawn bright.

    Args:
        board: Board to draw.
        profiles: Symbol and color per mark.

    Returns:
        Multi-line string.
    """
    winning_line = WinChecker().get_winning_line(board) or []

    lines = []
    for row in range(GameConfig.BOARD_SIZE):
        cells = [
            render_cell(board, row, col, profiles, highlight=(row, col) in winning_line)
            for col in range(GameConfig.BOARD_SIZE)
        ]
        lines.append("     " + " | ".join(cells))
        if row < GameConfig.BOARD_SIZE - 1:
            lines.append("    -----------")
    return "\n".join(lines)


def render_header(
    profiles: Dict[Mark, PlayerProfile],
    difficulty: Optional[Difficulty] = None
) -> str:
    """
    Draw the title and who plays what.

    Args:
        profiles: Player profiles for Mark.A and Mark.B.
        difficulty: Shown in single player mode; None in multiplayer.
    """
    first, second = profiles[Mark.A], profiles[Mark.B]
    lines = [f"\n     {ConsoleConfig.TITLE}"]
    if difficulty is not None:
        lines.append(
            f"  {first.name}: {colored(first.symbol, first.color)}"
            f"  |  {second.name}: {colored(second.symbol, second.color)}"
        )
        lines.append(f"  Difficulty: {difficulty.label}")
    else:
        lines.append(
            f"  {first.name} ({colored(first.symbol, first.color)}) vs "
            f"{second.name} ({colored(second.symbol, second.color)})"
        )
    return "\n".join(lines) + "\n"


def render_result(outcome: Outcome, profiles: Dict[Mark, PlayerProfile]) -> str:
    """One-line message for a finished round."""
    if outcome.status == GameStatus.WIN:
        return f"{profiles[outcome.winner].display_name} WINS!"
    if outcome.status == GameStatus.DRAW:
        return "It's a DRAW!"
    return "Game in progress"
