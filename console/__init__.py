"""
Console module for TicTacToe.
Handles prompts, board rendering and the scoreboard.
"""

from .config import ConsoleConfig
from .render import PlayerProfile, render_board, render_header, render_result
from .scoreboard import DifficultyStats, SessionStats, format_scoreboard
