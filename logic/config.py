"""
Game configuration for TicTacToe.
Rule constants and AI tuning values shared by the logic modules.
"""


class GameConfig:
    """
    Configuration class for the game rules and the computer opponent.
    The board size and win length are fixed; only the AI odds are tunable.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, three in a row wins
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== SCORING ====================
    # Flat scores: a win is worth the same no matter how deep it is found
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== TURN ORDER ====================
    # Name of the Mark that moves first in a new round
    FIRST_MARK = "A"

    # ==================== AI SETTINGS ====================
    # Name of the Difficulty used when none is chosen
    DEFAULT_DIFFICULTY = "HARD"

    # Chance that MEDIUM plays the optimal move instead of a random one
    # (re-rolled on every computer move)
    MEDIUM_OPTIMAL_PROBABILITY = 0.5
