"""
Console configuration for TicTacToe.
All the settings for names, symbols, colors and pacing of the text UI.
"""

from colorama import Fore


class ConsoleConfig:
    """
    Configuration class for the console front-end.
    Change these values to taste!
    """

    # ==================== PLAYER SETTINGS ====================
    # First player is always X, second is always O
    SYMBOL_A = "X"
    SYMBOL_B = "O"

    # Names used in single player mode
    HUMAN_NAME = "You"
    AI_NAME = "AI"

    # ==================== COLOR SETTINGS ====================
    # Colors a player may pick (name -> colorama code)
    ALLOWED_COLORS = {
        "red": Fore.RED,
        "green": Fore.GREEN,
        "yellow": Fore.YELLOW,
        "blue": Fore.BLUE,
        "magenta": Fore.MAGENTA,
        "cyan": Fore.CYAN,
        "white": Fore.WHITE,
    }

    DEFAULT_COLOR_A = "cyan"
    DEFAULT_COLOR_B = "yellow"

    # ==================== AI SETTINGS ====================
    # Pause before the AI moves, so the player can follow (seconds)
    AI_THINK_DELAY = 0.7

    # ==================== DISPLAY SETTINGS ====================
    TITLE = "TIC TAC TOE"
    CLEAR_SCREEN = True

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
