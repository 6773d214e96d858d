"""
Blocking input helpers for the console front-end.
Every helper keeps asking until the answer is usable.
"""

from typing import Iterable, Optional

from logic.board import Position
from logic.game_state import MoveRequest
from logic.move_validator import MoveValidator

from .config import ConsoleConfig
from .render import PlayerProfile, colored


def ask_yes_no(prompt: str) -> bool:
    """Ask a y/n question; end of input counts as no."""
    while True:
        try:
            raw = input(prompt).strip().lower()
        except EOFError:
            print()
            return False
        if raw in {"y", "yes"}:
            return True
        if raw in {"n", "no"}:
            return False
        print("Please enter 'y' or 'n'.")


def read_int_in_range(prompt: str, low: int, high: int, default: Optional[int] = None) -> int:
    """Ask for a whole number in [low, high]; an empty answer gives default if set."""
    while True:
        raw = input(prompt).strip()
        if not raw and default is not None:
            return default
        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        print(f"Enter a number between {low} and {high}.")


def read_non_empty(prompt: str) -> str:
    while True:
        raw = input(prompt).strip()
        if raw:
            return raw
        print("Please enter something.")


def choose_color(prompt: str, exclude: Iterable[str] = ()) -> str:
    """
    Ask for one of the allowed colors.

    Args:
        prompt: Question to show.
        exclude: Colors already taken.

    Returns:
        Lower-case color name.
    """
    taken = set(exclude)
    choices = [name for name in ConsoleConfig.ALLOWED_COLORS if name not in taken]
    while True:
        raw = input(prompt).strip().lower()
        if raw in choices:
            return raw
        print("Invalid color. Try one of: " + ", ".join(choices))


def move_request(profile: PlayerProfile, validator: Optional[MoveValidator] = None) -> MoveRequest:
    """
    Build the move source for a human player.

    Args:
        profile: The player being asked.
        validator: Checks the typed label (default: new MoveValidator).

    Returns:
        Callable taking the empty cells and returning the chosen position.
    """
    validator = validator or MoveValidator()

    def request(legal_moves) -> Position:
        prompt = f"{profile.name} ({colored(profile.symbol, profile.color)}) enter move (1-9): "
        while True:
            result = validator.validate_label(input(prompt), legal_moves)
            if result.is_valid:
                return result.position
            print(result.error_message)
            if result.position is not None:
                labels = validator.get_valid_labels(legal_moves)
                print("Open cells: " + ", ".join(str(label) for label in labels))

    return request
