"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (board, win checking, turn order, AI)
- Console (prompts, rendering, scoreboard)

Run this script to play TicTacToe against the computer or a friend!
"""

import argparse
import logging
import random
import sys
import time
from enum import Enum
from typing import Dict, List, Optional

from colorama import Cursor, just_fix_windows_console
from colorama.ansi import clear_screen

# Logic imports
from logic.board import Mark
from logic.difficulty import Difficulty, DifficultyPolicy
from logic.game_state import MoveRequest, TurnStateMachine
from logic.win_checker import Outcome

# Console imports
from console.config import ConsoleConfig
from console.prompts import (
    ask_yes_no,
    choose_color,
    move_request,
    read_int_in_range,
    read_non_empty,
)
from console.render import PlayerProfile, render_board, render_header, render_result
from console.scoreboard import SessionStats, format_scoreboard

logger = logging.getLogger("main")


class Mode(Enum):
    """Who plays."""
    SINGLE = "single"   # Human vs AI
    MULTI = "multi"     # Human vs human


class TicTacToeConsole:
    """
    Main controller for a TicTacToe session.

    Session flow:
    1. Choose mode, names, colors and (single player) difficulty
    2. Play a round until someone wins or it's a draw
    3. Update and show the scoreboard (single player)
    4. Ask to play again, optionally changing mode or difficulty
    """

    def __init__(
        self,
        mode: Optional[Mode] = None,
        difficulty: Optional[Difficulty] = None,
        ai_first: bool = False,
        seed: Optional[int] = None,
        think_delay: float = ConsoleConfig.AI_THINK_DELAY,
        clear: bool = ConsoleConfig.CLEAR_SCREEN
    ):
        """
        Initialize the session.

        Args:
            mode: Preselected mode; asked for if None.
            difficulty: Preselected difficulty; asked for if None.
            ai_first: Let the AI play X and move first.
            seed: Seed for the AI's randomness (and its color pick).
            think_delay: Pause before each AI move, in seconds.
            clear: Clear the screen before drawing the board.
        """
        self.mode = mode
        self.difficulty = difficulty
        self.ai_first = ai_first
        self.think_delay = think_delay
        self.clear = clear

        self.rng = random.Random(seed)
        self.policy = DifficultyPolicy(rng=self.rng)
        self.stats = SessionStats()

        self.profiles: Dict[Mark, PlayerProfile] = {}
        self.requests: Dict[Mark, MoveRequest] = {}

    @property
    def human_mark(self) -> Mark:
        return Mark.B if self.ai_first else Mark.A

    @property
    def ai_mark(self) -> Mark:
        return self.human_mark.opposite()

    def setup(self, ask_all: bool = False):
        """
        Ask for mode, players and difficulty.

        Args:
            ask_all: Ask even for values given on the command line.
        """
        print(f"Welcome to {ConsoleConfig.TITLE}\n")

        if ask_all or self.mode is None:
            print("Select mode: [1] Single Player   [2] Multiplayer")
            choice = read_int_in_range("> ", 1, 2)
            self.mode = Mode.MULTI if choice == 2 else Mode.SINGLE

        if self.mode == Mode.MULTI:
            self._setup_multiplayer()
        else:
            self._setup_single_player(ask_all)

        self.requests = {
            mark: move_request(profile)
            for mark, profile in self.profiles.items()
        }

    def _setup_multiplayer(self):
        name_a = read_non_empty("Enter Player 1 name: ")
        name_b = read_non_empty("Enter Player 2 name: ")

        print("\nAvailable colors: " + ", ".join(ConsoleConfig.ALLOWED_COLORS))
        color_a = choose_color(f"{name_a}, choose your color: ")
        color_b = choose_color(
            f"{name_b}, choose your color (not {color_a}): ",
            exclude=[color_a]
        )

        self.profiles = {
            Mark.A: PlayerProfile(name_a, Mark.A, ConsoleConfig.SYMBOL_A, color_a),
            Mark.B: PlayerProfile(name_b, Mark.B, ConsoleConfig.SYMBOL_B, color_b),
        }

    def _setup_single_player(self, ask_all: bool):
        print("\nAvailable colors: " + ", ".join(ConsoleConfig.ALLOWED_COLORS))
        human_color = choose_color("Choose your color: ")

        # AI gets a different random color
        ai_color = self.rng.choice(
            [name for name in ConsoleConfig.ALLOWED_COLORS if name != human_color]
        )

        if ask_all or self.difficulty is None:
            default = Difficulty.default()
            level = read_int_in_range(
                f"\nSelect difficulty (1=easy, 2=medium, 3=hard) [{default.value}]: ",
                1, 3, default=default.value
            )
            self.difficulty = Difficulty(level)

        symbols = {Mark.A: ConsoleConfig.SYMBOL_A, Mark.B: ConsoleConfig.SYMBOL_B}
        human, ai = self.human_mark, self.ai_mark
        self.profiles = {
            human: PlayerProfile(ConsoleConfig.HUMAN_NAME, human, symbols[human], human_color),
            ai: PlayerProfile(ConsoleConfig.AI_NAME, ai, symbols[ai], ai_color),
        }

    def play_round(self) -> Outcome:
        """Play one round from an empty board to a win or draw."""
        computer_players = {}
        if self.mode == Mode.SINGLE:
            computer_players[self.ai_mark] = self.difficulty

        machine = TurnStateMachine(
            first_mark=Mark.A,
            computer_players=computer_players,
            policy=self.policy
        )

        while not machine.is_finished:
            self._draw(machine)
            mark = machine.current_mark
            if machine.is_computer(mark):
                print(f"{self.profiles[mark].name} is thinking...")
                if self.think_delay > 0:
                    time.sleep(self.think_delay)
                machine.step()
            else:
                machine.step(self.requests[mark])

        self._draw(machine)
        outcome = machine.outcome
        print(render_result(outcome, self.profiles))
        return outcome

    def run(self) -> int:
        """Run rounds until the player is done."""
        self.setup()

        while True:
            outcome = self.play_round()

            if self.mode == Mode.SINGLE:
                self.stats.record(self.difficulty, outcome, self.human_mark)
                print("\n" + format_scoreboard(self.stats) + "\n")

            if not ask_yes_no("\nPlay again? (y/n): "):
                break
            if ask_yes_no("Change mode or difficulty? (y/n): "):
                self.setup(ask_all=True)

        print("\nThanks for playing!")
        return 0

    def _draw(self, machine: TurnStateMachine):
        if self.clear:
            print(clear_screen() + Cursor.POS(1, 1), end="")
        difficulty = self.difficulty if self.mode == Mode.SINGLE else None
        print(render_header(self.profiles, difficulty))
        print(render_board(machine.board, self.profiles))
        print()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="TicTacToe in the console")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        help="skip the mode prompt (single or multi)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.label for difficulty in Difficulty],
        help="skip the difficulty prompt (single player)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play X and move first"
    )
    parser.add_argument("--seed", type=int, help="seed for the AI's random moves")
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Don't pause before AI moves"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between moves"
    )
    parser.add_argument("--verbose", action="store_true", help="log search details")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=ConsoleConfig.LOG_FORMAT,
    )
    just_fix_windows_console()

    game = TicTacToeConsole(
        mode=Mode(args.mode) if args.mode else None,
        difficulty=Difficulty.from_label(args.difficulty) if args.difficulty else None,
        ai_first=args.ai_first,
        seed=args.seed,
        think_delay=0.0 if args.no_delay else ConsoleConfig.AI_THINK_DELAY,
        clear=not args.no_clear,
    )
    logger.debug("Starting session: %s", args)

    try:
        return game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        return 0
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    sys.exit(main())
