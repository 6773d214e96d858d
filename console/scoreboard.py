"""
Scoreboard for single player rounds.
Keeps per-difficulty totals for as long as the program runs.
"""

from dataclasses import dataclass, field
from typing import Dict

from logic.board import Mark
from logic.difficulty import Difficulty
from logic.win_checker import GameStatus, Outcome


@dataclass
class DifficultyStats:
    """Totals for one difficulty, from the human player's point of view."""
    games: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def ratio(self) -> float:
        """Wins per loss; just the win count while there are no losses."""
        if self.losses == 0:
            return float(self.wins)
        return self.wins / self.losses


@dataclass
class SessionStats:
    """Scoreboard across all difficulties."""
    by_difficulty: Dict[Difficulty, DifficultyStats] = field(
        default_factory=lambda: {difficulty: DifficultyStats() for difficulty in Difficulty}
    )

    def record(self, difficulty: Difficulty, outcome: Outcome, human_mark: Mark):
        """
        Count a finished round.

        Args:
            difficulty: Difficulty the AI played at.
            outcome: Final outcome (Win or Draw).
            human_mark: Mark the human played.
        """
        if not outcome.is_terminal:
            raise ValueError("Only finished rounds can be recorded")

        stats = self.by_difficulty[difficulty]
        stats.games += 1
        if outcome.status == GameStatus.DRAW:
            stats.draws += 1
        elif outcome.winner == human_mark:
            stats.wins += 1
        else:
            stats.losses += 1

    def __getitem__(self, difficulty: Difficulty) -> DifficultyStats:
        return self.by_difficulty[difficulty]


def format_scoreboard(session: SessionStats) -> str:
    """Table of totals per difficulty."""
    lines = [
        "SCOREBOARD (single-player totals)",
        f"{'Difficulty':<10}{'Games':>8}{'Wins':>8}{'Losses':>10}{'Draws':>8}{'W/L Ratio':>12}",
        "-" * 56,
    ]
    for difficulty in Difficulty:
        stats = session[difficulty]
        lines.append(
            f"{difficulty.label:<10}{stats.games:>8}{stats.wins:>8}"
            f"{stats.losses:>10}{stats.draws:>8}{stats.ratio:>12.2f}"
        )
    return "\n".join(lines)
